#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot system framework classifier $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""Classify imported modules as Apple platform frameworks or custom code."""

############################################################ GLOBALS

SYSTEM = 'system'
CUSTOM = 'custom'

# Platform frameworks (and a few submodules commonly imported directly).
# Membership is exact and case-sensitive.
SYSTEM_FRAMEWORKS = frozenset([
    'Foundation', 'UIKit', 'SwiftUI', 'Combine', 'CoreData', 'CoreGraphics',
    'CoreLocation', 'MapKit', 'AVFoundation', 'UserNotifications', 'WebKit',
    'SafariServices', 'StoreKit', 'CloudKit', 'HealthKit', 'HomeKit',
    'PassKit', 'SpriteKit', 'SceneKit', 'ARKit', 'RealityKit', 'QuartzCore',
    'Metal', 'MetalKit', 'Vision', 'CoreML', 'CreateML', 'NaturalLanguage',
    'Speech', 'Intents', 'IntentsUI', 'WidgetKit', 'AppKit', 'Cocoa',
    'Darwin', 'Dispatch', 'ObjectiveC', 'os', 'XCTest', 'SwiftData',
    'Observation', 'OSLog', 'Network', 'CryptoKit', 'AuthenticationServices',
    'LocalAuthentication', 'CoreBluetooth', 'CoreMotion', 'EventKit',
    'EventKitUI', 'MessageUI', 'Photos', 'PhotosUI', 'AVKit', 'MediaPlayer',
    'GameKit', 'GameController', 'ReplayKit', 'CoreImage', 'ImageIO',
    'CoreText', 'CoreAnimation', 'GLKit', 'ModelIO', 'CoreHaptics', 'CoreNFC',
    'CoreSpotlight', 'CoreTelephony', 'CarPlay', 'CallKit', 'Contacts',
    'ContactsUI', 'Social', 'Accounts', 'AdSupport', 'iAd', 'JavaScriptCore',
    'PDFKit', 'PencilKit', 'LinkPresentation', 'BackgroundTasks',
    'Accelerate', 'simd', 'CoreVideo', 'CoreMedia', 'CoreAudio',
    'CoreAudioKit', 'CoreMIDI', 'AudioToolbox', 'AVFAudio', 'SoundAnalysis',
    'VisionKit', 'DeviceCheck', 'AppTrackingTransparency',
    'UniformTypeIdentifiers', 'GroupActivities', 'ShazamKit', 'ScreenTime',
    'FamilyControls', 'ManagedSettings', 'SensorKit', 'ProximityReader',
    'ActivityKit', 'WeatherKit', 'Charts', 'QuickLook', 'QuickLookUI',
    'SafariUI', 'ThreadNetwork', 'PackageDescription', 'Testing',
    'OrderedCollections', 'Concurrency', 'WatchConnectivity',
    'MobileCoreServices',
    # Submodules
    'Foundation.NSDate', 'Foundation.NSData', 'Foundation.NSURL',
    'CoreLocation.CLLocation', 'CoreLocation.CLLocationCoordinate2D',
    'UIKit.UIDevice', 'UIKit.UIImage', 'UIKit.UIColor',
])

############################################################ FUNCTIONS

def is_system_framework(module: str) -> bool:
    """Return True if module is a known platform framework."""
    return module in SYSTEM_FRAMEWORKS


def module_kind(module: str) -> str:
    """Return 'system' or 'custom' for module."""
    return SYSTEM if is_system_framework(module) else CUSTOM

################################################################################
# END
################################################################################
