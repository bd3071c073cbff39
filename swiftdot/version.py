#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot version information $
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

"""Version module"""

############################################################ GLOBALS

VERSION = '1.0.0'
VERSION_VERBOSE = f"{VERSION} - $Branch$ - $Date$"

################################################################################
# END
################################################################################
