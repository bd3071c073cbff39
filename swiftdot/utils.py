#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot utilities $
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

"""swiftdot utilities"""

############################################################ IMPORTS

import os
import re
import sys

############################################################ GLOBALS

# ANSI colors used for console narration
COLORS = {
    'red': '\033[0;31m',
    'green': '\033[0;32m',
    'yellow': '\033[1;33m',
    'blue': '\033[0;34m',
}
COLOR_RESET = '\033[0m'

# Characters not allowed in dot node identifiers
UNSAFE_ID_CHARS = re.compile(r'[^a-zA-Z0-9_]')

############################################################ FUNCTIONS

def plur(n: int, singular: str, plural: str = None) -> str:
    """Return singular or plural form based on count.

    Args:
        n: The count
        singular: Singular form
        plural: Plural form (default: singular + 's')

    Returns:
        Appropriate grammatical form

    Examples:
        >>> plur(1, 'file')
        'file'
        >>> plur(2, 'file')
        'files'
        >>> plur(1, 'entry')
        'entry'
        >>> plur(2, 'entry')
        'entries'
    """
    if n == 1:
        return singular

    if plural is not None:
        return plural

    # Common special cases
    special_plurals = {
        'match': 'matches',
        'entry': 'entries',
        'dependency': 'dependencies',
        'is': 'are',
        'was': 'were',
    }

    if singular in special_plurals:
        return special_plurals[singular]

    # Default: add 's'
    return f"{singular}s"


def sanitize_name(name: str) -> str:
    """Reduce a module name to a dot-safe node identifier.

    Examples:
        >>> sanitize_name('CoreLocation.CLLocation')
        'CoreLocation_CLLocation'
        >>> sanitize_name('My-Module')
        'My_Module'
    """
    return UNSAFE_ID_CHARS.sub('_', name)


def use_color(stream=None) -> bool:
    """Return True if ANSI colors should be written to stream."""
    if stream is None:
        stream = sys.stderr
    if os.environ.get('NO_COLOR'):
        return False
    return hasattr(stream, 'isatty') and stream.isatty()


def colorize(text: str, color: str = None, stream=None) -> str:
    """Wrap text in ANSI color codes when the stream is a terminal."""
    if color is None or not use_color(stream):
        return text
    return f"{COLORS[color]}{text}{COLOR_RESET}"


def log(message: str = '', color: str = None):
    """Print a narration line to stderr."""
    print(colorize(message, color, sys.stderr), file=sys.stderr)


def format_statistics(stats, top: int = 10) -> list:
    """Format run statistics as report lines.

    Args:
        stats: RunStats object from a completed analysis
        top: Number of most-referenced modules to list

    Returns:
        List of report lines (without trailing newlines)
    """
    lines = []
    lines.append('Dependency Statistics:')
    lines.append('========================')
    lines.append(f"Total Swift files: {stats.files_processed}")
    lines.append(f"Total imports: {stats.total_imports}")
    lines.append(f"Unique modules: {stats.unique_modules}")
    lines.append(f"  - System frameworks: {stats.system_modules}")
    lines.append(f"  - Custom modules: {stats.custom_modules}")
    if stats.excluded_imports:
        lines.append(f"  - Excluded modules: {stats.excluded_imports}")
    if stats.files_excluded:
        lines.append(f"  - Excluded files: {stats.files_excluded}")
    if stats.unreadable_files:
        n = len(stats.unreadable_files)
        lines.append(f"  - Unreadable files: {n}")
    lines.append('')

    ranked = stats.top_modules(top)
    lines.append(f"Top {top} {plur(top, 'dependency')}:")
    for name, count in ranked:
        lines.append(f"  {count}x - {name}")

    return lines

################################################################################
# END
################################################################################
