#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot pattern rules $
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

"""Pattern rules used by swiftdot.

Two unrelated pattern kinds live here and must not be confused:

ModuleRule
    A true regular expression with exactly one capture group. Applied to a
    file path (relative to the scan root) to derive the module name, e.g.
    '^Targets/([^/]+)/'. Searched, not anchored, so callers anchor with '^'
    themselves when they need to.

ExcludePattern
    A shell wildcard. '*' matches any run of characters (slashes included),
    '?' matches exactly one character, everything else is literal. Matched
    against the whole string, case-sensitively. Used both on relative file
    paths and on imported module names.
"""

############################################################ IMPORTS

import re
from typing import List, Optional

############################################################ CLASSES

class ConfigurationError(ValueError):
    """Raised for invalid run configuration (fatal, nothing is scanned)."""


class ModuleRule:
    """Capturing regular expression mapping a path to a module name."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid module rule {pattern!r}: {e}") from e
        if self.regex.groups != 1:
            raise ConfigurationError(
                f"Module rule {pattern!r} must have exactly one capture"
                f" group (found {self.regex.groups})")

    def match(self, path: str) -> Optional[str]:
        """Return the captured module name, or None if the rule misses."""
        m = self.regex.search(path)
        if m is None:
            return None
        return m.group(1) or None

    def __repr__(self):
        return f"ModuleRule({self.pattern!r})"


class ExcludePattern:
    """Wildcard pattern ('*' and '?' only) for paths and module names."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self.regex = re.compile(glob_to_regex(pattern), re.DOTALL)

    def matches(self, text: str) -> bool:
        """Return True if the whole of text matches the wildcard."""
        return self.regex.fullmatch(text) is not None

    def __repr__(self):
        return f"ExcludePattern({self.pattern!r})"

############################################################ FUNCTIONS

def glob_to_regex(pattern: str) -> str:
    """Translate a '*'/'?' wildcard into an equivalent regex body.

    Examples:
        >>> glob_to_regex('*Tests')
        '.*Tests'
        >>> glob_to_regex('Mod?[1]')
        'Mod.\\\\[1\\\\]'
    """
    parts = []
    for ch in pattern:
        if ch == '*':
            parts.append('.*')
        elif ch == '?':
            parts.append('.')
        else:
            parts.append(re.escape(ch))
    return ''.join(parts)


def compile_module_rules(patterns: Optional[List[str]]) -> List[ModuleRule]:
    """Compile capturing rules in order; raises ConfigurationError."""
    return [ModuleRule(p) for p in (patterns or [])]


def compile_exclude_patterns(
    patterns: Optional[List[str]],
) -> List[ExcludePattern]:
    """Compile wildcard exclusion patterns in order."""
    return [ExcludePattern(p) for p in (patterns or [])]


def matches_any(text: str, patterns: List[ExcludePattern]) -> bool:
    """Return True if text matches any of the exclusion patterns."""
    return any(p.matches(text) for p in patterns)

################################################################################
# END
################################################################################
