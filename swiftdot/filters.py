#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot import filter $
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

"""Decide which files and import occurrences reach the graph."""

############################################################ IMPORTS

from typing import List, Optional

from .frameworks import is_system_framework
from .patterns import ExcludePattern, matches_any
from .resolver import normalize_path

############################################################ GLOBALS

# Reasons an import occurrence is dropped
EXCLUDED = 'excluded'
SYSTEM = 'system'
SELF = 'self'

############################################################ CLASSES

class ImportFilter:
    """Exclusion and system-framework filtering for a single run.

    The same wildcard list is applied to relative file paths (whole files
    are dropped) and to imported module names (single occurrences are
    dropped). The filter holds no mutable state and may be shared between
    worker threads.
    """

    def __init__(self, exclude_patterns: Optional[List[ExcludePattern]] = None,
                 include_system: bool = False):
        self.exclude_patterns = tuple(exclude_patterns or ())
        self.include_system = include_system

    def is_path_excluded(self, relative_path: str) -> bool:
        """Return True if the whole file should be skipped."""
        return matches_any(normalize_path(relative_path),
                           self.exclude_patterns)

    def is_module_excluded(self, module: str) -> bool:
        """Return True if imports of module are excluded by pattern."""
        return matches_any(module, self.exclude_patterns)

    def reject_reason(self, from_module: str, module: str) -> Optional[str]:
        """Return why an import occurrence is dropped, or None to keep it.

        Checks run in order: module exclusion, system suppression, then
        self-import suppression.
        """
        if self.is_module_excluded(module):
            return EXCLUDED

        if not self.include_system and is_system_framework(module):
            return SYSTEM

        if module == from_module:
            return SELF

        return None

    def accept(self, from_module: str, module: str) -> bool:
        """Return True if the import occurrence should be recorded."""
        return self.reject_reason(from_module, module) is None

################################################################################
# END
################################################################################
