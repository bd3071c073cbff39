#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot module resolver $
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

"""Map a file path (relative to the scan root) to its module name."""

############################################################ IMPORTS

from typing import Iterable, List, Set

from .patterns import ModuleRule

############################################################ FUNCTIONS

def normalize_path(relative_path: str) -> str:
    """Use '/' separators regardless of host platform."""
    return str(relative_path).replace('\\', '/')


def first_segment(relative_path: str) -> str:
    """Return the first path segment (the whole path if unseparated)."""
    return normalize_path(relative_path).split('/', 1)[0]


def resolve_module(relative_path: str, rules: List[ModuleRule]) -> str:
    """Resolve the module a file belongs to.

    Rules are tried top-to-bottom and the first one that captures wins.
    Without a match the first path segment is used, so files directly
    under the scan root resolve to their own file name.

    Args:
        relative_path: Path of the file relative to the scan root
        rules: Ordered capturing rules

    Returns:
        Module name (never empty for a non-empty path)

    Examples:
        >>> resolve_module('App/Camera/View.swift', [])
        'App'
        >>> resolve_module('main.swift', [])
        'main.swift'
    """
    path = normalize_path(relative_path)
    for rule in rules:
        module = rule.match(path)
        if module:
            return module
    return first_segment(path)


def build_module_registry(relative_paths: Iterable[str],
                          rules: List[ModuleRule]) -> Set[str]:
    """Collect every module name a capturing rule derives in the tree.

    Only explicit rule matches count; the first-segment fallback does not
    name a project module. The registry is informational and never feeds
    back into resolution.
    """
    registry = set()
    if not rules:
        return registry

    for relative_path in relative_paths:
        path = normalize_path(relative_path)
        for rule in rules:
            module = rule.match(path)
            if module:
                registry.add(module)
                break

    return registry

################################################################################
# END
################################################################################
