#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot dependency graph $
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

"""Accumulate module dependencies across a scan.

DependencyGraph only grows: edges are deduplicated, reference counts are
not. Every qualifying import occurrence increments the target's count,
even when the (from, to) edge already exists. Folding is commutative, so
partial graphs built by independent workers can be merged in any order.
"""

############################################################ IMPORTS

from collections import Counter
from typing import List, Tuple

from .frameworks import SYSTEM, module_kind

############################################################ CLASSES

class ModuleStats:
    """Kind and reference count of an imported module."""

    def __init__(self, name: str, kind: str, count: int):
        self.name = name
        self.kind = kind
        self.count = count

    @property
    def is_system(self) -> bool:
        """True for platform frameworks."""
        return self.kind == SYSTEM

    def __eq__(self, other):
        if not isinstance(other, ModuleStats):
            return NotImplemented
        return (self.name, self.kind, self.count) == \
            (other.name, other.kind, other.count)

    def __repr__(self):
        return f"ModuleStats({self.name!r}, {self.kind!r}, {self.count})"


class Graph:
    """Immutable, sorted snapshot of a DependencyGraph."""

    def __init__(self, sources: List[str], modules: List[ModuleStats],
                 edges: List[Tuple[str, str]]):
        self.sources = tuple(sources)   # modules seen as an edge source
        self.modules = tuple(modules)   # imported modules, by name
        self.edges = tuple(edges)       # (from, to), sorted

    @property
    def system_modules(self) -> Tuple[ModuleStats, ...]:
        """Imported platform frameworks."""
        return tuple(m for m in self.modules if m.is_system)

    @property
    def custom_modules(self) -> Tuple[ModuleStats, ...]:
        """Imported project (or third-party) modules."""
        return tuple(m for m in self.modules if not m.is_system)

    def count(self, module: str) -> int:
        """Return the reference count of module (0 if never imported)."""
        for stats in self.modules:
            if stats.name == module:
                return stats.count
        return 0


class DependencyGraph:
    """Mutable accumulator of edges and reference counts."""

    def __init__(self):
        self.edges = set()          # {(from_module, to_module)}
        self.counts = Counter()     # to_module -> qualifying occurrences
        self.kinds = {}             # to_module -> 'system' | 'custom'

    def record_edge(self, from_module: str, to_module: str):
        """Insert an edge; duplicates and self pairs are ignored."""
        if from_module == to_module:
            return
        self.edges.add((from_module, to_module))

    def increment_count(self, module: str, n: int = 1):
        """Count n more references to module."""
        self.counts[module] += n
        if module not in self.kinds:
            self.kinds[module] = module_kind(module)

    def add_import(self, from_module: str, to_module: str):
        """Fold one qualifying import occurrence."""
        self.record_edge(from_module, to_module)
        self.increment_count(to_module)

    def merge(self, other: 'DependencyGraph'):
        """Fold another (partial) graph into this one."""
        self.edges.update(other.edges)
        for module, n in other.counts.items():
            self.increment_count(module, n)

    def snapshot(self) -> Graph:
        """Return a sorted, immutable Graph of the current state."""
        edges = sorted(self.edges)
        sources = sorted({src for src, _ in edges})
        modules = [ModuleStats(name, self.kinds[name], self.counts[name])
                   for name in sorted(self.counts)]
        return Graph(sources, modules, edges)

################################################################################
# END
################################################################################
