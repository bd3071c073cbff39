#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot - Swift Module Dependency Analysis $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
# pylint: disable=too-many-instance-attributes,too-many-arguments
# pylint: disable=too-many-locals,too-many-branches,too-many-statements
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""This module walks a Swift source tree and builds a module-level
dependency graph from the import declarations at the top of each file:

1. Resolve each file to a module (capturing rules or first path segment)
2. Extract the leading import block (no parsing, no symbol resolution)
3. Drop excluded files, excluded modules, system frameworks, self imports
4. Fold the survivors into a deduplicated, reference-counted graph

The graph is then written as Graphviz dot.
"""

############################################################ IMPORTS

import sys
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple

from .emitter import generate_dot_output
from .extractor import extract_imports
from .filters import EXCLUDED, ImportFilter
from .graph import DependencyGraph
from .patterns import (
    ConfigurationError,
    compile_exclude_patterns,
    compile_module_rules,
)
from .resolver import build_module_registry, resolve_module
from .utils import format_statistics, log, plur

############################################################ GLOBALS

SWIFT_SUFFIX = '.swift'
DEFAULT_OUTPUT = 'dependencies.dot'
DEFAULT_TOP = 10

############################################################ CLASSES

class SourceFile:
    """A Swift file after module resolution and import extraction."""

    __slots__ = ('path', 'relative_path', 'module', 'imports')

    def __init__(self, path: str, relative_path: str, module: str,
                 imports: List[str]):
        object.__setattr__(self, 'path', path)
        object.__setattr__(self, 'relative_path', relative_path)
        object.__setattr__(self, 'module', module)
        object.__setattr__(self, 'imports', tuple(imports))

    def __setattr__(self, name, value):
        raise AttributeError(f"SourceFile is immutable ({name})")

    def __repr__(self):
        return (f"SourceFile({self.relative_path!r}, module={self.module!r},"
                f" imports={list(self.imports)!r})")


class FileResult:
    """Contribution of one file: a partial graph plus tallies."""

    def __init__(self, relative_path: str):
        self.relative_path = relative_path
        self.source = None              # SourceFile, unless unreadable
        self.error = None               # read error message
        self.graph = DependencyGraph()  # qualifying occurrences only
        self.imports = 0                # qualifying occurrences
        self.excluded = Counter()       # module -> excluded occurrences


class RunStats:
    """Run context: counters and diagnostics of one analysis."""

    def __init__(self):
        self.files_processed = 0
        self.files_excluded = 0
        self.unreadable_files = []      # [(relative_path, error message)]
        self.total_imports = 0
        self.excluded = Counter()       # module -> excluded occurrences
        self.project_modules = set()    # names derived by capturing rules
        self.graph = None               # final Graph snapshot

    @property
    def excluded_imports(self) -> int:
        """Import occurrences dropped by module exclusion."""
        return sum(self.excluded.values())

    @property
    def excluded_modules(self) -> int:
        """Distinct module names dropped by module exclusion."""
        return len(self.excluded)

    @property
    def unique_modules(self) -> int:
        """Distinct imported modules in the graph."""
        return len(self.graph.modules) if self.graph else 0

    @property
    def system_modules(self) -> int:
        """Distinct imported platform frameworks."""
        return len(self.graph.system_modules) if self.graph else 0

    @property
    def custom_modules(self) -> int:
        """Distinct imported custom modules."""
        return len(self.graph.custom_modules) if self.graph else 0

    def top_modules(self, n: int = DEFAULT_TOP) -> List[Tuple[str, int]]:
        """Return the n most referenced modules as (name, count).

        Ordered by descending count; ties keep lexicographic order.
        """
        if n < 0:
            raise ValueError(f"Invalid top count: {n}")
        if not self.graph:
            return []
        ranked = sorted(self.graph.modules, key=lambda m: -m.count)
        return [(m.name, m.count) for m in ranked[:n]]


class DependencyAnalyzer:
    """Analyzes a Swift source tree to build a module dependency graph."""

    def __init__(self, root_path: str,
                 module_rules: Optional[List[str]] = None,
                 exclude_patterns: Optional[List[str]] = None,
                 include_system: bool = False,
                 jobs: int = 1,
                 verbose: bool = False):
        self.root_path = Path(root_path).resolve()
        if not self.root_path.exists():
            raise ConfigurationError(
                f"Path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise ConfigurationError(
                f"Path is not a directory: {self.root_path}")
        if jobs < 1:
            raise ConfigurationError(f"Invalid job count: {jobs}")

        # Compile up front: a bad rule is fatal before any file is read
        self.rules = compile_module_rules(module_rules)
        self.filter = ImportFilter(compile_exclude_patterns(exclude_patterns),
                                   include_system=include_system)
        self.jobs = jobs
        self.verbose = verbose
        self.graph = DependencyGraph()
        self.stats = RunStats()

    def relative(self, path: Path) -> str:
        """Return path relative to the scan root, '/' separated."""
        return path.relative_to(self.root_path).as_posix()

    def analyze(self, files: Optional[List[Path]] = None) -> RunStats:
        """Walk the tree, fold every file, and return the run statistics."""
        if files is None:
            files = find_swift_files(self.root_path)

        relative_paths = [self.relative(p) for p in files]
        self.stats.project_modules = build_module_registry(relative_paths,
                                                           self.rules)

        # Path exclusion happens before any file is read
        work = []
        for path, relative_path in zip(files, relative_paths):
            if self.filter.is_path_excluded(relative_path):
                self.stats.files_excluded += 1
                if self.verbose:
                    log(f"  Skipping (excluded): {relative_path}", 'red')
                continue
            work.append(path)

        if self.jobs > 1 and len(work) > 1:
            with ThreadPoolExecutor(max_workers=self.jobs) as ex:
                for result in ex.map(self._analyze_file, work):
                    self._fold(result)
        else:
            for path in work:
                self._fold(self._analyze_file(path))

        self.stats.graph = self.graph.snapshot()
        return self.stats

    def _analyze_file(self, file_path: Path) -> FileResult:
        """Resolve, extract and filter one file (no shared state)."""
        relative_path = self.relative(file_path)
        result = FileResult(relative_path)

        try:
            # Undecodable bytes become U+FFFD; only OSError skips a file
            with open(file_path, 'r', encoding='utf-8-sig',
                      errors='replace') as f:
                text = f.read()
        except OSError as e:
            result.error = str(e)
            return result

        module = resolve_module(relative_path, self.rules)
        source = SourceFile(str(file_path), relative_path, module,
                            extract_imports(text))
        result.source = source

        for imported in source.imports:
            reason = self.filter.reject_reason(source.module, imported)
            if reason == EXCLUDED:
                result.excluded[imported] += 1
                continue
            if reason is not None:
                continue
            result.graph.add_import(source.module, imported)
            result.imports += 1

        return result

    def _fold(self, result: FileResult):
        """Merge one file's contribution into the run (caller thread)."""
        if result.error is not None:
            self.stats.unreadable_files.append((result.relative_path,
                                                result.error))
            log(f"Warning: Failed to read {result.relative_path}:"
                f" {result.error}", 'yellow')
            return

        self.stats.files_processed += 1
        self.stats.total_imports += result.imports
        self.stats.excluded.update(result.excluded)
        self.graph.merge(result.graph)

        if self.verbose:
            source = result.source
            known = ' (project)' if source.module in \
                self.stats.project_modules else ''
            log(f"  Processing: {source.relative_path}", 'yellow')
            log(f"     Module: {source.module}{known}", 'blue')

############################################################ FUNCTIONS

def find_swift_files(root_path) -> List[Path]:
    """Return all Swift files below root_path, sorted by relative path."""
    root = Path(root_path)
    files = [p for p in root.rglob(f"*{SWIFT_SUFFIX}") if p.is_file()]
    return sorted(files, key=lambda p: p.relative_to(root).as_posix())


def write_output(output: str, output_file: str):
    """Write dot output to a file, or stdout for '-'."""
    if output_file == '-':
        sys.stdout.write(output)
        sys.stdout.flush()
        return
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(output)


def run_dependency_analysis(
    root_path: str,
    output_file: Optional[str] = DEFAULT_OUTPUT,
    module_rules: Optional[List[str]] = None,
    exclude_patterns: Optional[List[str]] = None,
    include_system: bool = False,
    jobs: int = 1,
    verbose: bool = False,
    quiet: bool = False,
    top: int = DEFAULT_TOP,
) -> RunStats:
    """Main entry point for dependency analysis.

    Args:
        root_path: Swift project root directory
        output_file: Dot file to write ('-' for stdout, None to skip)
        module_rules: Ordered capturing regexes (first match wins)
        exclude_patterns: Wildcards excluding file paths and module names
        include_system: Keep platform frameworks in the graph
        jobs: Worker threads used for reading and extraction
        verbose: Narrate every file
        quiet: Suppress all narration and statistics
        top: Number of most referenced modules to report

    Returns:
        RunStats of the completed run

    Raises:
        ConfigurationError: bad root path, malformed module rule, or
            negative top count
    """
    if top < 0:
        raise ConfigurationError(f"Invalid top count: {top}")

    def say(message='', color=None):
        if not quiet:
            log(message, color)

    analyzer = DependencyAnalyzer(
        root_path,
        module_rules=module_rules,
        exclude_patterns=exclude_patterns,
        include_system=include_system,
        jobs=jobs,
        verbose=verbose and not quiet,
    )
    root = analyzer.root_path

    say(f"Analyzing Swift dependencies in: {root}", 'blue')
    say(f"Root module: {root.name}", 'blue')

    if exclude_patterns:
        say('Excluding patterns:', 'blue')
        for pattern in exclude_patterns:
            say(f"   - {pattern}", 'blue')

    if module_rules:
        say('Using module rules:', 'blue')
        for rule in module_rules:
            say(f"   - {rule}", 'blue')

    say('Scanning for Swift files...', 'green')
    stats = analyzer.analyze()

    if module_rules and stats.project_modules:
        n = len(stats.project_modules)
        say(f"   Found {n} project {plur(n, 'module')}", 'green')

    n = stats.files_processed
    say(f"Processed {n} Swift {plur(n, 'file')}", 'green')
    n = stats.total_imports
    say(f"Found {n} total import {plur(n, 'statement')}", 'green')
    if stats.excluded_modules:
        n = stats.excluded_modules
        say(f"Excluded {n} unique {plur(n, 'module')}", 'yellow')

    if output_file:
        output = generate_dot_output(stats.graph, include_system)
        say(f"Generating DOT graph: {output_file}", 'blue')
        write_output(output, output_file)
        if output_file != '-':
            say(f"DOT file generated: {output_file}", 'green')

    if not quiet:
        say()
        for line in format_statistics(stats, top):
            say(line)

    return stats

################################################################################
# END
################################################################################
