#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot Graphviz dot emitter $
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

"""Serialize a dependency Graph as Graphviz dot.

Output depends only on the graph content: nodes and edges are emitted in
lexicographic order and no timestamps are written, so unchanged input
always produces byte-identical output.
"""

############################################################ IMPORTS

from typing import List

from .graph import Graph
from .utils import sanitize_name
from .version import VERSION

############################################################ GLOBALS

# Node styles by role
NODE_STYLES = {
    'source': 'fillcolor=gold, shape=box, style="rounded,filled,bold"',
    'system': 'fillcolor=lightgray, shape=component',
    'custom': 'fillcolor=lightgreen',
}

############################################################ FUNCTIONS

def escape_label(text: str) -> str:
    """Escape a string for use inside a double-quoted dot attribute."""
    return text.replace('\\', '\\\\').replace('"', '\\"')


def module_label(name: str, count: int) -> str:
    """Return the label of an imported module node."""
    return f"{escape_label(name)}\\n({count} refs)"


def generate_header_lines() -> List[str]:
    """Fixed graph preamble."""
    lines = []
    lines.append('digraph SwiftDependencies {')
    lines.append(f"    // Generated by swiftdot {VERSION}")
    lines.append('')
    lines.append('    // Graph attributes')
    lines.append('    rankdir=LR;')
    lines.append('    node [shape=box, style=rounded, fontname="Helvetica"];')
    lines.append('    edge [fontname="Helvetica", fontsize=10];')
    lines.append('')
    lines.append('    // Define node styles')
    lines.append('    node [fillcolor=lightblue, style="rounded,filled"];')
    lines.append('')
    return lines


def generate_dot_output(graph: Graph, include_system: bool = False) -> str:
    """Generate Graphviz dot output.

    Args:
        graph: Finalized dependency graph
        include_system: Emit the system framework node group

    Returns:
        Dot language string (newline terminated)
    """
    lines = generate_header_lines()

    # Modules that import something (edge sources)
    for module in graph.sources:
        lines.append(f'    "{sanitize_name(module)}"'
                     f' [label="{escape_label(module)}",'
                     f" {NODE_STYLES['source']}];")
    lines.append('')

    if include_system and graph.system_modules:
        lines.append('    // System Frameworks')
        for stats in graph.system_modules:
            lines.append(f'    "{sanitize_name(stats.name)}"'
                         f' [label="{module_label(stats.name, stats.count)}",'
                         f" {NODE_STYLES['system']}];")

    if graph.custom_modules:
        lines.append('')
        lines.append('    // Custom Modules')
        for stats in graph.custom_modules:
            lines.append(f'    "{sanitize_name(stats.name)}"'
                         f' [label="{module_label(stats.name, stats.count)}",'
                         f" {NODE_STYLES['custom']}];")

    lines.append('')
    lines.append('    // Dependencies')
    for from_module, to_module in graph.edges:
        if from_module == to_module:
            continue
        lines.append(f'    "{sanitize_name(from_module)}"'
                     f' -> "{sanitize_name(to_module)}";')

    lines.append('}')

    return '\n'.join(lines) + '\n'

################################################################################
# END
################################################################################
