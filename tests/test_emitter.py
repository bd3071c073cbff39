"""Tests for Graphviz dot emission."""

from swiftdot.emitter import escape_label, generate_dot_output
from swiftdot.graph import DependencyGraph


def build(*occurrences):
    graph = DependencyGraph()
    for src, dst in occurrences:
        graph.add_import(src, dst)
    return graph.snapshot()


def test_complete_document():
    output = generate_dot_output(build(('App', 'Networking'),
                                       ('App', 'Networking')))

    assert output.startswith('digraph SwiftDependencies {\n')
    assert output.endswith('}\n')
    assert '    rankdir=LR;' in output
    assert ('    "App" [label="App", fillcolor=gold, shape=box,'
            ' style="rounded,filled,bold"];') in output
    assert ('    "Networking" [label="Networking\\n(2 refs)",'
            ' fillcolor=lightgreen];') in output
    assert '    "App" -> "Networking";' in output


def test_identifiers_are_sanitized_labels_are_not():
    output = generate_dot_output(build(('My-App', 'Core.Utils')))
    assert '"My_App" [label="My-App"' in output
    assert '"Core_Utils" [label="Core.Utils\\n(1 refs)"' in output
    assert '"My_App" -> "Core_Utils";' in output


def test_system_group_only_when_included():
    snap = build(('App', 'UIKit'), ('App', 'Core'))

    without = generate_dot_output(snap)
    assert '// System Frameworks' not in without
    assert 'shape=component' not in without

    with_system = generate_dot_output(snap, include_system=True)
    assert '    // System Frameworks' in with_system
    assert ('    "UIKit" [label="UIKit\\n(1 refs)",'
            ' fillcolor=lightgray, shape=component];') in with_system


def test_edges_are_sorted():
    output = generate_dot_output(build(('B', 'X'), ('A', 'Y'), ('A', 'X')))
    edges = [line for line in output.splitlines() if '->' in line]
    assert edges == [
        '    "A" -> "X";',
        '    "A" -> "Y";',
        '    "B" -> "X";',
    ]


def test_same_graph_same_bytes():
    first = build(('A', 'B'), ('C', 'B'), ('A', 'D'))
    second = build(('A', 'D'), ('C', 'B'), ('A', 'B'))
    assert generate_dot_output(first) == generate_dot_output(second)


def test_empty_graph():
    output = generate_dot_output(DependencyGraph().snapshot())
    assert output.startswith('digraph SwiftDependencies {')
    assert '->' not in output
    assert output.endswith('    // Dependencies\n}\n')


def test_escape_label():
    assert escape_label('a"b\\c') == 'a\\"b\\\\c'
