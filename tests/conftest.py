"""Shared fixtures for swiftdot tests."""

import textwrap

import pytest


@pytest.fixture
def swift_tree(tmp_path):
    """Return a function that writes {relative path: source} below tmp_path."""
    def make(files):
        for relative_path, source in files.items():
            path = tmp_path / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding='utf-8')
        return tmp_path
    return make
