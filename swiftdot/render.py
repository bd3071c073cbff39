#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot Graphviz rendering $
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

"""Optional post-processing: render a dot file with Graphviz and open it."""

############################################################ IMPORTS

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

############################################################ GLOBALS

DEFAULT_FORMATS = ('svg', 'png', 'pdf')

# Extra dot(1) arguments per output format
FORMAT_ARGS = {
    'png': ['-Gdpi=300'],
}

############################################################ FUNCTIONS

def find_dot() -> Optional[str]:
    """Return the path of the Graphviz dot executable, if installed."""
    return shutil.which('dot')


def render_graph(dot_file: str,
                 formats: Sequence[str] = DEFAULT_FORMATS,
                 dot: Optional[str] = None) -> List[str]:
    """Render dot_file into each format next to it.

    Args:
        dot_file: Path of the dot description
        formats: Graphviz output formats (svg, png, pdf, ...)
        dot: dot executable (default: looked up on PATH)

    Returns:
        Paths of the files actually generated (empty without Graphviz)
    """
    if dot is None:
        dot = find_dot()
    if dot is None:
        return []

    base = Path(dot_file)
    if base.suffix == '.dot':
        base = base.with_suffix('')

    generated = []
    for fmt in formats:
        target = f"{base}.{fmt}"
        cmd = [dot, f"-T{fmt}", *FORMAT_ARGS.get(fmt, []), str(dot_file),
               '-o', target]
        try:
            subprocess.run(cmd, check=True, stdout=subprocess.DEVNULL,
                           stderr=subprocess.PIPE)
        except (OSError, subprocess.CalledProcessError) as e:
            print(f"Warning: dot -T{fmt} failed: {e}", file=sys.stderr)
            continue
        generated.append(target)

    return generated


def open_file(path: str) -> bool:
    """Open path with the platform viewer; returns False on failure."""
    try:
        if sys.platform == 'darwin':
            subprocess.run(['open', path], check=True)
        elif os.name == 'nt':
            os.startfile(path)  # pylint: disable=no-member
        else:
            subprocess.run(['xdg-open', path], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        print(f"Warning: Unable to open {path}: {e}", file=sys.stderr)
        return False
    return True

################################################################################
# END
################################################################################
