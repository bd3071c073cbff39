#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot import extractor $
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

"""Extract the leading import declarations of a Swift source file.

Only the header of the file is scanned: blank lines and comment lines are
skipped, import lines are collected, and the first line that is anything
else ends the scan. Imports written further down the file (for instance
inside '#if canImport(...)' blocks) are intentionally not seen.

Recognized forms:

    import Foundation
    @testable import Feature
    @_exported public import CoreKit
    import struct Models.User
    import class UIKit.UIImage
"""

############################################################ IMPORTS

import re
from typing import List, Optional

############################################################ GLOBALS

# Attributes, optional access level, 'import', optional kind, identifier
IMPORT_LINE = re.compile(
    r'^\s*(@[a-zA-Z0-9_]+\s+)*'
    r'((public|internal|private|fileprivate|open|package)\s+)?'
    r'import\s+(struct\s+)?[a-zA-Z0-9_.]+'
)

IMPORT_KINDS = ('struct', 'class', 'enum', 'protocol')

COMMENT_PREFIXES = ('//', '/*', '*')

BOM = '\ufeff'

IDENTIFIER = re.compile(r'[A-Za-z0-9_.]+')

############################################################ FUNCTIONS

def is_skippable(line: str) -> bool:
    """Return True for blank lines and (simplified) comment lines."""
    return not line or line.startswith(COMMENT_PREFIXES)


def parse_import_line(line: str) -> Optional[str]:
    """Return the module token of an import line.

    The token is the word after 'import', or the word after the kind
    qualifier when one is present. Returns None for a recognized import
    line that yields no usable token (including the literal 'import').

    Examples:
        >>> parse_import_line('public import MyModule')
        'MyModule'
        >>> parse_import_line('import struct CoreKit.Money')
        'CoreKit.Money'
    """
    fields = line.split()
    if 'import' not in fields:
        return None

    i = fields.index('import')
    token = fields[i + 1] if i + 1 < len(fields) else ''
    if token in IMPORT_KINDS:
        token = fields[i + 2] if i + 2 < len(fields) else ''

    m = IDENTIFIER.match(token)
    if m is None:
        return None
    token = m.group(0)

    if token == 'import':
        return None
    return token


def extract_imports(text: str) -> List[str]:
    """Return the ordered module tokens of the leading import block.

    Args:
        text: Full contents of a Swift source file

    Returns:
        Module tokens in file order; duplicates are kept
    """
    imports = []
    if text.startswith(BOM):
        text = text[1:]

    for raw in text.splitlines():
        line = raw.strip()

        if is_skippable(line):
            continue

        # First real declaration ends the header
        if not IMPORT_LINE.match(line):
            break

        module = parse_import_line(line)
        if module:
            imports.append(module)

    return imports

################################################################################
# END
################################################################################
