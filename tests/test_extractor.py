"""Tests for leading import extraction."""

from swiftdot.extractor import extract_imports, parse_import_line


def test_plain_imports_in_order():
    text = "import Foundation\nimport Networking\nimport Foundation\n"
    assert extract_imports(text) == ['Foundation', 'Networking', 'Foundation']


def test_access_level_import():
    assert extract_imports("public import MyModule\n") == ['MyModule']


def test_attributes_and_access_level():
    text = (
        "@testable import Feature\n"
        "@_exported public import CoreKit\n"
        "@preconcurrency @_implementationOnly internal import Legacy\n"
    )
    assert extract_imports(text) == ['Feature', 'CoreKit', 'Legacy']


def test_kind_qualified_imports():
    text = (
        "import struct Models.User\n"
        "import class UIKit.UIImage\n"
        "import enum Routing.Route\n"
        "import protocol Storage.Store\n"
    )
    assert extract_imports(text) == [
        'Models.User', 'UIKit.UIImage', 'Routing.Route', 'Storage.Store',
    ]


def test_dotted_submodule():
    assert extract_imports("import CoreLocation.CLLocation") == \
        ['CoreLocation.CLLocation']


def test_comments_and_blank_lines_are_skipped():
    text = (
        "//\n"
        "//  View.swift\n"
        "//\n"
        "\n"
        "/* Copyright\n"
        " * header\n"
        " */\n"
        "\n"
        "   import Feature   \n"
    )
    assert extract_imports(text) == ['Feature']


def test_first_declaration_stops_scan():
    text = (
        "import A\n"
        "\n"
        "struct View {}\n"
        "import B\n"
    )
    assert extract_imports(text) == ['A']


def test_conditional_import_stops_scan():
    text = (
        "import A\n"
        "#if canImport(UIKit)\n"
        "import UIKit\n"
        "#endif\n"
    )
    assert extract_imports(text) == ['A']


def test_empty_and_comment_only_files():
    assert extract_imports('') == []
    assert extract_imports("// just a comment\n\n/* and another */\n") == []


def test_trailing_punctuation_and_comments_are_trimmed():
    assert extract_imports("import Foo;\nimport Bar // why\n") == ['Foo', 'Bar']


def test_literal_import_token_is_rejected():
    assert parse_import_line('import import') is None
    # Rejected token does not end the header
    assert extract_imports("import import\nimport B\n") == ['B']


def test_kind_without_name_is_rejected():
    assert parse_import_line('import struct') is None


def test_bare_import_keyword_is_not_an_import():
    assert extract_imports("import\nimport A\n") == []


def test_spi_attribute_is_not_recognized():
    assert extract_imports("@_spi(Internal) import Core\nimport A\n") == []


def test_leading_byte_order_mark():
    assert extract_imports('\ufeffimport Core\nimport Networking\n') == \
        ['Core', 'Networking']
