"""Tests for capturing module rules and wildcard exclusions."""

import pytest

from swiftdot.patterns import (
    ConfigurationError,
    ExcludePattern,
    ModuleRule,
    compile_exclude_patterns,
    compile_module_rules,
    matches_any,
)


def test_module_rule_captures_group():
    rule = ModuleRule('/Sources/([^/]+)/')
    assert rule.match('Authentication/Sources/AuthenticationUI/File.swift') \
        == 'AuthenticationUI'


def test_module_rule_miss_returns_none():
    assert ModuleRule('^Targets/([^/]+)/').match('App/View.swift') is None


def test_module_rule_empty_capture_is_a_miss():
    assert ModuleRule('^Targets/([^/]*)/').match('Targets//View.swift') is None


@pytest.mark.parametrize('pattern', ['^Targets/([^/]+/', '(?P<x'])
def test_malformed_rule_is_configuration_error(pattern):
    with pytest.raises(ConfigurationError):
        ModuleRule(pattern)


@pytest.mark.parametrize('pattern', ['^Targets/', '^(A)/(B)/'])
def test_rule_needs_exactly_one_group(pattern):
    with pytest.raises(ConfigurationError):
        compile_module_rules([pattern])


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


@pytest.mark.parametrize('text,expected', [
    ('FeatureTests', True),
    ('Tests', True),
    ('FeatureTest', False),
    ('featuretests', False),
])
def test_suffix_wildcard(text, expected):
    assert ExcludePattern('*Tests').matches(text) is expected


def test_question_mark_matches_one_character():
    pattern = ExcludePattern('Mod?')
    assert pattern.matches('ModA')
    assert not pattern.matches('Mod')
    assert not pattern.matches('ModAB')


def test_star_crosses_path_separators():
    assert ExcludePattern('*/Tests/*').matches('App/Feature/Tests/X.swift')


def test_regex_characters_are_literal():
    assert ExcludePattern('Foo.Bar').matches('Foo.Bar')
    assert not ExcludePattern('Foo.Bar').matches('FooXBar')
    assert ExcludePattern('[ab]').matches('[ab]')
    assert not ExcludePattern('[ab]').matches('a')
    assert not ExcludePattern('Mocks+').matches('Mockss')


def test_pattern_matches_whole_string():
    assert not ExcludePattern('Mock').matches('MockNetworking')


def test_matches_any():
    patterns = compile_exclude_patterns(['*Tests', '*Mocks'])
    assert matches_any('NetworkMocks', patterns)
    assert not matches_any('Network', patterns)
    assert not matches_any('Network', compile_exclude_patterns(None))
