"""Tests for dictionary word patterns."""

import pytest
from lark.exceptions import LarkError

import patterns


@pytest.mark.parametrize(
    "word, pattern, expected",
    [
        ("spin", "s...", True),
        ("tent", "s...", False),
        ("spot", "[sp]p.t", True),
        ("spit", "sp[io]t", True),
        ("spat", "sp[io]t", False),
        ("bake", "#@#@", True),
        ("spin", "#@##", False),
        ("yoga", "@...", True),
        ("spin", "*n", True),
        ("spin", "*t", False),
        ("spin", "spin", True),
        ("spin", "spi", False),
    ],
)
def test_match_pattern(word, pattern, expected):
    assert patterns.match_pattern(word, pattern) is expected


def test_parse_pattern_is_cached():
    assert patterns.parse_pattern("s...") is patterns.parse_pattern("s...")


def test_parse_pattern_parts():
    pattern = patterns.parse_pattern("[ps]@#.")
    assert pattern.parts[0] == ('set', 'ps')
    assert pattern.parts[1:] == (('vowel',), ('cons',), ('dot',))


def test_fixed_length():
    assert patterns.parse_pattern("s...").fixed_length() == 4
    assert patterns.parse_pattern("[abc]@ing").fixed_length() == 5
    assert patterns.parse_pattern("s*").fixed_length() is None


@pytest.mark.parametrize("text", ["S...", "s.1.", "[sp", ""])
def test_bad_pattern(text):
    with pytest.raises(LarkError):
        patterns.parse_pattern(text)


def test_unknown_part():
    with pytest.raises(ValueError):
        patterns.pattern_to_regex((('var', 'A'),))
