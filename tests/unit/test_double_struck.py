"""Tests for the double-struck mapping."""

import pytest

from dstruck.normalize.double_struck import (
    DIGIT_BASE,
    EXCEPTIONS,
    LOWER_BASE,
    UPPER_BASE,
    is_double_struck,
    is_mappable,
    map_char,
    mapping_table,
    to_double_struck,
)


LEGACY = {
    "C": "ℂ",
    "H": "ℍ",
    "N": "ℕ",
    "P": "ℙ",
    "Q": "ℚ",
    "R": "ℝ",
    "Z": "ℤ",
}

SAMPLES = [
    "",
    "Hello World 123",
    "!@#.,",
    "The quick brown fox jumps over the lazy dog 0123456789",
    "\u00c4\u00d6\u00dc \u00df e\u0301 \u6f22\u5b57 \U0001f642",
    "tab\tand\nnewline\r\n",
    "ℍ𝕖𝕝𝕝𝕠",
]


def test_empty_string():
    """Test that empty input gives empty output."""
    assert to_double_struck("") == ""


def test_hello_world(sample_text, sample_double_struck):
    """Test a full sentence with exceptions, linear letters and digits."""
    assert to_double_struck(sample_text) == sample_double_struck


@pytest.mark.parametrize("letter", sorted(LEGACY))
def test_exceptions_use_legacy_symbols(letter):
    """Test that C H N P Q R Z map to Letterlike Symbols."""
    assert map_char(letter) == LEGACY[letter]
    assert map_char(letter) != chr(UPPER_BASE + ord(letter) - ord("A"))


def test_exception_table_constant():
    """Test the exported exception table."""
    assert EXCEPTIONS == LEGACY


def test_uppercase_linear():
    """Test non-exception capitals use the math block."""
    assert map_char("A") == "\U0001d538"
    assert map_char("B") == "\U0001d539"
    assert map_char("Y") == "\U0001d550"
    assert map_char("Z") != chr(UPPER_BASE + 25)
    assert map_char("Z") == "ℤ"


def test_lowercase_linear():
    """Test lowercase letters, including those whose capitals are exceptions."""
    assert map_char("a") == chr(LOWER_BASE)
    assert map_char("c") == "\U0001d554"
    assert map_char("c") != "ℂ"
    assert map_char("z") == "\U0001d56b"


def test_digits_linear():
    """Test digit mapping."""
    assert map_char("0") == chr(DIGIT_BASE)
    assert map_char("9") == "\U0001d7e1"
    assert to_double_struck("123") == "𝟙𝟚𝟛"


def test_pass_through():
    """Test punctuation and whitespace pass through."""
    assert to_double_struck("!@#.,") == "!@#.,"
    assert to_double_struck(" \t\n") == " \t\n"


def test_non_ascii_pass_through():
    """Test that non-ASCII letters and digits are not mapped."""
    assert to_double_struck("\u00e9") == "\u00e9"
    assert to_double_struck("\u0663") == "\u0663"  # Arabic-Indic digit three
    assert to_double_struck("\uff21") == "\uff21"  # fullwidth A


def test_combining_mark_after_letter():
    """Test that a combining mark stays while its base letter is mapped."""
    assert to_double_struck("e\u0301") == "\U0001d556\u0301"


@pytest.mark.parametrize("text", SAMPLES)
def test_length_preserved(text):
    """Test that output length equals input length."""
    assert len(to_double_struck(text)) == len(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_deterministic(text):
    """Test that repeated calls agree."""
    assert to_double_struck(text) == to_double_struck(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_idempotent_on_output(text):
    """Test that converting converted text changes nothing."""
    once = to_double_struck(text)
    assert to_double_struck(once) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_string_equals_per_character(text):
    """Test that conversion is character-wise concatenation."""
    assert to_double_struck(text) == "".join(map_char(c) for c in text)


def test_map_char_non_single_strings():
    """Test that map_char is total over strings."""
    assert map_char("") == ""
    assert map_char("ab") == "ab"


def test_mapping_table():
    """Test the table covers A-Z, a-z, 0-9 in order."""
    table = mapping_table()

    assert len(table) == 62
    assert list(table)[:3] == ["A", "B", "C"]
    assert list(table)[-1] == "9"
    assert len(set(table.values())) == 62

    # Returned copy must not affect the module table
    table["A"] = "A"
    assert map_char("A") == "\U0001d538"


def test_is_mappable():
    """Test mappable character detection."""
    assert is_mappable("a")
    assert is_mappable("Z")
    assert is_mappable("5")
    assert not is_mappable("!")
    assert not is_mappable("\u00e9")
    assert not is_mappable("ab")


def test_is_double_struck():
    """Test double-struck character detection."""
    assert is_double_struck("ℂ")
    assert is_double_struck("𝕒")
    assert is_double_struck("𝟘")
    assert not is_double_struck("a")
    assert not is_double_struck(chr(UPPER_BASE + 2))  # reserved slot for C
