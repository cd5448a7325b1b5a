"""Unicode sanity checks for the double-struck mapping and converted text."""

import logging
import unicodedata
from collections import Counter
from dataclasses import dataclass, field

from dstruck.normalize.double_struck import (
    EXCEPTIONS,
    UPPER_BASE,
    is_double_struck,
    is_mappable,
    mapping_table,
)


# Slots of the math capital block left unassigned in favour of Letterlike Symbols
RESERVED_UPPER = frozenset(UPPER_BASE + ord(letter) - ord("A") for letter in EXCEPTIONS)


@dataclass
class TextSanityResult:
    """Result of a text sanity check."""

    total_chars: int = 0
    mappable_chars: int = 0
    double_struck_chars: int = 0
    other_chars: int = 0
    non_ascii: Counter[str] = field(default_factory=Counter)

    @property
    def is_fully_converted(self) -> bool:
        return self.mappable_chars == 0


def _expected_name(source: str) -> str:
    # "LATIN CAPITAL LETTER A" -> "CAPITAL A", "DIGIT ZERO" stays
    name = unicodedata.name(source)
    return name.replace("LATIN ", "").replace("LETTER ", "")


def verify_mapping_table(logger: logging.Logger | None = None) -> list[str]:
    """
    Verify every mapping against the Unicode character database.

    Args:
        logger: Optional logger for a summary line

    Returns:
        List of issues (empty when the table is correct)
    """
    issues: list[str] = []

    for source, target in mapping_table().items():
        if len(target) != 1:
            issues.append(f"{source!r} maps to {len(target)} characters")
            continue

        code = ord(target)
        if code in RESERVED_UPPER:
            issues.append(f"{source!r} maps to reserved code point U+{code:04X}")
            continue

        name = unicodedata.name(target, "")
        if not name:
            issues.append(f"{source!r} maps to unassigned code point U+{code:04X}")
            continue

        expected = f"DOUBLE-STRUCK {_expected_name(source)}"
        if name not in (expected, f"MATHEMATICAL {expected}"):
            issues.append(f"{source!r} maps to U+{code:04X} {name}, expected {expected}")

    if logger:
        if issues:
            logger.warning(f"Mapping table has {len(issues)} issues")
        else:
            logger.info("Mapping table verified against the Unicode character database")

    return issues


def check_text(text: str) -> TextSanityResult:
    """
    Classify the characters of a text.

    Args:
        text: Input text

    Returns:
        Counts of mappable, double-struck and other characters
    """
    result = TextSanityResult(total_chars=len(text))

    for char in text:
        if is_mappable(char):
            result.mappable_chars += 1
        elif is_double_struck(char):
            result.double_struck_chars += 1
        else:
            result.other_chars += 1
            if ord(char) > 0x7F:
                result.non_ascii[char] += 1

    return result
