"""Double-struck (blackboard bold) character mapping."""


# Mathematical Alphanumeric Symbols block bases
UPPER_BASE = 0x1D538  # MATHEMATICAL DOUBLE-STRUCK CAPITAL A
LOWER_BASE = 0x1D552  # MATHEMATICAL DOUBLE-STRUCK SMALL A
DIGIT_BASE = 0x1D7D8  # MATHEMATICAL DOUBLE-STRUCK DIGIT ZERO

# Uppercase letters encoded in Letterlike Symbols before the math block existed.
# Their slots in the math block are reserved and must never be emitted.
EXCEPTIONS: dict[str, str] = {
    "C": "\u2102",  # DOUBLE-STRUCK CAPITAL C
    "H": "\u210d",  # DOUBLE-STRUCK CAPITAL H
    "N": "\u2115",  # DOUBLE-STRUCK CAPITAL N
    "P": "\u2119",  # DOUBLE-STRUCK CAPITAL P
    "Q": "\u211a",  # DOUBLE-STRUCK CAPITAL Q
    "R": "\u211d",  # DOUBLE-STRUCK CAPITAL R
    "Z": "\u2124",  # DOUBLE-STRUCK CAPITAL Z
}

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"


def _build_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for offset, char in enumerate(UPPERCASE):
        table[char] = EXCEPTIONS.get(char) or chr(UPPER_BASE + offset)
    for offset, char in enumerate(LOWERCASE):
        table[char] = chr(LOWER_BASE + offset)
    for offset, char in enumerate(DIGITS):
        table[char] = chr(DIGIT_BASE + offset)
    return table


_TABLE = _build_table()
_TRANSLATION = str.maketrans(_TABLE)
_OUTPUTS = frozenset(_TABLE.values())


def map_char(char: str) -> str:
    """
    Map a single character to its double-struck form.

    Args:
        char: One character

    Returns:
        The double-struck character, or ``char`` unchanged when it is not an
        ASCII letter or digit (strings of any other length are also returned
        unchanged)
    """
    return _TABLE.get(char, char)


def to_double_struck(text: str) -> str:
    """
    Convert text to double-struck characters.

    Each ASCII letter and digit is replaced independently; everything else
    passes through. Output length always equals input length.

    Args:
        text: Input text

    Returns:
        Converted text
    """
    return text.translate(_TRANSLATION)


def mapping_table() -> dict[str, str]:
    """
    Return the full mapping table.

    Returns:
        Dict of source character to double-struck character, ordered
        A-Z, a-z, 0-9
    """
    return dict(_TABLE)


def is_mappable(char: str) -> bool:
    """Check if a character is an ASCII letter or digit."""
    return char in _TABLE


def is_double_struck(char: str) -> bool:
    """Check if a character is one of the double-struck outputs."""
    return char in _OUTPUTS
