"""Data models for the double-struck keyboard."""

from dataclasses import dataclass
from enum import Enum


class KeyboardMode(str, Enum):
    """Active key layout."""

    LETTERS = "LETTERS"
    NUMBERS = "NUMBERS"
    SYMBOLS = "SYMBOLS"


class KeyKind(str, Enum):
    """Kind of keyboard key."""

    # Keys carrying a glyph
    CHAR = "CHAR"
    NUMBER = "NUMBER"
    SYMBOL = "SYMBOL"

    # Editing keys
    BACKSPACE = "BACKSPACE"
    SPACE = "SPACE"
    RETURN = "RETURN"

    # Control keys
    SHIFT = "SHIFT"
    NUMBER_MODE = "NUMBER_MODE"
    SYMBOL_MODE = "SYMBOL_MODE"
    LETTER_MODE = "LETTER_MODE"


GLYPH_KINDS = frozenset({KeyKind.CHAR, KeyKind.NUMBER, KeyKind.SYMBOL})


@dataclass(frozen=True)
class Key:
    """A single key; glyph keys carry their literal text."""

    kind: KeyKind
    text: str | None = None

    def __post_init__(self) -> None:
        if self.kind in GLYPH_KINDS and not self.text:
            raise ValueError(f"{self.kind.value} key requires text")
        if self.kind not in GLYPH_KINDS and self.text is not None:
            raise ValueError(f"{self.kind.value} key does not carry text")

    @classmethod
    def char(cls, text: str) -> "Key":
        return cls(KeyKind.CHAR, text)

    @classmethod
    def number(cls, text: str) -> "Key":
        return cls(KeyKind.NUMBER, text)

    @classmethod
    def symbol(cls, text: str) -> "Key":
        return cls(KeyKind.SYMBOL, text)


BACKSPACE = Key(KeyKind.BACKSPACE)
SPACE = Key(KeyKind.SPACE)
RETURN = Key(KeyKind.RETURN)
SHIFT = Key(KeyKind.SHIFT)
NUMBER_MODE = Key(KeyKind.NUMBER_MODE)
SYMBOL_MODE = Key(KeyKind.SYMBOL_MODE)
LETTER_MODE = Key(KeyKind.LETTER_MODE)
