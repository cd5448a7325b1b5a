"""Key layouts for each keyboard mode."""

from dstruck.keyboard.context import KeyboardContext
from dstruck.models import (
    BACKSPACE,
    LETTER_MODE,
    NUMBER_MODE,
    RETURN,
    SHIFT,
    SPACE,
    SYMBOL_MODE,
    Key,
    KeyboardMode,
    KeyKind,
)


LETTER_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")
NUMBER_ROW = "1234567890"
NUMBER_SYMBOLS = ("-", "/", ":", ";", "(", ")", "$", "&", "@", '"')
SYMBOL_ROWS = (
    ("[", "]", "{", "}", "#", "%", "^", "*", "+", "="),
    ("_", "\\", "|", "~", "<", ">", "€", "£", "¥", "•"),
)
PUNCTUATION = (".", ",", "?", "!", "'")

Row = list[Key]


def _letters(rows: tuple[str, ...], shifted: bool) -> list[Row]:
    return [[Key.char(c.upper() if shifted else c) for c in row] for row in rows]


def letters_layout(shifted: bool) -> list[Row]:
    top, middle, bottom = _letters(LETTER_ROWS, shifted)
    return [
        top,
        middle,
        [SHIFT, *bottom, BACKSPACE],
        [NUMBER_MODE, SPACE, RETURN],
    ]


def numbers_layout() -> list[Row]:
    return [
        [Key.number(n) for n in NUMBER_ROW],
        [Key.symbol(s) for s in NUMBER_SYMBOLS],
        [SYMBOL_MODE, *(Key.symbol(s) for s in PUNCTUATION), BACKSPACE],
        [LETTER_MODE, SPACE, RETURN],
    ]


def symbols_layout() -> list[Row]:
    top, middle = ([Key.symbol(s) for s in row] for row in SYMBOL_ROWS)
    return [
        top,
        middle,
        [NUMBER_MODE, *(Key.symbol(s) for s in PUNCTUATION), BACKSPACE],
        [LETTER_MODE, SPACE, RETURN],
    ]


def layout_for(context: KeyboardContext) -> list[Row]:
    """
    Get the rows of keys shown for the current keyboard state.

    Args:
        context: Keyboard context

    Returns:
        Rows of keys, top to bottom
    """
    if context.mode is KeyboardMode.NUMBERS:
        return numbers_layout()
    if context.mode is KeyboardMode.SYMBOLS:
        return symbols_layout()
    return letters_layout(context.is_shifted)


def key_label(key: Key, context: KeyboardContext) -> str:
    """Get the text shown on a key."""
    match key.kind:
        case KeyKind.CHAR | KeyKind.NUMBER | KeyKind.SYMBOL:
            return key.text or ""
        case KeyKind.BACKSPACE:
            return "⌫"
        case KeyKind.SPACE:
            return "space"
        case KeyKind.RETURN:
            return "return"
        case KeyKind.SHIFT:
            return "⇪" if context.is_caps_lock else "⇧"
        case KeyKind.NUMBER_MODE:
            return "123"
        case KeyKind.SYMBOL_MODE:
            return "#+="
        case KeyKind.LETTER_MODE:
            return "ABC"
    raise ValueError(f"Unknown key kind: {key.kind}")


def find_glyph_key(text: str, context: KeyboardContext) -> Key | None:
    """Find the glyph key with the given text on the current layout."""
    for row in layout_for(context):
        for key in row:
            if key.text == text:
                return key
    return None
