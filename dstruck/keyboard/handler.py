"""Key press dispatch."""

import logging
from collections.abc import Iterable

from dstruck.keyboard.context import KeyboardContext
from dstruck.keyboard.document import TextDocument
from dstruck.keyboard.layout import find_glyph_key
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
from dstruck.normalize.double_struck import to_double_struck


# Named keys accepted in key scripts
CONTROL_TOKENS: dict[str, Key] = {
    "<shift>": SHIFT,
    "<space>": SPACE,
    "<return>": RETURN,
    "<backspace>": BACKSPACE,
    "<123>": NUMBER_MODE,
    "<#+=>": SYMBOL_MODE,
    "<abc>": LETTER_MODE,
}

WHITESPACE_KEYS: dict[str, Key] = {" ": SPACE, "\n": RETURN}


class KeyNotOnLayoutError(ValueError):
    """Raised when a scripted key is not available on the current layout."""


class KeyHandler:
    """Apply key presses to a text document."""

    def __init__(
        self,
        context: KeyboardContext | None = None,
        document: TextDocument | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.context = context if context is not None else KeyboardContext()
        self.document = document if document is not None else TextDocument()
        self.logger = logger or logging.getLogger(__name__)

    def handle_key(self, key: Key, now: float | None = None) -> None:
        """
        Handle a single key press.

        Letter and number keys insert double-struck text, symbol keys insert
        their glyph unchanged.

        Args:
            key: Pressed key
            now: Press timestamp in seconds, used for shift timing
                (default: the context clock)
        """
        self.logger.debug(f"Key tapped: {key.kind.value} {key.text or ''}".rstrip())

        match key.kind:
            case KeyKind.CHAR:
                self.document.insert_text(to_double_struck(key.text or ""))
                self.context.release_single_shift()
            case KeyKind.NUMBER:
                self.document.insert_text(to_double_struck(key.text or ""))
            case KeyKind.SYMBOL:
                self.document.insert_text(key.text or "")
            case KeyKind.BACKSPACE:
                self.document.delete_backward()
            case KeyKind.SPACE:
                self.document.insert_text(" ")
            case KeyKind.RETURN:
                self.document.insert_text("\n")
            case KeyKind.SHIFT:
                self.context.handle_shift(now)
                self.logger.debug(
                    f"Shift state: {self.context.is_shifted}, caps lock: {self.context.is_caps_lock}"
                )
            case KeyKind.NUMBER_MODE:
                self._switch(KeyboardMode.NUMBERS)
            case KeyKind.SYMBOL_MODE:
                self._switch(KeyboardMode.SYMBOLS)
            case KeyKind.LETTER_MODE:
                self._switch(KeyboardMode.LETTERS)

    def _switch(self, mode: KeyboardMode) -> None:
        self.context.switch_mode(mode)
        self.logger.debug(f"Switched to {mode.value.lower()} mode")

    def resolve(self, token: str) -> Key:
        """
        Resolve one script token to a key on the current layout.

        On the letters layout a letter names the key in its position, so
        ``h`` and ``H`` both press the same key and shift decides the case.

        Args:
            token: Named key such as ``<shift>``, or a single glyph

        Returns:
            Key to press

        Raises:
            KeyNotOnLayoutError: If the token names no key or the glyph is not
                on the current layout
        """
        named = CONTROL_TOKENS.get(token.lower())
        if named is not None:
            return named
        if _is_key_name(token):
            raise KeyNotOnLayoutError(f"Unknown key name: {token}")

        glyph = token
        if self.context.mode is KeyboardMode.LETTERS and token.isascii() and token.isalpha():
            glyph = token.upper() if self.context.is_shifted else token.lower()

        key = WHITESPACE_KEYS.get(token) or find_glyph_key(glyph, self.context)
        if key is None:
            raise KeyNotOnLayoutError(
                f"Key {token!r} is not on the {self.context.mode.value.lower()} layout"
            )
        return key

    def type_keys(self, tokens: Iterable[str]) -> str:
        """
        Press keys from a script of tokens.

        Multi-character glyph tokens are typed one character at a time, each
        resolved against the layout as it stands at that moment, so a
        ``<shift>`` token only capitalizes the next letter.

        Presses are timed by the script, not the wall clock: back-to-back
        ``<shift>`` tokens count as a double tap, any other press comes
        after the double-tap window has passed.

        Args:
            tokens: Key script tokens

        Returns:
            Document text after all presses
        """
        interval = self.context.double_tap_window + 1.0
        now = self.context.clock()
        if self.context.last_shift_tap is not None:
            now = max(now, self.context.last_shift_tap)

        previous: Key | None = None
        for token in tokens:
            presses = [token] if token.lower() in CONTROL_TOKENS or _is_key_name(token) else list(token)
            for press in presses:
                key = self.resolve(press)
                if not (key.kind is KeyKind.SHIFT and previous is not None and previous.kind is KeyKind.SHIFT):
                    now += interval
                self.handle_key(key, now=now)
                previous = key
        return self.document.text


def _is_key_name(token: str) -> bool:
    # "<tab>" is a name; "<<>" is a run of glyphs
    return len(token) > 2 and token.startswith("<") and token.endswith(">") and token[1:-1].isalnum()
