"""Keyboard shift, caps-lock and mode state."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from dstruck.models import KeyboardMode


DEFAULT_DOUBLE_TAP_WINDOW = 0.3  # seconds


@dataclass
class KeyboardContext:
    """
    Mutable state of one keyboard session.

    A context belongs to a single keyboard instance and is passed explicitly
    to the key handler.
    """

    is_shifted: bool = False
    is_caps_lock: bool = False
    mode: KeyboardMode = KeyboardMode.LETTERS
    double_tap_window: float = DEFAULT_DOUBLE_TAP_WINDOW
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    shift_tap_count: int = 0
    last_shift_tap: float | None = None

    def handle_shift(self, now: float | None = None) -> None:
        """
        Apply a shift key tap.

        A single tap toggles shift unless caps-lock is on. Two taps within
        the double-tap window toggle caps-lock and force shift to match it.

        Args:
            now: Tap timestamp in seconds (default: the context clock)
        """
        if now is None:
            now = self.clock()

        if self.last_shift_tap is None or now - self.last_shift_tap > self.double_tap_window:
            self.shift_tap_count = 0

        self.shift_tap_count += 1
        self.last_shift_tap = now

        if self.shift_tap_count >= 2:
            self.is_caps_lock = not self.is_caps_lock
            self.is_shifted = self.is_caps_lock
            self.shift_tap_count = 0
        elif not self.is_caps_lock:
            self.is_shifted = not self.is_shifted

    def release_single_shift(self) -> None:
        """Drop a one-shot shift after a letter is typed."""
        if self.is_shifted and not self.is_caps_lock:
            self.is_shifted = False

    def switch_mode(self, mode: KeyboardMode) -> None:
        self.mode = mode
