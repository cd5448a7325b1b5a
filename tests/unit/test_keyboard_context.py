"""Tests for keyboard shift and caps-lock state."""

from dstruck.keyboard import KeyboardContext
from dstruck.models import KeyboardMode


def test_initial_state(context):
    """Test a fresh context."""
    assert not context.is_shifted
    assert not context.is_caps_lock
    assert context.mode is KeyboardMode.LETTERS


def test_single_tap_toggles_shift(context, clock):
    """Test that separate taps toggle shift on and off."""
    context.handle_shift()
    assert context.is_shifted
    assert not context.is_caps_lock

    clock.advance(1.0)
    context.handle_shift()
    assert not context.is_shifted


def test_double_tap_enables_caps_lock(context, clock):
    """Test that two quick taps turn on caps lock and shift."""
    context.handle_shift()
    clock.advance(0.1)
    context.handle_shift()

    assert context.is_caps_lock
    assert context.is_shifted
    assert context.shift_tap_count == 0


def test_double_tap_disables_caps_lock(context, clock):
    """Test that a second double tap turns caps lock off."""
    for _ in range(2):
        context.handle_shift()
        clock.advance(0.1)
    clock.advance(1.0)
    for _ in range(2):
        context.handle_shift()
        clock.advance(0.1)

    assert not context.is_caps_lock
    assert not context.is_shifted


def test_single_tap_ignored_under_caps_lock(context, clock):
    """Test that a lone tap does not drop shift while caps lock is on."""
    context.handle_shift()
    clock.advance(0.1)
    context.handle_shift()
    clock.advance(1.0)

    context.handle_shift()

    assert context.is_caps_lock
    assert context.is_shifted


def test_slow_taps_do_not_lock(context, clock):
    """Test that taps outside the window are single taps."""
    context.handle_shift()
    clock.advance(0.5)
    context.handle_shift()

    assert not context.is_caps_lock
    assert not context.is_shifted


def test_custom_window(clock):
    """Test a configured double-tap window."""
    context = KeyboardContext(double_tap_window=1.0, clock=clock)
    context.handle_shift()
    clock.advance(0.8)
    context.handle_shift()

    assert context.is_caps_lock


def test_explicit_timestamps():
    """Test passing tap times directly."""
    context = KeyboardContext()
    context.handle_shift(now=10.0)
    context.handle_shift(now=10.2)

    assert context.is_caps_lock


def test_release_single_shift(context):
    """Test that one-shot shift is released."""
    context.handle_shift()
    context.release_single_shift()
    assert not context.is_shifted


def test_release_keeps_caps_lock(context, clock):
    """Test that caps lock survives a release."""
    context.handle_shift()
    clock.advance(0.1)
    context.handle_shift()

    context.release_single_shift()

    assert context.is_shifted
    assert context.is_caps_lock


def test_contexts_are_independent(clock):
    """Test that state is per context."""
    first = KeyboardContext(clock=clock)
    second = KeyboardContext(clock=clock)

    first.handle_shift()

    assert first.is_shifted
    assert not second.is_shifted
