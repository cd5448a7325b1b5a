"""Pytest fixtures for dstruck tests."""

import logging

import pytest

from dstruck.keyboard import KeyboardContext, KeyHandler


class FakeClock:
    """Clock for shift timing, advanced by hand or by a fixed step per reading."""

    def __init__(self, start: float = 100.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        now = self.now
        self.now += self.step
        return now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_dstruck_logger():
    """Drop handlers installed by CLI runs so they don't outlive their streams."""
    yield
    logging.getLogger("dstruck").handlers.clear()


@pytest.fixture
def sample_text():
    """Sample mixed text."""
    return "Hello World 123"


@pytest.fixture
def sample_double_struck():
    """Double-struck rendering of sample_text."""
    return "ℍ𝕖𝕝𝕝𝕠 𝕎𝕠𝕣𝕝𝕕 𝟙𝟚𝟛"


@pytest.fixture
def clock():
    """Fake clock starting at t=100s."""
    return FakeClock()


@pytest.fixture
def context(clock):
    """Keyboard context driven by the fake clock."""
    return KeyboardContext(clock=clock)


@pytest.fixture
def handler(context):
    """Key handler over a fresh document."""
    return KeyHandler(context)
