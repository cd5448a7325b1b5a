"""Headless double-struck keyboard."""

from dstruck.keyboard.context import KeyboardContext
from dstruck.keyboard.document import TextDocument
from dstruck.keyboard.handler import KeyHandler, KeyNotOnLayoutError


__all__ = ['KeyboardContext', 'KeyHandler', 'KeyNotOnLayoutError', 'TextDocument']
