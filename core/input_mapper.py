# core/input_mapper.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from .interfaces import InputSource, Intent

ESC = b"\x1b"
BRACKET = b"["
CONSOLE_PREFIXES = (b"\x00", b"\xe0")

KEY_INTENTS = {
    b"w": Intent.TURN_UP,
    b"s": Intent.TURN_DOWN,
    b"a": Intent.TURN_LEFT,
    b"d": Intent.TURN_RIGHT,
    b" ": Intent.PAUSE,
    b"q": Intent.QUIT,
    b"r": Intent.RESTART,
}

ARROW_INTENTS = {
    b"A": Intent.TURN_UP,
    b"B": Intent.TURN_DOWN,
    b"C": Intent.TURN_RIGHT,
    b"D": Intent.TURN_LEFT,
}

# scan codes that follow a console prefix byte
CONSOLE_INTENTS = {
    b"H": Intent.TURN_UP,
    b"P": Intent.TURN_DOWN,
    b"M": Intent.TURN_RIGHT,
    b"K": Intent.TURN_LEFT,
}


class _Decode(Enum):
    IDLE = 0
    SAW_ESCAPE = 1
    SAW_BRACKET = 2
    SAW_CONSOLE_PREFIX = 3


class InputMapper:
    """
    Turns raw bytes into at most one Intent per poll.

    Arrow keys arrive as ESC '[' letter. The decoder keeps its position in
    that sequence between polls, so a lone ESC never blocks waiting for the
    rest of it. The Windows console sends arrows as a 0x00 or 0xE0 prefix
    followed by a scan code, decoded the same way.
    """

    def __init__(self, source: Optional[InputSource] = None):
        self.source = source
        self._state = _Decode.IDLE

    @property
    def pending_sequence(self) -> bool:
        return self._state is not _Decode.IDLE

    def reset(self) -> None:
        self._state = _Decode.IDLE

    def feed(self, byte: bytes) -> Optional[Intent]:
        """Advance the decoder by one byte. None means the key is not complete yet."""
        if self._state is _Decode.SAW_ESCAPE:
            if byte == BRACKET:
                self._state = _Decode.SAW_BRACKET
                return None
            self._state = _Decode.IDLE
            return self.feed(byte)

        if self._state is _Decode.SAW_BRACKET:
            self._state = _Decode.IDLE
            return ARROW_INTENTS.get(byte, Intent.NONE)

        if self._state is _Decode.SAW_CONSOLE_PREFIX:
            self._state = _Decode.IDLE
            return CONSOLE_INTENTS.get(byte, Intent.NONE)

        if byte == ESC:
            self._state = _Decode.SAW_ESCAPE
            return None
        if byte in CONSOLE_PREFIXES:
            self._state = _Decode.SAW_CONSOLE_PREFIX
            return None
        return KEY_INTENTS.get(byte.lower(), Intent.NONE)

    def poll(self) -> Intent:
        if self.source is None:
            return Intent.NONE
        while self.source.has_pending_input():
            intent = self.feed(self.source.read_one())
            if intent is not None:
                return intent
        return Intent.NONE
