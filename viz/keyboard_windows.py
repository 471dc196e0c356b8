# viz/keyboard_windows.py  (Windows console keyboard)
from __future__ import annotations
import logging
import os
import sys
from typing import Optional, TextIO

from core.interfaces import TerminalUnavailable

logger = logging.getLogger(__name__)

class ConsoleKeyboard:
    """
    Byte source over the Windows console via msvcrt.

    The console already hands keys over unbuffered and unechoed, so entering
    only checks that stdin is interactive and turns on ANSI output. Arrow keys
    arrive as a 0x00 or 0xE0 prefix followed by a scan code byte.
    """
    def __init__(self, console=None, stdin: Optional[TextIO] = None, enable_ansi: bool = True):
        if console is None:
            import msvcrt as console
        self.console = console
        self.stdin = stdin if stdin is not None else sys.stdin
        self.enable_ansi = enable_ansi
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def wait_for_start(self) -> None:
        self.stdin.readline()

    def __enter__(self) -> "ConsoleKeyboard":
        if not self.stdin.isatty():
            raise TerminalUnavailable("stdin is not a console; the game needs an interactive terminal")
        if self.enable_ansi:
            # an empty shell command switches the console into VT mode
            os.system("")
        self._active = True
        logger.debug("keyboard: console input active")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._active = False

    def has_pending_input(self) -> bool:
        return bool(self.console.kbhit())

    def read_one(self) -> bytes:
        return self.console.getch()

    def flush(self) -> None:
        while self.console.kbhit():
            self.console.getch()
