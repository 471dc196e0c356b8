# viz/keyboard_posix.py  (POSIX raw keyboard)
from __future__ import annotations
import logging
import os
import select
import sys
import termios
import tty
from typing import Optional, TextIO

from core.interfaces import TerminalUnavailable

logger = logging.getLogger(__name__)

class TerminalKeyboard:
    """
    Non-blocking byte source over stdin.

    Use as a context manager: entering switches the terminal to cbreak mode
    without echo, leaving restores the saved attributes on every exit path.
    """
    def __init__(self, stdin: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self._saved = None

    @property
    def fd(self) -> int:
        return self.stdin.fileno()

    @property
    def active(self) -> bool:
        return self._saved is not None

    def wait_for_start(self) -> None:
        """Blocking line read, used before raw mode is enabled."""
        self.stdin.readline()

    def __enter__(self) -> "TerminalKeyboard":
        if not os.isatty(self.fd):
            raise TerminalUnavailable("stdin is not a terminal; the game needs an interactive TTY")
        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        logger.debug("keyboard: cbreak mode on fd %d", self.fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
        finally:
            self._saved = None
            logger.debug("keyboard: terminal mode restored")

    def has_pending_input(self) -> bool:
        readable, _, _ = select.select([self.fd], [], [], 0)
        return bool(readable)

    def read_one(self) -> bytes:
        return os.read(self.fd, 1)

    def flush(self) -> None:
        termios.tcflush(self.fd, termios.TCIFLUSH)
