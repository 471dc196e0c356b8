# tests/conftest.py
import os
import random
import sys

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from config import AppConfig
from core.interfaces import BoardDimensions


class ScriptedInput:
    """InputSource over an in-memory byte buffer; push() makes more bytes available."""
    def __init__(self, data=b""):
        self.buf = bytes(data)
        self.flushes = 0
        self.entered = 0
        self.exited = 0
        self.started = False

    def push(self, data):
        self.buf += bytes(data)

    def has_pending_input(self):
        return bool(self.buf)

    def read_one(self):
        b, self.buf = self.buf[:1], self.buf[1:]
        return b

    def flush(self):
        self.flushes += 1
        self.buf = b""

    def wait_for_start(self):
        self.started = True

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1


class TypeWhileSleeping:
    """
    Fake sleep that "types" the next scripted chunk into `source` on every
    call, so bytes land between one frame and the next poll. Once the script
    runs out it keeps typing `then`.
    """
    def __init__(self, source, chunks=(), then=b""):
        self.source = source
        self.chunks = [bytes(c) for c in chunks]
        self.then = bytes(then)
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)
        self.source.push(self.chunks.pop(0) if self.chunks else self.then)


@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def board_factory():
    def make(w=10, h=10):
        return BoardDimensions(width=w, height=h, ideal_width=w, ideal_height=h)
    return make

@pytest.fixture
def state_factory(cfg, board_factory):
    from core.game_state import GameState
    def make(w=10, h=10, seed=7, **cfg_kwargs):
        c = cfg.with_(**cfg_kwargs) if cfg_kwargs else cfg
        return GameState(board_factory(w, h), c, random.Random(seed))
    return make

@pytest.fixture
def scripted_input():
    return ScriptedInput

@pytest.fixture
def typing_sleep():
    return TypeWhileSleeping

@pytest.fixture
def sleeps():
    calls = []
    def sleep(seconds):
        calls.append(seconds)
    sleep.calls = calls
    return sleep
