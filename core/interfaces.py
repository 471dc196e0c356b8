# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Protocol, Tuple


class Point(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Intent(Enum):
    TURN_UP = "turn_up"
    TURN_DOWN = "turn_down"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    PAUSE = "pause"
    QUIT = "quit"
    RESTART = "restart"
    NONE = "none"


TURNS = {
    Intent.TURN_UP: Direction.UP,
    Intent.TURN_DOWN: Direction.DOWN,
    Intent.TURN_LEFT: Direction.LEFT,
    Intent.TURN_RIGHT: Direction.RIGHT,
}


class EndReason(str, Enum):
    WALL = "wall"
    SELF = "self"
    QUIT = "quit"
    BOARD_FULL = "board_full"

    @property
    def won(self) -> bool:
        return self is EndReason.BOARD_FULL


@dataclass(frozen=True)
class BoardDimensions:
    width: int
    height: int
    ideal_width: int
    ideal_height: int
    was_scaled: bool = False
    note: str = ""              # scaling message, empty when not scaled

    @property
    def cells(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Point, ...]    # head first
    food: Optional[Point]
    direction: Direction
    next_direction: Direction
    score: int
    speed: int                  # ms per tick
    game_over: bool
    paused: bool
    reason: EndReason | None
    ticks: int
    grid_w: int
    grid_h: int

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def head(self) -> Point:
        return self.snake[0]


class InputSource(Protocol):
    def has_pending_input(self) -> bool: ...
    def read_one(self) -> bytes: ...
    def flush(self) -> None: ...


class TerminalUnavailable(RuntimeError):
    """The interactive keyboard cannot be acquired (no TTY or console)."""
