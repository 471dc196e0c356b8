# core/game_state.py  (pure rules, no terminal)
from __future__ import annotations
import logging
import random
from collections import deque
from typing import Deque, Optional

from config import AppConfig
from .interfaces import (
    DELTAS, OPPOSITES, TURNS,
    BoardDimensions, Direction, EndReason, Intent, Point, Snapshot,
)

logger = logging.getLogger(__name__)

TIERS = [
    (50, "LEGENDARY! You're a Snake Master!"),
    (30, "AMAZING! Excellent skills!"),
    (15, "Great job! Keep practicing!"),
    (0, "Good try! Practice makes perfect!"),
]


def score_tier(score: int) -> str:
    for threshold, message in TIERS:
        if score >= threshold:
            return message
    return TIERS[-1][1]


class GameState:
    """
    One play session: snake, food, direction buffer, score and speed.

    The snake is a deque with the head at index 0. A new GameState is built
    for every session; nothing here touches the terminal.
    """

    def __init__(self, board: BoardDimensions, cfg: AppConfig, rng: Optional[random.Random] = None):
        self.board = board
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)

        cx, cy = board.width // 2, board.height // 2
        self.snake: Deque[Point] = deque([Point(cx, cy)])
        for i in range(1, cfg.start_len):
            if board.width > i:
                self.snake.append(Point(max(0, cx - i), cy))

        self.direction = Direction.NONE
        self.next_direction = Direction.NONE
        self.score = 0
        self.speed = cfg.initial_speed_ms
        self.ticks = 0
        self.game_over = False
        self.paused = False
        self.reason: Optional[EndReason] = None
        self.food: Optional[Point] = None
        self.food = self.spawn_food()

    @property
    def head(self) -> Point:
        return self.snake[0]

    # ---- input ----
    def steer(self, direction: Direction) -> None:
        # reversals are queued here and dropped at commit time
        self.next_direction = direction
        if self.direction is Direction.NONE:
            self.direction = direction

    def toggle_pause(self) -> None:
        if not self.game_over:
            self.paused = not self.paused

    def quit(self) -> None:
        self._end(EndReason.QUIT)

    def apply_intent(self, intent: Intent) -> None:
        if self.game_over:
            return
        if intent is Intent.PAUSE:
            self.toggle_pause()
        elif intent is Intent.QUIT:
            self.quit()
        elif intent in TURNS and not self.paused:
            self.steer(TURNS[intent])

    # ---- simulation ----
    def spawn_food(self) -> Optional[Point]:
        """Uniform rejection sampling over free cells; a full board ends the game."""
        occupied = set(self.snake)
        # start segments can overlap on narrow boards, so count cells, not segments
        if len(occupied) >= self.board.cells:
            self._end(EndReason.BOARD_FULL)
            return None
        while True:
            p = Point(self.rng.randrange(self.board.width), self.rng.randrange(self.board.height))
            if p not in occupied:
                return p

    def tick(self) -> Snapshot:
        if self.game_over or self.paused:
            return self.snapshot()

        if self.next_direction is not Direction.NONE and OPPOSITES.get(self.direction) is not self.next_direction:
            self.direction = self.next_direction
        if self.direction is Direction.NONE:
            return self.snapshot()

        self.ticks += 1
        hx, hy = self.snake[0]
        dx, dy = DELTAS[self.direction]
        new_head = Point(hx + dx, hy + dy)

        if not (0 <= new_head.x < self.board.width and 0 <= new_head.y < self.board.height):
            self._end(EndReason.WALL)
            return self.snapshot()
        if new_head in self.snake:
            self._end(EndReason.SELF)
            return self.snapshot()

        self.snake.appendleft(new_head)
        if new_head == self.food:
            self.score += 1
            self.speed = max(self.cfg.min_speed_ms, self.cfg.initial_speed_ms - self.score * self.cfg.speed_increment_ms)
            logger.debug("food eaten at %s score=%d speed=%dms", new_head, self.score, self.speed)
            self.food = self.spawn_food()
        else:
            self.snake.pop()
        return self.snapshot()

    def _end(self, reason: EndReason) -> None:
        if self.game_over:
            return
        self.game_over, self.reason = True, reason
        self.paused = False
        logger.info("game over: reason=%s score=%d length=%d", reason.value, self.score, len(self.snake))

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            next_direction=self.next_direction,
            score=self.score,
            speed=self.speed,
            game_over=self.game_over,
            paused=self.paused,
            reason=self.reason,
            ticks=self.ticks,
            grid_w=self.board.width,
            grid_h=self.board.height,
        )
