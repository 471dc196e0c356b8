# core/game_loop.py
from __future__ import annotations
import logging
import random
import time
from enum import Enum
from typing import Callable, Optional, Protocol, Tuple

from config import AppConfig
from .board_sizer import size_board
from .game_state import GameState, score_tier
from .input_mapper import InputMapper
from .interfaces import BoardDimensions, InputSource, Intent, Snapshot

logger = logging.getLogger(__name__)

SizeQuery = Callable[[], Optional[Tuple[int, int]]]


class Phase(Enum):
    WELCOME = "welcome"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    TERMINATED = "terminated"


class Keyboard(InputSource, Protocol):
    def wait_for_start(self) -> None: ...
    def __enter__(self): ...
    def __exit__(self, exc_type, exc, tb): ...


class GameLoop:
    """
    Owns the session: welcome, play/pause frames, game over and replay.

    All collaborators are injected; `sleep` takes seconds like time.sleep so
    tests can run the loop without waiting.
    """

    def __init__(
        self,
        cfg: AppConfig,
        keyboard: Keyboard,
        renderer,
        terminal_size: SizeQuery,
        *,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.cfg = cfg
        self.keyboard = keyboard
        self.renderer = renderer
        self.terminal_size = terminal_size
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.sleep = sleep
        self.mapper = InputMapper(keyboard)
        self.phase = Phase.WELCOME
        self.board: Optional[BoardDimensions] = None
        self.state: Optional[GameState] = None
        self.sessions = 0

    # ---- outer state machine ----
    def run(self) -> None:
        self.phase = Phase.WELCOME
        self.renderer.draw_welcome()
        self.keyboard.wait_for_start()
        with self.keyboard:
            self.keyboard.flush()
            self.sleep(self.cfg.start_delay_ms / 1000)
            while self.phase is not Phase.TERMINATED:
                self.play_session()
        self.renderer.draw_farewell()

    def play_session(self) -> None:
        self.renderer.open()
        try:
            self.reset()
            while not self.state.game_over:
                self.step()
            self.phase = Phase.GAME_OVER
            again = self.await_restart()
        finally:
            self.renderer.close()

        if again:
            self.sleep(self.cfg.replay_delay_ms / 1000)
        else:
            self.phase = Phase.TERMINATED

    def reset(self) -> GameState:
        self.board = size_board(self.cfg, self._query_size())
        self.keyboard.flush()
        self.mapper.reset()
        self.state = GameState(self.board, self.cfg, self.rng)
        self.sessions += 1
        self.phase = Phase.PLAYING
        logger.info("session %d: board %dx%d%s", self.sessions, self.board.width, self.board.height,
                    f" ({self.board.note})" if self.board.was_scaled else "")
        return self.state

    def _query_size(self) -> Optional[Tuple[int, int]]:
        try:
            return self.terminal_size()
        except OSError as exc:
            logger.debug("terminal size query failed, using ideal size: %s", exc)
            return None

    # ---- one frame ----
    def step(self) -> Snapshot:
        """poll -> apply -> tick (unless paused) -> render -> sleep."""
        state = self.state
        state.apply_intent(self.mapper.poll())
        if not state.paused:
            state.tick()
        snap = state.snapshot()
        self.renderer.draw(self.board, snap)
        self.sleep(state.speed / 1000)

        if state.game_over:
            self.phase = Phase.GAME_OVER
        else:
            self.phase = Phase.PAUSED if state.paused else Phase.PLAYING
        return snap

    # ---- game over ----
    def await_restart(self) -> bool:
        """Block on short polls until restart (True) or quit (False)."""
        snap = self.state.snapshot()
        self.keyboard.flush()
        self.mapper.reset()
        self.renderer.draw_game_over(snap, score_tier(snap.score))
        while True:
            intent = self.mapper.poll()
            if intent is Intent.RESTART:
                return True
            if intent is Intent.QUIT:
                return False
            self.sleep(self.cfg.game_over_poll_ms / 1000)
