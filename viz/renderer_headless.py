# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Tuple
from core.interfaces import BoardDimensions, Snapshot
from viz.render_iface import Renderer

class HeadlessRenderer(Renderer):
    """Draws nothing; keeps what it was asked to draw."""
    def __init__(self):
        self.frames: List[Tuple[BoardDimensions, Snapshot]] = []
        self.game_overs: List[Tuple[Snapshot, str]] = []
        self.opened = 0
        self.closed = 0
        self.welcomed = False
        self.farewelled = False

    @property
    def last(self) -> Optional[Snapshot]:
        return self.frames[-1][1] if self.frames else None

    def open(self) -> None:
        self.opened += 1
    def draw(self, board: BoardDimensions, snap: Snapshot) -> None:
        self.frames.append((board, snap))
    def draw_welcome(self) -> None:
        self.welcomed = True
    def draw_game_over(self, snap: Snapshot, tier: str) -> None:
        self.game_overs.append((snap, tier))
    def draw_farewell(self) -> None:
        self.farewelled = True
    def close(self) -> None:
        self.closed += 1
