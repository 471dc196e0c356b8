# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from core.interfaces import BoardDimensions, Snapshot

class Renderer(Protocol):
    def open(self) -> None: ...
    def draw(self, board: BoardDimensions, snap: Snapshot) -> None: ...
    def draw_welcome(self) -> None: ...
    def draw_game_over(self, snap: Snapshot, tier: str) -> None: ...
    def draw_farewell(self) -> None: ...
    def close(self) -> None: ...
