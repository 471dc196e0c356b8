# viz/renderer_ansi.py
from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional, TextIO, Tuple

import numpy as np

from config import AppConfig
from core.interfaces import BoardDimensions, Snapshot
import viz.renderer_colors as theme

logger = logging.getLogger(__name__)

ALT_SCREEN_ON = "\033[?1049h"
ALT_SCREEN_OFF = "\033[?1049l"
CLEAR = "\033[2J"
HOME = "\033[H"
CLEAR_TO_END = "\033[J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

BANNER = [
    "███████╗███╗   ██╗ █████╗ ██╗  ██╗███████╗",
    "██╔════╝████╗  ██║██╔══██╗██║ ██╔╝██╔════╝",
    "███████╗██╔██╗ ██║███████║█████╔╝ █████╗  ",
    "╚════██║██║╚██╗██║██╔══██║██╔═██╗ ██╔══╝  ",
    "███████║██║ ╚████║██║  ██║██║  ██╗███████╗",
    "╚══════╝╚═╝  ╚═══╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝",
]


def terminal_size(stream: Optional[TextIO] = None) -> Optional[Tuple[int, int]]:
    """(columns, rows) of the terminal behind `stream`, or None when unknown."""
    stream = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError, AttributeError) as exc:
        logger.debug("terminal size unavailable: %s", exc)
        return None
    return size.columns, size.lines


def display_speed(speed_ms: int, cfg: AppConfig) -> int:
    # grows as the tick interval shrinks; 50 at the starting speed
    return max(0, cfg.initial_speed_ms - speed_ms + 50)


def cell_grid(snap: Snapshot) -> np.ndarray:
    grid = np.full((snap.grid_h, snap.grid_w), " ", dtype=object)
    for (x, y) in snap.snake[1:]:
        grid[y, x] = theme.BODY + theme.BODY_CHAR + theme.RESET
    if snap.snake:
        hx, hy = snap.snake[0]
        grid[hy, hx] = theme.HEAD + theme.HEAD_CHAR + theme.RESET
    if snap.food is not None:
        fx, fy = snap.food
        grid[fy, fx] = theme.FOOD + theme.FOOD_CHAR + theme.RESET
    return grid


def frame_lines(board: BoardDimensions, snap: Snapshot, cfg: AppConfig) -> List[str]:
    w = board.width
    title = cfg.render_title
    inner = w + 2
    pad = max(0, (inner - len(title)) // 2)
    tail = max(0, inner - len(title) - pad)

    lines = [
        theme.BOLD + theme.BORDER + "╔" + "═" * inner + "╗",
        "║" + " " * pad + theme.TITLE + title + theme.BORDER + " " * tail + "║",
        "╚" + "═" * inner + "╝" + theme.RESET,
        f"  {theme.HUD_SCORE}Score: {theme.BOLD}{snap.score}{theme.RESET}"
        f"  {theme.HUD_SPEED}Speed: {theme.BOLD}{display_speed(snap.speed, cfg)}{theme.RESET}",
    ]
    if board.was_scaled and board.note:
        lines.append(f"  {theme.NOTE}{board.note}{theme.RESET}")

    lines.append(f"  {theme.BORDER}┌" + "─" * w + "┐" + theme.RESET)
    for row in cell_grid(snap):
        lines.append(f"  {theme.BORDER}│{theme.RESET}" + "".join(row) + f"{theme.BORDER}│{theme.RESET}")
    lines.append(f"  {theme.BORDER}└" + "─" * w + "┘" + theme.RESET)

    if snap.paused:
        lines.append(f"  {theme.YELLOW}{theme.BOLD}PAUSED - Press SPACE to resume{theme.RESET}")
    else:
        lines.append(f"  {theme.CONTROLS}Controls: WASD or Arrow Keys | SPACE to pause | Q to quit{theme.RESET}")
    return lines


def game_over_lines(snap: Snapshot, tier: str) -> List[str]:
    heading = "YOU FILLED THE BOARD!" if snap.reason is not None and snap.reason.won else "GAME OVER!"
    color = next(c for threshold, c in theme.TIER_COLORS if snap.score >= threshold)
    return [
        "",
        "",
        theme.RED + theme.BOLD + "    ╔═══════════════════════════════════════╗",
        "    ║" + heading.center(39) + "║",
        "    ╚═══════════════════════════════════════╝" + theme.RESET,
        "",
        f"    {theme.YELLOW}Final Score: {theme.BOLD}{snap.score}{theme.RESET}",
        f"    {theme.MAGENTA}Snake Length: {theme.BOLD}{snap.length}{theme.RESET}",
        "",
        f"    {color}{tier}{theme.RESET}",
        "",
        f"    {theme.WHITE}Press {theme.GREEN}R{theme.WHITE} to play again or "
        f"{theme.RED}Q{theme.WHITE} to quit...{theme.RESET}",
    ]


class AnsiRenderer:
    """Writes frames as ANSI escape sequences to a text stream (stdout by default)."""

    def __init__(self, cfg: AppConfig, stream: Optional[TextIO] = None):
        self.cfg = cfg
        self.stream = stream if stream is not None else sys.stdout
        self._open = False

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def current_size(self) -> Optional[Tuple[int, int]]:
        return terminal_size(self.stream)

    def open(self) -> None:
        self._write(ALT_SCREEN_ON + CLEAR + HOME + HIDE_CURSOR)
        self._open = True

    def draw(self, board: BoardDimensions, snap: Snapshot) -> None:
        self._write(HOME + "\n".join(frame_lines(board, snap, self.cfg)) + CLEAR_TO_END)

    def draw_welcome(self) -> None:
        lines = ["", ""]
        lines += [f"    {theme.GREEN}{theme.BOLD}{row}{theme.RESET}" for row in BANNER]
        lines += [
            "",
            f"  {theme.YELLOW}How to Play:{theme.RESET}",
            f"  • Use {theme.GREEN}WASD{theme.RESET} or {theme.GREEN}Arrow Keys{theme.RESET} to move",
            f"  • Eat the {theme.RED}red food{theme.RESET} to grow",
            "  • Don't hit walls or yourself!",
            f"  • Press {theme.MAGENTA}SPACE{theme.RESET} to pause",
            "  • The game speeds up as you score!",
            "",
            f"{theme.BOLD}  Press ENTER to start...{theme.RESET}",
        ]
        self._write(CLEAR + HOME + "\n".join(lines))

    def draw_game_over(self, snap: Snapshot, tier: str) -> None:
        self._write(CLEAR + HOME + "\n".join(game_over_lines(snap, tier)))

    def draw_farewell(self) -> None:
        self._write(f"\n\n  {theme.CYAN}Thanks for playing!{theme.RESET}\n\n")

    def close(self) -> None:
        if not self._open:
            return
        try:
            self._write(SHOW_CURSOR + CLEAR + HOME + ALT_SCREEN_OFF)
        finally:
            self._open = False
