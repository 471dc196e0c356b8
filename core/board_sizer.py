# core/board_sizer.py  (pure sizing policy, no terminal access)
from __future__ import annotations
import logging
from typing import Optional, Tuple

from config import AppConfig
from .interfaces import BoardDimensions

logger = logging.getLogger(__name__)

H_PADDING = 4
V_PADDING = 9
SIZE_FLOOR = 5
NOTE_MARGIN = 4


def _fit_axis(terminal: Optional[int], padding: int, ideal: int, minimum: int, floor: int) -> int:
    if terminal is None or terminal <= 0:
        available = ideal
    else:
        available = terminal - padding
    available = max(available, 1)

    size = min(ideal, available)
    if available < floor:
        size = available
    elif size < minimum and available >= minimum:
        size = minimum
    return max(size, 1)


def compute(
    terminal_width: Optional[int],
    terminal_height: Optional[int],
    ideal_width: int,
    ideal_height: int,
    min_width: int,
    min_height: int,
    *,
    h_padding: int = H_PADDING,
    v_padding: int = V_PADDING,
    floor: int = SIZE_FLOOR,
    note_margin: int = NOTE_MARGIN,
) -> BoardDimensions:
    """
    Fit the play field into the terminal.

    Unknown or non-positive terminal sizes fall back to the ideal size. Below
    `floor` cells of available space an axis shrinks to whatever is left
    instead of refusing to run; otherwise it is raised to the minimum when
    there is room for it.
    """
    width = _fit_axis(terminal_width, h_padding, ideal_width, min_width, floor)
    height = _fit_axis(terminal_height, v_padding, ideal_height, min_height, floor)

    was_scaled = width < ideal_width or height < ideal_height
    note = ""
    if was_scaled:
        note = f"Arena scaled to {width}x{height} (ideal {ideal_width}x{ideal_height})"
        if len(note) > width + note_margin:
            note = f"Arena {width}x{height}"

    return BoardDimensions(
        width=width,
        height=height,
        ideal_width=ideal_width,
        ideal_height=ideal_height,
        was_scaled=was_scaled,
        note=note,
    )


def size_board(cfg: AppConfig, terminal_size: Optional[Tuple[int, int]]) -> BoardDimensions:
    cols, rows = terminal_size if terminal_size is not None else (None, None)
    board = compute(
        cols, rows,
        cfg.ideal_w, cfg.ideal_h,
        cfg.min_w, cfg.min_h,
        h_padding=cfg.h_padding,
        v_padding=cfg.v_padding,
        floor=cfg.size_floor,
        note_margin=cfg.note_margin,
    )
    logger.debug("terminal=%s board=%dx%d scaled=%s", terminal_size, board.width, board.height, board.was_scaled)
    return board
