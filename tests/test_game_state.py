# tests/test_game_state.py
import random
from collections import deque

import pytest

from core.board_sizer import compute
from core.game_state import GameState, score_tier
from core.interfaces import Direction, EndReason, Intent, Point


class SequenceRng:
    """randrange() replays a fixed list of values."""
    def __init__(self, values):
        self.values = list(values)
    def randrange(self, n):
        v = self.values.pop(0)
        assert 0 <= v < n
        return v


def _moving(state, direction):
    state.direction = direction
    state.next_direction = direction
    return state


# ---- reset ----

def test_reset_centers_snake_and_spawns_food(state_factory):
    s = state_factory(10, 10)
    assert list(s.snake) == [(5, 5), (4, 5), (3, 5)]
    assert s.direction is Direction.NONE and s.next_direction is Direction.NONE
    assert s.score == 0 and s.speed == s.cfg.initial_speed_ms
    assert not s.game_over and not s.paused
    assert s.food is not None and s.food not in s.snake

@pytest.mark.parametrize("w, expected_len", [(1, 1), (2, 2), (3, 3), (40, 3)])
def test_narrow_boards_start_shorter(state_factory, w, expected_len):
    s = state_factory(w, 5)
    assert len(s.snake) == expected_len
    assert all(p.x >= 0 for p in s.snake)

def test_overlapping_start_segments_leave_free_cells(state_factory):
    # 3x1: segments at (1,0), (0,0), (0,0) cover two of three cells
    s = state_factory(3, 1)
    assert list(s.snake) == [(1, 0), (0, 0), (0, 0)]
    assert not s.game_over
    assert s.reason is None
    assert s.food == (2, 0)

def test_tiny_terminal_board_is_playable(cfg):
    board = compute(7, 10, 40, 20, 12, 8)
    assert (board.width, board.height) == (3, 1)
    s = GameState(board, cfg, random.Random(0))
    assert not s.game_over
    assert s.food == (2, 0)

def test_one_by_one_board_is_full_from_the_start(state_factory):
    s = state_factory(1, 1)
    assert s.game_over
    assert s.reason is EndReason.BOARD_FULL
    assert s.food is None


# ---- tick ----

def test_no_movement_before_first_input(state_factory):
    s = state_factory()
    before = s.snapshot()
    after = s.tick()
    assert after.snake == before.snake
    assert after.ticks == 0

def test_move_without_food_keeps_length(state_factory):
    s = _moving(state_factory(), Direction.RIGHT)
    s.food = Point(0, 0)
    snap = s.tick()
    assert snap.head == (6, 5)
    assert snap.length == 3
    assert snap.snake[-1] == (4, 5)

def test_eating_food_grows_scores_and_respawns(state_factory):
    s = _moving(state_factory(10, 10), Direction.RIGHT)
    assert s.head == (5, 5) and len(s.snake) == 3
    s.food = Point(6, 5)
    snap = s.tick()
    assert snap.head == (6, 5)
    assert snap.score == 1
    assert snap.length == 4
    assert snap.speed == 145
    assert snap.food is not None and snap.food not in snap.snake

def test_reversal_is_ignored_at_commit(state_factory):
    s = _moving(state_factory(), Direction.RIGHT)
    s.food = Point(0, 0)
    s.steer(Direction.LEFT)
    assert s.next_direction is Direction.LEFT
    snap = s.tick()
    assert snap.direction is Direction.RIGHT
    assert snap.head == (6, 5)
    assert not snap.game_over

def test_first_turn_snaps_direction_immediately(state_factory):
    s = state_factory()
    s.food = Point(0, 0)
    s.apply_intent(Intent.TURN_UP)
    assert s.direction is Direction.UP
    assert s.tick().head == (5, 4)

def test_first_turn_can_point_into_own_body(state_factory):
    # committed right away, so the next tick runs into the neck
    s = state_factory()
    s.apply_intent(Intent.TURN_LEFT)
    snap = s.tick()
    assert snap.game_over and snap.reason is EndReason.SELF

def test_wall_collision_leaves_board_untouched(state_factory):
    s = _moving(state_factory(), Direction.RIGHT)
    s.snake = deque([Point(9, 5), Point(8, 5), Point(7, 5)])
    s.food = Point(0, 0)
    before = s.snapshot()
    snap = s.tick()
    assert snap.game_over and snap.reason is EndReason.WALL
    assert snap.snake == before.snake
    assert snap.food == before.food
    assert snap.score == before.score

@pytest.mark.parametrize("head, direction", [
    (Point(0, 3), Direction.LEFT),
    (Point(3, 0), Direction.UP),
    (Point(3, 9), Direction.DOWN),
])
def test_every_wall_ends_the_game(state_factory, head, direction):
    s = _moving(state_factory(), direction)
    s.snake = deque([head])
    s.food = Point(5, 5)
    assert s.tick().reason is EndReason.WALL

def test_self_collision(state_factory):
    s = _moving(state_factory(), Direction.UP)
    s.snake = deque([Point(5, 5), Point(5, 6), Point(6, 6), Point(6, 5), Point(6, 4)])
    s.food = Point(0, 0)
    before = s.snapshot()
    s.steer(Direction.RIGHT)
    snap = s.tick()
    assert snap.game_over and snap.reason is EndReason.SELF
    assert snap.snake == before.snake

def test_finished_game_does_not_tick(state_factory):
    s = _moving(state_factory(), Direction.RIGHT)
    s.quit()
    before = s.snapshot()
    assert s.tick() == before

def test_speed_is_monotonic_and_floored(state_factory):
    s = _moving(state_factory(40, 40, speed_increment_ms=10), Direction.UP)
    speeds = [s.speed]
    for _ in range(15):
        hx, hy = s.head
        s.food = Point(hx, hy - 1)
        snap = s.tick()
        assert not snap.game_over
        speeds.append(snap.speed)
    assert all(b <= a for a, b in zip(speeds, speeds[1:]))
    assert speeds[-1] == s.cfg.min_speed_ms == 50
    assert s.score == 15

def test_eating_last_free_cell_wins(state_factory):
    s = _moving(state_factory(3, 1, start_len=2), Direction.RIGHT)
    assert list(s.snake) == [(1, 0), (0, 0)]
    assert s.food == (2, 0)
    snap = s.tick()
    assert snap.score == 1
    assert snap.length == 3
    assert snap.game_over
    assert snap.reason is EndReason.BOARD_FULL and snap.reason.won
    assert snap.food is None


# ---- food ----

def test_spawn_food_rejects_snake_cells(board_factory, cfg):
    rng = SequenceRng([5, 5, 4, 5, 3, 5, 7, 7])
    s = GameState(board_factory(10, 10), cfg, rng)
    assert s.food == (7, 7)
    assert rng.values == []

def test_spawn_food_on_full_board_ends_game(state_factory):
    s = state_factory(5, 5)
    s.snake = deque(Point(x, y) for y in range(5) for x in range(5))
    assert s.spawn_food() is None
    assert s.game_over
    assert s.reason is EndReason.BOARD_FULL

@pytest.mark.parametrize("seed", range(5))
def test_food_never_on_snake_during_play(board_factory, cfg, seed):
    rng = random.Random(seed)
    s = GameState(board_factory(8, 6), cfg, random.Random(seed))
    turns = [Intent.TURN_UP, Intent.TURN_DOWN, Intent.TURN_LEFT, Intent.TURN_RIGHT]
    for _ in range(500):
        if s.game_over:
            s = GameState(s.board, cfg, s.rng)
        s.apply_intent(rng.choice(turns))
        snap = s.tick()
        if not snap.game_over:
            assert snap.food not in snap.snake
            assert len(set(snap.snake)) == snap.length


# ---- intents ----

def test_pause_blocks_turns_and_ticks(state_factory):
    s = _moving(state_factory(), Direction.RIGHT)
    s.apply_intent(Intent.PAUSE)
    assert s.paused
    before = s.snapshot()
    s.apply_intent(Intent.TURN_UP)
    assert s.next_direction is Direction.RIGHT
    assert s.tick().snake == before.snake
    s.apply_intent(Intent.PAUSE)
    assert not s.paused

def test_quit_intent_ends_game(state_factory):
    s = state_factory()
    s.apply_intent(Intent.QUIT)
    assert s.game_over and s.reason is EndReason.QUIT
    assert not s.reason.won

def test_quit_while_paused(state_factory):
    s = state_factory()
    s.apply_intent(Intent.PAUSE)
    s.apply_intent(Intent.QUIT)
    assert s.game_over and not s.paused

def test_restart_intent_ignored_in_play(state_factory):
    s = state_factory()
    before = s.snapshot()
    s.apply_intent(Intent.RESTART)
    assert s.snapshot() == before


@pytest.mark.parametrize("score, word", [
    (0, "Good try"), (14, "Good try"), (15, "Great job"),
    (30, "AMAZING"), (49, "AMAZING"), (50, "LEGENDARY"), (400, "LEGENDARY"),
])
def test_score_tiers(score, word):
    assert word in score_tier(score)
