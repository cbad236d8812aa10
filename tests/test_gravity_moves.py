import random

import pytest

from puzzle.systems.board_ops import fell, get_tile, grid_snapshot
from puzzle.systems.gravity import fall_duration, fall_step, spawn_row
from tests.helpers import board_from_rows, kinds


def column(board, x):
    return [get_tile(board, (x, y)) for y in range(board.height)]


def test_single_gap_closes_in_one_step():
    board = board_from_rows([
        "B",
        "A",
        ".",
    ])
    assert fall_step(board)
    assert kinds(column(board, 0)) == [0, 1, None]
    assert fell(board, (0, 0))
    assert fell(board, (0, 1))
    assert not fell(board, (0, 2))


def test_wide_gap_closes_one_row_per_step():
    board = board_from_rows([
        "A",
        ".",
        ".",
        ".",
    ])
    fall_step(board)
    assert kinds(column(board, 0)) == [None, None, 0, None]
    fall_step(board)
    fall_step(board)
    assert kinds(column(board, 0)) == [0, None, None, None]
    assert not fall_step(board)


@pytest.mark.parametrize("pattern", [
    "A.B..C",
    "....AB",
    ".A.B.C",
    "AB....",
    "......",
    "A.....",
])
def test_gravity_converges_to_compacted_column(pattern):
    board = board_from_rows(list(pattern))
    expected = [t for t in column(board, 0) if t is not None]
    steps = 0
    while fall_step(board):
        steps += 1
        assert steps <= board.height
    result = column(board, 0)
    filled = [t for t in result if t is not None]
    assert filled == expected
    assert result[:len(filled)] == filled
    assert all(t is None for t in result[len(filled):])


def test_settled_step_clears_fall_mask():
    board = board_from_rows([
        "A",
        ".",
    ])
    assert fall_step(board)
    assert fell(board, (0, 0))
    assert not fall_step(board)
    assert not any(board.fall_mask)


def test_spawn_row_feeds_top_visible_cell():
    board = board_from_rows([
        ".B",
        "AC",
    ])
    spawn_row(board, random.Random(1), 5)
    spawned = get_tile(board, (0, 2))
    assert spawned is not None and 0 <= spawned.kind < 5
    assert get_tile(board, (1, 2)) is not None
    fall_step(board)
    assert get_tile(board, (0, 1)) == spawned
    assert get_tile(board, (0, 2)) is None
    # Full column keeps its spawn tile parked above the board.
    assert get_tile(board, (1, 2)) is not None
    assert kinds(grid_snapshot(board)[1]) == [spawned.kind, 1]


def test_fall_duration_shrinks_with_combo():
    assert fall_duration(0.2, 0) == pytest.approx(0.2)
    assert fall_duration(0.2, 3) == pytest.approx(0.2 * 6 / 9)
    assert fall_duration(0.2, 9) == pytest.approx(0.0)
    assert fall_duration(0.2, 20) == pytest.approx(0.0)
    assert fall_duration(0.2, 1) < fall_duration(0.2, 0)
