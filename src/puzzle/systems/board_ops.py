from __future__ import annotations

import random
from typing import List

from esper import World

from puzzle.components.board import Board
from puzzle.components.tile import Position, Tile, TileValue
from puzzle.errors import OutOfBoundsError


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def in_bounds(board: Board, pos: Position) -> bool:
    """True for visible cells and the spawn row above them."""
    x, y = pos
    return 0 <= x < board.width and 0 <= y <= board.height


def in_visible_bounds(board: Board, pos: Position) -> bool:
    x, y = pos
    return 0 <= x < board.width and 0 <= y < board.height


def _index(board: Board, pos: Position) -> int:
    if not in_bounds(board, pos):
        raise OutOfBoundsError(pos, board.width, board.height)
    x, y = pos
    return x + y * board.width


def get_tile(board: Board, pos: Position) -> TileValue:
    return board.cells[_index(board, pos)]


def set_tile(board: Board, pos: Position, value: TileValue) -> None:
    board.cells[_index(board, pos)] = value


def fell(board: Board, pos: Position) -> bool:
    return board.fall_mask[_index(board, pos)]


def mark_fell(board: Board, pos: Position) -> None:
    board.fall_mask[_index(board, pos)] = True


def clear_fall_mask(board: Board) -> None:
    board.fall_mask = [False] * len(board.cells)


def swap_tiles(board: Board, a: Position, b: Position) -> None:
    first = get_tile(board, a)
    second = get_tile(board, b)
    set_tile(board, a, second)
    set_tile(board, b, first)


def random_tile(rng: random.Random, tile_type_count: int) -> Tile:
    return Tile(rng.randrange(tile_type_count))


def fill_random(board: Board, rng: random.Random, tile_type_count: int) -> None:
    """Fill every visible cell with a random tile; the spawn row stays empty."""
    for y in range(board.height):
        for x in range(board.width):
            set_tile(board, (x, y), random_tile(rng, tile_type_count))


def grid_snapshot(board: Board) -> List[List[TileValue]]:
    """Copy of the visible rows, indexed ``[y][x]`` with row 0 at the bottom."""
    return [
        [board.cells[x + y * board.width] for x in range(board.width)]
        for y in range(board.height)
    ]


def load_rows(board: Board, rows: List[List[TileValue]]) -> None:
    """Overwrite visible rows from ``rows[y][x]``; missing rows become empty."""
    for y in range(board.height):
        row = rows[y] if y < len(rows) else []
        for x in range(board.width):
            set_tile(board, (x, y), row[x] if x < len(row) else None)
