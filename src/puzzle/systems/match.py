from __future__ import annotations

import logging
from typing import FrozenSet, Iterator, List, Set, Tuple

from esper import World

from puzzle.components.board import Board
from puzzle.components.tile import Position, Tile
from puzzle.constants import MATCH_LENGTH
from puzzle.events.bus import EventBus, EVENT_TILES_REMOVED, EVENT_SCORE_CHANGED
from puzzle.systems.board_ops import get_board, get_tile, set_tile
from puzzle.systems.state_utils import get_combo_state, start_falling

logger = logging.getLogger(__name__)


def _mark_runs(board: Board, line: List[Position], marked: Set[Position]) -> None:
    """Mark every cell of each run of MATCH_LENGTH or more along ``line``.

    The run is marked whole when it first reaches MATCH_LENGTH; each further
    cell of the same run is marked as the scan extends over it.
    """
    run_value = None
    run_length = 0
    for index, pos in enumerate(line):
        value = get_tile(board, pos)
        if value is not None and value == run_value:
            run_length += 1
            if run_length == MATCH_LENGTH:
                marked.update(line[index - MATCH_LENGTH + 1:index + 1])
            elif run_length > MATCH_LENGTH:
                marked.add(pos)
        else:
            # Empty cells start a run of length 1 that nothing can extend.
            run_value = value
            run_length = 1


def _lines(board: Board) -> Iterator[List[Position]]:
    for y in range(board.height):
        yield [(x, y) for x in range(board.width)]
    for x in range(board.width):
        yield [(x, y) for y in range(board.height - 1, -1, -1)]


def find_matches(board: Board) -> FrozenSet[Position]:
    """Detect every cell belonging to a horizontal or vertical run of 3+.

    Only visible rows are scanned. The result is the union of both passes, so
    cells shared by crossing runs appear once.
    """
    marked: Set[Position] = set()
    for line in _lines(board):
        _mark_runs(board, line, marked)
    return frozenset(marked)


def remove_tiles(board: Board, positions: FrozenSet[Position]) -> List[Tuple[int, int, Tile]]:
    """Empty all ``positions`` in one batch and report what was there."""
    removed: List[Tuple[int, int, Tile]] = []
    for x, y in sorted(positions):
        tile = get_tile(board, (x, y))
        if tile is None:
            continue
        removed.append((x, y, tile))
        set_tile(board, (x, y), None)
    return removed


def apply_combo(combo_count: int, score: int, removed_count: int) -> Tuple[int, int]:
    """Return ``(combo_count, score)`` after a removal batch.

    A nonzero batch bumps the combo first, then scores ``combo * removed``.
    An empty batch ends the combo.
    """
    if removed_count <= 0:
        return 0, score
    combo_count += 1
    return combo_count, score + combo_count * removed_count


class MatchSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def clear_matches(self) -> int:
        """Remove all current runs as one batch and return the removed count.

        A nonzero batch scores, emits the removal and arms the fall phase.
        """
        board = get_board(self.world)
        removed = remove_tiles(board, find_matches(board))
        combo = get_combo_state(self.world)
        combo.combo_count, combo.score = apply_combo(combo.combo_count, combo.score, len(removed))
        if not removed:
            return 0
        logger.debug("removed %d tiles, combo=%d score=%d", len(removed), combo.combo_count, combo.score)
        self.event_bus.emit(EVENT_TILES_REMOVED, positions=removed, combo_count=combo.combo_count)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=combo.score, combo_count=combo.combo_count)
        start_falling(self.world)
        return len(removed)
