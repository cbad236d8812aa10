from __future__ import annotations

import logging
import random

from esper import World

from puzzle.components.board import Board
from puzzle.constants import COMBO_FALL_CAP
from puzzle.events.bus import EventBus, EVENT_FALL_STEP, EVENT_ROW_SPAWNED
from puzzle.systems.board_ops import (
    clear_fall_mask,
    get_board,
    get_tile,
    mark_fell,
    random_tile,
    set_tile,
)
from puzzle.systems.state_utils import get_combo_state, get_fall_timer, start_falling, stop_falling

logger = logging.getLogger(__name__)


def fall_duration(base_fall_time: float, combo_count: int) -> float:
    """Delay before the next fall step; shrinks linearly to 0 at COMBO_FALL_CAP."""
    fraction = min(1.0, max(0.0, combo_count / COMBO_FALL_CAP))
    return base_fall_time * (1.0 - fraction)


def spawn_row(board: Board, rng: random.Random, tile_type_count: int) -> None:
    """Refill every column's spawn row (``y == height``) with a random tile."""
    for x in range(board.width):
        set_tile(board, (x, board.height), random_tile(rng, tile_type_count))


def fall_step(board: Board) -> bool:
    """Move tiles down one cell into every gap, bottom row first.

    A single bottom-up pass per column, so a stack above a gap drops as a
    whole by one row while wider gaps take several steps. The fall mask is
    reset and then flags each destination cell. Returns True if anything moved.
    """
    clear_fall_mask(board)
    moved = False
    for x in range(board.width):
        for y in range(board.height):
            above = (x, y + 1)
            above_tile = get_tile(board, above)
            if get_tile(board, (x, y)) is None and above_tile is not None:
                set_tile(board, (x, y), above_tile)
                set_tile(board, above, None)
                mark_fell(board, (x, y))
                moved = True
    return moved


class GravitySystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def advance(self) -> None:
        """Run the falling-phase work for one tick.

        On timer expiry the spawn row is refilled; once the timer is no longer
        running a fall step is taken and either re-arms the timer or ends the
        fall.
        """
        board = get_board(self.world)
        timer = get_fall_timer(self.world)
        config = self.world.config
        if timer.elapsed():
            spawn_row(board, self.world.random, config.tile_type_count)
            self.event_bus.emit(EVENT_ROW_SPAWNED, row=board.height)
        if timer.active():
            return
        if fall_step(board):
            combo = get_combo_state(self.world)
            start_falling(self.world, fall_duration(config.base_fall_time, combo.combo_count))
            self.event_bus.emit(EVENT_FALL_STEP)
        else:
            logger.debug("board settled")
            stop_falling(self.world)
