from __future__ import annotations

import logging
import math
from typing import Any, Optional, Tuple

from esper import World

from puzzle.components.board import Board
from puzzle.components.tile import Position
from puzzle.events.bus import (
    EventBus,
    EVENT_POINTER_STATE,
    EVENT_DRAG_STARTED,
    EVENT_GOOD_MOVE,
    EVENT_BAD_MOVE,
)
from puzzle.systems.board_ops import get_board, get_tile, in_visible_bounds, swap_tiles
from puzzle.systems.match import MatchSystem
from puzzle.systems.state_utils import get_drag_state, get_pointer_state

logger = logging.getLogger(__name__)


def is_orthogonal_neighbor(a: Position, b: Position) -> bool:
    """True when exactly one axis differs, by exactly one cell."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return (dx == 1 and dy == 0) or (dx == 0 and dy == 1)


def pointer_cell(board: Board, position: Optional[Tuple[float, float]]) -> Optional[Position]:
    """Cell under a pointer given in grid units, or None outside the visible grid."""
    if position is None:
        return None
    px, py = position
    if not (0 <= px < board.width and 0 <= py < board.height):
        return None
    cell = (math.floor(px), math.floor(py))
    return cell if in_visible_bounds(board, cell) else None


class InteractionSystem:
    """Drag-to-swap gesture handling.

    The latest pointer signal arrives through EVENT_POINTER_STATE; ``process``
    is called by the phase coordinator only on interactive ticks.
    """

    def __init__(self, world: World, event_bus: EventBus, match_system: MatchSystem):
        self.world = world
        self.event_bus = event_bus
        self.match_system = match_system
        self.event_bus.subscribe(EVENT_POINTER_STATE, self.on_pointer_state)

    def on_pointer_state(self, sender: Any, **payload: Any) -> None:
        pointer = get_pointer_state(self.world)
        position = payload.get("position")
        pointer.position = (float(position[0]), float(position[1])) if position is not None else None
        pointer.pressed = bool(payload.get("pressed", False))
        pointer.held = bool(payload.get("held", False))

    def process(self) -> None:
        board = get_board(self.world)
        pointer = get_pointer_state(self.world)
        drag = get_drag_state(self.world)
        cell = pointer_cell(board, pointer.position)
        if cell is None:
            # Leaving the grid cancels the gesture.
            drag.start = None
        elif pointer.pressed and drag.start is None:
            drag.start = cell
            self.event_bus.emit(EVENT_DRAG_STARTED, cell=cell)
        elif pointer.held and drag.start is not None:
            if is_orthogonal_neighbor(drag.start, cell):
                self._attempt_swap(board, drag.start, cell)
        else:
            drag.start = None

    def _attempt_swap(self, board: Board, src: Position, dst: Position) -> None:
        if get_tile(board, src) is None or get_tile(board, dst) is None:
            return
        drag = get_drag_state(self.world)
        swap_tiles(board, src, dst)
        if self.match_system.clear_matches():
            logger.debug("swap %s <-> %s accepted", src, dst)
            self.event_bus.emit(EVENT_GOOD_MOVE, src=src, dst=dst)
        else:
            swap_tiles(board, src, dst)
            logger.debug("swap %s <-> %s rolled back", src, dst)
            self.event_bus.emit(EVENT_BAD_MOVE, src=src, dst=dst)
        drag.start = None
