import random

from esper import World
from .events.bus import EventBus
from puzzle.config import SimulationConfig
from puzzle.components.board import Board
from puzzle.components.combo_state import ComboState
from puzzle.components.drag_state import DragState
from puzzle.components.fall_timer import FallTimer
from puzzle.components.phase_state import PhaseState
from puzzle.components.pointer_state import PointerState
from puzzle.systems.board_ops import fill_random


def create_world(
    event_bus: EventBus,
    config: SimulationConfig | None = None,
    *,
    rng: random.Random | None = None,
    fill: bool = True,
) -> World:
    """Build the world with its singleton resources.

    The board entity carries the grid, the state entity carries score, phase,
    timer, drag and pointer resources. ``fill=False`` leaves every cell empty
    so tests can lay out boards by hand.
    """
    config = config or SimulationConfig()
    world = World()
    setattr(world, "random", rng or random.Random(config.seed))
    setattr(world, "config", config)

    board = Board(width=config.width, height=config.height)
    if fill:
        fill_random(board, world.random, config.tile_type_count)
    world.create_entity(board)

    world.create_entity(
        ComboState(best_score=config.best_score),
        PhaseState(),
        FallTimer(),
        DragState(),
        PointerState(),
    )
    return world
