import logging
from typing import Type, TypeVar

from esper import World

from puzzle.components.combo_state import ComboState
from puzzle.components.drag_state import DragState
from puzzle.components.fall_timer import FallTimer
from puzzle.components.phase_state import Phase, PhaseState
from puzzle.components.pointer_state import PointerState

logger = logging.getLogger(__name__)

C = TypeVar("C")


def get_singleton(world: World, component_type: Type[C]) -> C:
    """Return the shared component of the given type, creating it if absent."""
    existing = list(world.get_component(component_type))
    if existing:
        return existing[0][1]
    world.create_entity(component_type())
    return list(world.get_component(component_type))[0][1]


def get_combo_state(world: World) -> ComboState:
    return get_singleton(world, ComboState)


def get_fall_timer(world: World) -> FallTimer:
    return get_singleton(world, FallTimer)


def get_phase_state(world: World) -> PhaseState:
    return get_singleton(world, PhaseState)


def get_drag_state(world: World) -> DragState:
    return get_singleton(world, DragState)


def get_pointer_state(world: World) -> PointerState:
    return get_singleton(world, PointerState)


def start_falling(world: World, duration: float = 0.0) -> None:
    """Enter the falling phase with the fall timer counting ``duration``."""
    get_fall_timer(world).set(duration)
    state = get_phase_state(world)
    if state.phase is not Phase.FALLING:
        logger.debug("phase -> FALLING")
    state.phase = Phase.FALLING


def stop_falling(world: World) -> None:
    get_fall_timer(world).unset()
    get_phase_state(world).phase = Phase.INTERACTIVE
    logger.debug("phase -> INTERACTIVE")
