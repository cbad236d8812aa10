"""Headless match-three simulation.

Wires the world, event bus and systems together and exposes the per-tick
input entry point plus the read-only state a renderer or audio layer needs.
"""
from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from puzzle.components.phase_state import Phase
from puzzle.components.tile import Position, TileValue
from puzzle.config import SimulationConfig
from puzzle.events.bus import EventBus, EVENT_POINTER_STATE, EVENT_TICK
from puzzle.systems.board_ops import fell, get_board, grid_snapshot
from puzzle.systems.gravity import GravitySystem
from puzzle.systems.interaction import InteractionSystem
from puzzle.systems.match import MatchSystem
from puzzle.systems.phase import PhaseSystem
from puzzle.systems.state_utils import (
    get_combo_state,
    get_drag_state,
    get_fall_timer,
    get_phase_state,
)
from puzzle.world import create_world


class Simulation:
    def __init__(
        self,
        config: SimulationConfig | None = None,
        *,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
        fill: bool = True,
    ):
        self.config = config or SimulationConfig()
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, self.config, rng=rng, fill=fill)
        self.match_system = MatchSystem(self.world, self.event_bus)
        self.gravity_system = GravitySystem(self.world, self.event_bus)
        self.interaction_system = InteractionSystem(self.world, self.event_bus, self.match_system)
        self.phase_system = PhaseSystem(
            self.world,
            self.event_bus,
            gravity_system=self.gravity_system,
            match_system=self.match_system,
            interaction_system=self.interaction_system,
        )

    def tick(
        self,
        dt: float,
        pointer: Optional[Tuple[float, float]] = None,
        pressed: bool = False,
        held: bool = False,
    ) -> None:
        """Advance one frame. ``pointer`` is in grid units, None when outside."""
        self.event_bus.emit(EVENT_POINTER_STATE, position=pointer, pressed=pressed, held=held)
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def subscribe(self, name: str, fn: Callable) -> None:
        self.event_bus.subscribe(name, fn)

    @property
    def board(self):
        return get_board(self.world)

    def grid_snapshot(self) -> List[List[TileValue]]:
        return grid_snapshot(self.board)

    def drag_start_cell(self) -> Optional[Position]:
        return get_drag_state(self.world).start

    def fall_progress_fraction(self) -> float:
        return get_fall_timer(self.world).progress()

    def fell_this_step(self, pos: Position) -> bool:
        return fell(self.board, pos)

    @property
    def phase(self) -> Phase:
        return get_phase_state(self.world).phase

    @property
    def score(self) -> int:
        return get_combo_state(self.world).score

    @property
    def best_score(self) -> int:
        return get_combo_state(self.world).best_score

    @property
    def combo_count(self) -> int:
        return get_combo_state(self.world).combo_count
