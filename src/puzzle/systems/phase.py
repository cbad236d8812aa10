from __future__ import annotations

import logging
from typing import Any

from esper import World

from puzzle.components.phase_state import Phase
from puzzle.events.bus import EventBus, EVENT_TICK, EVENT_BEST_SCORE_CHANGED
from puzzle.systems.gravity import GravitySystem
from puzzle.systems.interaction import InteractionSystem
from puzzle.systems.match import MatchSystem
from puzzle.systems.state_utils import get_combo_state, get_fall_timer, get_phase_state

logger = logging.getLogger(__name__)


class PhaseSystem:
    """Single tick scheduler alternating between falling and interactive phases.

    Falling ticks belong to gravity. Interactive ticks first settle-check the
    board for matches (chains resolve without input) and only hand the tick to
    the interaction controller when nothing was removed.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        gravity_system: GravitySystem,
        match_system: MatchSystem,
        interaction_system: InteractionSystem,
    ):
        self.world = world
        self.event_bus = event_bus
        self.gravity_system = gravity_system
        self.match_system = match_system
        self.interaction_system = interaction_system
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        dt = float(kwargs.get("dt", 1 / 60))
        get_fall_timer(self.world).advance(dt)
        if get_phase_state(self.world).phase is Phase.FALLING:
            self.gravity_system.advance()
        elif not self.match_system.clear_matches():
            self.interaction_system.process()
        self._update_best_score()

    def _update_best_score(self) -> None:
        combo = get_combo_state(self.world)
        if combo.score > combo.best_score:
            combo.best_score = combo.score
            self.event_bus.emit(EVENT_BEST_SCORE_CHANGED, best_score=combo.best_score)
