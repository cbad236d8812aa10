"""Phase resource describing whether the board is falling or interactive."""
from dataclasses import dataclass
from enum import Enum, auto


class Phase(Enum):
    """Two phases of the tick loop."""
    INTERACTIVE = auto()
    FALLING = auto()


@dataclass
class PhaseState:
    """Singleton component storing the current phase."""
    phase: Phase = Phase.INTERACTIVE
