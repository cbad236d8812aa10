from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(slots=True)
class PointerState:
    """Pointer signal for the current tick, in grid units.

    position: None when the pointer is outside the play area.
    pressed: button went down this tick.
    held: button is down.
    """
    position: Optional[Tuple[float, float]] = None
    pressed: bool = False
    held: bool = False
