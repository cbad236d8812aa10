from dataclasses import dataclass
from typing import Optional

from puzzle.components.tile import Position

@dataclass(slots=True)
class DragState:
    """Cell where the in-progress swap gesture began, if any."""
    start: Optional[Position] = None
