from dataclasses import dataclass, field
from typing import List

from puzzle.components.tile import TileValue

@dataclass(slots=True)
class Board:
    """Singleton grid store.

    ``cells`` is row-major with ``height + 1`` rows; row ``height`` is the
    spawn row that feeds new tiles into the visible area. ``fall_mask`` flags
    cells whose content arrived during the latest fall step.
    """
    width: int
    height: int
    cells: List[TileValue] = field(default_factory=list)
    fall_mask: List[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.width * (self.height + 1)
        if not self.cells:
            self.cells = [None] * size
        if not self.fall_mask:
            self.fall_mask = [False] * size
