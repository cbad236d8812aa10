from dataclasses import dataclass
from typing import Optional, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Tile:
    """Content of an occupied cell: one of the palette's tile types.

    Empty cells hold ``None`` rather than a sentinel kind.
    """
    kind: int


TileValue = Optional[Tile]
