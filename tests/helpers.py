from __future__ import annotations

import itertools
import random
from typing import Iterable, List, Sequence

from puzzle.components.board import Board
from puzzle.components.tile import Tile, TileValue
from puzzle.config import SimulationConfig
from puzzle.simulation import Simulation
from puzzle.systems.board_ops import load_rows

# Letters map to tile kinds: 'A' -> 0, 'B' -> 1, ...; '.' is an empty cell.
EMPTY_MARK = '.'


def parse_rows(rows: Sequence[str]) -> List[List[TileValue]]:
    """Convert rows written top-down (as they look on screen) to ``[y][x]`` bottom-up."""
    parsed: List[List[TileValue]] = []
    for line in reversed(rows):
        parsed.append([None if ch == EMPTY_MARK else Tile(ord(ch) - ord('A')) for ch in line])
    return parsed


def board_from_rows(rows: Sequence[str]) -> Board:
    board = Board(width=len(rows[0]), height=len(rows))
    load_rows(board, parse_rows(rows))
    return board


def make_simulation(rows: Sequence[str], *, rng: random.Random | None = None, **config) -> Simulation:
    """Simulation whose visible board is exactly ``rows`` (top row first)."""
    config.setdefault('tile_type_count', 7)
    cfg = SimulationConfig(width=len(rows[0]), height=len(rows), **config)
    sim = Simulation(cfg, rng=rng or random.Random(0), fill=False)
    load_rows(sim.board, parse_rows(rows))
    return sim


class CyclingRandom:
    """Stands in for the world RNG; ``randrange`` walks a fixed cycle."""

    def __init__(self, values: Iterable[int]):
        self._values = itertools.cycle(list(values))

    def randrange(self, *args, **kwargs):
        return next(self._values)


class EventCapture:
    """Record payloads of the named events in emission order."""

    def __init__(self, bus, *names: str):
        self.received = []
        for name in names:
            bus.subscribe(name, lambda s, _name=name, **payload: self.received.append((_name, payload)))

    def of(self, name: str) -> list:
        return [payload for event, payload in self.received if event == name]


def drive(sim: Simulation, ticks: int, dt: float = 0.05, **pointer) -> None:
    for _ in range(ticks):
        sim.tick(dt, **pointer)


def kinds(row: Iterable[TileValue]) -> List[int | None]:
    return [tile.kind if tile is not None else None for tile in row]
