"""Board and fleet data for the three-dimensional naval battle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

ROWS = 5
COLUMNS = 20
DEPTHS = 3
SHIP_COUNT = 3
EMPTY = " "

Key = Union["Position", Tuple[int, int, int]]


@dataclass(frozen=True)
class Position:
    """A cell of the board: row, column and depth."""

    x: int
    y: int
    z: int


@dataclass
class Ship:
    """A ship made of the cells it covers and the number of hits it took."""

    positions: list[Position] = field(default_factory=list)
    hits: int = 0

    @property
    def size(self) -> int:
        return len(self.positions)

    def is_sunk(self) -> bool:
        """Return True once every cell of a placed ship has been hit."""
        return self.size > 0 and self.hits == self.size


@dataclass
class Player:
    """A player and their fleet of three ships."""

    ships: list[Ship] = field(
        default_factory=lambda: [Ship() for _ in range(SHIP_COUNT)]
    )


class Surface:
    """The shared 5 x 20 x 3 board holding one character per cell."""

    def __init__(self) -> None:
        self._cells = [
            [[EMPTY] * DEPTHS for _ in range(COLUMNS)] for _ in range(ROWS)
        ]

    @staticmethod
    def _coordinates(key: Key) -> tuple[int, int, int]:
        if isinstance(key, Position):
            key = (key.x, key.y, key.z)
        x, y, z = key
        if not (0 <= x < ROWS and 0 <= y < COLUMNS and 0 <= z < DEPTHS):
            raise IndexError(f"cell {(x, y, z)!r} is outside the board")
        return x, y, z

    def __getitem__(self, key: Key) -> str:
        x, y, z = self._coordinates(key)
        return self._cells[x][y][z]

    def __setitem__(self, key: Key, value: str) -> None:
        x, y, z = self._coordinates(key)
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"a cell holds exactly one character, not {value!r}")
        self._cells[x][y][z] = value

    def reset(self) -> None:
        """Empty every cell of the board."""
        for row in self._cells:
            for column in row:
                column[:] = [EMPTY] * DEPTHS