"""Shots, sinking and victory on the shared board."""

from __future__ import annotations

from typing import Iterator

from .models import COLUMNS, DEPTHS, EMPTY, ROWS, Player, Position, Surface

HIT = "T"
SEEN = "V"
MISS = "R"
SUNK = "C"

_ZONE_WIDTH = 6
_NEIGHBOUR_OFFSETS = (
    (0, 1, 0),
    (0, -1, 0),
    (1, 0, 0),
    (-1, 0, 0),
    (0, 0, -1),
    (0, 0, 1),
)


def _neighbours(x: int, y: int, z: int) -> Iterator[tuple[int, int, int]]:
    for dx, dy, dz in _NEIGHBOUR_OFFSETS:
        cell = (x + dx, y + dy, z + dz)
        if 0 <= cell[0] < ROWS and 0 <= cell[1] < COLUMNS and 0 <= cell[2] < DEPTHS:
            yield cell


def fire(
    player: Player, surface: Surface, zone_start: int, mark: str, x: int, y: int, z: int
) -> bool:
    """Shoot at ``(x, y, z)`` in the zone starting at ``zone_start``.

    Neighbouring ship cells become seen, neighbouring empty cells misses.
    Returns True when the target held part of a ship.
    """
    target = (x, y + zone_start, z)
    surface[target]  # an off-board target raises before anything changes
    neighbours = list(_neighbours(*target))
    for cell in neighbours:
        if surface[cell] == mark:
            surface[cell] = SEEN
    for cell in neighbours:
        if surface[cell] == EMPTY:
            surface[cell] = MISS

    if surface[target] not in (mark, SEEN):
        surface[target] = MISS
        return False

    surface[target] = HIT
    position = Position(*target)
    for ship in player.ships:
        if position in ship.positions:
            ship.hits += 1
    return True


def sink(player: Player, surface: Surface) -> None:
    """Mark every cell of each sunk ship."""
    for ship in player.ships:
        if ship.is_sunk():
            for position in ship.positions:
                surface[position] = SUNK


def is_victory(surface: Surface, zone_start: int, mark: str) -> bool:
    """Return True when no unhit ship cell remains in the zone."""
    return not any(
        surface[i, j, k] in (mark, SEEN)
        for i in range(ROWS)
        for j in range(zone_start, zone_start + _ZONE_WIDTH)
        for k in range(DEPTHS)
    )