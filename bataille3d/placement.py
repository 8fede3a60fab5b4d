"""Interactive placement of a player's three ships."""

from __future__ import annotations

from typing import Callable, Optional

from .models import COLUMNS, DEPTHS, ROWS, Player, Position, Ship, Surface

Ask = Callable[[str], str]

_ORIENTATION_PROMPT = "H pour horizontal, V pour vertical\n"
_FIRST_LABELS = ("x = ", "y = ", "z = ")
_LABELS = ("x= ", "y= ", "z= ")
_ZONE_ROWS = 5
_ZONE_COLUMN_LIMIT = 6


def _read_int(ask: Ask, prompt: str) -> Optional[int]:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


def _on_board(cells: list[Position]) -> bool:
    return all(
        0 <= p.x < ROWS and 0 <= p.y < COLUMNS and 0 <= p.z < DEPTHS for p in cells
    )


def _ship_cells(
    x: int, y: int, z: int, zone_start: int, length: int, horizontal: bool
) -> list[Position]:
    if horizontal:
        return [Position(x, y + zone_start + step, z) for step in range(length)]
    return [Position(x + step, y + zone_start, z) for step in range(length)]


def _allowed(x: int, y: int, z: int, length: int, horizontal: bool) -> bool:
    if not 0 <= z < DEPTHS:
        return False
    if length == 1:
        return 0 <= x < _ZONE_ROWS and 0 <= y < _ZONE_COLUMN_LIMIT
    if horizontal:
        return 0 <= x < _ZONE_ROWS and 0 <= y and y + length - 1 <= _ZONE_COLUMN_LIMIT
    return 0 <= x and x + length - 1 < _ZONE_ROWS and 0 <= y <= _ZONE_COLUMN_LIMIT


def _read_ship(
    ask: Ask,
    intro: str,
    labels: tuple[str, ...],
    zone_start: int,
    length: int,
    horizontal: bool,
) -> list[Position]:
    prefix = intro
    while True:
        values = []
        for index, label in enumerate(labels):
            values.append(_read_int(ask, (prefix if index == 0 else "") + label))
        prefix = ""
        if None in values:
            continue
        x, y, z = values
        if not _allowed(x, y, z, length, horizontal):
            continue
        cells = _ship_cells(x, y, z, zone_start, length, horizontal)
        if _on_board(cells):
            return cells


def _read_orientation(ask: Ask, intro: str) -> bool:
    prompt = intro + _ORIENTATION_PROMPT
    while True:
        answer = ask(prompt).strip()
        prompt = _ORIENTATION_PROMPT
        if answer and answer[0] in "HhVv":
            return answer[0] in "Hh"


def place_ships(
    player: Player, zone_start: int, surface: Surface, mark: str, ask: Ask
) -> None:
    """Ask for the three ships of ``player`` and mark them in its zone."""
    ships = []
    cells = _read_ship(
        ask,
        "Entrez les coordonnees du bateau\nbateau longueur 1\n",
        _FIRST_LABELS,
        zone_start,
        1,
        True,
    )
    ships.append(cells)
    for length in (2, 3):
        horizontal = _read_orientation(ask, f"bateau longueur {length}\n")
        ships.append(_read_ship(ask, "", _LABELS, zone_start, length, horizontal))
        for cell in ships[-1]:
            surface[cell] = mark
    for cell in ships[0]:
        surface[cell] = mark
    player.ships = [Ship(list(cells)) for cells in ships]