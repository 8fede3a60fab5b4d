"""Text renderings of the board."""

from __future__ import annotations

from typing import Callable

from .models import COLUMNS, DEPTHS, EMPTY, ROWS, Surface

_WIDE_HEADER = (
    "    0    1    2     3    4    5"
    "                                  0    1    2     3    4    5  \n"
)
_WIDE_TOP = "--------------------------------                                 ------------------------------\n"
_WIDE_RULE = "--------------------------------                                ------------------------------\n"
_ZONE_HEADER = "    0    1    2    3    4    5  \n"
_ZONE_TOP = "-------------------------------- \n"
_ZONE_RULE = "--------------------------------- \n"
_ZONE_WIDTH = 6
_GAP = "    "
_VISIBLE_WHEN_MASKED = frozenset("TVCR")


def _title(depth: int) -> str:
    return f"\t\t\t\t       Profondeur {depth + 1}00 -> {depth}\n"


def _hidden_column(column: int) -> bool:
    return 7 <= column <= 13


def _render_wide(surface: Surface, visible: Callable[[str], bool]) -> str:
    parts = []
    for k in range(DEPTHS):
        parts += [_title(k), _WIDE_HEADER, _WIDE_TOP]
        for i in range(ROWS):
            cells = []
            for j in range(COLUMNS):
                if _hidden_column(j):
                    cells.append(_GAP)
                    continue
                value = surface[i, j, k]
                last = j == COLUMNS - 1
                if visible(value):
                    cells.append(f"|  {value} |" if last else f"|  {value} ")
                else:
                    cells.append("|     |" if last else "|    ")
            parts.append(f"{i}{''.join(cells)}\n{_WIDE_RULE}")
        parts.append("\n")
    return "".join(parts)


def render_surface(surface: Surface) -> str:
    """Render both players' zones with every cell shown."""
    return _render_wide(surface, lambda value: True)


def render_masked(surface: Surface) -> str:
    """Render both zones showing only shot results, hiding the ships."""
    return _render_wide(surface, lambda value: value in _VISIBLE_WHEN_MASKED)


def render_zone(surface: Surface, zone_start: int) -> str:
    """Render the six columns of one player's zone."""
    parts = []
    for k in range(DEPTHS):
        parts += [_title(k), _ZONE_HEADER, _ZONE_TOP]
        for i in range(ROWS):
            cells = [
                f"|  {surface[i, zone_start + j, k]} "
                for j in range(_ZONE_WIDTH - 1)
            ]
            cells.append(f"|  {surface[i, zone_start + _ZONE_WIDTH - 1, k]} |")
            cells.append(_GAP * (COLUMNS - _ZONE_WIDTH))
            parts.append(f"{i}{''.join(cells)}\n{_ZONE_RULE}")
        parts.append("\n")
    return "".join(parts)


__all__ = ["render_surface", "render_masked", "render_zone", "EMPTY"]