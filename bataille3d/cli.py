"""Two-player console game on the shared board."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Callable, Optional, Sequence

from .display import render_masked, render_surface, render_zone
from .game import fire, is_victory, sink
from .models import Player, Surface
from .placement import place_ships

try:
    import msvcrt
except ImportError:
    msvcrt = None

Ask = Callable[[str], str]
Write = Callable[[str], None]

_FIRST_ZONE = 0
_SECOND_ZONE = 14
_CONTINUE = "Taper une touche pour continuer...\n"


def _ask_int(ask: Ask, prompt: str) -> int:
    while True:
        try:
            return int(ask(prompt).strip())
        except ValueError:
            continue


def _take_turn(
    ask: Ask, write: Write, surface: Surface, target: Player, zone_start: int, mark: str
) -> None:
    write("Entrez les coordonnees de la cible\n")
    while True:
        x = _ask_int(ask, "x = ")
        y = _ask_int(ask, "y = ")
        z = _ask_int(ask, "profondeur = ")
        try:
            hit = fire(target, surface, zone_start, mark, x, y, z)
        except IndexError:
            write("Coordonnees hors de la grille\n")
            continue
        break
    write("Toucher !!!!\n" if hit else "Oups tu n'as pas touche !!\n")
    sink(target, surface)


def play(ask: Ask, write: Write, pause: Callable[[], object], clear: Callable[[], object]) -> int:
    """Run a whole game and return the number of the winning player."""
    surface = Surface()
    first, second = Player(), Player()

    write(render_zone(surface, _FIRST_ZONE))
    place_ships(first, _FIRST_ZONE, surface, "A", ask)
    clear()
    write(render_zone(surface, _SECOND_ZONE))
    place_ships(second, _SECOND_ZONE, surface, "B", ask)
    write(render_surface(surface))

    while True:
        write(render_masked(surface))
        write("\n Joueur 1 doit jouer\n")
        _take_turn(ask, write, surface, second, _SECOND_ZONE, "B")
        write(render_masked(surface))
        write(_CONTINUE)
        pause()
        clear()
        write("\n\n")
        if is_victory(surface, _SECOND_ZONE, "B"):
            winner = 1
            break

        write(render_masked(surface))
        write("Joueur 2 doit jouer\n")
        _take_turn(ask, write, surface, first, _FIRST_ZONE, "A")
        write(render_masked(surface))
        write("\n\n")
        write(_CONTINUE)
        pause()
        clear()
        if is_victory(surface, _FIRST_ZONE, "A"):
            winner = 2
            break

    write(f"Joueur {winner} a gagne !\n")
    write("recapitulatif \n\n")
    write(render_surface(surface))
    return winner


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _pause() -> None:
    if msvcrt is not None and sys.stdin.isatty():
        msvcrt.getch()
    else:
        input()


def _clear_screen() -> None:
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        _write("\033[2J\033[H")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="bataille3d", description="Two-player naval battle on a three-level board."
    )
    parser.parse_args(argv)
    try:
        play(input, _write, _pause, _clear_screen)
    except (EOFError, KeyboardInterrupt):
        _write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())