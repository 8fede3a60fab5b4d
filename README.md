# bataille3d

A two-player battleship game played in the terminal on a board with three
depth levels. Both players share one screen. Each player places a fleet in
their own zone. The players then take turns firing at the other player's zone
until one fleet has no ship square left. The game's prompts and messages are
in French.

## Installing

```
pip install .
```

## Playing

```
bataille3d
```

The command takes no options apart from `--help`. If input ends (Ctrl-D) or
the game is interrupted (Ctrl-C), the command exits with status 1.

### Placing the fleet

Each player places three ships in a zone of 5 rows (`x` from 0 to 4) by 6
columns (`y` from 0 to 5), on one of three depths (`z` from 0 to 2):

- a ship of length 1, given by its coordinates;
- a ship of length 2, then a ship of length 3. For each of these the game
  first asks for an orientation (`H` for horizontal, `V` for vertical, in
  either case), then for the coordinates of the ship's first square.

If an answer is not a number, or the coordinates fall outside the accepted
range, the game asks for the coordinates again. For vertical ships the column
may go up to 6. The game does not check whether ships overlap.

### Firing

On each turn the player enters the coordinates of a target and its depth
(`profondeur`). The column is counted from the start of the opponent's zone.
A target off the board is refused and asked for again. The board marks:

- `T`: a hit on a ship square;
- `V`: a ship square next to the shot, now revealed. A square counts as next
  to the shot if it is one column to either side, one row up or down, or one
  depth up or down;
- `R`: water that was shot at, or water next to a shot;
- `C`: every square of a sunk ship.

During play the board is shown masked, so only these marks are visible and
never the ships themselves. After each shot the game waits for a key press,
or Enter where no single-key read is available, then clears the screen. A
player wins when the opponent's zone holds no ship square that is still
unhit, revealed squares included. The full board is then shown as a summary.

## Using the package from Python

The game pieces can be used without the terminal loop:

```python
from bataille3d.models import Player, Surface
from bataille3d.game import fire, sink, is_victory
from bataille3d.display import render_masked

surface = Surface()
surface[0, 14, 0] = "B"
player = Player()

hit = fire(player, surface, 14, "B", 0, 0, 0)   # True; the cell becomes "T"
sink(player, surface)
print(is_victory(surface, 14, "B"))             # True
print(render_masked(surface))
```

Besides the example above, the package offers the following:

- `Surface` is the 5 × 20 × 3 board. It is indexed by `(x, y, z)` tuples or
  `Position` values. Writing outside the board raises `IndexError`, and
  storing anything but a single character raises `ValueError`. `reset()`
  empties every cell.
- `Ship` holds its `positions` and `hits`, and has `size` and `is_sunk()`.
  `Player` holds three ships.
- `fire` returns whether the target held part of a ship.
- `render_surface`, `render_masked` and `render_zone` return the board as
  text.
- `bataille3d.placement.place_ships(player, zone_start, surface, mark, ask)`
  sets up a fleet. It takes any function that answers prompts.
- `bataille3d.cli.play(ask, write, pause, clear)` runs a whole game with
  input, output, pause and clear-screen functions that the caller supplies.
  It returns the number of the winning player.

## What it does not do

- There is no computer opponent; both players must be at the keyboard.
- Games cannot be saved or resumed.
- There is no play over a network.

## Running the tests

```
pip install .[test]
pytest
```