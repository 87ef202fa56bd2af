# triplemath

triplemath is a small puzzle game that you play in the terminal. Numbered
shapes fall one at a time into a grid that is 7 columns wide and 8 rows tall.
Each shape is a circle, a square or a triangle, and it is red, blue or yellow.

## Rules

- Each new shape starts at level 1 in the top row of the middle column. Its
  value is a number from 0 to 9.
- You can move the falling shape left or right, step it down one row, or drop
  it to the bottom.
- When a shape lands on a shape with the same kind, colour and level, the two
  merge:
  - Two level-1 shapes become one level-2 shape. Its value is the sum of the
    two values. That sum is added to your score.
  - Two level-2 shapes disappear. Twice their combined value is added to your
    score.
- When a shape lands on a shape that does not match, the smaller of the two
  values is taken off your score.
- The game ends as soon as five or more rows hold at least one shape.

## Installing

```
pip install .
```

## Playing

```
triplemath --name Alice
triplemath --name Alice --seed 42
```

You must give `--name`. The name is trimmed before use. A blank name prints an
error and the command exits with status 1. Use `--seed` to set the random seed,
so that the same sequence of shapes comes up each time.

The game reads commands from standard input, one per line. Case does not
matter, and blank lines are ignored.

| Command        | Effect                                   |
|----------------|------------------------------------------|
| `a`, `left`    | move the falling shape one column left   |
| `d`, `right`   | move the falling shape one column right  |
| `s`, `step`    | move down one row, or land if it cannot  |
| `x`, `drop`    | drop to the bottom and land              |
| `q`, `quit`    | stop playing                             |

The game prints the board before the first command and again after each valid
command. An unknown command prints `Unknown command: ...`. When the game ends,
it prints `Game over`. At the end of the session it prints `name: score`.

The board starts with a `Score: N` line. Each cell after that is either ` . `
for an empty cell, or a label such as `cR 7`:

- The first letter is the kind: `c` for circle, `s` for square, `t` for
  triangle. It is upper case when the shape is above level 1.
- The second letter is the colour: `R` for red, `B` for blue, `Y` for yellow.
- The number is the value.

## Using the library

`triplemath.game.Game(rng=None)` holds the board, the falling figure
(`current`) and the score (`score`). It takes an optional `random.Random` to
use for new shapes. Its methods are:

- `move(dcol)` shifts the falling figure sideways when the target cell is free.
- `can_move(dcol)` reports whether that shift is possible.
- `can_drop()` reports whether the figure can fall one more row.
- `step()` moves the figure down one row, or places it when it cannot fall.
- `hard_drop()` drops the figure as far as it goes and places it. It raises
  `RuntimeError` if no figure is falling.
- `place_figure()` fixes the figure on the board, applies the merge rules and
  spawns the next figure unless the game is over.
- `resolve_collisions(row, col)` applies the merge rules to the figure at that
  cell.
- `new_figure()` spawns a random figure.
- `is_over()` reports whether the game has ended.
- `render()` returns the board as text.

`triplemath.figures` defines `Figure` together with the enums `ShapeKind`,
`Level` and `Color`. A `Figure` has these methods:

- `same_kind(other)` tests whether two figures match.
- `size()` gives the drawn size in pixels: 40, 54 or 60 by level.
- `center(...)` gives the pixel centre of the figure.
- `outline(...)` gives the pixel geometry of the figure.
- `promoted(value)` returns a copy one level up with the given value.

`triplemath.cli.run_session(game, commands, output)` plays a sequence of
command strings against a game. It writes the board to a text stream and
returns the final score. Use it to script a game or to test one.

`triplemath.scores.ScoreEntry` pairs a player name with a score.
`triplemath.scores.normalize_username(text)` trims a name and raises
`ValueError` if the name is missing or blank.

## What it does not do

- It has no graphical window and no menu, credits or instructions screens.
- It runs only as a text game in the terminal.
- It does not keep scores between sessions and has no ranking table. The final
  score is printed, not stored.

## Running the tests

```
pip install .[test]
pytest
```