# junqi

Game logic for dark Junqi (army chess), with two computer opponents.

Each side's pieces start face down on a 12 × 5 board. On its turn a side
either turns over one of its own hidden pieces or moves a revealed one.
Pieces move along roads and railways and can shelter in camps. They capture
by rank. Bombs destroy whatever they hit, and only engineers can clear mines.
A side loses when its flag is taken or when it has no movable pieces left.

## Installing

```
pip install .
```

## Using it

```python
import random

from junqi.game import Game, Selection

game = Game(2, random.Random(7))
print(game.render())

if game.choose_piece(11, 3) is Selection.REVEALED:
    game.ai_turn()

print(game.board_state())
```

### Game modes

`Game(mode, rng)` deals a new board. The modes are:

1. two players
2. the easy computer opponent
3. the difficult computer opponent

The bottom side (player 2) always moves first. The computer always plays the
top side (player 1). Squares are addressed as `(x, y)`, where `x` is the row
(0–11, top to bottom) and `y` is the column (0–4).

### Playing turns with `Game`

- `choose_piece(x, y)` returns a `Selection`:
  - `INVALID`: the square is empty, off the board, or not the mover's.
  - `REVEALED`: a hidden piece was turned over. This ends the turn.
  - `SELECTED`: a revealed piece was picked, ready for a move.
- `move_piece(next_x, next_y)` moves the selected piece. It returns `True`
  when the move was made and the turn passed.
- `ai_turn()` lets the computer play once and returns the `Step` it chose.
  It raises `RuntimeError` in a two-player game.
- `is_over()` reports whether the game has ended.
- `render()` shows the board codes as a text grid.
- `board_state()` returns the encoded board.

### The board

`junqi.board.Board` holds the pieces. Index it with `board[x, y]` to get a
`junqi.piece.Piece`. `Board.move` raises `IllegalMoveError` for a move the
rules do not allow. `Board.state()` encodes the board as one comma-terminated
code per square:

- `0` for a hidden square
- `(player - 1) * 13 + level` for a revealed square

### The computer opponents

The opponents are `junqi.easy_ai.EasyAI` and `junqi.difficult_ai.DifficultAI`.
Both implement `next_step(board)` and return a `junqi.ai.Step`. A step
either reveals a square, moves a piece, or passes.

`junqi.ai` also converts between steps and text:

- `format_step` and `parse_step` convert a step to and from text.
- `parse_state` turns a state string into 12 rows of 5 codes.

The movement rules and route searches the opponents use live in
`junqi.rules` and `junqi.search`.

## What it does not include

This package is the game engine only. It has no command to start a game,
and it has no graphical or interactive terminal front end. To play, drive
`Game` from your own code, as in the example above.

## Running the tests

```
pip install ".[test]"
pytest
```