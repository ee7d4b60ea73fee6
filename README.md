# klondike

Klondike solitaire for the terminal. Cards are drawn with Unicode suit
symbols, and you play the whole game by typing commands.

## Installing

```
pip install .
```

## Playing

```
klondike
```

The game first asks for a difficulty:

- `1` or `EASY`: each draw turns over one card from the deck
- `2` or `HARD`: each draw turns over up to three cards

Then it shows the board. The board has four foundations, the deck (shown
face down), the waste pile (its three most recent cards, newest first) and
the seven tableau columns. Face-down cards appear as `*`.

### Commands

Commands are case-insensitive. At the end of input, the game quits.

| Command            | Effect                                              |
|--------------------|-----------------------------------------------------|
| `MOVE T1 F1 1`     | Move 1 card from tableau column 1 to foundation 1   |
| `M W T3`           | Short form; the card count defaults to 1            |
| `DRAW` / `D`       | Draw from the deck                                  |
| `UNDO`             | Undo the last move (up to three moves back)         |
| `RESTART`          | Deal a new game, keeping the difficulty             |
| `HELP`             | Show the help screen                                |
| `BACK`             | Return from the help screen to the board            |
| `QUIT`             | Leave the game                                      |

The help screen lists `EXIT` for quitting. The command the game accepts is
`QUIT`.

Piles are written as `T1`–`T7` for tableau columns, `F1`–`F4` for
foundations and `W` for the waste pile. The foundations hold diamonds,
hearts, spades and clubs, in that order.

### Rules

- Foundations are built up by suit, from Ace to King.
- Tableau columns are built down in alternating colours.
- Only a King may be moved to an empty column.
- A move from the waste or from a foundation carries exactly one card. So
  does a move to a foundation.
- When the deck runs out, the waste pile is shuffled back into it.

You win when a King tops every foundation.

## Using it as a library

You can use the game pieces without the terminal loop:

```python
import random

from klondike.position import Position, Difficulty
from klondike.moves import parse_move_command

position = Position(random.Random(7))
position.difficulty = Difficulty.EASY
position.draw_from_deck()

move = parse_move_command("W T1")
if position.is_legal(move):
    position.apply_move(move)
print(position.moves, position.is_won())
```

- `klondike.cards` has `Card` and `Deck`.
- `klondike.moves` parses pile notation. `parse_move_command` raises
  `MoveParseError` for malformed input.
- `klondike.history.History` records snapshots of a position. `undo()`
  raises `NoHistoryError` when there is nothing earlier to return to.
- `klondike.renderer.Renderer` writes the screens to any text stream.
- `klondike.controller.Commander` reads commands from any input function.
- `klondike.app.run` plays one session with injectable input and output.

## What it does not do

The game keeps no scores or statistics. It cannot save or load a game in
progress. It has no hints and no automatic moves to the foundations. Its
only interface is the line-based text screen.