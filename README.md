# desafios

Small interactive terminal games. All prompts and messages are in Portuguese.

## Installation

```
pip install .
```

## Commands

- `batalha-naval`: place four ships of length 3 on a 10x10 board. For each
  ship you enter a row, a column (both from 0 to 9) and an orientation:
  `H` (horizontal), `V` (vertical), `D` (main diagonal, down and to the right)
  or `A` (anti-diagonal, down and to the left). Letters are accepted in either
  case. If a ship would leave the board, overlap another ship, or the input is
  not understood, you are asked again. The board is printed after every ship
  is placed.
- `xadrez`: two players take turns on an 8x8 board holding rooks (`T`),
  bishops (`B`), queens (`R`) and knights (`C`). Player 1 moves the upper-case
  pieces, player 2 the lower-case ones. Squares are entered as `linha coluna`,
  both counted from 1. An illegal move prints the reason and the same player
  tries again. The game runs until input ends (end of file or Ctrl-C).
- `super-trunfo`: enter two city cards (state letter, code, city, population,
  area in km², GDP in billions, number of tourist spots). Each card is shown
  with its population density, GDP per capita and "super power" score, then
  the cards are compared on every attribute. Ties go to card 2.
- `super-trunfo-logica`: enter two cards that also carry a country, then pick
  a level:
  1. basic: one attribute typed as a number from 1 to 7; any other number is
     shown as `Desconhecido` and ends in a draw;
  2. intermediate: one attribute chosen from a menu;
  3. master: two different attributes from the menu; the larger sum of the
     two values wins.

  Each attribute comparison can end in a draw.

In both card games the lower population density wins; for every other
attribute the higher value wins. A card command that gets an invalid number
prints the error and exits with status 1.

## Using the library

```python
from desafios.batalha_naval import Board, Orientation

board = Board(10)
if board.can_place(2, 3, 3, Orientation.from_char("h")):
    board.place(2, 3, 3, Orientation.HORIZONTAL)
print(board.render())
```

`Board.place` raises `ValueError` if the ship does not fit;
`Orientation.from_char` raises `ValueError` for an unknown letter.

```python
from desafios.xadrez import ChessBoard, MoveError

board = ChessBoard()
try:
    captured = board.move(1, (0, 6), (2, 5))   # knight, zero-based (row, col)
except MoveError as exc:
    print(exc)
print(board.render())
```

`ChessBoard.move` returns the captured piece, or `None`, and leaves the board
unchanged when it raises `MoveError`.

```python
from desafios.super_trunfo_logica import Attribute, Card, compare_single, compare_two

a = Card("SP", "C001", "São Paulo", "Brasil", 12_000_000, 1521.0, 700.0, 50)
b = Card("RJ", "C002", "Rio de Janeiro", "Brasil", 6_700_000, 1200.0, 350.0, 80)

single = compare_single(a, b, Attribute.AREA)          # single.winner: 1, 2 or 0 for a draw
double = compare_two(a, b, Attribute.GDP, Attribute.TOURIST_SPOTS)
print(double.first_total, double.second_total, double.winner)
```

`desafios.super_trunfo` offers `Card`, `compare_cards` (a mapping from each
attribute label to whether the first card wins it) and `read_card`.

## What the package does not do

- `batalha-naval` only places the fleet. There are no shots, no opponent and
  no special ability areas, even though the board legend mentions them.
- `xadrez` has no kings or pawns, no check or checkmate, and no winner; it
  only checks each piece's movement pattern, blocked paths and captures of
  one's own pieces.
- Cards are not saved anywhere; they exist only for one run.

## Tests

```
pip install .[test]
pytest
```