"""A simplified chess board with rooks, bishops, queens and knights."""

from __future__ import annotations

SIZE = 8
EMPTY = "."

_INITIAL_ROWS = {0: "T.B.R.C.", 7: "t.b.r.c."}


class MoveError(Exception):
    """Raised when a requested move is not allowed."""


def in_bounds(row, col):
    """Tell whether a zero-based square lies on the board."""
    return 0 <= row < SIZE and 0 <= col < SIZE


def _sign(value):
    return (value > 0) - (value < 0)


def _owns(player, piece):
    if player == 1:
        return piece.isupper()
    if player == 2:
        return piece.islower()
    raise ValueError(f"invalid player: {player}")


class ChessBoard:
    """Board state; player 1 owns upper-case pieces, player 2 lower-case."""

    def __init__(self):
        self.grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        for row, pieces in _INITIAL_ROWS.items():
            self.grid[row] = list(pieces)

    def render(self):
        """Return the board as text with one-based indices."""
        header = "\n    " + "".join(f" {col + 1} " for col in range(SIZE)) + "\n"
        rows = "".join(
            f" {index + 1} |" + "".join(f" {piece} " for piece in row) + "|\n"
            for index, row in enumerate(self.grid)
        )
        return header + rows + "\n"

    def is_path_clear(self, start, end):
        """Tell whether every square strictly between start and end is empty.

        Squares that are not on a common line or diagonal have no path.
        """
        (row, col), (end_row, end_col) = start, end
        d_row, d_col = end_row - row, end_col - col
        if d_row and d_col and abs(d_row) != abs(d_col):
            return False
        s_row, s_col = _sign(d_row), _sign(d_col)
        steps = max(abs(d_row), abs(d_col))
        return all(
            self.grid[row + i * s_row][col + i * s_col] == EMPTY for i in range(1, steps)
        )

    def is_valid_move(self, piece, start, end):
        """Tell whether the piece's movement rules allow going from start to end."""
        d_row = end[0] - start[0]
        d_col = end[1] - start[1]
        straight = d_row == 0 or d_col == 0
        diagonal = abs(d_row) == abs(d_col)
        kind = piece.upper()
        if kind == "T":
            return straight and self.is_path_clear(start, end)
        if kind == "B":
            return diagonal and self.is_path_clear(start, end)
        if kind == "R":
            return (straight or diagonal) and self.is_path_clear(start, end)
        if kind == "C":
            return {abs(d_row), abs(d_col)} == {1, 2}
        return False

    def _check_origin(self, player, start):
        if not in_bounds(*start):
            raise MoveError("Posição de origem inválida!")
        piece = self.grid[start[0]][start[1]]
        if not _owns(player, piece):
            raise MoveError(f"Essa peça não pertence ao jogador {player}!")
        return piece

    def move(self, player, start, end):
        """Move a piece for the player and return the captured piece, if any.

        Squares are zero-based (row, col) pairs. Raises MoveError when the
        move is not allowed; the board is then left unchanged.
        """
        piece = self._check_origin(player, start)
        if not in_bounds(*end):
            raise MoveError("Destino fora do tabuleiro!")
        target = self.grid[end[0]][end[1]]
        if target != EMPTY and _owns(player, target):
            raise MoveError("Você não pode capturar sua própria peça!")
        if not self.is_valid_move(piece, start, end):
            raise MoveError(f"Movimento inválido para a peça {piece}!")
        self.grid[end[0]][end[1]] = piece
        self.grid[start[0]][start[1]] = EMPTY
        return None if target == EMPTY else target


def _read_square(prompt):
    parts = input(prompt).split()
    if len(parts) < 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return row - 1, col - 1


def _play_turn(board, player):
    start = _read_square(
        f"Jogador {player} - Informe a posição da peça que deseja mover (linha coluna): "
    )
    if start is None:
        print("Entrada inválida!")
        return False
    try:
        board._check_origin(player, start)
    except MoveError as error:
        print(error)
        return False
    end = _read_square("Informe a posição de destino (linha coluna): ")
    if end is None:
        print("Entrada inválida!")
        return False
    try:
        board.move(player, start, end)
    except MoveError as error:
        print(error)
        return False
    return True


def main(argv=None):
    """Alternate turns between two players until input ends."""
    board = ChessBoard()
    player = 1
    try:
        while True:
            print(board.render(), end="")
            print(f"----- Turno do Jogador {player} -----")
            if _play_turn(board, player):
                player = 2 if player == 1 else 1
    except (EOFError, KeyboardInterrupt):
        return 0