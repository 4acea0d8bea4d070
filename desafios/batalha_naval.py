"""Naval battle ship placement on a square grid."""

from __future__ import annotations

from enum import Enum

BOARD_SIZE = 10
SHIP_SIZE = 3
SHIP_COUNT = 4
WATER = 0
SHIP = 3


class Orientation(Enum):
    """Direction in which a ship extends from its starting cell."""

    HORIZONTAL = "H"
    VERTICAL = "V"
    DIAGONAL = "D"
    ANTI_DIAGONAL = "A"

    @classmethod
    def from_char(cls, char):
        """Return the orientation for a letter, ignoring case."""
        try:
            return cls(char.strip().upper())
        except (ValueError, AttributeError):
            raise ValueError(f"invalid orientation: {char!r}") from None

    @property
    def step(self):
        """Row and column increments between consecutive ship cells."""
        return _STEPS[self]


_STEPS = {
    Orientation.HORIZONTAL: (0, 1),
    Orientation.VERTICAL: (1, 0),
    Orientation.DIAGONAL: (1, 1),
    Orientation.ANTI_DIAGONAL: (1, -1),
}


class Board:
    """A square grid of water and ship cells."""

    def __init__(self, size=BOARD_SIZE):
        if size <= 0:
            raise ValueError("board size must be positive")
        self.size = size
        self.cells = [[WATER] * size for _ in range(size)]

    def _inside(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    @staticmethod
    def _positions(row, col, length, orientation):
        d_row, d_col = orientation.step
        return [(row + i * d_row, col + i * d_col) for i in range(length)]

    def can_place(self, row, col, length, orientation):
        """Tell whether a ship fits at the position without overlapping another."""
        if not self._inside(row, col):
            return False
        if not isinstance(orientation, Orientation):
            try:
                orientation = Orientation.from_char(orientation)
            except ValueError:
                return False
        positions = self._positions(row, col, length, orientation)
        if not all(self._inside(r, c) for r, c in positions):
            return False
        return all(self.cells[r][c] != SHIP for r, c in positions)

    def place(self, row, col, length, orientation):
        """Mark the ship's cells; raise ValueError if it cannot be placed."""
        if not isinstance(orientation, Orientation):
            orientation = Orientation.from_char(orientation)
        if not self.can_place(row, col, length, orientation):
            raise ValueError("ship does not fit at this position")
        for r, c in self._positions(row, col, length, orientation):
            self.cells[r][c] = SHIP

    def render(self):
        """Return the board as text with row and column indices."""
        lines = ["Tabuleiro (0=Agua, 3=Navio, 5=Area de Habilidade):", ""]
        lines.append("   " + "".join(f"{col} " for col in range(self.size)))
        for index, row in enumerate(self.cells):
            lines.append(f"{index:2d} " + "".join(f"{cell} " for cell in row))
        return "\n".join(lines) + "\n\n"


def _read_int(prompt):
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv=None):
    """Interactively place the fleet on a fresh board."""
    board = Board()
    print(f"Jogo Batalha Naval - Posicione seus {SHIP_COUNT} navios de tamanho {SHIP_SIZE}\n")
    print(board.render(), end="")
    try:
        for number in range(1, SHIP_COUNT + 1):
            print(f"Posicionando navio {number}:")
            while True:
                row = _read_int(f"Informe linha (0-{BOARD_SIZE - 1}): ")
                col = _read_int(f"Informe coluna (0-{BOARD_SIZE - 1}): ")
                orientation = input(
                    "Informe orientação do navio (H=Horizontal, V=Vertical, "
                    "D=Diagonal principal, A=Diagonal anti): "
                )
                if (
                    row is not None
                    and col is not None
                    and board.can_place(row, col, SHIP_SIZE, orientation)
                ):
                    board.place(row, col, SHIP_SIZE, orientation)
                    print(board.render(), end="")
                    break
                print("Posição ou orientação inválida para o navio. Tente novamente.")
    except EOFError:
        return 1
    print("Todos os navios posicionados com sucesso!")
    return 0