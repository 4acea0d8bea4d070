import pytest

from desafios.batalha_naval import (
    BOARD_SIZE,
    SHIP,
    WATER,
    Board,
    Orientation,
    main,
)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("H", Orientation.HORIZONTAL),
        ("h", Orientation.HORIZONTAL),
        ("v", Orientation.VERTICAL),
        ("D", Orientation.DIAGONAL),
        ("a", Orientation.ANTI_DIAGONAL),
    ],
)
def test_from_char(char, expected):
    assert Orientation.from_char(char) is expected


@pytest.mark.parametrize("char", ["X", "", "HV"])
def test_from_char_rejects_unknown(char):
    with pytest.raises(ValueError):
        Orientation.from_char(char)


def test_new_board_is_all_water():
    board = Board()
    assert len(board.cells) == BOARD_SIZE
    assert all(cell == WATER for row in board.cells for cell in row)


@pytest.mark.parametrize(
    "row, col, orientation, expected",
    [
        (0, 7, "H", True),
        (0, 8, "H", False),
        (7, 0, "V", True),
        (8, 0, "V", False),
        (7, 7, "D", True),
        (7, 8, "D", False),
        (8, 7, "D", False),
        (0, 2, "A", True),
        (0, 1, "A", False),
        (8, 5, "A", False),
        (-1, 0, "H", False),
        (0, 10, "V", False),
        (0, 0, "X", False),
    ],
)
def test_can_place_bounds(row, col, orientation, expected):
    assert Board().can_place(row, col, 3, orientation) is expected


def test_place_anti_diagonal_marks_cells():
    board = Board()
    board.place(2, 5, 3, Orientation.ANTI_DIAGONAL)
    assert board.cells[2][5] == SHIP
    assert board.cells[3][4] == SHIP
    assert board.cells[4][3] == SHIP
    assert sum(cell == SHIP for row in board.cells for cell in row) == 3


def test_overlap_is_rejected():
    board = Board()
    board.place(4, 2, 3, "H")
    assert not board.can_place(2, 3, 3, "V")
    assert board.can_place(5, 3, 3, "V")


def test_place_invalid_raises():
    board = Board()
    with pytest.raises(ValueError):
        board.place(0, 9, 3, "H")
    assert all(cell == WATER for row in board.cells for cell in row)


def test_render_layout():
    board = Board()
    board.place(0, 0, 3, "H")
    lines = board.render().split("\n")
    assert lines[0] == "Tabuleiro (0=Agua, 3=Navio, 5=Area de Habilidade):"
    assert lines[2] == "   0 1 2 3 4 5 6 7 8 9 "
    assert lines[3].startswith(" 0 3 3 3 0")
    assert len([line for line in lines if line]) == 2 + BOARD_SIZE


def _feed(monkeypatch, answers):
    items = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_main_places_all_ships(monkeypatch, capsys):
    answers = ["0", "9", "H"]
    for row in range(4):
        answers += [str(row), "0", "h"]
    _feed(monkeypatch, answers)
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count("Tente novamente") == 1
    assert "Todos os navios posicionados com sucesso!" in out


def test_main_stops_on_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, ["0", "0"])
    assert main() == 1
    assert "Todos os navios" not in capsys.readouterr().out