import pytest

from desafios.xadrez import EMPTY, ChessBoard, MoveError, in_bounds, main


def test_initial_layout():
    board = ChessBoard()
    assert board.grid[0] == list("T.B.R.C.")
    assert board.grid[7] == list("t.b.r.c.")
    assert all(cell == EMPTY for row in board.grid[1:7] for cell in row)


@pytest.mark.parametrize(
    "row, col, expected",
    [(0, 0, True), (7, 7, True), (-1, 0, False), (0, 8, False), (8, 3, False)],
)
def test_in_bounds(row, col, expected):
    assert in_bounds(row, col) is expected


def test_rook_moves_down_file():
    board = ChessBoard()
    assert board.move(1, (0, 0), (6, 0)) is None
    assert board.grid[6][0] == "T"
    assert board.grid[0][0] == EMPTY


def test_rook_captures_enemy():
    board = ChessBoard()
    assert board.move(1, (0, 0), (7, 0)) == "t"
    assert board.grid[7][0] == "T"


def test_rook_blocked_by_own_bishop():
    board = ChessBoard()
    with pytest.raises(MoveError, match="Movimento inválido"):
        board.move(1, (0, 0), (0, 3))
    assert board.grid[0][0] == "T"


def test_bishop_diagonal():
    board = ChessBoard()
    board.move(1, (0, 2), (5, 7))
    assert board.grid[5][7] == "B"
    with pytest.raises(MoveError):
        board.move(1, (5, 7), (5, 5))


def test_queen_straight_and_diagonal():
    board = ChessBoard()
    assert board.is_valid_move("R", (0, 4), (4, 0))
    assert board.is_valid_move("r", (7, 4), (3, 4))
    assert not board.is_valid_move("R", (0, 4), (2, 5))


def test_knight_shapes():
    board = ChessBoard()
    assert board.is_valid_move("C", (0, 6), (2, 5))
    assert board.is_valid_move("c", (7, 6), (6, 4))
    assert not board.is_valid_move("C", (0, 6), (2, 6))


def test_unknown_piece_never_moves():
    assert not ChessBoard().is_valid_move("X", (3, 3), (3, 4))


def test_path_clear():
    board = ChessBoard()
    assert board.is_path_clear((0, 0), (7, 0))
    assert not board.is_path_clear((0, 0), (0, 4))
    assert board.is_path_clear((3, 3), (3, 3))
    assert not board.is_path_clear((0, 0), (2, 1))


def test_piece_of_other_player():
    board = ChessBoard()
    with pytest.raises(MoveError, match="não pertence ao jogador 2"):
        board.move(2, (0, 0), (1, 0))


def test_empty_origin_is_not_owned():
    board = ChessBoard()
    with pytest.raises(MoveError, match="não pertence"):
        board.move(1, (3, 3), (4, 3))


def test_origin_outside_board():
    with pytest.raises(MoveError, match="origem"):
        ChessBoard().move(1, (8, 0), (1, 0))


def test_destination_outside_board():
    with pytest.raises(MoveError, match="Destino fora"):
        ChessBoard().move(1, (0, 0), (-1, 0))


def test_cannot_capture_own_piece():
    board = ChessBoard()
    with pytest.raises(MoveError, match="própria"):
        board.move(1, (0, 0), (0, 2))
    assert board.grid[0][2] == "B"


def test_render_rows():
    lines = ChessBoard().render().split("\n")
    assert lines[1].strip().split() == [str(n) for n in range(1, 9)]
    assert lines[2] == " 1 | T  .  B  .  R  .  C  . |"
    assert lines[9].startswith(" 8 | t ")


def _feed(monkeypatch, answers):
    items = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_main_switches_turns(monkeypatch, capsys):
    _feed(monkeypatch, ["1 1", "7 1"])
    assert main() == 0
    assert "----- Turno do Jogador 2 -----" in capsys.readouterr().out


def test_main_reports_bad_input(monkeypatch, capsys):
    _feed(monkeypatch, ["x"])
    assert main() == 0
    out = capsys.readouterr().out
    assert "Entrada inválida!" in out
    assert "Turno do Jogador 2" not in out