"""
Unit tests for the console front end.

Tests move parsing, the game loop and the command line entry point.
"""
import io

import pytest
from minesweeper import Board, GameState, MoveParseError, parse_move, run_game
from minesweeper.console import main, read_move


# ============================================================================
# Move Parsing Tests
# ============================================================================

class TestParseMove:
    """Test parsing of 'row col' lines."""

    def test_two_integers(self) -> None:
        assert parse_move("3 4\n") == (3, 4)

    def test_extra_whitespace_and_negatives(self) -> None:
        assert parse_move("  -1 \t 12  ") == (-1, 12)

    def test_explicit_plus_sign(self) -> None:
        assert parse_move("+2 -0") == (2, 0)

    @pytest.mark.parametrize(
        "line",
        ["", "3", "1 2 3", "a b", "1 x", "1.5 2", "1_0 2", "\u0663 4", "- 1"],
    )
    def test_malformed_raises_error(self, line: str) -> None:
        with pytest.raises(MoveParseError):
            parse_move(line)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_move("nope")


class TestReadMove:
    """Test the fallback and re-prompt behavior."""

    def test_malformed_falls_back_to_origin(self) -> None:
        output = io.StringIO()
        lines = iter(["bad\n"])
        assert read_move(lambda: next(lines), output) == (0, 0)
        assert output.getvalue() == "error\n"

    def test_strict_asks_again(self) -> None:
        output = io.StringIO()
        lines = iter(["bad\n", "1\n", "2 1\n"])
        assert read_move(lambda: next(lines), output, strict=True) == (2, 1)
        assert output.getvalue() == "error\nerror\n"

    def test_end_of_input_raises(self) -> None:
        with pytest.raises(EOFError):
            read_move(lambda: "", io.StringIO())


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestRunGame:
    """Test full games driven from text input."""

    def test_cascade_win(self) -> None:
        board = Board.from_mines(3, [(0, 0)])
        output = io.StringIO()
        state = run_game(board, io.StringIO("2 2\n"), output)

        assert state == GameState.WIN
        text = output.getvalue()
        assert text.startswith("X X X \nX X X \nX X X \n\n")
        assert text.endswith("B 1 _ \n1 1 _ \n_ _ _ \n\nWin\n")

    def test_hitting_mine_loses(self) -> None:
        board = Board.from_mines(3, [(1, 1)])
        output = io.StringIO()
        state = run_game(board, io.StringIO("0 0\n1 1\n"), output)

        assert state == GameState.LOST
        assert output.getvalue().endswith("Lost\n")

    def test_off_board_moves_continue(self) -> None:
        board = Board.from_mines(2, [(0, 0)])
        moves = "-1 0\n5 5\n0 1\n1 0\n1 1\n"
        state = run_game(board, io.StringIO(moves), io.StringIO())
        assert state == GameState.WIN

    def test_malformed_input_plays_origin(self) -> None:
        """A bad line is played as (0, 0) and the game goes on."""
        board = Board.from_mines(2, [(1, 1)])
        output = io.StringIO()
        state = run_game(board, io.StringIO("oops\n0 1\n1 0\n"), output)

        assert state == GameState.WIN
        assert "error\n" in output.getvalue()

    def test_malformed_input_can_lose(self) -> None:
        board = Board.from_mines(2, [(0, 0)])
        state = run_game(board, io.StringIO("1\n"), io.StringIO())
        assert state == GameState.LOST

    def test_strict_input_skips_bad_lines(self) -> None:
        board = Board.from_mines(2, [(0, 0)])
        moves = "oops\n0 1\n1 0\n1 1\n"
        state = run_game(board, io.StringIO(moves), io.StringIO(), strict=True)
        assert state == GameState.WIN

    def test_exhausted_input_raises(self) -> None:
        board = Board.from_mines(3, [(0, 0)])
        with pytest.raises(EOFError):
            run_game(board, io.StringIO("1 1\n"), io.StringIO())


# ============================================================================
# Command Line Tests
# ============================================================================

class TestMain:
    """Test the command line entry point."""

    def test_single_cell_game(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n"))
        assert main(["--size", "1", "--mines", "0"]) == 0
        assert capsys.readouterr().out.endswith("_ \n\nWin\n")

    def test_too_many_mines_is_usage_error(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--size", "2", "--mines", "5"])
        assert excinfo.value.code == 2
        assert "Too many mines" in capsys.readouterr().err

    def test_end_of_input_aborts(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main(["--size", "4", "--mines", "2", "--seed", "3"]) == 1
        assert "Game aborted" in capsys.readouterr().out
