"""
Tests for the text front-end in main.py.
"""
import pytest
from minegrid import Board, BoardConfig

import main


def scripted(lines):
    """read_line replacement that feeds ``lines`` then raises EOFError."""
    feed = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(feed)
        except StopIteration:
            raise EOFError
    return read_line


class TestParseCoordinates:

    def test_one_based_to_zero_based(self) -> None:
        assert main.parse_coordinates(["r", "3", "4"]) == ((2, 3), "")

    @pytest.mark.parametrize(
        "parts,message",
        [
            (["r", "1"], "Usage: r x y"),
            (["f", "a", "1"], "Invalid x"),
            (["f", "1", "b"], "Invalid y"),
            (["r", "0", "1"], "Use 1-based coordinates"),
        ],
    )
    def test_errors(self, parts, message) -> None:
        assert main.parse_coordinates(parts) == (None, message)


class TestPlayLoop:

    def test_win_on_empty_board(self, capsys) -> None:
        board = Board(BoardConfig(3, 3, 0), seed=1)
        main.play_loop(board, scripted(["r 2 2"]))
        out = capsys.readouterr().out
        assert "Congratulations" in out
        assert board.is_won is True

    def test_loss_shows_mines(self, capsys) -> None:
        board = Board(BoardConfig(9, 9, 10), seed=12345)
        board.reveal(0, 0)
        x, y = next((x, y) for x, y, c in board.cells() if c.is_mine)
        main.play_loop(board, scripted([f"r {x + 1} {y + 1}"]))
        out = capsys.readouterr().out
        assert "Boom!" in out
        assert "Final board (mines shown)" in out

    def test_flag_and_bad_commands(self, capsys) -> None:
        board = Board(BoardConfig(4, 4, 2), seed=5)
        main.play_loop(board, scripted(["f 1 1", "", "xyz", "r 0 0", "q"]))
        out = capsys.readouterr().out
        assert board.get_cell(0, 0).is_flagged is True
        assert "Unknown command 'xyz'" in out
        assert "Use 1-based coordinates" in out

    def test_new_game_resets(self) -> None:
        board = Board(BoardConfig(4, 4, 2), seed=5)
        main.play_loop(board, scripted(["f 2 3", "n"]))
        assert board.get_cell(1, 2).is_hidden is True
        assert board.initialized is False


class TestMain:

    def test_invalid_board_exits_nonzero(self, capsys) -> None:
        assert main.main(["play", "--width", "0"]) == 1
        assert "dimensions must be positive" in capsys.readouterr().err

    def test_show_prints_layout(self, capsys) -> None:
        code = main.main(["show", "--width", "8", "--height", "8", "--mines", "10", "--seed", "999"])
        out = capsys.readouterr().out
        assert code == 0
        assert "REVEALED_SAFE" in out
        assert out.count("*") == 10

    def test_no_command_prints_help(self, capsys) -> None:
        assert main.main([]) == 0
        assert "usage" in capsys.readouterr().out
