"""Tests for the command-line driver."""

import pytest

from snake_controller.cli import _build_parser, main, parse_moves
from snake_controller.messages import Direction

SCENARIO = "W 10 10 F 5 5 S U 3 1 1 1 2 1 3"


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play", SCENARIO])
        assert args.command == "play"
        assert args.config == SCENARIO
        assert args.moves == ""
        assert args.seed is None
        assert args.max_food_retries == 100

    def test_play_with_flags(self):
        args = _build_parser().parse_args([
            "play", SCENARIO, "--moves", "R . D", "--seed", "7",
        ])
        assert args.moves == "R . D"
        assert args.seed == 7


class TestParseMoves:
    def test_letters_and_dots(self):
        assert parse_moves("r . D") == [Direction.RIGHT, None, Direction.DOWN]

    def test_empty(self):
        assert parse_moves("") == []

    def test_unknown_move(self):
        with pytest.raises(ValueError, match="Unknown move"):
            parse_moves("R X")


class TestCLIPlay:
    def test_play_prints_board(self, capsys):
        assert main(["play", SCENARIO, "--moves", "R .", "--seed", "0"]) == 0
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[1] == ".###......"
        assert "ticks=2 score=0 game_over=False" in out

    def test_bad_config_returns_2(self):
        assert main(["play", "W 1 1 F 0 0 S X 1 0 0"]) == 2

    def test_bad_moves_returns_2(self):
        assert main(["play", SCENARIO, "--moves", "Q"]) == 2

    @pytest.mark.parametrize("retries", ["0", "-3"])
    def test_bad_retry_limit_returns_2(self, retries):
        assert main(["play", SCENARIO, "--max-food-retries", retries]) == 2
