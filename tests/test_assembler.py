"""Tests for puzzle assembly and orientation."""

import pytest

from chess_puzzles.data.assembler import Puzzle, PuzzleAssembler, calculate_orientation
from chess_puzzles.data.errors import MalformedPositionError
from chess_puzzles.data.move_decoder import SolutionMove
from chess_puzzles.data.pgn_parser import RawPuzzle

from tests.pgn_samples import AFTER_E4_FEN, PIN_FEN, PIN_MOVES


class TestOrientation:
    """Orientation law for static and dynamic puzzles."""

    @pytest.mark.parametrize(
        "side, puzzle_type, expected",
        [
            ("w", "static", "white"),
            ("b", "static", "black"),
            ("w", "dynamic", "black"),
            ("b", "dynamic", "white"),
        ],
    )
    def test_orientation_law(self, side, puzzle_type, expected):
        fen = f"4k3/8/8/8/8/8/8/4K3 {side} - - 0 1"
        assert calculate_orientation(fen, puzzle_type) == expected

    def test_missing_side_to_move(self):
        with pytest.raises(MalformedPositionError):
            calculate_orientation("4k3/8/8/8/8/8/8/4K3", "static")


class TestPuzzleAssembler:
    """Test PuzzleAssembler."""

    def test_assemble_static(self):
        assembler = PuzzleAssembler("static", "Test Source")
        puzzle = assembler.assemble(RawPuzzle(PIN_FEN, PIN_MOVES, "1"), "Pin")

        assert puzzle is not None
        assert puzzle.puzzle_id == ""
        assert puzzle.fen == PIN_FEN
        assert puzzle.type == "static"
        assert puzzle.orientation == "white"
        assert puzzle.source == "Test Source"
        assert puzzle.motive == "Pin"
        assert puzzle.solution == [SolutionMove("d1", "d5"), SolutionMove("a4", "c6")]

    def test_assemble_dynamic_black_to_move(self):
        assembler = PuzzleAssembler("dynamic", "Test Source")
        puzzle = assembler.assemble(RawPuzzle(AFTER_E4_FEN, "1... e5 2. Nf3", "1"), "Blunder")

        assert puzzle.orientation == "white"
        assert len(puzzle.solution) == 2

    def test_solution_length_counts_replayable_tokens(self):
        assembler = PuzzleAssembler("static", "Test Source")
        puzzle = assembler.assemble(RawPuzzle(PIN_FEN, "1. Rd1-d5 Qz9 Ba4-c6 *", "1"), "Pin")

        assert len(puzzle.solution) == 2

    def test_no_usable_moves(self):
        assembler = PuzzleAssembler("static", "Test Source")

        assert assembler.assemble(RawPuzzle(PIN_FEN, "1. Xx9 *", "1"), "Pin") is None

    def test_fen_without_side_to_move(self):
        assembler = PuzzleAssembler("static", "Test Source")
        raw = RawPuzzle("4k3/8/8/8/8/8/4P3/4K3", "1. e4", "1")

        with pytest.raises(MalformedPositionError):
            assembler.assemble(raw, "Pawn")

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            PuzzleAssembler("tactical", "Test Source")

    def test_to_dict_key_order(self):
        puzzle = Puzzle(
            puzzle_id="MC-01-1",
            fen=PIN_FEN,
            type="static",
            orientation="white",
            solution=[SolutionMove("d1", "d5")],
            source="Test Source",
            motive="Pin",
        )

        data = puzzle.to_dict()

        assert list(data) == [
            "puzzleId",
            "fen",
            "type",
            "orientation",
            "solution",
            "source",
            "motive",
        ]
        assert data["solution"] == [{"from": "d1", "to": "d5"}]
