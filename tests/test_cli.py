"""Tests for the command line interface."""

import json

import pytest

from chess_puzzles.cli import create_parser, main

from tests.pgn_samples import PIN_FEN, PIN_MOVES, make_segment


class TestCLI:
    """Test build and validate commands."""

    def test_build_and_validate(self, make_collection, collection_info, puzzles_dir, tmp_path, capsys):
        make_collection("middlegame", collection_info, {"01_pin.pgn": make_segment(PIN_FEN, PIN_MOVES)})
        output_dir = tmp_path / "data"

        main(["build", "--puzzles", str(puzzles_dir), "--output", str(output_dir)])

        index = json.loads((output_dir / "index.json").read_text())
        assert index["collections"][0]["id"] == "middlegame"
        assert "Built 1 puzzles" in capsys.readouterr().out

        main(["validate", str(output_dir)])

        assert "✅ PASS" in capsys.readouterr().out

    def test_no_collections_exits_nonzero(self, puzzles_dir, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "--puzzles", str(puzzles_dir), "--output", str(tmp_path / "data")])

        assert exc_info.value.code == 1
        assert "No collections found" in capsys.readouterr().err

    def test_missing_puzzles_dir_exits_nonzero(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "--puzzles", str(tmp_path / "missing")])

        assert exc_info.value.code == 1

    def test_no_command(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1

    def test_build_defaults(self):
        args = create_parser().parse_args(["build"])

        assert args.puzzles == "puzzles"
        assert args.output == "data"
        assert args.indent == 2
        assert not args.clean
