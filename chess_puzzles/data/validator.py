"""
Consistency checks for a generated puzzle data tree.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import chess
from tqdm import tqdm

from chess_puzzles.data.assembler import calculate_orientation
from chess_puzzles.data.errors import MalformedPositionError
from chess_puzzles.data.puzzle_writer import INDEX_FILENAME

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("puzzleId", "fen", "type", "orientation", "solution", "source", "motive")


@dataclass
class ValidationReport:
    """Results of data tree validation."""

    collections: int = 0
    problem_files: int = 0
    total_puzzles: int = 0
    puzzles_by_type: Dict[str, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_markdown(self) -> str:
        """Generate markdown validation report."""
        lines = [
            "# Puzzle Data Validation Report",
            "",
            f"**Generated**: {datetime.now().isoformat()}",
            "",
            "## Summary",
            "",
            f"- **Collections**: {self.collections:,}",
            f"- **Problem Files**: {self.problem_files:,}",
            f"- **Total Puzzles**: {self.total_puzzles:,}",
            f"- **Status**: {'✅ PASS' if self.is_valid else '❌ FAIL'}",
            "",
            "## Puzzle Types",
            "",
            "| Type | Count |",
            "|------|-------|",
        ]

        for puzzle_type in sorted(self.puzzles_by_type):
            lines.append(f"| {puzzle_type.capitalize()} | {self.puzzles_by_type[puzzle_type]:,} |")

        if self.errors:
            lines.extend(["", "## Errors", ""])
            for error in self.errors[:20]:
                lines.append(f"- {error}")

            if len(self.errors) > 20:
                lines.append(f"- ... and {len(self.errors) - 20} more")

        return "\n".join(lines)


class PuzzleDataValidator:
    """Validate index.json and every problem file it references."""

    def __init__(self, data_dir: Path):
        """
        Args:
            data_dir: Root of a generated data tree

        Raises:
            FileNotFoundError: If index.json doesn't exist
            ValueError: If index.json is not valid JSON
        """
        self.data_dir = Path(data_dir)
        index_path = self.data_dir / INDEX_FILENAME

        if not index_path.exists():
            raise FileNotFoundError(f"Index not found: {index_path}")

        try:
            self.index = json.loads(index_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid {INDEX_FILENAME}: {e}") from e

        logger.info(f"Initialized validator for: {self.data_dir}")

    def validate(self) -> ValidationReport:
        """
        Check every problem file listed in the index.

        Returns:
            ValidationReport with counts and error messages
        """
        report = ValidationReport()
        seen_ids: Set[str] = set()

        collections = self.index.get("collections") if isinstance(self.index, dict) else None
        if not isinstance(collections, list):
            report.errors.append(f"{INDEX_FILENAME}: missing 'collections' list")
            return report

        report.collections = len(collections)

        problems = []
        for position, collection in enumerate(collections, start=1):
            if not isinstance(collection, dict) or not isinstance(collection.get("problems", []), list):
                report.errors.append(f"{INDEX_FILENAME}: malformed collection #{position}")
                continue
            collection_id = collection.get("id", "?")
            problems.extend((collection_id, problem) for problem in collection.get("problems", []))

        for collection_id, problem in tqdm(problems, desc="Validating problem files"):
            report.problem_files += 1
            self._validate_problem_file(collection_id, problem, report, seen_ids)

        if report.is_valid:
            logger.info(f"All {report.total_puzzles} puzzles valid")
        else:
            logger.warning(f"Found {len(report.errors)} validation errors")

        return report

    def generate_report(self, output_path: Optional[Path] = None) -> str:
        """
        Run validation and render it as Markdown.

        Args:
            output_path: If provided, write report to file

        Returns:
            Markdown-formatted report string
        """
        report_md = self.validate().to_markdown()

        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(report_md, encoding="utf-8")
            logger.info(f"Validation report written to: {output_path}")

        return report_md

    def _validate_problem_file(
        self,
        collection_id: str,
        problem: Dict[str, Any],
        report: ValidationReport,
        seen_ids: Set[str],
    ):
        if not isinstance(problem, dict):
            report.errors.append(f"{collection_id}: malformed problem entry {problem!r}")
            return

        filename = problem.get("file")
        location = f"{collection_id}/{filename}"
        if not isinstance(collection_id, str) or not isinstance(filename, str) or not filename:
            report.errors.append(f"{location}: malformed problem entry")
            return

        path = self.data_dir / collection_id / filename

        if not path.is_file():
            report.errors.append(f"{location}: file missing")
            return

        try:
            puzzles = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            report.errors.append(f"{location}: not UTF-8: {e}")
            return
        except json.JSONDecodeError as e:
            report.errors.append(f"{location}: invalid JSON: {e}")
            return

        if not isinstance(puzzles, list) or not puzzles:
            report.errors.append(f"{location}: expected a non-empty list of puzzles")
            return

        for puzzle in puzzles:
            report.total_puzzles += 1

            if not isinstance(puzzle, dict):
                report.errors.append(f"{location}: puzzle is not an object")
                continue

            missing = [key for key in REQUIRED_KEYS if key not in puzzle]
            if missing:
                report.errors.append(f"{location}: puzzle missing {', '.join(missing)}")
                continue

            puzzle_id = puzzle["puzzleId"]
            if puzzle_id in seen_ids:
                report.errors.append(f"{location}: duplicate puzzle ID {puzzle_id}")
            seen_ids.add(puzzle_id)

            puzzle_type = puzzle["type"]
            report.puzzles_by_type[puzzle_type] = report.puzzles_by_type.get(puzzle_type, 0) + 1

            error = self._check_puzzle(puzzle)
            if error:
                report.errors.append(f"{location}: {puzzle_id}: {error}")

    def _check_puzzle(self, puzzle: Dict[str, Any]) -> Optional[str]:
        """
        Check orientation and replay the solution.

        Returns:
            Error message, or None if the puzzle is consistent
        """
        try:
            expected = calculate_orientation(puzzle["fen"], puzzle["type"])
        except MalformedPositionError as e:
            return str(e)

        if puzzle["orientation"] != expected:
            return f"orientation {puzzle['orientation']} (expected {expected})"

        if not puzzle["solution"]:
            return "empty solution"

        try:
            board = chess.Board(puzzle["fen"])
        except ValueError as e:
            return f"invalid FEN: {e}"

        for ply, step in enumerate(puzzle["solution"], start=1):
            if not isinstance(step, dict):
                return f"malformed solution move {ply}: {step!r}"

            move = self._find_move(board, step.get("from", ""), step.get("to", ""))
            if move is None:
                return f"illegal solution move {ply}: {step}"
            board.push(move)

        return None

    def _find_move(self, board: chess.Board, from_name: str, to_name: str) -> Optional[chess.Move]:
        """Legal move between two squares; promotions resolve to a queen."""
        try:
            from_square = chess.parse_square(from_name)
            to_square = chess.parse_square(to_name)
        except ValueError:
            return None

        for promotion in (None, chess.QUEEN):
            move = chess.Move(from_square, to_square, promotion=promotion)
            if board.is_legal(move):
                return move

        return None
