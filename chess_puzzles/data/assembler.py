"""
Assemble decoded puzzle segments into trainer puzzle records.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from chess_puzzles.data.errors import MalformedPositionError
from chess_puzzles.data.move_decoder import MoveDecoder, SolutionMove
from chess_puzzles.data.pgn_parser import RawPuzzle

logger = logging.getLogger(__name__)

PUZZLE_TYPES = ("static", "dynamic")


@dataclass(frozen=True)
class Puzzle:
    """A single trainer puzzle, serialized as one element of a problem file."""

    puzzle_id: str
    fen: str
    type: str  # "static" or "dynamic"
    orientation: str  # "white" or "black"
    solution: List[SolutionMove]
    source: str
    motive: str

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation, keys in trainer order."""
        return {
            "puzzleId": self.puzzle_id,
            "fen": self.fen,
            "type": self.type,
            "orientation": self.orientation,
            "solution": [move.to_dict() for move in self.solution],
            "source": self.source,
            "motive": self.motive,
        }


def calculate_orientation(fen: str, puzzle_type: str) -> str:
    """
    Board orientation for the solver.

    A static puzzle is solved by the side to move. In a dynamic puzzle the
    side to move plays the first (losing) move automatically and the solver
    answers from the other side.

    Args:
        fen: Starting position
        puzzle_type: "static" or "dynamic"

    Returns:
        "white" or "black"

    Raises:
        MalformedPositionError: If the FEN has no side-to-move field
    """
    fields = fen.split()
    if len(fields) < 2:
        raise MalformedPositionError(f"Invalid FEN format: {fen}")

    white_to_move = fields[1] == "w"

    if puzzle_type == "dynamic":
        return "black" if white_to_move else "white"
    return "white" if white_to_move else "black"


class PuzzleAssembler:
    """Turn RawPuzzle segments into Puzzle records for one collection."""

    def __init__(
        self,
        puzzle_type: str,
        source: str,
        decoder: Optional[MoveDecoder] = None,
    ):
        """
        Args:
            puzzle_type: Collection default type, "static" or "dynamic"
            source: Attribution string copied into every puzzle
            decoder: Move decoder (a fresh MoveDecoder if None)
        """
        if puzzle_type not in PUZZLE_TYPES:
            raise ValueError(f"Unknown puzzle type: {puzzle_type}")

        self.puzzle_type = puzzle_type
        self.source = source
        self.decoder = decoder or MoveDecoder()

    def assemble(self, raw: RawPuzzle, motive: str) -> Optional[Puzzle]:
        """
        Build a puzzle from a segment.

        The puzzle ID is left empty; it depends on how the file is chunked
        and is assigned by the chunker.

        Args:
            raw: Segment from the PGN parser
            motive: Display motive of the source file

        Returns:
            Puzzle, or None if no move could be decoded

        Raises:
            MalformedPositionError: If the starting position is unusable
        """
        solution = self.decoder.decode(raw.fen, raw.moves)

        if not solution:
            return None

        return Puzzle(
            puzzle_id="",
            fen=raw.fen,
            type=self.puzzle_type,
            orientation=calculate_orientation(raw.fen, self.puzzle_type),
            solution=solution,
            source=self.source,
            motive=motive,
        )
