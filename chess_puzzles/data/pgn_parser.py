"""
PGN segmentation for hand-curated puzzle files.

Puzzle PGNs are loosely structured: one position per segment, a FEN tag,
an optional OriginalID tag and a line or two of move text. Segments are
delimited by OriginalID or Event tags rather than by a full game header.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

ORIGINAL_ID_TAG = re.compile(r'\[OriginalID\s+"([^"]+)"\]')
FEN_TAG = re.compile(r'\[FEN\s+"([^"]+)"\]')


@dataclass(frozen=True)
class RawPuzzle:
    """A puzzle segment as found in the PGN, moves still undecoded."""

    fen: str
    moves: str
    original_id: str


@dataclass
class _SegmentState:
    """Accumulator for the segment currently being read."""

    fen: Optional[str] = None
    original_id: Optional[str] = None
    move_lines: List[str] = field(default_factory=list)

    def reset(self):
        self.fen = None
        self.original_id = None
        self.move_lines = []


def fix_fen(fen: str) -> str:
    """
    Repair a FEN whose fullmove number is zero.

    Some puzzle sources emit "... 0 0"; python-chess and the trainer expect
    the fullmove counter to start at 1. All other fields are kept as is.

    Args:
        fen: FEN string from a PGN tag

    Returns:
        FEN with the sixth field bumped to "1" if it was zero
    """
    parts = fen.split(" ")
    if len(parts) >= 6:
        try:
            fullmove = int(parts[5])
        except ValueError:
            return fen
        if fullmove == 0:
            parts[5] = "1"
            return " ".join(parts)
    return fen


class PGNParser:
    """Split puzzle PGN text into RawPuzzle records."""

    def parse_text(self, pgn_text: str) -> List[RawPuzzle]:
        """
        Segment PGN text into puzzles.

        Args:
            pgn_text: Full contents of a PGN file

        Returns:
            RawPuzzle records in file order. Records without an OriginalID
            are numbered by their 1-based position among emitted records.
        """
        puzzles: List[RawPuzzle] = []
        state = _SegmentState()

        normalized = pgn_text.replace("\r\n", "\n").replace("\r", "\n")

        for raw_line in normalized.split("\n"):
            line = raw_line.strip()

            if line.startswith("[OriginalID"):
                self._finalize(state, puzzles)
                match = ORIGINAL_ID_TAG.match(line)
                if match:
                    state.original_id = match.group(1)
                continue

            if line.startswith("[Event"):
                self._finalize(state, puzzles)
                continue

            if line.startswith("[FEN"):
                match = FEN_TAG.match(line)
                if match:
                    state.fen = fix_fen(match.group(1))
                continue

            # Other tags carry nothing we use
            if line.startswith("["):
                continue

            if not line:
                continue

            state.move_lines.append(line)

        self._finalize(state, puzzles)

        return puzzles

    def parse_file(self, pgn_path: Path) -> List[RawPuzzle]:
        """
        Read and segment a PGN file.

        Args:
            pgn_path: Path to PGN file

        Returns:
            RawPuzzle records in file order
        """
        if not pgn_path.exists():
            raise FileNotFoundError(f"PGN file not found: {pgn_path}")

        # Keep "\r" untouched so parse_text sees the original line endings;
        # undecodable bytes become U+FFFD
        with open(pgn_path, "r", encoding="utf-8", errors="replace", newline="") as pgn_file:
            content = pgn_file.read()

        puzzles = self.parse_text(content)
        logger.debug(f"Parsed {len(puzzles)} segments from {pgn_path.name}")
        return puzzles

    def _finalize(self, state: _SegmentState, puzzles: List[RawPuzzle]):
        """Emit the pending segment if complete, then start a fresh one."""
        if state.fen and state.move_lines:
            original_id = state.original_id or str(len(puzzles) + 1)
            puzzles.append(
                RawPuzzle(
                    fen=state.fen,
                    moves=" ".join(state.move_lines).strip(),
                    original_id=original_id,
                )
            )
        state.reset()
