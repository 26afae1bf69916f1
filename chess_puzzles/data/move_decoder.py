"""
Replay algebraic move text through python-chess.

Puzzle move text is hand-authored and inconsistent: short and long
algebraic notation are mixed, variations and comments are left inline,
and the occasional token is simply wrong. Decoding is permissive: a token
the rules engine rejects is dropped and replay continues from the last
position that was reached.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List

import chess

from chess_puzzles.data.errors import MalformedPositionError

logger = logging.getLogger(__name__)

RESULT_MARKERS = re.compile(r"\s+(?:\*|1-0|0-1|1/2-1/2)")
VARIATIONS = re.compile(r"\([^)]*\)")
BRACE_COMMENTS = re.compile(r"\{[^}]*\}")
MOVE_NUMBERS = re.compile(r"\d+\.(?:\s*\.\.\.)?\s*")
ELLIPSES = re.compile(r"\.{2,}")
STRAY_BRACKETS = re.compile(r"[()\[\]]")
ANNOTATION_GLYPHS = re.compile(r"[!?]+$")


@dataclass(frozen=True)
class SolutionMove:
    """A move as origin and destination squares, e.g. d1 -> d5."""

    from_square: str
    to_square: str

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.from_square, "to": self.to_square}


def tokenize_moves(moves: str) -> List[str]:
    """
    Strip PGN decoration from move text and split it into move tokens.

    Removes result markers, parenthesized variations, brace comments,
    move numbers and ellipses. Residual punctuation-only and digit-only
    tokens are filtered out.

    Args:
        moves: Raw move text, e.g. "1. Rd1-d5 Ba4-c6 *"

    Returns:
        Candidate move tokens in order, e.g. ["Rd1-d5", "Ba4-c6"]
    """
    text = RESULT_MARKERS.sub("", moves).strip()
    text = VARIATIONS.sub("", text)
    text = BRACE_COMMENTS.sub("", text)
    text = MOVE_NUMBERS.sub("", text)
    text = ELLIPSES.sub("", text).strip()
    text = STRAY_BRACKETS.sub(" ", text)

    tokens = []
    for token in text.split():
        if not token.strip("."):
            continue
        if token.isdigit():
            continue
        tokens.append(token)

    return tokens


class MoveDecoder:
    """Decode puzzle move text into a sequence of SolutionMove."""

    def decode(self, fen: str, moves: str) -> List[SolutionMove]:
        """
        Replay move text from a starting position.

        Args:
            fen: Starting position
            moves: Raw move text

        Returns:
            One SolutionMove per token the rules engine accepted, in order.
            Rejected tokens are skipped.

        Raises:
            MalformedPositionError: If python-chess cannot load the FEN
        """
        try:
            board = chess.Board(fen)
        except ValueError as e:
            raise MalformedPositionError(f"Invalid FEN {fen!r}: {e}") from e

        solution: List[SolutionMove] = []

        for token in tokenize_moves(moves):
            move = self._parse_token(board, token)
            if move is None:
                continue

            board.push(move)
            solution.append(
                SolutionMove(
                    from_square=chess.square_name(move.from_square),
                    to_square=chess.square_name(move.to_square),
                )
            )

        return solution

    def _parse_token(self, board: chess.Board, token: str):
        """
        Match a token against the legal moves of the current position.

        Returns:
            The legal chess.Move, or None if the token is rejected
        """
        san = ANNOTATION_GLYPHS.sub("", token)
        if not san:
            return None

        try:
            move = board.parse_san(san)
        except ValueError:
            logger.debug(f"Skipping token {token!r} in {board.fen()}")
            return None

        # parse_san maps "--" and friends to a null move
        if not move:
            logger.debug(f"Skipping null move {token!r}")
            return None

        return move
