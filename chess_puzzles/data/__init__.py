"""
Data pipeline converting PGN puzzle collections into trainer JSON files.
"""

from chess_puzzles.data.errors import (
    PuzzleBuildError,
    NoCollectionsError,
    InvalidCollectionError,
    MalformedPositionError,
)
from chess_puzzles.data.pgn_parser import PGNParser, RawPuzzle, fix_fen
from chess_puzzles.data.move_decoder import MoveDecoder, SolutionMove, tokenize_moves
from chess_puzzles.data.assembler import Puzzle, PuzzleAssembler, calculate_orientation
from chess_puzzles.data.chunker import (
    PgnFileName,
    ProblemFile,
    PuzzleChunk,
    PuzzleChunker,
    parse_pgn_filename,
    split_into_chunks,
)
from chess_puzzles.data.collection import CollectionInfo, CollectionIndexEntry
from chess_puzzles.data.puzzle_writer import PuzzleWriter
from chess_puzzles.data.validator import PuzzleDataValidator, ValidationReport
from chess_puzzles.data.pipeline import BuildConfig, BuildSummary, PuzzleBuilder

__all__ = [
    "PuzzleBuildError",
    "NoCollectionsError",
    "InvalidCollectionError",
    "MalformedPositionError",
    "PGNParser",
    "RawPuzzle",
    "fix_fen",
    "MoveDecoder",
    "SolutionMove",
    "tokenize_moves",
    "Puzzle",
    "PuzzleAssembler",
    "calculate_orientation",
    "PgnFileName",
    "ProblemFile",
    "PuzzleChunk",
    "PuzzleChunker",
    "parse_pgn_filename",
    "split_into_chunks",
    "CollectionInfo",
    "CollectionIndexEntry",
    "PuzzleWriter",
    "PuzzleDataValidator",
    "ValidationReport",
    "BuildConfig",
    "BuildSummary",
    "PuzzleBuilder",
]
