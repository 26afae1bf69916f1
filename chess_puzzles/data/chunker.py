"""
Split per-file puzzle lists into output chunks and assign puzzle IDs.

Source files are named "{number}_{motive}.pgn", e.g. "02_back_rank_mate.pgn".
The number and motive name the generated problem files and feed into the
puzzle IDs, so IDs stay traceable to the PGN a puzzle came from.
"""

import re
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from chess_puzzles.data.assembler import Puzzle

PGN_FILENAME = re.compile(r"^(\d+)_(.+)\.pgn$")

T = TypeVar("T")


@dataclass(frozen=True)
class PgnFileName:
    """Parts of a "{number}_{motive}.pgn" source filename."""

    file_number: str  # "02"
    slug: str  # "back_rank_mate"
    motive: str  # "Back Rank Mate"


@dataclass(frozen=True)
class ProblemFile:
    """Index entry for one generated problem file."""

    id: str
    name: str
    file: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "file": self.file}


@dataclass(frozen=True)
class PuzzleChunk:
    """A problem file together with the puzzles it holds."""

    problem: ProblemFile
    puzzles: List[Puzzle]


def parse_pgn_filename(filename: str) -> Optional[PgnFileName]:
    """
    Split a source filename into number, slug and display motive.

    Args:
        filename: Base name of the PGN file

    Returns:
        PgnFileName, or None if the name is not "{digits}_{rest}.pgn"
    """
    match = PGN_FILENAME.match(filename)
    if not match:
        return None

    file_number, rest = match.groups()
    motive = " ".join(word.capitalize() for word in rest.split("_"))

    return PgnFileName(file_number=file_number, slug=rest.lower(), motive=motive)


def split_into_chunks(items: Sequence[T], size: Optional[int]) -> List[List[T]]:
    """
    Slice items into consecutive chunks of at most `size` elements.

    The last chunk may be shorter. A missing or non-positive size yields a
    single chunk holding everything.
    """
    if not size or size <= 0:
        return [list(items)]
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


class PuzzleChunker:
    """Chunk the puzzles of one source file and name the results."""

    def __init__(self, puzzle_id_prefix: str, puzzles_per_file: Optional[int] = None):
        """
        Args:
            puzzle_id_prefix: Collection prefix, e.g. "MC"
            puzzles_per_file: Maximum puzzles per problem file (None = unbounded)
        """
        self.puzzle_id_prefix = puzzle_id_prefix
        self.puzzles_per_file = puzzles_per_file

    def chunk(
        self,
        filename: PgnFileName,
        puzzles: Sequence[Tuple[Puzzle, str]],
    ) -> List[PuzzleChunk]:
        """
        Partition a file's puzzles and assign final IDs.

        IDs are "{prefix}-{file}-{originalId}" for an unsplit file and
        "{prefix}-{file}-{part}-{originalId}" when the file is split.
        Split chunks are named "{motive} ({firstId}-{lastId})".

        Args:
            filename: Parsed source filename
            puzzles: (puzzle, original ID) pairs in file order

        Returns:
            Chunks in order; empty if there are no puzzles
        """
        if not puzzles:
            return []

        chunks = split_into_chunks(puzzles, self.puzzles_per_file)
        needs_split = len(chunks) > 1

        result = []
        for part_number, chunk in enumerate(chunks, start=1):
            if needs_split:
                file_prefix = f"{filename.file_number}-{part_number}"
                id_prefix = f"{self.puzzle_id_prefix}-{filename.file_number}-{part_number}"
                first_id, last_id = chunk[0][1], chunk[-1][1]
                name = f"{filename.motive} ({first_id}-{last_id})"
            else:
                file_prefix = filename.file_number
                id_prefix = f"{self.puzzle_id_prefix}-{filename.file_number}"
                name = filename.motive

            problem_id = f"{file_prefix}_{filename.slug}"
            problem = ProblemFile(id=problem_id, name=name, file=f"{problem_id}.json")

            result.append(
                PuzzleChunk(
                    problem=problem,
                    puzzles=[
                        replace(puzzle, puzzle_id=f"{id_prefix}-{original_id}")
                        for puzzle, original_id in chunk
                    ],
                )
            )

        return result
