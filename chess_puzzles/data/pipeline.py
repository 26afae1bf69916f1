"""
End-to-end build of the trainer data set.

Walks collection folders, converts each PGN file into chunked problem
files and writes the collection index. Failures are contained at the
smallest unit (puzzle, file, collection); only the absence of any
collection aborts a build.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from chess_puzzles.data.assembler import Puzzle, PuzzleAssembler
from chess_puzzles.data.chunker import PgnFileName, PuzzleChunk, PuzzleChunker, parse_pgn_filename
from chess_puzzles.data.collection import INFO_FILENAME, CollectionIndexEntry, CollectionInfo
from chess_puzzles.data.errors import InvalidCollectionError, MalformedPositionError, NoCollectionsError
from chess_puzzles.data.pgn_parser import PGNParser
from chess_puzzles.data.puzzle_writer import PuzzleWriter
from chess_puzzles.data.validator import PuzzleDataValidator

logger = logging.getLogger(__name__)


@dataclass
class BuildConfig:
    """Configuration for a data build."""

    puzzles_dir: Path = Path("puzzles")
    """Directory holding one folder per collection"""

    output_dir: Path = Path("data")
    """Root of the generated data tree"""

    indent: int = 2
    """JSON indentation of generated files"""

    clean: bool = False
    """Remove output_dir before writing"""

    validate_output: bool = False
    """Run PuzzleDataValidator on the result"""

    def __post_init__(self):
        self.puzzles_dir = Path(self.puzzles_dir)
        self.output_dir = Path(self.output_dir)

        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")


@dataclass
class BuildSummary:
    """Counts reported at the end of a build."""

    collections: int = 0
    problem_files: int = 0
    total_puzzles: int = 0
    skipped_puzzles: int = 0
    skipped_files: int = 0
    skipped_collections: int = 0
    files_written: int = 0
    index: List[CollectionIndexEntry] = field(default_factory=list)


@dataclass
class _CollectionResult:
    entry: CollectionIndexEntry
    chunks: List[PuzzleChunk]


class PuzzleBuilder:
    """Build problem files and index.json from collection folders."""

    def __init__(self, config: Optional[BuildConfig] = None):
        """
        Args:
            config: Build configuration (uses defaults if None)

        Raises:
            FileNotFoundError: If the puzzles directory doesn't exist
        """
        self.config = config or BuildConfig()

        if not self.config.puzzles_dir.is_dir():
            raise FileNotFoundError(f"Puzzles directory not found: {self.config.puzzles_dir}")

        self.pgn_parser = PGNParser()
        self.writer = PuzzleWriter(self.config.output_dir, indent=self.config.indent)

    def run(self) -> BuildSummary:
        """
        Execute the build.

        Returns:
            BuildSummary of what was written

        Raises:
            NoCollectionsError: If no folder has a collection descriptor
        """
        summary = BuildSummary()

        collection_dirs = self.find_collection_dirs()
        if not any((path / INFO_FILENAME).exists() for path in collection_dirs):
            raise NoCollectionsError(f"No collections found in {self.config.puzzles_dir}")

        results: List[Tuple[CollectionInfo, _CollectionResult]] = []
        for collection_dir in collection_dirs:
            try:
                info = CollectionInfo.load(collection_dir)
            except InvalidCollectionError as e:
                logger.warning(f"{e}, skipping")
                summary.skipped_collections += 1
                continue

            result = self.process_collection(collection_dir, info, summary)
            if result is None:
                summary.skipped_collections += 1
                continue
            results.append((info, result))

        if self.config.clean:
            self.writer.clean()

        logger.info("Writing puzzle files...")
        for info, result in results:
            for chunk in result.chunks:
                try:
                    self.writer.write_problem_file(info.id, chunk.problem.file, chunk.puzzles)
                except OSError:
                    logger.error(f"Failed to write {info.id}/{chunk.problem.file}")
                    raise
                summary.problem_files += 1
                summary.total_puzzles += len(chunk.puzzles)

        summary.index = [result.entry for _, result in results]
        summary.collections = len(summary.index)
        self.writer.write_index(summary.index)
        summary.files_written = self.writer.get_files_written()

        logger.info("Build complete!")
        logger.info(f"  Collections: {summary.collections}")
        logger.info(f"  Problem files: {summary.problem_files}")
        logger.info(f"  Total puzzles: {summary.total_puzzles}")
        logger.info(f"  Files written: {summary.files_written}")
        if summary.skipped_puzzles:
            logger.info(f"  Skipped puzzles: {summary.skipped_puzzles}")

        if self.config.validate_output:
            report = PuzzleDataValidator(self.config.output_dir).validate()
            if not report.is_valid:
                logger.warning(f"Validation found {len(report.errors)} problem(s)")

        return summary

    def find_collection_dirs(self) -> List[Path]:
        """Collection candidate folders in sorted order."""
        return sorted(path for path in self.config.puzzles_dir.iterdir() if path.is_dir())

    def process_collection(
        self,
        collection_dir: Path,
        info: CollectionInfo,
        summary: Optional[BuildSummary] = None,
    ) -> Optional[_CollectionResult]:
        """
        Convert every PGN file of a collection.

        Args:
            collection_dir: Collection folder
            info: Its descriptor
            summary: Receives skip counts (optional)

        Returns:
            Index entry and chunks, or None if the folder has no PGN files
        """
        summary = summary if summary is not None else BuildSummary()
        logger.info(f"Processing collection: {info.name}")

        pgn_paths = sorted(collection_dir.glob("*.pgn"))
        if not pgn_paths:
            logger.warning(f"  No PGN files found in {info.id}, skipping")
            return None

        assembler = PuzzleAssembler(info.default_type, info.source)
        chunker = PuzzleChunker(info.puzzle_id_prefix, info.puzzles_per_file)

        entry = CollectionIndexEntry(id=info.id, name=info.name)
        chunks: List[PuzzleChunk] = []

        for pgn_path in pgn_paths:
            filename = parse_pgn_filename(pgn_path.name)
            if filename is None:
                logger.warning(
                    f"  {pgn_path.name} doesn't match pattern {{number}}_{{motive}}.pgn, skipping"
                )
                summary.skipped_files += 1
                continue

            file_chunks = self.process_file(pgn_path, filename, assembler, chunker, summary)
            if not file_chunks:
                logger.warning(f"  {pgn_path.name} has no usable puzzles, skipping")
                summary.skipped_files += 1
                continue

            entry.problems.extend(chunk.problem for chunk in file_chunks)
            chunks.extend(file_chunks)

        return _CollectionResult(entry=entry, chunks=chunks)

    def process_file(
        self,
        pgn_path: Path,
        filename: PgnFileName,
        assembler: PuzzleAssembler,
        chunker: PuzzleChunker,
        summary: Optional[BuildSummary] = None,
    ) -> List[PuzzleChunk]:
        """
        Parse, assemble and chunk the puzzles of one PGN file.

        Returns:
            Chunks in order (empty if no puzzle survived)
        """
        summary = summary if summary is not None else BuildSummary()
        try:
            raw_puzzles = self.pgn_parser.parse_file(pgn_path)
        except OSError as e:
            logger.warning(f"  Cannot read {pgn_path.name}: {e}")
            return []

        logger.info(f"  Processing {pgn_path.name}: {len(raw_puzzles)} puzzles")

        puzzles: List[Tuple[Puzzle, str]] = []
        for raw in raw_puzzles:
            try:
                puzzle = assembler.assemble(raw, filename.motive)
            except MalformedPositionError as e:
                logger.error(f"    Puzzle #{raw.original_id}: {e}")
                summary.skipped_puzzles += 1
                continue

            if puzzle is None:
                logger.warning(f"    Puzzle #{raw.original_id} has no valid moves, skipping")
                summary.skipped_puzzles += 1
                continue

            puzzles.append((puzzle, raw.original_id))

        file_chunks = chunker.chunk(filename, puzzles)
        if file_chunks:
            logger.info(f"    Splitting into {len(file_chunks)} file(s)")
        return file_chunks
