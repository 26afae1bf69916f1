"""
JSON writer for generated puzzle data.

Output layout under the data directory:
    index.json                      collections and their problem files
    {collection id}/{problem file}  JSON array of puzzles
"""

import json
import logging
import shutil
from pathlib import Path
from typing import Any, List

from chess_puzzles.data.assembler import Puzzle
from chess_puzzles.data.collection import CollectionIndexEntry

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"


class PuzzleWriter:
    """Write problem files and the collection index as JSON."""

    def __init__(self, output_dir: Path, indent: int = 2):
        """
        Args:
            output_dir: Root of the generated data tree
            indent: JSON indentation
        """
        self.output_dir = Path(output_dir)
        self.indent = indent
        self._files_written = 0

    def clean(self):
        """Remove the whole output tree. It is fully regenerable."""
        if self.output_dir.exists():
            shutil.rmtree(self.output_dir)
            logger.info(f"Removed existing output: {self.output_dir}")

    def write_problem_file(
        self, collection_id: str, filename: str, puzzles: List[Puzzle]
    ) -> Path:
        """
        Write one problem file.

        Args:
            collection_id: Collection folder under the output directory
            filename: Problem file name, e.g. "01_pin.json"
            puzzles: Puzzles in chunk order

        Returns:
            Path of the written file
        """
        path = self.output_dir / collection_id / filename
        self._write_json(path, [puzzle.to_dict() for puzzle in puzzles])
        logger.info(f"  {collection_id}/{filename} ({len(puzzles)} puzzles)")
        return path

    def write_index(self, collections: List[CollectionIndexEntry]) -> Path:
        """
        Write index.json listing every collection.

        Returns:
            Path of the written index
        """
        path = self.output_dir / INDEX_FILENAME
        self._write_json(
            path, {"collections": [entry.to_dict() for entry in collections]}
        )
        logger.info(f"Written {INDEX_FILENAME} with {len(collections)} collection(s)")
        return path

    def get_files_written(self) -> int:
        """Number of files written so far, index included."""
        return self._files_written

    def _write_json(self, path: Path, data: Any):
        """Serialize fully, then write in one operation."""
        path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(data, indent=self.indent, ensure_ascii=False)
        path.write_text(content, encoding="utf-8")
        self._files_written += 1
