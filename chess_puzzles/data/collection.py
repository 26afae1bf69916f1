"""
Collection descriptors (info.json) and index entries.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from chess_puzzles.data.assembler import PUZZLE_TYPES
from chess_puzzles.data.chunker import ProblemFile
from chess_puzzles.data.errors import InvalidCollectionError

logger = logging.getLogger(__name__)

INFO_FILENAME = "info.json"


@dataclass(frozen=True)
class CollectionInfo:
    """Metadata of one puzzle collection, read from its info.json.

    Loaded once per collection and never modified during a build.
    """

    id: str
    name: str
    source: str
    puzzle_id_prefix: str
    default_type: str
    """Puzzle type for every puzzle in the collection: "static" or "dynamic" """

    puzzles_per_file: Optional[int] = None
    """Maximum puzzles per problem file (None = one file per PGN)"""

    def __post_init__(self):
        """Validate descriptor fields."""
        for name in ("id", "name", "source", "puzzle_id_prefix"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidCollectionError(f"{name} must be a non-empty string, got {value!r}")

        # id names the output folder of the collection
        if "/" in self.id or "\\" in self.id or self.id in (".", ".."):
            raise InvalidCollectionError(f"id must be a plain folder name, got {self.id!r}")

        if self.default_type not in PUZZLE_TYPES:
            raise InvalidCollectionError(
                f"defaultType must be 'static' or 'dynamic', got {self.default_type!r}"
            )

        if self.puzzles_per_file is not None:
            # bool is an int subclass; reject it explicitly
            if (
                isinstance(self.puzzles_per_file, bool)
                or not isinstance(self.puzzles_per_file, int)
                or self.puzzles_per_file <= 0
            ):
                raise InvalidCollectionError(
                    f"puzzlesPerFile must be a positive integer, got {self.puzzles_per_file!r}"
                )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CollectionInfo":
        """
        Build from the camelCase keys used in info.json.

        Raises:
            InvalidCollectionError: If a required key is missing or invalid
        """
        if not isinstance(data, dict):
            raise InvalidCollectionError("Collection descriptor must be a JSON object")

        try:
            return cls(
                id=data["id"],
                name=data["name"],
                source=data["source"],
                puzzle_id_prefix=data["puzzleIdPrefix"],
                default_type=data["defaultType"],
                puzzles_per_file=data.get("puzzlesPerFile"),
            )
        except KeyError as e:
            raise InvalidCollectionError(f"Missing required field: {e.args[0]}") from e

    @classmethod
    def load(cls, collection_dir: Path) -> "CollectionInfo":
        """
        Read info.json from a collection folder.

        Raises:
            InvalidCollectionError: If the file is missing, not JSON, or invalid
        """
        info_path = collection_dir / INFO_FILENAME
        if not info_path.exists():
            raise InvalidCollectionError(f"No {INFO_FILENAME} in {collection_dir.name}")

        try:
            data = json.loads(info_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidCollectionError(f"Cannot read {info_path}: {e}") from e

        return cls.from_dict(data)


@dataclass
class CollectionIndexEntry:
    """One collection in index.json with its problem files in order."""

    id: str
    name: str
    problems: List[ProblemFile] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "problems": [problem.to_dict() for problem in self.problems],
        }
