"""Tests for collection descriptors."""

import json

import pytest

from chess_puzzles.data.chunker import ProblemFile
from chess_puzzles.data.collection import CollectionIndexEntry, CollectionInfo
from chess_puzzles.data.errors import InvalidCollectionError


class TestCollectionInfo:
    """Test CollectionInfo loading and validation."""

    def test_from_dict(self, collection_info):
        info = CollectionInfo.from_dict(dict(collection_info, puzzlesPerFile=25))

        assert info.id == "middlegame"
        assert info.name == "Middlegame Combinations"
        assert info.source == "Test Source"
        assert info.puzzle_id_prefix == "MC"
        assert info.default_type == "static"
        assert info.puzzles_per_file == 25

    def test_puzzles_per_file_optional(self, collection_info):
        assert CollectionInfo.from_dict(collection_info).puzzles_per_file is None

    @pytest.mark.parametrize("key", ["id", "name", "source", "puzzleIdPrefix", "defaultType"])
    def test_missing_required_field(self, collection_info, key):
        del collection_info[key]

        with pytest.raises(InvalidCollectionError, match=key):
            CollectionInfo.from_dict(collection_info)

    def test_invalid_type(self, collection_info):
        collection_info["defaultType"] = "tactical"

        with pytest.raises(InvalidCollectionError):
            CollectionInfo.from_dict(collection_info)

    @pytest.mark.parametrize("value", [0, -5, 2.5, "10", True])
    def test_invalid_puzzles_per_file(self, collection_info, value):
        collection_info["puzzlesPerFile"] = value

        with pytest.raises(InvalidCollectionError):
            CollectionInfo.from_dict(collection_info)

    @pytest.mark.parametrize("value", ["../x", "a/b", "..", ".", "a\\b"])
    def test_id_not_a_folder_name(self, collection_info, value):
        collection_info["id"] = value

        with pytest.raises(InvalidCollectionError, match="plain folder name"):
            CollectionInfo.from_dict(collection_info)

    def test_not_an_object(self):
        with pytest.raises(InvalidCollectionError):
            CollectionInfo.from_dict(["middlegame"])

    def test_load(self, tmp_path, collection_info):
        (tmp_path / "info.json").write_text(json.dumps(collection_info))

        assert CollectionInfo.load(tmp_path).puzzle_id_prefix == "MC"

    def test_load_missing(self, tmp_path):
        with pytest.raises(InvalidCollectionError, match="No info.json"):
            CollectionInfo.load(tmp_path)

    def test_load_invalid_json(self, tmp_path):
        (tmp_path / "info.json").write_text("{not json")

        with pytest.raises(InvalidCollectionError):
            CollectionInfo.load(tmp_path)


class TestCollectionIndexEntry:
    def test_to_dict(self):
        entry = CollectionIndexEntry(
            id="middlegame",
            name="Middlegame Combinations",
            problems=[ProblemFile(id="01_pin", name="Pin", file="01_pin.json")],
        )

        assert entry.to_dict() == {
            "id": "middlegame",
            "name": "Middlegame Combinations",
            "problems": [{"id": "01_pin", "name": "Pin", "file": "01_pin.json"}],
        }
