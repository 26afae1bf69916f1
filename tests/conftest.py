"""Shared fixtures for building puzzle collections on disk."""

import json

import pytest


@pytest.fixture
def puzzles_dir(tmp_path):
    """Empty puzzles directory."""
    path = tmp_path / "puzzles"
    path.mkdir()
    return path


@pytest.fixture
def make_collection(puzzles_dir):
    """Factory creating a collection folder with info.json and PGN files."""

    def _make(folder, info=None, files=None):
        collection_dir = puzzles_dir / folder
        collection_dir.mkdir()
        if info is not None:
            (collection_dir / "info.json").write_text(json.dumps(info))
        for name, content in (files or {}).items():
            (collection_dir / name).write_text(content)
        return collection_dir

    return _make


@pytest.fixture
def collection_info():
    """Descriptor of a static collection without chunking."""
    return {
        "id": "middlegame",
        "name": "Middlegame Combinations",
        "source": "Test Source",
        "puzzleIdPrefix": "MC",
        "defaultType": "static",
    }
