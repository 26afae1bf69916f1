"""
Exceptions raised by the puzzle build pipeline.
"""


class PuzzleBuildError(Exception):
    """Base class for all build errors."""


class NoCollectionsError(PuzzleBuildError):
    """No collection folder with a descriptor was found. Fatal for a build."""


class InvalidCollectionError(PuzzleBuildError):
    """A collection descriptor is missing, unreadable or incomplete."""


class MalformedPositionError(PuzzleBuildError, ValueError):
    """A puzzle's starting position cannot be used."""
