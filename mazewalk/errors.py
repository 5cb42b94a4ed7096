"""
Named failure kinds for maze loading, querying, and the command line.

Malformed input files are rejected by the readers before a grid ever
reaches the search engine, so the engine itself only raises
OutOfBoundsError, and only on a programming error.
"""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error raised by this package."""


class OutOfBoundsError(MazeError, IndexError):
    """A grid query fell outside the declared level/row/col dimensions."""


class MapFormatError(MazeError, ValueError):
    """
    Base class for problems found while reading a maze file.

    Attributes:
        source: Name of the file (or other source) being read
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class IncorrectMapFormatError(MapFormatError):
    """
    The header line is missing or malformed, or a coordinate is not an integer.

    Raised for an empty file, a header with fewer than three values,
    non-integer header values, or any of M, N, R that is not positive.
    """


class IllegalMapCharacterError(MapFormatError):
    """A cell character is not one of the five known cell codes."""


class IncompleteMapError(MapFormatError):
    """
    The file does not hold enough data for the declared dimensions.

    Raised when the file ends before every row was read, when a row is
    shorter than N characters, or when a coordinate entry falls outside
    the declared dimensions.
    """


class IllegalCommandLineInputsError(MazeError):
    """The command line did not select exactly one routing strategy."""
