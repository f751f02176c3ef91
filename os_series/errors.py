"""Exceptions raised by the series lookups.

Every lookup miss carries the value that was queried, both as an attribute and
verbatim inside the message, so that an empty string shows up as ``""``
rather than disappearing from the log line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class SeriesError(ValueError):
    """Base class for all series related failures."""


class InvalidSeriesError(SeriesError):
    """Raised when a series identifier is empty or otherwise unusable."""

    def __init__(self, series: str) -> None:
        self.series = series
        super().__init__(f'series "{series}" not valid')


class UnknownOSForSeriesError(SeriesError):
    """Raised when no OS family is known for a series."""

    def __init__(self, series: str) -> None:
        self.series = series
        super().__init__(f'unknown OS for series: "{series}"')


class UnknownVersionForSeriesError(SeriesError):
    """Raised when a series has no entry in the version table."""

    def __init__(self, series: str) -> None:
        self.series = series
        super().__init__(f'unknown version for series: "{series}"')


class UnknownSeriesForVersionError(SeriesError):
    """Raised when no series maps to a version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f'unknown series for version: "{version}"')


class VersionFormatError(SeriesError):
    """Raised when a version string does not contain any numeric information."""


class FileAccessError(SeriesError):
    """Raised when the distro-info file cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot read distro-info file {self.path}: {reason}")


__all__ = [
    "FileAccessError",
    "InvalidSeriesError",
    "SeriesError",
    "UnknownOSForSeriesError",
    "UnknownSeriesForVersionError",
    "UnknownVersionForSeriesError",
    "VersionFormatError",
]
