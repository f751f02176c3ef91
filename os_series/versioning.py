"""Helpers for ordering series by their numeric version.

Ubuntu versions look like ``12.04`` or ``19.10`` and macOS versions like
``10.9`` and ``10.15``.  Plain string comparison puts ``"10.15"`` before
``"10.9"``, so the helpers here compare the numeric components of the version
strings instead.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Mapping, Optional, Tuple

from .errors import UnknownVersionForSeriesError, VersionFormatError

_VERSION_RE = re.compile(r"\d+")


def version_key(version: str) -> Tuple[int, ...]:
    """Return the numeric components of a version string as a tuple.

    Parameters
    ----------
    version:
        The textual version.  Only the digits matter; everything else is
        ignored which allows values like ``"18.04 LTS"``.

    Raises
    ------
    VersionFormatError
        If the version does not contain any decimal digits.
    """

    parts = _VERSION_RE.findall(version)
    if not parts:
        raise VersionFormatError(
            f"Version '{version}' does not contain a numeric component"
        )
    return tuple(int(part) for part in parts)


def sort_by_version(
    series_versions: Mapping[str, str], series: Optional[Iterable[str]] = None
) -> List[str]:
    """Return series names ordered by their version, oldest first.

    ``series`` restricts the result to a subset of the mapping's keys.  Series
    sharing a version are ordered by name so the result is deterministic.
    """

    names = list(series_versions if series is None else series)
    names.sort(key=lambda name: (version_key(series_versions[name]), name))
    return names


def series_window(
    series_versions: Mapping[str, str], newest: str, count: int
) -> List[str]:
    """Return the ``count`` most recent series up to and including ``newest``.

    The result is in release order and ends with ``newest``.

    Raises
    ------
    UnknownVersionForSeriesError
        If ``newest`` is not part of ``series_versions``.
    """

    if newest not in series_versions:
        raise UnknownVersionForSeriesError(newest)
    newest_key = version_key(series_versions[newest])

    window = [
        name
        for name in sort_by_version(series_versions)
        if version_key(series_versions[name]) <= newest_key
    ]
    return window[-count:] if count > 0 else []


__all__ = ["series_window", "sort_by_version", "version_key"]
