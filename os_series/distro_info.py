"""Parsing of the Ubuntu distro-info CSV feed.

The feed is normally installed at ``/usr/share/distro-info/ubuntu.csv`` and
looks like::

    version,codename,series,created,release,eol,eol-server
    18.04 LTS,Bionic Beaver,bionic,2017-10-19,2018-04-26,2023-04-26,2023-04-26

Columns are looked up by header name.  Older and trimmed-down feeds carry no
``series`` column; the ``codename`` column then holds the series name.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from .errors import FileAccessError, VersionFormatError
from .versioning import version_key

logger = logging.getLogger(__name__)

UBUNTU_DISTRO_INFO_PATH = Path("/usr/share/distro-info/ubuntu.csv")

_DATE_FORMAT = "%Y-%m-%d"
_LTS_SUFFIX = " LTS"


@dataclass(frozen=True)
class DistroInfoRecord:
    """A single release row of the distro-info feed.

    Dates that are missing or cannot be parsed are ``None``.
    """

    series: str
    version: str
    codename: str = ""
    is_lts: bool = False
    created: Optional[date] = None
    release: Optional[date] = None
    eol: Optional[date] = None
    eol_server: Optional[date] = None

    def is_eol(self, today: date) -> bool:
        """Return ``True`` once the ``eol`` date has passed.

        A release without a usable ``eol`` date is never considered end of
        life.
        """

        return self.eol is not None and self.eol < today


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), _DATE_FORMAT).date()
    except ValueError:
        return None


def _field(row: Dict[str, Optional[str]], name: str) -> str:
    return (row.get(name) or "").strip()


def _parse_row(row: Dict[str, Optional[str]]) -> Optional[DistroInfoRecord]:
    """Turn a CSV row into a record, or ``None`` when it is unusable."""

    codename = _field(row, "codename")
    series = _field(row, "series") or codename
    raw_version = _field(row, "version")
    if not series or not raw_version:
        return None

    is_lts = raw_version.endswith(_LTS_SUFFIX)
    version = raw_version[: -len(_LTS_SUFFIX)].strip() if is_lts else raw_version
    try:
        version_key(version)
    except VersionFormatError:
        return None

    return DistroInfoRecord(
        series=series,
        version=version,
        codename=codename,
        is_lts=is_lts,
        created=_parse_date(row.get("created")),
        release=_parse_date(row.get("release")),
        eol=_parse_date(row.get("eol")),
        eol_server=_parse_date(row.get("eol-server")),
    )


def iter_distro_info(path: Union[str, Path]) -> Iterator[DistroInfoRecord]:
    """Yield the usable records of a distro-info CSV file.

    Malformed rows are skipped.  The whole file is read before the first record
    is yielded so that read errors surface before any caller side effects.

    Raises
    ------
    FileAccessError
        If the file is missing, unreadable or not valid CSV.
    """

    csv_path = Path(path)
    try:
        with csv_path.open(newline="", encoding="utf-8") as handle:
            rows = list(csv.DictReader(handle))
    except OSError as exc:
        raise FileAccessError(csv_path, exc.strerror or str(exc)) from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise FileAccessError(csv_path, str(exc)) from exc

    for line, row in enumerate(rows, start=2):
        record = _parse_row(row)
        if record is None:
            logger.debug("Skipping malformed distro-info row %d in %s", line, csv_path)
            continue
        yield record


def load_distro_info(path: Union[str, Path]) -> List[DistroInfoRecord]:
    """Return all usable records of ``path`` ordered by version."""

    records = list(iter_distro_info(path))
    records.sort(key=lambda record: version_key(record.version))
    logger.debug("Loaded %d distro-info records from %s", len(records), path)
    return records


__all__ = [
    "DistroInfoRecord",
    "UBUNTU_DISTRO_INFO_PATH",
    "iter_distro_info",
    "load_distro_info",
]
