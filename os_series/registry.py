"""The series registry.

:class:`SeriesRegistry` answers which OS family a series belongs to, which
version it has, and which series are supported for controllers and workloads.
It starts out with the static tables from :mod:`os_series.data` and can be
enriched with the Ubuntu distro-info feed, either explicitly through
:meth:`SeriesRegistry.load_distro_info` or on demand when a lookup misses or a
supported series set is requested.

The version table is only ever replaced as a whole: a new dictionary is built
and then swapped in, so readers never see a half updated table.  There is no
internal locking; callers that need several calls to see the same table must
serialise access themselves.

A process wide registry is available as :data:`default_registry` together with
module level functions bound to it.  Code that can pass a registry around
should prefer doing so.
"""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Set, Tuple, Union

from . import data
from .distro_info import UBUNTU_DISTRO_INFO_PATH, DistroInfoRecord
from .distro_info import load_distro_info as _read_distro_info
from .errors import (
    FileAccessError,
    InvalidSeriesError,
    UnknownOSForSeriesError,
    UnknownSeriesForVersionError,
    UnknownVersionForSeriesError,
)
from .ostype import OSType
from .versioning import series_window, sort_by_version

logger = logging.getLogger(__name__)

DISTRO_INFO_ENV = "OS_SERIES_DISTRO_INFO"

_WINDOWS_SERIES = frozenset(data.WINDOWS_VERSIONS.values()) | frozenset(
    data.WINDOWS_NANO_VERSIONS.values()
)

# Exact matches for the families whose tables never change.  Ubuntu is checked
# separately because the distro-info feed can add series to it.
_EXACT_RULES: Tuple[Tuple[frozenset, OSType], ...] = (
    (frozenset(data.MACOS_SERIES), OSType.OSX),
    (frozenset(data.CENTOS_SERIES), OSType.CENTOS),
    (frozenset(data.OPENSUSE_SERIES), OSType.OPENSUSE),
    (frozenset(data.KUBERNETES_SERIES), OSType.KUBERNETES),
    (frozenset(data.GENERIC_LINUX_SERIES), OSType.GENERIC_LINUX),
    (_WINDOWS_SERIES, OSType.WINDOWS),
)

_PATTERN_RULES: Tuple[Tuple[Callable[[str], bool], OSType], ...] = (
    (lambda series: series.startswith("win"), OSType.WINDOWS),
)

_WORKLOAD_SERIES = (
    _WINDOWS_SERIES
    | frozenset(data.CENTOS_SERIES)
    | frozenset(data.OPENSUSE_SERIES)
    | frozenset(data.KUBERNETES_SERIES)
    | frozenset(data.GENERIC_LINUX_SERIES)
)


def is_windows_nano(series: str) -> bool:
    """Return ``True`` if ``series`` names a Windows Nano release."""

    return series.startswith("win") and series.endswith("nano")


class SeriesRegistry:
    """Lookup tables between series, versions and OS families.

    Parameters
    ----------
    distro_info_path:
        Location of the Ubuntu distro-info CSV used for on-demand enrichment.
    today:
        Callable returning the current date, used to decide whether a release
        from the feed has reached its end of life.
    """

    def __init__(
        self,
        distro_info_path: Union[str, Path, None] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.distro_info_path = Path(distro_info_path or UBUNTU_DISTRO_INFO_PATH)
        self._today = today
        self.reset()

    def reset(self) -> None:
        """Drop every override and all feed data, back to the static tables."""

        self._swap_versions(data.static_series_versions())
        self._records: Dict[str, DistroInfoRecord] = {}
        self._latest_lts: Optional[str] = None
        self._loaded_from: Optional[Path] = None
        self._failed_from: Optional[Path] = None
        self._loads = 0

    @property
    def is_enriched(self) -> bool:
        """Whether distro-info data has been merged into the version table."""

        return self._loaded_from is not None

    # ------------------------------------------------------------------
    # Version table

    def _swap_versions(
        self, versions: Mapping[str, str]
    ) -> Tuple[Dict[str, str], Dict[str, str]]:
        new_versions = dict(versions)
        new_series = {version: series for series, version in new_versions.items()}
        previous = (
            getattr(self, "_versions", {}),
            getattr(self, "_series_by_version", {}),
        )
        self._versions, self._series_by_version = new_versions, new_series
        return previous

    def set_series_versions(self, versions: Mapping[str, str]) -> Callable[[], None]:
        """Replace the whole version table and return a callable restoring it.

        If the feed is loaded between the swap and the restore, the restored
        table predates it; the registry then counts as not enriched again and
        merges the feed back in on the next on-demand load.
        """

        previous_versions, previous_series = self._swap_versions(versions)
        loads = self._loads

        def restore() -> None:
            self._versions, self._series_by_version = previous_versions, previous_series
            if self._loads != loads:
                self._loaded_from = None

        return restore

    def series_version(self, series: str) -> str:
        if series not in self._versions:
            self._ensure_distro_info()
        try:
            return self._versions[series]
        except KeyError:
            raise UnknownVersionForSeriesError(series) from None

    def version_series(self, version: str) -> str:
        if version not in self._series_by_version:
            self._ensure_distro_info()
        try:
            return self._series_by_version[version]
        except KeyError:
            raise UnknownSeriesForVersionError(version) from None

    # ------------------------------------------------------------------
    # Distro-info feed

    def load_distro_info(
        self, path: Union[str, Path, None] = None
    ) -> List[DistroInfoRecord]:
        """Read the distro-info feed and merge it into the version table.

        Feed versions take precedence over the current table.  Series the feed
        marks as end of life stay resolvable; they are only left out of the
        supported sets.

        Raises
        ------
        FileAccessError
            If the file cannot be read.
        """

        csv_path = Path(path or self.distro_info_path)
        records = _read_distro_info(csv_path)

        merged = dict(self._versions)
        merged.update((record.series, record.version) for record in records)
        self._records = {record.series: record for record in records}
        self._swap_versions(merged)
        self._loaded_from = csv_path
        self._failed_from = None
        self._loads += 1
        logger.debug("Merged %d distro-info series from %s", len(records), csv_path)
        return records

    def _ensure_distro_info(self) -> None:
        # Failed paths are retried on every call; the warning is logged once.
        path = Path(self.distro_info_path)
        if path == self._loaded_from:
            return
        try:
            self.load_distro_info(path)
        except FileAccessError as exc:
            if path != self._failed_from:
                logger.warning("Falling back to static series data: %s", exc)
            self._failed_from = path

    # ------------------------------------------------------------------
    # Ubuntu

    def _ubuntu_versions(self) -> Dict[str, str]:
        versions = {series: info.version for series, info in data.UBUNTU_SERIES.items()}
        versions.update((series, record.version) for series, record in self._records.items())
        return versions

    def _supported_ubuntu(self) -> Set[str]:
        today = self._today()
        supported = {
            series
            for series, info in data.UBUNTU_SERIES.items()
            if info.supported and series not in self._records
        }
        supported.update(
            series for series, record in self._records.items() if not record.is_eol(today)
        )
        return supported

    def ubuntu_series_version(self, series: str) -> str:
        versions = self._ubuntu_versions()
        if series not in versions:
            self._ensure_distro_info()
            versions = self._ubuntu_versions()
        try:
            return versions[series]
        except KeyError:
            raise UnknownVersionForSeriesError(series) from None

    def ubuntu_versions(self, supported: Optional[bool] = None) -> Dict[str, str]:
        """Return Ubuntu series mapped to their versions.

        With ``supported`` set, only series whose supported status matches are
        returned.
        """

        if supported is None:
            return self._ubuntu_versions()
        self._ensure_distro_info()
        versions = self._ubuntu_versions()
        supported_series = self._supported_ubuntu()
        return {
            series: version
            for series, version in versions.items()
            if (series in supported_series) == supported
        }

    def ubuntu_series_ordered(self) -> List[str]:
        """Return all known Ubuntu series, oldest release first."""

        return sort_by_version(self._ubuntu_versions())

    # ------------------------------------------------------------------
    # Classification

    def _classify(self, series: str) -> Optional[OSType]:
        if series in data.UBUNTU_SERIES or series in self._records:
            return OSType.UBUNTU
        for table, os_type in _EXACT_RULES:
            if series in table:
                return os_type
        for matches, os_type in _PATTERN_RULES:
            if matches(series):
                return os_type
        return None

    def get_os_from_series(self, series: str) -> OSType:
        """Return the OS family of ``series``.

        Raises
        ------
        InvalidSeriesError
            If ``series`` is empty.
        UnknownOSForSeriesError
            If no family is known for ``series``.
        """

        if not series:
            raise InvalidSeriesError(series)
        os_type = self._classify(series)
        if os_type is None:
            self._ensure_distro_info()
            os_type = self._classify(series)
        if os_type is None:
            raise UnknownOSForSeriesError(series)
        return os_type

    def os_supported_series(self, os_type: OSType) -> Set[str]:
        """Return the series of the current version table that belong to ``os_type``."""

        return {series for series in self._versions if self._classify(series) is os_type}

    is_windows_nano = staticmethod(is_windows_nano)

    def windows_versions(self) -> Dict[str, str]:
        """Return Windows product names mapped to their series tag."""

        return dict(data.WINDOWS_VERSIONS)

    def windows_version_series(self, name: str) -> str:
        try:
            return data.WINDOWS_VERSIONS[name]
        except KeyError:
            raise UnknownSeriesForVersionError(name) from None

    # ------------------------------------------------------------------
    # LTS

    def default_supported_lts(self) -> str:
        return data.DEFAULT_SUPPORTED_LTS

    def latest_lts(self) -> str:
        return self._latest_lts or self.default_supported_lts()

    def set_latest_lts_for_testing(self, value: str) -> str:
        """Override the latest LTS and return the value it replaces.

        An empty ``value`` restores the default.
        """

        previous = self.latest_lts()
        self._latest_lts = value or None
        return previous

    def supported_lts(self) -> List[str]:
        """Return the supported LTS series in release order."""

        lts_versions = {
            series: info.version for series, info in data.UBUNTU_SERIES.items() if info.lts
        }
        return series_window(
            lts_versions, self.default_supported_lts(), data.SUPPORTED_LTS_COUNT
        )

    # ------------------------------------------------------------------
    # Supported sets

    def supported_juju_controller_series(self) -> Set[str]:
        """Return the Ubuntu series a controller may run on."""

        self._ensure_distro_info()
        return self._supported_ubuntu()

    def supported_juju_workload_series(self) -> Set[str]:
        """Return every series a workload may run on."""

        return self.supported_juju_controller_series() | _WORKLOAD_SERIES

    def supported_juju_series(self) -> Set[str]:
        return self.supported_juju_workload_series()


def configured_distro_info_path() -> Optional[Path]:
    """Return the distro-info path set through the environment, if any."""

    value = os.environ.get(DISTRO_INFO_ENV)
    return Path(value) if value else None


default_registry = SeriesRegistry(configured_distro_info_path())


def get_os_from_series(series: str) -> OSType:
    return default_registry.get_os_from_series(series)


def series_version(series: str) -> str:
    return default_registry.series_version(series)


def version_series(version: str) -> str:
    return default_registry.version_series(version)


def ubuntu_series_version(series: str) -> str:
    return default_registry.ubuntu_series_version(series)


def ubuntu_versions(supported: Optional[bool] = None) -> Dict[str, str]:
    return default_registry.ubuntu_versions(supported)


def os_supported_series(os_type: OSType) -> Set[str]:
    return default_registry.os_supported_series(os_type)


def windows_versions() -> Dict[str, str]:
    return default_registry.windows_versions()


def windows_version_series(name: str) -> str:
    return default_registry.windows_version_series(name)


def default_supported_lts() -> str:
    return default_registry.default_supported_lts()


def latest_lts() -> str:
    return default_registry.latest_lts()


def set_latest_lts_for_testing(value: str) -> str:
    return default_registry.set_latest_lts_for_testing(value)


def supported_lts() -> List[str]:
    return default_registry.supported_lts()


def supported_juju_controller_series() -> Set[str]:
    return default_registry.supported_juju_controller_series()


def supported_juju_workload_series() -> Set[str]:
    return default_registry.supported_juju_workload_series()


def supported_juju_series() -> Set[str]:
    return default_registry.supported_juju_series()


def set_series_versions(versions: Mapping[str, str]) -> Callable[[], None]:
    return default_registry.set_series_versions(versions)


def load_distro_info(path: Union[str, Path, None] = None) -> List[DistroInfoRecord]:
    return default_registry.load_distro_info(path)


__all__ = [
    "DISTRO_INFO_ENV",
    "SeriesRegistry",
    "configured_distro_info_path",
    "default_registry",
    "default_supported_lts",
    "get_os_from_series",
    "is_windows_nano",
    "latest_lts",
    "load_distro_info",
    "os_supported_series",
    "series_version",
    "set_latest_lts_for_testing",
    "set_series_versions",
    "supported_juju_controller_series",
    "supported_juju_series",
    "supported_juju_workload_series",
    "supported_lts",
    "ubuntu_series_version",
    "ubuntu_versions",
    "version_series",
    "windows_version_series",
    "windows_versions",
]
