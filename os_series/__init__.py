"""Lookups between OS series names, versions and OS families."""

from .distro_info import DistroInfoRecord
from .errors import (
    FileAccessError,
    InvalidSeriesError,
    SeriesError,
    UnknownOSForSeriesError,
    UnknownSeriesForVersionError,
    UnknownVersionForSeriesError,
    VersionFormatError,
)
from .ostype import OSType
from .registry import (
    SeriesRegistry,
    default_registry,
    default_supported_lts,
    get_os_from_series,
    is_windows_nano,
    latest_lts,
    load_distro_info,
    os_supported_series,
    series_version,
    set_latest_lts_for_testing,
    set_series_versions,
    supported_juju_controller_series,
    supported_juju_series,
    supported_juju_workload_series,
    supported_lts,
    ubuntu_series_version,
    ubuntu_versions,
    version_series,
    windows_version_series,
    windows_versions,
)

__all__ = [
    "DistroInfoRecord",
    "FileAccessError",
    "InvalidSeriesError",
    "OSType",
    "SeriesError",
    "SeriesRegistry",
    "UnknownOSForSeriesError",
    "UnknownSeriesForVersionError",
    "UnknownVersionForSeriesError",
    "VersionFormatError",
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
