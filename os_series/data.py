"""Static series tables compiled into the package.

These tables are the baseline the registry starts from.  The Ubuntu table can
later be enriched with the distro-info feed; the other families only ever come
from here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class UbuntuSeries:
    """Version and support flags of a single Ubuntu release."""

    version: str
    lts: bool = False
    supported: bool = False


DEFAULT_SUPPORTED_LTS = "bionic"

# Number of LTS releases reported by ``supported_lts``.
SUPPORTED_LTS_COUNT = 3

UBUNTU_SERIES: Dict[str, UbuntuSeries] = {
    "precise": UbuntuSeries("12.04", lts=True),
    "quantal": UbuntuSeries("12.10"),
    "raring": UbuntuSeries("13.04"),
    "saucy": UbuntuSeries("13.10"),
    "trusty": UbuntuSeries("14.04", lts=True),
    "utopic": UbuntuSeries("14.10"),
    "vivid": UbuntuSeries("15.04"),
    "wily": UbuntuSeries("15.10"),
    "xenial": UbuntuSeries("16.04", lts=True, supported=True),
    "yakkety": UbuntuSeries("16.10"),
    "zesty": UbuntuSeries("17.04"),
    "artful": UbuntuSeries("17.10"),
    "bionic": UbuntuSeries("18.04", lts=True, supported=True),
    "cosmic": UbuntuSeries("18.10"),
    "disco": UbuntuSeries("19.04", supported=True),
    "eoan": UbuntuSeries("19.10", supported=True),
}

# Long product name -> series tag.
WINDOWS_VERSIONS: Dict[str, str] = {
    "Windows Server 2008 R2": "win2008r2",
    "Hyper-V Server 2012 R2": "win2012hvr2",
    "Hyper-V Server 2012": "win2012hv",
    "Windows Server 2012 R2": "win2012r2",
    "Windows Server 2012": "win2012",
    "Hyper-V Server 2016": "win2016hv",
    "Windows Server 2016": "win2016",
    "Windows Server 2019": "win2019",
    "Windows 7": "win7",
    "Windows 8": "win8",
    "Windows 8.1": "win81",
    "Windows 10": "win10",
}

WINDOWS_NANO_VERSIONS: Dict[str, str] = {
    "Windows Server 2016": "win2016nano",
}

MACOS_SERIES: Dict[str, str] = {
    "gorilla": "10.2",
    "panther": "10.3",
    "tiger": "10.4",
    "leopard": "10.5",
    "snowleopard": "10.6",
    "lion": "10.7",
    "mountainlion": "10.8",
    "mavericks": "10.9",
    "yosemite": "10.10",
    "elcapitan": "10.11",
    "sierra": "10.12",
    "highsierra": "10.13",
    "mojave": "10.14",
    "catalina": "10.15",
}

CENTOS_SERIES: Dict[str, str] = {"centos7": "centos7"}

OPENSUSE_SERIES: Dict[str, str] = {"opensuseleap": "opensuse42"}

KUBERNETES_SERIES: Dict[str, str] = {"kubernetes": "kubernetes"}

GENERIC_LINUX_SERIES: Dict[str, str] = {"genericlinux": "genericlinux"}


def static_series_versions() -> Dict[str, str]:
    """Build the compiled-in series -> version table.

    Windows tags are their own version; the long product names are only
    reachable through :data:`WINDOWS_VERSIONS`.
    """

    versions: Dict[str, str] = {}
    for series, info in UBUNTU_SERIES.items():
        versions[series] = info.version
    versions.update(MACOS_SERIES)
    for series in WINDOWS_VERSIONS.values():
        versions[series] = series
    for series in WINDOWS_NANO_VERSIONS.values():
        versions[series] = series
    versions.update(CENTOS_SERIES)
    versions.update(OPENSUSE_SERIES)
    versions.update(KUBERNETES_SERIES)
    versions.update(GENERIC_LINUX_SERIES)
    return versions


__all__ = [
    "CENTOS_SERIES",
    "DEFAULT_SUPPORTED_LTS",
    "GENERIC_LINUX_SERIES",
    "KUBERNETES_SERIES",
    "MACOS_SERIES",
    "OPENSUSE_SERIES",
    "SUPPORTED_LTS_COUNT",
    "UBUNTU_SERIES",
    "UbuntuSeries",
    "WINDOWS_NANO_VERSIONS",
    "WINDOWS_VERSIONS",
    "static_series_versions",
]
