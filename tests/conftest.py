from pathlib import Path
from typing import Iterator

import pytest

from os_series import default_registry

DISTRO_INFO_HEADER = "version,codename,series,created,release,eol,eol-server\n"

# Supported releases end in 2099 so the rows stay valid whatever the date.
DISTRO_INFO_DATA = DISTRO_INFO_HEADER + (
    "12.04 LTS,Precise Pangolin,precise,2011-10-13,2012-04-26,2017-04-26,2017-04-26\n"
    "14.04 LTS,Trusty Tahr,trusty,2013-10-17,2014-04-17,2019-04-25,2019-04-25\n"
    "16.04 LTS,Xenial Xerus,xenial,2015-10-22,2016-04-21,2099-04-21,2099-04-21\n"
    "18.04 LTS,Bionic Beaver,bionic,2017-10-19,2018-04-26,2099-04-26,2099-04-26\n"
    "18.10,Cosmic Cuttlefish,cosmic,2018-04-26,2018-10-18,2019-07-18\n"
    "19.04,Disco Dingo,disco,2018-10-18,2019-04-18,2099-01-18\n"
    "19.10,Eoan Ermine,eoan,2019-04-18,2019-10-17,2099-07-17\n"
)


@pytest.fixture(autouse=True)
def isolated_registry(tmp_path: Path) -> Iterator[None]:
    """Reset the process wide registry and keep it away from the host feed."""

    original_path = default_registry.distro_info_path
    default_registry.distro_info_path = tmp_path / "missing.csv"
    default_registry.reset()
    yield
    default_registry.distro_info_path = original_path
    default_registry.reset()


@pytest.fixture
def distro_info_file(tmp_path: Path) -> Path:
    path = tmp_path / "ubuntu.csv"
    path.write_text(DISTRO_INFO_DATA, encoding="utf-8")
    return path
