"""Operating system families that a series can belong to."""

from __future__ import annotations

from enum import Enum


class OSType(Enum):
    """Coarse platform classification of a series."""

    UNKNOWN = "unknown"
    UBUNTU = "ubuntu"
    WINDOWS = "windows"
    OSX = "osx"
    CENTOS = "centos"
    OPENSUSE = "opensuse"
    KUBERNETES = "kubernetes"
    GENERIC_LINUX = "genericlinux"

    def __str__(self) -> str:
        return self.value

    @property
    def is_linux(self) -> bool:
        """Return ``True`` for the Linux based families."""

        return self in _LINUX_TYPES


_LINUX_TYPES = frozenset(
    {OSType.UBUNTU, OSType.CENTOS, OSType.OPENSUSE, OSType.GENERIC_LINUX}
)


__all__ = ["OSType"]
