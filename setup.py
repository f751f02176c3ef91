from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent.resolve()

setup(
    name="os-series",
    version="0.1.0",
    description="Lookups between OS series names, versions and OS families.",
    long_description=(ROOT / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    license="LGPL-3.0-only",
    python_requires=">=3.10",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    include_package_data=True,
    zip_safe=False,
    extras_require={"test": ["pytest"]},
)
