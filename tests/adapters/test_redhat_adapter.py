# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the Red Hat build of OpenJDK adapter."""

from pathlib import Path

import pytest

from disco.adapters.base import PayloadKind
from disco.adapters.redhat import RedHatAdapter, strip_prefix
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> RedHatAdapter:
    """Return a configured Red Hat adapter."""
    adapter = RedHatAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="page")
def page_(resources_path: Path) -> str:
    """Return the download page."""
    return resources_path.joinpath("redhat.html").read_text(encoding="utf-8")


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("java-17-openjdk-17.0.6.0.10-1.win.x86_64.zip", ("17.0.6.0.10-1.win.x86_64.zip", PackageType.JDK)),
        ("java-17-openjdk-jre-17.0.6.0.10-1.win.x86_64.zip", ("17.0.6.0.10-1.win.x86_64.zip", PackageType.JRE)),
        ("openjfx-17.0.6-1.win.x86_64.zip", ("17.0.6-1.win.x86_64.zip", PackageType.JDK)),
    ],
)
def test_strip_prefix(filename: str, expected: tuple[str, PackageType]) -> None:
    """Test removing the package name prefix."""
    assert strip_prefix(filename) == expected


def test_parse(adapter: RedHatAdapter, page: str) -> None:
    """Test the classification of the download links."""
    records = adapter.parse(page)
    assert [record.filename for record in records] == [
        "java-17-openjdk-17.0.6.0.10-1.win.x86_64.zip",
        "java-17-openjdk-jre-17.0.6.0.10-1.win.x86_64.zip",
        "java-17-openjdk-17.0.6.0.10-1.portable.jdk.el.x86_64.tar.gz",
        "java-19-openjdk-19.0.1.0.10-1.dev.portable.jdk.el.x86_64.tar.gz",
        "openjfx-17.0.6-1.win.x86_64.zip",
    ]

    windows, jre, portable, development, javafx = records
    assert windows.java_version == VersionNumber.from_components(17, 0, 6, build=10)
    assert windows.distribution_version == VersionNumber.from_components(17, 0, 6, 0, 10)
    assert windows.operating_system is OperatingSystem.WINDOWS
    assert windows.architecture is Architecture.X64
    assert windows.package_type is PackageType.JDK
    assert windows.release_status is ReleaseStatus.GA
    assert not windows.directly_downloadable
    assert not windows.direct_download_uri
    assert windows.download_site_uri == "https://developers.redhat.com/products/openjdk/download"
    assert jre.package_type is PackageType.JRE
    assert portable.operating_system is OperatingSystem.LINUX
    assert portable.archive_type is ArchiveType.TAR_GZ
    assert development.release_status is ReleaseStatus.EA
    assert javafx.javafx_bundled
    assert not windows.javafx_bundled


def test_parse_latest(adapter: RedHatAdapter, page: str) -> None:
    """Test that the latest filter keeps the requested feature only."""
    filters = FilterSpecification(version=VersionNumber(feature=19), latest=True)
    records = adapter.parse(page, filters)
    assert [record.filename for record in records] == [
        "java-19-openjdk-19.0.1.0.10-1.dev.portable.jdk.el.x86_64.tar.gz"
    ]


def test_locator(adapter: RedHatAdapter) -> None:
    """Test that every request reads the download page."""
    locator = adapter.locator_for(FilterSpecification())
    assert locator is not None
    assert locator.url == "https://developers.redhat.com/products/openjdk/download"
    assert locator.payload_kind is PayloadKind.HTML
