# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the ojdkbuild adapter."""

import json
from pathlib import Path

import pytest

from disco.adapters.ojdk_build import OjdkBuildAdapter, strip_prefix
from disco.classification.dimensions import Architecture, ArchiveType, OperatingSystem, PackageType
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> OjdkBuildAdapter:
    """Return a configured ojdkbuild adapter."""
    adapter = OjdkBuildAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="payload")
def payload_(resources_path: Path) -> list:
    """Return the releases payload."""
    with open(resources_path.joinpath("ojdk_build.json"), encoding="utf-8") as file:
        return json.load(file)  # type: ignore[no-any-return]


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        (
            "java-11-openjdk-11.0.15.9-1.windows.ojdkbuild.x86_64.zip",
            "11.0.15.9-1.windows.ojdkbuild.x86_64.zip",
        ),
        (
            "java-11-openjdk-debug-11.0.15.9-1.windows.ojdkbuild.x86_64.zip",
            "11.0.15.9-1.windows.ojdkbuild.x86_64.zip",
        ),
        (
            "java-1.8.0-openjdk-jre-1.8.0.332-1.b09.ojdkbuild.windows.x86_64.zip",
            "1.8.0.332-1.b09.ojdkbuild.windows.x86_64.zip",
        ),
    ],
)
def test_strip_prefix(filename: str, expected: str) -> None:
    """Test removing the package name prefix."""
    assert strip_prefix(filename) == expected


def test_parse(adapter: OjdkBuildAdapter, payload: list) -> None:
    """Test the classification of the release assets."""
    records = adapter.parse(payload)
    assert [record.filename for record in records] == [
        "java-11-openjdk-11.0.15.9-1.windows.ojdkbuild.x86_64.zip",
        "java-11-openjdk-11.0.15.9-1.windows.ojdkbuild.x86_64.msi",
        "java-1.8.0-openjdk-jre-1.8.0.332-1.b09.ojdkbuild.windows.x86_64.zip",
    ]

    archive, installer, legacy = records
    assert archive.java_version == VersionNumber.from_components(11, 0, 15, 0)
    assert archive.distribution_version == VersionNumber.from_components(11, 0, 15, 9)
    assert archive.operating_system is OperatingSystem.WINDOWS
    assert archive.architecture is Architecture.X64
    assert archive.archive_type is ArchiveType.ZIP
    assert archive.package_type is PackageType.JDK
    assert archive.checksum_uri.endswith("java-11-openjdk-11.0.15.9-1.windows.ojdkbuild.x86_64.zip.sha256")
    assert installer.archive_type is ArchiveType.MSI
    assert not installer.checksum_uri
    assert legacy.java_version == VersionNumber.from_components(8, 0, 332)
    assert legacy.package_type is PackageType.JRE


def test_locator(adapter: OjdkBuildAdapter) -> None:
    """Test the releases listing URL."""
    locator = adapter.locator_for(FilterSpecification())
    assert locator is not None
    assert locator.url == "https://api.github.com/repos/ojdkbuild/ojdkbuild/releases?per_page=100"
