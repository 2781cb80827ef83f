# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the Liberica Native Image Kit adapter."""

import json
from pathlib import Path

import pytest

from disco.adapters.liberica_native import LibericaNativeAdapter, java_version_of
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    HashAlgorithm,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber, parse_raw


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> LibericaNativeAdapter:
    """Return a configured Liberica Native adapter."""
    adapter = LibericaNativeAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="payload")
def payload_(resources_path: Path) -> list:
    """Return the releases payload."""
    with open(resources_path.joinpath("liberica_native.json"), encoding="utf-8") as file:
        return json.load(file)  # type: ignore[no-any-return]


def test_java_version_of() -> None:
    """Test that the runtime component wins over the filename."""
    entry = {"components": [{"component": "liberica", "version": "17.0.7+7"}]}
    filename = "bellsoft-liberica-vm-openjdk17.0.6+10-22.3.1+1-linux-amd64.tar.gz"
    assert java_version_of(entry, filename) == VersionNumber.from_components(17, 0, 7, build=7)
    assert java_version_of({}, filename) == VersionNumber.from_components(17, 0, 6, build=10)


def test_parse(adapter: LibericaNativeAdapter, payload: list) -> None:
    """Test the classification of the kits, the one with an unknown operating system is skipped."""
    records = adapter.parse(payload)
    assert len(records) == 3

    linux, macos, windows = records
    assert linux.java_version == VersionNumber.from_components(17, 0, 6, build=10)
    assert linux.distribution_version == VersionNumber.from_components(22, 3, 1, build=1)
    assert linux.operating_system is OperatingSystem.LINUX
    assert linux.architecture is Architecture.AMD64
    assert linux.archive_type is ArchiveType.TAR_GZ
    assert linux.package_type is PackageType.JDK
    assert linux.release_status is ReleaseStatus.GA
    assert linux.checksum == "3b7c62ae1b4ec4d2bb4aab0ee7a3a1fd1e6d0b6d"
    assert linux.checksum_type is HashAlgorithm.SHA1
    assert linux.size == 284915384

    assert macos.java_version == VersionNumber.from_components(11, 0, 18, build=10)
    assert macos.architecture is Architecture.AARCH64
    assert macos.archive_type is ArchiveType.ZIP
    assert not macos.checksum
    assert macos.checksum_type is HashAlgorithm.NONE

    assert windows.java_version.feature == 21
    assert windows.release_status is ReleaseStatus.EA
    assert windows.operating_system is OperatingSystem.WINDOWS


def test_parse_latest(adapter: LibericaNativeAdapter, payload: list) -> None:
    """Test that the latest filter compares the Java feature, not the kit version."""
    records = adapter.parse(payload, FilterSpecification(version=parse_raw("11"), latest=True))
    assert [record.java_version.feature for record in records] == [11]


def test_locator(adapter: LibericaNativeAdapter) -> None:
    """Test the releases query."""
    locator = adapter.locator_for(FilterSpecification(archive_type=ArchiveType.ZIP))
    assert locator is not None
    assert locator.url == "https://api.bell-sw.com/v1/nik/releases?bundle-type=standard&package-type=zip"
