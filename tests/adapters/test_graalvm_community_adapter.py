# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the GraalVM Community adapter."""

import json
from pathlib import Path

import pytest

from disco.adapters.graalvm_community import GraalVmCommunityAdapter, version_from_tag
from disco.classification.dimensions import Architecture, ArchiveType, HashAlgorithm, OperatingSystem, ReleaseStatus
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> GraalVmCommunityAdapter:
    """Return a configured GraalVM Community adapter."""
    adapter = GraalVmCommunityAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="payload")
def payload_(resources_path: Path) -> list:
    """Return the releases payload."""
    with open(resources_path.joinpath("graalvm_community.json"), encoding="utf-8") as file:
        return json.load(file)  # type: ignore[no-any-return]


@pytest.mark.parametrize(
    ("tag_name", "expected"),
    [
        ("jdk-17.0.8", VersionNumber.from_components(17, 0, 8)),
        ("23.0.0-dev-20230620_1953", VersionNumber.from_components(23, 0, 0, build=1953)),
        ("vm-22.3.1", VersionNumber()),
    ],
)
def test_version_from_tag(tag_name: str, expected: VersionNumber) -> None:
    """Test reading the runtime version of GA and development tags."""
    assert version_from_tag(tag_name) == expected


def test_parse(adapter: GraalVmCommunityAdapter, payload: list) -> None:
    """Test that only GA assets with the current naming are listed by default."""
    records = adapter.parse(payload)
    assert [record.filename for record in records] == [
        "graalvm-community-jdk-17.0.8_linux-x64_bin.tar.gz",
        "graalvm-community-jdk-17.0.8_macos-aarch64_bin.tar.gz",
        "graalvm-community-jdk-17.0.8_windows-x64_bin.zip",
    ]

    linux, macos, windows = records
    assert linux.java_version == VersionNumber.from_components(17, 0, 8)
    assert linux.release_status is ReleaseStatus.GA
    assert linux.operating_system is OperatingSystem.LINUX
    assert linux.architecture is Architecture.X64
    assert linux.checksum_uri.endswith("graalvm-community-jdk-17.0.8_linux-x64_bin.tar.gz.sha256")
    assert linux.checksum_type is HashAlgorithm.SHA256
    assert macos.operating_system is OperatingSystem.MACOS
    assert macos.architecture is Architecture.AARCH64
    assert not macos.checksum_uri
    assert windows.archive_type is ArchiveType.ZIP


def test_parse_early_access(adapter: GraalVmCommunityAdapter, payload: list) -> None:
    """Test that development builds are listed for early access requests."""
    records = adapter.parse(payload, FilterSpecification(release_status=ReleaseStatus.EA))
    assert len(records) == 1
    assert records[0].java_version == VersionNumber.from_components(23, 0, 0, build=1953)
    assert records[0].release_status is ReleaseStatus.EA


def test_locator(adapter: GraalVmCommunityAdapter) -> None:
    """Test the releases listing URL."""
    locator = adapter.locator_for(FilterSpecification())
    assert locator is not None
    assert locator.url == "https://api.github.com/repos/graalvm/graalvm-ce-builds/releases?per_page=100"
