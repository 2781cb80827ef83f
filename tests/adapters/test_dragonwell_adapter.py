# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the Dragonwell adapter."""

import json
from pathlib import Path

import pytest

from disco.adapters.dragonwell import DragonwellAdapter, release_status_of, version_from_tag
from disco.classification.dimensions import Architecture, ArchiveType, OperatingSystem, ReleaseStatus
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber, parse_raw


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> DragonwellAdapter:
    """Return a configured Dragonwell adapter."""
    adapter = DragonwellAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="payload")
def payload_(resources_path: Path) -> list:
    """Return the releases payload."""
    with open(resources_path.joinpath("dragonwell.json"), encoding="utf-8") as file:
        return json.load(file)  # type: ignore[no-any-return]


@pytest.mark.parametrize(
    ("tag_name", "expected"),
    [
        ("dragonwell-standard-17.0.6.0.6+9_jdk-17.0.6-ga", VersionNumber.from_components(17, 0, 6)),
        ("dragonwell-extended-11.0.18.14_jdk-11.0.18-ga", VersionNumber.from_components(11, 0, 18)),
        ("dragonwell-8.14.15", VersionNumber()),
    ],
)
def test_version_from_tag(tag_name: str, expected: VersionNumber) -> None:
    """Test reading the runtime version after the last ``_jdk`` marker."""
    assert version_from_tag(tag_name) == expected


@pytest.mark.parametrize(
    ("release_name", "expected"),
    [
        ("Alibaba_Dragonwell_Standard_17.0.6.0.6+9_GA", ReleaseStatus.GA),
        ("Alibaba Dragonwell 21 EA ", ReleaseStatus.EA),
        ("Alibaba_Dragonwell_17.0.6", None),
    ],
)
def test_release_status_of(release_name: str, expected: ReleaseStatus | None) -> None:
    """Test reading the release status from the suffix of a release name."""
    assert release_status_of(release_name) is expected


def test_parse(adapter: DragonwellAdapter, payload: list) -> None:
    """Test the classification of the release assets."""
    records = adapter.parse(payload)
    assert [record.filename for record in records] == [
        "Alibaba_Dragonwell_Standard_17.0.6.0.6.9_x64_linux.tar.gz",
        "Alibaba_Dragonwell_Standard_17.0.6.0.6.9_x64_windows.zip",
        "Alibaba_Dragonwell_Standard_21.0.0.0.0.35_aarch64_linux.tar.gz",
    ]

    linux, windows, early_access = records
    assert linux.java_version == VersionNumber.from_components(17, 0, 6)
    assert linux.distribution_version == VersionNumber.from_components(17, 0, 6, 0, 6, 9)
    assert linux.operating_system is OperatingSystem.LINUX
    assert linux.architecture is Architecture.X64
    assert linux.release_status is ReleaseStatus.GA
    assert linux.size == 187663104
    assert windows.operating_system is OperatingSystem.WINDOWS
    assert windows.archive_type is ArchiveType.ZIP
    assert early_access.java_version.feature == 21
    assert early_access.architecture is Architecture.AARCH64
    assert early_access.release_status is ReleaseStatus.EA


def test_parse_release_status_filter(adapter: DragonwellAdapter, payload: list) -> None:
    """Test that the release status filter applies to the status read from the release name."""
    records = adapter.parse(payload, FilterSpecification(release_status=ReleaseStatus.GA))
    assert len(records) == 2
    assert all(record.java_version.feature == 17 for record in records)


def test_locator(adapter: DragonwellAdapter) -> None:
    """Test that each feature version has its own repository."""
    locator = adapter.locator_for(FilterSpecification(version=parse_raw("17")))
    assert locator is not None
    assert locator.url == "https://api.github.com/repos/alibaba/dragonwell17/releases?per_page=100"
    assert adapter.locator_for(FilterSpecification()) is None
