# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the OpenJDK builds adapter of jdk.java.net."""

from pathlib import Path

import pytest

from disco.adapters.base import PayloadKind
from disco.adapters.oracle_open_jdk import OracleOpenJdkAdapter, build_number_of, release_status_of, split_filename
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    HashAlgorithm,
    LibCType,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber, parse_raw

ARTIFACT_URL = (
    "https://download.java.net/java/GA/jdk17.0.2/dfd4a8d0985749f896bed50d7138ee7f/8/GPL/"
    "openjdk-17.0.2_linux-x64_bin.tar.gz"
)


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> OracleOpenJdkAdapter:
    """Return a configured adapter."""
    adapter = OracleOpenJdkAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="page")
def page_(resources_path: Path) -> str:
    """Return the download page."""
    return resources_path.joinpath("oracle_open_jdk.html").read_text(encoding="utf-8")


def test_split_filename() -> None:
    """Test splitting a filename into version and platform."""
    assert split_filename("openjdk-17-ea+16_linux-x64-musl_bin.tar.gz") == (
        "17-ea+16",
        OperatingSystem.LINUX,
        Architecture.X64,
        True,
    )
    with pytest.raises(PayloadEntryError):
        split_filename("openjdk-17.0.2.tar.gz")
    with pytest.raises(PayloadEntryError):
        split_filename("openjdk-17.0.2_bin.tar.gz")


def test_path_markers() -> None:
    """Test the build number and release status stated by the download path."""
    assert build_number_of(ARTIFACT_URL) == 8
    assert build_number_of("https://example.com/openjdk-17.0.2_linux-x64_bin.tar.gz") is None
    assert release_status_of(ARTIFACT_URL) is ReleaseStatus.GA
    assert release_status_of("https://download.java.net/java/early_access/jdk22/5/GPL/x.tar.gz") is ReleaseStatus.EA
    assert release_status_of("https://example.com/x.tar.gz") is None


def test_parse_ga_build(adapter: OracleOpenJdkAdapter, page: str) -> None:
    """Test the classification of the Linux x64 GA build."""
    records = adapter.parse(page)
    assert len(records) == 5

    record = records[0]
    assert record.filename == "openjdk-17.0.2_linux-x64_bin.tar.gz"
    assert record.architecture is Architecture.X64
    assert record.operating_system is OperatingSystem.LINUX
    assert record.archive_type is ArchiveType.TAR_GZ
    assert record.java_version == VersionNumber.from_components(17, 0, 2)
    assert record.java_version.build == 8
    assert record.release_status is ReleaseStatus.GA
    assert record.package_type is PackageType.JDK
    assert record.lib_c_type is LibCType.GLIBC
    assert record.direct_download_uri == ARTIFACT_URL
    assert record.checksum_uri == f"{ARTIFACT_URL}.sha256"
    assert record.checksum_type is HashAlgorithm.SHA256
    assert not record.javafx_bundled


def test_parse_other_builds(adapter: OracleOpenJdkAdapter, page: str) -> None:
    """Test the musl, Windows and early access builds."""
    _, macos, windows, musl, early_access = adapter.parse(page)
    assert macos.operating_system is OperatingSystem.MACOS
    assert macos.architecture is Architecture.AARCH64
    assert macos.checksum_uri.endswith("openjdk-17.0.2_macos-aarch64_bin.tar.gz.sha256")
    assert windows.archive_type is ArchiveType.ZIP
    assert not windows.checksum_uri
    assert musl.lib_c_type is LibCType.MUSL
    assert musl.release_status is ReleaseStatus.EA
    assert early_access.java_version.feature == 22
    assert early_access.java_version.build == 5
    assert early_access.release_status is ReleaseStatus.EA


def test_parse_latest(adapter: OracleOpenJdkAdapter, page: str) -> None:
    """Test that only the requested feature is kept."""
    records = adapter.parse(page, FilterSpecification(version=parse_raw("22"), latest=True))
    assert [record.filename for record in records] == ["openjdk-22-ea+5_linux-x64_bin.tar.gz"]


def test_release_candidate_page(adapter: OracleOpenJdkAdapter, page: str) -> None:
    """Test that the builds of a release candidate page are early access."""
    records = adapter.parse(page.replace("General-Availability Release", "Release-Candidate Builds"))
    assert {record.release_status for record in records} == {ReleaseStatus.EA}


def test_locator(adapter: OracleOpenJdkAdapter) -> None:
    """Test that current features have a page of their own and older ones use the archive."""
    locator = adapter.locator_for(FilterSpecification(version=parse_raw("22")))
    assert locator is not None
    assert locator.url == "https://jdk.java.net/22/"
    assert locator.payload_kind is PayloadKind.HTML

    locator = adapter.locator_for(FilterSpecification(version=parse_raw("17")))
    assert locator is not None
    assert locator.url == "https://jdk.java.net/archive/"
