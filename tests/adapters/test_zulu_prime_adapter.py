# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the Zulu Prime adapter."""

from pathlib import Path

import pytest

from disco.adapters.base import PayloadKind
from disco.adapters.zulu_prime import ZuluPrimeAdapter, split_filename
from disco.classification.dimensions import Architecture, ArchiveType, OperatingSystem, PackageType, ReleaseStatus
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber, parse_raw


@pytest.fixture(name="adapter")
def adapter_(schedule: ScheduleFacts) -> ZuluPrimeAdapter:
    """Return a configured Zulu Prime adapter."""
    adapter = ZuluPrimeAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="page")
def page_(resources_path: Path) -> str:
    """Return the installation page."""
    return resources_path.joinpath("zulu_prime.html").read_text(encoding="utf-8")


def test_split_filename() -> None:
    """Test splitting a filename into its versions and platform."""
    assert split_filename("zing23.02.100.0-3-jre8.0.362-linux_x64.tar.gz") == (
        "23.02.100.0",
        PackageType.JRE,
        "8.0.362",
        "linux_x64.tar.gz",
    )
    with pytest.raises(PayloadEntryError):
        split_filename("zing-zst-23.02.100.0.tar.gz")


def test_parse(adapter: ZuluPrimeAdapter, page: str) -> None:
    """Test the classification of the download links."""
    records = adapter.parse(page)
    assert [record.filename for record in records] == [
        "zing23.02.100.0-3-jdk17.0.6.0.101-linux_x64.tar.gz",
        "zing23.02.100.0-3-jdk11.0.18.0.101-linux_aarch64.tar.gz",
        "zing23.02.100.0-3-jre8.0.362-linux_x64.tar.gz",
    ]

    jdk17, jdk11, jre8 = records
    assert jdk17.java_version == VersionNumber.from_components(17, 0, 6)
    assert jdk17.java_version.components == (17, 0, 6)
    assert jdk17.distribution_version == VersionNumber.from_components(23, 2, 100, 0)
    assert jdk17.operating_system is OperatingSystem.LINUX
    assert jdk17.architecture is Architecture.X64
    assert jdk17.archive_type is ArchiveType.TAR_GZ
    assert jdk17.package_type is PackageType.JDK
    assert jdk17.release_status is ReleaseStatus.GA
    assert not jdk17.free_use_in_production
    assert jdk17.direct_download_uri == (
        "https://cdn.azul.com/zing-zvm/ZVM23.02.100.0/zing23.02.100.0-3-jdk17.0.6.0.101-linux_x64.tar.gz"
    )

    assert jdk11.architecture is Architecture.AARCH64
    assert jre8.package_type is PackageType.JRE
    assert jre8.java_version == VersionNumber.from_components(8, 0, 362)


def test_parse_latest(adapter: ZuluPrimeAdapter, page: str) -> None:
    """Test that the latest filter keeps the requested feature only."""
    records = adapter.parse(page, FilterSpecification(version=parse_raw("11"), latest=True))
    assert [record.filename for record in records] == ["zing23.02.100.0-3-jdk11.0.18.0.101-linux_aarch64.tar.gz"]


def test_locator(adapter: ZuluPrimeAdapter) -> None:
    """Test that GA requests read the installation page and early access ones are not served."""
    locator = adapter.locator_for(FilterSpecification())
    assert locator is not None
    assert locator.url == "https://docs.azul.com/prime/prime-quick-start-tar"
    assert locator.payload_kind is PayloadKind.HTML
    assert adapter.locator_for(FilterSpecification(release_status=ReleaseStatus.EA)) is None
