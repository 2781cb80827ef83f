# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Fixtures for tests."""
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Distro,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    TermOfSupport,
)
from disco.config.defaults import create_defaults, defaults, load_defaults
from disco.record import PackageRecord
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber

# We need to pass fixture names as arguments to maintain an order.
# pylint: disable=redefined-outer-name


@pytest.fixture()
def test_dir() -> Path:
    """Set the root test_dir path.

    Returns
    -------
    Path
        The root path to the test directory.
    """
    return Path(__file__).parent


@pytest.fixture()
def disco_path() -> Path:
    """Set the disco path.

    Returns
    -------
    Path
        The disco path.
    """
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def setup_test(test_dir: Path, disco_path: Path) -> Iterator[None]:
    """Set up the necessary values for the tests.

    Parameters
    ----------
    test_dir: Path
        Depends on test_dir fixture.
    disco_path: Path
        Depends on disco_path fixture.
    """
    # Load values from defaults.ini.
    if not test_dir.joinpath("defaults.ini").exists():
        create_defaults(str(test_dir), str(disco_path))

    load_defaults(str(disco_path))
    yield
    defaults.clear()


@pytest.fixture(name="schedule")
def schedule_() -> ScheduleFacts:
    """Return fixed schedule facts: 21 is the newest GA feature, 22 and 23 are in early access.

    Returns
    -------
    ScheduleFacts
        The schedule facts.
    """
    return ScheduleFacts(latest_ga_feature=21)


@pytest.fixture(name="resources_path")
def resources_path_(test_dir: Path) -> Path:
    """Return the directory of the payload files the adapter tests parse.

    Returns
    -------
    Path
        The path to ``tests/adapters/resources``.
    """
    return test_dir.joinpath("adapters", "resources")


def build_record(filename: str = "openjdk-17.0.2_linux-x64_bin.tar.gz", **overrides: Any) -> PackageRecord:
    """Return a package record with plausible values, for tests that do not parse a payload.

    Parameters
    ----------
    filename : str
        The filename of the artifact.
    **overrides : Any
        The fields to set instead of the defaults.

    Returns
    -------
    PackageRecord
        The record.
    """
    values: dict[str, Any] = {
        "distribution": Distro.ORACLE_OPEN_JDK,
        "filename": filename,
        "java_version": VersionNumber.from_components(17, 0, 2),
        "distribution_version": VersionNumber.from_components(17, 0, 2),
        "architecture": Architecture.X64,
        "operating_system": OperatingSystem.LINUX,
        "archive_type": ArchiveType.TAR_GZ,
        "package_type": PackageType.JDK,
        "release_status": ReleaseStatus.GA,
        "term_of_support": TermOfSupport.LTS,
        "direct_download_uri": f"https://example.com/{filename}",
    }
    values.update(overrides)
    return PackageRecord(**values)
