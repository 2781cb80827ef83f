# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the OpenJDK builds published on jdk.java.net.

The payload is the HTML download page of a feature version, or the archive page for released
versions. Filenames look like ``openjdk-17.0.2_linux-x64_bin.tar.gz``: the version, then the
operating system and architecture, then the bundle kind.
"""

import logging
import re
from collections.abc import Iterator
from typing import Any

from disco.adapters.base import Locator, Payload, PayloadKind, Platform, SourceAdapter, attach_checksum_uris
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Distro,
    HashAlgorithm,
    LibCType,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)
from disco.classification.resolver import resolve_archive_type
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX = "openjdk-"

# The build number in the download path, e.g. ".../jdk17.0.2/dfd4a8d0985749f896bed50d7138ee7f/8/GPL/...".
BUILD_NUMBER_PATTERN = re.compile(r"/([0-9]{1,3})/GPL/")

#: The marker of a page listing release candidate builds.
RELEASE_CANDIDATE_MARKER = "Release-Candidate"


def split_filename(filename: str) -> tuple[str, OperatingSystem, Architecture, bool]:
    """Split a filename into its version text, operating system, architecture and musl flag.

    >>> split_filename("openjdk-17.0.2_linux-x64_bin.tar.gz")
    ('17.0.2', <OperatingSystem.LINUX: 'linux'>, <Architecture.X64: 'x64'>, False)

    Raises
    ------
    PayloadEntryError
        If the filename does not have the expected shape.
    """
    name_parts = filename.split("_")
    if len(name_parts) < 2:
        raise PayloadEntryError(f"Unexpected filename {filename}.")
    os_arch_parts = name_parts[1].split("-")
    if len(os_arch_parts) < 2:
        raise PayloadEntryError(f"No platform in filename {filename}.")
    is_musl = len(os_arch_parts) > 2 and os_arch_parts[2] == "musl"
    return (
        name_parts[0].replace(FILENAME_PREFIX, "", 1),
        OperatingSystem.from_text(os_arch_parts[0]),
        Architecture.from_text(os_arch_parts[1]),
        is_musl,
    )


def build_number_of(url: str) -> int | None:
    """Return the build number found in the download path of ``url``."""
    match = BUILD_NUMBER_PATTERN.search(url)
    return int(match.group(1)) if match else None


def release_status_of(url: str) -> ReleaseStatus | None:
    """Return the release status stated by the download path of ``url``, None if it states none."""
    if "/GA/" in url or "/ga/" in url:
        return ReleaseStatus.GA
    if "/early_access/" in url or "/EA/" in url:
        return ReleaseStatus.EA
    return None


class OracleOpenJdkAdapter(SourceAdapter):
    """This class implements the adapter of the jdk.java.net download pages."""

    distro = Distro.ORACLE_OPEN_JDK

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.archive_endpoint = ""

    def load_defaults(self) -> None:
        super().load_defaults()
        if self.enabled:
            self.archive_endpoint = self._require("archive_endpoint")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        feature = filters.feature
        # Only the current and the upcoming feature versions have a page of their own.
        if feature is not None and feature >= self.schedule.latest_ga_feature:
            return Locator(f"{self.endpoint.rstrip('/')}/{feature}/", PayloadKind.HTML)
        return Locator(self.archive_endpoint, PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[tuple[str, bool]]:
        if not isinstance(payload, str):
            return
        is_release_candidate = RELEASE_CANDIDATE_MARKER in payload
        for href in extract_hrefs(payload, DOWNLOAD_SUFFIXES, base_url=self.endpoint):
            if file_name_from_url(href).startswith(FILENAME_PREFIX):
                yield href, is_release_candidate

    def parse_entry(self, entry: tuple[str, bool], filters: FilterSpecification) -> list[PackageRecord]:
        href, is_release_candidate = entry
        filename = file_name_from_url(href)
        if self.is_noise(filename):
            return []

        version_text, operating_system, architecture, is_musl = split_filename(filename)
        java_version = self.parse_version(version_text)
        if java_version is None:
            return []
        if java_version.build is None:
            java_version = java_version.with_build(build_number_of(href))
        if not self.check_latest(java_version, filters):
            return []

        archive_type = resolve_archive_type(filename)
        if archive_type in (ArchiveType.NOT_FOUND, ArchiveType.SRC_TAR):
            logger.debug("Skipping %s: archive type not found.", filename)
            return []
        if operating_system is OperatingSystem.NOT_FOUND or architecture is Architecture.NOT_FOUND:
            logger.debug("Skipping %s: platform not found.", filename)
            return []

        release_status = ReleaseStatus.EA if is_release_candidate else release_status_of(href)
        return [
            self.create_record(
                filename,
                java_version,
                Platform(archive_type, operating_system, architecture),
                package_type=PackageType.JDK,
                release_status=release_status,
                direct_download_uri=href,
                lib_c_type=LibCType.MUSL if is_musl else LibCType.NONE,
                javafx_bundled=(java_version.feature or 0) <= 10,
            )
        ]

    def attach_sidecars(self, payload: Payload, records: list[PackageRecord]) -> None:
        if isinstance(payload, str):
            attach_checksum_uris(
                records, extract_hrefs(payload, (".sha256",), base_url=self.endpoint), ".sha256", HashAlgorithm.SHA256
            )
