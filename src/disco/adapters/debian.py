# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the OpenJDK packages in the Debian package pool.

The payload is the directory listing of one source package, e.g. ``pool/main/o/openjdk-17/``.
Packages are meant to be installed with apt, so the records point to the listing.
"""

import logging
import re
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, PayloadKind, Platform, SourceAdapter
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Distro,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)
from disco.filters import FilterSpecification
from disco.html_tools import extract_hrefs, file_name_from_url
from disco.record import PackageRecord

logger: logging.Logger = logging.getLogger(__name__)

DEB_PACKAGE_PATTERN = re.compile(
    r"^openjdk-(?P<feature>[0-9]{1,2})-(?P<kind>jre|jdk)(?P<headless>-headless)?"
    r"_(?P<version>[^_]+)_(?P<architecture>[^_.]+)\.deb$"
)


def split_package_name(filename: str) -> tuple[PackageType, bool, str, Architecture] | None:
    """Split a package filename into its package type, headless flag, version text and architecture.

    >>> split_package_name("openjdk-17-jre-headless_17.0.6+10-1~deb11u1_armhf.deb")
    (<PackageType.JRE: 'jre'>, True, '17.0.6+10-1~deb11u1', <Architecture.ARM: 'arm'>)
    >>> split_package_name("openjdk-17-doc_17.0.6+10-1~deb11u1_all.deb") is None
    True
    """
    match = DEB_PACKAGE_PATTERN.match(filename)
    if not match:
        return None
    return (
        PackageType.from_text(match.group("kind")),
        match.group("headless") is not None,
        match.group("version"),
        Architecture.from_text(match.group("architecture")),
    )


class DebianAdapter(SourceAdapter):
    """This class implements the adapter of the Debian package pool."""

    distro = Distro.DEBIAN

    def listing_url(self, feature: int | None) -> str:
        """Return the URL of the pool directory of a feature version."""
        return f"{self.endpoint.rstrip('/')}/openjdk-{feature}/"

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.feature is None:
            return None
        return Locator(self.listing_url(filters.feature), PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        yield from (file_name_from_url(href) for href in extract_hrefs(payload, (".deb",)))

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = entry
        if self.is_noise(filename) or (parts := split_package_name(filename)) is None:
            return []
        package_type, headless, version_text, architecture = parts
        if architecture is Architecture.NOT_FOUND:
            logger.debug("Skipping %s: architecture not found.", filename)
            return []

        java_version = self.parse_version(version_text)
        if java_version is None or not self.check_latest(java_version, filters):
            return []

        return [
            self.create_record(
                filename,
                java_version,
                Platform(ArchiveType.DEB, OperatingSystem.LINUX, architecture),
                package_type=package_type,
                release_status=ReleaseStatus.GA,
                directly_downloadable=False,
                download_site_uri=self.listing_url(java_version.feature),
                headless=headless,
            )
        ]
