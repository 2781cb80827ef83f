# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Azul Zulu Prime (formerly Zing) download page."""

import logging
import re
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, PayloadKind, SourceAdapter
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

# e.g. zing23.02.100.0-3-jdk17.0.6.0.101-linux_x64.tar.gz
FILENAME_PATTERN = re.compile(
    r"^zing(?P<distribution_version>\d+(?:\.\d+){3})-\d+-(?:ca-)?(?P<package_type>jdk|jre)"
    r"(?P<java_version>\d+(?:\.\d+)*)-(?P<platform>.+)$"
)


def split_filename(filename: str) -> tuple[str, PackageType, str, str]:
    """Split a filename into the Zulu Prime version, package type, Java version and platform text.

    >>> split_filename("zing23.02.100.0-3-jdk17.0.6.0.101-linux_x64.tar.gz")
    ('23.02.100.0', <PackageType.JDK: 'jdk'>, '17.0.6.0.101', 'linux_x64.tar.gz')

    Raises
    ------
    PayloadEntryError
        If the filename does not have the expected shape.
    """
    match = FILENAME_PATTERN.match(filename)
    if not match:
        raise PayloadEntryError(f"Unexpected Zulu Prime filename {filename}.")
    return (
        match.group("distribution_version"),
        PackageType(match.group("package_type")),
        match.group("java_version"),
        match.group("platform"),
    )


class ZuluPrimeAdapter(SourceAdapter):
    """This class implements the adapter of Zulu Prime.

    Zulu Prime is not free to use in production. Only the Java feature, interim and update
    components of the build are meaningful, the trailing ones are Azul's.
    """

    distro = Distro.ZULU_PRIME

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.release_status is ReleaseStatus.EA:
            return None
        return Locator(self.endpoint, PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        for href in extract_hrefs(payload, DOWNLOAD_SUFFIXES, base_url=self.endpoint):
            if file_name_from_url(href).startswith("zing"):
                yield href

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = file_name_from_url(entry)
        if self.is_noise(filename):
            return []
        distribution_text, package_type, java_text, platform_text = split_filename(filename)

        parsed = parse_raw(java_text)
        if parsed.is_empty():
            return []
        java_version = VersionNumber.from_components(*parsed.components[:3])
        if not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, text=platform_text, filters=filters)
        if platform is None:
            return []

        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=package_type,
                release_status=ReleaseStatus.GA,
                distribution_version=self.parse_version(distribution_text),
                direct_download_uri=entry,
                free_use_in_production=False,
            )
        ]
