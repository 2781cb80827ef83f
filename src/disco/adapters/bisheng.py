# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the BiSheng JDK builds on the Kunpeng mirror."""

import logging
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, PayloadKind, SourceAdapter, attach_checksum_uris
from disco.classification.dimensions import Distro, HashAlgorithm, PackageType, ReleaseStatus
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord

logger: logging.Logger = logging.getLogger(__name__)

CHECKSUM_SUFFIX = ".sha256"


def split_filename(filename: str) -> tuple[PackageType, str, str]:
    """Split a filename into its package type, version text and platform text.

    >>> split_filename("bisheng-jdk-17.0.6-linux-aarch64.tar.gz")
    (<PackageType.JDK: 'jdk'>, '17.0.6', 'linux-aarch64.tar.gz')

    Raises
    ------
    PayloadEntryError
        If the filename does not have the expected shape.
    """
    parts = filename.split("-")
    if len(parts) < 4:
        raise PayloadEntryError(f"Unexpected filename {filename}.")
    package_type = PackageType.from_text(parts[1])
    if package_type is PackageType.NOT_FOUND:
        package_type = PackageType.JDK
    return package_type, parts[2], "-".join(parts[3:])


class BiShengAdapter(SourceAdapter):
    """This class implements the adapter of BiSheng.

    The macOS builds predate the ARM ones, so an unnamed macOS architecture is X64.
    """

    distro = Distro.BISHENG

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        return Locator(self.endpoint, PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        yield from extract_hrefs(payload, DOWNLOAD_SUFFIXES, base_url=self.endpoint)

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = file_name_from_url(entry)
        if self.is_noise(filename):
            return []
        package_type, version_text, platform_text = split_filename(filename)

        java_version = self.parse_version(version_text)
        if java_version is None or not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, text=platform_text, default_macos_x64=True, filters=filters)
        if platform is None:
            return []

        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=package_type,
                release_status=ReleaseStatus.GA,
                direct_download_uri=entry,
            )
        ]

    def attach_sidecars(self, payload: Payload, records: list[PackageRecord]) -> None:
        if isinstance(payload, str):
            hrefs = extract_hrefs(payload, (CHECKSUM_SUFFIX,), base_url=self.endpoint)
            attach_checksum_uris(records, hrefs, CHECKSUM_SUFFIX, HashAlgorithm.SHA256)
