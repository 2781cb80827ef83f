# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Microsoft Build of OpenJDK download page."""

import logging
from collections.abc import Iterator

from disco.adapters.base import (
    Locator,
    Payload,
    PayloadKind,
    SourceAdapter,
    attach_checksum_uris,
    attach_signature_uris,
)
from disco.classification.dimensions import Distro, HashAlgorithm, PackageType, ReleaseStatus
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord
from disco.version.remap import microsoft_remap

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX = "microsoft-"

SIGNATURE_SUFFIX = ".sig"
CHECKSUM_SUFFIX = ".sha256sum.txt"


class MicrosoftAdapter(SourceAdapter):
    """This class implements the adapter of the Microsoft Build of OpenJDK.

    Filenames read ``microsoft-jdk-17.0.6-linux-x64.tar.gz``. Signatures and checksums are linked
    next to the artifacts as ``.sig`` and ``.sha256sum.txt`` files.
    """

    distro = Distro.MICROSOFT
    ignored_substrings = (*SourceAdapter.ignored_substrings, "debugsymbols", "sources")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        return Locator(self.endpoint, PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        yield from extract_hrefs(payload, DOWNLOAD_SUFFIXES, base_url=self.endpoint)

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = file_name_from_url(entry)
        # Bare "jdk-..." links point to older unbranded builds.
        if filename.startswith("jdk") or self.is_noise(filename):
            return []
        remainder = filename.replace(FILENAME_PREFIX, "", 1)

        java_version = self.parse_version(remainder, rules=(microsoft_remap,))
        if java_version is None or not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, text=remainder, filters=filters)
        if platform is None:
            return []

        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=PackageType.JDK if remainder.startswith("jdk") else PackageType.JRE,
                release_status=ReleaseStatus.EA if "-ea." in filename else None,
                direct_download_uri=entry,
            )
        ]

    def attach_sidecars(self, payload: Payload, records: list[PackageRecord]) -> None:
        if not isinstance(payload, str):
            return
        hrefs = extract_hrefs(payload, (SIGNATURE_SUFFIX, CHECKSUM_SUFFIX), base_url=self.endpoint)
        attach_signature_uris(records, hrefs, SIGNATURE_SUFFIX)
        attach_checksum_uris(records, hrefs, CHECKSUM_SUFFIX, HashAlgorithm.SHA256)
