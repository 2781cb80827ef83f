# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the IBM Semeru Runtime Certified Edition download page.

Filenames read ``ibm-semeru-certified-jdk_x64_linux_17.0.6.0.tar.gz``: the package type, the
architecture, the operating system and the version, separated by underscores. Builds with a
separate build number carry it as one more part, e.g. ``..._11.0.18.0_10_openj9-0.36.1.tar.gz``.
"""

import logging
import re
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, PayloadKind, SourceAdapter, attach_signature_uris
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.classification.resolver import resolve_release_status, strip_archive_suffix
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX = "ibm-semeru-certified-"

# The feature version some filenames repeat before the package type, e.g. "17-jdk".
LEADING_FEATURE_PATTERN = re.compile(r"^\d+-")

SIGNATURE_SUFFIX = ".sig"

TCK_CERT_URI = "https://www.ibm.com/support/pages/semeru-runtimes-getting-started"


def split_filename(filename: str) -> tuple[PackageType, str, VersionNumber]:
    """Split a filename into its package type, platform text and version.

    >>> package_type, platform_text, version = split_filename(
    ...     "ibm-semeru-certified-jre_ppc64le_aix_11.0.18.0_10_openj9-0.36.1.tar.gz"
    ... )
    >>> package_type, platform_text, str(version)
    (<PackageType.JRE: 'jre'>, 'ppc64le_aix', '11.0.18.0+10')

    Raises
    ------
    PayloadEntryError
        If the filename does not have the expected shape.
    """
    remainder = LEADING_FEATURE_PATTERN.sub("", strip_archive_suffix(filename).replace(FILENAME_PREFIX, "", 1))
    parts = remainder.split("_")
    if len(parts) < 4 or parts[0] not in ("jdk", "jre"):
        raise PayloadEntryError(f"Unexpected Semeru certified filename {filename}.")
    version = parse_raw(parts[3])
    if len(parts) > 5 and parts[4].isdigit():
        version = version.with_build(int(parts[4]))
    return PackageType(parts[0]), f"{parts[1]}_{parts[2]}", version


class SemeruCertifiedAdapter(SourceAdapter):
    """This class implements the adapter of IBM Semeru Runtime Certified Edition.

    The GA builds are TCK tested. The certified edition is not free to use in production.
    """

    distro = Distro.SEMERU_CERTIFIED

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        return Locator(self.endpoint, PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        for href in extract_hrefs(payload, DOWNLOAD_SUFFIXES, base_url=self.endpoint):
            if file_name_from_url(href).startswith(FILENAME_PREFIX):
                yield href

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = file_name_from_url(entry)
        if self.is_noise(filename):
            return []
        if filename.endswith(".rpm"):
            logger.debug("Skipping %s: the RPM packages use another naming scheme.", filename)
            return []
        package_type, platform_text, java_version = split_filename(filename)
        if java_version.is_empty():
            logger.debug("Skipping %s: version not found.", filename)
            return []
        if not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, text=platform_text, filters=filters)
        if platform is None:
            return []

        release_status = resolve_release_status(text=filename, feature=java_version.feature, schedule=self.schedule)
        is_ga = release_status is ReleaseStatus.GA
        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=package_type,
                release_status=release_status,
                direct_download_uri=entry,
                tck_tested=is_ga,
                tck_cert_uri=TCK_CERT_URI if is_ga else "",
                free_use_in_production=False,
            )
        ]

    def attach_sidecars(self, payload: Payload, records: list[PackageRecord]) -> None:
        if isinstance(payload, str):
            hrefs = extract_hrefs(payload, (SIGNATURE_SUFFIX,), base_url=self.endpoint)
            attach_signature_uris(records, hrefs, SIGNATURE_SUFFIX)
