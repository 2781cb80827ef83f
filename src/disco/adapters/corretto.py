# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of Amazon Corretto.

Corretto publishes its artifacts on a CDN and lists the download links in the markdown body of the
GitHub releases of the ``corretto-<feature>`` repositories.
"""

import logging
import re
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, SourceAdapter, iter_objects
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.classification.resolver import resolve_package_type
from disco.filters import FilterSpecification
from disco.html_tools import extract_file_urls, file_name_from_url
from disco.json_tools import json_extract
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.remap import corretto_remap
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX_PATTERN = re.compile(r"(java-(\d+)?\.?(\d+)?\.?(\d+)?\.?-)|(amazon-corretto-)(jdk_|devel-)?")

# The RPM packages of feature 8 keep the legacy numbering, e.g. 1.8.0_362.b08.
LEGACY_VERSION_PATTERN = re.compile(r"^1\.(?P<feature>[1-8])\.0_(?P<update>\d{1,9})\.b(?P<build>\d{1,9})(?!\d)")


def strip_prefix(filename: str) -> str:
    """Return the filename without the package name prefixes.

    >>> strip_prefix("java-17-amazon-corretto-devel-17.0.6.10-1.x86_64.rpm")
    '17.0.6.10-1.x86_64.rpm'
    """
    return FILENAME_PREFIX_PATTERN.sub("", filename)


def legacy_version_of(remainder: str) -> VersionNumber | None:
    """Return the version of a legacy numbered package, or None for any other numbering.

    >>> str(legacy_version_of("1.8.0_362.b08-1.x86_64.rpm"))
    '8.0.362+8'
    """
    match = LEGACY_VERSION_PATTERN.match(remainder)
    if match is None:
        return None
    return VersionNumber.from_components(
        int(match.group("feature")), 0, int(match.group("update")), build=int(match.group("build"))
    )


class CorrettoAdapter(SourceAdapter):
    """This class implements the adapter of the Corretto GitHub releases."""

    distro = Distro.CORRETTO

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        feature = filters.feature
        if feature is None or filters.release_status is ReleaseStatus.EA:
            return None
        # Only the long term support features get a repository of their own.
        repository = f"corretto-{feature}" if self.schedule.is_lts(feature) else "corretto-jdk"
        return Locator(f"{self.endpoint}/{repository}/releases?{construct_query({'per_page': 100})}")

    def entries(self, payload: Payload) -> Iterator[str]:
        for release in iter_objects(payload):
            yield from extract_file_urls(json_extract(release, ["body"], str) or "")

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = file_name_from_url(entry)
        if self.is_noise(filename):
            return []
        remainder = strip_prefix(filename)

        legacy_version = legacy_version_of(remainder)
        if legacy_version is not None:
            distribution_version = java_version = legacy_version
        else:
            parsed = self.parse_version(remainder)
            if parsed is None:
                return []
            distribution_version = parsed
            java_version = corretto_remap(distribution_version)
        if not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, text=remainder, filters=filters)
        if platform is None:
            return []

        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=resolve_package_type(remainder, default=PackageType.JDK),
                release_status=ReleaseStatus.GA,
                distribution_version=distribution_version,
                direct_download_uri=entry,
                javafx_bundled=java_version.feature == 8,
            )
        ]
