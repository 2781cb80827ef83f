# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Red Hat build of OpenJDK download page.

The artifacts require a Red Hat login, so the records are not directly downloadable and point to
the download page instead.
"""

import logging
import re
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, PayloadKind, SourceAdapter
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord
from disco.version.remap import apply_remap, fifth_to_build, zero_patch

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX_PATTERN = re.compile(r"(java-.*openjdk-)|(openjfx-)")

#: The marker of development (early access) builds.
DEVELOPMENT_MARKER = ".dev."


def strip_prefix(filename: str) -> tuple[str, PackageType]:
    """Return the filename without its package name prefix, and the package type it names.

    >>> strip_prefix("java-17-openjdk-jre-17.0.6.0.10-1.win.x86_64.zip")
    ('17.0.6.0.10-1.win.x86_64.zip', <PackageType.JRE: 'jre'>)
    """
    remainder = FILENAME_PREFIX_PATTERN.sub("", filename)
    if remainder.startswith("jre-"):
        return remainder.removeprefix("jre-"), PackageType.JRE
    return remainder, PackageType.JDK


class RedHatAdapter(SourceAdapter):
    """This class implements the adapter of the Red Hat build of OpenJDK."""

    distro = Distro.RED_HAT
    ignored_suffixes = (*SourceAdapter.ignored_suffixes, "sources.zip", "src.zip")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        return Locator(self.endpoint, PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        yield from (file_name_from_url(href) for href in extract_hrefs(payload, DOWNLOAD_SUFFIXES))

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = entry
        if self.is_noise(filename):
            return []
        remainder, package_type = strip_prefix(filename)

        distribution_version = self.parse_version(remainder)
        if distribution_version is None:
            return []
        java_version = apply_remap(distribution_version, (zero_patch, fifth_to_build))
        if not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, filters=filters)
        if platform is None:
            return []

        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=package_type,
                release_status=ReleaseStatus.EA if DEVELOPMENT_MARKER in remainder else ReleaseStatus.GA,
                distribution_version=distribution_version,
                directly_downloadable=False,
                download_site_uri=self.endpoint,
                javafx_bundled=filename.startswith("openjfx"),
            )
        ]
