# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Oracle JDK archive download pages.

The downloads behind these pages need an Oracle account, so the records point to the page they
are listed on and are not directly downloadable. Two filename shapes exist: feature 9 and later
read ``jdk-17.0.6_linux-x64_bin.tar.gz``, older ones read ``jdk-8u361-linux-x64.tar.gz``.
"""

import logging
from collections.abc import Iterator
from typing import Any

from disco.adapters.base import Locator, Payload, PayloadKind, SourceAdapter
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.filters import FilterSpecification
from disco.html_tools import DOWNLOAD_SUFFIXES, extract_hrefs, file_name_from_url
from disco.record import PackageRecord

logger: logging.Logger = logging.getLogger(__name__)

#: The prefixes of the artifact filenames, longest first.
FILENAME_PREFIXES = ("serverjre-", "jdk-", "jre-")


def package_type_of(filename: str) -> PackageType | None:
    """Return the package type named by the filename prefix, None for other downloads.

    >>> package_type_of("serverjre-8u361-linux-x64.tar.gz")
    <PackageType.JRE: 'jre'>
    >>> package_type_of("jdk-17.0.6_linux-x64_bin.tar.gz")
    <PackageType.JDK: 'jdk'>
    """
    for prefix in FILENAME_PREFIXES:
        if filename.startswith(prefix):
            return PackageType.JDK if prefix == "jdk-" else PackageType.JRE
    return None


def is_javafx_bundled(filename: str, feature: int) -> bool:
    """Return True if the build ships JavaFX, which Oracle bundled from feature 7 to 10."""
    return "javafx" in filename or 7 <= feature <= 10


class OracleAdapter(SourceAdapter):
    """This class implements the adapter of the Oracle JDK archive."""

    distro = Distro.ORACLE
    ignored_substrings = (*SourceAdapter.ignored_substrings, "-demos", "-p-")
    # Online installers only fetch the real artifact.
    ignored_suffixes = (*SourceAdapter.ignored_suffixes, "iftw.exe")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.download_site = ""

    def load_defaults(self) -> None:
        super().load_defaults()
        if self.enabled:
            self.download_site = self._require("download_site")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        feature = filters.feature
        # Early access builds are never listed in the archive.
        if feature is None or filters.release_status is ReleaseStatus.EA:
            return None
        return Locator(f"{self.endpoint.rstrip('/')}/jdk{feature}-archive-downloads.html", PayloadKind.HTML)

    def entries(self, payload: Payload) -> Iterator[str]:
        if not isinstance(payload, str):
            return
        yield from extract_hrefs(payload, DOWNLOAD_SUFFIXES, base_url=self.endpoint)

    def parse_entry(self, entry: str, filters: FilterSpecification) -> list[PackageRecord]:
        filename = file_name_from_url(entry)
        if self.is_noise(filename):
            return []
        package_type = package_type_of(filename)
        if package_type is None:
            logger.debug("Skipping %s: not a runtime download.", filename)
            return []

        java_version = self.parse_version(filename)
        if java_version is None or not self.check_latest(java_version, filters):
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
                release_status=ReleaseStatus.GA,
                download_site_uri=self.download_site,
                directly_downloadable=False,
                javafx_bundled=is_javafx_bundled(filename, java_version.feature or 0),
                free_use_in_production=False,
            )
        ]
