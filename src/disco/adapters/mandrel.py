# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Mandrel GitHub releases.

Asset names read ``mandrel-java17-linux-amd64-22.3.1.0-Final.tar.gz``. The number after ``java`` is
the runtime feature version, the dotted number is the Mandrel version.
"""

import logging
import re

from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.classification.resolver import strip_archive_suffix
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX_PATTERN = re.compile(r"^mandrel-java(?P<feature>[0-9]+)-")
FINAL_SUFFIX_PATTERN = re.compile(r"[.-]Final.*")


def strip_filename(filename: str) -> str:
    """Return the filename without the ``mandrel-java<N>-`` prefix and the ``Final`` suffix.

    >>> strip_filename("mandrel-java17-linux-amd64-22.3.1.0-Final.tar.gz")
    'linux-amd64-22.3.1.0'
    """
    return FINAL_SUFFIX_PATTERN.sub("", strip_archive_suffix(FILENAME_PREFIX_PATTERN.sub("", filename, count=1)))


class MandrelAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of Mandrel."""

    distro = Distro.MANDREL
    checksum_suffix = ".sha256"

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        match = FILENAME_PREFIX_PATTERN.match(filename)
        if not match:
            return None
        if asset.prerelease:
            logger.debug("Skipping %s: prerelease.", filename)
            return None

        java_version = VersionNumber(feature=int(match.group("feature")))
        if not self.check_latest(java_version, filters):
            return None

        stripped = strip_filename(filename)
        parts = stripped.split("-")
        distribution_version = self.parse_version(parts[2]) if len(parts) > 2 else None

        platform = self.resolve_platform(filename, text=stripped, filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JDK,
            release_status=ReleaseStatus.GA,
            distribution_version=distribution_version,
            direct_download_uri=asset.url,
            size=asset.size,
        )
