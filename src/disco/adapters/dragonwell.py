# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Alibaba Dragonwell GitHub releases.

The runtime version is taken from the release tag, e.g. ``dragonwell-standard-17.0.6.0.6+9_jdk-17.0.6-ga``,
and the release status from the suffix of the release name.
"""

import logging
import re

from disco.adapters.base import Locator
from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

TAG_VERSION_MARKER = "_jdk"

RELEASE_NAME_STATUS_PATTERN = re.compile(r"[-_ ](GA|EA)$", re.IGNORECASE)


def version_from_tag(tag_name: str) -> VersionNumber:
    """Return the runtime version after the last ``_jdk`` marker of a release tag.

    >>> str(version_from_tag("dragonwell-standard-17.0.6.0.6+9_jdk-17.0.6-ga"))
    '17.0.6'
    """
    if TAG_VERSION_MARKER not in tag_name:
        return VersionNumber()
    return parse_raw(tag_name[tag_name.rindex(TAG_VERSION_MARKER) + len(TAG_VERSION_MARKER) :])


def release_status_of(release_name: str) -> ReleaseStatus | None:
    """Return the release status stated by the suffix of a release name."""
    match = RELEASE_NAME_STATUS_PATTERN.search(release_name.strip())
    return ReleaseStatus.from_text(match.group(1)) if match else None


class DragonwellAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of Dragonwell."""

    distro = Distro.DRAGONWELL

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.feature is None:
            return None
        return Locator(f"{self.endpoint}/dragonwell{filters.feature}/releases?{construct_query({'per_page': 100})}")

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        java_version = version_from_tag(asset.tag_name)
        if java_version.is_empty():
            java_version = parse_raw(asset.url)
        if java_version.is_empty():
            logger.debug("Skipping %s: version not found.", filename)
            return None
        if not self.check_latest(java_version, filters):
            return None

        platform = self.resolve_platform(filename, filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JDK,
            release_status=release_status_of(asset.release_name),
            distribution_version=self.parse_version(filename),
            direct_download_uri=asset.url,
            size=asset.size,
        )
