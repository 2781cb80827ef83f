# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the GraalVM Community Edition GitHub releases."""

import logging
import re

from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PATTERN = re.compile(r"^graalvm-community-jdk-(?P<version>[^_]+)_(?P<platform>.*)_bin(\.tar\.gz|\.zip)$")

GA_TAG_PREFIX = "jdk-"
DEV_TAG_MARKER = "-dev"


def version_from_tag(tag_name: str) -> VersionNumber:
    """Return the runtime version of a release tag.

    GA tags read ``jdk-17.0.8``. Development tags read ``23.0.0-dev-20230620_1953``, the part after
    the last underscore is the build.

    >>> str(version_from_tag("jdk-17.0.8"))
    '17.0.8'
    >>> str(version_from_tag("23.0.0-dev-20230620_1953"))
    '23.0.0+1953'
    """
    if tag_name.startswith(GA_TAG_PREFIX):
        return parse_raw(tag_name[len(GA_TAG_PREFIX) :])
    if DEV_TAG_MARKER in tag_name:
        _, _, build = tag_name.rpartition("_")
        version = parse_raw(tag_name.split("-", 1)[0])
        return version.with_build(int(build)) if build.isdigit() and not version.is_empty() else version
    return VersionNumber()


class GraalVmCommunityAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of GraalVM Community Edition."""

    distro = Distro.GRAALVM_COMMUNITY
    checksum_suffix = ".sha256"

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        match = FILENAME_PATTERN.match(filename)
        if not match:
            return None

        is_dev = DEV_TAG_MARKER in asset.tag_name
        if asset.prerelease and filters.release_status is not ReleaseStatus.EA:
            logger.debug("Skipping %s: prerelease assets are only listed for early access requests.", filename)
            return None

        java_version = version_from_tag(asset.tag_name)
        if java_version.is_empty():
            java_version = parse_raw(match.group("version"))
        if java_version.is_empty():
            logger.debug("Skipping %s: version not found.", filename)
            return None
        if not self.check_latest(java_version, filters):
            return None

        platform = self.resolve_platform(filename, text=match.group("platform"), filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JDK,
            release_status=ReleaseStatus.EA if is_dev or asset.prerelease else ReleaseStatus.GA,
            direct_download_uri=asset.url,
            size=asset.size,
        )
