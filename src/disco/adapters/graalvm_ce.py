# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapters of the GraalVM CE releases before the switch to the community naming.

Until GraalVM 22.3 one release shipped a build per supported Java feature, e.g.
``graalvm-ce-java11-linux-amd64-22.3.1.tar.gz``. The filename only names the Java feature, the
full version in the release tag ``vm-22.3.1`` is the GraalVM version. Each Java feature is a
distribution of its own.
"""

import logging
import re

from disco.adapters.base import Locator
from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType, ReleaseStatus
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PATTERN = re.compile(
    r"^graalvm-ce-java(?P<feature>\d{1,2})-(?P<platform>[a-z]+-[a-z0-9_]+)-(?P<version>[0-9.]+|dev)(\.tar\.gz|\.zip)$"
)

GA_TAG_PREFIX = "vm-"


def graalvm_version_from_tag(tag_name: str) -> VersionNumber:
    """Return the GraalVM version of a release tag, empty for tags of other shapes.

    >>> str(graalvm_version_from_tag("vm-22.3.1"))
    '22.3.1'
    >>> graalvm_version_from_tag("jdk-17.0.8").is_empty()
    True
    """
    _, found, version = tag_name.rpartition(GA_TAG_PREFIX)
    return parse_raw(version) if found else VersionNumber()


class GraalVmCeAdapter(GitHubReleaseAdapter):
    """Base class of the adapters of the GraalVM CE builds of one Java feature."""

    checksum_suffix = ".sha256"

    #: The Java feature the builds of this distribution are based on.
    java_feature: int = 0

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.feature is not None and filters.feature != self.java_feature:
            return None
        return super().locator_for(filters)

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        match = FILENAME_PATTERN.match(filename)
        if not match or int(match.group("feature")) != self.java_feature:
            return None
        if asset.prerelease and filters.release_status is not ReleaseStatus.EA:
            logger.debug("Skipping %s: prerelease assets are only listed for early access requests.", filename)
            return None

        distribution_version = graalvm_version_from_tag(asset.tag_name)
        if distribution_version.is_empty():
            distribution_version = parse_raw(match.group("version"))
        java_version = VersionNumber.from_components(self.java_feature)
        if not self.check_latest(java_version, filters):
            return None

        platform = self.resolve_platform(filename, text=match.group("platform"), filters=filters)
        if platform is None:
            return None

        is_dev = match.group("version") == "dev"
        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JDK,
            release_status=ReleaseStatus.EA if is_dev or asset.prerelease else ReleaseStatus.GA,
            distribution_version=None if distribution_version.is_empty() else distribution_version,
            direct_download_uri=asset.url,
            size=asset.size,
        )


class GraalVmCe8Adapter(GraalVmCeAdapter):
    """This class implements the adapter of GraalVM CE based on Java 8."""

    distro = Distro.GRAALVM_CE8
    java_feature = 8


class GraalVmCe11Adapter(GraalVmCeAdapter):
    """This class implements the adapter of GraalVM CE based on Java 11."""

    distro = Distro.GRAALVM_CE11
    java_feature = 11


class GraalVmCe17Adapter(GraalVmCeAdapter):
    """This class implements the adapter of GraalVM CE based on Java 17."""

    distro = Distro.GRAALVM_CE17
    java_feature = 17
