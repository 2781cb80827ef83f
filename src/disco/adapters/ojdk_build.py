# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the ojdkbuild GitHub releases.

Asset names read ``java-11-openjdk-11.0.15.9-1.windows.ojdkbuild.x86_64.msi``. The fourth number is
the build, so the runtime version keeps it out of the patch component.
"""

import logging
import re

from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.version.remap import zero_patch

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX_PATTERN = re.compile(r".*-openjdk(-debug)?(-jre)?-")


def strip_prefix(filename: str) -> str:
    """Return the filename without the package name prefix.

    >>> strip_prefix("java-17-openjdk-jre-17.0.3.0.6-1.win.x86_64.zip")
    '17.0.3.0.6-1.win.x86_64.zip'
    """
    return FILENAME_PREFIX_PATTERN.sub("", filename, count=1)


class OjdkBuildAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of ojdkbuild."""

    distro = Distro.OJDK_BUILD
    checksum_suffix = ".sha256"

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        if filename.startswith("openjfx") or "-openjdk" not in filename:
            return None
        remainder = strip_prefix(filename)

        distribution_version = self.parse_version(remainder)
        if distribution_version is None:
            return None
        java_version = zero_patch(distribution_version)
        if not self.check_latest(java_version, filters):
            return None

        platform = self.resolve_platform(filename, text=remainder, filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JRE if "-jre-" in filename else PackageType.JDK,
            distribution_version=distribution_version,
            direct_download_uri=asset.url,
            size=asset.size,
        )
