# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Trava OpenJDK (DCEVM) GitHub releases."""

import logging
import re

from disco.adapters.base import Locator
from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

# The version is in the release path, e.g. ".../download/dcevm-11.0.15+1/Openjdk11u-dcevm-linux-x64.tar.gz".
DOWNLOAD_PATTERN = re.compile(r"(.*/download/dcevm)(-)?(.*)(/.*)")

#: The feature versions Trava published builds for.
SUPPORTED_FEATURES = frozenset({8, 11})


def version_from_url(url: str) -> VersionNumber:
    """Return the runtime version in the release path of a download URL.

    >>> str(version_from_url("https://github.com/x/releases/download/dcevm8u232b07/java8-openjdk-dcevm-linux.tar.gz"))
    '8.0.232+7'
    """
    match = DOWNLOAD_PATTERN.match(url)
    return parse_raw(match.group(3)) if match else VersionNumber()


class TravaAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of Trava OpenJDK.

    Trava published macOS builds before other macOS architectures existed, so an unnamed macOS
    architecture is X64.
    """

    distro = Distro.TRAVA
    ignored_suffixes = (*GitHubReleaseAdapter.ignored_suffixes, "txt", "symbols.tar.gz")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.feature not in SUPPORTED_FEATURES:
            return None
        return Locator(
            f"{self.endpoint}/trava-jdk-{filters.feature}-dcevm/releases?{construct_query({'per_page': 100})}"
        )

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        java_version = version_from_url(asset.url)
        if java_version.is_empty():
            logger.debug("Skipping %s: version not found.", filename)
            return None
        if not self.check_latest(java_version, filters):
            return None

        platform = self.resolve_platform(filename, default_macos_x64=True, filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JDK if "jdk" in filename else PackageType.JRE,
            direct_download_uri=asset.url,
            size=asset.size,
        )
