# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Tencent Kona GitHub releases."""

import logging

from disco.adapters.base import Locator
from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, HashAlgorithm, PackageType
from disco.classification.resolver import strip_archive_suffix
from disco.filters import FilterSpecification
from disco.record import PackageRecord
from disco.util import construct_query

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX = "TencentKona"

#: The signing markers that sit between the platform and the suffix.
SIGNING_MARKERS = ("_signed", "_notarized", "_64")

#: The feature tag of the builds with fiber (virtual thread) support.
FIBER_FEATURE = "fiber"


def version_text_of(filename: str) -> str | None:
    """Return the version text of a Kona filename.

    Names of feature 11 and later start with the version, feature 8 names end with it.

    >>> version_text_of("TencentKona-17.0.6.b1_jdk_linux-x86_64_signed.tar.gz")
    '17.0.6.b1'
    >>> version_text_of("TencentKona8.0.13.b1_jdk_linux-x86_64_8u362.tar.gz")
    '8u362'
    """
    remainder = filename.replace(FILENAME_PREFIX, "", 1).lstrip("-")
    for marker in SIGNING_MARKERS:
        remainder = remainder.replace(marker, "")
    if remainder.startswith("8"):
        return strip_archive_suffix(remainder).split("_")[-1]
    if remainder[:2].isdigit() and "_" in remainder:
        version_text = remainder[: remainder.index("_")]
        return version_text.removesuffix("-jdk")
    return None


class KonaAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of Kona."""

    distro = Distro.KONA
    checksum_suffix = ".md5"
    checksum_type = HashAlgorithm.MD5
    ignored_substrings = (*GitHubReleaseAdapter.ignored_substrings, "javadoc")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.feature is None:
            return None
        return Locator(f"{self.endpoint}/TencentKona-{filters.feature}/releases?{construct_query({'per_page': 100})}")

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        if not filename.startswith(FILENAME_PREFIX):
            return None
        version_text = version_text_of(filename)
        java_version = self.parse_version(version_text)
        if java_version is None or not self.check_latest(java_version, filters):
            return None

        platform = self.resolve_platform(filename, filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=PackageType.JRE if "_jre" in filename else PackageType.JDK,
            direct_download_uri=asset.url,
            size=asset.size,
            feature=[FIBER_FEATURE] if "_fiber" in filename else [],
        )
