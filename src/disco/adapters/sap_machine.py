# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the SapMachine GitHub releases."""

import logging

from disco.adapters.github import GitHubReleaseAdapter, ReleaseAsset
from disco.classification.dimensions import Distro, PackageType
from disco.filters import FilterSpecification
from disco.record import PackageRecord

logger: logging.Logger = logging.getLogger(__name__)

FILENAME_PREFIX = "sapmachine-"


def strip_prefix(filename: str) -> str:
    """Return the filename without the ``sapmachine-`` prefix.

    >>> strip_prefix("sapmachine-jdk-17.0.6_linux-x64_bin.tar.gz")
    'jdk-17.0.6_linux-x64_bin.tar.gz'
    """
    return filename.replace(FILENAME_PREFIX, "", 1)


def package_type_of(remainder: str) -> PackageType:
    """Return JDK if the stripped filename names a JDK, JRE otherwise."""
    return PackageType.JDK if "jdk" in remainder else PackageType.JRE


class SapMachineAdapter(GitHubReleaseAdapter):
    """This class implements the adapter of SapMachine."""

    distro = Distro.SAP_MACHINE
    ignored_suffixes = (*GitHubReleaseAdapter.ignored_suffixes, "txt", "symbols.tar.gz")

    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        filename = asset.name
        if not filename.startswith(FILENAME_PREFIX):
            return None
        remainder = strip_prefix(filename)

        java_version = self.parse_version(remainder)
        if java_version is None or not self.check_latest(java_version, filters):
            return None

        # Filenames without an OS token fall back to the one implied by the archive type.
        platform = self.resolve_platform(filename, text=remainder, filters=filters)
        if platform is None:
            return None

        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=package_type_of(remainder),
            direct_download_uri=asset.url,
            size=asset.size,
        )
