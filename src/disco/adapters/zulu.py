# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the Azul Zulu bundles API."""

import logging
import re

from disco.adapters.base import Locator, Payload, SourceAdapter, iter_objects
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Bitness,
    Distro,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    TermOfSupport,
)
from disco.classification.resolver import resolve_package_type
from disco.filters import FilterSpecification
from disco.json_tools import json_extract, json_require
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)

# Everything up to the runtime version, e.g. "zulu17.40.19-ca-jdk" in "zulu17.40.19-ca-jdk17.0.6-win_x64.zip".
JAVA_VERSION_PREFIX_PATTERN = re.compile(
    r"^(zulu-repo-|zulu-repo_|zulu|zre)\d{1,3}\.\d{1,3}(\.|\+)\d{1,4}(\.|-|_)(\d{1,3}-)?(\d{1,4}_\d{1,4}-)?"
    r"(ca-|ea-)?(fx-)?(dbg-)?(hl)?(cp[123]-)?(oem-)?(-|jre|jdk)?"
)

ARCHITECTURE_PARAMS = {
    Architecture.ARM: ("arm", "32"),
    Architecture.AARCH64: ("arm", "64"),
    Architecture.ARM64: ("arm", "64"),
    Architecture.MIPS: ("mips", None),
    Architecture.PPC: ("ppc", None),
    Architecture.SPARCV9: ("sparcv9", None),
    Architecture.X86: ("x86", "32"),
    Architecture.X64: ("x86", "64"),
}

OPERATING_SYSTEM_PARAMS = {
    OperatingSystem.LINUX: "linux",
    OperatingSystem.LINUX_MUSL: "linux_musl",
    OperatingSystem.ALPINE_LINUX: "linux_musl",
    OperatingSystem.MACOS: "macos",
    OperatingSystem.WINDOWS: "windows",
    OperatingSystem.SOLARIS: "solaris",
    OperatingSystem.QNX: "qnx",
}


def strip_prefix(filename: str) -> str:
    """Return the filename without the Zulu version prefix.

    >>> strip_prefix("zulu17.40.19-ca-jdk17.0.6-win_x64.zip")
    '17.0.6-win_x64.zip'
    """
    return JAVA_VERSION_PREFIX_PATTERN.sub("", filename, count=1)


def release_status_of(filename: str) -> ReleaseStatus | None:
    """Return the release status marked in a Zulu filename, ``ca`` marks a certified GA build."""
    if "-ea-" in filename or "-ea." in filename:
        return ReleaseStatus.EA
    if "-ca-" in filename:
        return ReleaseStatus.GA
    return None


def _version_from_array(values: list | None) -> VersionNumber | None:
    if not values or not all(isinstance(value, int) and not isinstance(value, bool) for value in values):
        return None
    return VersionNumber.from_components(*values[:6])


class ZuluAdapter(SourceAdapter):
    """This class implements the adapter of the Zulu community bundles API."""

    distro = Distro.ZULU

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        params: dict[str, str | int | None] = {"jdk_version": filters.feature}
        if filters.operating_system is not OperatingSystem.NONE:
            if filters.operating_system not in OPERATING_SYSTEM_PARAMS:
                return None
            params["os"] = OPERATING_SYSTEM_PARAMS[filters.operating_system]
        if filters.architecture is not Architecture.NONE:
            if filters.architecture not in ARCHITECTURE_PARAMS:
                return None
            params["arch"], params["hw_bitness"] = ARCHITECTURE_PARAMS[filters.architecture]
        if filters.bitness is not Bitness.NONE:
            params["hw_bitness"] = filters.bitness.value
        if filters.archive_type is not ArchiveType.NONE:
            params["ext"] = filters.archive_type.value
        if filters.package_type is not PackageType.NONE:
            params["bundle_type"] = filters.package_type.value
        if filters.javafx_bundled is not None:
            params["javafx"] = str(filters.javafx_bundled).lower()
        release_status = filters.release_status
        params["release_status"] = "both" if release_status is ReleaseStatus.NONE else release_status.value
        if filters.term_of_support is not TermOfSupport.NONE:
            params["support_term"] = filters.term_of_support.value
        return Locator(f"{self.endpoint}?{construct_query(params)}")

    def entries(self, payload: Payload) -> list[dict]:
        return list(iter_objects(payload))

    def parse_entry(self, entry: dict, filters: FilterSpecification) -> list[PackageRecord]:
        filename = json_require(entry, ["name"], str)
        download_link = json_require(entry, ["url"], str)
        if self.is_noise(filename):
            return []

        if filename.lower().startswith("zulu1."):
            jdk_version = _version_from_array(json_extract(entry, ["jdk_version"], list))
            java_version = jdk_version.with_patch(0) if jdk_version and jdk_version.patch is not None else jdk_version
        else:
            java_version = self.parse_version(strip_prefix(filename))
        if java_version is None:
            logger.debug("Skipping %s: version not found.", filename)
            return []
        if not self.check_latest(java_version, filters):
            return []

        distribution_version = _version_from_array(json_extract(entry, ["zulu_version"], list)) or self.parse_version(
            filename
        )

        platform = self.resolve_platform(filename, filters=filters)
        if platform is None:
            return []

        remainder = strip_prefix(filename)
        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=resolve_package_type(filename, default=PackageType.JDK),
                release_status=release_status_of(filename),
                distribution_version=distribution_version,
                direct_download_uri=download_link,
                javafx_bundled="-fx" in filename,
                headless="-hl-" in filename or "headless" in remainder,
                size=json_extract(entry, ["size"], int) or -1,
            )
        ]
