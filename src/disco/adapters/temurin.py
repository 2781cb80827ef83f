# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapters of the Adoptium API and of the AdoptOpenJDK OpenJ9 API.

Both APIs answer with the same shape: an array of releases, each with ``version_data`` and a
``binaries`` array whose elements carry a ``package`` and optionally an ``installer`` object.
Temurin releases are also parsed from the assets of the ``temurin<N>-binaries`` GitHub releases.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any

from disco.adapters.base import Locator, Payload, Platform, SourceAdapter, iter_objects
from disco.adapters.github import ReleaseAsset
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Distro,
    HashAlgorithm,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    SignatureType,
)
from disco.classification.resolver import (
    has_early_access_marker,
    resolve_architecture,
    resolve_archive_type,
    strip_archive_suffix,
)
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.json_tools import json_extract, json_require
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

ARCHITECTURE_PARAMS = {
    Architecture.AARCH64: "aarch64",
    Architecture.ARM: "arm",
    Architecture.PPC64: "ppc64",
    Architecture.PPC64LE: "ppc64le",
    Architecture.RISCV64: "riscv64",
    Architecture.S390X: "s390x",
    Architecture.SPARCV9: "sparcv9",
    Architecture.X64: "x64",
    Architecture.X86: "x32",
}

OPERATING_SYSTEM_PARAMS = {
    OperatingSystem.ALPINE_LINUX: "alpine-linux",
    OperatingSystem.LINUX: "linux",
    OperatingSystem.MACOS: "mac",
    OperatingSystem.WINDOWS: "windows",
    OperatingSystem.SOLARIS: "solaris",
    OperatingSystem.AIX: "aix",
}

#: The feature versions no Temurin build exists for.
UNSUPPORTED_FEATURES = frozenset({6, 7, 9, 10, 12, 13, 14, 15})

GITHUB_PREFIX_PATTERN = re.compile(r"^OpenJDK\d+U?-")


def strip_github_prefix(filename: str) -> str:
    """Return the GitHub asset name without the ``OpenJDK<N>U-`` prefix and the archive suffix.

    >>> strip_github_prefix("OpenJDK17U-jdk_x64_linux_hotspot_17.0.6_10.tar.gz")
    'jdk_x64_linux_hotspot_17.0.6_10'
    """
    return strip_archive_suffix(GITHUB_PREFIX_PATTERN.sub("", filename, count=1))


def github_version_text(remainder: str) -> str:
    """Return the version text of a stripped GitHub asset name, ``17.0.6+10`` for ``..._17.0.6_10``.

    Raises
    ------
    PayloadEntryError
        If the name has fewer parts than expected.
    """
    parts = remainder.split("_")
    if len(parts) < 5:
        raise PayloadEntryError(f"Unexpected asset name {remainder}.")
    return parts[4] + (f"+{parts[5]}" if len(parts) == 6 else "")


def version_from_data(version_data: dict) -> VersionNumber:
    """Return the runtime version of a ``version_data`` object.

    Raises
    ------
    PayloadEntryError
        If neither the numeric fields nor ``semver`` give a version.
    """
    major = json_extract(version_data, ["major"], int)
    if major is None:
        version = parse_raw(json_require(version_data, ["semver"], str))
        if version.is_empty():
            raise PayloadEntryError("Unusable version_data.")
        return version
    components = [
        major,
        json_extract(version_data, ["minor"], int) or 0,
        json_extract(version_data, ["security"], int) or 0,
    ]
    patch = json_extract(version_data, ["patch"], int)
    if patch:
        components.append(patch)
    semver = parse_raw(json_extract(version_data, ["semver"], str) or "")
    return VersionNumber.from_components(
        *components, build=json_extract(version_data, ["build"], int), pre_release=semver.pre_release
    )


class TemurinAdapter(SourceAdapter):
    """This class implements the adapter of the Adoptium API and the Temurin GitHub releases."""

    distro = Distro.TEMURIN
    jvm_impl = "hotspot"
    vendor = "adoptium"
    supports_github_releases = True

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.github_endpoint = ""

    def load_defaults(self) -> None:
        super().load_defaults()
        if self.supports_github_releases and self.enabled:
            self.github_endpoint = self._require("github_endpoint")

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        feature = filters.feature
        if feature is None or feature in UNSUPPORTED_FEATURES:
            return None
        release_status = filters.release_status
        if release_status not in (ReleaseStatus.EA, ReleaseStatus.GA):
            release_status = ReleaseStatus.EA if self.schedule.is_upcoming(feature) else ReleaseStatus.GA

        params: dict[str, Any] = {}
        if filters.architecture is not Architecture.NONE:
            if filters.architecture not in ARCHITECTURE_PARAMS:
                return None
            params["architecture"] = ARCHITECTURE_PARAMS[filters.architecture]
        params["heap_size"] = "normal"
        if filters.package_type is not PackageType.NONE:
            params["image_type"] = filters.package_type.value
        params["jvm_impl"] = self.jvm_impl
        if filters.operating_system is not OperatingSystem.NONE:
            if filters.operating_system not in OPERATING_SYSTEM_PARAMS:
                return None
            params["os"] = OPERATING_SYSTEM_PARAMS[filters.operating_system]
        params["page_size"] = 100
        params["project"] = "jdk"
        params["vendor"] = self.vendor
        return Locator(f"{self.endpoint}/{feature}/{release_status.value}?{construct_query(params)}")

    def github_locator_for(self, feature: int) -> Locator:
        """Return the locator of the GitHub releases of one feature version."""
        query = construct_query({"per_page": 100})
        return Locator(f"{self.github_endpoint}/temurin{feature}-binaries/releases?{query}")

    def entries(self, payload: Payload) -> Iterator[tuple[str, dict, dict]]:
        for release in iter_objects(payload):
            if "assets" in release:
                if self.supports_github_releases:
                    for asset in iter_objects(release, "assets"):
                        yield "asset", release, asset
                continue
            for binary in iter_objects(release, "binaries"):
                for kind in ("package", "installer"):
                    if kind in binary:
                        yield kind, release, binary

    def parse_entry(self, entry: tuple[str, dict, dict], filters: FilterSpecification) -> list[PackageRecord]:
        kind, release, item = entry
        record = (
            self.parse_github_asset(ReleaseAsset.from_json(release, item), filters)
            if kind == "asset"
            else self.parse_binary(release, item, kind, filters)
        )
        return [record] if record is not None else []

    def parse_binary(
        self, release: dict, binary: dict, kind: str, filters: FilterSpecification
    ) -> PackageRecord | None:
        """Return the record of the package or installer of one API binary."""
        artifact = json_require(binary, [kind], dict)
        filename = json_require(artifact, ["name"], str)
        download_link = json_require(artifact, ["link"], str)
        if self.is_noise(filename):
            return None

        java_version = version_from_data(json_require(release, ["version_data"], dict))
        if not self.check_latest(java_version, filters):
            return None
        distribution_version = parse_raw(json_extract(release, ["version_data", "semver"], str) or "")

        package_type = PackageType.from_text(json_extract(binary, ["image_type"], str))
        if package_type is PackageType.NOT_FOUND:
            logger.debug("Skipping %s: package type not found.", filename)
            return None

        operating_system = OperatingSystem.from_text(json_extract(binary, ["os"], str))
        if operating_system is OperatingSystem.NOT_FOUND:
            logger.debug("Skipping %s: operating system not found.", filename)
            return None
        architecture = Architecture.from_text(json_extract(binary, ["architecture"], str))
        if architecture is Architecture.NOT_FOUND:
            architecture = resolve_architecture(filename, operating_system)
        if architecture is Architecture.NOT_FOUND:
            logger.debug("Skipping %s: architecture not found.", filename)
            return None
        archive_type = resolve_archive_type(filename)
        if archive_type in (ArchiveType.NOT_FOUND, ArchiveType.SRC_TAR):
            logger.debug("Skipping %s: archive type not found.", filename)
            return None

        flag = ReleaseStatus.from_text(json_extract(release, ["release_type"], str))
        checksum = json_extract(artifact, ["checksum"], str) or ""
        checksum_uri = json_extract(artifact, ["checksum_link"], str) or ""
        signature_uri = json_extract(artifact, ["signature_link"], str) or ""
        return self.create_record(
            filename,
            java_version,
            Platform(archive_type, operating_system, architecture),
            package_type=package_type,
            release_status=flag if flag is not ReleaseStatus.NOT_FOUND else None,
            distribution_version=distribution_version if not distribution_version.is_empty() else None,
            direct_download_uri=download_link,
            checksum=checksum,
            checksum_uri=checksum_uri,
            checksum_type=HashAlgorithm.SHA256 if checksum or checksum_uri else HashAlgorithm.NONE,
            signature_uri=signature_uri,
            signature_type=SignatureType.NONE,
            size=json_extract(artifact, ["size"], int) or -1,
        )

    def parse_github_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        """Return the record of one asset of a ``temurin<N>-binaries`` GitHub release."""
        filename = asset.name
        if not filename.startswith("OpenJDK") or self.is_noise(filename):
            return None

        remainder = strip_github_prefix(filename)
        java_version = self.parse_version(github_version_text(remainder))
        if java_version is None:
            return None
        if asset.prerelease and not self.schedule.is_upcoming(java_version.feature):
            logger.debug("Skipping %s: prerelease of a released feature version.", filename)
            return None
        if not self.check_latest(java_version, filters):
            return None

        package_type = PackageType.from_text(remainder.split("_")[0])
        if package_type is PackageType.NOT_FOUND:
            logger.debug("Skipping %s: package type not found.", filename)
            return None
        platform = self.resolve_platform(filename, text=remainder, filters=filters)
        if platform is None:
            return None

        release_status = ReleaseStatus.EA if asset.prerelease or has_early_access_marker(filename) else None
        return self.create_record(
            filename,
            java_version,
            platform,
            package_type=package_type,
            release_status=release_status,
            direct_download_uri=asset.url,
            size=asset.size,
        )


class AojOpenJ9Adapter(TemurinAdapter):
    """This class implements the adapter of the AdoptOpenJDK API for OpenJ9 builds."""

    distro = Distro.AOJ_OPENJ9
    jvm_impl = "openj9"
    vendor = "adoptopenjdk"
    supports_github_releases = False
