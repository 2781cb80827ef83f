# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the BellSoft Liberica releases API."""

import logging

from disco.adapters.base import Locator, Payload, Platform, SourceAdapter, iter_objects
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
from disco.classification.resolver import correct_operating_system, resolve_architecture, resolve_operating_system
from disco.filters import FilterSpecification
from disco.json_tools import json_extract, json_require
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)

ARCHITECTURE_PARAMS = {
    Architecture.AARCH64: "arm",
    Architecture.AMD64: "x86",
    Architecture.ARM: "arm",
    Architecture.PPC: "ppc",
    Architecture.PPC64LE: "ppc",
    Architecture.SPARC: "sparc",
    Architecture.SPARCV9: "sparc",
    Architecture.X64: "x86",
    Architecture.X86: "x86",
}

OPERATING_SYSTEM_PARAMS = {
    OperatingSystem.LINUX: "linux",
    OperatingSystem.LINUX_MUSL: "linux-musl",
    OperatingSystem.ALPINE_LINUX: "linux-musl",
    OperatingSystem.MACOS: "macos",
    OperatingSystem.WINDOWS: "windows",
    OperatingSystem.SOLARIS: "solaris",
}

TERM_OF_SUPPORT_PARAMS = {TermOfSupport.STS: "sts", TermOfSupport.MTS: "mts", TermOfSupport.LTS: "lts"}


def version_of(entry: dict) -> VersionNumber:
    """Return the runtime version of a release object from its numeric fields.

    Raises
    ------
    PayloadEntryError
        If the feature version is missing.
    """
    return VersionNumber.from_components(
        json_require(entry, ["featureVersion"], int),
        json_extract(entry, ["interimVersion"], int) or 0,
        json_extract(entry, ["updateVersion"], int) or 0,
        json_extract(entry, ["patchVersion"], int) or 0,
        build=json_extract(entry, ["buildVersion"], int),
    )


class LibericaAdapter(SourceAdapter):
    """This class implements the adapter of Liberica."""

    distro = Distro.LIBERICA

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        if filters.feature is None:
            return None
        params: dict[str, str | int | None] = {"version-feature": filters.feature}
        bitness = filters.bitness
        if bitness is Bitness.NONE and filters.architecture is not Architecture.NONE:
            bitness = filters.architecture.bitness
        if bitness is not Bitness.NONE:
            params["bitness"] = bitness.value
        if filters.javafx_bundled is not None:
            params["fx"] = str(filters.javafx_bundled).lower()
        if filters.release_status is not ReleaseStatus.NONE:
            params["build-type"] = "ea" if filters.release_status is ReleaseStatus.EA else "all"
        if filters.term_of_support in TERM_OF_SUPPORT_PARAMS:
            params["release-type"] = TERM_OF_SUPPORT_PARAMS[filters.term_of_support]
        if filters.operating_system is not OperatingSystem.NONE:
            if filters.operating_system not in OPERATING_SYSTEM_PARAMS:
                return None
            params["os"] = OPERATING_SYSTEM_PARAMS[filters.operating_system]
        if filters.architecture is not Architecture.NONE:
            if filters.architecture not in ARCHITECTURE_PARAMS:
                return None
            params["arch"] = ARCHITECTURE_PARAMS[filters.architecture]
        if filters.archive_type is not ArchiveType.NONE:
            params["package-type"] = filters.archive_type.value
        if filters.package_type is not PackageType.NONE:
            params["bundle-type"] = filters.package_type.value
        return Locator(f"{self.endpoint}?{construct_query(params)}")

    def entries(self, payload: Payload) -> list[dict]:
        return list(iter_objects(payload))

    def parse_entry(self, entry: dict, filters: FilterSpecification) -> list[PackageRecord]:
        filename = json_require(entry, ["filename"], str)
        download_link = json_require(entry, ["downloadUrl"], str)
        if self.is_noise(filename):
            return []

        java_version = version_of(entry)
        if not self.check_latest(java_version, filters):
            return []

        archive_type = ArchiveType.from_text(json_extract(entry, ["packageType"], str))
        if archive_type in (ArchiveType.NOT_FOUND, ArchiveType.SRC_TAR):
            logger.debug("Skipping %s: unusable archive type.", filename)
            return []

        operating_system = OperatingSystem.from_text(json_extract(entry, ["os"], str))
        if operating_system is OperatingSystem.NOT_FOUND:
            operating_system = resolve_operating_system(filename, archive_type)
        operating_system = correct_operating_system(operating_system, archive_type)
        architecture = resolve_architecture(filename, operating_system)
        if operating_system is OperatingSystem.NOT_FOUND or architecture is Architecture.NOT_FOUND:
            logger.debug("Skipping %s: platform not found.", filename)
            return []

        bundle_type = (json_extract(entry, ["bundleType"], str) or "").lower()
        is_ga = json_extract(entry, ["GA"], bool)
        return [
            self.create_record(
                filename,
                java_version,
                Platform(archive_type, operating_system, architecture),
                package_type=PackageType.JRE if "jre" in bundle_type else PackageType.JDK,
                release_status=None if is_ga is None else (ReleaseStatus.GA if is_ga else ReleaseStatus.EA),
                direct_download_uri=download_link,
                javafx_bundled=json_extract(entry, ["FX"], bool) or False,
                size=json_extract(entry, ["size"], int) or -1,
            )
        ]
