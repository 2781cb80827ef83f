# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the BellSoft Liberica Native Image Kit releases API.

The API describes each archive with the Native Image Kit version in ``version`` and the versions
of the bundled components in ``components``. The Java version is the one of the bundled Liberica
runtime.
"""

import logging

from disco.adapters.base import Locator, Payload, Platform, SourceAdapter, iter_objects
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Distro,
    HashAlgorithm,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)
from disco.classification.resolver import correct_operating_system, resolve_architecture
from disco.filters import FilterSpecification
from disco.json_tools import json_extract, json_require
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

#: The component whose version is the Java version of the kit.
RUNTIME_COMPONENT = "liberica"


def java_version_of(entry: dict, filename: str) -> VersionNumber:
    """Return the version of the bundled runtime, read from the filename if the components omit it.

    >>> str(java_version_of({}, "bellsoft-liberica-vm-openjdk17.0.6+10-22.3.1+1-linux-amd64.tar.gz"))
    '17.0.6+10'
    """
    for component in iter_objects(entry, "components"):
        if json_extract(component, ["component"], str) == RUNTIME_COMPONENT:
            version = parse_raw(json_extract(component, ["version"], str))
            if not version.is_empty():
                return version
    return parse_raw(filename)


class LibericaNativeAdapter(SourceAdapter):
    """This class implements the adapter of Liberica Native Image Kit."""

    distro = Distro.LIBERICA_NATIVE

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        params: dict[str, str | int | None] = {"bundle-type": "standard"}
        if filters.archive_type is not ArchiveType.NONE:
            params["package-type"] = filters.archive_type.value
        return Locator(f"{self.endpoint}?{construct_query(params)}")

    def entries(self, payload: Payload) -> list[dict]:
        return list(iter_objects(payload))

    def parse_entry(self, entry: dict, filters: FilterSpecification) -> list[PackageRecord]:
        filename = json_require(entry, ["filename"], str)
        download_link = json_require(entry, ["downloadUrl"], str)
        if self.is_noise(filename):
            return []

        java_version = java_version_of(entry, filename)
        if java_version.is_empty():
            logger.debug("Skipping %s: version not found.", filename)
            return []
        if not self.check_latest(java_version, filters):
            return []

        archive_type = ArchiveType.from_text(json_extract(entry, ["packageType"], str))
        if archive_type in (ArchiveType.NOT_FOUND, ArchiveType.SRC_TAR):
            logger.debug("Skipping %s: unusable archive type.", filename)
            return []

        operating_system = correct_operating_system(
            OperatingSystem.from_text(json_extract(entry, ["os"], str)), archive_type
        )
        # The "architecture" field only names the family, e.g. "x86" for 64 bit builds.
        architecture = resolve_architecture(filename, operating_system)
        if operating_system is OperatingSystem.NOT_FOUND or architecture is Architecture.NOT_FOUND:
            logger.debug("Skipping %s: platform not found.", filename)
            return []

        is_ga = json_extract(entry, ["GA"], bool)
        checksum = json_extract(entry, ["sha1"], str) or ""
        return [
            self.create_record(
                filename,
                java_version,
                Platform(archive_type, operating_system, architecture),
                package_type=PackageType.JDK,
                release_status=None if is_ga is None else (ReleaseStatus.GA if is_ga else ReleaseStatus.EA),
                distribution_version=self.parse_version(json_extract(entry, ["version"], str)),
                direct_download_uri=download_link,
                checksum=checksum,
                checksum_type=HashAlgorithm.SHA1 if checksum else HashAlgorithm.NONE,
                size=json_extract(entry, ["size"], int) or -1,
            )
        ]
