# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the canonical package record produced by the source adapters."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from disco.classification.dimensions import (
    FPU,
    Architecture,
    ArchiveType,
    Bitness,
    Distro,
    HashAlgorithm,
    LibCType,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    SignatureType,
    TermOfSupport,
)
from disco.version.version_number import VersionNumber


@dataclass
class PackageRecord:
    """One downloadable artifact of a distribution.

    A record is only created once the architecture, operating system, archive type and version
    were resolved. After creation only the checksum and signature fields are filled in, by the
    sibling file pass of the adapter that emitted it.
    """

    #: The distribution the artifact belongs to.
    distribution: Distro

    #: The filename of the artifact.
    filename: str

    #: The version of the runtime the artifact implements.
    java_version: VersionNumber

    #: The vendor's own version of the artifact, e.g. ``17.40.19`` for Zulu.
    distribution_version: VersionNumber

    architecture: Architecture
    operating_system: OperatingSystem
    archive_type: ArchiveType
    package_type: PackageType
    release_status: ReleaseStatus
    term_of_support: TermOfSupport

    #: The URI the artifact can be fetched from, empty if it is not directly downloadable.
    direct_download_uri: str = ""

    #: The page the artifact is offered on.
    download_site_uri: str = ""

    directly_downloadable: bool = True

    #: Derived from the operating system when left as NONE.
    lib_c_type: LibCType = LibCType.NONE

    fpu: FPU = FPU.NONE
    javafx_bundled: bool = False
    headless: bool = False
    free_use_in_production: bool = True
    tck_tested: bool = False
    tck_cert_uri: str = ""

    checksum: str = ""
    checksum_uri: str = ""
    checksum_type: HashAlgorithm = HashAlgorithm.NONE

    signature_uri: str = ""
    signature_type: SignatureType = SignatureType.NONE

    #: The size in bytes, -1 if unknown.
    size: int = -1

    #: Extra feature tags such as ``fiber`` or ``crac``.
    feature: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.lib_c_type is LibCType.NONE:
            self.lib_c_type = self.operating_system.lib_c_type

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """Return the stable identifier of the record.

        It is the md5 hex digest of the direct download URI, or of the download site URI followed
        by the filename when the artifact is not directly downloadable.
        """
        if self.directly_downloadable and self.direct_download_uri:
            key = self.direct_download_uri
        else:
            key = f"{self.download_site_uri}{self.filename}"
        return hashlib.md5(key.encode("utf-8"), usedforsecurity=False).hexdigest()

    @property
    def version_number(self) -> VersionNumber:
        """Return the version number used for filtering and ordering, the runtime version."""
        return self.java_version

    @property
    def major_version(self) -> int | None:
        """Return the feature version."""
        return self.java_version.feature

    @property
    def bitness(self) -> Bitness:
        """Return the bitness derived from the architecture."""
        return self.architecture.bitness

    def to_json(self) -> dict:
        """Return the JSON representation of the record."""
        return {
            "id": self.id,
            "distribution": self.distribution.value,
            "major_version": self.major_version,
            "java_version": str(self.java_version),
            "distribution_version": str(self.distribution_version),
            "architecture": self.architecture.value,
            "bitness": self.bitness.as_int(),
            "fpu": self.fpu.value,
            "operating_system": self.operating_system.value,
            "lib_c_type": self.lib_c_type.value,
            "archive_type": self.archive_type.value,
            "package_type": self.package_type.value,
            "release_status": self.release_status.value,
            "term_of_support": self.term_of_support.value,
            "javafx_bundled": self.javafx_bundled,
            "headless": self.headless,
            "directly_downloadable": self.directly_downloadable,
            "filename": self.filename,
            "direct_download_uri": self.direct_download_uri,
            "download_site_uri": self.download_site_uri,
            "checksum": self.checksum,
            "checksum_uri": self.checksum_uri,
            "checksum_type": self.checksum_type.value,
            "signature_uri": self.signature_uri,
            "signature_type": self.signature_type.value,
            "size": self.size,
            "free_use_in_production": self.free_use_in_production,
            "tck_tested": self.tck_tested,
            "tck_cert_uri": self.tck_cert_uri,
            "feature": list(self.feature),
        }
