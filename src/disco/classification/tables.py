# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the ordered lookup tables used to classify vendor strings.

A table is a sequence of ``(token, value)`` pairs scanned in order by the resolver. Vendor
filenames are not reliably delimited, so the resolver uses substring containment and the first
match wins. A token must therefore never be listed after a shorter token it contains when the two
map to different values, e.g. ``linux-musl`` has to come before ``linux``.
"""

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from disco.classification.dimensions import (
    FPU,
    Architecture,
    ArchiveType,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
)

V = TypeVar("V", bound=Enum)

LookupTable = Sequence[tuple[str, V]]

ARCHIVE_TYPE_LOOKUP: LookupTable[ArchiveType] = (
    (".apk", ArchiveType.APK),
    (".bin", ArchiveType.BIN),
    (".cab", ArchiveType.CAB),
    (".deb", ArchiveType.DEB),
    (".dmg", ArchiveType.DMG),
    (".msi", ArchiveType.MSI),
    (".pkg", ArchiveType.PKG),
    (".rpm", ArchiveType.RPM),
    (".source.tar.gz", ArchiveType.SRC_TAR),
    (".src.tar.gz", ArchiveType.SRC_TAR),
    (".tar.gz", ArchiveType.TAR_GZ),
    (".tgz", ArchiveType.TAR_GZ),
    (".tar.Z", ArchiveType.TAR_Z),
    (".tar", ArchiveType.TAR),
    (".zip", ArchiveType.ZIP),
    (".exe", ArchiveType.EXE),
)

ARCHITECTURE_LOOKUP: LookupTable[Architecture] = (
    ("ia64", Architecture.IA64),
    ("aarch64", Architecture.AARCH64),
    ("aarch32sf", Architecture.ARM),
    ("aarch32hf", Architecture.ARM),
    ("aarch32", Architecture.ARM),
    ("x86-32", Architecture.X86),
    ("x86_32", Architecture.X86),
    ("x86lx32", Architecture.X86),
    ("x86-64", Architecture.X64),
    ("x86_64", Architecture.X64),
    ("x86lx64", Architecture.X64),
    ("x86", Architecture.X86),
    ("win64", Architecture.X64),
    ("x64", Architecture.X64),
    ("x32", Architecture.X86),
    ("amd64", Architecture.AMD64),
    ("arm64", Architecture.ARM64),
    ("arm32", Architecture.ARM),
    ("armhf", Architecture.ARM),
    ("armel", Architecture.ARM),
    ("arm", Architecture.ARM),
    ("mips", Architecture.MIPS),
    ("i386", Architecture.X86),
    ("i486", Architecture.X86),
    ("i586", Architecture.X86),
    ("i686", Architecture.X86),
    ("s390x", Architecture.S390X),
    ("ppc32spe", Architecture.PPC),
    ("ppc32hf", Architecture.PPC),
    ("ppc64le", Architecture.PPC64LE),
    ("ppc64el", Architecture.PPC64LE),
    ("ppc64", Architecture.PPC64),
    ("ppc", Architecture.PPC),
    ("riscv64", Architecture.RISCV64),
    ("sparcv9", Architecture.SPARCV9),
    ("sparc", Architecture.SPARC),
)

OPERATING_SYSTEM_LOOKUP: LookupTable[OperatingSystem] = (
    ("darwin", OperatingSystem.MACOS),
    ("windows", OperatingSystem.WINDOWS),
    ("Windows", OperatingSystem.WINDOWS),
    ("win", OperatingSystem.WINDOWS),
    ("alpine-linux", OperatingSystem.ALPINE_LINUX),
    ("Alpine-Linux", OperatingSystem.ALPINE_LINUX),
    ("alpine_linux", OperatingSystem.ALPINE_LINUX),
    ("Alpine_Linux", OperatingSystem.ALPINE_LINUX),
    ("linux-musl", OperatingSystem.ALPINE_LINUX),
    ("Linux-MUSL", OperatingSystem.ALPINE_LINUX),
    ("Linux-Musl", OperatingSystem.ALPINE_LINUX),
    ("linux_musl", OperatingSystem.ALPINE_LINUX),
    ("Linux_MUSL", OperatingSystem.ALPINE_LINUX),
    ("Linux_Musl", OperatingSystem.ALPINE_LINUX),
    ("musl", OperatingSystem.ALPINE_LINUX),
    ("alpine", OperatingSystem.ALPINE_LINUX),
    ("linux", OperatingSystem.LINUX),
    ("Linux", OperatingSystem.LINUX),
    ("solaris", OperatingSystem.SOLARIS),
    ("qnx", OperatingSystem.QNX),
    ("aix", OperatingSystem.AIX),
    ("macosx", OperatingSystem.MACOS),
    ("macos", OperatingSystem.MACOS),
    ("osx", OperatingSystem.MACOS),
    ("mac", OperatingSystem.MACOS),
)

#: The operating system implied by an archive type, used when a filename carries no OS token.
OPERATING_SYSTEM_BY_ARCHIVE_TYPE: dict[ArchiveType, OperatingSystem] = {
    ArchiveType.APK: OperatingSystem.ALPINE_LINUX,
    ArchiveType.DEB: OperatingSystem.LINUX,
    ArchiveType.RPM: OperatingSystem.LINUX,
    ArchiveType.TAR_GZ: OperatingSystem.LINUX,
    ArchiveType.PKG: OperatingSystem.MACOS,
    ArchiveType.DMG: OperatingSystem.MACOS,
    ArchiveType.EXE: OperatingSystem.WINDOWS,
    ArchiveType.MSI: OperatingSystem.WINDOWS,
    ArchiveType.CAB: OperatingSystem.WINDOWS,
    ArchiveType.ZIP: OperatingSystem.WINDOWS,
}

PACKAGE_TYPE_LOOKUP: LookupTable[PackageType] = (
    ("serverjre", PackageType.JRE),
    ("-jre", PackageType.JRE),
    ("jre-", PackageType.JRE),
    ("_jre", PackageType.JRE),
    ("jre", PackageType.JRE),
    ("JRE", PackageType.JRE),
    ("-jdk", PackageType.JDK),
    ("jdk-", PackageType.JDK),
    ("jdk", PackageType.JDK),
    ("JDK", PackageType.JDK),
)

#: The release status markers of filenames and URLs. Every short token starts with a delimiter so words
#: such as "release" or "headless" never match, and the resolver skips a token followed by a letter, e.g. "-easy".
RELEASE_STATUS_LOOKUP: LookupTable[ReleaseStatus] = (
    ("early_access", ReleaseStatus.EA),
    ("early-access", ReleaseStatus.EA),
    ("/EA/", ReleaseStatus.EA),
    ("-eabeta", ReleaseStatus.EA),
    ("_eabeta", ReleaseStatus.EA),
    (".eabeta", ReleaseStatus.EA),
    ("-ea", ReleaseStatus.EA),
    ("_ea", ReleaseStatus.EA),
    (".ea", ReleaseStatus.EA),
    ("/GA/", ReleaseStatus.GA),
    ("-ga", ReleaseStatus.GA),
    ("_ga", ReleaseStatus.GA),
)

#: The floating-point ABI markers of ARM artifacts.
FPU_LOOKUP: LookupTable[FPU] = (
    ("aarch32sf", FPU.SOFT_FLOAT),
    ("aarch32hf", FPU.HARD_FLOAT),
    ("32sf", FPU.SOFT_FLOAT),
    ("32hf", FPU.HARD_FLOAT),
    ("armel", FPU.SOFT_FLOAT),
    ("armhf", FPU.HARD_FLOAT),
    ("-sf", FPU.SOFT_FLOAT),
    ("_sf", FPU.SOFT_FLOAT),
    ("-hf", FPU.HARD_FLOAT),
    ("_hf", FPU.HARD_FLOAT),
)

#: The named tables, in the order the ordering invariant is checked.
TABLES: dict[str, LookupTable] = {
    "archive_type": ARCHIVE_TYPE_LOOKUP,
    "architecture": ARCHITECTURE_LOOKUP,
    "operating_system": OPERATING_SYSTEM_LOOKUP,
    "package_type": PACKAGE_TYPE_LOOKUP,
    "release_status": RELEASE_STATUS_LOOKUP,
    "fpu": FPU_LOOKUP,
}


def shadowed_tokens(table: LookupTable) -> list[tuple[str, str]]:
    """Return the ``(earlier, later)`` token pairs where the earlier token hides the later one.

    A later token is hidden when an earlier token mapping to a different value is a substring of
    it, so a haystack containing the later token can never resolve to the later token's value.
    """
    result = []
    for index, (later_token, later_value) in enumerate(table):
        for earlier_token, earlier_value in table[:index]:
            if earlier_value != later_value and earlier_token in later_token:
                result.append((earlier_token, later_token))
    return result
