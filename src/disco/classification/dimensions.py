# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the canonical dimensions a package record is classified by.

Every dimension has a ``NONE`` member, used for "unconstrained" in filters and "not applicable"
in records, and a ``NOT_FOUND`` member returned when a vendor token cannot be classified.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def _from_text(enum_type: type[E], text: str | None, synonyms: dict[str, E]) -> E:
    """Return the member for ``text`` using the synonyms first and the member values second."""
    not_found: E = enum_type["NOT_FOUND"]
    if not text:
        return not_found
    key = text.strip().strip("-_").lower()
    if key in synonyms:
        return synonyms[key]
    for member in enum_type:
        if member.name not in {"NONE", "NOT_FOUND"} and str(member.value).lower() == key:
            return member
    return not_found


class Bitness(str, Enum):
    """The address width of a processor architecture."""

    BIT_32 = "32"
    BIT_64 = "64"
    NONE = "none"
    NOT_FOUND = "not_found"

    @classmethod
    def from_text(cls, text: str | None) -> Bitness:
        """Return the bitness for a vendor token such as ``64`` or ``32bit``."""
        return _from_text(cls, text, _BITNESS_SYNONYMS)

    def as_int(self) -> int | None:
        """Return the number of bits or None for the sentinels."""
        return int(self.value) if self in (Bitness.BIT_32, Bitness.BIT_64) else None


class Architecture(str, Enum):
    """The processor architecture an artifact is built for."""

    AARCH64 = "aarch64"
    ARM = "arm"
    ARM64 = "arm64"
    MIPS = "mips"
    PPC = "ppc"
    PPC64 = "ppc64"
    PPC64LE = "ppc64le"
    RISCV64 = "riscv64"
    S390X = "s390x"
    SPARC = "sparc"
    SPARCV9 = "sparcv9"
    X64 = "x64"
    X86 = "x86"
    AMD64 = "amd64"
    IA64 = "ia64"
    NONE = "none"
    NOT_FOUND = "not_found"

    @property
    def bitness(self) -> Bitness:
        """Return the bitness of this architecture."""
        if self is Architecture.NOT_FOUND:
            return Bitness.NOT_FOUND
        if self is Architecture.NONE:
            return Bitness.NONE
        return Bitness.BIT_32 if self in _32_BIT_ARCHITECTURES else Bitness.BIT_64

    @property
    def is_arm(self) -> bool:
        """Return True for the ARM family, where the floating-point ABI matters."""
        return self in (Architecture.ARM, Architecture.ARM64, Architecture.AARCH64)

    @classmethod
    def from_text(cls, text: str | None) -> Architecture:
        """Return the architecture for an exact vendor token such as ``x86_64`` or ``i686``."""
        return _from_text(cls, text, _ARCHITECTURE_SYNONYMS)


_32_BIT_ARCHITECTURES = frozenset(
    {Architecture.ARM, Architecture.MIPS, Architecture.PPC, Architecture.SPARC, Architecture.X86}
)


class LibCType(str, Enum):
    """The C library an artifact is linked against."""

    GLIBC = "glibc"
    MUSL = "musl"
    LIBC = "libc"
    C_STD_LIB = "c_std_lib"
    NONE = "none"
    NOT_FOUND = "not_found"

    @classmethod
    def from_text(cls, text: str | None) -> LibCType:
        """Return the libc type for a vendor token."""
        return _from_text(cls, text, {})


class OperatingSystem(str, Enum):
    """The operating system an artifact is built for."""

    ALPINE_LINUX = "alpine_linux"
    LINUX = "linux"
    LINUX_MUSL = "linux_musl"
    MACOS = "macos"
    WINDOWS = "windows"
    SOLARIS = "solaris"
    QNX = "qnx"
    AIX = "aix"
    NONE = "none"
    NOT_FOUND = "not_found"

    @property
    def lib_c_type(self) -> LibCType:
        """Return the C library used on this operating system."""
        match self:
            case OperatingSystem.ALPINE_LINUX | OperatingSystem.LINUX_MUSL:
                return LibCType.MUSL
            case OperatingSystem.LINUX:
                return LibCType.GLIBC
            case OperatingSystem.WINDOWS:
                return LibCType.C_STD_LIB
            case OperatingSystem.NONE:
                return LibCType.NONE
            case OperatingSystem.NOT_FOUND:
                return LibCType.NOT_FOUND
            case _:
                return LibCType.LIBC

    @classmethod
    def from_text(cls, text: str | None) -> OperatingSystem:
        """Return the operating system for an exact vendor token such as ``darwin`` or ``win``."""
        return _from_text(cls, text, _OPERATING_SYSTEM_SYNONYMS)


class ArchiveType(str, Enum):
    """The archive or installer format of an artifact."""

    APK = "apk"
    BIN = "bin"
    CAB = "cab"
    DEB = "deb"
    DMG = "dmg"
    EXE = "exe"
    MSI = "msi"
    PKG = "pkg"
    RPM = "rpm"
    SRC_TAR = "src.tar.gz"
    TAR = "tar"
    TAR_GZ = "tar.gz"
    TAR_Z = "tar.Z"
    ZIP = "zip"
    NONE = "none"
    NOT_FOUND = "not_found"

    @property
    def file_endings(self) -> tuple[str, ...]:
        """Return the filename suffixes of this archive type."""
        if self is ArchiveType.SRC_TAR:
            return (".src.tar.gz", ".source.tar.gz")
        if self in (ArchiveType.NONE, ArchiveType.NOT_FOUND):
            return ()
        return (f".{self.value}",)

    @classmethod
    def from_text(cls, text: str | None) -> ArchiveType:
        """Return the archive type for a vendor token such as ``tar.gz`` or ``.zip``."""
        if text and text.strip().lower().startswith("."):
            text = text.strip()[1:]
        return _from_text(cls, text, _ARCHIVE_TYPE_SYNONYMS)


class PackageType(str, Enum):
    """The image kind of an artifact: a full development kit or a runtime only."""

    JDK = "jdk"
    JRE = "jre"
    NONE = "none"
    NOT_FOUND = "not_found"

    @classmethod
    def from_text(cls, text: str | None) -> PackageType:
        """Return the package type for a vendor token such as ``jdk+fx`` or ``serverjre``."""
        return _from_text(cls, text, _PACKAGE_TYPE_SYNONYMS)


class ReleaseStatus(str, Enum):
    """The maturity of a release: early access or general availability."""

    GA = "ga"
    EA = "ea"
    NONE = "none"
    NOT_FOUND = "not_found"

    @classmethod
    def from_text(cls, text: str | None) -> ReleaseStatus:
        """Return the release status for a vendor token such as ``-ea`` or ``GA_``."""
        return _from_text(cls, text, _RELEASE_STATUS_SYNONYMS)


class TermOfSupport(str, Enum):
    """The support term class of a feature version."""

    STS = "sts"
    MTS = "mts"
    LTS = "lts"
    NONE = "none"
    NOT_FOUND = "not_found"

    @classmethod
    def from_text(cls, text: str | None) -> TermOfSupport:
        """Return the term of support for a vendor token."""
        return _from_text(cls, text, _TERM_OF_SUPPORT_SYNONYMS)


class FPU(str, Enum):
    """The floating-point ABI of an ARM artifact."""

    HARD_FLOAT = "hard_float"
    SOFT_FLOAT = "soft_float"
    UNKNOWN = "unknown"
    NONE = "none"
    NOT_FOUND = "not_found"


class HashAlgorithm(str, Enum):
    """The algorithm of a published checksum."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA224 = "sha224"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_256 = "sha3_256"
    NONE = "none"
    NOT_FOUND = "not_found"

    @classmethod
    def from_text(cls, text: str | None) -> HashAlgorithm:
        """Return the hash algorithm for a vendor token such as ``SHA-256``."""
        return _from_text(cls, text, _HASH_ALGORITHM_SYNONYMS)


class SignatureType(str, Enum):
    """The type of a published signature."""

    RSA = "rsa"
    DSA = "dsa"
    ECDSA = "ecdsa"
    EDDSA = "eddsa"
    NONE = "none"
    NOT_FOUND = "not_found"


class Distro(str, Enum):
    """The distributions a source adapter exists for."""

    AOJ_OPENJ9 = "aoj_openj9"
    BISHENG = "bisheng"
    CORRETTO = "corretto"
    DEBIAN = "debian"
    DRAGONWELL = "dragonwell"
    GRAALVM_CE8 = "graalvm_ce8"
    GRAALVM_CE11 = "graalvm_ce11"
    GRAALVM_CE17 = "graalvm_ce17"
    GRAALVM_COMMUNITY = "graalvm_community"
    JETBRAINS = "jetbrains"
    KONA = "kona"
    LIBERICA = "liberica"
    LIBERICA_NATIVE = "liberica_native"
    MANDREL = "mandrel"
    MICROSOFT = "microsoft"
    OJDK_BUILD = "ojdk_build"
    ORACLE = "oracle"
    ORACLE_OPEN_JDK = "oracle_open_jdk"
    RED_HAT = "redhat"
    SAP_MACHINE = "sap_machine"
    SEMERU_CERTIFIED = "semeru_certified"
    TEMURIN = "temurin"
    TRAVA = "trava"
    ZULU = "zulu"
    ZULU_PRIME = "zulu_prime"
    NONE = "none"
    NOT_FOUND = "not_found"

    @property
    def ui_string(self) -> str:
        """Return the display name of the distribution."""
        return _DISTRO_UI_STRINGS.get(self, "")

    @classmethod
    def from_text(cls, text: str | None) -> Distro:
        """Return the distribution for an api name or one of its synonyms."""
        return _from_text(cls, text, _DISTRO_SYNONYMS)


_BITNESS_SYNONYMS = {
    "32bit": Bitness.BIT_32,
    "32-bit": Bitness.BIT_32,
    "64bit": Bitness.BIT_64,
    "64-bit": Bitness.BIT_64,
}

_ARCHITECTURE_SYNONYMS = {
    "amd64": Architecture.AMD64,
    "aarch32": Architecture.ARM,
    "armel": Architecture.ARM,
    "armhf": Architecture.ARM,
    "arm32": Architecture.ARM,
    "ppc64el": Architecture.PPC64LE,
    "s390": Architecture.S390X,
    "x86-64": Architecture.X64,
    "x86_64": Architecture.X64,
    "i386": Architecture.X86,
    "i486": Architecture.X86,
    "i586": Architecture.X86,
    "i686": Architecture.X86,
    "x86-32": Architecture.X86,
    "x86_32": Architecture.X86,
    "x32": Architecture.X86,
    "ia-64": Architecture.IA64,
}

_OPERATING_SYSTEM_SYNONYMS = {
    "linux-musl": OperatingSystem.ALPINE_LINUX,
    "linux_musl": OperatingSystem.ALPINE_LINUX,
    "alpine-linux": OperatingSystem.ALPINE_LINUX,
    "alpine_linux": OperatingSystem.ALPINE_LINUX,
    "alpine linux": OperatingSystem.ALPINE_LINUX,
    "alpine": OperatingSystem.ALPINE_LINUX,
    "darwin": OperatingSystem.MACOS,
    "macosx": OperatingSystem.MACOS,
    "mac os": OperatingSystem.MACOS,
    "mac_os": OperatingSystem.MACOS,
    "mac-os": OperatingSystem.MACOS,
    "mac osx": OperatingSystem.MACOS,
    "mac": OperatingSystem.MACOS,
    "osx": OperatingSystem.MACOS,
    "win": OperatingSystem.WINDOWS,
}

_ARCHIVE_TYPE_SYNONYMS = {
    "source.tar.gz": ArchiveType.SRC_TAR,
    "src_tar": ArchiveType.SRC_TAR,
    "tar_gz": ArchiveType.TAR_GZ,
    "tgz": ArchiveType.TAR_GZ,
    "tar.z": ArchiveType.TAR_Z,
}

_PACKAGE_TYPE_SYNONYMS = {
    "jdk+fx": PackageType.JDK,
    "jre+fx": PackageType.JRE,
    "serverjre": PackageType.JRE,
}

_RELEASE_STATUS_SYNONYMS = {
    "early_access": ReleaseStatus.EA,
    "early-access": ReleaseStatus.EA,
    "preview": ReleaseStatus.EA,
}

_TERM_OF_SUPPORT_SYNONYMS = {
    "short_term_stable": TermOfSupport.STS,
    "medium_term_stable": TermOfSupport.MTS,
    "long_term_stable": TermOfSupport.LTS,
}

_HASH_ALGORITHM_SYNONYMS = {
    "sha-1": HashAlgorithm.SHA1,
    "sha-256": HashAlgorithm.SHA256,
    "sha-224": HashAlgorithm.SHA224,
    "sha-384": HashAlgorithm.SHA384,
    "sha-512": HashAlgorithm.SHA512,
    "sha3-256": HashAlgorithm.SHA3_256,
}

_DISTRO_UI_STRINGS = {
    Distro.AOJ_OPENJ9: "AOJ OpenJ9",
    Distro.BISHENG: "Bi Sheng",
    Distro.CORRETTO: "Corretto",
    Distro.DEBIAN: "Debian",
    Distro.DRAGONWELL: "Dragonwell",
    Distro.GRAALVM_CE8: "GraalVM CE 8",
    Distro.GRAALVM_CE11: "GraalVM CE 11",
    Distro.GRAALVM_CE17: "GraalVM CE 17",
    Distro.GRAALVM_COMMUNITY: "GraalVM Community",
    Distro.JETBRAINS: "JetBrains",
    Distro.KONA: "Kona",
    Distro.LIBERICA: "Liberica",
    Distro.LIBERICA_NATIVE: "Liberica Native",
    Distro.MANDREL: "Mandrel",
    Distro.MICROSOFT: "Microsoft",
    Distro.OJDK_BUILD: "OJDK Build",
    Distro.ORACLE: "Oracle",
    Distro.ORACLE_OPEN_JDK: "Oracle OpenJDK",
    Distro.RED_HAT: "Red Hat",
    Distro.SAP_MACHINE: "SAP Machine",
    Distro.SEMERU_CERTIFIED: "Semeru certified",
    Distro.TEMURIN: "Temurin",
    Distro.TRAVA: "Trava",
    Distro.ZULU: "Zulu",
    Distro.ZULU_PRIME: "Zulu Prime",
}

_DISTRO_SYNONYMS = {
    "adoptium": Distro.TEMURIN,
    "openj9": Distro.AOJ_OPENJ9,
    "aoj_openj9": Distro.AOJ_OPENJ9,
    "bi_sheng": Distro.BISHENG,
    "graalvm": Distro.GRAALVM_COMMUNITY,
    "graalvm_ce": Distro.GRAALVM_COMMUNITY,
    "graalvmce8": Distro.GRAALVM_CE8,
    "graalvm ce 8": Distro.GRAALVM_CE8,
    "graalvmce11": Distro.GRAALVM_CE11,
    "graalvm ce 11": Distro.GRAALVM_CE11,
    "graalvmce17": Distro.GRAALVM_CE17,
    "graalvm ce 17": Distro.GRAALVM_CE17,
    "jbr": Distro.JETBRAINS,
    "tencent": Distro.KONA,
    "bellsoft": Distro.LIBERICA,
    "libericanative": Distro.LIBERICA_NATIVE,
    "liberica native": Distro.LIBERICA_NATIVE,
    "oraclejdk": Distro.ORACLE,
    "oracle_jdk": Distro.ORACLE,
    "oracle_openjdk": Distro.ORACLE_OPEN_JDK,
    "openjdk": Distro.ORACLE_OPEN_JDK,
    "red_hat": Distro.RED_HAT,
    "red-hat": Distro.RED_HAT,
    "red hat": Distro.RED_HAT,
    "sapmachine": Distro.SAP_MACHINE,
    "sap": Distro.SAP_MACHINE,
    "semerucertified": Distro.SEMERU_CERTIFIED,
    "semeru certified": Distro.SEMERU_CERTIFIED,
    "ibm_semeru_certified": Distro.SEMERU_CERTIFIED,
    "azul": Distro.ZULU,
    "zuluprime": Distro.ZULU_PRIME,
    "zulu prime": Distro.ZULU_PRIME,
    "zing": Distro.ZULU_PRIME,
    "ojdkbuild": Distro.OJDK_BUILD,
    "amazon": Distro.CORRETTO,
}
