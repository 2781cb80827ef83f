# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module resolves free-form vendor strings to the canonical dimensions.

The lookups scan the ordered tables of :mod:`disco.classification.tables`. The fallback chains
combine several signals where a single token is not enough, e.g. an operating system implied by
the archive type when the filename does not name one.
"""

import logging
import re
from enum import Enum
from typing import TypeVar

from disco.classification.dimensions import (
    FPU,
    Architecture,
    ArchiveType,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    TermOfSupport,
)
from disco.classification.tables import (
    ARCHITECTURE_LOOKUP,
    ARCHIVE_TYPE_LOOKUP,
    FPU_LOOKUP,
    OPERATING_SYSTEM_BY_ARCHIVE_TYPE,
    OPERATING_SYSTEM_LOOKUP,
    PACKAGE_TYPE_LOOKUP,
    RELEASE_STATUS_LOOKUP,
    LookupTable,
)
from disco.schedule import ScheduleFacts

logger: logging.Logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Enum)

# The release status markers, matched case-insensitively. A marker ending in a letter that is followed
# by another letter is part of a longer word, e.g. "-easy", and does not count.
RELEASE_STATUS_MARKERS: tuple[tuple[re.Pattern[str], ReleaseStatus], ...] = tuple(
    (
        re.compile(re.escape(token) + (r"(?![a-zA-Z])" if token[-1].isalpha() else ""), re.IGNORECASE),
        status,
    )
    for token, status in RELEASE_STATUS_LOOKUP
)


def _not_found(table: LookupTable[V]) -> V | None:
    if not table:
        return None
    enum_type = type(table[0][1])
    return enum_type["NOT_FOUND"]  # type: ignore[no-any-return]


def resolve(haystack: str | None, table: LookupTable[V]) -> V:
    """Return the value of the first token of ``table`` contained in ``haystack``.

    Parameters
    ----------
    haystack : str | None
        The vendor string, usually a filename or URL.
    table : LookupTable[V]
        The ordered lookup table.

    Returns
    -------
    V
        The matched value or the ``NOT_FOUND`` member of the table's enum.

    Examples
    --------
    >>> resolve("openjdk-17.0.2_linux-x64_bin.tar.gz", ARCHITECTURE_LOOKUP)
    <Architecture.X64: 'x64'>
    """
    not_found = _not_found(table)
    if not haystack:
        return not_found  # type: ignore[return-value]
    for token, value in table:
        if token in haystack:
            return value
    return not_found  # type: ignore[return-value]


def resolve_suffix(haystack: str | None, table: LookupTable[V]) -> V:
    """Return the value of the first token of ``table`` that ``haystack`` ends with."""
    not_found = _not_found(table)
    if not haystack:
        return not_found  # type: ignore[return-value]
    for token, value in table:
        if haystack.endswith(token):
            return value
    return not_found  # type: ignore[return-value]


def resolve_archive_type(filename: str | None) -> ArchiveType:
    """Return the archive type of a filename by its suffix."""
    return resolve_suffix(filename, ARCHIVE_TYPE_LOOKUP)


def strip_archive_suffix(filename: str) -> str:
    """Return the filename without its archive suffix, unchanged when the suffix is unknown."""
    for token, _ in ARCHIVE_TYPE_LOOKUP:
        if filename.endswith(token):
            return filename[: -len(token)]
    return filename


def resolve_package_type(text: str | None, default: PackageType | None = None) -> PackageType:
    """Return the package type named in ``text``, or ``default`` when none is named."""
    package_type = resolve(text, PACKAGE_TYPE_LOOKUP)
    if package_type is PackageType.NOT_FOUND and default is not None:
        return default
    return package_type


def correct_operating_system(operating_system: OperatingSystem, archive_type: ArchiveType) -> OperatingSystem:
    """Correct a macOS classification that contradicts the archive type.

    Some vendors put ``mac`` like tokens into the names of Linux and Windows installers, so a
    deb or rpm package is Linux and a cab, msi or exe installer is Windows.
    """
    if operating_system is not OperatingSystem.MACOS:
        return operating_system
    match archive_type:
        case ArchiveType.DEB | ArchiveType.RPM:
            return OperatingSystem.LINUX
        case ArchiveType.CAB | ArchiveType.MSI | ArchiveType.EXE:
            return OperatingSystem.WINDOWS
        case _:
            return operating_system


def resolve_operating_system(text: str | None, archive_type: ArchiveType = ArchiveType.NONE) -> OperatingSystem:
    """Return the operating system named in ``text``, falling back to the one implied by the archive type.

    Parameters
    ----------
    text : str | None
        The vendor string.
    archive_type : ArchiveType
        The archive type already resolved for the same artifact.

    Returns
    -------
    OperatingSystem
        The operating system, or ``NOT_FOUND`` if neither signal gives one.
    """
    operating_system = resolve(text, OPERATING_SYSTEM_LOOKUP)
    if operating_system is OperatingSystem.NOT_FOUND:
        operating_system = OPERATING_SYSTEM_BY_ARCHIVE_TYPE.get(archive_type, OperatingSystem.NOT_FOUND)
        if operating_system is not OperatingSystem.NOT_FOUND:
            logger.debug("Derived the operating system %s of %s from its archive type.", operating_system, text)
    return operating_system


def resolve_architecture(
    text: str | None,
    operating_system: OperatingSystem = OperatingSystem.NONE,
    default_macos_x64: bool = False,
) -> Architecture:
    """Return the architecture named in ``text``.

    Parameters
    ----------
    text : str | None
        The vendor string.
    operating_system : OperatingSystem
        The operating system already resolved for the same artifact.
    default_macos_x64 : bool
        If True an unnamed architecture of a macOS artifact is X64. Only vendors that published
        macOS builds before other macOS architectures existed enable this.

    Returns
    -------
    Architecture
        The architecture, or ``NOT_FOUND``.
    """
    architecture = resolve(text, ARCHITECTURE_LOOKUP)
    if (
        architecture is Architecture.NOT_FOUND
        and default_macos_x64
        and operating_system is OperatingSystem.MACOS
    ):
        return Architecture.X64
    return architecture


def resolve_fpu(text: str | None, architecture: Architecture) -> FPU:
    """Return the floating-point ABI of an ARM artifact, NONE for other architectures."""
    if not architecture.is_arm:
        return FPU.NONE
    fpu = resolve(text, FPU_LOOKUP)
    return FPU.UNKNOWN if fpu is FPU.NOT_FOUND else fpu


def resolve_release_marker(text: str | None) -> ReleaseStatus:
    """Return the status of the first release status marker found in ``text``.

    Examples
    --------
    >>> resolve_release_marker("openjdk-21-ea+33_linux-x64_bin.tar.gz")
    <ReleaseStatus.EA: 'ea'>
    >>> resolve_release_marker("jdk-17.0.6_linux-x64_headless.tar.gz")
    <ReleaseStatus.NOT_FOUND: 'not_found'>
    """
    if not text:
        return ReleaseStatus.NOT_FOUND
    for pattern, status in RELEASE_STATUS_MARKERS:
        if pattern.search(text):
            return status
    return ReleaseStatus.NOT_FOUND


def has_early_access_marker(text: str | None) -> bool:
    """Return True if ``text`` carries an early access marker such as ``-ea`` or ``/early_access/``."""
    return resolve_release_marker(text) is ReleaseStatus.EA


def resolve_release_status(
    flag: ReleaseStatus | None = None,
    text: str | None = None,
    feature: int | None = None,
    schedule: ScheduleFacts | None = None,
) -> ReleaseStatus:
    """Return the release status from the strongest available signal.

    The signals are checked in priority order: an explicit vendor flag, a release status marker
    in the filename, the feature version being the next or next-but-one unreleased one according to
    the schedule, and finally general availability.

    Parameters
    ----------
    flag : ReleaseStatus | None
        The status the vendor states explicitly, e.g. in a JSON field.
    text : str | None
        The filename or URL to look for markers in.
    feature : int | None
        The feature version of the artifact.
    schedule : ScheduleFacts | None
        The schedule facts used by the feature version heuristic.

    Returns
    -------
    ReleaseStatus
        Either EA or GA.
    """
    if flag in (ReleaseStatus.EA, ReleaseStatus.GA):
        return flag  # type: ignore[return-value]
    marker = resolve_release_marker(text)
    if marker is not ReleaseStatus.NOT_FOUND:
        return marker
    if schedule is not None and schedule.is_upcoming(feature):
        return ReleaseStatus.EA
    return ReleaseStatus.GA


def resolve_term_of_support(feature: int | None, schedule: ScheduleFacts) -> TermOfSupport:
    """Return the term of support of a feature version, with MTS demoted to STS."""
    term_of_support = schedule.term_of_support(feature)
    if term_of_support is TermOfSupport.MTS:
        return TermOfSupport.STS
    return term_of_support
