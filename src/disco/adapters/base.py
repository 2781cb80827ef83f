# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module defines the source adapter contract every distribution implements.

An adapter turns a filter specification into a locator, the request target of the vendor, and
turns the payload fetched from that locator into canonical package records. Adapters perform no
I/O. The shared per-entry algorithm lives in :meth:`SourceAdapter.parse`, vendors implement the
entry iteration and the classification of a single entry.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

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
    correct_operating_system,
    resolve_architecture,
    resolve_archive_type,
    resolve_fpu,
    resolve_operating_system,
    resolve_release_status,
    resolve_term_of_support,
)
from disco.config.defaults import defaults
from disco.errors import ConfigurationError, PayloadEntryError
from disco.filters import FilterSpecification
from disco.html_tools import file_name_from_url
from disco.record import PackageRecord
from disco.schedule import ScheduleFacts
from disco.version.remap import RemapRule, apply_remap
from disco.version.version_number import VersionNumber, parse_raw

logger: logging.Logger = logging.getLogger(__name__)

#: A payload as handed to :meth:`SourceAdapter.parse`, decoded JSON or raw HTML text.
Payload = Any


class PayloadKind(str, Enum):
    """The kind of payload a locator answers with."""

    JSON = "json"
    HTML = "html"


@dataclass(frozen=True)
class Locator:
    """The request target of a vendor for one filter specification."""

    #: The URL to fetch.
    url: str

    #: The kind of payload the URL answers with.
    payload_kind: PayloadKind = PayloadKind.JSON


@dataclass(frozen=True)
class Platform:
    """The platform dimensions resolved from a filename."""

    archive_type: ArchiveType
    operating_system: OperatingSystem
    architecture: Architecture


def correct_too_early_ga(records: Iterable[PackageRecord], schedule: ScheduleFacts) -> list[PackageRecord]:
    """Reclassify as EA the GA records whose feature version has not been released yet.

    Vendors sometimes publish builds of the next feature version without an early access marker.
    The corrected records are copies, the given records are left untouched.

    Parameters
    ----------
    records : Iterable[PackageRecord]
        The records to check.
    schedule : ScheduleFacts
        The schedule telling which feature versions are upcoming.

    Returns
    -------
    list[PackageRecord]
        The records in the same order.
    """
    corrected = []
    for record in records:
        if record.release_status is ReleaseStatus.GA and schedule.is_upcoming(record.major_version):
            logger.debug("Reclassifying %s as early access.", record.filename)
            record = replace(record, release_status=ReleaseStatus.EA)
        corrected.append(record)
    return corrected


class SourceAdapter(ABC):
    """Base source adapter class.

    Subclasses set :attr:`distro`, implement :meth:`locator_for`, :meth:`entries` and
    :meth:`parse_entry`, and may override the sibling file pass in :meth:`attach_sidecars`.
    """

    #: The distribution this adapter parses.
    distro: Distro = Distro.NONE

    #: Filename suffixes of entries that are never artifacts.
    ignored_suffixes: tuple[str, ...] = (
        ".txt",
        ".sig",
        ".sha1",
        ".sha256",
        ".sha256.txt",
        ".sha256sum.txt",
        ".md5",
        ".json",
        ".jar",
        ".asc",
    )

    #: Filename substrings of entries that are never artifacts.
    ignored_substrings: tuple[str, ...] = ("debuginfo", "debugimage", "testimage", "symbols", "-debug-")

    def __init__(self, schedule: ScheduleFacts | None = None) -> None:
        self.enabled: bool = True
        self.endpoint: str = ""
        self._schedule = schedule

    @property
    def name(self) -> str:
        """Return the display name of the distribution."""
        return self.distro.ui_string

    @property
    def section_name(self) -> str:
        """Return the name of the ``defaults.ini`` section of this adapter."""
        return f"adapter.{self.distro.value}"

    @property
    def schedule(self) -> ScheduleFacts:
        """Return the schedule facts, read from ``defaults.ini`` unless they were injected."""
        if self._schedule is None:
            self._schedule = ScheduleFacts.from_defaults()
        return self._schedule

    @schedule.setter
    def schedule(self, schedule: ScheduleFacts | None) -> None:
        self._schedule = schedule

    def load_defaults(self) -> None:
        """Load the .ini configuration of this adapter.

        Raises
        ------
        ConfigurationError
            If there is a schema violation in the section of this adapter.
        """
        section_name = self.section_name
        if not defaults.has_section(section_name):
            return
        section = defaults[section_name]

        try:
            self.enabled = section.getboolean("enabled", fallback=True)
        except ValueError as error:
            raise ConfigurationError(
                f'The "enabled" value in section [{section_name}] of the .ini configuration file is invalid: {error}',
            ) from error

        self.endpoint = section.get("endpoint", "").strip()
        if not self.endpoint:
            raise ConfigurationError(
                f'The "endpoint" key is missing in section [{section_name}] of the .ini configuration file.'
            )

    def _require(self, key: str) -> str:
        """Return a non-empty value of this adapter's section.

        Raises
        ------
        ConfigurationError
            If the value is missing or empty.
        """
        value = defaults.get(self.section_name, key, fallback="").strip()
        if not value:
            raise ConfigurationError(
                f'The "{key}" key is missing in section [{self.section_name}] of the .ini configuration file.'
            )
        return value

    @abstractmethod
    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        """Return the locator of the payload for ``filters``, or None if the vendor does not serve it."""

    @abstractmethod
    def entries(self, payload: Payload) -> Iterable[Any]:
        """Return the artifact entries of a payload."""

    @abstractmethod
    def parse_entry(self, entry: Any, filters: FilterSpecification) -> Iterable[PackageRecord]:
        """Return the records of one entry.

        Raises
        ------
        PayloadEntryError
            If the entry is malformed. Only this entry is skipped.
        ValueError
            If a number of the entry is out of range, e.g. a negative version component. Only this
            entry is skipped.
        """

    def parse(self, payload: Payload, filters: FilterSpecification | None = None) -> list[PackageRecord]:
        """Parse a payload into the records that satisfy ``filters``.

        Parameters
        ----------
        payload : Payload
            The decoded JSON value or the HTML text fetched from a locator of this adapter.
        filters : FilterSpecification | None
            The constraints, unconstrained if None.

        Returns
        -------
        list[PackageRecord]
            The records in payload order, empty for an empty payload.
        """
        if filters is None:
            filters = FilterSpecification()
        if not payload:
            logger.debug("Empty payload for %s.", self.name)
            return []

        records: list[PackageRecord] = []
        for entry in self.entries(payload):
            try:
                candidates = list(self.parse_entry(entry, filters))
            except (PayloadEntryError, ValueError) as error:
                logger.debug("Skipping a malformed %s entry: %s", self.name, error)
                continue
            # Status corrections precede the filters.
            candidates = correct_too_early_ga(candidates, self.schedule)
            records.extend(record for record in candidates if filters.accepts(record))

        self.attach_sidecars(payload, records)
        logger.debug("Parsed %s records from the %s payload.", len(records), self.name)
        return records

    def attach_sidecars(self, payload: Payload, records: list[PackageRecord]) -> None:
        """Attach checksum and signature URIs found in the payload to the records.

        The default implementation does nothing.
        """

    def is_noise(self, filename: str) -> bool:
        """Return True if ``filename`` is a checksum, signature, symbol or source file."""
        if not filename:
            return True
        if filename.endswith(self.ignored_suffixes):
            return True
        return any(substring in filename for substring in self.ignored_substrings)

    def parse_version(
        self, text: str | None, rules: Sequence[RemapRule] = (), occurrence: int = 0
    ) -> VersionNumber | None:
        """Parse and remap a version, or return None if no version could be found."""
        version = apply_remap(parse_raw(text, occurrence), rules)
        if version.is_empty():
            logger.debug("Skipping %s: version not found.", text)
            return None
        return version

    def check_latest(self, version: VersionNumber, filters: FilterSpecification) -> bool:
        """Return False if the "latest" filter excludes ``version``.

        Only the feature is compared. Entries of other features are skipped one by one, a
        mismatch never ends the payload.
        """
        if not filters.latest or filters.version.is_empty() or filters.version.feature_equals(version):
            return True
        logger.debug("Skipping %s: not the requested feature version.", version)
        return False

    def resolve_platform(
        self,
        filename: str,
        text: str | None = None,
        default_macos_x64: bool = False,
        filters: FilterSpecification | None = None,
    ) -> Platform | None:
        """Resolve the archive type, operating system and architecture of a filename.

        Parameters
        ----------
        filename : str
            The filename, its suffix gives the archive type.
        text : str | None
            The text the operating system and architecture are looked up in, the filename if None.
        default_macos_x64 : bool
            Whether an unnamed macOS architecture is X64.
        filters : FilterSpecification | None
            If given, a resolved dimension the filters exclude skips the entry early.

        Returns
        -------
        Platform | None
            The platform, or None if a dimension was not found or is excluded.
        """
        if text is None:
            text = filename
        archive_type = resolve_archive_type(filename)
        if archive_type is ArchiveType.NOT_FOUND:
            logger.debug("Skipping %s: archive type not found.", filename)
            return None
        if archive_type is ArchiveType.SRC_TAR:
            logger.debug("Skipping %s: source archive.", filename)
            return None

        operating_system = correct_operating_system(resolve_operating_system(text, archive_type), archive_type)
        if operating_system is OperatingSystem.NOT_FOUND:
            logger.debug("Skipping %s: operating system not found.", filename)
            return None

        architecture = resolve_architecture(text, operating_system, default_macos_x64)
        if architecture is Architecture.NOT_FOUND:
            logger.debug("Skipping %s: architecture not found.", filename)
            return None

        platform = Platform(archive_type, operating_system, architecture)
        if filters is not None and not all(
            filters.allows(value) for value in (archive_type, operating_system, architecture)
        ):
            logger.debug("Skipping %s: excluded by the platform filters.", filename)
            return None
        return platform

    def create_record(
        self,
        filename: str,
        java_version: VersionNumber,
        platform: Platform,
        package_type: PackageType,
        release_status: ReleaseStatus | None = None,
        distribution_version: VersionNumber | None = None,
        **fields: Any,
    ) -> PackageRecord:
        """Create a record of this adapter's distribution.

        The term of support is derived from the schedule, the FPU from the filename and a missing
        release status from the release status priority chain.
        """
        if release_status is None:
            release_status = resolve_release_status(
                text=filename, feature=java_version.feature, schedule=self.schedule
            )
        fields.setdefault("fpu", resolve_fpu(filename, platform.architecture))
        return PackageRecord(
            distribution=self.distro,
            filename=filename,
            java_version=java_version,
            distribution_version=distribution_version or java_version,
            architecture=platform.architecture,
            operating_system=platform.operating_system,
            archive_type=platform.archive_type,
            package_type=package_type,
            release_status=release_status,
            term_of_support=resolve_term_of_support(java_version.feature, self.schedule),
            **fields,
        )


def iter_objects(payload: Payload, key: str | None = None) -> Iterator[dict]:
    """Yield the JSON objects of a payload that is an array, or of the array under ``key`` of an object."""
    if isinstance(payload, dict):
        payload = payload.get(key) if key else [payload]
    if not isinstance(payload, list):
        return
    for element in payload:
        if isinstance(element, dict):
            yield element


def attach_checksum_uris(
    records: Iterable[PackageRecord],
    uris: Iterable[str],
    suffix: str,
    algorithm: HashAlgorithm,
) -> None:
    """Attach the checksum files among ``uris`` to the records they belong to.

    A checksum file belongs to a record when its filename contains the record's filename.
    """
    records = list(records)
    for uri in uris:
        sidecar_name = file_name_from_url(uri)
        if not sidecar_name.endswith(suffix):
            continue
        for record in records:
            if record.filename and record.filename in sidecar_name and not record.checksum_uri:
                record.checksum_uri = uri
                record.checksum_type = algorithm


def attach_signature_uris(
    records: Iterable[PackageRecord],
    uris: Iterable[str],
    suffix: str,
    signature_type: SignatureType = SignatureType.NONE,
) -> None:
    """Attach the signature files among ``uris`` to the records they belong to."""
    records = list(records)
    for uri in uris:
        sidecar_name = file_name_from_url(uri)
        if not sidecar_name.endswith(suffix):
            continue
        for record in records:
            if record.filename and record.filename in sidecar_name and not record.signature_uri:
                record.signature_uri = uri
                record.signature_type = signature_type
