# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the filter specification callers use to narrow the parsed records.

It also contains the snapshot of previously known records used by the "only new" mode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Bitness,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    TermOfSupport,
)
from disco.json_tools import JsonType, json_extract
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)


def _unconstrained(constraint: Enum) -> bool:
    return constraint.name == "NONE"


@dataclass(frozen=True)
class FilterSpecification:
    """The optional constraints of a parse call.

    A dimension set to its ``NONE`` member does not exclude anything. A concrete value excludes
    every record whose resolved dimension differs.
    """

    #: The target version, possibly partial such as ``17``.
    version: VersionNumber = field(default_factory=VersionNumber)

    #: If True only the feature component of ``version`` is compared.
    latest: bool = False

    operating_system: OperatingSystem = OperatingSystem.NONE
    architecture: Architecture = Architecture.NONE
    bitness: Bitness = Bitness.NONE
    archive_type: ArchiveType = ArchiveType.NONE
    package_type: PackageType = PackageType.NONE

    #: None means either.
    javafx_bundled: bool | None = None

    release_status: ReleaseStatus = ReleaseStatus.NONE
    term_of_support: TermOfSupport = TermOfSupport.NONE

    #: If True records found in the prior records snapshot are dropped.
    only_new: bool = False

    @property
    def feature(self) -> int | None:
        """Return the feature version of the target version, None when unconstrained."""
        return self.version.feature

    def version_accepts(self, version: VersionNumber) -> bool:
        """Return True if ``version`` satisfies the version constraint.

        With ``latest`` only the feature is compared. Otherwise the components present in both
        numbers must be equal, so ``17`` accepts ``17.0.2``.
        """
        if self.version.is_empty():
            return True
        if version.is_empty():
            return False
        if self.latest:
            return self.version.feature_equals(version)
        return self.version.matches(version)

    def allows(self, value: Enum) -> bool:
        """Return True if a single resolved dimension value passes its constraint.

        Adapters use this to skip an entry before every dimension has been resolved.
        """
        constraint = self._constraint_for(value)
        if constraint is None or _unconstrained(constraint):
            return True
        if isinstance(value, Architecture) and self.bitness is not Bitness.NONE:
            if value.bitness is not self.bitness:
                return False
        return constraint is value

    def _constraint_for(self, value: Enum) -> Enum | None:
        match value:
            case OperatingSystem():
                return self.operating_system
            case Architecture():
                return self.architecture
            case Bitness():
                return self.bitness
            case ArchiveType():
                return self.archive_type
            case PackageType():
                return self.package_type
            case ReleaseStatus():
                return self.release_status
            case TermOfSupport():
                return self.term_of_support
            case _:
                return None

    def accepts(self, record: PackageRecord) -> bool:
        """Return True if ``record`` satisfies every constraint.

        Parameters
        ----------
        record : PackageRecord
            The candidate record.

        Returns
        -------
        bool
            True if no constraint excludes the record.
        """
        checks = (
            ("version", self.version_accepts(record.java_version)),
            ("operating_system", self.allows(record.operating_system)),
            ("architecture", self.allows(record.architecture)),
            ("bitness", self.allows(record.bitness)),
            ("archive_type", self.allows(record.archive_type)),
            ("package_type", self.allows(record.package_type)),
            ("release_status", self.allows(record.release_status)),
            ("term_of_support", self.allows(record.term_of_support)),
            ("javafx_bundled", self.javafx_bundled is None or self.javafx_bundled == record.javafx_bundled),
        )
        for name, passed in checks:
            if not passed:
                logger.debug("Filtered out %s on %s.", record.filename, name)
                return False
        return True


@dataclass(frozen=True)
class PriorRecords:
    """A read-only snapshot of the records that are already known, keyed by filename and URI."""

    keys: frozenset[tuple[str, str]] = frozenset()

    @classmethod
    def from_records(cls, records: Iterable[PackageRecord]) -> PriorRecords:
        """Create a snapshot from records."""
        return cls(frozenset((record.filename, record.direct_download_uri) for record in records))

    @classmethod
    def from_json(cls, payload: JsonType) -> PriorRecords:
        """Create a snapshot from the JSON form of records, as printed by the ``parse`` command.

        Elements missing a filename are ignored.
        """
        keys = set()
        if isinstance(payload, list):
            for element in payload:
                filename = json_extract(element, ["filename"], str)
                if not filename:
                    logger.debug("Ignoring a prior record without a filename.")
                    continue
                keys.add((filename, json_extract(element, ["direct_download_uri"], str) or ""))
        return cls(frozenset(keys))

    def __contains__(self, record: object) -> bool:
        if not isinstance(record, PackageRecord):
            return False
        return (record.filename, record.direct_download_uri) in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def merged(self, records: Iterable[PackageRecord]) -> PriorRecords:
        """Return a new snapshot that also contains ``records``."""
        return PriorRecords(self.keys | PriorRecords.from_records(records).keys)
