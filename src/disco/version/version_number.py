# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the VersionNumber class used to represent and compare runtime versions.

Vendors use several incompatible schemes: ``17.0.2+8``, ``8u262b10``, ``1.8.0_262``, ``21-ea+33``,
``17.40.19`` and versions with five or six numeric components. A :class:`VersionNumber` keeps up to
six numeric components, an independent build number and an optional pre-release tag.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import re
from dataclasses import dataclass
from enum import Enum

logger: logging.Logger = logging.getLogger(__name__)

#: The names of the numeric components in order of significance.
COMPONENT_NAMES = ("feature", "interim", "update", "patch", "fifth", "sixth")

#: The pre-release tag that marks an early access build.
EARLY_ACCESS_TAG = "ea"

VERSION_PATTERN = re.compile(
    r"(?<!\d)(?P<feature>[1-9]\d{0,8})(?!\d)"
    r"(?:u(?P<legacy_update>\d{1,9})(?!\d)|(?P<dotted>(?:\.\d{1,9}(?!\d)){1,5}))?"
    r"(?:(?P<build_sep>[_+]|-?b)(?P<build>\d{1,9})(?!\d))?"
    r"(?:-(?P<pre>(?i:eabeta|ea|beta|alpha|rc|preview|snapshot|internal|dev))(?![a-zA-Z])"
    r"(?:[.+](?P<pre_build>\d{1,9})(?!\d))?)?"
)

# Versions before 9 were published as 1.<feature>, e.g. 1.8.0_262.
LEGACY_PREFIX_PATTERN = re.compile(r"^1\.(?=\d)")


class OutputFormat(str, Enum):
    """The string formats of a version number."""

    #: All present components.
    FULL = "full"

    #: Trailing zero components are removed, the feature is always kept.
    REDUCED = "reduced"

    #: All six numeric components, absent ones printed as zero.
    NORMALIZED = "normalized"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class VersionNumber:
    """An immutable, partially optional version number.

    Absent components are treated as zero when comparing. Two numbers that only differ in
    absent-versus-zero components are equal.
    """

    feature: int | None = None
    interim: int | None = None
    update: int | None = None
    patch: int | None = None
    fifth: int | None = None
    sixth: int | None = None

    #: The vendor build number, e.g. 8 in ``17.0.2+8``.
    build: int | None = None

    #: The pre-release tag, e.g. ``ea`` in ``21-ea+33``.
    pre_release: str | None = None

    def __post_init__(self) -> None:
        for name in (*COMPONENT_NAMES, "build"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"The {name} component of a version number cannot be negative: {value}.")

    @classmethod
    def from_components(
        cls, *components: int, build: int | None = None, pre_release: str | None = None
    ) -> VersionNumber:
        """Create a version number from its leading numeric components.

        >>> str(VersionNumber.from_components(17, 0, 2, build=8))
        '17.0.2+8'
        """
        if len(components) > len(COMPONENT_NAMES):
            raise ValueError(f"A version number has at most {len(COMPONENT_NAMES)} components.")
        return cls(**dict(zip(COMPONENT_NAMES, components)), build=build, pre_release=pre_release)

    @classmethod
    def parse(cls, text: str | None, occurrence: int = 0) -> VersionNumber:
        """Parse a version number from free text, see :func:`parse_raw`."""
        return parse_raw(text, occurrence)

    @property
    def components(self) -> tuple[int, ...]:
        """Return the leading run of present numeric components."""
        result = []
        for name in COMPONENT_NAMES:
            value = getattr(self, name)
            if value is None:
                break
            result.append(value)
        return tuple(result)

    @property
    def normalized(self) -> tuple[int, int, int, int, int, int]:
        """Return all six numeric components with absent ones as zero."""
        feature, interim, update, patch, fifth, sixth = (getattr(self, name) or 0 for name in COMPONENT_NAMES)
        return feature, interim, update, patch, fifth, sixth

    @property
    def is_early_access(self) -> bool:
        """Return True if the pre-release tag marks an early access build."""
        return self.pre_release is not None and self.pre_release.lower().startswith(EARLY_ACCESS_TAG)

    def is_empty(self) -> bool:
        """Return True if no version could be parsed, such a number is unusable."""
        return self.feature is None

    def feature_equals(self, other: VersionNumber) -> bool:
        """Return True if both numbers have the same feature component."""
        return self.feature is not None and self.feature == other.feature

    def matches(self, other: VersionNumber) -> bool:
        """Return True if the components present in both numbers are equal.

        A partial number such as ``17`` matches every ``17.x.y`` and ``17.0`` matches ``17.0.2``.
        An empty number matches everything.

        >>> VersionNumber.from_components(17).matches(VersionNumber.from_components(17, 0, 2))
        True
        """
        if self.is_empty() or other.is_empty():
            return True
        mine = self.components
        theirs = other.components
        shared = min(len(mine), len(theirs))
        return mine[:shared] == theirs[:shared]

    def with_interim(self, interim: int | None) -> VersionNumber:
        """Return a copy with a different interim component."""
        return dataclasses.replace(self, interim=interim)

    def with_update(self, update: int | None) -> VersionNumber:
        """Return a copy with a different update component."""
        return dataclasses.replace(self, update=update)

    def with_patch(self, patch: int | None) -> VersionNumber:
        """Return a copy with a different patch component."""
        return dataclasses.replace(self, patch=patch)

    def with_fifth(self, fifth: int | None) -> VersionNumber:
        """Return a copy with a different fifth component."""
        return dataclasses.replace(self, fifth=fifth)

    def with_sixth(self, sixth: int | None) -> VersionNumber:
        """Return a copy with a different sixth component."""
        return dataclasses.replace(self, sixth=sixth)

    def with_build(self, build: int | None) -> VersionNumber:
        """Return a copy with a different build number."""
        return dataclasses.replace(self, build=build)

    def with_pre_release(self, pre_release: str | None) -> VersionNumber:
        """Return a copy with a different pre-release tag."""
        return dataclasses.replace(self, pre_release=pre_release)

    def to_string(self, output_format: OutputFormat = OutputFormat.FULL, include_pre_release: bool = True) -> str:
        """Return the string representation in the given format.

        Parameters
        ----------
        output_format : OutputFormat
            The format of the numeric part.
        include_pre_release : bool
            If True the pre-release tag and the build number are appended.

        Returns
        -------
        str
            The version string, empty for an empty number.
        """
        if self.is_empty():
            return ""

        match output_format:
            case OutputFormat.NORMALIZED:
                numbers = list(self.normalized)
            case OutputFormat.REDUCED:
                numbers = list(self.components)
                while len(numbers) > 1 and numbers[-1] == 0:
                    numbers.pop()
            case _:
                numbers = list(self.components)

        result = ".".join(str(number) for number in numbers)
        if include_pre_release:
            if self.pre_release:
                result += f"-{self.pre_release}"
            if self.build is not None:
                result += f"+{self.build}"
        return result

    def _sort_key(self) -> tuple:
        return self.normalized, not self.is_early_access, self.build or 0

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())


def parse_raw(text: str | None, occurrence: int = 0) -> VersionNumber:
    """Parse the first version-shaped substring found in ``text``.

    The text may be a whole filename or URL. A leading ``1.`` is dropped (``1.8.0_262`` is
    ``8.0.262``), ``8u262`` is ``8.0.262`` and an underscore number following a two component
    version is the update. Other ``_N``, ``+N`` and ``bN`` suffixes are the build number. A
    ``-ea`` tag marks an early access build whose build number may follow as ``.N`` or ``+N``.

    Feature 1 versions cannot be parsed: ``1.2.3`` reads as ``2.3`` because of the legacy prefix.
    Digit runs longer than nine digits are not version components, so ``jdk-`` followed by such a
    run gives an empty number.

    Parameters
    ----------
    text : str | None
        The text to parse.
    occurrence : int
        Which match to use when the text contains several version-shaped substrings. Falls back
        to the first match when there are fewer matches.

    Returns
    -------
    VersionNumber
        The parsed number, or an empty number if no version could be found.
    """
    if not text:
        logger.warning("No version number can be parsed because the given text is empty.")
        return VersionNumber()

    text = LEGACY_PREFIX_PATTERN.sub("", text, count=1)
    matches = list(VERSION_PATTERN.finditer(text))
    if not matches:
        logger.error("No suitable version number found in string: %s", text)
        return VersionNumber()

    match = matches[occurrence] if occurrence < len(matches) else matches[0]

    components = [int(match.group("feature"))]
    if match.group("legacy_update") is not None:
        components.extend([0, int(match.group("legacy_update"))])
    elif match.group("dotted"):
        components.extend(int(part) for part in match.group("dotted")[1:].split("."))

    build = None
    if match.group("build") is not None:
        if match.group("build_sep") == "_" and len(components) == 2:
            components.append(int(match.group("build")))
        else:
            build = int(match.group("build"))

    pre_release = match.group("pre")
    if match.group("pre_build") is not None and build is None:
        build = int(match.group("pre_build"))

    return VersionNumber.from_components(*components, build=build, pre_release=pre_release)
