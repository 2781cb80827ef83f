# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the vendor remap rules applied to a freshly parsed version number.

Several vendors encode their own build or revision numbers in components that the runtime uses
for something else. A remap rule is a pure function from one :class:`VersionNumber` to another,
so each vendor encoding can be tested independently of the parser. Rules are applied in order by
:func:`apply_remap`.
"""

from collections.abc import Callable, Iterable

from disco.version.version_number import VersionNumber

RemapRule = Callable[[VersionNumber], VersionNumber]


def apply_remap(version: VersionNumber, rules: Iterable[RemapRule]) -> VersionNumber:
    """Apply the remap rules in order. An empty version is returned unchanged."""
    if version.is_empty():
        return version
    for rule in rules:
        version = rule(version)
    return version


def zero_patch(version: VersionNumber) -> VersionNumber:
    """Set the patch component to zero, for vendors whose fourth number is a vendor revision."""
    return version.with_patch(0)


def zero_fifth_and_sixth(version: VersionNumber) -> VersionNumber:
    """Set the fifth and sixth components to zero when they are present."""
    if version.fifth is None and version.sixth is None:
        return version
    return version.with_fifth(0 if version.fifth is not None else None).with_sixth(
        0 if version.sixth is not None else None
    )


def interim_to_build(version: VersionNumber) -> VersionNumber:
    """Move a non zero interim component into the build number.

    ``11.0.13.8.1`` style numbers are left alone, ``16.0.2`` style numbers are too. Only a
    ``<feature>.<build>`` shape such as ``16.36`` becomes ``16.0.0.0+36``.
    """
    if not version.interim or version.update:
        return version
    return VersionNumber.from_components(version.feature or 0, 0, 0, 0, build=version.interim)


def microsoft_remap(version: VersionNumber) -> VersionNumber:
    """Remap the Microsoft numbering.

    ``microsoft-jdk-16.36`` carries a build number in the interim slot. Five and six component
    numbers such as ``11.0.10.9.1`` carry vendor revisions after the patch, which are dropped.
    """
    if version.interim and not version.update:
        return interim_to_build(version)
    if version.patch and version.fifth:
        return version.with_patch(0).with_fifth(0).with_sixth(0 if version.sixth is not None else None)
    return version


def corretto_remap(version: VersionNumber) -> VersionNumber:
    """Remap a Corretto distribution version to the runtime version it implements.

    For feature 8 the numbers read ``8.<update>.<build>.<revision>``, e.g. ``8.362.08.1`` is
    ``8.0.362+8``. Later features read ``<feature>.<interim>.<update>.<build>.<revision>``,
    e.g. ``17.0.6.10.1`` is ``17.0.6+10``.
    """
    if version.feature == 8:
        return VersionNumber.from_components(8, 0, version.interim or 0, 0, build=version.update)
    return VersionNumber.from_components(version.feature or 0, 0, version.update or 0, 0, build=version.patch)


def drop_components_after(count: int) -> RemapRule:
    """Return a rule that keeps only the first ``count`` numeric components."""

    def rule(version: VersionNumber) -> VersionNumber:
        return VersionNumber.from_components(
            *version.components[:count], build=version.build, pre_release=version.pre_release
        )

    return rule


def update_to_build(version: VersionNumber) -> VersionNumber:
    """Move the update component into the build number, for ``<feature>.0.<build>`` vendor numbers."""
    if version.update is None or version.build is not None:
        return version
    return VersionNumber.from_components(
        *version.components[:2], build=version.update, pre_release=version.pre_release
    )


def fifth_to_build(version: VersionNumber) -> VersionNumber:
    """Move the fifth component into the build number, dropping the sixth.

    >>> str(fifth_to_build(VersionNumber.from_components(17, 0, 6, 0, 10)))
    '17.0.6.0+10'
    """
    if version.fifth is None or version.build is not None:
        return version
    return version.with_build(version.fifth).with_fifth(None).with_sixth(None)
