# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides useful hypothesis search strategies."""

from string import printable

from hypothesis import strategies as st

from disco.classification.dimensions import Architecture, ArchiveType, OperatingSystem
from disco.version.version_number import VersionNumber

PRIMITIVES = st.none() | st.booleans() | st.floats() | st.text(printable) | st.integers()

# https://hypothesis.readthedocs.io/en/latest/data.html#recursive-data
# Suitable for representing JSON data.
RECURSIVE_ST = st.recursive(
    PRIMITIVES,
    lambda children: st.lists(children, max_size=3) | st.dictionaries(st.text(printable), children, max_size=3),
    max_leaves=1,
)

# Represent a JSON object, the shape of one entry of a vendor payload.
JSON_OBJECT_ST = st.dictionaries(st.text(printable), RECURSIVE_ST, max_size=4)

# Version components as vendors publish them. The feature starts at 2 so that a dense number
# never begins with the legacy "1." prefix.
FEATURE_ST = st.integers(min_value=2, max_value=99)
COMPONENT_ST = st.integers(min_value=0, max_value=999)

# Dense version numbers: every present component follows present lower components.
DENSE_VERSION_ST = st.builds(
    lambda feature, rest, build: VersionNumber.from_components(feature, *rest, build=build),
    FEATURE_ST,
    st.lists(COMPONENT_ST, max_size=5),
    st.none() | st.integers(min_value=0, max_value=999),
)

ARCHIVE_TYPE_ST = st.sampled_from([ArchiveType.TAR_GZ, ArchiveType.ZIP, ArchiveType.MSI, ArchiveType.DMG])
OPERATING_SYSTEM_ST = st.sampled_from([OperatingSystem.LINUX, OperatingSystem.WINDOWS, OperatingSystem.MACOS])
ARCHITECTURE_ST = st.sampled_from([Architecture.X64, Architecture.AARCH64, Architecture.X86, Architecture.PPC64LE])
