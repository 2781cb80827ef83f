# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the adapter of the JetBrains Runtime.

The artifacts are hosted on a CDN. The GitHub releases list them in a markdown table of the release
body, one row per bundle kind, e.g.
``| JBRSDK | [jbrsdk-17.0.6-linux-x64-b829.5.tar.gz](https://cache-redirector.jetbrains.com/...) |``.
"""

import logging
import re
from collections.abc import Iterator

from disco.adapters.base import Locator, Payload, SourceAdapter, iter_objects
from disco.classification.dimensions import Distro, PackageType
from disco.classification.resolver import strip_archive_suffix
from disco.errors import PayloadEntryError
from disco.filters import FilterSpecification
from disco.json_tools import json_extract
from disco.record import PackageRecord
from disco.util import construct_query
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)

JBRSDK_PATTERN = re.compile(r"JBRSDK\s+\|\s+\[([0-9a-zA-Z_.-]+)\]\(([0-9a-z:/._-]+)\)")
BUILD_PATTERN = re.compile(r"^b(\d+)")

FILENAME_PREFIX = "jbrsdk-"


def version_of(filename: str) -> VersionNumber:
    """Return the runtime version of a ``jbrsdk`` filename.

    >>> str(version_of("jbrsdk-17.0.6-linux-x64-b829.5.tar.gz"))
    '17.0.6+829'
    >>> str(version_of("jbrsdk-11_0_16-osx-aarch64-b2043.64.tar.gz"))
    '11.0.16+2043'

    Raises
    ------
    PayloadEntryError
        If the filename does not have the expected shape.
    """
    parts = strip_archive_suffix(filename.replace(FILENAME_PREFIX, "", 1)).split("-")
    if len(parts) < 3:
        raise PayloadEntryError(f"Unexpected filename {filename}.")
    version = VersionNumber.parse(parts[0].replace("_", "."))
    if len(parts) == 4 and (match := BUILD_PATTERN.match(parts[3])):
        version = version.with_build(int(match.group(1)))
    return version


class JetBrainsAdapter(SourceAdapter):
    """This class implements the adapter of the JetBrains Runtime GitHub releases."""

    distro = Distro.JETBRAINS

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        return Locator(f"{self.endpoint}?{construct_query({'per_page': 100})}")

    def entries(self, payload: Payload) -> Iterator[tuple[str, str]]:
        for release in iter_objects(payload):
            yield from JBRSDK_PATTERN.findall(json_extract(release, ["body"], str) or "")

    def parse_entry(self, entry: tuple[str, str], filters: FilterSpecification) -> list[PackageRecord]:
        filename, url = entry
        if not filename.startswith(FILENAME_PREFIX) or self.is_noise(filename):
            return []

        java_version = version_of(filename)
        if java_version.is_empty():
            logger.debug("Skipping %s: version not found.", filename)
            return []
        if not self.check_latest(java_version, filters):
            return []

        platform = self.resolve_platform(filename, filters=filters)
        if platform is None:
            return []

        return [
            self.create_record(
                filename,
                java_version,
                platform,
                package_type=PackageType.JDK,
                direct_download_uri=url,
            )
        ]
