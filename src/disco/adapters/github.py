# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the helpers shared by the adapters of vendors publishing on GitHub Releases."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from disco.adapters.base import Locator, Payload, SourceAdapter, attach_checksum_uris, iter_objects
from disco.classification.dimensions import HashAlgorithm
from disco.filters import FilterSpecification
from disco.json_tools import json_extract, json_require
from disco.record import PackageRecord
from disco.util import construct_query

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReleaseAsset:
    """One asset of a GitHub release."""

    #: The filename of the asset.
    name: str

    #: The download URL of the asset.
    url: str

    #: The tag of the release the asset belongs to.
    tag_name: str

    #: The title of the release.
    release_name: str

    #: The release body, markdown.
    body: str

    prerelease: bool
    size: int

    @classmethod
    def from_json(cls, release: dict, asset: dict) -> ReleaseAsset:
        """Create an asset from the release and asset JSON objects.

        Raises
        ------
        PayloadEntryError
            If the asset has no name or download URL.
        """
        return cls(
            name=json_require(asset, ["name"], str),
            url=json_require(asset, ["browser_download_url"], str),
            tag_name=json_extract(release, ["tag_name"], str) or "",
            release_name=json_extract(release, ["name"], str) or "",
            body=json_extract(release, ["body"], str) or "",
            prerelease=json_extract(release, ["prerelease"], bool) or False,
            size=json_extract(asset, ["size"], int) or -1,
        )


def iter_release_assets(payload: Payload) -> Iterator[tuple[dict, dict]]:
    """Yield the ``(release, asset)`` JSON object pairs of a releases payload.

    A single release object is accepted as well as an array of releases.
    """
    for release in iter_objects(payload):
        for asset in iter_objects(release, "assets"):
            yield release, asset


def asset_urls(payload: Payload) -> list[str]:
    """Return the download URLs of all assets of a releases payload."""
    urls = []
    for _, asset in iter_release_assets(payload):
        url = json_extract(asset, ["browser_download_url"], str)
        if url:
            urls.append(url)
    return urls


class GitHubReleaseAdapter(SourceAdapter):
    """Base class of the adapters parsing the assets of GitHub releases."""

    #: The suffix of the checksum assets published next to the artifacts, empty if there are none.
    checksum_suffix: str = ""
    checksum_type: HashAlgorithm = HashAlgorithm.SHA256

    def locator_for(self, filters: FilterSpecification) -> Locator | None:
        return Locator(f"{self.endpoint}?{construct_query({'per_page': 100})}")

    def entries(self, payload: Payload) -> Iterator[tuple[dict, dict]]:
        return iter_release_assets(payload)

    def parse_entry(self, entry: tuple[dict, dict], filters: FilterSpecification) -> list[PackageRecord]:
        release, asset = entry
        parsed = ReleaseAsset.from_json(release, asset)
        if self.is_noise(parsed.name):
            return []
        record = self.parse_asset(parsed, filters)
        return [record] if record is not None else []

    @abstractmethod
    def parse_asset(self, asset: ReleaseAsset, filters: FilterSpecification) -> PackageRecord | None:
        """Return the record of one asset, or None if it is skipped."""

    def attach_sidecars(self, payload: Any, records: list[PackageRecord]) -> None:
        if self.checksum_suffix:
            attach_checksum_uris(records, asset_urls(payload), self.checksum_suffix, self.checksum_type)
