# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module is the entry point callers use to turn fetched payloads into package records.

On top of :meth:`SourceAdapter.parse` it drops the records that are already known when the
"only new" mode is requested.
"""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor

from disco.adapters.base import Locator, Payload, PayloadKind, SourceAdapter
from disco.classification.dimensions import Distro
from disco.config.defaults import defaults
from disco.errors import ConfigurationError, InvalidHTTPResponseError
from disco.filters import FilterSpecification, PriorRecords
from disco.json_tools import load_json_text
from disco.record import PackageRecord
from disco.util import download_text

logger: logging.Logger = logging.getLogger(__name__)


def discover(
    adapter: SourceAdapter,
    payload: Payload,
    filters: FilterSpecification | None = None,
    prior: PriorRecords | None = None,
) -> list[PackageRecord]:
    """Parse a payload and drop the already known records.

    Parameters
    ----------
    adapter : SourceAdapter
        The adapter of the distribution the payload was fetched for.
    payload : Payload
        The decoded JSON value or HTML text.
    filters : FilterSpecification | None
        The constraints, unconstrained if None.
    prior : PriorRecords | None
        The records that are already known. Only used when ``filters.only_new`` is set.

    Returns
    -------
    list[PackageRecord]
        The records in payload order.
    """
    if filters is None:
        filters = FilterSpecification()
    records = adapter.parse(payload, filters)

    if filters.only_new and prior:
        known = len(records)
        records = [record for record in records if record not in prior]
        logger.debug("Dropped %s already known %s records.", known - len(records), adapter.name)

    return records


def get_max_workers() -> int:
    """Return the number of adapters parsed in parallel.

    Raises
    ------
    ConfigurationError
        If the ``[discovery]`` section has an invalid value.
    """
    try:
        max_workers = defaults.getint("discovery", "max_workers", fallback=4)
    except ValueError as error:
        raise ConfigurationError(f"The max_workers value in section [discovery] is invalid: {error}") from error
    if max_workers < 1:
        raise ConfigurationError(f"The max_workers value in section [discovery] must be positive: {max_workers}")
    return max_workers


def discover_all(
    payloads: Mapping[SourceAdapter, Payload],
    filters: FilterSpecification | None = None,
    prior: PriorRecords | None = None,
) -> dict[Distro, list[PackageRecord]]:
    """Parse the payloads of several adapters concurrently.

    The adapters are pure, so they are run on a thread pool. The result keeps the order of
    ``payloads`` and the payload order of each adapter.

    Raises
    ------
    ConfigurationError
        If the ``[discovery]`` section has an invalid value.
    """
    with ThreadPoolExecutor(max_workers=get_max_workers()) as executor:
        futures = {
            adapter.distro: executor.submit(discover, adapter, payload, filters, prior)
            for adapter, payload in payloads.items()
        }
        return {distro: future.result() for distro, future in futures.items()}


def fetch_payload(locator: Locator) -> Payload:
    """Download the payload of a locator.

    Returns
    -------
    Payload
        The decoded JSON value or the HTML text.

    Raises
    ------
    InvalidHTTPResponseError
        If the download failed.
    InvalidPayloadError
        If a JSON locator answered with a body that is not JSON.
    """
    text = download_text(locator.url)
    if text is None:
        raise InvalidHTTPResponseError(f"Failed to download the payload from {locator.url}.")
    if locator.payload_kind is PayloadKind.JSON:
        return load_json_text(text)
    return text
