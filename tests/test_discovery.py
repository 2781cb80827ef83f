# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the discovery entry points shared by all adapters."""

import json
from pathlib import Path

import pytest
from pytest_httpserver import HTTPServer

from disco.adapters.base import Locator, PayloadKind, correct_too_early_ga
from disco.adapters.sap_machine import SapMachineAdapter
from disco.adapters.zulu import ZuluAdapter
from disco.classification.dimensions import Distro, ReleaseStatus
from disco.config.defaults import defaults
from disco.discovery import discover, discover_all, fetch_payload, get_max_workers
from disco.errors import ConfigurationError, InvalidHTTPResponseError, InvalidPayloadError
from disco.filters import FilterSpecification, PriorRecords
from disco.schedule import ScheduleFacts
from disco.version.version_number import VersionNumber
from tests.conftest import build_record


@pytest.fixture(name="zulu_adapter")
def zulu_adapter_(schedule: ScheduleFacts) -> ZuluAdapter:
    """Return a configured Zulu adapter."""
    adapter = ZuluAdapter(schedule=schedule)
    adapter.load_defaults()
    return adapter


@pytest.fixture(name="zulu_payload")
def zulu_payload_(resources_path: Path) -> list:
    """Return the Zulu bundles payload."""
    with open(resources_path.joinpath("zulu.json"), encoding="utf-8") as file:
        return json.load(file)  # type: ignore[no-any-return]


def test_correct_too_early_ga(schedule: ScheduleFacts) -> None:
    """Test that GA records of unreleased feature versions become EA."""
    released = build_record(java_version=VersionNumber.from_components(21, 0, 1))
    unreleased = build_record(
        "openjdk-22_linux-x64_bin.tar.gz",
        java_version=VersionNumber(feature=22),
        distribution_version=VersionNumber(feature=22),
    )

    corrected = correct_too_early_ga([released, unreleased], schedule)
    assert [record.release_status for record in corrected] == [ReleaseStatus.GA, ReleaseStatus.EA]
    assert corrected[0] is released
    assert unreleased.release_status is ReleaseStatus.GA


def test_discover_release_status_after_correction(zulu_adapter: ZuluAdapter) -> None:
    """Test that a GA filter does not return a build of an unreleased feature published as GA."""
    filename = "zulu22.28.91-ca-jdk22.0.0-linux_x64.tar.gz"
    payload = [
        {
            "name": filename,
            "url": f"https://cdn.azul.com/zulu/bin/{filename}",
            "jdk_version": [22, 0, 0, 36],
            "zulu_version": [22, 28, 91, 0],
        }
    ]

    assert discover(zulu_adapter, payload, FilterSpecification(release_status=ReleaseStatus.GA)) == []
    records = discover(zulu_adapter, payload, FilterSpecification(release_status=ReleaseStatus.EA))
    assert [record.release_status for record in records] == [ReleaseStatus.EA]
    assert [record.release_status for record in zulu_adapter.parse(payload)] == [ReleaseStatus.EA]


def test_discover(zulu_adapter: ZuluAdapter, zulu_payload: list) -> None:
    """Test that discovery returns the records of the adapter in payload order."""
    records = discover(zulu_adapter, zulu_payload)
    assert records == zulu_adapter.parse(zulu_payload)
    assert discover(zulu_adapter, []) == []


def test_discover_only_new(zulu_adapter: ZuluAdapter, zulu_payload: list) -> None:
    """Test that the records of the prior snapshot are dropped and that rerunning finds nothing new."""
    records = discover(zulu_adapter, zulu_payload)
    prior = PriorRecords.from_records(records[:2])
    filters = FilterSpecification(only_new=True)

    new_records = discover(zulu_adapter, zulu_payload, filters, prior)
    assert new_records == records[2:]
    assert discover(zulu_adapter, zulu_payload, filters, prior.merged(new_records)) == []

    # Without the only new flag the snapshot is ignored.
    assert discover(zulu_adapter, zulu_payload, FilterSpecification(), prior) == records


def test_discover_all(
    zulu_adapter: ZuluAdapter, zulu_payload: list, schedule: ScheduleFacts, resources_path: Path
) -> None:
    """Test parsing the payloads of several adapters."""
    sap_machine_adapter = SapMachineAdapter(schedule=schedule)
    sap_machine_adapter.load_defaults()
    with open(resources_path.joinpath("sap_machine.json"), encoding="utf-8") as file:
        sap_machine_payload = json.load(file)

    results = discover_all({zulu_adapter: zulu_payload, sap_machine_adapter: sap_machine_payload})
    assert list(results) == [Distro.ZULU, Distro.SAP_MACHINE]
    assert results[Distro.ZULU] == discover(zulu_adapter, zulu_payload)
    assert results[Distro.SAP_MACHINE] == discover(sap_machine_adapter, sap_machine_payload)


def test_get_max_workers() -> None:
    """Test reading the size of the discovery thread pool."""
    assert get_max_workers() == 4


@pytest.mark.parametrize("value", ["0", "many"])
def test_get_max_workers_invalid(value: str) -> None:
    """Test that an invalid thread pool size is reported."""
    defaults.set("discovery", "max_workers", value)
    with pytest.raises(ConfigurationError):
        get_max_workers()


def test_fetch_json_payload(httpserver: HTTPServer) -> None:
    """Test downloading and decoding a JSON payload."""
    httpserver.expect_request("/bundles/").respond_with_json([{"name": "zulu17.40.19-ca-jdk17.0.6-win_x64.zip"}])
    payload = fetch_payload(Locator(httpserver.url_for("/bundles/")))
    assert payload == [{"name": "zulu17.40.19-ca-jdk17.0.6-win_x64.zip"}]


def test_fetch_html_payload(httpserver: HTTPServer) -> None:
    """Test that an HTML payload is returned as text."""
    httpserver.expect_request("/17/").respond_with_data("<html></html>", content_type="text/html")
    assert fetch_payload(Locator(httpserver.url_for("/17/"), PayloadKind.HTML)) == "<html></html>"


def test_fetch_invalid_payload(httpserver: HTTPServer) -> None:
    """Test that a JSON locator answering with something else is reported."""
    httpserver.expect_request("/bundles/").respond_with_data("<html></html>", content_type="text/html")
    with pytest.raises(InvalidPayloadError):
        fetch_payload(Locator(httpserver.url_for("/bundles/")))


def test_fetch_failed_payload(httpserver: HTTPServer) -> None:
    """Test that a failed download is reported."""
    httpserver.expect_request("/bundles/").respond_with_data("gone", status=404)
    with pytest.raises(InvalidHTTPResponseError):
        fetch_payload(Locator(httpserver.url_for("/bundles/")))
