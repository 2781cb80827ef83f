# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the package record."""

import hashlib
import json

from disco.classification.dimensions import Architecture, LibCType, OperatingSystem
from tests.conftest import build_record


def test_lib_c_type_derived_from_operating_system() -> None:
    """Test that an unset C library is derived from the operating system."""
    assert build_record().lib_c_type is LibCType.GLIBC
    assert build_record(operating_system=OperatingSystem.WINDOWS).lib_c_type is LibCType.C_STD_LIB
    assert build_record(lib_c_type=LibCType.MUSL).lib_c_type is LibCType.MUSL


def test_id_is_stable() -> None:
    """Test that the identifier depends on the download location only."""
    record = build_record()
    expected = hashlib.md5(record.direct_download_uri.encode("utf-8"), usedforsecurity=False).hexdigest()
    assert record.id == expected
    assert build_record(size=10).id == record.id
    assert build_record(direct_download_uri="https://example.com/other.tar.gz").id != record.id


def test_id_not_directly_downloadable() -> None:
    """Test the identifier of an artifact that is only offered on a download page."""
    record = build_record(
        directly_downloadable=False,
        direct_download_uri="",
        download_site_uri="https://example.com/download/",
    )
    key = "https://example.com/download/openjdk-17.0.2_linux-x64_bin.tar.gz"
    assert record.id == hashlib.md5(key.encode("utf-8"), usedforsecurity=False).hexdigest()


def test_derived_properties() -> None:
    """Test the feature version and the bitness."""
    record = build_record(architecture=Architecture.X86)
    assert record.major_version == 17
    assert record.version_number == record.java_version
    assert record.bitness.as_int() == 32


def test_to_json() -> None:
    """Test that the JSON form is serializable and uses the canonical values."""
    result = build_record(feature=["crac"]).to_json()
    assert json.loads(json.dumps(result)) == result
    assert result["distribution"] == "oracle_open_jdk"
    assert result["java_version"] == "17.0.2"
    assert result["architecture"] == "x64"
    assert result["bitness"] == 64
    assert result["lib_c_type"] == "glibc"
    assert result["release_status"] == "ga"
    assert result["term_of_support"] == "lts"
    assert result["checksum_type"] == "none"
    assert result["size"] == -1
    assert result["feature"] == ["crac"]
