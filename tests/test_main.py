# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Simple tests for the main method."""

import json
import os
from importlib import metadata as importlib_metadata
from pathlib import Path

import pytest

from disco.__main__ import RECORDS_FILE_NAME, main


@pytest.mark.parametrize(
    ("flag"),
    [
        "--version",
        "-V",
    ],
)
def test_version(capsys: pytest.CaptureFixture, flag: str) -> None:
    """Test the ``--version/-V`` flag.

    Stdout format should be correct and exit code should be 0.
    """
    with pytest.raises(SystemExit) as exc_info:
        main([flag])
    out, err = capsys.readouterr()

    # Test that we are indeed outputting disco version.
    assert out == f"disco {importlib_metadata.version('disco')}\n"
    assert err == ""
    assert exc_info.value.code == 0


def _run(argv: list[str]) -> int | str | None:
    """Run the main method and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_no_action(tmp_path: Path) -> None:
    """Test that a command is required."""
    assert _run(["-o", str(tmp_path)]) == os.EX_USAGE


def test_list(capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
    """Test listing the supported distributions."""
    assert _run(["-o", str(tmp_path), "list"]) == os.EX_OK
    out, _ = capsys.readouterr()
    assert "zulu" in out
    assert "Temurin" in out
    assert (tmp_path / "debug.log").is_file()


def test_locate(capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
    """Test printing the locator of a request."""
    argv = ["-o", str(tmp_path), "locate", "-d", "sapmachine", "-jv", "17"]
    assert _run(argv) == os.EX_OK
    out, _ = capsys.readouterr()
    assert "json https://api.github.com/repos/SAP/SapMachine/releases?per_page=100" in out


@pytest.mark.parametrize(
    ("arguments", "expected"),
    [
        (["-d", "unknown-vendor"], os.EX_USAGE),
        (["-d", "zulu", "--os", "plan9"], os.EX_USAGE),
        (["-d", "zulu", "-jv", "latest"], os.EX_USAGE),
        (["-d", "trava", "-jv", "17"], os.EX_DATAERR),
    ],
)
def test_locate_errors(tmp_path: Path, arguments: list[str], expected: int) -> None:
    """Test the exit codes of requests that cannot be located."""
    assert _run(["-o", str(tmp_path), "locate", *arguments]) == expected


def test_parse(tmp_path: Path, resources_path: Path) -> None:
    """Test parsing a payload file into the records file."""
    payload = str(resources_path.joinpath("zulu.json"))
    assert _run(["-o", str(tmp_path), "parse", "-d", "zulu", "-p", payload]) == os.EX_OK

    with open(tmp_path / RECORDS_FILE_NAME, encoding="utf-8") as records_file:
        records = json.load(records_file)
    assert len(records) == 5
    assert records[0]["filename"] == "zulu17.40.19-ca-jdk17.0.6-win_x64.zip"
    assert records[0]["distribution"] == "zulu"


def test_parse_only_new(tmp_path: Path, resources_path: Path) -> None:
    """Test that parsing the same payload again finds no new records."""
    payload = str(resources_path.joinpath("zulu.json"))
    assert _run(["-o", str(tmp_path), "parse", "-d", "zulu", "-p", payload]) == os.EX_OK

    prior = tmp_path / "prior.json"
    os.replace(tmp_path / RECORDS_FILE_NAME, prior)
    argv = ["-o", str(tmp_path), "parse", "-d", "zulu", "-p", payload, "--prior", str(prior), "--only-new"]
    assert _run(argv) == os.EX_OK

    with open(tmp_path / RECORDS_FILE_NAME, encoding="utf-8") as records_file:
        assert json.load(records_file) == []


def test_parse_html_payload(tmp_path: Path, resources_path: Path) -> None:
    """Test that a payload file that is not JSON is read as HTML."""
    payload = str(resources_path.joinpath("bisheng.html"))
    assert _run(["-o", str(tmp_path), "parse", "-d", "bisheng", "-p", payload, "-jv", "17"]) == os.EX_OK

    with open(tmp_path / RECORDS_FILE_NAME, encoding="utf-8") as records_file:
        records = json.load(records_file)
    assert [record["filename"] for record in records] == ["bisheng-jdk-17.0.6-linux-aarch64.tar.gz"]


def test_parse_errors(tmp_path: Path, resources_path: Path) -> None:
    """Test the exit codes of unreadable payload files."""
    missing = str(tmp_path / "missing.json")
    assert _run(["-o", str(tmp_path), "parse", "-d", "zulu", "-p", missing]) == os.EX_NOINPUT

    html_as_json = str(resources_path.joinpath("bisheng.html"))
    argv = ["-o", str(tmp_path), "parse", "-d", "zulu", "-p", html_as_json, "-pk", "json"]
    assert _run(argv) == os.EX_DATAERR


def test_dump_defaults(tmp_path: Path) -> None:
    """Test dumping the defaults configuration."""
    assert _run(["-o", str(tmp_path), "dump-defaults"]) == os.EX_OK
    assert (tmp_path / "defaults.ini").is_file()


def test_output_dir_is_file(tmp_path: Path) -> None:
    """Test that the output directory cannot be a file."""
    output = tmp_path / "output"
    output.write_text("", encoding="utf-8")
    assert _run(["-o", str(output), "list"]) == os.EX_USAGE
