# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the HTML helpers."""

from disco.html_tools import extract_file_urls, extract_hrefs, file_name_from_url

PAGE = """
<html>
  <body>
    <a href="openjdk-17/">openjdk-17/</a>
    <a href="openjdk-17-jdk_17.0.6+10-1_amd64.deb">deb</a>
    <a href="openjdk-17-jdk_17.0.6+10-1_amd64.deb">duplicate</a>
    <a href="https://example.com/jdk-17.0.6-x64.msi">msi</a>
    <a name="anchor">no target</a>
  </body>
</html>
"""


def test_extract_hrefs() -> None:
    """Test collecting unique anchor targets in document order."""
    assert extract_hrefs(PAGE) == [
        "openjdk-17/",
        "openjdk-17-jdk_17.0.6+10-1_amd64.deb",
        "https://example.com/jdk-17.0.6-x64.msi",
    ]
    assert not extract_hrefs("")


def test_extract_hrefs_with_suffixes_and_base() -> None:
    """Test filtering by suffix and resolving relative targets."""
    assert extract_hrefs(PAGE, suffixes=(".deb",), base_url="https://mirror.example.com/pool/openjdk-17/") == [
        "https://mirror.example.com/pool/openjdk-17/openjdk-17-jdk_17.0.6+10-1_amd64.deb",
    ]


def test_file_name_from_url() -> None:
    """Test taking the filename from a URL."""
    assert file_name_from_url("https://example.com/a/jdk-17.0.6%2B10.tar.gz?raw=true") == "jdk-17.0.6+10.tar.gz"
    assert file_name_from_url("https://example.com/a/openjdk-17/") == "openjdk-17"


def test_extract_file_urls() -> None:
    """Test finding download links in a release description."""
    text = (
        "Downloads:\n"
        "* [Linux](https://example.com/download/jdk-17.0.6-linux-x64.tar.gz)\n"
        "* https://example.com/download/jdk-17.0.6-windows-x64.zip, and "
        "https://example.com/download/jdk-17.0.6-windows-x64.zip again\n"
        "* Release notes: https://example.com/notes.html\n"
    )
    assert extract_file_urls(text) == [
        "https://example.com/download/jdk-17.0.6-linux-x64.tar.gz",
        "https://example.com/download/jdk-17.0.6-windows-x64.zip",
    ]
    assert extract_file_urls(text, suffixes=(".zip",)) == ["https://example.com/download/jdk-17.0.6-windows-x64.zip"]
