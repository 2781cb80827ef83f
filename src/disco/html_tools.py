# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides helpers to read vendor HTML download pages and directory listings."""

import logging
import re
import urllib.parse
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

logger: logging.Logger = logging.getLogger(__name__)


def extract_hrefs(html: str, suffixes: Iterable[str] = (), base_url: str = "") -> list[str]:
    """Return the ``href`` targets of the anchors in an HTML page.

    Parameters
    ----------
    html : str
        The HTML text.
    suffixes : Iterable[str]
        If given, only targets ending with one of these suffixes are returned.
    base_url : str
        If given, relative targets are resolved against it.

    Returns
    -------
    list[str]
        The unique targets in document order.
    """
    if not html:
        return []
    suffixes = tuple(suffixes)
    soup = BeautifulSoup(html, "html.parser")
    result: dict[str, None] = {}
    for anchor in soup.find_all("a", href=True):
        if not isinstance(anchor, Tag):
            continue
        href = str(anchor.get("href", "")).strip()
        if not href or (suffixes and not href.endswith(suffixes)):
            continue
        if base_url:
            href = urllib.parse.urljoin(base_url, href)
        result[href] = None
    logger.debug("Found %s matching links in the page.", len(result))
    return list(result)


def file_name_from_url(url: str) -> str:
    """Return the last path segment of a URL, without query or fragment.

    >>> file_name_from_url("https://download.java.net/java/GA/jdk17.0.2/openjdk-17.0.2_linux-x64_bin.tar.gz")
    'openjdk-17.0.2_linux-x64_bin.tar.gz'
    """
    path = urllib.parse.urlsplit(url).path
    _, _, file_name = path.rstrip("/").rpartition("/")
    return urllib.parse.unquote(file_name)


#: The filename suffixes of downloadable artifacts linked from vendor pages.
DOWNLOAD_SUFFIXES = (".zip", ".msi", ".pkg", ".dmg", ".tar.gz", ".tgz", ".deb", ".rpm", ".cab", ".apk", ".exe")

FILE_URL_PATTERN = re.compile(r"https?://[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b[-a-zA-Z0-9()@:%_+.~#?&/=]*")


def extract_file_urls(text: str, suffixes: Iterable[str] = DOWNLOAD_SUFFIXES) -> list[str]:
    """Return the unique URLs in free text, such as a release description, that end with one of ``suffixes``.

    >>> extract_file_urls("[jdk](https://example.com/a/jdk-17.tar.gz) and https://example.com/notes")
    ['https://example.com/a/jdk-17.tar.gz']
    """
    if not text:
        return []
    suffixes = tuple(suffixes)
    result: dict[str, None] = {}
    for match in FILE_URL_PATTERN.finditer(text):
        url = match.group(0).rstrip(").,")
        if url.endswith(suffixes):
            result[url] = None
    return list(result)
