# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module includes the HTTP utilities used to fetch vendor payloads.

The normalization engine never calls these functions itself. They are used by the command line
interface to retrieve the payload of a locator before handing it to an adapter.
"""

import logging
import time
import urllib.parse
from datetime import datetime

import requests
from requests.models import Response

from disco.config.defaults import defaults

logger: logging.Logger = logging.getLogger(__name__)


def default_headers() -> dict[str, str]:
    """Return the headers sent with every request, as configured in the ``[requests]`` section."""
    user_agent = defaults.get("requests", "user_agent", fallback="disco")
    return {"User-Agent": user_agent}


def send_get_http_raw(
    url: str,
    headers: dict | None = None,
    timeout: int | None = None,
    allow_redirects: bool = True,
) -> Response | None:
    """Send the GET HTTP request with the given url and headers.

    This method also handles logging when the server returns an error status code. A 403 response
    is retried after waiting for the rate limit to reset, any other error status gives up.

    Parameters
    ----------
    url : str
        The url of the request.
    headers : dict | None
        The dict that describes the headers of the request. Defaults to :func:`default_headers`.
    timeout: int | None
        The request timeout (optional).
    allow_redirects: bool
        Whether to allow redirects. Default: True.

    Returns
    -------
    Response | None
        The response with status code 200 (OK), or None if the request failed.
    """
    logger.debug("GET - %s", url)
    if headers is None:
        headers = default_headers()
    if not timeout:
        timeout = defaults.getint("requests", "timeout", fallback=10)
    error_retries = defaults.getint("requests", "error_retries", fallback=5)
    retry_counter = error_retries
    try:
        response = requests.get(url=url, headers=headers, timeout=timeout, allow_redirects=allow_redirects)
    except requests.exceptions.RequestException as error:
        logger.debug(error)
        return None
    while response.status_code != 200:
        logger.debug(
            "Receiving error code %s from server.",
            response.status_code,
        )
        if retry_counter <= 0:
            logger.debug("Maximum retries reached: %s", error_retries)
            return None
        if response.status_code == 403:
            check_rate_limit(response)
        else:
            return None
        retry_counter = retry_counter - 1
        try:
            response = requests.get(url=url, headers=headers, timeout=timeout, allow_redirects=allow_redirects)
        except requests.exceptions.RequestException as error:
            logger.debug(error)
            return None

    return response


def check_rate_limit(response: Response) -> None:
    """Check the remaining calls limit to the GitHub API and wait accordingly.

    Parameters
    ----------
    response : Response
        The latest response from the GitHub API.
    """
    if "X-RateLimit-Remaining" in response.headers:
        remains = int(response.headers["X-RateLimit-Remaining"])
    else:
        remains = 2

    if remains <= 1:
        rate_limit_reset = response.headers.get("X-RateLimit-Reset", default="")

        if not rate_limit_reset:
            return

        try:
            reset_time = float(rate_limit_reset)
        except ValueError:
            logger.critical("X-RateLimit-Reset=%s in the response's header is not a valid number.", rate_limit_reset)
            return

        time_to_sleep: float = reset_time - datetime.timestamp(datetime.now()) + 1
        if time_to_sleep > 0:
            logger.info("Exceeding rate limit. Sleep for %s seconds", time_to_sleep)
            time.sleep(time_to_sleep)


def construct_query(params: dict) -> str:
    """Construct a URL query from the provided keyword params.

    Parameters with a None value are left out.

    Parameters
    ----------
    params : dict
        The dictionary of parameters for the query.

    Returns
    -------
    str
        The constructed query as string.

    Examples
    --------
    >>> construct_query({"bar": 1, "foo": 2, "baz": None})
    'bar=1&foo=2'
    """
    return urllib.parse.urlencode({key: value for key, value in params.items() if value is not None})


def download_text(url: str, headers: dict | None = None, timeout: int | None = None) -> str | None:
    """Download the body of ``url`` as text.

    Returns
    -------
    str | None
        The decoded body, or None if the request failed.
    """
    response = send_get_http_raw(url, headers=headers, timeout=timeout)
    if response is None:
        logger.error("Unable to download %s.", url)
        return None
    return response.text
