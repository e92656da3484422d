"""Shared HTTP session, single-attempt request helper and JSON decoding.

All outbound calls of one process go through a single ``requests.Session``.
Requests are issued exactly once; transport failures and non-success
statuses are converted into the translation error taxonomy.
"""

from __future__ import annotations

import json
from typing import Any

import requests

from YiDict.core.errors import HttpStatusError, NetworkError, PayloadDecodeError, RequestTimeoutError
from YiDict.utils.log import log

HEADERS = {
    "User-Agent": "yi-dict/0.1.0",
}


def create_session(proxy: str = "") -> requests.Session:
    """Create the process-wide HTTP session.

    Args:
        proxy: Optional proxy URL applied to both http and https traffic.

    Returns:
        Configured session.
    """
    session = requests.Session()
    session.headers.update(HEADERS)
    if proxy:
        session.proxies.update({"http": proxy, "https": proxy})
        log.debug("HTTP proxy enabled: %s", proxy)
    return session


def send_request(
    session: requests.Session,
    method: str,
    url: str,
    *,
    timeout: float,
    provider: str,
    **kwargs: Any,
) -> requests.Response:
    """Send one request and check its status.

    Args:
        session: Shared HTTP session.
        method: HTTP method name.
        url: Endpoint URL.
        timeout: Request timeout in seconds.
        provider: Provider name used in log and error messages.
        **kwargs: Passed through to ``Session.request`` (params, data, json, headers).

    Returns:
        Response with a 2xx status.

    Raises:
        RequestTimeoutError: If the request timed out.
        NetworkError: On other transport failures.
        HttpStatusError: If the status is not 2xx.
    """
    log.debug("%s request: %s %s", provider, method, url)
    try:
        response = session.request(method, url, timeout=timeout, **kwargs)
    except requests.Timeout as error:
        raise RequestTimeoutError(f"{provider} request timed out after {timeout:g}s") from error
    except requests.RequestException as error:
        raise NetworkError(f"{provider} network error: {error}") from error

    log.debug("%s response: status=%s bytes=%s", provider, response.status_code, len(response.content))
    if not 200 <= response.status_code < 300:
        raise HttpStatusError(response.status_code, url)
    return response


def decode_json(text: str, provider: str) -> Any:
    """Decode a JSON body.

    Raises:
        PayloadDecodeError: With line/column and byte offset of the syntax error.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise PayloadDecodeError(
            f"Malformed {provider} JSON: {error.msg}",
            position=(error.lineno, error.colno),
            offset=len(text[: error.pos].encode("utf-8")),
        ) from error
