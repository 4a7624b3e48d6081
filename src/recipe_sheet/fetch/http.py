from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from ..models.errors import EmptyDocumentError, FetchError

"""HTTP download of the published CSV document.

Google Sheets "publish to web" exports sometimes reject requests that do not
look like a browser, so a browser-like header set is sent. Cache-Control and
Pragma force a fresh copy on every call.
"""

__all__ = [
    "BROWSER_HEADERS",
    "build_headers",
    "fetch_csv_text",
]

logger = logging.getLogger(__name__)

BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/csv,text/plain,*/*",
    "Accept-Language": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
    "Referer": "https://docs.google.com/",
    "Origin": "https://docs.google.com",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


def build_headers(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    headers = dict(BROWSER_HEADERS)
    if extra:
        headers.update(extra)
    return headers


def _decode(resp: requests.Response) -> str:
    # Sheets exports are UTF-8; requests falls back to ISO-8859-1 without charset
    return resp.content.decode("utf-8-sig", errors="replace")


def fetch_csv_text(
    url: str,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
    extra_headers: Mapping[str, str] | None = None,
) -> str:
    """Download ``url`` and return the body as text.

    Raises:
        FetchError: status outside 200-299 (status code and truncated body attached)
        EmptyDocumentError: body empty or whitespace only
        requests.RequestException: transport failures are left to the caller
    """
    headers = build_headers(extra_headers)
    if session is None:
        with requests.Session() as own:
            resp = own.get(url, headers=headers, timeout=timeout)
    else:
        resp = session.get(url, headers=headers, timeout=timeout)

    if not 200 <= resp.status_code < 300:
        body = _decode(resp)
        error = FetchError(resp.status_code, resp.reason or "", body)
        logger.error(f"HTTP {resp.status_code} while downloading CSV: {error.body_snippet}")
        raise error

    text = _decode(resp)
    if not text.strip():
        logger.error("downloaded CSV is empty")
        raise EmptyDocumentError()

    logger.info(f"CSV downloaded: {len(text)} characters")
    return text
