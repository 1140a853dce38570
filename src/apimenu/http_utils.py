"""Download API description documents over HTTP with retries."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from apimenu.config import (
    APIMENU_FETCH_BACKOFF_S,
    APIMENU_FETCH_MAX_RETRIES,
    APIMENU_FETCH_TIMEOUT_S,
    APIMENU_USER_AGENT,
)
from apimenu.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

# Descriptions are served as JSON or YAML under several media types.
DESCRIPTION_ACCEPT: Final[str] = (
    "application/json, application/vnd.oai.openapi+json;q=0.9, "
    "application/yaml;q=0.8, application/vnd.oai.openapi;q=0.8, "
    "application/x-yaml;q=0.8, text/yaml;q=0.8, */*;q=0.1"
)

_MAX_REDIRECTS: Final[int] = 5
_MAX_RETRY_AFTER_S: Final[float] = 30.0


def description_headers() -> dict[str, str]:
    """Request headers sent with every description download."""
    return {"User-Agent": APIMENU_USER_AGENT, "Accept": DESCRIPTION_ACCEPT}


def retry_delay(response: httpx.Response | None, attempt: int) -> float:
    """Seconds to wait before retrying after ``attempt`` failed.

    A numeric ``Retry-After`` header wins (capped); otherwise the delay
    doubles from ``APIMENU_FETCH_BACKOFF_S``.
    """
    retry_after = response.headers.get("Retry-After", "").strip() if response is not None else ""
    if retry_after.isdigit():
        return min(float(retry_after), _MAX_RETRY_AFTER_S)
    return APIMENU_FETCH_BACKOFF_S * (2**attempt)


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch a description document, retrying transient failures.

    Headers and timeout are sent per request, so a caller-supplied client
    gets the same ``Accept`` and ``User-Agent`` as the internal one.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Exception class raised on 404. Defaults to FetchError.
        on_404_message: Message for the 404 exception.

    Returns:
        The decoded response body.

    Raises:
        FetchError (or ``on_404``): On 404, on other client errors, or when
            transient failures outlast the retries.
    """
    timeout = httpx.Timeout(APIMENU_FETCH_TIMEOUT_S)
    headers = description_headers()
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        last_error = "no attempt made"

        for attempt in range(APIMENU_FETCH_MAX_RETRIES + 1):
            response: httpx.Response | None = None
            try:
                response = await http_client.get(url, headers=headers, timeout=timeout)
            except httpx.RequestError as exc:
                last_error = str(exc) or type(exc).__name__
            else:
                if response.status_code == 404:
                    raise not_found_exc_class(on_404_message or f"No document found at {url}")
                if response.status_code not in RETRY_STATUS_CODES:
                    try:
                        response.raise_for_status()
                    except httpx.HTTPStatusError as exc:
                        raise FetchError(f"HTTP {response.status_code} from {url}") from exc
                    logger.debug(
                        "Fetched %s as %s",
                        url,
                        response.headers.get("Content-Type", "unknown content type"),
                    )
                    return response.text
                last_error = f"HTTP {response.status_code}"

            if attempt < APIMENU_FETCH_MAX_RETRIES:
                delay = retry_delay(response, attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, delay, last_error)
                await asyncio.sleep(delay)

        raise FetchError(f"Failed to fetch {url}: {last_error}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
