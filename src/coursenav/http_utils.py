"""HTTP utilities for fetching content API JSON with retry logic."""

from __future__ import annotations

import asyncio
from typing import Any, Final, Mapping

import httpx

from coursenav.config import (
    COURSENAV_FETCH_BACKOFF_S,
    COURSENAV_FETCH_MAX_RETRIES,
    COURSENAV_FETCH_TIMEOUT_S,
    COURSENAV_USER_AGENT,
)
from coursenav.exceptions import FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})


class NotFoundError(FetchError):
    """The content API answered 404."""


def build_client(base_url: str = "") -> httpx.AsyncClient:
    """Create an AsyncClient configured for the content API."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(COURSENAV_FETCH_TIMEOUT_S),
        headers={"User-Agent": COURSENAV_USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
    )


async def fetch_json_with_retries(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    max_retries: int = COURSENAV_FETCH_MAX_RETRIES,
    backoff: float = COURSENAV_FETCH_BACKOFF_S,
) -> Any:
    """GET a JSON document, retrying transient failures with exponential backoff.

    Args:
        client: Client used for the request (connection pooling, base URL).
        url: URL or path relative to the client's base URL.
        params: Optional query parameters.
        max_retries: Number of retries after the first attempt.
        backoff: Initial backoff in seconds; doubled on every retry.

    Returns:
        The decoded JSON body.

    Raises:
        NotFoundError: If the server answers 404.
        FetchError: If the request still fails after all retries or the body
            is not valid JSON.
    """
    last_exc: Exception | None = None

    for attempt in range(max_retries + 1):
        try:
            response = await client.get(url, params=params)

            if response.status_code == 404:
                raise NotFoundError(f"Resource not found at {url}")

            if response.status_code in RETRY_STATUS_CODES:
                last_exc = FetchError(f"HTTP {response.status_code} from {url}")
            else:
                response.raise_for_status()
                try:
                    return response.json()
                except ValueError as exc:
                    raise FetchError(f"Invalid JSON from {url}: {exc}") from exc
        except (httpx.RequestError, httpx.HTTPStatusError) as exc:
            last_exc = exc

        if attempt < max_retries:
            await asyncio.sleep(backoff * (2**attempt))

    raise FetchError(f"Failed to fetch {url}: {last_exc}")
