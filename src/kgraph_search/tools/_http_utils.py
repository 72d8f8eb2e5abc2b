"""Shared HTTP utilities for the Knowledge Graph search tool."""

from typing import Any

import httpx

from kgraph_search.config import settings
from kgraph_search.exceptions import ApiError
from kgraph_search.utils.logging import redact_url, setup_logger

logger = setup_logger(__name__)


def parse_error_envelope(response: httpx.Response) -> ApiError:
    """Turn a non-200 response into an ApiError.

    Google APIs answer with `{"error": {"code": ..., "message": ..., ...}}`.
    The fields are read by name; if they are missing, the first two fields of
    the first top-level object are used instead. A body that is not JSON
    falls back to the HTTP status and raw text.
    """
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        return ApiError(status, response.text or response.reason_phrase, status)

    envelope: Any = body.get("error", body) if isinstance(body, dict) else body
    if isinstance(envelope, dict) and "code" not in envelope and "message" not in envelope:
        first = next(iter(envelope.values()), None)
        if isinstance(first, dict):
            envelope = first

    if isinstance(envelope, dict):
        if "code" in envelope or "message" in envelope:
            return ApiError(envelope.get("code", status), str(envelope.get("message", "")), status)
        values = list(envelope.values())
        code = values[0] if values else status
        message = str(values[1]) if len(values) > 1 else ""
        return ApiError(code, message, status)

    return ApiError(status, str(envelope), status)


def _check_response(response: httpx.Response, url: str) -> dict[str, Any]:
    if response.status_code != 200:
        error = parse_error_envelope(response)
        logger.error(
            "Knowledge Graph API returned an error",
            extra={
                "url": redact_url(url),
                "status": response.status_code,
                "code": error.code,
                "error": error.message,
            },
        )
        raise error

    return response.json()


def fetch_json(url: str, timeout: float | None = None) -> dict[str, Any]:
    """Make a single HTTP GET request and decode the JSON body.

    Args:
        url: Fully built and encoded request URL. Redirects are followed
        timeout: Request timeout in seconds. If None, uses settings.search_timeout

    Returns:
        Parsed JSON response as dictionary

    Raises:
        ApiError: If the response status is not 200
        httpx.TimeoutException: If request times out
        httpx.HTTPError: For transport errors
    """
    timeout = timeout or settings.search_timeout

    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url)
            return _check_response(response, url)

    except httpx.TimeoutException:
        logger.error(f"Request timeout for URL: {redact_url(url)}")
        raise
    except httpx.HTTPError as e:
        logger.error(
            "HTTP error during API request",
            extra={"url": redact_url(url), "error": str(e)},
        )
        raise


async def async_fetch_json(url: str, timeout: float | None = None) -> dict[str, Any]:
    """Awaitable variant of `fetch_json` built on httpx.AsyncClient."""
    timeout = timeout or settings.search_timeout

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url)
            return _check_response(response, url)

    except httpx.TimeoutException:
        logger.error(f"Request timeout for URL: {redact_url(url)}")
        raise
    except httpx.HTTPError as e:
        logger.error(
            "HTTP error during API request",
            extra={"url": redact_url(url), "error": str(e)},
        )
        raise
