"""Low-level GET requests against the YouTube Data API v3."""

import logging
import time
from typing import Any

import requests

from youtube_mcp.core import http_session
from youtube_mcp.core.config import get_settings
from youtube_mcp.core.constants import YOUTUBE_API_BASE
from youtube_mcp.core.exceptions import NetworkError, YouTubeApiError
from youtube_mcp.core.logging_config import log_api_request

logger = logging.getLogger(__name__)

ParamValue = str | int | bool | None


def _encode_params(params: dict[str, ParamValue]) -> dict[str, str]:
    """Drop unset parameters and stringify the rest the way the API expects."""
    encoded = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def fetch_api(endpoint: str, params: dict[str, ParamValue], api_key: str) -> dict[str, Any]:
    """
    Call a Data API endpoint and return the decoded JSON payload.

    Args:
        endpoint: Resource name, e.g. "videos", "search", "commentThreads"
        params: Query parameters; None values are omitted
        api_key: Validated API key

    Returns:
        Decoded JSON response body

    Raises:
        YouTubeApiError: On a non-2xx response
        NetworkError: If no usable response was received
    """
    settings = get_settings()

    url = f"{YOUTUBE_API_BASE}/{endpoint}"
    query = {"key": api_key, **_encode_params(params)}

    started = time.perf_counter()
    try:
        response = http_session.get_json_response(
            url,
            query,
            timeout=settings.youtube_api_timeout,
            max_retries=settings.youtube_api_max_retries,
        )
    except requests.RequestException as e:
        duration_ms = (time.perf_counter() - started) * 1000
        log_api_request(logger, endpoint, None, duration_ms, error=str(e))
        raise NetworkError(f"Network error occurred: {e}", cause=e) from e

    duration_ms = (time.perf_counter() - started) * 1000

    if not response.ok:
        error_text = response.text or response.reason or "Unknown error"
        log_api_request(logger, endpoint, response.status_code, duration_ms, error=error_text)
        raise YouTubeApiError(
            f"YouTube API Error: {error_text}",
            status_code=response.status_code,
            response=error_text,
        )

    log_api_request(logger, endpoint, response.status_code, duration_ms)

    try:
        return response.json()
    except ValueError as e:
        raise NetworkError(f"Network error occurred: invalid JSON response ({e})", cause=e) from e
