"""Pooled ``requests`` sessions for the YouTube Data API.

One session is kept per retry policy.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from youtube_mcp.core.constants import SERVER_NAME, SERVER_VERSION

# Transient statuses worth retrying. 400/403/404 are final answers from the
# Data API (bad parameter, quota or key, missing resource).
RETRY_STATUSES = (429, 500, 502, 503, 504)

_sessions: dict[int, requests.Session] = {}


def _build_session(max_retries: int, backoff_factor: float) -> requests.Session:
    session = requests.Session()

    adapter = HTTPAdapter(
        max_retries=Retry(
            total=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=frozenset({"GET"}),
            respect_retry_after_header=True,
            raise_on_status=False,
        )
    )
    session.mount("https://", adapter)

    session.headers.update(
        {
            "Accept": "application/json",
            "User-Agent": f"{SERVER_NAME}/{SERVER_VERSION}",
        }
    )
    return session


def get_session(max_retries: int = 3, backoff_factor: float = 0.5) -> requests.Session:
    """
    Get the shared session for a retry policy, creating it on first use.

    Args:
        max_retries: Retries for connection errors and transient statuses
        backoff_factor: Delay multiplier between retries

    Returns:
        Configured requests.Session instance
    """
    session = _sessions.get(max_retries)
    if session is None:
        session = _sessions[max_retries] = _build_session(max_retries, backoff_factor)
    return session


def close_all_sessions() -> None:
    """Close all pooled sessions."""
    for session in _sessions.values():
        session.close()
    _sessions.clear()


def get_json_response(
    url: str,
    params: dict[str, str],
    timeout: float,
    max_retries: int = 3,
) -> requests.Response:
    """GET ``url`` through the pooled session; the caller inspects status and body."""
    session = get_session(max_retries)
    return session.get(url, params=params, timeout=timeout)

