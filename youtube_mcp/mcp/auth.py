"""API key resolution for incoming tool calls."""

import logging

from mcp.server.fastmcp import Context

from youtube_mcp.api.api_key import get_api_key_from_env
from youtube_mcp.core.config import get_settings
from youtube_mcp.core.constants import API_KEY_HEADER
from youtube_mcp.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def get_header_api_key(ctx: Context | None) -> str | None:
    """Return the ``X-YouTube-API-Key`` header of the current HTTP request, if any.

    Under stdio there is no HTTP request and this returns None.
    """
    if ctx is None:
        return None
    try:
        request = ctx.request_context.request
    except ValueError:
        # Context used outside of a request
        return None
    if request is None:
        return None

    headers = getattr(request, "headers", None)
    if headers is None:
        return None
    value = headers.get(API_KEY_HEADER)
    if value and value.strip():
        return value.strip()
    return None


def resolve_api_key(ctx: Context | None = None) -> str | None:
    """
    Resolve the Data API key for a tool call.

    Order: request header, then ``Settings.youtube_api_key``, then the
    ``YOUTUBE_API_KEY`` environment variable.

    Returns:
        The key, or None if no source provides one
    """
    header_key = get_header_api_key(ctx)
    if header_key:
        logger.debug("Using API key from request header")
        return header_key

    settings = get_settings()
    if settings.has_api_key:
        return settings.youtube_api_key.strip()

    # Settings are cached; the variable may have been exported since
    try:
        return get_api_key_from_env()
    except ValidationError:
        return None
