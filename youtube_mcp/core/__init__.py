"""Core package for the YouTube MCP server."""

from youtube_mcp.core.config import Settings, get_settings
from youtube_mcp.core.exceptions import (
    NetworkError,
    ValidationError,
    YouTubeApiError,
    YouTubeMCPError,
)
from youtube_mcp.core.logging_config import (
    log_api_request,
    log_transcript_event,
    setup_logging,
)
from youtube_mcp.core.schemas import RawSubtitleEntry, TranscriptResult, TranscriptSegment

__all__ = [
    "Settings",
    "get_settings",
    "RawSubtitleEntry",
    "TranscriptResult",
    "TranscriptSegment",
    # Errors
    "YouTubeMCPError",
    "ValidationError",
    "NetworkError",
    "YouTubeApiError",
    # Logging
    "setup_logging",
    "log_api_request",
    "log_transcript_event",
]
