"""MCP (Model Context Protocol) server for YouTube.

This module provides MCP server integration using FastMCP. It exposes
YouTube Data API lookups and yt-dlp transcripts as tools.

Usage:
    youtube-mcp serve --transport stdio

Or with MCP inspector:
    npx @modelcontextprotocol/inspector youtube-mcp serve --transport stdio
"""

import logging
from typing import Any, Literal

from mcp.server.fastmcp import Context, FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from starlette.requests import Request
from starlette.responses import JSONResponse

from youtube_mcp.core import http_session
from youtube_mcp.core.config import get_settings_with_yaml
from youtube_mcp.core.constants import SERVER_INSTRUCTIONS, SERVER_NAME, SERVER_VERSION, ToolNames
from youtube_mcp.core.logging_config import setup_logging
from youtube_mcp.mcp.auth import resolve_api_key
from youtube_mcp.mcp.handlers import handle_tool_request, requires_api_key

logger = logging.getLogger(__name__)


# Create FastMCP server instance
mcp = FastMCP(
    name=SERVER_NAME,
    instructions=SERVER_INSTRUCTIONS,
    stateless_http=True,
)


async def _run_tool(tool_name: str, arguments: dict[str, Any], ctx: Context | None) -> str:
    """Resolve the API key, dispatch the call and surface failures as ``ToolError``."""
    api_key = resolve_api_key(ctx)
    if api_key is None and requires_api_key(tool_name):
        raise ToolError(
            "YouTube API key is required. Send it in the X-YouTube-API-Key header "
            "or set the YOUTUBE_API_KEY environment variable."
        )

    try:
        return await handle_tool_request(tool_name, arguments, api_key)
    except Exception as e:
        logger.error("Tool %s failed: %s", tool_name, e)
        raise ToolError(str(e)) from e


# ============================================================================
# Tools Registration
# ============================================================================


@mcp.tool(
    name=ToolNames.GET_VIDEO,
    description="Get detailed information about a YouTube video.",
)
async def tool_get_video(
    ctx: Context,
    video_id: str,
    parts: list[str] | None = None,
) -> str:
    """Get video details.

    Args:
        video_id: YouTube video ID
        parts: Resource parts to fetch (snippet, statistics, contentDetails)
    """
    return await _run_tool(ToolNames.GET_VIDEO, {"video_id": video_id, "parts": parts}, ctx)


@mcp.tool(
    name=ToolNames.SEARCH_VIDEOS,
    description="Search for videos, channels or playlists on YouTube.",
)
async def tool_search_videos(
    ctx: Context,
    query: str,
    max_results: int = 10,
    order: Literal["relevance", "date", "rating", "viewCount", "title"] = "relevance",
    type: Literal["video", "channel", "playlist"] = "video",
) -> str:
    """Search YouTube.

    Args:
        query: Search query
        max_results: Maximum number of results (1-50)
        order: Sort order
        type: Resource type to search for
    """
    return await _run_tool(
        ToolNames.SEARCH_VIDEOS,
        {"query": query, "max_results": max_results, "order": order, "type": type},
        ctx,
    )


@mcp.tool(
    name=ToolNames.GET_CHANNEL,
    description="Get information about a YouTube channel.",
)
async def tool_get_channel(ctx: Context, channel_id: str) -> str:
    return await _run_tool(ToolNames.GET_CHANNEL, {"channel_id": channel_id}, ctx)


@mcp.tool(
    name=ToolNames.GET_CHANNEL_VIDEOS,
    description="List videos from a YouTube channel.",
)
async def tool_get_channel_videos(
    ctx: Context,
    channel_id: str,
    max_results: int = 10,
    order: Literal["date", "rating", "viewCount", "title"] = "date",
) -> str:
    return await _run_tool(
        ToolNames.GET_CHANNEL_VIDEOS,
        {"channel_id": channel_id, "max_results": max_results, "order": order},
        ctx,
    )


@mcp.tool(
    name=ToolNames.GET_PLAYLIST,
    description="Get information about a YouTube playlist.",
)
async def tool_get_playlist(ctx: Context, playlist_id: str) -> str:
    return await _run_tool(ToolNames.GET_PLAYLIST, {"playlist_id": playlist_id}, ctx)


@mcp.tool(
    name=ToolNames.GET_PLAYLIST_ITEMS,
    description="List videos in a YouTube playlist.",
)
async def tool_get_playlist_items(
    ctx: Context,
    playlist_id: str,
    max_results: int = 10,
) -> str:
    return await _run_tool(
        ToolNames.GET_PLAYLIST_ITEMS,
        {"playlist_id": playlist_id, "max_results": max_results},
        ctx,
    )


@mcp.tool(
    name=ToolNames.GET_COMMENT_THREADS,
    description=(
        "Get top-level comments on a YouTube video. "
        "Pass the returned nextPageToken as page_token to fetch the next page."
    ),
)
async def tool_get_comment_threads(
    ctx: Context,
    video_id: str,
    max_results: int = 20,
    page_token: str | None = None,
    order: Literal["relevance", "time"] = "relevance",
) -> str:
    return await _run_tool(
        ToolNames.GET_COMMENT_THREADS,
        {
            "video_id": video_id,
            "max_results": max_results,
            "page_token": page_token,
            "order": order,
        },
        ctx,
    )


@mcp.tool(
    name=ToolNames.GET_COMMENT_REPLIES,
    description="Get replies to a YouTube comment.",
)
async def tool_get_comment_replies(
    ctx: Context,
    parent_id: str,
    max_results: int = 20,
    page_token: str | None = None,
) -> str:
    return await _run_tool(
        ToolNames.GET_COMMENT_REPLIES,
        {"parent_id": parent_id, "max_results": max_results, "page_token": page_token},
        ctx,
    )


@mcp.tool(
    name=ToolNames.GET_TRANSCRIPT_METADATA,
    description="List the caption tracks available for a YouTube video.",
)
async def tool_get_transcript_metadata(ctx: Context, video_id: str) -> str:
    return await _run_tool(ToolNames.GET_TRANSCRIPT_METADATA, {"video_id": video_id}, ctx)


@mcp.tool(
    name=ToolNames.GET_TRANSCRIPT,
    description=(
        "Get the transcript of a YouTube video with timestamps. "
        "Downloads manual or auto-generated subtitles with yt-dlp; no API key needed. "
        "Optionally restrict the result to a start_time/end_time window in seconds."
    ),
)
async def tool_get_transcript(
    ctx: Context,
    video_id: str,
    language: str,
    start_time: float | None = None,
    end_time: float | None = None,
) -> str:
    """Get a video transcript.

    Args:
        video_id: YouTube video ID (11-character string)
        language: Language code, e.g. "en", "ja", "pt-BR"
        start_time: Keep segments ending at or after this second
        end_time: Keep segments starting at or before this second

    Returns:
        JSON text with the list of segments
    """
    return await _run_tool(
        ToolNames.GET_TRANSCRIPT,
        {
            "video_id": video_id,
            "language": language,
            "start_time": start_time,
            "end_time": end_time,
        },
        ctx,
    )


# ============================================================================
# HTTP Routes
# ============================================================================


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> JSONResponse:
    """Liveness check for HTTP deployments."""
    return JSONResponse({"status": "ok", "server": SERVER_NAME, "version": SERVER_VERSION})


# ============================================================================
# Entry Points
# ============================================================================


def run_server(
    transport: Literal["stdio", "http"] | None = None,
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
) -> None:
    """Run the MCP server.

    Unset arguments fall back to settings (environment, ``.env``, config.yaml).

    Args:
        transport: "stdio" or "http" (stateless streamable HTTP)
        host: Bind address for HTTP
        port: Port for HTTP
        log_level: Logging level
    """
    settings = get_settings_with_yaml()
    transport = transport or settings.transport_mode
    log_level = (log_level or settings.log_level).upper()

    setup_logging(level=log_level)

    try:
        if transport == "stdio":
            logger.info("Starting %s v%s on stdio", SERVER_NAME, SERVER_VERSION)
            mcp.run(transport="stdio")
            return

        mcp.settings.host = host or settings.http_host
        mcp.settings.port = port or settings.http_port
        mcp.settings.log_level = log_level
        logger.info(
            "Starting %s v%s on http://%s:%s/mcp",
            SERVER_NAME,
            SERVER_VERSION,
            mcp.settings.host,
            mcp.settings.port,
        )
        mcp.run(transport="streamable-http")
    finally:
        http_session.close_all_sessions()


def main() -> None:
    """Main entry point for the MCP server."""
    run_server()


if __name__ == "__main__":
    main()
