"""MCP server integration for YouTube.

This package exposes the YouTube Data API and yt-dlp transcripts as MCP tools.
"""

from youtube_mcp.mcp.handlers import TOOL_REGISTRY, handle_tool_request
from youtube_mcp.mcp.server import mcp, run_server

__all__ = ["mcp", "run_server", "handle_tool_request", "TOOL_REGISTRY"]
