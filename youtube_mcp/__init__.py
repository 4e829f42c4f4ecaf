"""YouTube MCP server: YouTube Data API tools and yt-dlp transcripts over MCP."""

from youtube_mcp.core.constants import SERVER_VERSION

__version__ = SERVER_VERSION
