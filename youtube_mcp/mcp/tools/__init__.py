"""MCP tools for the YouTube MCP server.

This module exports all MCP tool handlers for:
- Videos
- Channels
- Playlists
- Comments
- Transcripts
"""

from youtube_mcp.mcp.tools.channels import get_channel, get_channel_videos
from youtube_mcp.mcp.tools.comments import get_comment_replies, get_comment_threads
from youtube_mcp.mcp.tools.playlists import get_playlist, get_playlist_items
from youtube_mcp.mcp.tools.transcripts import get_transcript, get_transcript_metadata
from youtube_mcp.mcp.tools.videos import get_video, search_videos

__all__ = [
    # Video tools
    "get_video",
    "search_videos",
    # Channel tools
    "get_channel",
    "get_channel_videos",
    # Playlist tools
    "get_playlist",
    "get_playlist_items",
    # Comment tools
    "get_comment_threads",
    "get_comment_replies",
    # Transcript tools
    "get_transcript_metadata",
    "get_transcript",
]
