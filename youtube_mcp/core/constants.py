"""Application constants and metadata.

This module centralizes all application-wide constants for:
- Server metadata
- YouTube Data API endpoints
- yt-dlp invocation
- MCP tool names
"""

# =============================================================================
# Server Metadata
# =============================================================================

SERVER_NAME = "youtube-mcp-server"
SERVER_VERSION = "1.0.0"
SERVER_INSTRUCTIONS = (
    "MCP server for YouTube. Provides tools for reading video, channel, "
    "playlist and comment metadata from the YouTube Data API, and for "
    "downloading full subtitle transcripts with yt-dlp."
)

API_KEY_HEADER = "x-youtube-api-key"
API_KEY_ENV_VAR = "YOUTUBE_API_KEY"

# =============================================================================
# YouTube Data API
# =============================================================================

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

DEFAULT_VIDEO_PARTS = ("snippet", "statistics", "contentDetails")

# =============================================================================
# yt-dlp
# =============================================================================

YTDLP_INSTALL_URL = "https://github.com/yt-dlp/yt-dlp/wiki/Installation"
SUBTITLE_FORMAT = "vtt"
TEMP_DIR_PREFIX = "yt-dlp-"
SUBTITLE_STEM_PREFIX = "subtitle_"

# =============================================================================
# MCP Tool Names
# =============================================================================


class ToolNames:
    """Tool names follow the ``<action>_<resource>`` convention."""

    # Videos
    GET_VIDEO = "get_video"
    SEARCH_VIDEOS = "search_videos"

    # Channels
    GET_CHANNEL = "get_channel"
    GET_CHANNEL_VIDEOS = "get_channel_videos"

    # Playlists
    GET_PLAYLIST = "get_playlist"
    GET_PLAYLIST_ITEMS = "get_playlist_items"

    # Comments
    GET_COMMENT_THREADS = "get_comment_threads"
    GET_COMMENT_REPLIES = "get_comment_replies"

    # Transcripts
    GET_TRANSCRIPT_METADATA = "get_transcript_metadata"
    GET_TRANSCRIPT = "get_transcript"
