"""YouTube Data API v3 client."""

from youtube_mcp.api.api_key import get_api_key_from_env, validate_api_key
from youtube_mcp.api.captions import get_transcript_metadata
from youtube_mcp.api.channels import get_channel, get_channel_videos
from youtube_mcp.api.comments import get_comment_replies, get_comment_threads
from youtube_mcp.api.fetcher import fetch_api
from youtube_mcp.api.playlists import get_playlist, get_playlist_items
from youtube_mcp.api.videos import get_video, search_videos

__all__ = [
    "fetch_api",
    # API key
    "get_api_key_from_env",
    "validate_api_key",
    # Videos
    "get_video",
    "search_videos",
    # Channels
    "get_channel",
    "get_channel_videos",
    # Playlists
    "get_playlist",
    "get_playlist_items",
    # Comments
    "get_comment_threads",
    "get_comment_replies",
    # Captions
    "get_transcript_metadata",
]
