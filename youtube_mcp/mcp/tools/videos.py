"""MCP tools for videos.

Provides tools for:
- Getting a single video's details
- Searching videos, channels and playlists
"""

import asyncio
from typing import Any

from youtube_mcp.api import videos as videos_api
from youtube_mcp.core.constants import DEFAULT_VIDEO_PARTS
from youtube_mcp.mcp.schemas import GetVideoInput, SearchVideosInput


async def get_video(params: GetVideoInput, api_key: str) -> dict[str, Any]:
    """Retrieve title, statistics and content details of a video.

    Example:
        await get_video(GetVideoInput(video_id="dQw4w9WgXcQ"), key)
        # Returns: {"id": "dQw4w9WgXcQ", "title": "...", "viewCount": "...", ...}
    """
    parts = params.parts or list(DEFAULT_VIDEO_PARTS)
    video = await asyncio.to_thread(videos_api.get_video, params.video_id, api_key, parts)
    return video.to_wire()


async def search_videos(params: SearchVideosInput, api_key: str) -> list[dict[str, Any]]:
    """Search YouTube and return matching videos, channels or playlists."""
    results = await asyncio.to_thread(
        videos_api.search_videos,
        params.query,
        api_key,
        params.max_results,
        params.order,
        params.type,
    )
    return [r.to_wire() for r in results]
