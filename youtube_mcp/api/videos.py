"""Video lookup and search."""

from collections.abc import Sequence
from typing import Literal

from youtube_mcp.api.fetcher import fetch_api
from youtube_mcp.api.mappers import map_search_result, map_video
from youtube_mcp.core.constants import DEFAULT_VIDEO_PARTS
from youtube_mcp.core.exceptions import YouTubeApiError
from youtube_mcp.core.schemas import SearchResult, VideoDetails

SearchOrder = Literal["relevance", "date", "rating", "viewCount", "title"]
SearchType = Literal["video", "channel", "playlist"]


def get_video(
    video_id: str,
    api_key: str,
    parts: Sequence[str] = DEFAULT_VIDEO_PARTS,
) -> VideoDetails:
    """
    Get details of a single video.

    Args:
        video_id: YouTube video ID
        api_key: Data API key
        parts: Resource parts to request (snippet, statistics, contentDetails)

    Returns:
        VideoDetails

    Raises:
        YouTubeApiError: If the request fails or the video does not exist
    """
    data = fetch_api("videos", {"id": video_id, "part": ",".join(parts)}, api_key)

    items = data.get("items") or []
    if not items:
        raise YouTubeApiError(f"Video not found: {video_id}")

    return map_video(items[0])


def search_videos(
    query: str,
    api_key: str,
    max_results: int = 10,
    order: SearchOrder = "relevance",
    type_: SearchType = "video",
) -> list[SearchResult]:
    """
    Search videos, channels or playlists.

    Args:
        query: Search query
        api_key: Data API key
        max_results: Number of results (1-50)
        order: Result ordering
        type_: Resource type to search for

    Returns:
        List of SearchResult (possibly empty)
    """
    data = fetch_api(
        "search",
        {
            "q": query,
            "part": "snippet",
            "maxResults": max_results,
            "order": order,
            "type": type_,
        },
        api_key,
    )
    return [map_search_result(item) for item in data.get("items") or []]
