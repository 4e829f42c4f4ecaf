"""Channel lookup and channel video listings."""

from typing import Literal

from youtube_mcp.api.fetcher import fetch_api
from youtube_mcp.api.mappers import map_channel, map_search_result
from youtube_mcp.core.exceptions import YouTubeApiError
from youtube_mcp.core.schemas import ChannelDetails, SearchResult

ChannelVideoOrder = Literal["date", "rating", "viewCount", "title"]


def get_channel(channel_id: str, api_key: str) -> ChannelDetails:
    """
    Get details of a single channel.

    Raises:
        YouTubeApiError: If the request fails or the channel does not exist
    """
    data = fetch_api(
        "channels",
        {"id": channel_id, "part": "snippet,statistics,contentDetails"},
        api_key,
    )

    items = data.get("items") or []
    if not items:
        raise YouTubeApiError(f"Channel not found: {channel_id}")

    return map_channel(items[0])


def get_channel_videos(
    channel_id: str,
    api_key: str,
    max_results: int = 10,
    order: ChannelVideoOrder = "date",
) -> list[SearchResult]:
    """List videos uploaded by a channel via the search endpoint."""
    data = fetch_api(
        "search",
        {
            "channelId": channel_id,
            "part": "snippet",
            "maxResults": max_results,
            "order": order,
            "type": "video",
        },
        api_key,
    )
    return [map_search_result(item) for item in data.get("items") or []]
