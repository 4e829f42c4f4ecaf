"""Playlist lookup and playlist contents."""

from youtube_mcp.api.fetcher import fetch_api
from youtube_mcp.api.mappers import map_playlist, map_playlist_item
from youtube_mcp.core.exceptions import YouTubeApiError
from youtube_mcp.core.schemas import PlaylistDetails, PlaylistItem


def get_playlist(playlist_id: str, api_key: str) -> PlaylistDetails:
    """
    Get details of a single playlist.

    Raises:
        YouTubeApiError: If the request fails or the playlist does not exist
    """
    data = fetch_api(
        "playlists",
        {"id": playlist_id, "part": "snippet,contentDetails,status"},
        api_key,
    )

    items = data.get("items") or []
    if not items:
        raise YouTubeApiError(f"Playlist not found: {playlist_id}")

    return map_playlist(items[0])


def get_playlist_items(
    playlist_id: str,
    api_key: str,
    max_results: int = 10,
) -> list[PlaylistItem]:
    """List the videos in a playlist, in playlist order."""
    data = fetch_api(
        "playlistItems",
        {
            "playlistId": playlist_id,
            "part": "snippet,contentDetails",
            "maxResults": max_results,
        },
        api_key,
    )
    return [map_playlist_item(item) for item in data.get("items") or []]
