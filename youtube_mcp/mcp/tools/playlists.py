"""MCP tools for playlists."""

import asyncio
from typing import Any

from youtube_mcp.api import playlists as playlists_api
from youtube_mcp.mcp.schemas import GetPlaylistInput, GetPlaylistItemsInput


async def get_playlist(params: GetPlaylistInput, api_key: str) -> dict[str, Any]:
    """Retrieve a playlist's details."""
    playlist = await asyncio.to_thread(playlists_api.get_playlist, params.playlist_id, api_key)
    return playlist.to_wire()


async def get_playlist_items(params: GetPlaylistItemsInput, api_key: str) -> list[dict[str, Any]]:
    """List the videos in a playlist."""
    items = await asyncio.to_thread(
        playlists_api.get_playlist_items,
        params.playlist_id,
        api_key,
        params.max_results,
    )
    return [i.to_wire() for i in items]
