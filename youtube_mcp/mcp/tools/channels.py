"""MCP tools for channels."""

import asyncio
from typing import Any

from youtube_mcp.api import channels as channels_api
from youtube_mcp.mcp.schemas import GetChannelInput, GetChannelVideosInput


async def get_channel(params: GetChannelInput, api_key: str) -> dict[str, Any]:
    """Retrieve a channel's details and statistics."""
    channel = await asyncio.to_thread(channels_api.get_channel, params.channel_id, api_key)
    return channel.to_wire()


async def get_channel_videos(params: GetChannelVideosInput, api_key: str) -> list[dict[str, Any]]:
    """List videos of a channel."""
    videos = await asyncio.to_thread(
        channels_api.get_channel_videos,
        params.channel_id,
        api_key,
        params.max_results,
        params.order,
    )
    return [v.to_wire() for v in videos]
