"""MCP tools for transcripts.

Provides tools for:
- Listing caption tracks (Data API, needs an API key)
- Downloading a transcript (yt-dlp, no API key)
"""

import asyncio
from typing import Any

from youtube_mcp.api import captions as captions_api
from youtube_mcp.mcp.schemas import GetTranscriptInput, GetTranscriptMetadataInput
from youtube_mcp.transcripts.service import TranscriptService


async def get_transcript_metadata(
    params: GetTranscriptMetadataInput, api_key: str
) -> list[dict[str, Any]]:
    """List caption tracks available for a video."""
    tracks = await asyncio.to_thread(
        captions_api.get_transcript_metadata, params.video_id, api_key
    )
    return [t.to_wire() for t in tracks]


async def get_transcript(params: GetTranscriptInput, api_key: str | None = None) -> dict[str, Any]:
    """Download a video's subtitles and return timed segments.

    Requires yt-dlp on PATH. ``start_time``/``end_time`` keep only the
    segments overlapping that window.

    Example:
        await get_transcript(GetTranscriptInput(video_id="dQw4w9WgXcQ", language="en"))
        # Returns: {"segments": [{"start": 0.0, "end": 3.0, "duration": 3.0, "text": "..."}]}
    """
    result = await TranscriptService().get_transcript(
        params.video_id,
        params.language,
        params.start_time,
        params.end_time,
    )
    return result.model_dump(mode="json")
