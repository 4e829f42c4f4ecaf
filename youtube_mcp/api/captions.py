"""Caption track metadata from the Data API.

The Data API only lists caption tracks; the text itself is downloaded with
yt-dlp (see ``youtube_mcp.transcripts``).
"""

from youtube_mcp.api.fetcher import fetch_api
from youtube_mcp.api.mappers import map_caption
from youtube_mcp.core.schemas import TranscriptMetadata


def get_transcript_metadata(video_id: str, api_key: str) -> list[TranscriptMetadata]:
    """List the caption tracks available for a video."""
    data = fetch_api("captions", {"part": "snippet", "videoId": video_id}, api_key)
    return [map_caption(item) for item in data.get("items") or []]
