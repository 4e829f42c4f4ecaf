"""Transcript acquisition with yt-dlp."""

from youtube_mcp.transcripts.errors import TranscriptError, TranscriptErrorKind
from youtube_mcp.transcripts.segments import project_segments
from youtube_mcp.transcripts.service import TranscriptService, get_transcript
from youtube_mcp.transcripts.validation import validate_language_code, validate_video_id
from youtube_mcp.transcripts.vtt import SubtitleParseError, parse_vtt
from youtube_mcp.transcripts.ytdlp import (
    check_ytdlp_installed,
    classify_ytdlp_error,
    download_subtitles,
)

__all__ = [
    "TranscriptError",
    "TranscriptErrorKind",
    "TranscriptService",
    "get_transcript",
    # Steps
    "validate_video_id",
    "validate_language_code",
    "check_ytdlp_installed",
    "download_subtitles",
    "classify_ytdlp_error",
    "parse_vtt",
    "SubtitleParseError",
    "project_segments",
]
