"""Input validation for video IDs and subtitle language codes.

Both checks run before any process is spawned or any file is created.
"""

import re
from typing import Any

from youtube_mcp.transcripts.errors import TranscriptError

# Exactly 11 characters of a-z, A-Z, 0-9, hyphen and underscore
VIDEO_ID_PATTERN = re.compile(r"^[0-9A-Za-z_-]{11}$")

# ISO 639-1/639-2 code, optionally followed by a script (zh-Hans),
# a region (pt-BR) or a UN M.49 numeric region (es-419)
LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(-[A-Z][a-z]{3}|-[A-Z]{2}|-[0-9]{3})?$")


def validate_video_id(video_id: Any) -> None:
    """Validate a YouTube video ID.

    Args:
        video_id: Candidate video ID

    Raises:
        TranscriptError: UNKNOWN kind if the value is not a valid video ID
    """
    if not isinstance(video_id, str) or not video_id:
        raise TranscriptError.unknown("Video ID must be a non-empty string")

    # fullmatch so a trailing newline is not accepted by "$"
    if not VIDEO_ID_PATTERN.fullmatch(video_id):
        raise TranscriptError.unknown("Invalid video ID format")


def validate_language_code(language: Any) -> str:
    """Validate a subtitle language code.

    Accepts ISO 639-1 (``en``, ``ja``), ISO 639-2 (``fil``) and the BCP-47
    subset YouTube uses (``zh-Hans``, ``pt-BR``, ``es-419``). Case matters.

    Args:
        language: Candidate language code

    Returns:
        The code with surrounding whitespace removed

    Raises:
        TranscriptError: UNKNOWN kind if the value is not a valid language code
    """
    if not isinstance(language, str) or not language:
        raise TranscriptError.unknown("Language code must be a non-empty string")

    trimmed = language.strip()
    if not trimmed:
        raise TranscriptError.unknown("Language code cannot be empty")

    if not LANGUAGE_CODE_PATTERN.fullmatch(trimmed):
        raise TranscriptError.unknown(
            f'Invalid language code format: "{language}". '
            'Expected formats: ISO 639-1 (e.g., "en", "ja") '
            'or BCP-47 (e.g., "zh-Hans", "pt-BR", "es-419")'
        )

    return trimmed
