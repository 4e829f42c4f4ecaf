"""WebVTT parsing via webvtt-py."""

import html

import webvtt
from webvtt.errors import MalformedFileError

from youtube_mcp.core.schemas import RawSubtitleEntry


class SubtitleParseError(ValueError):
    """Subtitle content could not be parsed."""

    pass


def _to_ms(timestamp) -> int:
    """Milliseconds of a ``webvtt`` Timestamp."""
    return (
        (timestamp.hours * 60 + timestamp.minutes) * 60 + timestamp.seconds
    ) * 1000 + timestamp.milliseconds


def parse_vtt(content: str) -> list[RawSubtitleEntry]:
    """
    Parse WebVTT text into subtitle entries, in file order.

    Cue tags are already stripped by webvtt-py; HTML entities such as
    ``&amp;`` are decoded here.

    Args:
        content: Full text of a .vtt file

    Returns:
        One RawSubtitleEntry per cue

    Raises:
        SubtitleParseError: If the content is not valid WebVTT
    """
    try:
        captions = webvtt.from_string(content)
    except MalformedFileError as e:
        raise SubtitleParseError(f"Malformed WebVTT content: {e}") from e

    return [
        RawSubtitleEntry(
            id=caption.identifier or str(index),
            from_ms=_to_ms(caption.start_time),
            to_ms=_to_ms(caption.end_time),
            text=html.unescape(caption.text),
        )
        for index, caption in enumerate(captions, start=1)
    ]
