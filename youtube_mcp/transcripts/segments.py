"""Projection of parsed subtitle entries into transcript segments."""

from collections.abc import Iterable

from youtube_mcp.core.schemas import RawSubtitleEntry, TranscriptSegment


def project_segments(
    entries: Iterable[RawSubtitleEntry],
    start_time: float | None = None,
    end_time: float | None = None,
) -> list[TranscriptSegment]:
    """
    Convert subtitle entries to segments, keeping those that overlap a time window.

    An entry is kept when any part of it falls inside ``[start_time, end_time]``;
    it does not have to be fully contained. Either bound may be omitted. Input
    order is preserved.

    Args:
        entries: Parsed subtitle entries
        start_time: Window start in seconds
        end_time: Window end in seconds

    Returns:
        List of TranscriptSegment with trimmed text
    """
    segments = []
    for entry in entries:
        start = entry.from_ms / 1000
        end = entry.to_ms / 1000

        if start_time is not None and end < start_time:
            continue
        if end_time is not None and start > end_time:
            continue

        segments.append(TranscriptSegment(start=start, end=end, text=entry.text.strip()))

    return segments
