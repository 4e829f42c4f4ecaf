"""Tests for segment projection."""

from youtube_mcp.core.schemas import RawSubtitleEntry, TranscriptResult, TranscriptSegment
from youtube_mcp.transcripts.segments import project_segments


class TestProjectSegments:
    """Test conversion and time-window filtering."""

    def test_no_window_keeps_everything(self, sample_entries):
        """Test no window keeps everything."""
        segments = project_segments(sample_entries)

        assert len(segments) == 3
        assert segments[0] == TranscriptSegment(start=0.0, end=2.0, text="First")
        assert segments[2].start == 10.0
        assert segments[2].end == 12.0

    def test_text_is_trimmed(self, sample_entries):
        """Test text is trimmed."""
        segments = project_segments(sample_entries)
        assert segments[1].text == "Second"

    def test_duration(self, sample_entries):
        """Test duration."""
        segments = project_segments(sample_entries)
        assert segments[1].duration == 3.0

    def test_start_time_keeps_overlapping(self, sample_entries):
        """Test start time keeps overlapping."""
        # Second cue spans 2.0-5.0 and overlaps a window starting at 4.0
        segments = project_segments(sample_entries, start_time=4.0)
        assert [s.text for s in segments] == ["Second", "Third"]

    def test_end_time_keeps_overlapping(self, sample_entries):
        """Test end time keeps overlapping."""
        segments = project_segments(sample_entries, end_time=2.5)
        assert [s.text for s in segments] == ["First", "Second"]

    def test_bounds_are_inclusive(self, sample_entries):
        """Test bounds are inclusive."""
        segments = project_segments(sample_entries, start_time=2.0, end_time=10.0)
        assert [s.text for s in segments] == ["First", "Second", "Third"]

    def test_window_between_entries(self, sample_entries):
        """Test window between entries."""
        assert project_segments(sample_entries, start_time=6.0, end_time=9.0) == []

    def test_empty_input(self):
        """Test empty input."""
        assert project_segments([]) == []

    def test_preserves_input_order(self):
        """Test preserves input order."""
        entries = [
            RawSubtitleEntry(from_ms=5000, to_ms=6000, text="later"),
            RawSubtitleEntry(from_ms=1000, to_ms=2000, text="earlier"),
        ]
        assert [s.text for s in project_segments(entries)] == ["later", "earlier"]


class TestTranscriptResult:
    """Test TranscriptResult serialization."""

    def test_dump_includes_duration(self):
        """Test dump includes duration."""
        result = TranscriptResult(segments=[TranscriptSegment(start=1.0, end=3.5, text="hi")])
        assert result.model_dump(mode="json") == {
            "segments": [{"start": 1.0, "end": 3.5, "text": "hi", "duration": 2.5}]
        }

    def test_full_text(self):
        """Test full text."""
        result = TranscriptResult(
            segments=[
                TranscriptSegment(start=0, end=1, text="Hello"),
                TranscriptSegment(start=1, end=2, text="World"),
            ]
        )
        assert result.full_text == "Hello World"
