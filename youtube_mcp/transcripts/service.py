"""Transcript acquisition: yt-dlp download -> WebVTT parse -> segments."""

import asyncio
import logging
import secrets
import shutil
import tempfile
from pathlib import Path

from youtube_mcp.core.config import get_settings
from youtube_mcp.core.constants import SUBTITLE_STEM_PREFIX, TEMP_DIR_PREFIX
from youtube_mcp.core.logging_config import log_transcript_event
from youtube_mcp.core.schemas import TranscriptResult
from youtube_mcp.transcripts.errors import TranscriptError
from youtube_mcp.transcripts.segments import project_segments
from youtube_mcp.transcripts.validation import validate_language_code, validate_video_id
from youtube_mcp.transcripts.vtt import SubtitleParseError, parse_vtt
from youtube_mcp.transcripts.ytdlp import check_ytdlp_installed, download_subtitles

logger = logging.getLogger(__name__)


class TranscriptService:
    """
    Fetch subtitle transcripts with yt-dlp.

    Steps:
    1. Validate input and check yt-dlp is installed
    2. Download the subtitle track into a private temporary directory
    3. Parse the WebVTT file and project it to segments
    4. Remove the temporary directory, whatever happened

    Each call owns its own directory and child process, so concurrent calls
    on one instance do not interfere.
    """

    def __init__(self, binary: str | None = None, timeout: float | None = None):
        settings = get_settings()
        self.binary = binary or settings.ytdlp_binary
        self.timeout = timeout if timeout is not None else settings.ytdlp_timeout_seconds

    async def get_transcript(
        self,
        video_id: str,
        language: str,
        start_time: float | None = None,
        end_time: float | None = None,
    ) -> TranscriptResult:
        """
        Get the transcript of a video.

        Args:
            video_id: YouTube video ID (11 characters)
            language: Language code (e.g., "en", "ja", "zh-Hans")
            start_time: Optional window start in seconds
            end_time: Optional window end in seconds

        Returns:
            TranscriptResult with the segments overlapping the window

        Raises:
            TranscriptError: On any failure; no other exception type escapes
        """
        log_transcript_event(logger, str(video_id), "started", language=str(language))

        try:
            result = await self._get_transcript(video_id, language, start_time, end_time)
        except TranscriptError as e:
            log_transcript_event(
                logger, str(video_id), "failed", error_kind=e.kind.value, error=e.message
            )
            raise

        log_transcript_event(
            logger, video_id, "completed", language=language, segment_count=len(result.segments)
        )
        return result

    async def _get_transcript(
        self,
        video_id: str,
        language: str,
        start_time: float | None,
        end_time: float | None,
    ) -> TranscriptResult:
        # Fail fast on bad input before spawning anything
        validate_video_id(video_id)
        language = validate_language_code(language)

        await check_ytdlp_installed(self.binary)

        try:
            temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
        except OSError as e:
            raise TranscriptError.unknown("Failed to create temporary directory", cause=e) from e

        output_stem = temp_dir / f"{SUBTITLE_STEM_PREFIX}{secrets.token_hex(8)}"

        try:
            subtitle_path = await download_subtitles(
                video_id,
                language,
                output_stem,
                binary=self.binary,
                timeout=self.timeout,
            )

            content = await asyncio.to_thread(subtitle_path.read_text, encoding="utf-8-sig")
            entries = parse_vtt(content)

            return TranscriptResult(segments=project_segments(entries, start_time, end_time))

        except TranscriptError:
            raise
        except SubtitleParseError as e:
            raise TranscriptError.parse_error("Failed to parse subtitle content", cause=e) from e
        except Exception as e:
            raise TranscriptError.unknown(f"Unexpected error: {e}", cause=e) from e
        finally:
            _remove_workspace(temp_dir)


def _remove_workspace(temp_dir: Path) -> None:
    """Delete a temporary directory; failures are logged and discarded."""
    try:
        shutil.rmtree(temp_dir)
    except OSError as e:
        logger.debug("Failed to remove temporary directory %s: %s", temp_dir, e)


async def get_transcript(
    video_id: str,
    language: str,
    start_time: float | None = None,
    end_time: float | None = None,
) -> TranscriptResult:
    """
    Convenience function to fetch a transcript with default settings.

    Args:
        video_id: YouTube video ID
        language: Language code
        start_time: Optional window start in seconds
        end_time: Optional window end in seconds

    Returns:
        TranscriptResult
    """
    service = TranscriptService()
    return await service.get_transcript(video_id, language, start_time, end_time)
