"""yt-dlp subprocess wrapper for subtitle-only downloads."""

import asyncio
import contextlib
import logging
import os
from pathlib import Path

from youtube_mcp.core.config import get_settings
from youtube_mcp.core.constants import SUBTITLE_FORMAT, YOUTUBE_WATCH_URL
from youtube_mcp.transcripts.errors import NOT_INSTALLED_MESSAGE, TranscriptError
from youtube_mcp.transcripts.validation import validate_language_code, validate_video_id

logger = logging.getLogger(__name__)


async def check_ytdlp_installed(binary: str | None = None) -> None:
    """
    Check that yt-dlp can be run.

    A missing binary and a binary that exits nonzero on ``--version`` are
    reported the same way: both need the operator to (re)install yt-dlp.

    Args:
        binary: Executable name or path (defaults to settings.ytdlp_binary)

    Raises:
        TranscriptError: NOT_INSTALLED kind
    """
    binary = binary or get_settings().ytdlp_binary

    try:
        process = await asyncio.create_subprocess_exec(
            binary,
            "--version",
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        exit_code = await process.wait()
    except OSError as e:
        raise TranscriptError.not_installed(NOT_INSTALLED_MESSAGE, cause=e) from e

    if exit_code != 0:
        logger.debug("%s --version exited with code %s", binary, exit_code)
        raise TranscriptError.not_installed(NOT_INSTALLED_MESSAGE)


def build_ytdlp_args(video_id: str, language: str, output_stem: str | Path) -> list[str]:
    """Build the yt-dlp argument vector for a subtitle-only download."""
    return [
        "--write-subs",  # Manual subtitles first
        "--write-auto-subs",  # Auto-generated as fallback
        "--skip-download",
        "--sub-format",
        SUBTITLE_FORMAT,
        "--sub-langs",
        language,
        "--output",
        str(output_stem),  # yt-dlp appends .{lang}.{format}
        YOUTUBE_WATCH_URL.format(video_id=video_id),
    ]


def classify_ytdlp_error(
    stderr: str,
    video_id: str,
    language: str,
    exit_code: int | None,
) -> TranscriptError:
    """
    Map yt-dlp diagnostic output to a TranscriptError.

    This is best-effort substring matching on text yt-dlp does not promise to
    keep stable. The first matching rule wins; anything unrecognised becomes
    UNKNOWN carrying the raw output.

    Args:
        stderr: Captured standard error of the failed run
        video_id: Requested video ID
        language: Requested language code
        exit_code: Process exit code

    Returns:
        The classified error (not raised)
    """
    if "Video unavailable" in stderr or "ERROR: [youtube]" in stderr:
        return TranscriptError.video_unavailable(video_id)

    if "HTTP Error 429" in stderr:
        return TranscriptError.rate_limited()

    if "There are no subtitles" in stderr or "no subtitles" in stderr:
        return TranscriptError.no_subtitles(video_id, language)

    return TranscriptError.unknown(stderr or f"yt-dlp exited with code {exit_code}")


async def download_subtitles(
    video_id: str,
    language: str,
    output_stem: str | Path,
    binary: str | None = None,
    timeout: float | None = None,
) -> Path:
    """
    Download one subtitle track with yt-dlp.

    Args:
        video_id: YouTube video ID (validated again here)
        language: Subtitle language code (validated again here)
        output_stem: Output path without extension
        binary: Executable name or path (defaults to settings.ytdlp_binary)
        timeout: Seconds to wait for yt-dlp (defaults to
            settings.ytdlp_timeout_seconds; None waits indefinitely)

    Returns:
        Path to the downloaded ``{output_stem}.{language}.vtt`` file

    Raises:
        TranscriptError: On validation failure, spawn failure, nonzero exit,
            timeout, or a clean exit that produced no file
    """
    validate_video_id(video_id)
    language = validate_language_code(language)

    settings = get_settings()
    binary = binary or settings.ytdlp_binary
    if timeout is None:
        timeout = settings.ytdlp_timeout_seconds

    args = build_ytdlp_args(video_id, language, output_stem)
    env = {**os.environ, "PYTHONWARNINGS": "ignore"}

    logger.debug("Running %s %s", binary, " ".join(args))

    try:
        process = await asyncio.create_subprocess_exec(
            binary,
            *args,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
            env=env,
        )
    except OSError as e:
        raise TranscriptError.unknown("Failed to execute yt-dlp", cause=e) from e

    try:
        _, stderr_bytes = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError as e:
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        await process.wait()
        raise TranscriptError.network_error(
            f"yt-dlp timed out after {timeout:g} seconds", cause=e
        ) from e

    stderr = stderr_bytes.decode("utf-8", errors="replace") if stderr_bytes else ""
    exit_code = process.returncode

    if exit_code != 0:
        logger.debug("yt-dlp exited with code %s: %s", exit_code, stderr.strip())
        raise classify_ytdlp_error(stderr, video_id, language, exit_code)

    # yt-dlp exits 0 when the requested track simply does not exist
    expected_path = Path(f"{output_stem}.{language}.{SUBTITLE_FORMAT}")
    if not expected_path.exists():
        raise TranscriptError.no_subtitles(video_id, language)

    return expected_path
