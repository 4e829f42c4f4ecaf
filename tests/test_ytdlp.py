"""Tests for the yt-dlp subprocess wrapper."""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from youtube_mcp.transcripts.errors import NOT_INSTALLED_MESSAGE, TranscriptError, TranscriptErrorKind
from youtube_mcp.transcripts.ytdlp import (
    build_ytdlp_args,
    check_ytdlp_installed,
    classify_ytdlp_error,
    download_subtitles,
)

VIDEO_ID = "dQw4w9WgXcQ"
SPAWN = "youtube_mcp.transcripts.ytdlp.asyncio.create_subprocess_exec"


class TestCheckInstalled:
    """Test the yt-dlp installation check."""

    @pytest.mark.asyncio
    async def test_installed(self, fake_process):
        """Test installed."""
        with patch(SPAWN, new=AsyncMock(return_value=fake_process(0))) as spawn:
            await check_ytdlp_installed("yt-dlp")

        args = spawn.call_args.args
        assert args == ("yt-dlp", "--version")

    @pytest.mark.asyncio
    async def test_missing_binary(self):
        """Test missing binary."""
        with patch(SPAWN, new=AsyncMock(side_effect=FileNotFoundError("yt-dlp"))):
            with pytest.raises(TranscriptError) as exc_info:
                await check_ytdlp_installed("yt-dlp")

        assert exc_info.value.kind == TranscriptErrorKind.NOT_INSTALLED
        assert exc_info.value.message == NOT_INSTALLED_MESSAGE

    @pytest.mark.asyncio
    async def test_nonzero_exit(self, fake_process):
        """Test nonzero exit."""
        with patch(SPAWN, new=AsyncMock(return_value=fake_process(1))):
            with pytest.raises(TranscriptError) as exc_info:
                await check_ytdlp_installed("yt-dlp")

        assert exc_info.value.kind == TranscriptErrorKind.NOT_INSTALLED


class TestBuildArgs:
    """Test the yt-dlp argument vector."""

    def test_argument_vector(self):
        """Test argument vector."""
        args = build_ytdlp_args(VIDEO_ID, "en", Path("/tmp/x/subtitle_abc"))
        assert args == [
            "--write-subs",
            "--write-auto-subs",
            "--skip-download",
            "--sub-format",
            "vtt",
            "--sub-langs",
            "en",
            "--output",
            "/tmp/x/subtitle_abc",
            f"https://www.youtube.com/watch?v={VIDEO_ID}",
        ]


class TestClassifyError:
    """Test stderr classification."""

    def test_video_unavailable(self):
        """Test video unavailable."""
        error = classify_ytdlp_error(
            f"ERROR: [youtube] {VIDEO_ID}: Video unavailable", VIDEO_ID, "en", 1
        )
        assert error.kind == TranscriptErrorKind.VIDEO_UNAVAILABLE

    def test_youtube_error_prefix(self):
        """Test youtube error prefix."""
        error = classify_ytdlp_error(f"ERROR: [youtube] {VIDEO_ID}: Private video", VIDEO_ID, "en", 1)
        assert error.kind == TranscriptErrorKind.VIDEO_UNAVAILABLE

    def test_rate_limited(self):
        """Test rate limited."""
        stderr = "ERROR: Unable to download video subtitles for 'en': HTTP Error 429: Too Many Requests"
        error = classify_ytdlp_error(stderr, VIDEO_ID, "en", 1)
        assert error.kind == TranscriptErrorKind.RATE_LIMITED

    def test_unavailable_wins_over_rate_limit(self):
        """Test unavailable wins over rate limit."""
        stderr = f"ERROR: [youtube] {VIDEO_ID}: HTTP Error 429: Too Many Requests"
        error = classify_ytdlp_error(stderr, VIDEO_ID, "en", 1)
        assert error.kind == TranscriptErrorKind.VIDEO_UNAVAILABLE

    def test_no_subtitles(self):
        """Test no subtitles."""
        stderr = "WARNING: There are no subtitles for the requested languages"
        error = classify_ytdlp_error(stderr, VIDEO_ID, "ja", 1)
        assert error.kind == TranscriptErrorKind.NO_SUBTITLES
        assert error.message == f"No subtitles available for video {VIDEO_ID} in language ja"

    def test_unknown_keeps_stderr(self):
        """Test unknown keeps stderr."""
        error = classify_ytdlp_error("something odd", VIDEO_ID, "en", 2)
        assert error.kind == TranscriptErrorKind.UNKNOWN
        assert error.message == "something odd"

    def test_unknown_empty_stderr(self):
        """Test unknown empty stderr."""
        error = classify_ytdlp_error("", VIDEO_ID, "en", 2)
        assert error.message == "yt-dlp exited with code 2"


class TestDownloadSubtitles:
    """Test subtitle download."""

    @pytest.mark.asyncio
    async def test_success_returns_expected_path(self, tmp_path, fake_process):
        """Test success returns expected path."""
        stem = tmp_path / "subtitle_abc"
        expected = tmp_path / "subtitle_abc.en.vtt"
        expected.write_text("WEBVTT\n", encoding="utf-8")

        with patch(SPAWN, new=AsyncMock(return_value=fake_process(0))) as spawn:
            path = await download_subtitles(VIDEO_ID, "en", stem, binary="yt-dlp")

        assert path == expected
        args = spawn.call_args.args
        assert args[0] == "yt-dlp"
        assert list(args[1:]) == build_ytdlp_args(VIDEO_ID, "en", stem)

    @pytest.mark.asyncio
    async def test_child_env_silences_warnings(self, tmp_path, fake_process, monkeypatch):
        """Test child env silences warnings."""
        monkeypatch.setenv("YT_MCP_TEST_MARKER", "1")
        stem = tmp_path / "subtitle_abc"
        (tmp_path / "subtitle_abc.en.vtt").write_text("WEBVTT\n", encoding="utf-8")

        with patch(SPAWN, new=AsyncMock(return_value=fake_process(0))) as spawn:
            await download_subtitles(VIDEO_ID, "en", stem, binary="yt-dlp")

        env = spawn.call_args.kwargs["env"]
        assert env["PYTHONWARNINGS"] == "ignore"
        assert env["YT_MCP_TEST_MARKER"] == "1"

    @pytest.mark.asyncio
    async def test_clean_exit_without_file_is_no_subtitles(self, tmp_path, fake_process):
        """Test clean exit without file is no subtitles."""
        stem = tmp_path / "subtitle_abc"

        with patch(SPAWN, new=AsyncMock(return_value=fake_process(0))):
            with pytest.raises(TranscriptError) as exc_info:
                await download_subtitles(VIDEO_ID, "fr", stem, binary="yt-dlp")

        assert exc_info.value.kind == TranscriptErrorKind.NO_SUBTITLES
        assert exc_info.value.message == f"No subtitles available for video {VIDEO_ID} in language fr"

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_classified(self, tmp_path, fake_process):
        """Test nonzero exit is classified."""
        process = fake_process(1, b"ERROR: [youtube] dQw4w9WgXcQ: Video unavailable")

        with patch(SPAWN, new=AsyncMock(return_value=process)):
            with pytest.raises(TranscriptError) as exc_info:
                await download_subtitles(VIDEO_ID, "en", tmp_path / "s", binary="yt-dlp")

        assert exc_info.value.kind == TranscriptErrorKind.VIDEO_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_spawn_failure(self, tmp_path):
        """Test spawn failure."""
        with patch(SPAWN, new=AsyncMock(side_effect=PermissionError("denied"))):
            with pytest.raises(TranscriptError) as exc_info:
                await download_subtitles(VIDEO_ID, "en", tmp_path / "s", binary="yt-dlp")

        assert exc_info.value.kind == TranscriptErrorKind.UNKNOWN
        assert exc_info.value.message == "Failed to execute yt-dlp"

    @pytest.mark.asyncio
    async def test_invalid_input_spawns_nothing(self, tmp_path):
        """Test invalid input spawns nothing."""
        spawn = AsyncMock()
        with patch(SPAWN, new=spawn):
            with pytest.raises(TranscriptError):
                await download_subtitles("bad", "en", tmp_path / "s", binary="yt-dlp")
            with pytest.raises(TranscriptError):
                await download_subtitles(VIDEO_ID, "english", tmp_path / "s", binary="yt-dlp")

        spawn.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_kills_child(self, tmp_path, fake_process):
        """Test timeout kills child."""
        process = fake_process(0)

        async def hang():
            await asyncio.sleep(10)

        process.communicate = AsyncMock(side_effect=hang)

        with patch(SPAWN, new=AsyncMock(return_value=process)):
            with pytest.raises(TranscriptError) as exc_info:
                await download_subtitles(
                    VIDEO_ID, "en", tmp_path / "s", binary="yt-dlp", timeout=0.05
                )

        assert exc_info.value.kind == TranscriptErrorKind.NETWORK_ERROR
        assert exc_info.value.message == "yt-dlp timed out after 0.05 seconds"
        process.kill.assert_called_once()
