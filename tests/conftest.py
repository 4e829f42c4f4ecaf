"""Pytest fixtures for the YouTube MCP server tests.

This module provides:
- Settings isolation (no real .env or API key leaks into tests)
- Sample subtitle data
- Fake yt-dlp child processes
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from youtube_mcp.core.config import get_settings
from youtube_mcp.core.schemas import RawSubtitleEntry

SAMPLE_VTT = """WEBVTT
Kind: captions
Language: en

00:00:00.000 --> 00:00:02.500
Hello world

00:00:02.500 --> 00:00:05.000
This is a <c>test</c> &amp; more

00:01:05.000 --> 00:01:07.250
Final line
"""


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear the settings cache and any API key from the environment."""
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    monkeypatch.delenv("YTDLP_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("YTDLP_BINARY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Sample Data
# =============================================================================


@pytest.fixture
def sample_vtt() -> str:
    """WebVTT content as yt-dlp writes it."""
    return SAMPLE_VTT


@pytest.fixture
def sample_entries() -> list[RawSubtitleEntry]:
    """Parsed subtitle entries."""
    return [
        RawSubtitleEntry(id="1", from_ms=0, to_ms=2000, text="First"),
        RawSubtitleEntry(id="2", from_ms=2000, to_ms=5000, text="  Second  "),
        RawSubtitleEntry(id="3", from_ms=10000, to_ms=12000, text="Third"),
    ]


# =============================================================================
# Mock Utilities
# =============================================================================


def make_process(returncode: int = 0, stderr: bytes = b"") -> MagicMock:
    """Build a fake asyncio subprocess."""
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(b"", stderr))
    process.wait = AsyncMock(return_value=returncode)
    process.kill = MagicMock()
    return process


@pytest.fixture
def fake_process():
    """Factory fixture for fake yt-dlp processes."""
    return make_process
