"""Allow ``python -m youtube_mcp``."""

from youtube_mcp.cli import app

app()
