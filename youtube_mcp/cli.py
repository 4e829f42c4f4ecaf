"""CLI for the YouTube MCP server."""

import asyncio
import json
from enum import Enum

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from youtube_mcp.core.config import get_settings_with_yaml
from youtube_mcp.core.constants import SERVER_NAME, SERVER_VERSION
from youtube_mcp.core.logging_config import setup_logging
from youtube_mcp.transcripts import TranscriptError, TranscriptService, check_ytdlp_installed

app = typer.Typer(help="YouTube MCP server - YouTube metadata and transcripts over MCP")
console = Console()


class Transport(str, Enum):
    stdio = "stdio"
    http = "http"


@app.command()
def serve(
    transport: Transport | None = typer.Option(
        None, "--transport", "-t", help="Transport: stdio or http (default from settings)"
    ),
    host: str | None = typer.Option(None, help="HTTP bind address"),
    port: int | None = typer.Option(None, help="HTTP port"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
):
    """Start the MCP server."""
    # Imported here so `transcript` and `check` do not build the FastMCP app
    from youtube_mcp.mcp.server import run_server

    run_server(
        transport=transport.value if transport else None,
        host=host,
        port=port,
        log_level=log_level,
    )


@app.command()
def transcript(
    video_id: str = typer.Argument(..., help="YouTube video ID (11 characters)"),
    language: str = typer.Option("en", "--language", "-l", help="Subtitle language code"),
    start: float | None = typer.Option(None, "--start", help="Start of the time window (seconds)"),
    end: float | None = typer.Option(None, "--end", help="End of the time window (seconds)"),
    text: bool = typer.Option(False, "--text", help="Print plain text instead of JSON segments"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
):
    """
    Download a video's subtitles with yt-dlp and print the segments as JSON.
    """
    settings = get_settings_with_yaml()
    setup_logging(level="DEBUG" if verbose else settings.log_level)

    service = TranscriptService(binary=settings.ytdlp_binary, timeout=settings.ytdlp_timeout_seconds)
    try:
        result = asyncio.run(service.get_transcript(video_id, language, start, end))
    except TranscriptError as e:
        rprint(f"[red]✗ {e.kind.value}: {escape(e.message)}[/red]")
        raise typer.Exit(1) from e

    if text:
        console.print(result.full_text, markup=False, highlight=False)
        return

    console.print_json(json.dumps(result.model_dump(mode="json"), ensure_ascii=False))


@app.command()
def check():
    """Check that yt-dlp is installed and show the effective settings."""
    settings = get_settings_with_yaml()

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan", width=22)
    table.add_column("Value", style="white")
    table.add_row("Server", f"{SERVER_NAME} v{SERVER_VERSION}")
    table.add_row("Transport", settings.transport_mode)
    table.add_row("HTTP", f"{settings.http_host}:{settings.http_port}")
    table.add_row("yt-dlp binary", settings.ytdlp_binary)
    table.add_row("API key configured", "✓" if settings.has_api_key else "✗")
    console.print(table)

    try:
        asyncio.run(check_ytdlp_installed(settings.ytdlp_binary))
    except TranscriptError as e:
        rprint(f"\n[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(1) from e

    rprint("\n[green]✓ yt-dlp is available[/green]")


if __name__ == "__main__":
    app()
