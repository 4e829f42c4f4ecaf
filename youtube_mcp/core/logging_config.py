"""Structured logging configuration for the YouTube MCP server.

Everything under the ``youtube_mcp`` logger tree is rendered by rich on
stderr. Extra fields passed by the ``log_*`` helpers are kept on the record
for file handlers and log shippers.
"""

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "youtube_mcp"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# stdout carries the MCP stdio stream
console = Console(stderr=True)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: str | int = "INFO",
    log_file: Path | str | None = None,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """
    Configure the ``youtube_mcp`` logger tree.

    Safe to call more than once; previous handlers are replaced.

    Args:
        level: Logging level name or number
        log_file: Optional file that additionally receives DEBUG and above
        rich_tracebacks: Render exception tracebacks with rich

    Returns:
        The ``youtube_mcp`` logger
    """
    numeric_level = _resolve_level(level)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(min(numeric_level, logging.DEBUG) if log_file else numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console,
        level=numeric_level,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=numeric_level <= logging.DEBUG,
        show_path=numeric_level <= logging.DEBUG,
        markup=False,
    )
    root.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root.addHandler(file_handler)

    # Keep records away from handlers the mcp/uvicorn stack installs on the root logger
    root.propagate = False

    root.debug("Logging initialized (level=%s)", logging.getLevelName(numeric_level))
    return root


def _fields(**values: Any) -> dict[str, Any]:
    """Drop unset fields so records only carry what is known."""
    return {key: value for key, value in values.items() if value is not None}


def log_api_request(
    logger_instance: logging.Logger,
    endpoint: str,
    status_code: int | None,
    duration_ms: float,
    error: str | None = None,
) -> None:
    """
    Log one YouTube Data API call.

    Successful calls are DEBUG; HTTP errors and calls that got no response
    (``status_code`` None) are WARNING.
    """
    failed = status_code is None or status_code >= 400
    logger_instance.log(
        logging.WARNING if failed else logging.DEBUG,
        "GET %s -> %s (%.1fms)",
        endpoint,
        "no response" if status_code is None else status_code,
        duration_ms,
        extra=_fields(
            endpoint=endpoint,
            status_code=status_code,
            duration_ms=round(duration_ms, 1),
            error=error,
        ),
    )


_TRANSCRIPT_EVENT_LEVELS = {
    "failed": logging.WARNING,
    "completed": logging.INFO,
}


def log_transcript_event(
    logger_instance: logging.Logger,
    video_id: str,
    event: str,
    language: str | None = None,
    segment_count: int | None = None,
    error_kind: str | None = None,
    error: str | None = None,
) -> None:
    """
    Log a step of transcript acquisition.

    Args:
        logger_instance: Logger to use
        video_id: YouTube video ID
        event: "started", "completed" or "failed"
        language: Requested subtitle language
        segment_count: Number of segments returned
        error_kind: TranscriptErrorKind value if failed
        error: Error message if failed
    """
    details = [f"language={language}"] if language else []
    if segment_count is not None:
        details.append(f"segments={segment_count}")
    if error_kind:
        details.append(f"{error_kind}: {error}")

    logger_instance.log(
        _TRANSCRIPT_EVENT_LEVELS.get(event, logging.INFO),
        "Transcript %s for %s%s",
        event,
        video_id,
        f" ({', '.join(details)})" if details else "",
        extra=_fields(
            video_id=video_id,
            event=event,
            language=language,
            segment_count=segment_count,
            error_kind=error_kind,
            error=error,
        ),
    )
