"""Custom exceptions for the YouTube Data API layer.

Transcript acquisition failures use ``youtube_mcp.transcripts.errors.TranscriptError``.
"""


class YouTubeMCPError(Exception):
    """Base exception for server errors."""

    pass


class ValidationError(YouTubeMCPError):
    """Input failed validation."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NetworkError(YouTubeMCPError):
    """Request never produced an HTTP response (DNS, connection, bad payload)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class YouTubeApiError(YouTubeMCPError):
    """YouTube Data API returned an error or an empty lookup."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
