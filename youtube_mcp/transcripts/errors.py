"""Error taxonomy for yt-dlp transcript acquisition.

Every failure on the transcript path surfaces as a ``TranscriptError`` tagged
with exactly one ``TranscriptErrorKind``. Instances are built through the
classmethod factories, one per kind, so the kind and its default message always
agree.
"""

from enum import Enum

from youtube_mcp.core.constants import YTDLP_INSTALL_URL


class TranscriptErrorKind(str, Enum):
    """Failure classes of the transcript pipeline."""

    NOT_INSTALLED = "NOT_INSTALLED"
    RATE_LIMITED = "RATE_LIMITED"
    NO_SUBTITLES = "NO_SUBTITLES"
    VIDEO_UNAVAILABLE = "VIDEO_UNAVAILABLE"
    NETWORK_ERROR = "NETWORK_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN = "UNKNOWN"


class TranscriptError(Exception):
    """Failed to acquire a transcript.

    Attributes:
        kind: Which failure class this is
        message: Human-readable, never empty
        cause: Underlying exception, if any (also chained as ``__cause__``)
    """

    def __init__(
        self,
        kind: TranscriptErrorKind,
        message: str,
        cause: BaseException | None = None,
    ):
        if not message:
            raise ValueError("TranscriptError message must not be empty")
        super().__init__(message)
        self._kind = kind
        self._message = message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def kind(self) -> TranscriptErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def __repr__(self) -> str:
        return f"TranscriptError({self._kind.value}, {self._message!r})"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def not_installed(
        cls, message: str | None = None, cause: BaseException | None = None
    ) -> "TranscriptError":
        return cls(TranscriptErrorKind.NOT_INSTALLED, message or "yt-dlp is not installed", cause)

    @classmethod
    def rate_limited(
        cls, message: str | None = None, cause: BaseException | None = None
    ) -> "TranscriptError":
        return cls(TranscriptErrorKind.RATE_LIMITED, message or "YouTube rate limit exceeded", cause)

    @classmethod
    def no_subtitles(
        cls,
        video_id: str,
        language: str | None = None,
        message: str | None = None,
        cause: BaseException | None = None,
    ) -> "TranscriptError":
        if message is None:
            message = f"No subtitles available for video {video_id}"
            if language:
                message += f" in language {language}"
        return cls(TranscriptErrorKind.NO_SUBTITLES, message, cause)

    @classmethod
    def video_unavailable(
        cls,
        video_id: str,
        message: str | None = None,
        cause: BaseException | None = None,
    ) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.VIDEO_UNAVAILABLE,
            message or f"Video {video_id} is unavailable or private",
            cause,
        )

    @classmethod
    def network_error(
        cls, message: str | None = None, cause: BaseException | None = None
    ) -> "TranscriptError":
        return cls(TranscriptErrorKind.NETWORK_ERROR, message or "Network error occurred", cause)

    @classmethod
    def parse_error(
        cls, message: str | None = None, cause: BaseException | None = None
    ) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.PARSE_ERROR, message or "Failed to parse subtitle content", cause
        )

    @classmethod
    def unknown(
        cls, message: str | None = None, cause: BaseException | None = None
    ) -> "TranscriptError":
        return cls(TranscriptErrorKind.UNKNOWN, message or "Unknown error occurred", cause)


NOT_INSTALLED_MESSAGE = (
    f"yt-dlp is not installed. Please install it first: {YTDLP_INSTALL_URL}"
)
