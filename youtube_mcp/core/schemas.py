"""Pydantic schemas for YouTube metadata and subtitle transcripts."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with the camelCase names used by the YouTube API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class Thumbnail(BaseModel):
    """A single thumbnail rendition."""

    url: str
    width: int | None = None
    height: int | None = None


Thumbnails = dict[str, Thumbnail]


# =============================================================================
# Data API domain models
# =============================================================================


class VideoDetails(CamelModel):
    """Details of a single video."""

    id: str
    title: str = ""
    description: str = ""
    channel_id: str = ""
    channel_title: str = ""
    published_at: str = ""
    duration: str = Field("", description="ISO 8601 duration, e.g. PT4M13S")
    view_count: str = "0"
    like_count: str = "0"
    comment_count: str = "0"
    thumbnails: Thumbnails = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    category_id: str = ""


class ChannelDetails(CamelModel):
    """Details of a single channel."""

    id: str
    title: str = ""
    description: str = ""
    custom_url: str | None = None
    published_at: str = ""
    thumbnails: Thumbnails = Field(default_factory=dict)
    view_count: str = "0"
    subscriber_count: str = "0"
    video_count: str = "0"
    uploads: str | None = Field(None, description="ID of the channel's uploads playlist")


class PlaylistDetails(CamelModel):
    """Details of a single playlist."""

    id: str
    title: str = ""
    description: str = ""
    channel_id: str = ""
    channel_title: str = ""
    published_at: str = ""
    thumbnails: Thumbnails = Field(default_factory=dict)
    item_count: int = 0
    privacy: str = "public"


class PlaylistItem(CamelModel):
    """A video entry inside a playlist."""

    id: str
    title: str = ""
    description: str = ""
    video_id: str = ""
    channel_id: str = ""
    channel_title: str = ""
    playlist_id: str = ""
    position: int = 0
    published_at: str = ""
    thumbnails: Thumbnails = Field(default_factory=dict)


class SearchResult(CamelModel):
    """A search hit: a video, channel or playlist."""

    id: str
    title: str = ""
    description: str = ""
    channel_id: str = ""
    channel_title: str = ""
    published_at: str = ""
    thumbnails: Thumbnails = Field(default_factory=dict)
    type: Literal["video", "channel", "playlist"] = "video"


class Comment(CamelModel):
    """A top-level comment or a reply."""

    id: str
    video_id: str = ""
    text_display: str = ""
    text_original: str = ""
    author_display_name: str = ""
    author_profile_image_url: str = ""
    author_channel_url: str = ""
    author_channel_id: str = ""
    like_count: int = 0
    published_at: str = ""
    updated_at: str = ""
    parent_id: str | None = None


class CommentThread(CamelModel):
    """A top-level comment with its reply count."""

    id: str
    video_id: str = ""
    top_level_comment: Comment
    total_reply_count: int = 0
    is_public: bool = True


class CommentThreadPage(CamelModel):
    """One page of comment threads."""

    items: list[CommentThread] = Field(default_factory=list)
    next_page_token: str | None = None


class CommentPage(CamelModel):
    """One page of comment replies."""

    items: list[Comment] = Field(default_factory=list)
    next_page_token: str | None = None


class TranscriptMetadata(CamelModel):
    """A caption track advertised by the Data API."""

    language: str = ""
    name: str = ""
    is_auto_generated: bool = False


# =============================================================================
# Subtitle transcript models
# =============================================================================


class RawSubtitleEntry(BaseModel):
    """One cue as produced by the subtitle container parser."""

    id: str = ""
    from_ms: int = Field(..., ge=0, description="Cue start in milliseconds")
    to_ms: int = Field(..., ge=0, description="Cue end in milliseconds")
    text: str


class TranscriptSegment(BaseModel):
    """A single transcript segment, in seconds."""

    start: float
    end: float
    text: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration(self) -> float:
        return self.end - self.start


class TranscriptResult(BaseModel):
    """Transcript returned to tool callers."""

    segments: list[TranscriptSegment]

    @property
    def full_text(self) -> str:
        return " ".join(s.text for s in self.segments)
