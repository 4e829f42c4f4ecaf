"""Input schemas for MCP tools.

Arguments are accepted in either camelCase (``videoId``) or snake_case
(``video_id``).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ToolInput(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


VideoPart = Literal["snippet", "statistics", "contentDetails"]


class GetVideoInput(ToolInput):
    video_id: str = Field(..., min_length=1, description="YouTube video ID")
    parts: list[VideoPart] | None = Field(None, description="Resource parts to fetch")


class SearchVideosInput(ToolInput):
    query: str = Field(..., min_length=1, description="Search query")
    max_results: int = Field(10, ge=1, le=50, description="Maximum number of results (1-50)")
    order: Literal["relevance", "date", "rating", "viewCount", "title"] = "relevance"
    type: Literal["video", "channel", "playlist"] = "video"


class GetChannelInput(ToolInput):
    channel_id: str = Field(..., min_length=1, description="YouTube channel ID")


class GetChannelVideosInput(ToolInput):
    channel_id: str = Field(..., min_length=1, description="YouTube channel ID")
    max_results: int = Field(10, ge=1, le=50, description="Maximum number of results (1-50)")
    order: Literal["date", "rating", "viewCount", "title"] = "date"


class GetPlaylistInput(ToolInput):
    playlist_id: str = Field(..., min_length=1, description="YouTube playlist ID")


class GetPlaylistItemsInput(ToolInput):
    playlist_id: str = Field(..., min_length=1, description="YouTube playlist ID")
    max_results: int = Field(10, ge=1, le=50, description="Maximum number of results (1-50)")


class GetCommentThreadsInput(ToolInput):
    video_id: str = Field(..., min_length=1, description="YouTube video ID")
    max_results: int = Field(20, ge=1, le=100, description="Maximum number of results (1-100)")
    page_token: str | None = Field(None, description="Pagination token")
    order: Literal["relevance", "time"] = "relevance"


class GetCommentRepliesInput(ToolInput):
    parent_id: str = Field(..., min_length=1, description="Parent comment ID")
    max_results: int = Field(20, ge=1, le=100, description="Maximum number of results (1-100)")
    page_token: str | None = Field(None, description="Pagination token")


class GetTranscriptMetadataInput(ToolInput):
    video_id: str = Field(..., min_length=1, description="YouTube video ID")


class GetTranscriptInput(ToolInput):
    video_id: str = Field(..., min_length=1, description="YouTube video ID")
    language: str = Field(..., min_length=1, description="Language code (e.g., en, ja)")
    start_time: float | None = Field(None, ge=0, description="Start time in seconds")
    end_time: float | None = Field(None, ge=0, description="End time in seconds")
