"""Mapping of raw YouTube Data API items to domain models.

Every field of an API item is optional on the wire; missing values fall back
to empty strings, ``"0"`` counters and similar neutral defaults.
"""

from typing import Any

from youtube_mcp.core.schemas import (
    ChannelDetails,
    Comment,
    CommentThread,
    PlaylistDetails,
    PlaylistItem,
    SearchResult,
    Thumbnail,
    TranscriptMetadata,
    VideoDetails,
)

Item = dict[str, Any]


def _part(item: Item, name: str) -> dict[str, Any]:
    return item.get(name) or {}


def _thumbnails(snippet: dict[str, Any]) -> dict[str, Thumbnail]:
    raw = snippet.get("thumbnails") or {}
    return {
        size: Thumbnail(url=data.get("url", ""), width=data.get("width"), height=data.get("height"))
        for size, data in raw.items()
        if isinstance(data, dict)
    }


def map_video(item: Item) -> VideoDetails:
    snippet = _part(item, "snippet")
    statistics = _part(item, "statistics")
    content_details = _part(item, "contentDetails")
    return VideoDetails(
        id=item.get("id", ""),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        channel_id=snippet.get("channelId", ""),
        channel_title=snippet.get("channelTitle", ""),
        published_at=snippet.get("publishedAt", ""),
        duration=content_details.get("duration", ""),
        view_count=statistics.get("viewCount", "0"),
        like_count=statistics.get("likeCount", "0"),
        comment_count=statistics.get("commentCount", "0"),
        thumbnails=_thumbnails(snippet),
        tags=snippet.get("tags") or [],
        category_id=snippet.get("categoryId", ""),
    )


def map_channel(item: Item) -> ChannelDetails:
    snippet = _part(item, "snippet")
    statistics = _part(item, "statistics")
    related = _part(_part(item, "contentDetails"), "relatedPlaylists")
    return ChannelDetails(
        id=item.get("id", ""),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        custom_url=snippet.get("customUrl"),
        published_at=snippet.get("publishedAt", ""),
        thumbnails=_thumbnails(snippet),
        view_count=statistics.get("viewCount", "0"),
        subscriber_count=statistics.get("subscriberCount", "0"),
        video_count=statistics.get("videoCount", "0"),
        uploads=related.get("uploads"),
    )


def map_playlist(item: Item) -> PlaylistDetails:
    snippet = _part(item, "snippet")
    return PlaylistDetails(
        id=item.get("id", ""),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        channel_id=snippet.get("channelId", ""),
        channel_title=snippet.get("channelTitle", ""),
        published_at=snippet.get("publishedAt", ""),
        thumbnails=_thumbnails(snippet),
        privacy=_part(item, "status").get("privacyStatus", "public"),
        item_count=_part(item, "contentDetails").get("itemCount", 0),
    )


def map_playlist_item(item: Item) -> PlaylistItem:
    snippet = _part(item, "snippet")
    video_id = _part(item, "contentDetails").get("videoId") or _part(snippet, "resourceId").get(
        "videoId", ""
    )
    return PlaylistItem(
        id=item.get("id", ""),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        video_id=video_id,
        channel_id=snippet.get("channelId", ""),
        channel_title=snippet.get("channelTitle", ""),
        playlist_id=snippet.get("playlistId", ""),
        position=snippet.get("position", 0),
        published_at=snippet.get("publishedAt", ""),
        thumbnails=_thumbnails(snippet),
    )


def map_search_result(item: Item) -> SearchResult:
    """Map a search hit; ``id`` is either a plain string or a kind-tagged object."""
    snippet = _part(item, "snippet")
    raw_id = item.get("id")

    if isinstance(raw_id, str):
        result_id = raw_id
        result_type = "video"
    else:
        id_obj = raw_id or {}
        result_id = id_obj.get("videoId") or id_obj.get("channelId") or id_obj.get("playlistId") or ""
        # "youtube#channel" -> "channel"
        kind = (id_obj.get("kind") or "").partition("#")[2]
        result_type = kind if kind in ("channel", "playlist") else "video"

    return SearchResult(
        id=result_id,
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        channel_id=snippet.get("channelId", ""),
        channel_title=snippet.get("channelTitle", ""),
        published_at=snippet.get("publishedAt", ""),
        thumbnails=_thumbnails(snippet),
        type=result_type,
    )


def map_comment(item: Item) -> Comment:
    snippet = _part(item, "snippet")
    return Comment(
        id=item.get("id", ""),
        video_id=snippet.get("videoId", ""),
        text_display=snippet.get("textDisplay", ""),
        text_original=snippet.get("textOriginal", ""),
        author_display_name=snippet.get("authorDisplayName", ""),
        author_profile_image_url=snippet.get("authorProfileImageUrl", ""),
        author_channel_url=snippet.get("authorChannelUrl", ""),
        author_channel_id=_part(snippet, "authorChannelId").get("value", ""),
        like_count=snippet.get("likeCount", 0),
        published_at=snippet.get("publishedAt", ""),
        updated_at=snippet.get("updatedAt", ""),
        parent_id=snippet.get("parentId"),
    )


def map_comment_thread(item: Item) -> CommentThread:
    snippet = _part(item, "snippet")
    top_level = _part(snippet, "topLevelComment")
    return CommentThread(
        id=item.get("id", ""),
        video_id=snippet.get("videoId", ""),
        top_level_comment=map_comment(
            {"id": top_level.get("id", ""), "snippet": top_level.get("snippet")}
        ),
        total_reply_count=snippet.get("totalReplyCount", 0),
        is_public=snippet.get("isPublic", True),
    )


def map_caption(item: Item) -> TranscriptMetadata:
    snippet = _part(item, "snippet")
    return TranscriptMetadata(
        language=snippet.get("language", ""),
        name=snippet.get("name", ""),
        is_auto_generated=snippet.get("isAutoSynced", False),
    )
