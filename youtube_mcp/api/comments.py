"""Comment threads and replies."""

from typing import Literal

from youtube_mcp.api.fetcher import fetch_api
from youtube_mcp.api.mappers import map_comment, map_comment_thread
from youtube_mcp.core.schemas import CommentPage, CommentThreadPage

CommentOrder = Literal["relevance", "time"]


def get_comment_threads(
    video_id: str,
    api_key: str,
    max_results: int = 20,
    page_token: str | None = None,
    order: CommentOrder = "relevance",
) -> CommentThreadPage:
    """
    Get one page of top-level comment threads for a video.

    Args:
        video_id: YouTube video ID
        api_key: Data API key
        max_results: Threads per page (1-100)
        page_token: Token from a previous page's ``nextPageToken``
        order: "relevance" or "time"

    Returns:
        CommentThreadPage with items and the next page token, if any
    """
    data = fetch_api(
        "commentThreads",
        {
            "part": "snippet",
            "videoId": video_id,
            "maxResults": max_results,
            "order": order,
            "pageToken": page_token,
        },
        api_key,
    )
    return CommentThreadPage(
        items=[map_comment_thread(item) for item in data.get("items") or []],
        next_page_token=data.get("nextPageToken"),
    )


def get_comment_replies(
    parent_id: str,
    api_key: str,
    max_results: int = 20,
    page_token: str | None = None,
) -> CommentPage:
    """Get one page of replies to a top-level comment."""
    data = fetch_api(
        "comments",
        {
            "part": "snippet",
            "parentId": parent_id,
            "maxResults": max_results,
            "pageToken": page_token,
        },
        api_key,
    )
    return CommentPage(
        items=[map_comment(item) for item in data.get("items") or []],
        next_page_token=data.get("nextPageToken"),
    )
