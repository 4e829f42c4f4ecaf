"""MCP tools for comments.

Both tools are paginated: pass the returned ``nextPageToken`` back as
``pageToken`` to get the following page.
"""

import asyncio
from typing import Any

from youtube_mcp.api import comments as comments_api
from youtube_mcp.mcp.schemas import GetCommentRepliesInput, GetCommentThreadsInput


async def get_comment_threads(params: GetCommentThreadsInput, api_key: str) -> dict[str, Any]:
    """Retrieve one page of comment threads for a video.

    Returns:
        dict with keys:
            - items: List of comment threads
            - nextPageToken: Token for the next page, or None
    """
    page = await asyncio.to_thread(
        comments_api.get_comment_threads,
        params.video_id,
        api_key,
        params.max_results,
        params.page_token,
        params.order,
    )
    return page.to_wire()


async def get_comment_replies(params: GetCommentRepliesInput, api_key: str) -> dict[str, Any]:
    """Retrieve one page of replies to a comment."""
    page = await asyncio.to_thread(
        comments_api.get_comment_replies,
        params.parent_id,
        api_key,
        params.max_results,
        params.page_token,
    )
    return page.to_wire()
