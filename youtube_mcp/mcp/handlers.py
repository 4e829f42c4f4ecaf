"""Tool dispatch for the MCP server.

Maps every tool name to its argument schema and handler, validates incoming
arguments and serializes the handler result to JSON text.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from youtube_mcp.api.api_key import validate_api_key
from youtube_mcp.core.constants import ToolNames
from youtube_mcp.mcp import schemas, tools

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """Registry entry for a single tool.

    Attributes:
        input_model: Pydantic model the raw arguments are validated against
        handler: Coroutine taking the validated model and the API key
        requires_api_key: Whether the tool calls the YouTube Data API
    """

    input_model: type[BaseModel]
    handler: Callable[[Any, Any], Awaitable[Any]]
    requires_api_key: bool = True


TOOL_REGISTRY: dict[str, ToolSpec] = {
    ToolNames.GET_VIDEO: ToolSpec(schemas.GetVideoInput, tools.get_video),
    ToolNames.SEARCH_VIDEOS: ToolSpec(schemas.SearchVideosInput, tools.search_videos),
    ToolNames.GET_CHANNEL: ToolSpec(schemas.GetChannelInput, tools.get_channel),
    ToolNames.GET_CHANNEL_VIDEOS: ToolSpec(schemas.GetChannelVideosInput, tools.get_channel_videos),
    ToolNames.GET_PLAYLIST: ToolSpec(schemas.GetPlaylistInput, tools.get_playlist),
    ToolNames.GET_PLAYLIST_ITEMS: ToolSpec(schemas.GetPlaylistItemsInput, tools.get_playlist_items),
    ToolNames.GET_COMMENT_THREADS: ToolSpec(
        schemas.GetCommentThreadsInput, tools.get_comment_threads
    ),
    ToolNames.GET_COMMENT_REPLIES: ToolSpec(
        schemas.GetCommentRepliesInput, tools.get_comment_replies
    ),
    ToolNames.GET_TRANSCRIPT_METADATA: ToolSpec(
        schemas.GetTranscriptMetadataInput, tools.get_transcript_metadata
    ),
    ToolNames.GET_TRANSCRIPT: ToolSpec(
        schemas.GetTranscriptInput, tools.get_transcript, requires_api_key=False
    ),
}


def requires_api_key(tool_name: str) -> bool:
    """Whether ``tool_name`` needs a YouTube Data API key."""
    spec = TOOL_REGISTRY.get(tool_name)
    return spec is not None and spec.requires_api_key


async def handle_tool_request(
    tool_name: str,
    arguments: dict[str, Any] | None,
    api_key: str | None,
) -> str:
    """
    Validate arguments, run the tool and return its result as JSON text.

    Args:
        tool_name: One of the names in ``ToolNames``
        arguments: Raw tool arguments (camelCase or snake_case keys)
        api_key: YouTube Data API key, may be None for keyless tools

    Returns:
        JSON-encoded tool result

    Raises:
        ValueError: For an unknown tool name
        pydantic.ValidationError: If the arguments do not match the schema
        ValidationError: If the tool needs an API key and none was given
        YouTubeMCPError / TranscriptError: Whatever the handler raises
    """
    spec = TOOL_REGISTRY.get(tool_name)
    if spec is None:
        raise ValueError(f"Unknown tool: {tool_name}")

    params = spec.input_model.model_validate(arguments or {})

    key = validate_api_key(api_key) if spec.requires_api_key else api_key

    logger.debug("Running tool %s", tool_name)
    result = await spec.handler(params, key)
    return json.dumps(result, ensure_ascii=False, indent=2)
