"""Tests for Data API item mapping."""

from youtube_mcp.api.mappers import (
    map_caption,
    map_channel,
    map_comment_thread,
    map_playlist,
    map_playlist_item,
    map_search_result,
    map_video,
)


class TestMapVideo:
    """Test video mapping."""

    def test_full_item(self):
        """Test full item."""
        video = map_video(
            {
                "id": "dQw4w9WgXcQ",
                "snippet": {
                    "title": "Title",
                    "channelId": "UC1",
                    "tags": ["a", "b"],
                    "thumbnails": {"default": {"url": "http://t", "width": 120, "height": 90}},
                },
                "statistics": {"viewCount": "100", "likeCount": "5"},
                "contentDetails": {"duration": "PT3M33S"},
            }
        )

        assert video.id == "dQw4w9WgXcQ"
        assert video.title == "Title"
        assert video.view_count == "100"
        assert video.duration == "PT3M33S"
        assert video.thumbnails["default"].width == 120
        assert video.tags == ["a", "b"]

    def test_missing_parts_use_defaults(self):
        """Test missing parts use defaults."""
        video = map_video({"id": "x"})

        assert video.title == ""
        assert video.view_count == "0"
        assert video.comment_count == "0"
        assert video.tags == []
        assert video.thumbnails == {}

    def test_wire_format_is_camel_case(self):
        """Test wire format is camel case."""
        wire = map_video({"id": "x", "snippet": {"channelTitle": "Chan"}}).to_wire()
        assert wire["channelTitle"] == "Chan"
        assert "channel_title" not in wire


class TestMapSearchResult:
    """Test search hit mapping."""

    def test_string_id_is_video(self):
        """Test string id is video."""
        result = map_search_result({"id": "abc"})
        assert result.id == "abc"
        assert result.type == "video"

    def test_channel_hit(self):
        """Test channel hit."""
        result = map_search_result({"id": {"kind": "youtube#channel", "channelId": "UC1"}})
        assert result.id == "UC1"
        assert result.type == "channel"

    def test_playlist_hit(self):
        """Test playlist hit."""
        result = map_search_result({"id": {"kind": "youtube#playlist", "playlistId": "PL1"}})
        assert result.id == "PL1"
        assert result.type == "playlist"

    def test_video_hit(self):
        """Test video hit."""
        result = map_search_result({"id": {"kind": "youtube#video", "videoId": "v1"}})
        assert result.type == "video"


class TestMapOthers:
    """Test channel, playlist, comment and caption mapping."""

    def test_channel_uploads(self):
        """Test channel uploads."""
        channel = map_channel(
            {"id": "UC1", "contentDetails": {"relatedPlaylists": {"uploads": "UU1"}}}
        )
        assert channel.uploads == "UU1"
        assert channel.subscriber_count == "0"
        assert channel.custom_url is None

    def test_playlist_defaults(self):
        """Test playlist defaults."""
        playlist = map_playlist({"id": "PL1"})
        assert playlist.privacy == "public"
        assert playlist.item_count == 0

    def test_playlist_item_video_id_fallback(self):
        """Test playlist item video id fallback."""
        item = map_playlist_item({"id": "i1", "snippet": {"resourceId": {"videoId": "v1"}}})
        assert item.video_id == "v1"

    def test_comment_thread(self):
        """Test comment thread."""
        thread = map_comment_thread(
            {
                "id": "t1",
                "snippet": {
                    "videoId": "v1",
                    "totalReplyCount": 2,
                    "topLevelComment": {
                        "id": "c1",
                        "snippet": {
                            "textDisplay": "Nice",
                            "authorChannelId": {"value": "UC9"},
                            "likeCount": 3,
                        },
                    },
                },
            }
        )
        assert thread.total_reply_count == 2
        assert thread.top_level_comment.id == "c1"
        assert thread.top_level_comment.author_channel_id == "UC9"
        assert thread.top_level_comment.like_count == 3

    def test_caption(self):
        """Test caption."""
        caption = map_caption({"snippet": {"language": "en", "name": "", "isAutoSynced": True}})
        assert caption.language == "en"
        assert caption.is_auto_generated is True
