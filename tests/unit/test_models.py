"""
Unit Tests for typed resources
"""

from datetime import datetime, timezone

from ytclient.domain.models import Channel, Comment, Playlist, Subscription, Video


class TestVideo:
    """Test video mapping"""

    def test_full_resource(self):
        data = {
            "kind": "youtube#video",
            "id": "test_video_id",
            "snippet": {
                "title": "Test Video",
                "description": "Test Description",
                "publishedAt": "2024-01-01T00:00:00Z",
                "channelId": "test_channel",
                "channelTitle": "Test Channel",
                "thumbnails": {"high": {"url": "https://i.ytimg.com/hq.jpg", "width": 480}},
                "categoryId": "10",
            },
            "statistics": {"viewCount": "1000", "likeCount": "100", "commentCount": "10"},
            "contentDetails": {
                "duration": "PT5M30S",
                "definition": "hd",
                "caption": "false",
                "licensedContent": True,
            },
        }

        video = Video.from_resource(data)

        assert video.title == "Test Video"
        assert video.snippet.published_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert video.snippet.thumbnails["high"].width == 480
        assert video.statistics.view_count == 1000
        assert video.content_details.duration == "PT5M30S"
        assert video.url == "https://youtube.com/watch?v=test_video_id"
        assert video.data == data


class TestChannel:
    """Test channel mapping"""

    def test_uploads_playlist(self):
        channel = Channel.from_resource(
            {
                "id": "UC1",
                "snippet": {"title": "Chan"},
                "contentDetails": {"relatedPlaylists": {"uploads": "UU1"}},
            }
        )

        assert channel.name == "Chan"
        assert channel.uploads_playlist_id == "UU1"
        assert channel.url == "https://youtube.com/channel/UC1"

    def test_partial_resource(self):
        channel = Channel.from_resource({"id": "UC1"})

        assert channel.name is None
        assert channel.statistics is None
        assert channel.uploads_playlist_id is None


class TestPlaylistAndSubscription:
    """Test playlist and subscription mapping"""

    def test_playlist(self):
        playlist = Playlist.from_resource(
            {"id": "PL1", "snippet": {"title": "Mix"}, "contentDetails": {"itemCount": 7}}
        )

        assert playlist.title == "Mix"
        assert playlist.content_details.item_count == 7
        assert playlist.url.endswith("list=PL1")

    def test_subscription_target_channel(self):
        subscription = Subscription.from_resource(
            {
                "id": "sub1",
                "snippet": {
                    "channelId": "UC_me",
                    "resourceId": {"kind": "youtube#channel", "channelId": "UC_them"},
                },
            }
        )

        assert subscription.channel_id == "UC_them"
        assert subscription.snippet.channel_id == "UC_me"

    def test_subscription_without_snippet(self):
        assert Subscription.from_resource({"id": "sub1"}).channel_id is None


class TestComment:
    """Test comment mapping"""

    def test_channel_comment(self):
        comment = Comment.from_resource(
            {
                "id": "c1",
                "snippet": {
                    "textDisplay": "<b>hi</b>",
                    "authorChannelId": {"value": "UC_author"},
                    "channelId": "UC_owner",
                    "likeCount": 3,
                },
            },
            "channel",
        )

        assert comment.type == "channel"
        assert comment.text == "<b>hi</b>"
        assert comment.author_channel_id == "UC_author"
        assert comment.snippet.like_count == 3
        assert comment.url == "https://youtube.com/channel/UC_owner/discussion?lc=c1"
        assert comment.replies == []

    def test_replies_are_independent(self):
        first = Comment.from_resource({"id": "c1"})
        second = Comment.from_resource({"id": "c2"})

        first.replies.append(Comment.from_resource({"id": "r1"}))

        assert second.replies == []
        assert first.type == "video"
