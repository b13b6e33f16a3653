# src/ytclient/domain/models.py
"""
Typed YouTube resources.

Each model is built from a raw Data API resource with ``from_resource`` and
keeps that raw dict on ``.data``. Mutation endpoints echo partial resources,
so nearly every field is optional.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CommentType = Literal["channel", "video"]

WATCH_URL = "https://youtube.com/watch?v="


class APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Thumbnail(APIModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class YouTubeResource(APIModel):
    """Fields common to every Data API resource"""

    kind: Optional[str] = None
    etag: Optional[str] = None
    id: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    @classmethod
    def from_resource(cls, data: Dict[str, Any], **extra: Any):
        return cls.model_validate({**data, **extra, "data": data})


# ============================================================================
# Channels
# ============================================================================


class ChannelSnippet(APIModel):
    title: Optional[str] = None
    description: Optional[str] = None
    custom_url: Optional[str] = Field(default=None, alias="customUrl")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    thumbnails: Dict[str, Thumbnail] = Field(default_factory=dict)
    country: Optional[str] = None


class ChannelStatistics(APIModel):
    view_count: int = Field(alias="viewCount", default=0)
    subscriber_count: int = Field(alias="subscriberCount", default=0)
    hidden_subscriber_count: bool = Field(alias="hiddenSubscriberCount", default=False)
    video_count: int = Field(alias="videoCount", default=0)


class ChannelContentDetails(APIModel):
    related_playlists: Dict[str, str] = Field(
        alias="relatedPlaylists", default_factory=dict
    )


class Channel(YouTubeResource):
    snippet: Optional[ChannelSnippet] = None
    statistics: Optional[ChannelStatistics] = None
    content_details: Optional[ChannelContentDetails] = Field(
        default=None, alias="contentDetails"
    )

    @property
    def name(self) -> Optional[str]:
        return self.snippet.title if self.snippet else None

    @property
    def url(self) -> str:
        return f"https://youtube.com/channel/{self.id}"

    @property
    def uploads_playlist_id(self) -> Optional[str]:
        if not self.content_details:
            return None
        return self.content_details.related_playlists.get("uploads")


# ============================================================================
# Videos
# ============================================================================


class VideoSnippet(APIModel):
    title: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    channel_title: Optional[str] = Field(default=None, alias="channelTitle")
    thumbnails: Dict[str, Thumbnail] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    live_broadcast_content: Optional[str] = Field(
        default=None, alias="liveBroadcastContent"
    )


class VideoStatistics(APIModel):
    view_count: int = Field(alias="viewCount", default=0)
    like_count: int = Field(alias="likeCount", default=0)
    comment_count: int = Field(alias="commentCount", default=0)


class VideoContentDetails(APIModel):
    duration: Optional[str] = None
    definition: Optional[str] = None
    caption: Optional[str] = None
    licensed_content: Optional[bool] = Field(default=None, alias="licensedContent")


class Video(YouTubeResource):
    snippet: Optional[VideoSnippet] = None
    statistics: Optional[VideoStatistics] = None
    content_details: Optional[VideoContentDetails] = Field(
        default=None, alias="contentDetails"
    )

    @property
    def title(self) -> Optional[str]:
        return self.snippet.title if self.snippet else None

    @property
    def url(self) -> str:
        return f"{WATCH_URL}{self.id}"


# ============================================================================
# Playlists
# ============================================================================


class PlaylistSnippet(APIModel):
    title: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    channel_title: Optional[str] = Field(default=None, alias="channelTitle")
    thumbnails: Dict[str, Thumbnail] = Field(default_factory=dict)


class PlaylistContentDetails(APIModel):
    item_count: int = Field(alias="itemCount", default=0)


class Playlist(YouTubeResource):
    snippet: Optional[PlaylistSnippet] = None
    content_details: Optional[PlaylistContentDetails] = Field(
        default=None, alias="contentDetails"
    )

    @property
    def title(self) -> Optional[str]:
        return self.snippet.title if self.snippet else None

    @property
    def url(self) -> str:
        return f"https://youtube.com/playlist?list={self.id}"


# ============================================================================
# Subscriptions
# ============================================================================


class SubscriptionResourceId(APIModel):
    kind: Optional[str] = None
    channel_id: Optional[str] = Field(default=None, alias="channelId")


class SubscriptionSnippet(APIModel):
    title: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    # The subscriber's channel
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    resource_id: Optional[SubscriptionResourceId] = Field(
        default=None, alias="resourceId"
    )
    thumbnails: Dict[str, Thumbnail] = Field(default_factory=dict)


class Subscription(YouTubeResource):
    snippet: Optional[SubscriptionSnippet] = None

    @property
    def channel_id(self) -> Optional[str]:
        """The channel subscribed to"""
        if self.snippet and self.snippet.resource_id:
            return self.snippet.resource_id.channel_id
        return None


# ============================================================================
# Comments
# ============================================================================


class CommentSnippet(APIModel):
    text_display: Optional[str] = Field(default=None, alias="textDisplay")
    text_original: Optional[str] = Field(default=None, alias="textOriginal")
    author_display_name: Optional[str] = Field(default=None, alias="authorDisplayName")
    author_profile_image_url: Optional[str] = Field(
        default=None, alias="authorProfileImageUrl"
    )
    author_channel_id: Dict[str, str] = Field(
        alias="authorChannelId", default_factory=dict
    )
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    video_id: Optional[str] = Field(default=None, alias="videoId")
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    like_count: int = Field(alias="likeCount", default=0)
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class Comment(YouTubeResource):
    """A top-level comment or reply, tagged with where it was posted"""

    snippet: CommentSnippet = Field(default_factory=CommentSnippet)
    type: CommentType = "video"
    replies: List[Comment] = Field(default_factory=list)

    @classmethod
    def from_resource(cls, data: Dict[str, Any], comment_type: CommentType = "video"):
        return super().from_resource(data, type=comment_type)

    @property
    def text(self) -> Optional[str]:
        return self.snippet.text_original or self.snippet.text_display

    @property
    def author_channel_id(self) -> Optional[str]:
        return self.snippet.author_channel_id.get("value")

    @property
    def url(self) -> str:
        if self.type == "channel":
            return (
                f"https://youtube.com/channel/{self.snippet.channel_id}"
                f"/discussion?lc={self.id}"
            )
        return f"{WATCH_URL}{self.snippet.video_id}&lc={self.id}"


__all__ = [
    "Channel",
    "Video",
    "Playlist",
    "Subscription",
    "Comment",
    "CommentType",
]
