# src/ytclient/domain/payloads.py
"""
Request bodies for the mutation endpoints.

Builders construct frozen models and return a fresh dict on every call, so no
two requests ever share a body.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

CHANNEL_KIND = "youtube#channel"


class PayloadModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CommentTextPayload(PayloadModel):
    text_original: str = Field(alias="textOriginal")


class TopLevelCommentPayload(PayloadModel):
    snippet: CommentTextPayload


class CommentThreadSnippetPayload(PayloadModel):
    top_level_comment: TopLevelCommentPayload = Field(alias="topLevelComment")
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    video_id: Optional[str] = Field(default=None, alias="videoId")


class CommentThreadPayload(PayloadModel):
    id: Optional[str] = None
    snippet: CommentThreadSnippetPayload


class ResourceIdPayload(PayloadModel):
    kind: str = CHANNEL_KIND
    channel_id: str = Field(alias="channelId")


class SubscriptionSnippetPayload(PayloadModel):
    resource_id: ResourceIdPayload = Field(alias="resourceId")


class SubscriptionPayload(PayloadModel):
    snippet: SubscriptionSnippetPayload


def comment_thread_payload(
    text: str,
    channel_id: Optional[str] = None,
    video_id: Optional[str] = None,
    thread_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Body for commentThreads insert (channel/video) or update (thread_id)

    Args:
        text: Comment text
        channel_id: Channel owning the discussion or video
        video_id: Target video; omitted for channel discussion comments
        thread_id: Existing thread id when editing

    Returns:
        JSON-ready dict
    """
    payload = CommentThreadPayload(
        id=thread_id,
        snippet=CommentThreadSnippetPayload(
            top_level_comment=TopLevelCommentPayload(
                snippet=CommentTextPayload(text_original=text)
            ),
            channel_id=channel_id,
            video_id=video_id or None,
        ),
    )
    return payload.to_body()


def subscription_payload(channel_id: str) -> Dict[str, Any]:
    """Body for subscriptions insert"""
    payload = SubscriptionPayload(
        snippet=SubscriptionSnippetPayload(
            resource_id=ResourceIdPayload(channel_id=channel_id)
        )
    )
    return payload.to_body()
