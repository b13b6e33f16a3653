# src/ytclient/domain/__init__.py
"""
Typed resources, request payload builders and the transport interface.
"""
from .interfaces import YouTubeTransport
from .models import Channel, Comment, CommentType, Playlist, Subscription, Video
from .payloads import comment_thread_payload, subscription_payload

__all__ = [
    "YouTubeTransport",
    "Channel",
    "Comment",
    "CommentType",
    "Playlist",
    "Subscription",
    "Video",
    "comment_thread_payload",
    "subscription_payload",
]
