"""
OAuth Service
Operations on behalf of the user who owns an access token
"""

from typing import List, Optional

from ytclient.domain.models import Channel, Comment, CommentType, Playlist, Subscription
from ytclient.domain.payloads import comment_thread_payload, subscription_payload
from ytclient.services.base_service import BaseService
from ytclient.services.exceptions import (
    ConfigurationError,
    ResourceNotFoundError,
    ValidationError,
)
from ytclient.services.pagination import fetch_paginated

CHANNEL_PARTS = "snippet,contentDetails,statistics,status"
PLAYLIST_PARTS = "snippet,contentDetails"


class OAuthService(BaseService):
    """
    Authenticated YouTube operations

    Handles:
    - The authorized user's channel, subscriptions and playlists
    - Posting and editing comments
    - Subscribing and unsubscribing

    The access token is passed to every call and never stored. Token and
    argument checks run before any request is built.
    """

    def get_service_name(self) -> str:
        return "oauth"

    def _require_token(self, access_token: Optional[str]) -> str:
        if not access_token:
            raise ConfigurationError(
                "Must have an access token for OAuth related methods"
            )
        return access_token

    # ========================================================================
    # Reads
    # ========================================================================

    async def get_me(self, access_token: Optional[str]) -> Channel:
        """
        Get the authorized user's channel

        Raises:
            ConfigurationError: No access token
            ResourceNotFoundError: Token owner has no channel
        """
        token = self._require_token(access_token)

        response = await self.client.get(
            "channels", {"part": CHANNEL_PARTS, "mine": True}, token
        )
        items = response.get("items") or []
        if not items:
            raise ResourceNotFoundError("Channel")

        return Channel.from_resource(items[0])

    async def get_my_subscriptions(
        self, access_token: Optional[str], max_results: Optional[int] = None
    ) -> List[Subscription]:
        """
        Get the authorized user's subscriptions

        Args:
            access_token: OAuth access token
            max_results: Maximum subscriptions to fetch (settings default
                if None); <= 0 fetches all
        """
        token = self._require_token(access_token)

        items = await fetch_paginated(
            self.client,
            "subscriptions",
            {"part": "snippet", "mine": True},
            self.resolve_max_results(max_results),
            access_token=token,
            page_size=self.settings.max_results_per_page,
        )
        return [Subscription.from_resource(item) for item in items]

    async def get_my_playlists(
        self, access_token: Optional[str], max_results: Optional[int] = None
    ) -> List[Playlist]:
        """
        Get the authorized user's playlists

        Args:
            access_token: OAuth access token
            max_results: Maximum playlists to fetch (settings default if
                None); <= 0 fetches all
        """
        token = self._require_token(access_token)

        items = await fetch_paginated(
            self.client,
            "playlists",
            {"part": PLAYLIST_PARTS, "mine": True},
            self.resolve_max_results(max_results),
            access_token=token,
            page_size=self.settings.max_results_per_page,
        )
        return [Playlist.from_resource(item) for item in items]

    # ========================================================================
    # Comments
    # ========================================================================

    async def post_comment(
        self,
        access_token: Optional[str],
        text: Optional[str],
        channel_id: Optional[str],
        video_id: Optional[str] = None,
    ) -> Comment:
        """
        Post a comment on a video or on a channel's discussion

        Args:
            access_token: OAuth access token
            text: Comment text
            channel_id: Channel to post on (owner of the video, if any)
            video_id: Video to post on; channel discussion when not given

        Returns:
            The created top-level comment

        Raises:
            ConfigurationError: No access token
            ValidationError: Blank text or channel id, or a non-string video id
        """
        token = self._require_token(access_token)
        self.validate_required(text, "text", "Invalid comment text")
        channel_id = self.validate_required(channel_id, "channel_id", "Invalid channel ID")
        if video_id is not None:
            if not isinstance(video_id, str):
                raise ValidationError("Invalid video ID", field="video_id")
            video_id = video_id.strip() or None

        body = comment_thread_payload(text, channel_id=channel_id, video_id=video_id)
        result = await self.client.post(
            "commentThreads", {"part": "snippet"}, token, body
        )

        comment_type = self._comment_type(result)
        comment = Comment.from_resource(result["snippet"]["topLevelComment"], comment_type)

        self.log_info(f"💬 Posted {comment_type} comment {comment.id}")
        return comment

    async def edit_comment(
        self,
        access_token: Optional[str],
        text: Optional[str],
        comment_id: Optional[str],
    ) -> Comment:
        """
        Replace the text of a comment thread's top-level comment

        Args:
            access_token: OAuth access token
            text: New comment text
            comment_id: Comment thread id

        Returns:
            The updated comment, with any replies echoed by the API attached
            in response order

        Raises:
            ConfigurationError: No access token
            ValidationError: Blank text or comment id
        """
        token = self._require_token(access_token)
        self.validate_required(text, "text", "Invalid comment text")
        comment_id = self.validate_required(comment_id, "comment_id", "Invalid comment ID")

        body = comment_thread_payload(text, thread_id=comment_id)
        result = await self.client.put(
            "commentThreads", {"part": "snippet"}, token, body
        )

        comment_type = self._comment_type(result)
        comment = Comment.from_resource(result["snippet"]["topLevelComment"], comment_type)

        replies = (result.get("replies") or {}).get("comments") or []
        for reply in replies:
            comment.replies.append(Comment.from_resource(reply, comment_type))

        self.log_info(f"✏️ Edited comment {comment.id} ({len(replies)} replies)")
        return comment

    @staticmethod
    def _comment_type(thread: dict) -> CommentType:
        # Video comments carry both ids; discussion comments only channelId
        return "video" if thread.get("snippet", {}).get("videoId") else "channel"

    # ========================================================================
    # Subscriptions
    # ========================================================================

    async def subscribe(
        self, access_token: Optional[str], channel_id: Optional[str]
    ) -> Subscription:
        """
        Subscribe to a channel

        Returns:
            The subscription as echoed by the API (partial resource)
        """
        token = self._require_token(access_token)
        channel_id = self.validate_required(channel_id, "channel_id", "Invalid channel ID")

        result = await self.client.post(
            "subscriptions", {"part": "snippet"}, token, subscription_payload(channel_id)
        )

        self.log_info(f"➕ Subscribed to {channel_id}")
        return Subscription.from_resource(result)

    async def unsubscribe(
        self, access_token: Optional[str], subscription_id: Optional[str]
    ) -> None:
        """
        Remove a subscription

        Args:
            access_token: OAuth access token
            subscription_id: Subscription id (not the channel id)
        """
        token = self._require_token(access_token)
        subscription_id = self.validate_required(
            subscription_id, "subscription_id", "Invalid subscription ID"
        )

        await self.client.delete("subscriptions", {"id": subscription_id}, token)

        self.log_info(f"➖ Removed subscription {subscription_id}")
