"""
YouTube Service
Public lookups authenticated with the client's API key
"""

from typing import Any, Dict, List, Optional

from ytclient.domain.models import Channel, Comment, Playlist, Video
from ytclient.services.base_service import BaseService
from ytclient.services.exceptions import ResourceNotFoundError
from ytclient.services.pagination import fetch_paginated

VIDEO_PARTS = "snippet,contentDetails,statistics,status"
CHANNEL_PARTS = "snippet,contentDetails,statistics,status"
PLAYLIST_PARTS = "snippet,contentDetails"


class YouTubeService(BaseService):
    """Read-only access to videos, channels, playlists and comments"""

    def get_service_name(self) -> str:
        return "youtube"

    async def _get_single(
        self, endpoint: str, parts: str, resource_id: str, resource_type: str
    ) -> Dict[str, Any]:
        response = await self.client.get(endpoint, {"part": parts, "id": resource_id})

        items = response.get("items") or []
        if not items:
            raise ResourceNotFoundError(resource_type, resource_id)

        return items[0]

    async def get_video(self, video_id: Optional[str]) -> Video:
        video_id = self.validate_required(video_id, "video_id", "Invalid video ID")
        item = await self._get_single("videos", VIDEO_PARTS, video_id, "Video")
        return Video.from_resource(item)

    async def get_channel(self, channel_id: Optional[str]) -> Channel:
        channel_id = self.validate_required(channel_id, "channel_id", "Invalid channel ID")
        item = await self._get_single("channels", CHANNEL_PARTS, channel_id, "Channel")
        return Channel.from_resource(item)

    async def get_playlist(self, playlist_id: Optional[str]) -> Playlist:
        playlist_id = self.validate_required(
            playlist_id, "playlist_id", "Invalid playlist ID"
        )
        item = await self._get_single("playlists", PLAYLIST_PARTS, playlist_id, "Playlist")
        return Playlist.from_resource(item)

    async def get_video_comments(
        self, video_id: Optional[str], max_results: Optional[int] = None
    ) -> List[Comment]:
        """
        Fetch top-level comments of a video with their replies

        Args:
            video_id: YouTube video ID
            max_results: Maximum comment threads (settings default if None);
                <= 0 fetches all

        Returns:
            Comments in API order, each with its replies attached
        """
        video_id = self.validate_required(video_id, "video_id", "Invalid video ID")

        threads = await fetch_paginated(
            self.client,
            "commentThreads",
            {"part": "snippet,replies", "videoId": video_id},
            self.resolve_max_results(max_results),
            page_size=self.settings.max_results_per_page,
        )

        comments = []
        for thread in threads:
            comment = Comment.from_resource(thread["snippet"]["topLevelComment"], "video")
            for reply in (thread.get("replies") or {}).get("comments") or []:
                comment.replies.append(Comment.from_resource(reply, "video"))
            comments.append(comment)

        return comments
