"""
YouTube API Client
Thin wrapper over the Data API v3 search.list and videos.list calls.
"""

import logging
from typing import List, Optional
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .channel_info import ChannelSearchItem
from .video_info import VideoInfo

logger = logging.getLogger(__name__)

# videos.list accepts at most 50 ids per request
VIDEOS_BATCH_SIZE = 50


class YouTubeClient:
    """
    YouTube Data API client.

    Every call builds its own service object and closes it on exit, so no
    HTTP connection outlives the call that opened it.
    """

    def __init__(self, api_key: str):
        self._api_key = api_key

    def _service(self):
        # static_discovery=False prevents the 'file_cache' warning in logs
        return build('youtube', 'v3', developerKey=self._api_key, static_discovery=False)

    def resolve_channel_id(self, channel_name: str) -> Optional[str]:
        """
        Search for a channel by name and return the first match's id.

        Returns None when the search fails or yields no channel.
        """
        if not channel_name or not channel_name.strip():
            raise ValueError("Channel name cannot be empty")

        try:
            with self._service() as service:
                response = service.search().list(
                    part="snippet",
                    type="channel",
                    q=channel_name
                ).execute()
        except HttpError as e:
            logger.error(f"Error fetching channel info: {e}")
            return None

        items = response.get("items", [])
        if not items:
            logger.warning(f"No channel matched: {channel_name}")
            return None

        return ChannelSearchItem.from_api(items[0]).channel_id

    def search_videos(
        self,
        channel_id: str,
        published_after: str,
        published_before: str,
        max_results: int = 50,
        query: Optional[str] = None,
        page_token: Optional[str] = None
    ) -> dict:
        """
        Low-level API call to search.list for a channel's videos, most viewed first.

        Raises:
            HttpError: On a non-success response.
        """
        params = {
            "part": "snippet",
            "channelId": channel_id,
            "maxResults": max_results,
            "type": "video",
            "order": "viewCount",
            "publishedAfter": published_after,
            "publishedBefore": published_before,
        }
        if query:
            params["q"] = query
        if page_token:
            params["pageToken"] = page_token

        with self._service() as service:
            return service.search().list(**params).execute()

    def fetch_videos_details(self, video_ids: List[str]) -> Optional[List[VideoInfo]]:
        """
        API call to videos.list for snippet and statistics, in batches of 50 ids.

        Returns None when any batch fails.
        """
        if not video_ids:
            raise ValueError("At least one video id is required")

        videos: List[VideoInfo] = []
        try:
            with self._service() as service:
                for i in range(0, len(video_ids), VIDEOS_BATCH_SIZE):
                    batch_ids = video_ids[i:i + VIDEOS_BATCH_SIZE]
                    response = service.videos().list(
                        part="snippet,statistics",
                        id=",".join(batch_ids)
                    ).execute()
                    videos.extend(VideoInfo.from_api(item) for item in response.get("items", []))
        except HttpError as e:
            logger.error(f"Error fetching video details: {e}")
            return None

        return videos
