"""
Video Lister Service
Step 2: Video Listing
"""

import logging
from typing import List

from googleapiclient.errors import HttpError

from .video_info import VideoSearchItem
from .youtube_client import YouTubeClient
from ..config.app_config import AppConfig

logger = logging.getLogger(__name__)

# search.list returns at most 50 items per page
PAGE_SIZE = 50


class VideoLister:
    """
    Service responsible for listing a channel's videos in the configured window.

    Responsibilities:
    - Page through search.list ordered by view count.
    - Enforce the title filter client-side (the API's q term is only a hint).
    - Stop once max_results ids are collected.
    """

    def __init__(self, youtube_client: YouTubeClient, config: AppConfig):
        self._client = youtube_client
        self._config = config

    def list_video_ids(self, channel_id: str) -> List[str]:
        """
        Collects video ids for the channel in server order.

        Returns:
            List[str]: Matching video ids, empty if any request fails.
        """
        if not channel_id:
            raise ValueError("Channel id is required")

        title_filter = self._config.title_filter
        max_results = self._config.max_results
        video_ids: List[str] = []
        next_page_token = None

        while len(video_ids) < max_results:
            try:
                response = self._client.search_videos(
                    channel_id=channel_id,
                    published_after=self._config.published_after,
                    published_before=self._config.published_before,
                    max_results=min(PAGE_SIZE, max_results - len(video_ids)),
                    query=title_filter,
                    page_token=next_page_token
                )
            except HttpError as e:
                logger.error(f"Error fetching video list: {e}")
                return []

            for item in response.get("items", []):
                video = VideoSearchItem.from_api(item)
                if not video.matches(title_filter):
                    logger.info(f"Skipping video: {video.title}, Searching for: {title_filter}")
                    continue

                if video.video_id:
                    video_ids.append(video.video_id)
                    if len(video_ids) >= max_results:
                        break

            next_page_token = response.get("nextPageToken")
            if not next_page_token:
                break

        logger.info(f"Collected {len(video_ids)} video ids for channel {channel_id}")
        return video_ids
