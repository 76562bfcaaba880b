"""
YouTube API integration module
"""

from .channel_info import ChannelSearchItem
from .video_info import VideoInfo, VideoSearchItem, format_view_count
from .video_lister import VideoLister
from .youtube_client import YouTubeClient

__all__ = [
    "ChannelSearchItem",
    "VideoInfo",
    "VideoLister",
    "VideoSearchItem",
    "YouTubeClient",
    "format_view_count",
]
