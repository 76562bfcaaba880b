"""
Application Configuration Model
Represents a validated report configuration
"""

from typing import Optional


class AppConfig:
    """
    Immutable configuration object for the Channel Report Pipeline.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        channel: str,
        max_results: int,
        published_after: str,
        published_before: str,
        title_filter: Optional[str] = None,
        csv_output: Optional[str] = None
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube API key (non-empty)
            channel: Channel display name or @handle to search for (non-empty)
            max_results: Maximum number of videos to report (> 0)
            published_after: Inclusive window start, ISO-8601 UTC
            published_before: Exclusive window end, ISO-8601 UTC
            title_filter: Case-insensitive title substring (optional)
            csv_output: Path of an optional CSV export (optional)
        """
        self._api_key = api_key
        self._channel = channel
        self._max_results = max_results
        self._published_after = published_after
        self._published_before = published_before
        self._title_filter = title_filter
        self._csv_output = csv_output

    @property
    def api_key(self) -> str:
        """YouTube API key."""
        return self._api_key

    @property
    def channel(self) -> str:
        """Channel name used for the channel search."""
        return self._channel

    @property
    def max_results(self) -> int:
        """Maximum number of video ids to collect."""
        return self._max_results

    @property
    def published_after(self) -> str:
        """Start of the publish-date window (inclusive)."""
        return self._published_after

    @property
    def published_before(self) -> str:
        """End of the publish-date window (exclusive)."""
        return self._published_before

    @property
    def title_filter(self) -> Optional[str]:
        """Title substring filter (None = keep every video)."""
        return self._title_filter

    @property
    def csv_output(self) -> Optional[str]:
        """CSV export path (None = console only)."""
        return self._csv_output

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(channel={self.channel!r}, "
            f"max_results={self.max_results}, "
            f"window=[{self.published_after}, {self.published_before}), "
            f"title_filter={self.title_filter!r})"
        )
