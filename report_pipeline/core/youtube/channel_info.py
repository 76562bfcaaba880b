"""
Channel Search Result Domain Model
Step 1: Channel Resolution
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ChannelSearchItem:
    """
    One channel entry of a search.list response.

    The channel id is reported under ``id.channelId`` or, for some
    response shapes, under ``snippet.channelId``. Both are kept and
    ``channel_id`` prefers the first.
    """
    id_channel_id: Optional[str] = None
    snippet_channel_id: Optional[str] = None
    title: str = ""

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "ChannelSearchItem":
        """Build from a raw search.list item."""
        item_id = item.get("id") or {}
        snippet = item.get("snippet") or {}
        return cls(
            id_channel_id=item_id.get("channelId") if isinstance(item_id, dict) else None,
            snippet_channel_id=snippet.get("channelId"),
            title=snippet.get("title", "")
        )

    @property
    def channel_id(self) -> Optional[str]:
        """Channel id from the id object, else from the snippet."""
        return self.id_channel_id or self.snippet_channel_id or None
