"""
Video Domain Models
Steps 2 and 3: Video Listing and Details
"""

import html
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def format_view_count(raw: Optional[str]) -> str:
    """Render an integer string with thousands separators, else verbatim."""
    if raw is None:
        return ""
    if not _INTEGER_RE.match(raw.strip()):
        return raw
    try:
        return f"{int(raw):,}"
    except ValueError:
        # exceeds the interpreter's integer string conversion limit
        return raw


@dataclass(frozen=True)
class VideoSearchItem:
    """
    One video entry of a search.list response.
    The title is HTML-unescaped and trimmed on construction.
    """
    video_id: Optional[str]
    title: str

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "VideoSearchItem":
        """Build from a raw search.list item."""
        item_id = item.get("id") or {}
        snippet = item.get("snippet") or {}
        return cls(
            video_id=(item_id.get("videoId") if isinstance(item_id, dict) else None) or None,
            title=html.unescape(snippet.get("title") or "").strip()
        )

    def matches(self, title_filter: Optional[str]) -> bool:
        """Case-insensitive containment check; no filter matches everything."""
        if not title_filter:
            return True
        return title_filter.casefold() in self.title.casefold()


@dataclass(frozen=True)
class VideoInfo:
    """
    Domain model representing a single video row of the report.
    view_count is kept as the raw API string.
    """
    video_id: str
    title: str
    published_at: str
    view_count: str

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "VideoInfo":
        """Build from a raw videos.list item."""
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        return cls(
            video_id=item.get("id", ""),
            title=snippet.get("title", ""),
            published_at=snippet.get("publishedAt", ""),
            view_count=str(stats.get("viewCount", ""))
        )

    @property
    def formatted_views(self) -> str:
        return format_view_count(self.view_count)

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., CSV)."""
        return asdict(self)
