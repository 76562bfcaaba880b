"""
Report Printer
Step 3: Console table and optional CSV export
"""

import logging
import sys
import pandas as pd
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from ..youtube.video_info import VideoInfo

logger = logging.getLogger(__name__)

TITLE_WIDTH = 90
VIEWS_WIDTH = 15
DATE_WIDTH = 20
ROW_FORMAT = f"{{:<{TITLE_WIDTH}}} {{:>{VIEWS_WIDTH}}} {{:>{DATE_WIDTH}}}"
# column widths plus the two separating spaces
RULE_WIDTH = TITLE_WIDTH + VIEWS_WIDTH + DATE_WIDTH + 2

CSV_COLUMNS = ["video_id", "title", "published_at", "views"]


class ReportPrinter:
    """Renders video details as a fixed-width table, in the order given."""

    def render(self, videos: Sequence[VideoInfo]) -> List[str]:
        """Header, rule and one row per video."""
        lines = [
            ROW_FORMAT.format("Title", "Views", "Published Date"),
            "-" * RULE_WIDTH,
        ]
        for video in videos:
            lines.append(ROW_FORMAT.format(video.title, video.formatted_views, video.published_at))
        return lines

    def print_report(self, videos: Sequence[VideoInfo], stream: Optional[TextIO] = None) -> None:
        """Writes the rendered table to stream (stdout by default)."""
        stream = stream or sys.stdout
        for line in self.render(videos):
            print(line, file=stream)

    def save_csv(self, videos: Sequence[VideoInfo], output_path: Path) -> None:
        """Saves the report rows to a CSV file; views keep the raw API value."""
        if not videos:
            logger.warning("No videos collected. CSV will not be created.")
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame([v.to_dict() for v in videos])
        df = df.rename(columns={"view_count": "views"})[CSV_COLUMNS]

        df.to_csv(output_path, index=False, encoding='utf-8')
        logger.info(f"Successfully saved {len(videos)} videos to {output_path}")
