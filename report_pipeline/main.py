"""
YouTube Channel Report Pipeline
Channel resolution -> video listing -> view report
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import ConfigLoader, AppConfig, ConfigValidationError
from .core.report import ReportPrinter
from .core.youtube import YouTubeClient, VideoLister

DEFAULT_CONFIG_FILE = "appsettings.json"

logger = logging.getLogger(__name__)


def setup_logging():
    """Configure logging with file and console handlers."""
    logs_dir = Path.cwd() / "logs"
    logs_dir.mkdir(exist_ok=True)

    log_file = logs_dir / "app.log"

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def load_configuration(logger: logging.Logger, config_path: Path) -> AppConfig:
    """Load and validate application configuration."""
    logger.info(f"Loading configuration from: {config_path}")

    try:
        loader = ConfigLoader(config_path)
        config = loader.load()

        logger.info("Configuration validated successfully")
        logger.info(f"  Channel: {config.channel}")
        logger.info(f"  Max Results: {config.max_results:,}")
        logger.info(f"  Window: {config.published_after} -> {config.published_before}")
        logger.info(f"  Title Filter: {config.title_filter or 'none'}")

        return config

    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        sys.exit(1)
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)


def run(config: AppConfig, youtube_client: YouTubeClient) -> int:
    """
    Execute the report workflow and return the process exit code.

    Each step hands its result forward; an absent or empty result ends
    the run before any later request is made.
    """
    # Step 1: Resolve channel
    logger.info(f"Resolving channel: {config.channel}")
    channel_id = youtube_client.resolve_channel_id(config.channel)
    if not channel_id:
        print("Channel not found.")
        return 0
    print(f"Channel ID: {channel_id}")

    # Step 2: List videos
    lister = VideoLister(youtube_client, config)
    video_ids = lister.list_video_ids(channel_id)
    if not video_ids:
        print("No videos found for this channel with the specified title prefix.")
        return 0

    # Step 3: Video details
    videos = youtube_client.fetch_videos_details(video_ids)
    if videos is None:
        print("Error fetching video details.")
        return 1

    printer = ReportPrinter()
    printer.print_report(videos)

    if config.csv_output:
        printer.save_csv(videos, Path(config.csv_output))

    return 0


def main(argv: Optional[List[str]] = None):
    """Main execution entry for the Channel Report Pipeline."""
    args = sys.argv[1:] if argv is None else argv
    log = setup_logging()

    log.info("="*60)
    log.info("YouTube Channel Report - VIEW COUNT REPORT")
    log.info("="*60)

    config_path = Path(args[0]) if args else Path.cwd() / DEFAULT_CONFIG_FILE
    config = load_configuration(log, config_path)

    try:
        exit_code = run(config, YouTubeClient(config.api_key))
    except Exception as e:
        log.error(f"Unexpected error during report: {e}")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
