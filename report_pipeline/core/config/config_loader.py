"""
Configuration Loader
Loads and validates the JSON settings file
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .app_config import AppConfig

logger = logging.getLogger(__name__)

# Publish-date window bounds are sent to the API verbatim.
DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

REPORT_DEFAULTS = {
    "channel": "@Letsplay",
    "max_results": 1000,
    "published_after": "2013-03-25T00:00:00Z",
    "published_before": "2025-04-02T23:59:59Z",
    "title_filter": "GTA V",
    "csv_output": None
}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from a settings file.

    The settings file is JSON (``appsettings.json``). A leading UTF-8 BOM
    is tolerated.

    Responsibilities:
    - Read the settings file
    - Validate the API credential (fail fast when missing)
    - Validate the report section, falling back to defaults
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to settings file.

        Args:
            config_path: Path to JSON settings file
        """
        self._config_path = Path(config_path)

    def load(self) -> AppConfig:
        """
        Load and validate configuration from the settings file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If settings file doesn't exist
        """
        config_data = self._load_document()

        api_key = self._validate_api_key(config_data)
        report = self._report_section(config_data)

        channel = self._validate_channel(report)
        max_results = self._validate_max_results(report)
        published_after, published_before = self._validate_window(report)
        title_filter = self._validate_optional_string(report, "title_filter")
        csv_output = self._validate_optional_string(report, "csv_output")

        return AppConfig(
            api_key=api_key,
            channel=channel,
            max_results=max_results,
            published_after=published_after,
            published_before=published_before,
            title_filter=title_filter,
            csv_output=csv_output
        )

    def _load_document(self) -> Dict[str, Any]:
        """Load settings file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        with open(self._config_path, 'r', encoding='utf-8-sig') as f:
            content = f.read()

        if not content.strip():
            raise ConfigValidationError("Configuration file is empty")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON syntax: {e}")

        if data is None:
            raise ConfigValidationError("Configuration file is empty")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration must be a JSON object"
            )

        return data

    def _validate_api_key(self, config: Dict[str, Any]) -> str:
        """Validate YouTube.API_KEY field."""
        section = config.get("YouTube")
        api_key = section.get("API_KEY") if isinstance(section, dict) else None

        if api_key is None or (isinstance(api_key, str) and not api_key.strip()):
            logger.warning(f"API_KEY not found in {self._config_path.name}")
            raise ConfigValidationError("Missing required field: 'YouTube.API_KEY'")

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'YouTube.API_KEY' must be a string, got {type(api_key).__name__}"
            )

        return api_key.strip()

    def _report_section(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge the optional report section over the defaults."""
        report = config.get("report")
        if report is None:
            return dict(REPORT_DEFAULTS)

        if not isinstance(report, dict):
            raise ConfigValidationError(
                f"Section 'report' must be an object, got {type(report).__name__}"
            )

        return {**REPORT_DEFAULTS, **report}

    def _validate_channel(self, report: Dict[str, Any]) -> str:
        """Validate report.channel field."""
        channel = report["channel"]

        if not isinstance(channel, str):
            raise ConfigValidationError(
                f"Field 'report.channel' must be a string, got {type(channel).__name__}"
            )

        if not channel.strip():
            raise ConfigValidationError("Field 'report.channel' cannot be empty")

        return channel.strip()

    def _validate_max_results(self, report: Dict[str, Any]) -> int:
        """Validate report.max_results field."""
        max_results = report["max_results"]

        # bool is an int subclass
        if not isinstance(max_results, int) or isinstance(max_results, bool):
            raise ConfigValidationError(
                f"Field 'report.max_results' must be an integer, got {type(max_results).__name__}"
            )

        if max_results <= 0:
            raise ConfigValidationError(
                f"Field 'report.max_results' must be greater than 0, got {max_results}"
            )

        return max_results

    def _validate_window(self, report: Dict[str, Any]) -> tuple[str, str]:
        """Validate the publish-date window [published_after, published_before)."""
        bounds = []
        for field in ("published_after", "published_before"):
            value = report[field]
            if not isinstance(value, str):
                raise ConfigValidationError(
                    f"Field 'report.{field}' must be a string, got {type(value).__name__}"
                )
            try:
                bounds.append(datetime.strptime(value.strip(), DATE_FORMAT))
            except ValueError:
                raise ConfigValidationError(
                    f"Field 'report.{field}' must match YYYY-MM-DDTHH:MM:SSZ, got {value!r}"
                )

        start, end = bounds
        if start >= end:
            raise ConfigValidationError(
                "Field 'report.published_after' must be earlier than 'report.published_before'"
            )

        return report["published_after"].strip(), report["published_before"].strip()

    def _validate_optional_string(self, report: Dict[str, Any], field: str) -> Optional[str]:
        """Validate an optional string field; blank means unset."""
        value = report.get(field)

        if value is None:
            return None

        if not isinstance(value, str):
            raise ConfigValidationError(
                f"Field 'report.{field}' must be a string or null, got {type(value).__name__}"
            )

        return value.strip() or None
