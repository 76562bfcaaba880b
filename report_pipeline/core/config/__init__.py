"""
Configuration module for the Channel Report Pipeline
"""

from .app_config import AppConfig
from .config_loader import ConfigLoader, ConfigValidationError

__all__ = ["AppConfig", "ConfigLoader", "ConfigValidationError"]
