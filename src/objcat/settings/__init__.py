"""
Settings package for objcat.

Configuration is stored with Qt's QSettings, either in the platform's
native store or in an INI file.

Usage:
    from objcat.settings import AppSettings

    settings = AppSettings(settings_file="objcat.ini")
    settings.paths.content_path = Path("lib/gamedata")
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import PathSettings
from .logging import LoggingSettings
from .content import ContentSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "LoggingSettings",
    "ContentSettings",
]
