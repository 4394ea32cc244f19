"""
Content compilation settings for objcat.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class ContentSettings:
    """Manages how content files are located and loaded."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def file_suffix(self) -> str:
        """Suffix appended to each stage name to form its file name."""
        value = self.settings.value("content/file_suffix", ".txt")
        return str(value) if value is not None else ".txt"

    @file_suffix.setter
    def file_suffix(self, value: str) -> None:
        if value and not value.startswith("."):
            value = f".{value}"
        self.settings.setValue("content/file_suffix", value)
        self.settings.sync()

    @property
    def strict_order(self) -> bool:
        """Refuse stage orders that load a table before its dependencies."""
        value = self.settings.value("content/strict_order", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    @strict_order.setter
    def strict_order(self, value: bool) -> None:
        if not value:
            logger.warning("Stage order checking disabled")
        self.settings.setValue("content/strict_order", value)
        self.settings.sync()
