"""
Path-related settings for objcat.
"""

from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PathSettings:
    """Manages the content directory and the catalog dump location."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _set_path(self, key: str, value: Optional[Path]) -> None:
        self.settings.setValue(key, str(value) if value else "")
        self.settings.sync()

    @property
    def content_path(self) -> Optional[Path]:
        """Directory holding the content text files."""
        path_str = self._get_str("paths/content", "")
        return Path(path_str) if path_str else None

    @content_path.setter
    def content_path(self, value: Optional[Path]) -> None:
        self._set_path("paths/content", value)

    @property
    def dump_path(self) -> Optional[Path]:
        """Default output file for catalog dumps."""
        path_str = self._get_str("paths/dump", "")
        return Path(path_str) if path_str else None

    @dump_path.setter
    def dump_path(self, value: Optional[Path]) -> None:
        self._set_path("paths/dump", value)

    def required_files(self, stems: Iterable[str], suffix: str) -> List[Path]:
        """Content files expected under the content directory (empty if unset)."""
        if not self.content_path:
            return []
        return [self.content_path / f"{stem}{suffix}" for stem in stems]
