"""
Settings validation system for objcat.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings against the file system."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        from ..content.service import STAGES

        errors: List[str] = []
        warnings: List[str] = []

        content_path = self.settings.paths.content_path
        if content_path:
            if not content_path.exists():
                errors.append(f"Content path does not exist: {content_path}")
            elif not content_path.is_dir():
                errors.append(f"Content path is not a directory: {content_path}")
            else:
                required = self.settings.paths.required_files(
                    (stage.name for stage in STAGES),
                    self.settings.content.file_suffix,
                )
                for path in required:
                    if not path.is_file():
                        errors.append(f"Content file missing: {path}")
        else:
            warnings.append("Content path not set")

        dump_path = self.settings.paths.dump_path
        if dump_path and not dump_path.parent.exists():
            warnings.append(f"Dump directory does not exist yet: {dump_path.parent}")

        for message in errors:
            logger.debug(f"Validation error: {message}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
