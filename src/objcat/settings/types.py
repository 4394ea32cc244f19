"""
Configuration types and exceptions for objcat settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Stored configuration layout version."""
    V1_0 = "1.0"
    CURRENT = V1_0


class ConfigError(Exception):
    """Raised when the settings store cannot be opened or read."""
    pass


@dataclass
class ValidationResult:
    """Outcome of checking the configuration against the file system."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def summary(self) -> str:
        """One line per problem, errors first."""
        lines = [f"error: {message}" for message in self.errors]
        lines.extend(f"warning: {message}" for message in self.warnings)
        return "\n".join(lines)
