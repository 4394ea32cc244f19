"""
File loader for content text files.
"""

import logging
from pathlib import Path
from typing import List

from .errors import ContentLoadError


class ContentFileLoader:
    """Reads content files as lists of lines."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("ContentFileLoader initialized")

    def read_lines(self, path: Path) -> List[str]:
        """Read a content file.

        Args:
            path: Path to the content file

        Returns:
            The file's lines without line terminators

        Raises:
            ContentLoadError: If the file is missing or unreadable. Content
                files are required, so this is always fatal.
        """
        try:
            with path.open("r", encoding=self.encoding) as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            raise ContentLoadError("required content file not found", path=path) from None
        except UnicodeDecodeError as e:
            raise ContentLoadError(f"cannot decode file: {e}", path=path) from e
        except OSError as e:
            raise ContentLoadError(f"cannot read file: {e}", path=path) from e

        self.logger.debug(f"Read {len(lines)} lines from {path}")
        return lines
