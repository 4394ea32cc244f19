"""
objcat: object catalog compiler

Compiles line-oriented content files describing item bases, kinds, egos,
artifacts and their supporting tables into cross-referencing catalogs.
"""

__version__ = "0.1.0"
__author__ = "objcat Contributors"

# Core service imports
from .content import Catalog, ContentLoadError, ContentService, ParseError, ParseErrorKind
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "ContentService",
    "Catalog",
    # Errors
    "ContentLoadError",
    "ParseError",
    "ParseErrorKind",
    # Logging
    "setup_logging",
]
