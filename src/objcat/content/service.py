"""
Main service for compiling content files into the object catalog.

Runs the table parsers in dependency order: each stage reads its file,
builds its records and installs its table before the next stage starts, so
later stages can resolve names against every earlier table.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Type

from .catalog import Catalog
from .directives import DirectiveParser
from .errors import ContentLoadError, ParseError
from .loaders import ContentFileLoader
from .parsers import (
    ActivationParser,
    ArtifactParser,
    BrandParser,
    CurseParser,
    EgoParser,
    ObjectBaseParser,
    ObjectParser,
    ObjectPowerParser,
    ObjectPropertyParser,
    ProjectionParser,
    SlayParser,
    TableParser,
)
from .resolver import CrossReferenceResolver

if TYPE_CHECKING:
    from ..settings import AppSettings

StageList = Sequence[Type[TableParser]]

STAGES: StageList = (
    ObjectBaseParser,
    ProjectionParser,
    SlayParser,
    BrandParser,
    CurseParser,
    ActivationParser,
    ObjectPropertyParser,
    ObjectPowerParser,
    ObjectParser,
    EgoParser,
    ArtifactParser,
)
"""Content stages in load order."""

DEFAULT_SUFFIX = ".txt"


def check_stage_order(stages: StageList) -> None:
    """Verify every stage runs after the stages it requires.

    Raises:
        ValueError: If a stage is listed twice or before one of its requirements.
    """
    seen = set()
    for stage in stages:
        if stage.name in seen:
            raise ValueError(f"Stage '{stage.name}' listed twice")
        missing = [name for name in stage.requires if name not in seen]
        if missing:
            raise ValueError(
                f"Stage '{stage.name}' requires {', '.join(missing)} to be loaded first"
            )
        seen.add(stage.name)


class ContentService:
    """Service compiling a directory of content files into a Catalog.

    Any error aborts the whole load: tables installed so far are torn down
    and a ContentLoadError naming the file and line is raised.
    """

    def __init__(
        self,
        content_path: str | Path,
        settings: Optional["AppSettings"] = None,
        stages: StageList = STAGES,
    ):
        """Initialize the content service.

        Args:
            content_path: Directory holding the content files
            settings: App settings for file suffix and stage checks
            stages: Stage classes in load order
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.content_path = Path(content_path)
        self.settings = settings
        self.stages = tuple(stages)

        self.suffix = settings.content.file_suffix if settings else DEFAULT_SUFFIX
        if settings is None or settings.content.strict_order:
            check_stage_order(self.stages)

        self.loader = ContentFileLoader()
        self.catalog = Catalog()
        self.resolver = CrossReferenceResolver(self.catalog)

        self.logger.info(f"Initializing ContentService with path: {self.content_path}")

    def file_for(self, stage: Type[TableParser]) -> Path:
        return self.content_path / f"{stage.name}{self.suffix}"

    def load(self) -> Catalog:
        """Run every stage and seal the catalog.

        Returns:
            The loaded Catalog

        Raises:
            ContentLoadError: On the first failing file.
        """
        self.logger.info("Starting content loading process...")
        try:
            for stage in self.stages:
                self._run_stage(stage)
        except ContentLoadError as e:
            self.logger.error(f"Content loading failed: {e}")
            self.catalog.teardown()
            raise

        self.catalog.seal()
        self.logger.info(
            f"Content loading completed: {len(self.catalog.loaded_tables)} tables, "
            f"{len(self.catalog.object_kinds)} object kinds, "
            f"{self.catalog.a_max} artifacts"
        )
        return self.catalog

    def _run_stage(self, stage: Type[TableParser]) -> None:
        path = self.file_for(stage)
        self.logger.debug(f"Loading stage '{stage.name}' from {path}")

        lines = self.loader.read_lines(path)
        table = stage(self.catalog, self.resolver)
        directives = DirectiveParser(source=str(path))
        table.register(directives)

        try:
            directives.parse_lines(lines)
            table.finish()
        except ParseError as e:
            raise ContentLoadError.from_parse_error(path, e) from e

    def close(self) -> None:
        """Release every table in reverse load order. Safe to call twice."""
        self.catalog.teardown()
        self.logger.debug("ContentService closed")
