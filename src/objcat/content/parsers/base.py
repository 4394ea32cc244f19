"""
Base class for the per-table content parsers.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Tuple, TypeVar

from ..builder import RecordBuilder
from ..catalog import Catalog
from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..models import Allocation
from ..resolver import CrossReferenceResolver

T = TypeVar("T")

_ALLOC_RANGE_RE = re.compile(r"\s*([+-]?\d+)\s*to\s*([+-]?\d+)")

# Deepest level an allocation range may name
MAX_ALLOC_LEVEL = 255


def read_allocation(directive: Directive, bounded: bool = False) -> Allocation:
    """Read an ``alloc:<common>:<min> to <max>`` directive.

    Spaces around ``to`` are optional and text after the maximum is ignored.

    Raises:
        ParseError: INVALID_ALLOCATION if the range is malformed, OUT_OF_BOUNDS
            if `bounded` and either level lies outside [0, MAX_ALLOC_LEVEL].
    """
    minmax = directive.getstr("minmax")
    match = _ALLOC_RANGE_RE.match(minmax)
    if not match:
        raise ParseError(ParseErrorKind.INVALID_ALLOCATION, f"'{minmax}'")
    alloc = Allocation(
        prob=directive.getint("common"),
        min_level=int(match.group(1)),
        max_level=int(match.group(2)),
    )
    if bounded and not (
        0 <= alloc.min_level <= MAX_ALLOC_LEVEL and 0 <= alloc.max_level <= MAX_ALLOC_LEVEL
    ):
        raise ParseError(ParseErrorKind.OUT_OF_BOUNDS, f"'{minmax}'")
    return alloc


class TableParser(ABC, Generic[T]):
    """Parses one content file into one catalog table.

    Subclasses set `name` (the file stem and table name) and `requires`
    (tables that must be installed first), register their directive
    handlers in `register` and install the finished table in `finish`.
    """

    name: ClassVar[str] = ""
    requires: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, catalog: Catalog, resolver: CrossReferenceResolver):
        self.catalog = catalog
        self.resolver = resolver
        self.builder: RecordBuilder[T] = RecordBuilder(self.name)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def register(self, parser: DirectiveParser) -> None:
        """Register this table's directive handlers on `parser`."""

    @abstractmethod
    def finish(self) -> None:
        """Materialize the pending records and install them in the catalog."""

    @property
    def current(self) -> T:
        """The record being built; raises MISSING_RECORD_HEADER if none."""
        return self.builder.require_current()
