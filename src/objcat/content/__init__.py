"""
Object catalog compiler.

Reads the line-oriented content files (object bases, projections, slays,
brands, curses, activations, object properties, power calculations, object
kinds, ego items and artifacts) and compiles them into index-stable,
cross-referencing tables held by a Catalog.
"""

from .service import ContentService, STAGES, check_stage_order
from .catalog import Catalog, IndexedTable
from .builder import RecordBuilder
from .resolver import CrossReferenceResolver
from .loaders import ContentFileLoader
from .directives import Directive, DirectiveParser, FieldType, Grammar
from .errors import ContentLoadError, ParseError, ParseErrorKind
from .formula import Dice, Expression, RandomValue, parse_dice, parse_random
from .flags import ElementFlag, ElementInfo, FlagNamespace, FlagSet
from .export import catalog_to_dict, dump_catalog

# Public exports
__all__ = [
    # Main service
    "ContentService",
    "STAGES",
    "check_stage_order",
    # Catalog
    "Catalog",
    "IndexedTable",
    # Component classes (for advanced usage)
    "RecordBuilder",
    "CrossReferenceResolver",
    "ContentFileLoader",
    "Directive",
    "DirectiveParser",
    "FieldType",
    "Grammar",
    # Errors
    "ContentLoadError",
    "ParseError",
    "ParseErrorKind",
    # Values
    "Dice",
    "Expression",
    "RandomValue",
    "parse_dice",
    "parse_random",
    "ElementFlag",
    "ElementInfo",
    "FlagNamespace",
    "FlagSet",
    # Export
    "catalog_to_dict",
    "dump_catalog",
]
