"""
Export of a loaded catalog to plain data and JSON.

Records become dicts; references to other records become their indices,
flag sets become lists of flag names and formulas become text.
"""

import dataclasses
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict

import orjson

from .catalog import Catalog
from .flags import ElementFlag, FlagSet
from .formula import Dice, RandomValue
from .models import Activation, ObjectBase, ObjectKind

logger = logging.getLogger(__name__)


def _reference(record: Any) -> int:
    if isinstance(record, ObjectBase):
        return record.tval
    if isinstance(record, ObjectKind):
        return record.kidx
    return record.index


def to_plain(value: Any, top: bool = True) -> Any:
    """Convert a record, or any value inside one, to JSON-compatible data."""
    if isinstance(value, (ObjectBase, ObjectKind, Activation)) and not top:
        return _reference(value)
    if isinstance(value, FlagSet):
        return value.names()
    if isinstance(value, ElementFlag):
        return [flag.name for flag in ElementFlag if flag in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, RandomValue):
        return str(value)
    if isinstance(value, Dice):
        return {
            "dice": str(value),
            "expressions": {name: str(e) for name, e in value.expressions.items()},
        }
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_plain(getattr(value, f.name), top=False)
            for f in dataclasses.fields(value)
        }
    if isinstance(value, (list, tuple)):
        return [to_plain(item, top=False) for item in value]
    return value


def catalog_to_dict(catalog: Catalog) -> Dict[str, Any]:
    """Plain-data view of every installed table plus catalog metadata."""
    special = {
        "unknown_item": catalog.unknown_item_kind,
        "unknown_gold": catalog.unknown_gold_kind,
        "pile": catalog.pile_kind,
        "curse_object": catalog.curse_object_kind,
    }
    return {
        "sizes": catalog.sizes(),
        "a_max": catalog.a_max,
        "special_kinds": {
            name: kind.kidx if kind is not None else None
            for name, kind in special.items()
        },
        "tables": {
            name: [to_plain(record) for record in catalog.table(name)]
            for name in catalog.loaded_tables
        },
    }


def dump_catalog(catalog: Catalog, path: Path) -> None:
    """Write the catalog to `path` as indented JSON."""
    data = orjson.dumps(catalog_to_dict(catalog), option=orjson.OPT_INDENT_2)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:  # orjson works with bytes
        f.write(data)
    logger.info(f"Catalog written to {path} ({len(data)} bytes)")
