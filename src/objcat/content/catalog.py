"""
Catalog of compiled content tables.

The Catalog owns one IndexedTable per content table. Consumers read tables
as sequences; the only growth after a table is installed is the artifact
stage appending synthesized object kinds, which never moves existing
entries. After a full load the catalog is sealed.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, TypeVar

from .errors import ParseError, ParseErrorKind
from .models import (
    Activation,
    Artifact,
    Brand,
    Curse,
    EgoItem,
    ObjectBase,
    ObjectKind,
    ObjProperty,
    PowerCalc,
    Projection,
    Slay,
)

T = TypeVar("T")


class IndexedTable(Sequence[T]):
    """Append-only sequence whose indices stay valid as it grows."""

    def __init__(self, name: str, items: Iterable[T] = ()):
        self.name = name
        self._items: List[T] = list(items)
        self._sealed = False

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IndexedTable({self.name!r}, {len(self._items)} records)"

    @property
    def sealed(self) -> bool:
        return self._sealed

    def append(self, item: T) -> int:
        """Append `item` and return its index.

        Raises:
            ParseError: INTERNAL if the table is sealed.
        """
        if self._sealed:
            raise ParseError(
                ParseErrorKind.INTERNAL, f"table '{self.name}' is sealed"
            )
        self._items.append(item)
        return len(self._items) - 1

    def seal(self) -> None:
        self._sealed = True

    def clear(self) -> None:
        self._items.clear()
        self._sealed = False


class Catalog:
    """All compiled content tables plus the special item kinds."""

    def __init__(self):
        self.object_bases: IndexedTable[ObjectBase] = IndexedTable("object_base")
        self.projections: IndexedTable[Projection] = IndexedTable("projection")
        self.slays: IndexedTable[Slay] = IndexedTable("slay")
        self.brands: IndexedTable[Brand] = IndexedTable("brand")
        self.curses: IndexedTable[Curse] = IndexedTable("curse")
        self.activations: IndexedTable[Activation] = IndexedTable("activation")
        self.properties: IndexedTable[ObjProperty] = IndexedTable("object_property")
        self.calculations: IndexedTable[PowerCalc] = IndexedTable("object_power")
        self.object_kinds: IndexedTable[ObjectKind] = IndexedTable("object")
        self.ego_items: IndexedTable[EgoItem] = IndexedTable("ego_item")
        self.artifacts: IndexedTable[Artifact] = IndexedTable("artifact")

        # Number of declared artifacts; the artifact table has spare slots after them
        self.a_max = 0

        # Special kinds of the "none" category, bound after the artifact stage
        self.unknown_item_kind: Optional[ObjectKind] = None
        self.unknown_gold_kind: Optional[ObjectKind] = None
        self.pile_kind: Optional[ObjectKind] = None
        self.curse_object_kind: Optional[ObjectKind] = None

        self._installed: List[str] = []
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _tables(self) -> Dict[str, IndexedTable]:
        return {
            table.name: table
            for table in (
                self.object_bases,
                self.projections,
                self.slays,
                self.brands,
                self.curses,
                self.activations,
                self.properties,
                self.calculations,
                self.object_kinds,
                self.ego_items,
                self.artifacts,
            )
        }

    def table(self, name: str) -> IndexedTable:
        """Table by stage name (e.g. ``"object"``, ``"ego_item"``)."""
        try:
            return self._tables()[name]
        except KeyError:
            raise KeyError(f"Unknown content table: {name}") from None

    @property
    def curse_max(self) -> int:
        return len(self.curses)

    @property
    def loaded_tables(self) -> List[str]:
        """Installed table names in install order."""
        return list(self._installed)

    def install(self, name: str, records: Iterable) -> None:
        """Replace the contents of table `name` with `records`."""
        table = self.table(name)
        table.clear()
        for record in records:
            table.append(record)
        if name not in self._installed:
            self._installed.append(name)
        self.logger.debug(f"Installed table '{name}' with {len(table)} records")

    def sizes(self) -> Dict[str, int]:
        """Record count of every installed table."""
        return {name: len(self.table(name)) for name in self._installed}

    def seal(self) -> None:
        for table in self._tables().values():
            table.seal()

    def teardown(self) -> None:
        """Release installed tables in reverse install order. Safe to call twice."""
        if not self._installed:
            return
        for name in reversed(self._installed):
            self.logger.debug(f"Releasing table '{name}'")
            self.table(name).clear()
        self._installed.clear()
        self.a_max = 0
        self.unknown_item_kind = None
        self.unknown_gold_kind = None
        self.pile_kind = None
        self.curse_object_kind = None
