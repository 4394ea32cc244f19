"""
Record builder: accumulates the records of one table while its file is read.

Starting a record prepends it to the pending sequence and makes it the
current record; every other directive mutates the current record. Once the
file is done, `materialize` turns the pending records into the final list
in declaration order and assigns each record its array index.
"""

import logging
from collections import deque
from typing import Callable, Deque, Generic, List, Optional, TypeVar

from .errors import ParseError, ParseErrorKind

T = TypeVar("T")


class RecordBuilder(Generic[T]):
    """Pending records of one table, newest first."""

    def __init__(self, table: str):
        self.table = table
        self._pending: Deque[T] = deque()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def start_record(self, record: T) -> T:
        """Make `record` the current record. Duplicate names are not detected."""
        self._pending.appendleft(record)
        return record

    @property
    def current(self) -> Optional[T]:
        return self._pending[0] if self._pending else None

    def require_current(self) -> T:
        """Return the current record.

        Raises:
            ParseError: MISSING_RECORD_HEADER when no record has been started.
        """
        if not self._pending:
            raise ParseError(
                ParseErrorKind.MISSING_RECORD_HEADER,
                f"no {self.table} record started",
            )
        return self._pending[0]

    def __len__(self) -> int:
        return len(self._pending)

    def pending(self) -> List[T]:
        """Pending records in declaration order, without consuming them."""
        return list(reversed(self._pending))

    def materialize(
        self,
        index_attr: Optional[str] = None,
        extra: int = 0,
        placeholder: Optional[Callable[[], T]] = None,
        link_next: bool = False,
    ) -> List[T]:
        """Turn the pending records into the final array.

        Args:
            index_attr: Attribute that receives each record's array position
            extra: Number of placeholder slots appended after the records
            placeholder: Factory for placeholder slots (required if extra > 0)
            link_next: Point each record's `next` at the following element

        Returns:
            Records in declaration order, first declared at index 0.
        """
        if extra and placeholder is None:
            raise ValueError("placeholder factory required for extra slots")

        records: List[T] = list(reversed(self._pending))
        self._pending.clear()
        records.extend(placeholder() for _ in range(extra))  # type: ignore[misc]

        for i, record in enumerate(records):
            if index_attr:
                setattr(record, index_attr, i)
            if link_next:
                setattr(record, "next", records[i + 1] if i + 1 < len(records) else None)

        self.logger.debug(
            f"Materialized {len(records) - extra} {self.table} records"
            + (f" (+{extra} spare slots)" if extra else "")
        )
        return records
