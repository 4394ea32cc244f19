"""
Error types for the object catalog compiler.

Handlers raise ParseError with a ParseErrorKind; the directive reader
annotates it with the line and directive, and the pipeline wraps it into a
ContentLoadError naming the file.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ParseErrorKind(Enum):
    """Closed set of failure kinds a directive handler can report."""

    # Record structure
    MISSING_RECORD_HEADER = "missing record header"
    INTERNAL = "internal error"

    # Name lookups
    UNRECOGNISED_TVAL = "unrecognised tval"
    UNRECOGNISED_SLAY = "unrecognised slay"
    UNRECOGNISED_BRAND = "unrecognised brand"
    UNRECOGNISED_CURSE = "unrecognised curse"
    INVALID_ITEM_NUMBER = "invalid item number"
    NO_KIND_FOR_EGO_TYPE = "no kind for ego type"
    NOT_SPECIAL_ARTIFACT = "not a special artifact"
    INVALID_MONSTER_BASE = "invalid monster base"
    INVALID_EFFECT = "invalid effect"
    INVALID_COLOR = "invalid color"
    INVALID_MESSAGE = "invalid message type"
    ELEMENT_NAME_MISMATCH = "element name mismatch"

    # Token grammars
    INVALID_FLAG = "invalid flag"
    INVALID_VALUE = "invalid value"
    INVALID_SLAY = "invalid slay"

    # Enumerated strings
    INVALID_OPERATION = "invalid operation"
    INVALID_ITERATE = "invalid iterate"
    INVALID_SUBTYPE = "invalid subtype"
    INVALID_ID_TYPE = "invalid id type"
    INVALID_PROPERTY = "invalid property"
    INVALID_OBJ_PROP_CODE = "invalid object property code"
    MISSING_OBJ_PROP_TYPE = "missing object property type"

    # Numbers and ranges
    INVALID_ALLOCATION = "invalid allocation"
    OUT_OF_BOUNDS = "out of bounds"

    # Formulas
    INVALID_DICE = "invalid dice"
    INVALID_EXPRESSION = "invalid expression"
    BAD_EXPRESSION_STRING = "bad expression string"
    UNBOUND_EXPRESSION = "unbound expression"

    # Directive reader
    UNDEFINED_DIRECTIVE = "undefined directive"
    MISSING_FIELD = "missing field"
    NOT_NUMBER = "not a number"
    NOT_RANDOM = "not a random value"
    FIELD_TOO_LONG = "field too long"
    TOO_MANY_FIELDS = "too many fields"


class ParseError(Exception):
    """Raised by a directive handler when a content line is rejected.

    Attributes:
        kind: Failure kind
        detail: Human readable detail (may be empty)
        line_number: 1-based line number, set by the directive reader
        directive: Directive keyword, set by the directive reader
    """

    def __init__(self, kind: ParseErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        self.line_number: Optional[int] = None
        self.directive: Optional[str] = None
        super().__init__(self._compose())

    def locate(self, line_number: int, directive: Optional[str]) -> "ParseError":
        """Attach the position of the offending line and refresh the message."""
        self.line_number = line_number
        self.directive = directive
        self.args = (self._compose(),)
        return self

    def _compose(self) -> str:
        message = self.kind.value
        if self.detail:
            message = f"{message}: {self.detail}"
        if self.line_number is not None:
            where = f"line {self.line_number}"
            if self.directive:
                where = f"{where} ('{self.directive}')"
            message = f"{where}: {message}"
        return message


class ContentLoadError(Exception):
    """Raised when a content table cannot be loaded. The whole load is aborted."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
        directive: Optional[str] = None,
        kind: Optional[ParseErrorKind] = None,
    ):
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        self.directive = directive
        self.kind = kind
        location = ""
        if self.path is not None:
            location = str(self.path)
            if line_number is not None:
                location = f"{location}:{line_number}"
            location = f"{location}: "
        super().__init__(f"{location}{message}")

    @classmethod
    def from_parse_error(
        cls, path: Union[str, Path], error: ParseError
    ) -> "ContentLoadError":
        """Wrap a located ParseError raised while reading `path`."""
        message = error.kind.value
        if error.detail:
            message = f"{message}: {error.detail}"
        if error.directive:
            message = f"'{error.directive}': {message}"
        return cls(
            message,
            path=path,
            line_number=error.line_number,
            directive=error.directive,
            kind=error.kind,
        )
