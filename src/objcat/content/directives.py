"""
Directive reader for line-oriented content files.

Each content line has the form ``directive:field:field...``. A table parser
registers one grammar per directive, for example::

    parser.register("name sym tval ?str name", handle_name)

Field types are ``str`` (rest of the line), ``sym``, ``int``, ``uint``,
``char`` and ``rand``; a ``?`` prefix marks a trailing optional field. The
handler receives a `Directive` and reads its fields through typed getters.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .errors import ParseError, ParseErrorKind
from .formula import RandomValue, parse_random


class FieldType(Enum):
    """Declared type of a directive field."""

    STR = "str"
    SYM = "sym"
    INT = "int"
    UINT = "uint"
    CHAR = "char"
    RAND = "rand"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: FieldType
    optional: bool = False


@dataclass(frozen=True)
class Grammar:
    """Parsed form of a grammar string such as ``"alloc int common str minmax"``."""

    directive: str
    fields: Tuple[FieldSpec, ...]

    @classmethod
    def parse(cls, text: str) -> "Grammar":
        """Parse a grammar string.

        Raises:
            ValueError: If the grammar itself is malformed.
        """
        tokens = text.split()
        if not tokens:
            raise ValueError("Empty grammar")
        directive, rest = tokens[0], tokens[1:]
        if len(rest) % 2:
            raise ValueError(f"Grammar '{text}': every field needs a type and a name")

        fields = []
        seen_optional = False
        for i in range(0, len(rest), 2):
            type_token, name = rest[i], rest[i + 1]
            optional = type_token.startswith("?")
            try:
                field_type = FieldType(type_token.lstrip("?"))
            except ValueError:
                raise ValueError(
                    f"Grammar '{text}': unknown field type '{type_token}'"
                ) from None
            if seen_optional and not optional:
                raise ValueError(
                    f"Grammar '{text}': required field '{name}' after an optional one"
                )
            if fields and fields[-1].type is FieldType.STR:
                raise ValueError(f"Grammar '{text}': a str field must be last")
            if any(f.name == name for f in fields):
                raise ValueError(f"Grammar '{text}': duplicate field '{name}'")
            seen_optional = seen_optional or optional
            fields.append(FieldSpec(name, field_type, optional))
        return cls(directive, tuple(fields))


class Directive:
    """One parsed content line with typed field access."""

    def __init__(
        self, grammar: Grammar, values: Dict[str, Any], line_number: int = 0
    ):
        self.grammar = grammar
        self.line_number = line_number
        self._values = values
        self._types = {f.name: f.type for f in grammar.fields}

    @property
    def name(self) -> str:
        return self.grammar.directive

    def hasval(self, name: str) -> bool:
        """True if field `name` is declared and present on this line."""
        return name in self._values

    def _get(self, name: str, expected: FieldType) -> Any:
        declared = self._types.get(name)
        if declared is None:
            raise KeyError(f"Directive '{self.name}' declares no field '{name}'")
        if declared is not expected:
            raise TypeError(
                f"Field '{name}' of '{self.name}' is {declared.value}, not {expected.value}"
            )
        if name not in self._values:
            raise KeyError(f"Optional field '{name}' of '{self.name}' is absent")
        return self._values[name]

    def getstr(self, name: str) -> str:
        return self._get(name, FieldType.STR)

    def getsym(self, name: str) -> str:
        return self._get(name, FieldType.SYM)

    def getint(self, name: str) -> int:
        return self._get(name, FieldType.INT)

    def getuint(self, name: str) -> int:
        return self._get(name, FieldType.UINT)

    def getchar(self, name: str) -> str:
        return self._get(name, FieldType.CHAR)

    def getrand(self, name: str) -> RandomValue:
        return self._get(name, FieldType.RAND)


DirectiveHandler = Callable[[Directive], None]
"""Handler for one directive. Signals rejection by raising ParseError."""

_INT_RE = re.compile(r"[+-]?\d+")
_UINT_RE = re.compile(r"\+?\d+")


def _convert(field_spec: FieldSpec, token: str) -> Any:
    if field_spec.type is FieldType.STR:
        return token
    if not token:
        raise ParseError(ParseErrorKind.MISSING_FIELD, f"'{field_spec.name}' is empty")
    if field_spec.type is FieldType.SYM:
        return token
    if field_spec.type is FieldType.INT:
        if not _INT_RE.fullmatch(token):
            raise ParseError(ParseErrorKind.NOT_NUMBER, f"'{field_spec.name}' = '{token}'")
        return int(token)
    if field_spec.type is FieldType.UINT:
        if not _UINT_RE.fullmatch(token):
            raise ParseError(ParseErrorKind.NOT_NUMBER, f"'{field_spec.name}' = '{token}'")
        return int(token)
    if field_spec.type is FieldType.CHAR:
        if len(token) != 1:
            raise ParseError(
                ParseErrorKind.FIELD_TOO_LONG, f"'{field_spec.name}' = '{token}'"
            )
        return token
    value = parse_random(token)
    if value is None:
        raise ParseError(ParseErrorKind.NOT_RANDOM, f"'{field_spec.name}' = '{token}'")
    return value


class DirectiveParser:
    """Registry of directive grammars and the line reader that dispatches to them."""

    def __init__(self, source: str = "<input>"):
        self.source = source
        self._grammars: Dict[str, Grammar] = {}
        self._handlers: Dict[str, DirectiveHandler] = {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def directives(self) -> Tuple[str, ...]:
        return tuple(self._grammars)

    def register(self, grammar: str, handler: DirectiveHandler) -> None:
        """Register `handler` for the directive described by `grammar`.

        Args:
            grammar: Grammar string, directive keyword first
            handler: Callable receiving the parsed Directive

        Raises:
            ValueError: If the grammar string is malformed.
        """
        parsed = Grammar.parse(grammar)
        self._grammars[parsed.directive] = parsed
        self._handlers[parsed.directive] = handler

    def parse_line(self, text: str, line_number: int = 0) -> bool:
        """Parse and dispatch one line.

        Returns:
            True if a directive was handled, False for blank or comment lines.

        Raises:
            ParseError: Located at `line_number`.
        """
        line = text.rstrip("\r\n").lstrip()
        if not line or line.startswith("#"):
            return False

        keyword, sep, body = line.partition(":")
        keyword = keyword.strip()
        grammar = self._grammars.get(keyword)
        try:
            if grammar is None:
                raise ParseError(ParseErrorKind.UNDEFINED_DIRECTIVE, f"'{keyword}'")
            directive = Directive(
                grammar,
                self._read_fields(grammar, body if sep else None),
                line_number,
            )
            self._handlers[keyword](directive)
        except ParseError as e:
            raise e.locate(line_number, keyword)
        return True

    def parse_lines(self, lines: Iterable[str]) -> int:
        """Parse every line in order. Returns the number of directives handled."""
        handled = 0
        for line_number, text in enumerate(lines, start=1):
            if self.parse_line(text, line_number):
                handled += 1
        self.logger.debug(f"{self.source}: {handled} directives handled")
        return handled

    @staticmethod
    def _read_fields(grammar: Grammar, body: Optional[str]) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        rest = body
        for field_spec in grammar.fields:
            if rest is None:
                if field_spec.optional:
                    break
                raise ParseError(ParseErrorKind.MISSING_FIELD, f"'{field_spec.name}'")
            if field_spec.type is FieldType.STR:
                token, rest = rest, None
            else:
                token, sep, remainder = rest.partition(":")
                rest = remainder if sep else None
            if field_spec.optional and not token:
                continue
            values[field_spec.name] = _convert(field_spec, token)
        if rest:
            raise ParseError(ParseErrorKind.TOO_MANY_FIELDS, f"':{rest}'")
        return values
