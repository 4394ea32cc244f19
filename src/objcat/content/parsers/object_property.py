"""
Parser for object_property.txt.

Each property names a class (`type`) and a `code` looked up in the
vocabulary of that class: modifier names for stats and mods, item flag
names for flags, element names for the element classes.
"""

from typing import Optional

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..lists import ELEMENTS, OBJ_FLAGS, OBJ_MODS, NameTable
from ..models import IdType, ObjProperty, PropertySubtype, PropertyType
from .base import TableParser


def _code_table(prop_type: PropertyType) -> Optional[NameTable]:
    if prop_type in (PropertyType.STAT, PropertyType.MOD):
        return OBJ_MODS
    if prop_type is PropertyType.FLAG:
        return OBJ_FLAGS
    if prop_type in (
        PropertyType.IGNORE,
        PropertyType.RESIST,
        PropertyType.VULN,
        PropertyType.IMM,
    ):
        return ELEMENTS
    return None


class ObjectPropertyParser(TableParser[ObjProperty]):
    name = "object_property"
    requires = ("object_base",)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("type str type", self.parse_type)
        parser.register("subtype str subtype", self.parse_subtype)
        parser.register("id-type str id", self.parse_id_type)
        parser.register("code str code", self.parse_code)
        parser.register("power int power", self.parse_power)
        parser.register("mult int mult", self.parse_mult)
        parser.register("type-mult sym type int mult", self.parse_type_mult)
        parser.register("adjective str adj", self.parse_adjective)
        parser.register("neg-adjective str neg_adj", self.parse_neg_adjective)
        parser.register("msg str msg", self.parse_msg)
        parser.register("desc str desc", self.parse_desc)
        parser.register("short-desc str desc", self.parse_short_desc)

    def parse_name(self, directive: Directive) -> None:
        self.builder.start_record(ObjProperty(name=directive.getstr("name")))

    def parse_type(self, directive: Directive) -> None:
        prop = self.current
        text = directive.getstr("type")
        try:
            prop_type = PropertyType(text)
        except ValueError:
            prop_type = PropertyType.NONE
        if prop_type is PropertyType.NONE:
            raise ParseError(ParseErrorKind.INVALID_PROPERTY, f"'{text}'")
        prop.type = prop_type

    def parse_subtype(self, directive: Directive) -> None:
        prop = self.current
        text = directive.getstr("subtype")
        try:
            subtype = PropertySubtype(text)
        except ValueError:
            subtype = PropertySubtype.NONE
        if subtype is PropertySubtype.NONE:
            raise ParseError(ParseErrorKind.INVALID_SUBTYPE, f"'{text}'")
        prop.subtype = subtype

    def parse_id_type(self, directive: Directive) -> None:
        prop = self.current
        text = directive.getstr("id")
        try:
            id_type = IdType(text)
        except ValueError:
            id_type = IdType.NONE
        if id_type is IdType.NONE:
            raise ParseError(ParseErrorKind.INVALID_ID_TYPE, f"'{text}'")
        prop.id_type = id_type

    def parse_code(self, directive: Directive) -> None:
        prop = self.current
        code = directive.getstr("code")
        table = _code_table(prop.type)
        if table is None:
            raise ParseError(
                ParseErrorKind.MISSING_OBJ_PROP_TYPE, f"'{code}' given before 'type'"
            )
        if code not in table:
            raise ParseError(
                ParseErrorKind.INVALID_OBJ_PROP_CODE,
                f"'{code}' is not a valid {prop.type.value} code",
            )
        prop.code_index = table.index(code)

    def parse_power(self, directive: Directive) -> None:
        self.current.power = directive.getint("power")

    def parse_mult(self, directive: Directive) -> None:
        self.current.mult = directive.getint("mult")

    def parse_type_mult(self, directive: Directive) -> None:
        prop = self.current
        tval = self.resolver.require_tval(directive.getsym("type"))
        prop.type_mult[tval] = directive.getint("mult")

    def parse_adjective(self, directive: Directive) -> None:
        self.current.adjective = directive.getstr("adj")

    def parse_neg_adjective(self, directive: Directive) -> None:
        self.current.neg_adj = directive.getstr("neg_adj")

    def parse_msg(self, directive: Directive) -> None:
        self.current.msg = directive.getstr("msg")

    def parse_desc(self, directive: Directive) -> None:
        self.current.desc = directive.getstr("desc")

    def parse_short_desc(self, directive: Directive) -> None:
        self.current.short_desc = directive.getstr("desc")

    def finish(self) -> None:
        records = self.builder.materialize("index")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} object properties")
