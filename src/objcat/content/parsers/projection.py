"""
Parser for projection.txt: elements and other projectable effects.

Projections are declared in element order; the first ELEM_MAX codes must
spell out the element table exactly.
"""

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import RACE_FLAGS_NS, apply_flag_tokens, flag_grabber
from ..lists import ELEM_MAX, ELEMENTS, color_to_attr, message_lookup
from ..models import Projection
from .base import TableParser


class ProjectionParser(TableParser[Projection]):
    name = "projection"
    requires = ("object_base",)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("code str code", self.parse_code)
        parser.register("name str name", self.parse_name)
        parser.register("type str type", self.parse_type)
        parser.register("desc str desc", self.parse_desc)
        parser.register("blind-desc str desc", self.parse_blind_desc)
        parser.register("lash-desc str desc", self.parse_lash_desc)
        parser.register("numerator uint num", self.parse_numerator)
        parser.register("denominator rand denom", self.parse_denominator)
        parser.register("divisor uint div", self.parse_divisor)
        parser.register("damage-cap uint cap", self.parse_damage_cap)
        parser.register("msgt sym type", self.parse_msgt)
        parser.register("obvious uint answer", self.parse_obvious)
        parser.register("color sym color", self.parse_color)
        parser.register("pvp-flags ?str flags", self.parse_pvp_flags)
        parser.register("threat str threat", self.parse_threat)
        parser.register("threat-flag sym flag", self.parse_threat_flag)

    def parse_code(self, directive: Directive) -> None:
        previous = self.builder.current
        index = previous.index + 1 if previous else 0
        code = directive.getstr("code")
        if index < ELEM_MAX and code != ELEMENTS[index]:
            raise ParseError(
                ParseErrorKind.ELEMENT_NAME_MISMATCH,
                f"expected '{ELEMENTS[index]}', found '{code}'",
            )
        self.builder.start_record(Projection(index=index, code=code))

    def parse_name(self, directive: Directive) -> None:
        self.current.name = directive.getstr("name")

    def parse_type(self, directive: Directive) -> None:
        self.current.type = directive.getstr("type")

    def parse_desc(self, directive: Directive) -> None:
        self.current.desc = directive.getstr("desc")

    def parse_blind_desc(self, directive: Directive) -> None:
        self.current.blind_desc = directive.getstr("desc")

    def parse_lash_desc(self, directive: Directive) -> None:
        self.current.lash_desc = directive.getstr("desc")

    def parse_numerator(self, directive: Directive) -> None:
        self.current.numerator = directive.getuint("num")

    def parse_denominator(self, directive: Directive) -> None:
        self.current.denominator = directive.getrand("denom")

    def parse_divisor(self, directive: Directive) -> None:
        self.current.divisor = directive.getuint("div")

    def parse_damage_cap(self, directive: Directive) -> None:
        self.current.damage_cap = directive.getuint("cap")

    def parse_msgt(self, directive: Directive) -> None:
        projection = self.current
        msg_type = directive.getsym("type")
        msgt = message_lookup(msg_type)
        if msgt < 0:
            raise ParseError(ParseErrorKind.INVALID_MESSAGE, f"'{msg_type}'")
        projection.msgt = msgt

    def parse_obvious(self, directive: Directive) -> None:
        self.current.obvious = directive.getuint("answer") == 1

    def parse_color(self, directive: Directive) -> None:
        projection = self.current
        color = directive.getsym("color")
        attr = color_to_attr(color)
        if attr < 0:
            raise ParseError(ParseErrorKind.INVALID_COLOR, f"'{color}'")
        projection.color = attr

    def parse_pvp_flags(self, directive: Directive) -> None:
        projection = self.current
        if not directive.hasval("flags"):
            return
        apply_flag_tokens(directive.getstr("flags"), flag_grabber(projection.pvp_flags))

    def parse_threat(self, directive: Directive) -> None:
        self.current.threat = directive.getstr("threat")

    def parse_threat_flag(self, directive: Directive) -> None:
        projection = self.current
        flag = directive.getsym("flag")
        index = RACE_FLAGS_NS.index(flag)
        if index is None:
            raise ParseError(ParseErrorKind.INVALID_FLAG, f"'{flag}'")
        projection.threat_flag = index

    def finish(self) -> None:
        records = self.builder.materialize("index")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} projections")
