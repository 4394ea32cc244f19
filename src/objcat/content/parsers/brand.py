"""
Parser for brand.txt.
"""

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import RACE_FLAGS_NS
from ..models import Brand
from .base import TableParser


class BrandParser(TableParser[Brand]):
    name = "brand"
    requires = ("object_base",)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("code str code", self.parse_code)
        parser.register("name str name", self.parse_name)
        parser.register("verb str verb", self.parse_verb)
        parser.register("multiplier uint multiplier", self.parse_multiplier)
        parser.register("power uint power", self.parse_power)
        parser.register("resist-flag sym flag", self.parse_resist_flag)
        parser.register("active-verb str verb", self.parse_active_verb)
        parser.register("active-verb-plural str verb", self.parse_active_verb_plural)
        parser.register("desc-adjective str adj", self.parse_desc_adjective)

    def parse_code(self, directive: Directive) -> None:
        self.builder.start_record(Brand(code=directive.getstr("code")))

    def parse_name(self, directive: Directive) -> None:
        self.current.name = directive.getstr("name")

    def parse_verb(self, directive: Directive) -> None:
        self.current.verb = directive.getstr("verb")

    def parse_multiplier(self, directive: Directive) -> None:
        self.current.multiplier = directive.getuint("multiplier")

    def parse_power(self, directive: Directive) -> None:
        self.current.power = directive.getuint("power")

    def parse_resist_flag(self, directive: Directive) -> None:
        brand = self.current
        flag = directive.getsym("flag")
        index = RACE_FLAGS_NS.index(flag)
        if index is None:
            raise ParseError(ParseErrorKind.INVALID_FLAG, f"'{flag}'")
        brand.resist_flag = index

    def parse_active_verb(self, directive: Directive) -> None:
        self.current.active_verb = directive.getstr("verb")

    def parse_active_verb_plural(self, directive: Directive) -> None:
        self.current.active_verb_plural = directive.getstr("verb")

    def parse_desc_adjective(self, directive: Directive) -> None:
        self.current.desc_adjective = directive.getstr("adj")

    def finish(self) -> None:
        records = self.builder.materialize("index")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} brands")
