"""
Parser for slay.txt.

A slay targets monsters either by race flag or by monster base, never both.
"""

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import ITEM_FLAGS_NS, RACE_FLAGS_NS
from ..lists import MONSTER_BASES
from ..models import Slay
from .base import TableParser


class SlayParser(TableParser[Slay]):
    name = "slay"
    requires = ("object_base",)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("code str code", self.parse_code)
        parser.register("name str name", self.parse_name)
        parser.register("race-flag sym flag", self.parse_race_flag)
        parser.register("base sym base", self.parse_base)
        parser.register("multiplier uint multiplier", self.parse_multiplier)
        parser.register("power uint power", self.parse_power)
        parser.register("melee-verb str verb", self.parse_melee_verb)
        parser.register("range-verb str verb", self.parse_range_verb)
        parser.register("esp-chance uint chance", self.parse_esp_chance)
        parser.register("esp-flag sym flag", self.parse_esp_flag)

    def parse_code(self, directive: Directive) -> None:
        self.builder.start_record(Slay(code=directive.getstr("code")))

    def parse_name(self, directive: Directive) -> None:
        self.current.name = directive.getstr("name")

    def parse_race_flag(self, directive: Directive) -> None:
        slay = self.current
        flag = directive.getsym("flag")
        index = RACE_FLAGS_NS.index(flag)
        if index is None:
            raise ParseError(ParseErrorKind.INVALID_FLAG, f"'{flag}'")
        if slay.base is not None:
            raise ParseError(
                ParseErrorKind.INVALID_SLAY, "slay has both a race flag and a base"
            )
        slay.race_flag = index

    def parse_base(self, directive: Directive) -> None:
        slay = self.current
        base = directive.getsym("base")
        if base not in MONSTER_BASES:
            raise ParseError(ParseErrorKind.INVALID_MONSTER_BASE, f"'{base}'")
        if slay.race_flag is not None:
            raise ParseError(
                ParseErrorKind.INVALID_SLAY, "slay has both a race flag and a base"
            )
        slay.base = base

    def parse_multiplier(self, directive: Directive) -> None:
        self.current.multiplier = directive.getuint("multiplier")

    def parse_power(self, directive: Directive) -> None:
        self.current.power = directive.getuint("power")

    def parse_melee_verb(self, directive: Directive) -> None:
        self.current.melee_verb = directive.getstr("verb")

    def parse_range_verb(self, directive: Directive) -> None:
        self.current.range_verb = directive.getstr("verb")

    def parse_esp_chance(self, directive: Directive) -> None:
        self.current.esp_chance = directive.getuint("chance")

    def parse_esp_flag(self, directive: Directive) -> None:
        slay = self.current
        flag = directive.getsym("flag")
        index = ITEM_FLAGS_NS.index(flag)
        if index is None:
            raise ParseError(ParseErrorKind.INVALID_FLAG, f"'{flag}'")
        slay.esp_flag = index

    def finish(self) -> None:
        records = self.builder.materialize("index")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} slays")
