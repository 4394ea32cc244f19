"""
Parser for ego_item.txt.
"""

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import (
    apply_flag_tokens,
    apply_value_tokens,
    element_grabber,
    flag_grabber,
    int_value_grabber,
    rand_value_grabber,
    resist_grabber,
)
from ..models import EgoItem
from .base import TableParser, read_allocation


class EgoParser(TableParser[EgoItem]):
    name = "ego_item"
    requires = ("object_base", "slay", "brand", "curse", "activation", "object")

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("info int cost int rating", self.parse_info)
        parser.register("alloc int common str minmax", self.parse_alloc)
        parser.register("type sym tval", self.parse_type)
        parser.register("item sym tval sym sval", self.parse_item)
        parser.register("combat rand th rand td rand ta", self.parse_combat)
        parser.register("min-combat int th int td int ta", self.parse_min_combat)
        parser.register("act str name", self.parse_act)
        parser.register("time rand time", self.parse_time)
        parser.register("flags ?str flags", self.parse_flags)
        parser.register("values str values", self.parse_values)
        parser.register("min-values str min_values", self.parse_min_values)
        parser.register("desc str text", self.parse_desc)
        parser.register("slay str code", self.parse_slay)
        parser.register("brand str code", self.parse_brand)
        parser.register("curse sym name int power", self.parse_curse)

    def parse_name(self, directive: Directive) -> None:
        self.builder.start_record(EgoItem(name=directive.getstr("name")))

    def parse_info(self, directive: Directive) -> None:
        ego = self.current
        ego.cost = directive.getint("cost")
        ego.rating = directive.getint("rating")

    def parse_alloc(self, directive: Directive) -> None:
        ego = self.current
        ego.alloc = read_allocation(directive, bounded=True)

    def parse_type(self, directive: Directive) -> None:
        ego = self.current
        tval_name = directive.getsym("tval")
        kinds = self.resolver.kinds_of_tval(self.resolver.require_tval(tval_name))
        if not kinds:
            raise ParseError(ParseErrorKind.NO_KIND_FOR_EGO_TYPE, f"'{tval_name}'")
        ego.poss_items[:0] = reversed(kinds)

    def parse_item(self, directive: Directive) -> None:
        ego = self.current
        kind = self.resolver.require_kind(directive.getsym("tval"), directive.getsym("sval"))
        if kind.kidx <= 0:
            raise ParseError(ParseErrorKind.INVALID_ITEM_NUMBER, f"'{kind.name}'")
        ego.poss_items.insert(0, kind.kidx)

    def parse_combat(self, directive: Directive) -> None:
        ego = self.current
        ego.to_h = directive.getrand("th")
        ego.to_d = directive.getrand("td")
        ego.to_a = directive.getrand("ta")

    def parse_min_combat(self, directive: Directive) -> None:
        ego = self.current
        ego.min_to_h = directive.getint("th")
        ego.min_to_d = directive.getint("td")
        ego.min_to_a = directive.getint("ta")

    def parse_act(self, directive: Directive) -> None:
        ego = self.current
        ego.activation = self.resolver.find_activation(directive.getstr("name"))

    def parse_time(self, directive: Directive) -> None:
        self.current.time = directive.getrand("time")

    def parse_flags(self, directive: Directive) -> None:
        ego = self.current
        if not directive.hasval("flags"):
            return
        apply_flag_tokens(
            directive.getstr("flags"),
            flag_grabber(ego.flags),
            flag_grabber(ego.kind_flags),
            element_grabber(ego.el_info),
        )

    def parse_values(self, directive: Directive) -> None:
        ego = self.current
        apply_value_tokens(
            directive.getstr("values"),
            rand_value_grabber(ego.modifiers),
            resist_grabber(ego.el_info),
        )

    def parse_min_values(self, directive: Directive) -> None:
        ego = self.current
        apply_value_tokens(
            directive.getstr("min_values"), int_value_grabber(ego.min_modifiers)
        )

    def parse_desc(self, directive: Directive) -> None:
        self.current.text += directive.getstr("text")

    def parse_slay(self, directive: Directive) -> None:
        self.resolver.mark_slay(self.current, directive.getstr("code"))

    def parse_brand(self, directive: Directive) -> None:
        self.resolver.mark_brand(self.current, directive.getstr("code"))

    def parse_curse(self, directive: Directive) -> None:
        self.resolver.set_curse(
            self.current, directive.getsym("name"), directive.getint("power")
        )

    def finish(self) -> None:
        records = self.builder.materialize("eidx")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} ego items")
