"""
Parser for curse.txt.

Each curse owns a synthetic CurseObject holding the bonuses, flags, values
and effects the curse imposes; it is bound to the "<curse object>" kind
once the item kinds exist.
"""

from ..directives import Directive, DirectiveParser
from ..flags import (
    apply_flag_tokens,
    apply_value_tokens,
    element_grabber,
    flag_grabber,
    int_value_grabber,
    resist_grabber,
)
from ..models import Curse
from .base import TableParser
from .effects import EffectDirectives


class CurseParser(TableParser[Curse]):
    name = "curse"
    requires = ("object_base", "projection")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.effects = EffectDirectives(lambda: self.current.obj.effects, self.resolver)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("type sym tval", self.parse_type)
        parser.register("combat int to-h int to-d int to-a", self.parse_combat)
        self.effects.register(parser, messages=False)
        parser.register("msg str text", self.parse_msg)
        parser.register("time rand time", self.parse_time)
        parser.register("flags str flags", self.parse_flags)
        parser.register("values str values", self.parse_values)
        parser.register("desc str desc", self.parse_desc)
        parser.register("conflict str conf", self.parse_conflict)
        parser.register("conflict-flags str flags", self.parse_conflict_flags)

    def parse_name(self, directive: Directive) -> None:
        self.builder.start_record(Curse(name=directive.getstr("name")))

    def parse_type(self, directive: Directive) -> None:
        curse = self.current
        curse.poss[self.resolver.require_tval(directive.getsym("tval"))] = True

    def parse_combat(self, directive: Directive) -> None:
        obj = self.current.obj
        obj.to_h = directive.getint("to-h")
        obj.to_d = directive.getint("to-d")
        obj.to_a = directive.getint("to-a")

    def parse_msg(self, directive: Directive) -> None:
        effect = self.effects.last_effect()
        if effect is None:
            return
        effect.self_msg = directive.getstr("text")

    def parse_time(self, directive: Directive) -> None:
        self.current.obj.time = directive.getrand("time")

    def parse_flags(self, directive: Directive) -> None:
        obj = self.current.obj
        apply_flag_tokens(
            directive.getstr("flags"),
            flag_grabber(obj.flags),
            element_grabber(obj.el_info),
        )

    def parse_values(self, directive: Directive) -> None:
        obj = self.current.obj
        apply_value_tokens(
            directive.getstr("values"),
            int_value_grabber(obj.modifiers),
            resist_grabber(obj.el_info),
        )

    def parse_desc(self, directive: Directive) -> None:
        self.current.desc += directive.getstr("desc")

    def parse_conflict(self, directive: Directive) -> None:
        curse = self.current
        if curse.conflict is None:
            curse.conflict = "|"
        curse.conflict += directive.getstr("conf") + "|"

    def parse_conflict_flags(self, directive: Directive) -> None:
        curse = self.current
        apply_flag_tokens(directive.getstr("flags"), flag_grabber(curse.conflict_flags))

    def finish(self) -> None:
        records = self.builder.materialize("index")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} curses")
