"""
Parser for object.txt: the item kinds.
"""

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import (
    apply_flag_tokens,
    apply_value_tokens,
    element_grabber,
    flag_grabber,
    rand_value_grabber,
    resist_grabber,
)
from ..lists import color_to_attr
from ..models import ObjectKind
from .base import TableParser, read_allocation
from .effects import EffectDirectives


class ObjectParser(TableParser[ObjectKind]):
    name = "object"
    requires = (
        "object_base",
        "projection",
        "slay",
        "brand",
        "curse",
        "activation",
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.effects = EffectDirectives(lambda: self.current.effects, self.resolver)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("graphics char glyph sym color", self.parse_graphics)
        parser.register("type sym tval", self.parse_type)
        parser.register("level int level", self.parse_level)
        parser.register("weight int weight", self.parse_weight)
        parser.register("cost int cost", self.parse_cost)
        parser.register("alloc int common str minmax", self.parse_alloc)
        parser.register("attack rand hd rand to-h rand to-d", self.parse_attack)
        parser.register("armor int ac rand to-a", self.parse_armor)
        parser.register("charges rand charges", self.parse_charges)
        parser.register("pile int prob rand stack", self.parse_pile)
        parser.register("flags str flags", self.parse_flags)
        self.effects.register(parser)
        parser.register("act str name", self.parse_act)
        parser.register("time rand time", self.parse_time)
        parser.register("pval rand pval", self.parse_pval)
        parser.register("values str values", self.parse_values)
        parser.register("desc str text", self.parse_desc)
        parser.register("slay str code", self.parse_slay)
        parser.register("brand str code", self.parse_brand)
        parser.register("curse sym name int power", self.parse_curse)

    def parse_name(self, directive: Directive) -> None:
        self.builder.start_record(ObjectKind(name=directive.getstr("name")))

    def parse_graphics(self, directive: Directive) -> None:
        kind = self.current
        color = directive.getsym("color")
        attr = color_to_attr(color)
        if attr < 0:
            raise ParseError(ParseErrorKind.INVALID_COLOR, f"'{color}'")
        kind.d_char = directive.getchar("glyph")
        kind.d_attr = attr

    def parse_type(self, directive: Directive) -> None:
        kind = self.current
        tval = self.resolver.require_tval(directive.getsym("tval"))
        base = self.catalog.object_bases[tval]
        kind.tval = tval
        kind.base = base
        base.num_svals += 1
        kind.sval = base.num_svals

    def parse_level(self, directive: Directive) -> None:
        self.current.level = directive.getint("level")

    def parse_weight(self, directive: Directive) -> None:
        self.current.weight = directive.getint("weight")

    def parse_cost(self, directive: Directive) -> None:
        self.current.cost = directive.getint("cost")

    def parse_alloc(self, directive: Directive) -> None:
        kind = self.current
        kind.alloc = read_allocation(directive)

    def parse_attack(self, directive: Directive) -> None:
        kind = self.current
        hd = directive.getrand("hd")
        kind.dd = hd.dice
        kind.ds = hd.sides
        kind.to_h = directive.getrand("to-h")
        kind.to_d = directive.getrand("to-d")

    def parse_armor(self, directive: Directive) -> None:
        kind = self.current
        kind.ac = directive.getint("ac")
        kind.to_a = directive.getrand("to-a")

    def parse_charges(self, directive: Directive) -> None:
        self.current.charge = directive.getrand("charges")

    def parse_pile(self, directive: Directive) -> None:
        kind = self.current
        kind.gen_mult_prob = directive.getint("prob")
        kind.stack_size = directive.getrand("stack")

    def parse_flags(self, directive: Directive) -> None:
        kind = self.current
        apply_flag_tokens(
            directive.getstr("flags"),
            flag_grabber(kind.flags),
            flag_grabber(kind.kind_flags),
            element_grabber(kind.el_info),
        )

    def parse_act(self, directive: Directive) -> None:
        kind = self.current
        kind.activation = self.resolver.find_activation(directive.getstr("name"))

    def parse_time(self, directive: Directive) -> None:
        self.current.time = directive.getrand("time")

    def parse_pval(self, directive: Directive) -> None:
        self.current.pval = directive.getrand("pval")

    def parse_values(self, directive: Directive) -> None:
        kind = self.current
        apply_value_tokens(
            directive.getstr("values"),
            rand_value_grabber(kind.modifiers),
            resist_grabber(kind.el_info),
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
        records = self.builder.materialize("kidx")
        for kind in records:
            if kind.base is None:
                kind.base = self.catalog.object_bases[kind.tval]
            kind.kind_flags.union(kind.base.kind_flags)
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} object kinds")
