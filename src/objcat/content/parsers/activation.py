"""
Parser for activation.txt.

Activations are the only table whose records link to their array
neighbour through `next`.
"""

from ..directives import Directive, DirectiveParser
from ..models import Activation
from .base import TableParser
from .effects import EffectDirectives


class ActivationParser(TableParser[Activation]):
    name = "activation"
    requires = ("object_base", "projection")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.effects = EffectDirectives(lambda: self.current.effects, self.resolver)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("aim uint aim", self.parse_aim)
        parser.register("power uint power", self.parse_power)
        self.effects.register(parser)
        parser.register("msg str msg", self.parse_msg)
        parser.register("desc str desc", self.parse_desc)

    def parse_name(self, directive: Directive) -> None:
        self.builder.start_record(Activation(name=directive.getstr("name")))

    def parse_aim(self, directive: Directive) -> None:
        self.current.aim = directive.getuint("aim") != 0

    def parse_power(self, directive: Directive) -> None:
        self.current.power = directive.getuint("power")

    def parse_msg(self, directive: Directive) -> None:
        self.current.message += directive.getstr("msg")

    def parse_desc(self, directive: Directive) -> None:
        self.current.desc += directive.getstr("desc")

    def finish(self) -> None:
        records = self.builder.materialize("index", link_next=True)
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} activations")
