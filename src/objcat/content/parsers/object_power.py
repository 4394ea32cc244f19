"""
Parser for object_power.txt: the terms of the item power formula.

Item references (`type`, `item`) resolve against the object kinds
installed when this table is read.
"""

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..formula import POWER_BASE_VALUES, make_expression, parse_dice
from ..lists import ELEM_BASE_MAX, ELEM_XHIGH_MAX, OBJ_MOD_MAX, OF_MAX
from ..models import PowerCalc, PowerIterate, PowerOperation, PropertyType
from .base import TableParser

# Iterate keyword -> (property class, number of iterations)
ITERATE_TYPES = {
    "modifier": (PropertyType.MOD, OBJ_MOD_MAX),
    "resistance": (PropertyType.RESIST, ELEM_XHIGH_MAX + 1),
    "vulnerability": (PropertyType.VULN, ELEM_BASE_MAX + 1),
    "immunity": (PropertyType.IMM, ELEM_BASE_MAX + 1),
    "ignore": (PropertyType.IGNORE, ELEM_BASE_MAX + 1),
    "flag": (PropertyType.FLAG, OF_MAX),
}


class ObjectPowerParser(TableParser[PowerCalc]):
    name = "object_power"
    requires = ("object_base",)

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("type sym tval", self.parse_type)
        parser.register("item sym tval sym sval", self.parse_item)
        parser.register("dice str dice", self.parse_dice)
        parser.register("expr sym name sym base str expr", self.parse_expr)
        parser.register("operation str op", self.parse_operation)
        parser.register("iterate str iter", self.parse_iterate)
        parser.register("apply-to str apply", self.parse_apply_to)

    def parse_name(self, directive: Directive) -> None:
        self.builder.start_record(PowerCalc(name=directive.getstr("name")))

    def parse_type(self, directive: Directive) -> None:
        calc = self.current
        tval = self.resolver.require_tval(directive.getsym("tval"))
        calc.poss_items[:0] = reversed(self.resolver.kinds_of_tval(tval))

    def parse_item(self, directive: Directive) -> None:
        calc = self.current
        kind = self.resolver.require_kind(directive.getsym("tval"), directive.getsym("sval"))
        if kind.kidx <= 0:
            raise ParseError(ParseErrorKind.INVALID_ITEM_NUMBER, f"'{kind.name}'")
        calc.poss_items.insert(0, kind.kidx)

    def parse_dice(self, directive: Directive) -> None:
        self.current.dice = parse_dice(directive.getstr("dice"))

    def parse_expr(self, directive: Directive) -> None:
        calc = self.current
        if calc.dice is None:
            return
        expression = make_expression(
            directive.getsym("base"), directive.getstr("expr"), POWER_BASE_VALUES
        )
        calc.dice.bind_expression(directive.getsym("name"), expression)

    def parse_operation(self, directive: Directive) -> None:
        calc = self.current
        text = directive.getstr("op")
        try:
            operation = PowerOperation(text)
        except ValueError:
            operation = PowerOperation.NONE
        if operation is PowerOperation.NONE:
            raise ParseError(ParseErrorKind.INVALID_OPERATION, f"'{text}'")
        calc.operation = operation

    def parse_iterate(self, directive: Directive) -> None:
        calc = self.current
        text = directive.getstr("iter")
        if text not in ITERATE_TYPES:
            raise ParseError(ParseErrorKind.INVALID_ITERATE, f"'{text}'")
        property_type, count = ITERATE_TYPES[text]
        calc.iterate = PowerIterate(property_type=property_type, max=count)

    def parse_apply_to(self, directive: Directive) -> None:
        self.current.apply_to = directive.getstr("apply")

    def finish(self) -> None:
        records = self.builder.materialize("index")
        self.catalog.install(self.name, records)
        self.logger.info(f"Loaded {len(records)} power calculations")
