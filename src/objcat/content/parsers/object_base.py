"""
Parser for object_base.txt: shared defaults of each item category.
"""

from typing import Dict, List

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import apply_flag_tokens, element_grabber, flag_grabber
from ..lists import TV_MAX, TVALS, color_to_attr
from ..models import ObjectBase
from .base import TableParser


class ObjectBaseParser(TableParser[ObjectBase]):
    """Builds the category-indexed ObjectBase table."""

    name = "object_base"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Values of `default` lines, copied into every base named after them
        self.defaults: Dict[str, int] = {"break-chance": 0, "max-stack": 0}

    def register(self, parser: DirectiveParser) -> None:
        parser.register("default sym label int value", self.parse_default)
        parser.register("name sym tval ?str name", self.parse_name)
        parser.register("graphics sym color", self.parse_graphics)
        parser.register("break int breakage", self.parse_break)
        parser.register("max-stack int size", self.parse_max_stack)
        parser.register("flags str flags", self.parse_flags)

    def parse_default(self, directive: Directive) -> None:
        label = directive.getsym("label")
        if label not in self.defaults:
            raise ParseError(
                ParseErrorKind.UNDEFINED_DIRECTIVE, f"unknown default '{label}'"
            )
        self.defaults[label] = directive.getint("value")

    def parse_name(self, directive: Directive) -> None:
        tval = self.resolver.require_tval(directive.getsym("tval"))
        base = ObjectBase(
            tval=tval,
            name=directive.getstr("name") if directive.hasval("name") else None,
            break_perc=self.defaults["break-chance"],
            max_stack=self.defaults["max-stack"],
        )
        self.builder.start_record(base)

    def parse_graphics(self, directive: Directive) -> None:
        base = self.current
        color = directive.getsym("color")
        attr = color_to_attr(color)
        if attr < 0:
            raise ParseError(ParseErrorKind.INVALID_COLOR, f"'{color}'")
        base.attr = attr

    def parse_break(self, directive: Directive) -> None:
        self.current.break_perc = directive.getint("breakage")

    def parse_max_stack(self, directive: Directive) -> None:
        self.current.max_stack = directive.getint("size")

    def parse_flags(self, directive: Directive) -> None:
        base = self.current
        apply_flag_tokens(
            directive.getstr("flags"),
            flag_grabber(base.flags),
            flag_grabber(base.kind_flags),
            element_grabber(base.el_info),
        )

    def finish(self) -> None:
        table: List[ObjectBase] = [ObjectBase(tval=tval) for tval in range(TV_MAX)]
        named = [False] * TV_MAX
        for base in self.builder.materialize():
            # First declaration of a category wins
            if not named[base.tval]:
                table[base.tval] = base
                named[base.tval] = True
            else:
                self.logger.warning(
                    f"Duplicate object base for tval '{TVALS[base.tval]}' ignored"
                )
        self.catalog.install(self.name, table)
        self.logger.info(
            f"Loaded {sum(named)} object bases ({TV_MAX} categories)"
        )
