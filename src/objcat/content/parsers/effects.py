"""
Effect directives shared by the object, curse and activation tables.

``effect`` puts a new effect at the front of the current record's list, so
effects are stored newest first. ``effect-yx``, ``dice``, ``expr`` and the
message directives refine the most recent effect and are silently ignored
while the record has no effect yet. ``expr`` is likewise ignored while the
effect has no dice.
"""

from typing import Callable, List, Mapping, Optional

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..formula import BaseValueProvider, EFFECT_BASE_VALUES, make_expression, parse_dice
from ..lists import EFFECT_SUBTYPES, EFFECTS, STATS, TIMED_EFFECTS
from ..models import Effect
from ..resolver import CrossReferenceResolver

EffectListGetter = Callable[[], List[Effect]]
"""Returns the effect list of the current record (raising if there is none)."""


class EffectDirectives:
    """Registers and handles the effect directive family for one table."""

    def __init__(
        self,
        effects: EffectListGetter,
        resolver: CrossReferenceResolver,
        bases: Mapping[str, BaseValueProvider] = EFFECT_BASE_VALUES,
    ):
        self.effects = effects
        self.resolver = resolver
        self.bases = bases

    def register(self, parser: DirectiveParser, messages: bool = True) -> None:
        """Register the directives; `messages` adds ``msg_self`` and ``msg_other``."""
        parser.register("effect sym eff ?sym type ?int radius ?int other", self.parse_effect)
        parser.register("effect-yx int y int x", self.parse_effect_yx)
        parser.register("dice str dice", self.parse_dice)
        parser.register("expr sym name sym base str expr", self.parse_expr)
        if messages:
            parser.register("msg_self str msg_self", self.parse_msg_self)
            parser.register("msg_other str msg_other", self.parse_msg_other)

    def last_effect(self) -> Optional[Effect]:
        effects = self.effects()
        return effects[0] if effects else None

    def _subtype(self, effect_name: str, text: str) -> int:
        subtype_class = EFFECT_SUBTYPES[effect_name]
        if subtype_class == "projection":
            index = self.resolver.projection_index(text)
        elif subtype_class == "stat":
            index = STATS.index(text) if text in STATS else -1
        elif subtype_class == "timed":
            index = TIMED_EFFECTS.index(text) if text in TIMED_EFFECTS else -1
        else:
            index = 0
        if index < 0:
            raise ParseError(
                ParseErrorKind.INVALID_VALUE,
                f"'{text}' is not a valid subtype for {effect_name}",
            )
        return index

    def parse_effect(self, directive: Directive) -> None:
        effects = self.effects()
        name = directive.getsym("eff")
        if name not in EFFECT_SUBTYPES:
            raise ParseError(ParseErrorKind.INVALID_EFFECT, f"'{name}'")

        effect = Effect(index=EFFECTS.index(name), name=name)
        if directive.hasval("type"):
            effect.subtype_name = directive.getsym("type")
            effect.subtype = self._subtype(name, effect.subtype_name)
        if directive.hasval("radius"):
            effect.radius = directive.getint("radius")
        if directive.hasval("other"):
            effect.other = directive.getint("other")
        effects.insert(0, effect)

    def parse_effect_yx(self, directive: Directive) -> None:
        effect = self.last_effect()
        if effect is None:
            return
        effect.y = directive.getint("y")
        effect.x = directive.getint("x")

    def parse_dice(self, directive: Directive) -> None:
        effect = self.last_effect()
        if effect is None:
            return
        effect.dice = parse_dice(directive.getstr("dice"))

    def parse_expr(self, directive: Directive) -> None:
        effect = self.last_effect()
        if effect is None or effect.dice is None:
            return
        expression = make_expression(
            directive.getsym("base"), directive.getstr("expr"), self.bases
        )
        effect.dice.bind_expression(directive.getsym("name"), expression)

    def parse_msg_self(self, directive: Directive) -> None:
        effect = self.last_effect()
        if effect is None:
            return
        effect.self_msg = (effect.self_msg or "") + directive.getstr("msg_self")

    def parse_msg_other(self, directive: Directive) -> None:
        effect = self.last_effect()
        if effect is None:
            return
        effect.other_msg = (effect.other_msg or "") + directive.getstr("msg_other")
