"""
Parser for artifact.txt.

An artifact names its base kind by category and subtype name. Special
artifacts (those without an ordinary base kind, such as the light sources
of legend) get a kind synthesized on the spot, marked INSTA_ART, whose
glyph, colour, level and weight come from the artifact itself.

Finishing this table also binds the special kinds of the "none" category
and points every curse object at the "<curse object>" kind.
"""

from typing import Optional

from ..directives import Directive, DirectiveParser
from ..errors import ParseError, ParseErrorKind
from ..flags import (
    ElementFlag,
    apply_flag_tokens,
    apply_value_tokens,
    element_grabber,
    flag_grabber,
    int_value_grabber,
    resist_grabber,
)
from ..lists import ELEM_BASE_MIN, ELEM_HIGH_MIN, KF_INSTA_ART, TV_LIGHT, TV_NONE, color_to_attr
from ..models import Artifact, ObjectKind
from .base import TableParser, read_allocation

# Spare artifact slots kept after the declared ones
ARTIFACT_SPARE_SLOTS = 9


class ArtifactParser(TableParser[Artifact]):
    name = "artifact"
    requires = ("object_base", "slay", "brand", "curse", "activation", "object")

    def register(self, parser: DirectiveParser) -> None:
        parser.register("name str name", self.parse_name)
        parser.register("base-object sym tval sym sval", self.parse_base_object)
        parser.register("graphics char glyph sym color", self.parse_graphics)
        parser.register("level int level", self.parse_level)
        parser.register("weight int weight", self.parse_weight)
        parser.register("alloc int common str minmax", self.parse_alloc)
        parser.register("attack rand hd int to-h int to-d", self.parse_attack)
        parser.register("armor int ac int to-a", self.parse_armor)
        parser.register("flags ?str flags", self.parse_flags)
        parser.register("act str name", self.parse_act)
        parser.register("time rand time", self.parse_time)
        parser.register("msg str text", self.parse_msg)
        parser.register("values str values", self.parse_values)
        parser.register("desc str text", self.parse_desc)
        parser.register("slay str code", self.parse_slay)
        parser.register("brand str code", self.parse_brand)
        parser.register("curse sym name int power", self.parse_curse)

    def _kind(self, artifact: Artifact) -> ObjectKind:
        # Subtype numbers start at 1, so sval 0 means no base-object line yet
        kind = None
        if artifact.sval > 0:
            kind = self.resolver.lookup_kind(artifact.tval, artifact.sval)
        if kind is None:
            raise ParseError(
                ParseErrorKind.INVALID_ITEM_NUMBER,
                f"artifact '{artifact.name}' has no base object",
            )
        return kind

    def parse_name(self, directive: Directive) -> None:
        artifact = self.builder.start_record(Artifact(name=directive.getstr("name")))
        # Artifacts ignore the base elements
        for i in range(ELEM_BASE_MIN, ELEM_HIGH_MIN):
            artifact.el_info[i].flags |= ElementFlag.IGNORE

    def parse_base_object(self, directive: Directive) -> None:
        artifact = self.current
        artifact.tval = self.resolver.require_tval(directive.getsym("tval"))
        sval_name = directive.getsym("sval")
        sval = self.resolver.lookup_sval(artifact.tval, sval_name)
        if sval < 0:
            self.resolver.write_dummy_kind(artifact, sval_name)
        else:
            artifact.sval = sval

    def parse_graphics(self, directive: Directive) -> None:
        artifact = self.current
        kind = self._kind(artifact)
        if not kind.kind_flags.has(KF_INSTA_ART):
            raise ParseError(ParseErrorKind.NOT_SPECIAL_ARTIFACT, f"'{artifact.name}'")
        color = directive.getsym("color")
        attr = color_to_attr(color)
        if attr < 0:
            raise ParseError(ParseErrorKind.INVALID_COLOR, f"'{color}'")
        kind.d_char = directive.getchar("glyph")
        kind.d_attr = attr

    def parse_level(self, directive: Directive) -> None:
        artifact = self.current
        artifact.level = directive.getint("level")
        kind = self._kind(artifact)
        if kind.level == -1:
            kind.level = artifact.level

    def parse_weight(self, directive: Directive) -> None:
        artifact = self.current
        artifact.weight = directive.getint("weight")
        kind = self._kind(artifact)
        if kind.weight == -1:
            kind.weight = artifact.weight

    def parse_alloc(self, directive: Directive) -> None:
        artifact = self.current
        artifact.alloc = read_allocation(directive, bounded=True)

    def parse_attack(self, directive: Directive) -> None:
        artifact = self.current
        hd = directive.getrand("hd")
        artifact.dd = hd.dice
        artifact.ds = hd.sides
        artifact.to_h = directive.getint("to-h")
        artifact.to_d = directive.getint("to-d")

    def parse_armor(self, directive: Directive) -> None:
        artifact = self.current
        artifact.ac = directive.getint("ac")
        artifact.to_a = directive.getint("to-a")

    def parse_flags(self, directive: Directive) -> None:
        artifact = self.current
        if not directive.hasval("flags"):
            return
        apply_flag_tokens(
            directive.getstr("flags"),
            flag_grabber(artifact.flags),
            element_grabber(artifact.el_info),
        )

    def parse_act(self, directive: Directive) -> None:
        artifact = self.current
        activation = self.resolver.find_activation(directive.getstr("name"))
        # Light artifacts keep their activation on the kind
        if artifact.tval == TV_LIGHT:
            self._kind(artifact).activation = activation
        else:
            artifact.activation = activation

    def parse_time(self, directive: Directive) -> None:
        artifact = self.current
        time = directive.getrand("time")
        if artifact.tval == TV_LIGHT:
            self._kind(artifact).time = time
        else:
            artifact.time = time

    def parse_msg(self, directive: Directive) -> None:
        self.current.alt_msg += directive.getstr("text")

    def parse_values(self, directive: Directive) -> None:
        artifact = self.current
        apply_value_tokens(
            directive.getstr("values"),
            int_value_grabber(artifact.modifiers),
            resist_grabber(artifact.el_info),
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

    def _special_kind(self, name: str) -> Optional[ObjectKind]:
        kind = self.resolver.lookup_kind(TV_NONE, self.resolver.lookup_sval(TV_NONE, name))
        if kind is None:
            self.logger.warning(f"Special object kind '{name}' is not defined")
        return kind

    def finish(self) -> None:
        declared = len(self.builder)
        records = self.builder.materialize(
            "aidx", extra=ARTIFACT_SPARE_SLOTS, placeholder=Artifact
        )
        self.catalog.install(self.name, records)
        self.catalog.a_max = declared

        self.catalog.unknown_item_kind = self._special_kind("<unknown item>")
        self.catalog.unknown_gold_kind = self._special_kind("<unknown treasure>")
        self.catalog.pile_kind = self._special_kind("<pile>")
        self.catalog.curse_object_kind = self._special_kind("<curse object>")

        curse_kind = self.catalog.curse_object_kind
        for curse in self.catalog.curses:
            curse.obj.kind = curse_kind
            curse.obj.sval = curse_kind.sval if curse_kind else 0

        self.logger.info(
            f"Loaded {declared} artifacts ({ARTIFACT_SPARE_SLOTS} spare slots)"
        )
