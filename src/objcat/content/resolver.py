"""
Cross-reference resolution between content tables.

Later tables refer to earlier ones by name: items name slays, brands,
curses and activations; egos and power calculations name item kinds by
category and subtype name; artifacts name a base kind, which is synthesized
when it does not exist yet. All lookups run against tables that are already
installed in the Catalog.
"""

import logging
from typing import List, Optional, Union

from .catalog import Catalog
from .errors import ParseError, ParseErrorKind
from .lists import COLOUR_RED, KF_INSTA_ART, tval_find_idx
from .models import Activation, Artifact, EgoItem, ObjectKind

ItemRecord = Union[ObjectKind, EgoItem, Artifact]
"""Records that can carry slays, brands and curses."""


def strip_name_markers(name: str) -> str:
    """Kind name without the ``& `` article marker and ``~`` plural markers."""
    if name.startswith("& "):
        name = name[2:]
    return name.replace("~", "")


class CrossReferenceResolver:
    """Resolves names against the installed tables of a Catalog."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # === CATEGORIES AND KINDS ===

    @staticmethod
    def tval_index(name: str) -> int:
        """Category index by name (case-insensitive), -1 when unknown."""
        return tval_find_idx(name)

    def require_tval(self, name: str) -> int:
        """Category index by name.

        Raises:
            ParseError: UNRECOGNISED_TVAL for an unknown category.
        """
        tval = self.tval_index(name)
        if tval < 0:
            raise ParseError(ParseErrorKind.UNRECOGNISED_TVAL, f"'{name}'")
        return tval

    def lookup_sval(self, tval: int, name: str) -> int:
        """Subtype number of the kind called `name` in category `tval`, -1 if none.

        A purely numeric name is taken as the subtype number itself.
        """
        if name.isdigit():
            return int(name)
        for kind in self.catalog.object_kinds:
            if kind.tval == tval and strip_name_markers(kind.name) == name:
                return kind.sval
        return -1

    def lookup_kind(self, tval: int, sval: int) -> Optional[ObjectKind]:
        for kind in self.catalog.object_kinds:
            if kind.tval == tval and kind.sval == sval:
                return kind
        return None

    def kinds_of_tval(self, tval: int) -> List[int]:
        """Indices of every kind of category `tval`, in table order."""
        return [
            kind.kidx for kind in self.catalog.object_kinds if kind.tval == tval
        ]

    def require_kind(self, tval_name: str, sval_name: str) -> ObjectKind:
        """Kind named by category and subtype name.

        Raises:
            ParseError: UNRECOGNISED_TVAL or INVALID_ITEM_NUMBER.
        """
        tval = self.require_tval(tval_name)
        kind = self.lookup_kind(tval, self.lookup_sval(tval, sval_name))
        if kind is None:
            raise ParseError(
                ParseErrorKind.INVALID_ITEM_NUMBER, f"'{tval_name}:{sval_name}'"
            )
        return kind

    def write_dummy_kind(self, artifact: Artifact, sval_name: str) -> ObjectKind:
        """Synthesize the base kind of a special artifact.

        The new kind is appended to the object kind table, takes the next
        subtype number of its category and carries sentinel level and weight
        (-1) until the artifact's own values are known.

        Raises:
            ParseError: INTERNAL if the category has no base record or the
                kind table can no longer grow.
        """
        bases = self.catalog.object_bases
        if not 0 <= artifact.tval < len(bases):
            raise ParseError(
                ParseErrorKind.INTERNAL, f"no object base for tval {artifact.tval}"
            )
        base = bases[artifact.tval]

        kind = ObjectKind(
            name=f"& {sval_name}~",
            tval=artifact.tval,
            base=base,
            d_char="*",
            d_attr=COLOUR_RED,
            level=-1,
            weight=-1,
        )
        kind.kind_flags.union(base.kind_flags)
        kind.kind_flags.on(KF_INSTA_ART)

        kind.kidx = self.catalog.object_kinds.append(kind)
        base.num_svals += 1
        kind.sval = base.num_svals
        artifact.sval = kind.sval

        self.logger.debug(
            f"Synthesized kind {kind.kidx} '{kind.name}' for artifact '{artifact.name}'"
        )
        return kind

    # === SLAYS, BRANDS, CURSES ===

    def slay_index(self, code: str) -> int:
        for slay in self.catalog.slays:
            if slay.code == code:
                return slay.index
        return -1

    def brand_index(self, code: str) -> int:
        for brand in self.catalog.brands:
            if brand.code == code:
                return brand.index
        return -1

    def curse_index(self, name: str) -> int:
        """Curse index by name; equals the curse count when unknown."""
        for curse in self.catalog.curses:
            if curse.name == name:
                return curse.index
        return self.catalog.curse_max

    def mark_slay(self, record: ItemRecord, code: str) -> None:
        """Set the slay flag `code` on `record`, allocating its flags lazily.

        Raises:
            ParseError: UNRECOGNISED_SLAY for an unknown code.
        """
        index = self.slay_index(code)
        if index < 0:
            raise ParseError(ParseErrorKind.UNRECOGNISED_SLAY, f"'{code}'")
        if record.slays is None:
            record.slays = [False] * len(self.catalog.slays)
        record.slays[index] = True

    def mark_brand(self, record: ItemRecord, code: str) -> None:
        """Set the brand flag `code` on `record`, allocating its flags lazily.

        Raises:
            ParseError: UNRECOGNISED_BRAND for an unknown code.
        """
        index = self.brand_index(code)
        if index < 0:
            raise ParseError(ParseErrorKind.UNRECOGNISED_BRAND, f"'{code}'")
        if record.brands is None:
            record.brands = [False] * len(self.catalog.brands)
        record.brands[index] = True

    def set_curse(self, record: ItemRecord, name: str, power: int) -> None:
        """Store the power of curse `name` on `record`.

        Raises:
            ParseError: UNRECOGNISED_CURSE for an unknown name.
        """
        index = self.curse_index(name)
        if index >= self.catalog.curse_max:
            raise ParseError(ParseErrorKind.UNRECOGNISED_CURSE, f"'{name}'")
        if record.curses is None:
            record.curses = [0] * self.catalog.curse_max
        record.curses[index] = power

    # === ACTIVATIONS AND PROJECTIONS ===

    def find_activation(self, name: str) -> Optional[Activation]:
        """First activation called `name`, or None."""
        for activation in self.catalog.activations:
            if activation.name == name:
                return activation
        self.logger.debug(f"No activation named '{name}'")
        return None

    def projection_index(self, code: str) -> int:
        for projection in self.catalog.projections:
            if projection.code == code:
                return projection.index
        return -1
