"""
Record types for the object catalogs.

One dataclass per content table plus the small value types they share.
Records are filled in by the table parsers while a file is read and are
treated as read-only once their table is installed in the Catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .flags import (
    ElementInfo,
    FlagSet,
    ITEM_FLAGS_NS,
    KIND_FLAGS_NS,
    PVP_FLAGS_NS,
    new_element_info,
)
from .formula import Dice, RandomValue
from .lists import OBJ_MOD_MAX, TV_MAX


def _item_flags() -> FlagSet:
    return FlagSet(ITEM_FLAGS_NS)


def _kind_flags() -> FlagSet:
    return FlagSet(KIND_FLAGS_NS)


def _rand_mods() -> List[RandomValue]:
    return [RandomValue() for _ in range(OBJ_MOD_MAX)]


def _int_mods() -> List[int]:
    return [0] * OBJ_MOD_MAX


# === SHARED ===


@dataclass
class Effect:
    """One effect of an item, curse or activation."""

    index: int
    name: str
    subtype: int = 0
    subtype_name: Optional[str] = None
    radius: int = 0
    other: int = 0
    y: int = 0
    x: int = 0
    dice: Optional[Dice] = None
    self_msg: Optional[str] = None
    other_msg: Optional[str] = None


@dataclass
class Allocation:
    """Generation frequency and depth range."""

    prob: int = 0
    min_level: int = 0
    max_level: int = 0


# === SIMPLE TABLES ===


@dataclass
class Projection:
    index: int = 0
    code: str = ""
    name: Optional[str] = None
    type: Optional[str] = None
    desc: Optional[str] = None
    blind_desc: Optional[str] = None
    lash_desc: Optional[str] = None
    numerator: int = 0
    denominator: RandomValue = field(default_factory=RandomValue)
    divisor: int = 0
    damage_cap: int = 0
    msgt: int = 0
    obvious: bool = False
    color: int = 0
    pvp_flags: FlagSet = field(default_factory=lambda: FlagSet(PVP_FLAGS_NS))
    threat: Optional[str] = None
    threat_flag: Optional[int] = None


@dataclass
class ObjectBase:
    """Shared defaults of one item category, indexed by tval."""

    tval: int
    name: Optional[str] = None
    attr: int = 0
    break_perc: int = 0
    max_stack: int = 0
    num_svals: int = 0
    flags: FlagSet = field(default_factory=_item_flags)
    kind_flags: FlagSet = field(default_factory=_kind_flags)
    el_info: List[ElementInfo] = field(default_factory=new_element_info)


@dataclass
class Slay:
    index: int = 0
    code: str = ""
    name: Optional[str] = None
    race_flag: Optional[int] = None
    base: Optional[str] = None
    multiplier: int = 0
    power: int = 0
    melee_verb: Optional[str] = None
    range_verb: Optional[str] = None
    esp_chance: int = 0
    esp_flag: Optional[int] = None


@dataclass
class Brand:
    index: int = 0
    code: str = ""
    name: Optional[str] = None
    verb: Optional[str] = None
    multiplier: int = 0
    power: int = 0
    resist_flag: Optional[int] = None
    active_verb: Optional[str] = None
    active_verb_plural: Optional[str] = None
    desc_adjective: Optional[str] = None


@dataclass
class CurseObject:
    """Synthetic item carrying a curse's combat bonuses, flags and effects."""

    kind: Optional["ObjectKind"] = None
    sval: int = 0
    to_h: int = 0
    to_d: int = 0
    to_a: int = 0
    flags: FlagSet = field(default_factory=_item_flags)
    el_info: List[ElementInfo] = field(default_factory=new_element_info)
    modifiers: List[int] = field(default_factory=_int_mods)
    effects: List[Effect] = field(default_factory=list)
    time: RandomValue = field(default_factory=RandomValue)


@dataclass
class Curse:
    index: int = 0
    name: str = ""
    obj: CurseObject = field(default_factory=CurseObject)
    poss: List[bool] = field(default_factory=lambda: [False] * TV_MAX)
    desc: str = ""
    conflict: Optional[str] = None
    conflict_flags: FlagSet = field(default_factory=_item_flags)


@dataclass
class Activation:
    """Named activation; `next` points at the following array element."""

    index: int = 0
    name: str = ""
    aim: bool = False
    power: int = 0
    effects: List[Effect] = field(default_factory=list)
    message: str = ""
    desc: str = ""
    next: Optional["Activation"] = field(default=None, repr=False, compare=False)


# === OBJECT PROPERTIES ===


class PropertyType(Enum):
    NONE = "none"
    STAT = "stat"
    MOD = "mod"
    FLAG = "flag"
    IGNORE = "ignore"
    RESIST = "resistance"
    VULN = "vulnerability"
    IMM = "immunity"


class PropertySubtype(Enum):
    NONE = "none"
    SUST = "sustain"
    PROT = "protection"
    MISC = "misc ability"
    LIGHT = "light"
    MELEE = "melee"
    BAD = "bad"
    DIG = "dig"
    THROW = "throw"
    OTHER = "other"
    ESP = "ESP flag"


class IdType(Enum):
    NONE = "none"
    NORMAL = "on effect"
    TIMED = "timed"
    WIELD = "on wield"


@dataclass
class ObjProperty:
    index: int = 0
    name: str = ""
    type: PropertyType = PropertyType.NONE
    subtype: PropertySubtype = PropertySubtype.NONE
    id_type: IdType = IdType.NONE
    code_index: int = 0
    power: int = 0
    mult: int = 0
    type_mult: List[int] = field(default_factory=lambda: [1] * TV_MAX)
    adjective: Optional[str] = None
    neg_adj: Optional[str] = None
    msg: Optional[str] = None
    desc: Optional[str] = None
    short_desc: Optional[str] = None


# === POWER CALCULATIONS ===


class PowerOperation(Enum):
    NONE = "none"
    ADD = "add"
    ADD_IF_POSITIVE = "add if positive"
    SQUARE_ADD_IF_POSITIVE = "square and add if positive"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


@dataclass
class PowerIterate:
    property_type: PropertyType = PropertyType.NONE
    max: int = 1


@dataclass
class PowerCalc:
    index: int = 0
    name: str = ""
    poss_items: List[int] = field(default_factory=list)
    dice: Optional[Dice] = None
    operation: PowerOperation = PowerOperation.NONE
    iterate: PowerIterate = field(default_factory=PowerIterate)
    apply_to: Optional[str] = None


# === ITEMS ===


@dataclass
class ObjectKind:
    kidx: int = 0
    name: str = ""
    text: str = ""
    tval: int = 0
    sval: int = 0
    base: Optional[ObjectBase] = field(default=None, repr=False)
    d_char: str = ""
    d_attr: int = 0
    level: int = 0
    weight: int = 0
    cost: int = 0
    alloc: Allocation = field(default_factory=Allocation)
    dd: int = 0
    ds: int = 0
    to_h: RandomValue = field(default_factory=RandomValue)
    to_d: RandomValue = field(default_factory=RandomValue)
    ac: int = 0
    to_a: RandomValue = field(default_factory=RandomValue)
    charge: RandomValue = field(default_factory=RandomValue)
    gen_mult_prob: int = 0
    stack_size: RandomValue = field(default_factory=RandomValue)
    flags: FlagSet = field(default_factory=_item_flags)
    kind_flags: FlagSet = field(default_factory=_kind_flags)
    el_info: List[ElementInfo] = field(default_factory=new_element_info)
    modifiers: List[RandomValue] = field(default_factory=_rand_mods)
    effects: List[Effect] = field(default_factory=list)
    activation: Optional[Activation] = field(default=None, repr=False)
    time: RandomValue = field(default_factory=RandomValue)
    pval: RandomValue = field(default_factory=RandomValue)
    slays: Optional[List[bool]] = None
    brands: Optional[List[bool]] = None
    curses: Optional[List[int]] = None


@dataclass
class EgoItem:
    eidx: int = 0
    name: str = ""
    text: str = ""
    cost: int = 0
    rating: int = 0
    alloc: Allocation = field(default_factory=Allocation)
    poss_items: List[int] = field(default_factory=list)
    to_h: RandomValue = field(default_factory=RandomValue)
    to_d: RandomValue = field(default_factory=RandomValue)
    to_a: RandomValue = field(default_factory=RandomValue)
    min_to_h: int = 0
    min_to_d: int = 0
    min_to_a: int = 0
    flags: FlagSet = field(default_factory=_item_flags)
    kind_flags: FlagSet = field(default_factory=_kind_flags)
    el_info: List[ElementInfo] = field(default_factory=new_element_info)
    modifiers: List[RandomValue] = field(default_factory=_rand_mods)
    min_modifiers: List[int] = field(default_factory=_int_mods)
    activation: Optional[Activation] = field(default=None, repr=False)
    time: RandomValue = field(default_factory=RandomValue)
    slays: Optional[List[bool]] = None
    brands: Optional[List[bool]] = None
    curses: Optional[List[int]] = None


@dataclass
class Artifact:
    aidx: int = 0
    name: str = ""
    text: str = ""
    tval: int = 0
    sval: int = 0
    level: int = 0
    weight: int = 0
    alloc: Allocation = field(default_factory=Allocation)
    dd: int = 0
    ds: int = 0
    to_h: int = 0
    to_d: int = 0
    ac: int = 0
    to_a: int = 0
    flags: FlagSet = field(default_factory=_item_flags)
    el_info: List[ElementInfo] = field(default_factory=new_element_info)
    modifiers: List[int] = field(default_factory=_int_mods)
    activation: Optional[Activation] = field(default=None, repr=False)
    time: RandomValue = field(default_factory=RandomValue)
    alt_msg: str = ""
    slays: Optional[List[bool]] = None
    brands: Optional[List[bool]] = None
    curses: Optional[List[int]] = None
