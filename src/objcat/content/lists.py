"""
Fixed name tables shared by the content parsers.

These are the closed vocabularies content files refer to by name: item
categories (tvals), item and kind flags, elements, modifiers, race flags,
monster bases, effects, colours and message types. Position in each tuple
is the stable index used by the catalogs.
"""

from typing import Dict, Tuple, TypeAlias

NameTable: TypeAlias = Tuple[str, ...]
"""Ordered tuple of names; the position of a name is its index."""


# === ITEM CATEGORIES ===

TVALS: NameTable = (
    "none",
    "chest",
    "shot",
    "arrow",
    "bolt",
    "bow",
    "digger",
    "hafted",
    "polearm",
    "sword",
    "boots",
    "gloves",
    "helm",
    "crown",
    "shield",
    "cloak",
    "soft armor",
    "hard armor",
    "dragon armor",
    "light",
    "amulet",
    "ring",
    "staff",
    "wand",
    "rod",
    "scroll",
    "potion",
    "flask",
    "food",
    "mushroom",
    "magic book",
    "prayer book",
    "nature book",
    "shadow book",
    "psi book",
    "death book",
    "elemental book",
    "skeleton",
    "bottle",
    "corpse",
    "gold",
)
TV_MAX = len(TVALS)
TV_NONE = TVALS.index("none")
TV_LIGHT = TVALS.index("light")


def tval_find_idx(name: str) -> int:
    """Case-insensitive category lookup. Returns -1 when unknown."""
    wanted = name.strip().lower()
    for idx, tval_name in enumerate(TVALS):
        if tval_name == wanted:
            return idx
    return -1


# === FLAGS ===

OBJ_FLAGS: NameTable = (
    "PROT_FEAR",
    "PROT_BLIND",
    "PROT_CONF",
    "PROT_STUN",
    "SLOW_DIGEST",
    "FEATHER",
    "REGEN",
    "TELEPATHY",
    "SEE_INVIS",
    "FREE_ACT",
    "HOLD_LIFE",
    "IMPACT",
    "BLESSED",
    "BURNS_OUT",
    "TAKES_FUEL",
    "NO_FUEL",
    "IMPAIR_HP",
    "IMPAIR_MANA",
    "AFRAID",
    "NO_TELEPORT",
    "AGGRAVATE",
    "DRAIN_EXP",
    "STICKY",
    "FRAGILE",
    "LIGHT_2",
    "LIGHT_3",
    "DIG_1",
    "DIG_2",
    "DIG_3",
    "EXPLODE",
    "TRAP_IMMUNE",
    "THROWING",
    "SUST_STR",
    "SUST_INT",
    "SUST_WIS",
    "SUST_DEX",
    "SUST_CON",
    "ESP_ANIMAL",
    "ESP_EVIL",
    "ESP_UNDEAD",
    "ESP_DEMON",
    "ESP_ORC",
    "ESP_TROLL",
    "ESP_GIANT",
    "ESP_DRAGON",
    "ESP_RADIUS",
)
OF_MAX = len(OBJ_FLAGS)

KIND_FLAGS: NameTable = (
    "RAND_HI_RES",
    "RAND_SUSTAIN",
    "RAND_POWER",
    "INSTA_ART",
    "QUEST_ART",
    "EASY_KNOW",
    "GOOD",
    "SHOW_DICE",
    "SHOW_MULT",
    "SHOOTS_SHOTS",
    "SHOOTS_ARROWS",
    "SHOOTS_BOLTS",
    "RAND_BASE_RES",
    "RAND_RES_POWER",
)
KF_INSTA_ART = KIND_FLAGS.index("INSTA_ART")

RACE_FLAGS: NameTable = (
    "UNIQUE",
    "MALE",
    "FEMALE",
    "ANIMAL",
    "EVIL",
    "UNDEAD",
    "DEMON",
    "ORC",
    "TROLL",
    "GIANT",
    "DRAGON",
    "NONLIVING",
    "HURT_LIGHT",
    "HURT_ROCK",
    "HURT_FIRE",
    "HURT_COLD",
    "IM_ACID",
    "IM_ELEC",
    "IM_FIRE",
    "IM_COLD",
    "IM_POIS",
    "IM_NETHER",
    "IM_WATER",
    "IM_PLASMA",
    "IM_NEXUS",
    "IM_DISEN",
)

# Projection player-vs-player attack flags
PROJECT_PVP_FLAGS: NameTable = ("SAVE", "DAMAGE", "NON_PHYS", "RAW")


# === ELEMENTS ===

ELEMENTS: NameTable = (
    "ACID",
    "ELEC",
    "FIRE",
    "COLD",
    "POIS",
    "LIGHT",
    "DARK",
    "SOUND",
    "SHARD",
    "NEXUS",
    "NETHER",
    "CHAOS",
    "DISEN",
    "WATER",
    "ICE",
    "GRAVITY",
    "INERTIA",
    "FORCE",
    "TIME",
    "PLASMA",
    "METEOR",
    "MISSILE",
    "MANA",
    "HOLY_ORB",
    "ARROW",
)
ELEM_MAX = len(ELEMENTS)
ELEM_BASE_MIN = ELEMENTS.index("ACID")
ELEM_BASE_MAX = ELEMENTS.index("COLD")
ELEM_HIGH_MIN = ELEMENTS.index("POIS")
ELEM_HIGH_MAX = ELEMENTS.index("DISEN")
ELEM_XHIGH_MAX = ELEMENTS.index("TIME")


# === MODIFIERS ===

STATS: NameTable = ("STR", "INT", "WIS", "DEX", "CON")
STAT_MAX = len(STATS)

OBJ_MODS: NameTable = STATS + (
    "STEALTH",
    "SEARCH",
    "INFRA",
    "TUNNEL",
    "SPEED",
    "BLOWS",
    "SHOTS",
    "MIGHT",
    "LIGHT",
    "DAM_RED",
    "MOVES",
)
OBJ_MOD_MAX = len(OBJ_MODS)


# === MONSTERS ===

MONSTER_BASES: NameTable = (
    "ant",
    "bat",
    "bird",
    "canine",
    "centipede",
    "demon",
    "dragon",
    "ancient dragon",
    "elemental",
    "eye",
    "feline",
    "ghost",
    "giant",
    "golem",
    "hydra",
    "jelly",
    "kobold",
    "lich",
    "mold",
    "naga",
    "orc",
    "person",
    "reptile",
    "rodent",
    "snake",
    "spider",
    "troll",
    "vampire",
    "vortex",
    "wraith",
    "yeek",
    "zombie",
)


# === EFFECTS ===

# Effect name -> class of its optional subtype field
EFFECT_SUBTYPES: Dict[str, str] = {
    "DAMAGE": "none",
    "HEAL_HP": "none",
    "NOURISH": "none",
    "CURE": "timed",
    "TIMED_INC": "timed",
    "TIMED_DEC": "timed",
    "TIMED_SET": "timed",
    "RESTORE_STAT": "stat",
    "DRAIN_STAT": "stat",
    "GAIN_STAT": "stat",
    "LOSE_EXP": "none",
    "RESTORE_EXP": "none",
    "BOLT": "projection",
    "BOLT_OR_BEAM": "projection",
    "BEAM": "projection",
    "BALL": "projection",
    "BREATH": "projection",
    "ARC": "projection",
    "LINE": "projection",
    "SPOT": "projection",
    "STAR": "projection",
    "SPHERE": "projection",
    "PROJECT_LOS": "projection",
    "DETECT_GOLD": "none",
    "DETECT_OBJECTS": "none",
    "MAP_AREA": "none",
    "TELEPORT": "none",
    "TELEPORT_LEVEL": "none",
    "RECALL": "none",
    "DEEP_DESCENT": "none",
    "LIGHT_AREA": "none",
    "DARKEN_AREA": "none",
    "SUMMON": "other",
    "ENCHANT": "other",
    "IDENTIFY": "none",
    "RECHARGE": "none",
    "WAKE": "none",
    "EARTHQUAKE": "none",
    "DESTRUCTION": "none",
    "RANDOM": "none",
}
EFFECTS: NameTable = tuple(EFFECT_SUBTYPES)

TIMED_EFFECTS: NameTable = (
    "FAST",
    "SLOW",
    "BLIND",
    "PARALYZED",
    "CONFUSED",
    "AFRAID",
    "IMAGE",
    "POISONED",
    "CUT",
    "STUN",
    "PROTEVIL",
    "INVULN",
    "HERO",
    "SHERO",
    "SHIELD",
    "BLESSED",
    "SINVIS",
    "SINFRA",
    "OPP_ACID",
    "OPP_ELEC",
    "OPP_FIRE",
    "OPP_COLD",
    "OPP_POIS",
    "AMNESIA",
    "TELEPATHY",
    "STONESKIN",
    "TERROR",
    "SPRINT",
    "BOLD",
)


# === MESSAGES ===

MESSAGE_TYPES: NameTable = (
    "GENERIC",
    "HIT",
    "MISS",
    "FLEE",
    "DROP",
    "KILL",
    "LEVEL",
    "DEATH",
    "BR_ACID",
    "BR_ELEC",
    "BR_FIRE",
    "BR_FROST",
    "BR_GAS",
    "BR_LIGHT",
    "BR_DARK",
    "BR_SOUND",
    "BR_SHARDS",
    "BR_NEXUS",
    "BR_NETHER",
    "BR_CHAOS",
    "BR_DISEN",
    "BR_WATER",
    "BR_ICE",
    "BR_GRAVITY",
    "BR_INERTIA",
    "BR_FORCE",
    "BR_TIME",
    "BR_PLASMA",
    "BR_METEOR",
    "BR_MISSILE",
    "BR_MANA",
    "BR_HOLY_ORB",
    "BR_ARROW",
)


def message_lookup(name: str) -> int:
    """Message type index by name (case-insensitive), -1 when unknown."""
    wanted = name.upper()
    for idx, msg_name in enumerate(MESSAGE_TYPES):
        if msg_name == wanted:
            return idx
    return -1


# === COLOURS ===

# (code letter, display name) in attribute order
COLOURS: Tuple[Tuple[str, str], ...] = (
    ("d", "Dark"),
    ("w", "White"),
    ("s", "Slate"),
    ("o", "Orange"),
    ("r", "Red"),
    ("g", "Green"),
    ("b", "Blue"),
    ("u", "Umber"),
    ("D", "Light Dark"),
    ("W", "Light Slate"),
    ("P", "Light Purple"),
    ("y", "Yellow"),
    ("R", "Light Red"),
    ("G", "Light Green"),
    ("B", "Light Blue"),
    ("U", "Light Umber"),
    ("p", "Purple"),
    ("v", "Violet"),
    ("t", "Teal"),
    ("m", "Mud"),
    ("Y", "Light Yellow"),
    ("i", "Magenta-Pink"),
    ("T", "Light Teal"),
    ("V", "Light Violet"),
    ("I", "Light Pink"),
    ("M", "Mustard"),
    ("z", "Blue Slate"),
    ("Z", "Deep Light Blue"),
)
COLOUR_RED = 4


def color_to_attr(text: str) -> int:
    """Colour attribute from a one-letter code or a full name, -1 when unknown.

    Single letters are case-sensitive ('r' red, 'R' light red); full names
    are matched case-insensitively.
    """
    if len(text) == 1:
        for attr, (code, _) in enumerate(COLOURS):
            if code == text:
                return attr
        return -1
    wanted = text.lower()
    for attr, (_, name) in enumerate(COLOURS):
        if name.lower() == wanted:
            return attr
    return -1
