"""
Flag sets and the flag/value token grammar.

A ``flags`` directive carries a list of names separated by spaces or ``|``.
Each token is offered to a prioritised list of grabbers (item flags, kind
flags, element flags, ...); the first grabber that accepts it wins. A token
nobody accepts is an INVALID_FLAG error; bits set by earlier tokens of the
same directive stay set.

``values`` directives use the same splitting with ``NAME[value]`` tokens.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import ParseError, ParseErrorKind
from .formula import RandomValue, parse_random
from .lists import (
    ELEM_MAX,
    ELEMENTS,
    KIND_FLAGS,
    OBJ_FLAGS,
    OBJ_MODS,
    PROJECT_PVP_FLAGS,
    RACE_FLAGS,
)


class FlagNamespace:
    """A named, ordered flag vocabulary. Position is the bit number."""

    def __init__(self, name: str, names: Iterable[str]):
        self.name = name
        self.names: Tuple[str, ...] = tuple(names)
        self._index: Dict[str, int] = {n: i for i, n in enumerate(self.names)}

    def index(self, token: str) -> Optional[int]:
        return self._index.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __len__(self) -> int:
        return len(self.names)

    def __repr__(self) -> str:
        return f"FlagNamespace({self.name!r}, {len(self.names)} flags)"


ITEM_FLAGS_NS = FlagNamespace("item", OBJ_FLAGS)
KIND_FLAGS_NS = FlagNamespace("kind", KIND_FLAGS)
RACE_FLAGS_NS = FlagNamespace("race", RACE_FLAGS)
PVP_FLAGS_NS = FlagNamespace("pvp", PROJECT_PVP_FLAGS)


class FlagSet:
    """Bit set over one FlagNamespace."""

    __slots__ = ("namespace", "bits")

    def __init__(self, namespace: FlagNamespace, bits: int = 0):
        self.namespace = namespace
        self.bits = bits

    def on(self, index: int) -> None:
        if not 0 <= index < len(self.namespace):
            raise IndexError(f"Flag {index} outside namespace '{self.namespace.name}'")
        self.bits |= 1 << index

    def has(self, flag: "int | str") -> bool:
        index = self.namespace.index(flag) if isinstance(flag, str) else flag
        if index is None:
            return False
        return bool(self.bits & (1 << index))

    def union(self, other: "FlagSet") -> None:
        if other.namespace is not self.namespace:
            raise ValueError("Cannot merge flag sets of different namespaces")
        self.bits |= other.bits

    def indices(self) -> List[int]:
        return [i for i in range(len(self.namespace)) if self.bits & (1 << i)]

    def names(self) -> List[str]:
        return [self.namespace.names[i] for i in self.indices()]

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices())

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __bool__(self) -> bool:
        return self.bits != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlagSet):
            return NotImplemented
        return self.namespace is other.namespace and self.bits == other.bits

    def __repr__(self) -> str:
        return f"FlagSet({self.namespace.name}: {'|'.join(self.names())})"


# === ELEMENTS ===


class ElementFlag(IntFlag):
    """Per-element item properties."""

    HATES = 0x01
    IGNORE = 0x02


@dataclass
class ElementInfo:
    res_level: int = 0
    flags: ElementFlag = ElementFlag(0)


def new_element_info() -> List[ElementInfo]:
    return [ElementInfo() for _ in range(ELEM_MAX)]


# === TOKEN GRAMMAR ===

TokenGrabber = Callable[[str], bool]
"""Accepts a token (returns True) after applying it, or rejects it."""


def split_tokens(text: str) -> Iterator[str]:
    """Non-empty tokens separated by spaces or ``|``. The input is not modified."""
    for token in text.replace("|", " ").split(" "):
        if token:
            yield token


def flag_grabber(flags: FlagSet) -> TokenGrabber:
    """Grabber accepting the exact flag names of the set's namespace."""

    def grab(token: str) -> bool:
        index = flags.namespace.index(token)
        if index is None:
            return False
        flags.on(index)
        return True

    return grab


def grab_element_flag(el_info: List[ElementInfo], token: str) -> bool:
    """Apply ``IGNORE_<ELEM>`` or ``HATES_<ELEM>``; split on the first underscore."""
    prefix, sep, element = token.partition("_")
    if not sep:
        return False
    try:
        index = ELEMENTS.index(element)
    except ValueError:
        return False
    if prefix == "IGNORE":
        el_info[index].flags |= ElementFlag.IGNORE
        return True
    if prefix == "HATES":
        el_info[index].flags |= ElementFlag.HATES
        return True
    return False


def element_grabber(el_info: List[ElementInfo]) -> TokenGrabber:
    return lambda token: grab_element_flag(el_info, token)


def _apply(text: str, grabbers: Tuple[TokenGrabber, ...], kind: ParseErrorKind) -> None:
    for token in split_tokens(text):
        if not any(grab(token) for grab in grabbers):
            raise ParseError(kind, f"'{token}'")


def apply_flag_tokens(text: str, *grabbers: TokenGrabber) -> None:
    """Offer every flag token to `grabbers` in priority order.

    Raises:
        ParseError: INVALID_FLAG for the first token no grabber accepts.
    """
    _apply(text, grabbers, ParseErrorKind.INVALID_FLAG)


# === VALUE TOKENS ===


def split_value_token(token: str) -> Optional[Tuple[str, str]]:
    """Split ``NAME[value]`` into its parts, or None."""
    name, sep, rest = token.partition("[")
    if not sep or not name or not rest.endswith("]") or len(rest) < 2:
        return None
    return name, rest[:-1]


def _int_or_none(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def rand_value_grabber(modifiers: List[RandomValue]) -> TokenGrabber:
    """Grabber for ``MOD[rand]`` tokens over the modifier names."""

    def grab(token: str) -> bool:
        parts = split_value_token(token)
        if parts is None or parts[0] not in OBJ_MODS:
            return False
        value = parse_random(parts[1])
        if value is None:
            return False
        modifiers[OBJ_MODS.index(parts[0])] = value
        return True

    return grab


def int_value_grabber(modifiers: List[int]) -> TokenGrabber:
    """Grabber for ``MOD[int]`` tokens over the modifier names."""

    def grab(token: str) -> bool:
        parts = split_value_token(token)
        if parts is None or parts[0] not in OBJ_MODS:
            return False
        value = _int_or_none(parts[1])
        if value is None:
            return False
        modifiers[OBJ_MODS.index(parts[0])] = value
        return True

    return grab


def resist_grabber(el_info: List[ElementInfo]) -> TokenGrabber:
    """Grabber for ``RES_<ELEM>[int]`` tokens."""

    def grab(token: str) -> bool:
        parts = split_value_token(token)
        if parts is None or not parts[0].startswith("RES_"):
            return False
        element = parts[0][len("RES_"):]
        value = _int_or_none(parts[1])
        if element not in ELEMENTS or value is None:
            return False
        el_info[ELEMENTS.index(element)].res_level = value
        return True

    return grab


def apply_value_tokens(text: str, *grabbers: TokenGrabber) -> None:
    """Like apply_flag_tokens for ``NAME[value]`` tokens.

    Raises:
        ParseError: INVALID_VALUE for the first token no grabber accepts.
    """
    _apply(text, grabbers, ParseErrorKind.INVALID_VALUE)
