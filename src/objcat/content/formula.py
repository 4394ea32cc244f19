"""
Random values, dice formulas and expressions.

A `Dice` is a compact formula such as ``2+1d$S`` whose parts are either
numbers or named variables. Each variable is bound to an `Expression`: a
base value taken from a registry provider followed by a list of integer
operations (``"+ 5 / 2 n"``). Evaluating the dice against a context yields
a concrete `RandomValue`.
"""

import copy
import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple, TypeAlias, Union

from .errors import ParseError, ParseErrorKind

EvalContext: TypeAlias = Mapping[str, int]
"""Named runtime quantities a base value provider reads from."""

BaseValueProvider: TypeAlias = Callable[[EvalContext], int]
"""Returns the starting value of an expression for a context."""


# === RANDOM VALUES ===


@dataclass
class RandomValue:
    """``base + dice d sides`` with an optional level-scaled bonus."""

    base: int = 0
    dice: int = 0
    sides: int = 0
    m_bonus: int = 0

    @property
    def minimum(self) -> int:
        return self.base + self.dice

    @property
    def maximum(self) -> int:
        return self.base + self.dice * self.sides + self.m_bonus

    def roll(self, rng: Optional[random.Random] = None) -> int:
        """Roll the value. The bonus part is rolled uniformly in [0, m_bonus]."""
        rng = rng or random.Random()
        total = self.base
        for _ in range(self.dice):
            total += rng.randint(1, self.sides) if self.sides > 0 else 0
        if self.m_bonus > 0:
            total += rng.randint(0, self.m_bonus)
        return total

    def is_zero(self) -> bool:
        return not (self.base or self.dice or self.sides or self.m_bonus)

    def __str__(self) -> str:
        parts = []
        if self.base or not (self.dice or self.m_bonus):
            parts.append(str(self.base))
        if self.dice:
            if parts:
                parts.append("+")
            parts.append(f"{self.dice}d{self.sides}")
        if self.m_bonus:
            parts.append(f"M{self.m_bonus}")
        return "".join(parts)


_RANDOM_RE = re.compile(
    r"^(?:(?P<base>[+-]?\d+)(?=$|\+|M))?"
    r"(?:(?P<plus>\+)?(?P<dice>\d+)?d(?P<sides>\d+))?"
    r"(?:M(?P<bonus>\d+))?$"
)


def parse_random(text: str) -> Optional[RandomValue]:
    """Parse ``[base][+][dice]d<sides>[M<bonus>]``. Returns None when malformed."""
    text = text.strip()
    match = _RANDOM_RE.match(text) if text else None
    if not match:
        return None
    if match.group("plus") and match.group("base") is None:
        return None
    value = RandomValue()
    if match.group("base") is not None:
        value.base = int(match.group("base"))
    if match.group("sides") is not None:
        value.dice = int(match.group("dice")) if match.group("dice") else 1
        value.sides = int(match.group("sides"))
    if match.group("bonus") is not None:
        value.m_bonus = int(match.group("bonus"))
    return value


# === EXPRESSIONS ===


class Operator(Enum):
    """Expression operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    NEG = "n"


@dataclass(frozen=True)
class Operation:
    operator: Operator
    operand: int = 0


class Expression:
    """A base value provider followed by a sequence of integer operations."""

    def __init__(self, base_name: str, provider: Optional[BaseValueProvider]):
        self.base_name = base_name
        self.provider = provider
        self.operations: List[Operation] = []

    def add_operations(self, text: str) -> None:
        """Append operations parsed from a space separated token string.

        An operator token (``+ - * /``) must be followed by one or more
        integer operands; each operand applies the pending operator again.
        ``n`` negates the running value immediately.

        Raises:
            ParseError: BAD_EXPRESSION_STRING for any malformed token sequence.
        """
        parsed: List[Operation] = []
        pending: Optional[Operator] = None
        pending_used = True

        for token in text.split():
            if re.fullmatch(r"[+-]?\d+", token):
                if pending is None:
                    raise ParseError(
                        ParseErrorKind.BAD_EXPRESSION_STRING,
                        f"operand '{token}' without operator",
                    )
                operand = int(token)
                if pending is Operator.DIV and operand == 0:
                    raise ParseError(
                        ParseErrorKind.BAD_EXPRESSION_STRING, "division by zero"
                    )
                parsed.append(Operation(pending, operand))
                pending_used = True
                continue

            try:
                operator = Operator(token)
            except ValueError:
                raise ParseError(
                    ParseErrorKind.BAD_EXPRESSION_STRING, f"unknown token '{token}'"
                ) from None

            if not pending_used:
                raise ParseError(
                    ParseErrorKind.BAD_EXPRESSION_STRING,
                    f"operator '{pending.value}' has no operand",
                )
            if operator is Operator.NEG:
                parsed.append(Operation(Operator.NEG))
                pending = None
            else:
                pending = operator
                pending_used = False

        if not pending_used:
            raise ParseError(
                ParseErrorKind.BAD_EXPRESSION_STRING,
                f"operator '{pending.value}' has no operand",
            )
        self.operations.extend(parsed)

    def evaluate(self, context: Optional[EvalContext] = None) -> int:
        """Evaluate against `context`. Division truncates toward zero."""
        value = self.provider(context or {}) if self.provider else 0
        for op in self.operations:
            if op.operator is Operator.ADD:
                value += op.operand
            elif op.operator is Operator.SUB:
                value -= op.operand
            elif op.operator is Operator.MUL:
                value *= op.operand
            elif op.operator is Operator.DIV:
                value = int(value / op.operand)
            else:
                value = -value
        return value

    def copy(self) -> "Expression":
        duplicate = Expression(self.base_name, self.provider)
        duplicate.operations = copy.deepcopy(self.operations)
        return duplicate

    def __str__(self) -> str:
        ops = " ".join(
            op.operator.value
            if op.operator is Operator.NEG
            else f"{op.operator.value} {op.operand}"
            for op in self.operations
        )
        return f"{self.base_name} {ops}".strip()


# === DICE ===

DicePart: TypeAlias = Union[int, str]
"""A literal number, or the name of a variable."""

_PART = r"(?:\d+|\$[A-Z]+)"
_DICE_RE = re.compile(
    rf"^(?:(?P<base>-?\d+|\$[A-Z]+)(?=$|\+|M))?"
    rf"(?:(?P<plus>\+)?(?P<dice>{_PART})?d(?P<sides>{_PART}))?"
    rf"(?:M(?P<bonus>{_PART}))?$"
)


def _dice_part(text: Optional[str], default: int = 0) -> DicePart:
    if text is None:
        return default
    if text.startswith("$"):
        return text[1:]
    return int(text)


class Dice:
    """A dice formula whose parts may be named variables."""

    def __init__(self, text: str):
        self.text = text
        self.base: DicePart = 0
        self.dice: DicePart = 0
        self.sides: DicePart = 0
        self.m_bonus: DicePart = 0
        self._expressions: Dict[str, Expression] = {}

    @property
    def variables(self) -> Tuple[str, ...]:
        """Variable names used by the formula, in part order, without repeats."""
        names: List[str] = []
        for part in (self.base, self.dice, self.sides, self.m_bonus):
            if isinstance(part, str) and part not in names:
                names.append(part)
        return tuple(names)

    @property
    def expressions(self) -> Mapping[str, Expression]:
        return dict(self._expressions)

    def bind_expression(self, name: str, expression: Expression) -> None:
        """Bind a copy of `expression` to variable `name`.

        Raises:
            ParseError: UNBOUND_EXPRESSION if the formula has no such variable.
        """
        if name not in self.variables:
            raise ParseError(
                ParseErrorKind.UNBOUND_EXPRESSION,
                f"dice '{self.text}' has no variable '{name}'",
            )
        self._expressions[name] = expression.copy()

    def _resolve(self, part: DicePart, context: EvalContext) -> int:
        if isinstance(part, int):
            return part
        expression = self._expressions.get(part)
        return expression.evaluate(context) if expression else 0

    def evaluate(self, context: Optional[EvalContext] = None) -> RandomValue:
        """Substitute every variable and return a concrete random value."""
        context = context or {}
        return RandomValue(
            base=self._resolve(self.base, context),
            dice=self._resolve(self.dice, context),
            sides=self._resolve(self.sides, context),
            m_bonus=self._resolve(self.m_bonus, context),
        )

    def __str__(self) -> str:
        return self.text


def parse_dice(text: str) -> Dice:
    """Parse a dice formula.

    Raises:
        ParseError: INVALID_DICE if the string does not match the grammar.
    """
    stripped = text.strip()
    match = _DICE_RE.match(stripped) if stripped else None
    if not match or (match.group("plus") and match.group("base") is None):
        raise ParseError(ParseErrorKind.INVALID_DICE, f"'{text}'")

    dice = Dice(stripped)
    dice.base = _dice_part(match.group("base"))
    if match.group("sides") is not None:
        dice.dice = _dice_part(match.group("dice"), default=1)
        dice.sides = _dice_part(match.group("sides"))
    dice.m_bonus = _dice_part(match.group("bonus"))
    return dice


# === BASE VALUE REGISTRIES ===


def _context_value(key: str) -> BaseValueProvider:
    def provider(context: EvalContext) -> int:
        return int(context.get(key, 0))

    return provider


EFFECT_BASE_VALUES: Dict[str, BaseValueProvider] = {
    name: _context_value(name.lower())
    for name in (
        "PLAYER_LEVEL",
        "PLAYER_HP",
        "PLAYER_MAX_HP",
        "MAX_SIGHT",
        "WEAPON_DAMAGE",
        "DUNGEON_LEVEL",
        "MONSTER_LEVEL",
        "MONSTER_PERCENT_HP_GONE",
    )
}
"""Base values available to effect expressions."""

POWER_BASE_VALUES: Dict[str, BaseValueProvider] = {
    name: _context_value(name.lower())
    for name in (
        "OBJ_POWER_DICE",
        "OBJ_POWER_TO_DAM",
        "OBJ_POWER_TO_HIT",
        "OBJ_POWER_AC",
        "OBJ_POWER_TO_ARMOR",
        "OBJ_POWER_WEIGHT",
        "OBJ_POWER_BLOWS",
        "OBJ_POWER_SHOTS",
        "OBJ_POWER_MIGHT",
        "OBJ_POWER_MODIFIER",
        "OBJ_POWER_FLAG",
        "OBJ_POWER_RESIST",
        "OBJ_POWER_IGNORE",
        "OBJ_POWER_VULN",
        "OBJ_POWER_IMM",
        "OBJ_POWER_EFFECT",
        "OBJ_POWER_CHARGES",
        "OBJ_POWER_SLAY",
        "OBJ_POWER_BRAND",
        "OBJ_POWER_CURSE",
    )
}
"""Base values available to object power expressions."""


def make_expression(
    base_name: str, operations: str, registry: Mapping[str, BaseValueProvider]
) -> Expression:
    """Build an expression from a registry base name and an operation string.

    Raises:
        ParseError: INVALID_EXPRESSION for an unknown base name,
            BAD_EXPRESSION_STRING for malformed operations.
    """
    provider = registry.get(base_name)
    if provider is None:
        raise ParseError(
            ParseErrorKind.INVALID_EXPRESSION, f"unknown base value '{base_name}'"
        )
    expression = Expression(base_name, provider)
    expression.add_operations(operations)
    return expression
