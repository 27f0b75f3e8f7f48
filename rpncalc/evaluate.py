import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from rpncalc.errors import MalformedPostfix, NumberTooLarge
from rpncalc.token import OperatorKind, Token, TokenType

logger = logging.getLogger(__name__)

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


class OutcomeStatus(IntEnum):
    Value = 1
    DivisionByZero = 2
    InvalidExpression = 3


@dataclass
class Outcome:
    status: OutcomeStatus
    value: Optional[float] = None


def truncate_exponent(value: float) -> int:
    """Truncate toward zero into the signed 32-bit range, NaN becoming 0."""
    if math.isnan(value):
        return 0
    if value <= I32_MIN:
        return I32_MIN
    if value >= I32_MAX:
        return I32_MAX
    return int(value)


def power(base: float, exponent: int) -> float:
    sign = -1.0 if math.copysign(1.0, base) < 0 and exponent % 2 else 1.0
    try:
        return base**exponent
    except (OverflowError, ZeroDivisionError):
        return math.copysign(math.inf, sign)


def remainder(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        # zero divisor or infinite dividend
        return math.nan


def apply_operator(kind: OperatorKind, left: float, right: float) -> float:
    match kind:
        case OperatorKind.Add:
            return left + right
        case OperatorKind.Sub:
            return left - right
        case OperatorKind.Mul:
            return left * right
        case OperatorKind.Div:
            return left / right
        case OperatorKind.Pow:
            # the right operand is the base, the left one the exponent
            return power(right, truncate_exponent(left))
        case OperatorKind.Rem:
            return remainder(left, right)
        case OperatorKind.Perc:
            return (right * left) / 100.0
    raise ValueError(f"invalid operator kind: {kind!r}")


def to_float(token: Token) -> float:
    try:
        return float(token.value)
    except OverflowError:
        raise NumberTooLarge(token.value, token.location) from None


def evaluate_outcome(postfix: list[Token]) -> Outcome:
    """Reduce a postfix sequence and report how the reduction ended.

    Raises :class:`MalformedPostfix` when an operator finds fewer than two
    operands on the stack and :class:`NumberTooLarge` when a literal does
    not fit in a float.
    """
    stack: list[float] = []
    for token in postfix:
        match token.kind:
            case TokenType.Number:
                stack.append(to_float(token))
            case TokenType.Operator:
                if len(stack) < 2:
                    raise MalformedPostfix(str(token), token.location)
                right = stack.pop()
                left = stack.pop()
                if token.value == OperatorKind.Div and right == 0.0:
                    logger.warning("division by zero is not defined")
                    return Outcome(OutcomeStatus.DivisionByZero)
                stack.append(apply_operator(token.value, left, right))
            case TokenType.Bracket:
                pass
    if len(stack) != 1:
        logger.debug(f"stack has {len(stack)} values after evaluation, expected 1")
        return Outcome(OutcomeStatus.InvalidExpression)
    return Outcome(OutcomeStatus.Value, stack[0])


def evaluate(postfix: list[Token]) -> Optional[float]:
    outcome = evaluate_outcome(postfix)
    if outcome.status != OutcomeStatus.Value:
        return None
    return outcome.value
