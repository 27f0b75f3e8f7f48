"""The three-stage pipeline: tokens, postfix, value."""
from typing import Optional

from rpncalc.evaluate import Outcome, evaluate, evaluate_outcome
from rpncalc.parse import to_postfix
from rpncalc.token import Token
from rpncalc.tokenize import tokenize

__all__ = ["parse", "to_postfix", "evaluate", "calculate", "calculate_outcome"]


def parse(text: str) -> list[Token]:
    return tokenize(text)


def calculate(text: str) -> Optional[float]:
    return evaluate(to_postfix(parse(text)))


def calculate_outcome(text: str) -> Outcome:
    return evaluate_outcome(to_postfix(parse(text)))
