from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union


class TokenType(IntEnum):
    Number = 1
    Operator = 2
    Bracket = 3


class OperatorKind(IntEnum):
    Add = 1
    Sub = 2
    Mul = 3
    Div = 4
    Pow = 5
    Rem = 6
    Perc = 7


class BracketKind(IntEnum):
    Open = 1
    Close = 2


# Higher rank is consumed first; equal ranks pop (left-associative).
PRECEDENCE: dict[OperatorKind, int] = {
    OperatorKind.Add: 1,
    OperatorKind.Sub: 2,
    OperatorKind.Mul: 3,
    OperatorKind.Div: 4,
    OperatorKind.Pow: 5,
    OperatorKind.Rem: 6,
    OperatorKind.Perc: 7,
}

OPERATOR_SYMBOLS: dict[str, OperatorKind] = {
    "+": OperatorKind.Add,
    "-": OperatorKind.Sub,
    "*": OperatorKind.Mul,
    "/": OperatorKind.Div,
    "!": OperatorKind.Pow,
    "m": OperatorKind.Rem,
    "%": OperatorKind.Perc,
}

SYMBOL_OF_OPERATOR: dict[OperatorKind, str] = {
    kind: symbol for symbol, kind in OPERATOR_SYMBOLS.items()
}


@dataclass
class Token:
    kind: Optional[TokenType] = None
    value: Union[int, OperatorKind, BracketKind, None] = None
    location: Optional[int] = field(default=None, compare=False)

    def __str__(self) -> str:
        match self.kind:
            case TokenType.Number:
                return str(self.value)
            case TokenType.Operator:
                return SYMBOL_OF_OPERATOR[self.value]
            case TokenType.Bracket:
                return "(" if self.value == BracketKind.Open else ")"
        return "?"


def new_number(value: int, location: Optional[int] = None) -> Token:
    return Token(TokenType.Number, value, location)


def new_operator(kind: OperatorKind, location: Optional[int] = None) -> Token:
    return Token(TokenType.Operator, kind, location)


def new_bracket(kind: BracketKind, location: Optional[int] = None) -> Token:
    return Token(TokenType.Bracket, kind, location)


def precedence(kind: OperatorKind) -> int:
    return PRECEDENCE[kind]


def is_number(token: Optional[Token]) -> bool:
    return token is not None and token.kind == TokenType.Number


def is_operator(token: Optional[Token]) -> bool:
    return token is not None and token.kind == TokenType.Operator


def is_open_bracket(token: Optional[Token]) -> bool:
    return (
        token is not None
        and token.kind == TokenType.Bracket
        and token.value == BracketKind.Open
    )


def format_tokens(tokens: list[Token]) -> str:
    return " ".join(str(token) for token in tokens)


def describe_token(token: Token) -> str:
    match token.kind:
        case TokenType.Number:
            return f"Number({token.value})"
        case TokenType.Operator | TokenType.Bracket:
            return f"{token.kind.name}({token.value.name})"
    return repr(token)
