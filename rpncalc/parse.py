from typing import Optional

from rpncalc.token import (
    Token,
    TokenType,
    BracketKind,
    is_open_bracket,
    is_operator,
    precedence,
)


class Parse:
    """Shunting-yard conversion of an infix token sequence to postfix.

    Bracket structure is trusted to have been checked by the tokenizer, so
    the conversion has no error path.
    """

    tokens: list[Token]
    queue: list[Token]
    stack: list[Token]

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.queue = []
        self.stack = []

    def top(self) -> Optional[Token]:
        return self.stack[-1] if self.stack else None

    def push_operator(self, token: Token) -> None:
        rank = precedence(token.value)
        while is_operator(self.top()) and precedence(self.top().value) >= rank:
            self.queue.append(self.stack.pop())
        self.stack.append(token)

    def close_bracket(self) -> None:
        while self.stack and not is_open_bracket(self.top()):
            self.queue.append(self.stack.pop())
        if self.stack:
            self.stack.pop()

    def drain(self) -> None:
        while self.stack:
            token = self.stack.pop()
            if token.kind == TokenType.Bracket:
                continue
            self.queue.append(token)

    def to_postfix(self) -> list[Token]:
        for token in self.tokens:
            match token.kind:
                case TokenType.Number:
                    self.queue.append(token)
                case TokenType.Operator:
                    self.push_operator(token)
                case TokenType.Bracket if token.value == BracketKind.Open:
                    self.stack.append(token)
                case TokenType.Bracket:
                    self.close_bracket()
        self.drain()
        return self.queue


def to_postfix(tokens: list[Token]) -> list[Token]:
    return Parse(tokens).to_postfix()
