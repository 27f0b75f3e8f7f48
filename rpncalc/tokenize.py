from rpncalc.errors import BadToken, MismatchedParens
from rpncalc.token import (
    BracketKind,
    OPERATOR_SYMBOLS,
    Token,
    is_number,
    new_bracket,
    new_number,
    new_operator,
)

IGNORED_CHARACTERS = {" ", "\n"}


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` into tokens in source order.

    Consecutive digits build a single number. A digit that follows a number
    extends it even when whitespace separates them, since whitespace never
    produces a token. Raises :class:`BadToken` on the first character outside
    the grammar and :class:`MismatchedParens` when brackets do not pair up.
    """
    tokens: list[Token] = []
    # locations of the open brackets still waiting for a ")"
    parens: list[int] = []
    for index, char in enumerate(expression):
        if "0" <= char <= "9":
            digit = ord(char) - ord("0")
            if tokens and is_number(tokens[-1]):
                tokens[-1].value = tokens[-1].value * 10 + digit
            else:
                tokens.append(new_number(digit, index))
            continue
        match char:
            case "(":
                tokens.append(new_bracket(BracketKind.Open, index))
                parens.append(index)
            case ")":
                tokens.append(new_bracket(BracketKind.Close, index))
                if not parens:
                    raise MismatchedParens(index)
                parens.pop()
            case _ if char in OPERATOR_SYMBOLS:
                tokens.append(new_operator(OPERATOR_SYMBOLS[char], index))
            case _ if char in IGNORED_CHARACTERS:
                pass
            case _:
                raise BadToken(char, index)
    if parens:
        raise MismatchedParens(parens[0])
    return tokens
