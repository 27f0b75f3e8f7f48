import math
from decimal import Decimal
from typing import Optional


def error_message(expression: str, location: Optional[int], message: str) -> str:
    expression = expression.rstrip("\r\n")
    if location is None:
        return f"{expression}\n{message}\n"
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)


def format_value(value: float) -> str:
    """Render a result without exponent notation, e.g. ``16`` or ``0.0000001``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
