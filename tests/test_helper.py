import math

import pytest

from rpncalc.helper import error_message, format_value


def test_error_message_points_at_location():
    assert error_message("2 $ 3\n", 2, "bad") == "2 $ 3\n  ^ bad\n"


def test_error_message_without_location():
    assert error_message("2 +", None, "bad") == "2 +\nbad\n"


@pytest.mark.parametrize(
    "value, text",
    [
        (16.0, "16"),
        (3.5, "3.5"),
        (-2.0, "-2"),
        (0.0, "0"),
        (-0.0, "-0"),
        (1e-7, "0.0000001"),
        (1e20, "100000000000000000000"),
        (1 / 3, "0.3333333333333333"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ],
)
def test_format_value(value, text):
    assert format_value(value) == text
