"""
cep_weather.domain.conversion

Temperature scale conversion.

Responsibilities:
- Convert a Celsius sample into Fahrenheit and Kelvin.
- Round every value to one decimal place, half-up.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_ONE_DECIMAL = Decimal("0.1")


def round1(value: float) -> float:
    """
    Round to one decimal place, ties away from zero.

    The shortest repr of the float is rounded (not its binary expansion), so
    22.25 becomes 22.3 and -0.25 becomes -0.3. Values that round to zero
    come back as 0.0, never -0.0.
    """

    # `+ 0.0` folds -0.0 into 0.0.
    return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)) + 0.0


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273


# --- Module Notes -----------------------------------------------------------
# Kelvin uses the +273 offset exposed by the public API, not 273.15.
