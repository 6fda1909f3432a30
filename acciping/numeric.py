"""Small numeric helpers: significant-figure rounding and range normalisation."""

from __future__ import annotations

import math


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def exponent(value: float) -> float:
    """Return ceil(log10(|value|))."""
    return float(math.ceil(math.log10(abs(value))))


def round_to_nearest_sig_fig(value: float, sig_fig: int) -> float:
    """Round ``value`` to ``sig_fig`` significant figures."""
    if value == 0:
        return 0.0
    power = float(sig_fig) - exponent(value)
    magnitude = math.pow(10.0, power)
    rounded = _round_half_away(value * magnitude)
    return rounded / magnitude


def exponent_int(value: int) -> int:
    """Return the number of decimal digits in ``value`` (0 for zero)."""
    count = 0
    remaining = abs(value)
    while remaining > 0:
        remaining //= 10
        count += 1
    return count


def pow_int(start: int, base: int, power: int) -> int:
    """Multiply ``start`` by ``base`` ``power`` times, or divide it when ``power`` is negative."""
    result = start
    if power < 0:
        for _ in range(abs(power)):
            result = _trunc_div(result, base)
    else:
        for _ in range(power):
            result *= base
    return result


def truncate_to_nearest_sig_fig_int(value: int, sig_fig: int) -> int:
    """Truncate an integer to ``sig_fig`` significant figures using only integer arithmetic."""
    if value == 0:
        return 0
    exp = exponent_int(value)
    if sig_fig > exp:
        return value
    power = sig_fig - exp
    rounded = pow_int(value, 10, min(power, -power))
    return pow_int(rounded, 10, max(power, -power))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """Scale ``value`` to [0, 1] by its position between ``minimum`` and ``maximum``."""
    return normalize_to_range(value, minimum, maximum, 0.0, 1.0)


def normalize_to_range(
    value: float, minimum: float, maximum: float, new_min: float, new_max: float
) -> float:
    """Map ``value`` from [minimum, maximum] onto the same ratio inside [new_min, new_max]."""
    return (((new_max - new_min) * (value - minimum)) / (maximum - minimum)) + new_min