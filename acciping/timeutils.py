"""Human-readable formatting of durations and timestamps."""

from __future__ import annotations

from datetime import datetime

from acciping.numeric import truncate_to_nearest_sig_fig_int

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _split_fraction(value: int, precision: int) -> tuple[int, str]:
    """Split ``value`` into its whole part and a trimmed ``.fraction`` suffix."""
    scale = 10**precision
    whole, frac = divmod(value, scale)
    digits = f"{frac:0{precision}d}".rstrip("0") if precision else ""
    return whole, f".{digits}" if digits else ""


def format_duration(nanoseconds: int) -> str:
    """Format a duration in nanoseconds as e.g. ``1.5s``, ``123µs`` or ``3h25m0s``."""
    nanoseconds = int(nanoseconds)
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    remaining = abs(nanoseconds)
    if remaining < _SECOND:
        if remaining < _MICROSECOND:
            precision, unit = 0, "ns"
        elif remaining < _MILLISECOND:
            precision, unit = 3, "µs"
        else:
            precision, unit = 6, "ms"
        whole, fraction = _split_fraction(remaining, precision)
        return f"{sign}{whole}{fraction}{unit}"

    whole, fraction = _split_fraction(remaining, 9)
    text = f"{whole % 60}{fraction}s"
    whole //= 60
    if whole:
        text = f"{whole % 60}m{text}"
        whole //= 60
        if whole:
            text = f"{whole}h{text}"
    return sign + text


def human_string(nanoseconds: int, digits: int) -> str:
    """Truncate a duration to ``digits`` significant figures and format it."""
    return format_duration(truncate_to_nearest_sig_fig_int(int(nanoseconds), digits))


def time_date_format(moment: datetime) -> str:
    """Describe ``moment`` as a ``time.Date(...)`` constructor expression."""
    if moment.tzinfo is None:
        location = "Local"
    else:
        location = moment.tzname() or "UTC"
    return "time.Date({}, {}, {}, {}, {}, {}, {}, {})".format(
        moment.year,
        _MONTHS[moment.month - 1],
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.microsecond * 1_000,
        location,
    )