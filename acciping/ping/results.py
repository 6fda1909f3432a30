"""Ping outcomes: data points, drop reasons and rate helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum, IntEnum
from ipaddress import IPv4Address, IPv6Address

from acciping.timeutils import format_duration

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class Dropped(IntEnum):
    """Why a packet was dropped; NOT_DROPPED for a good packet."""

    NOT_DROPPED = 0
    TIMEOUT = 1
    DNS_FAILURE = 2
    BAD_RESPONSE = 3
    TEST_DROP = 0xFE

    def __str__(self) -> str:
        return _DROP_DESCRIPTIONS.get(self, "")


_DROP_DESCRIPTIONS = {
    Dropped.BAD_RESPONSE: "Bad Response",
    Dropped.TIMEOUT: "Timeout",
    Dropped.DNS_FAILURE: "DNS Query Failed",
    Dropped.TEST_DROP: "Testing A Dropped Packet :)",
}


class DNSCacheTrust(Enum):
    """How many dropped packets an address may have before it is considered stale."""

    LOW_TRUST = "Low Trust"
    NOMINAL_TRUST = "Nominal Trust"
    HIGH_TRUST = "High Trust"

    def max_dropped(self) -> int:
        return _MAX_DROPPED[self]


_MAX_DROPPED = {
    DNSCacheTrust.LOW_TRUST: 0,
    DNSCacheTrust.NOMINAL_TRUST: 1,
    DNSCacheTrust.HIGH_TRUST: 5,
}


def duration_nanoseconds(duration: timedelta) -> int:
    """Whole nanoseconds in ``duration``."""
    return (duration // timedelta(microseconds=1)) * 1_000


def rfc3339_nano(moment: datetime) -> str:
    """Format a timestamp as RFC 3339 with trailing fractional zeros trimmed."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True)
class PingDataPoint:
    """A single ping: its round trip time, when it was sent and whether it was dropped."""

    duration: timedelta = timedelta(0)
    timestamp: datetime = ZERO_TIME
    drop_reason: Dropped = Dropped.NOT_DROPPED

    def dropped(self) -> bool:
        return self.drop_reason != Dropped.NOT_DROPPED

    def good(self) -> bool:
        return self.drop_reason == Dropped.NOT_DROPPED

    def __str__(self) -> str:
        stamp = rfc3339_nano(self.timestamp)
        if self.good():
            return f"{stamp} | {format_duration(duration_nanoseconds(self.duration))}"
        return f'{stamp} | DROPPED, reason "{self.drop_reason}"'


@dataclass(frozen=True)
class PingResults:
    """A data point together with the address it came from, or an internal error."""

    data: PingDataPoint = field(default_factory=PingDataPoint)
    ip: IPv4Address | IPv6Address | None = None
    internal_error: BaseException | None = None

    def __str__(self) -> str:
        if self.ip is None and self.internal_error is not None:
            return (
                f"Internal Error {rfc3339_nano(self.data.timestamp)}"
                f" reason {self.internal_error}"
            )
        address = "<nil>" if self.ip is None else str(self.ip)
        return f"{address} | {self.data}"


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def pings_per_minute_to_duration(pings_per_minute: float) -> timedelta:
    """The gap between pings for a rate, rounded to the millisecond; zero means no gap."""
    if pings_per_minute == 0:
        return timedelta(0)
    gap_ms = _round_half_away((60 * 1000) / pings_per_minute)
    return timedelta(milliseconds=gap_ms)