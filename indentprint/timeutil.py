"""UTC time points, time-of-day splitting and fixed-width time formatting.

Time points are timezone-aware :class:`datetime.datetime` values (naive ones
are taken to be UTC).  Durations are :class:`datetime.timedelta` values.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple

_USEC = timedelta(microseconds=1)
_USEC_PER_SEC = 1_000_000
_USEC_PER_MIN = 60 * _USEC_PER_SEC
_USEC_PER_HOUR = 60 * _USEC_PER_MIN


def _as_utc(t0: datetime) -> datetime:
    if t0.tzinfo is None:
        return t0.replace(tzinfo=timezone.utc)
    return t0.astimezone(timezone.utc)


def now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def epoch() -> datetime:
    """The unix epoch, 1970-01-01 00:00:00 UTC."""
    return datetime(1970, 1, 1, tzinfo=timezone.utc)


def ymd_hms(ymd: int, hms: int) -> datetime:
    """UTC time from packed integers, e.g. ``ymd_hms(20220610, 162905)``.

    Raises :class:`ValueError` when a field is out of range.
    """
    year, rest = divmod(ymd, 10000)
    month, day = divmod(rest, 100)
    hour, rest = divmod(hms, 10000)
    minute, second = divmod(rest, 100)
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def ymd_midnight(ymd: int) -> datetime:
    """Midnight UTC on date ``ymd``, e.g. ``ymd_midnight(20220707)``."""
    return ymd_hms(ymd, 0)


def ymd_hms_usec(ymd: int, hms: int, usec: int) -> datetime:
    """Like :func:`ymd_hms`, plus ``usec`` microseconds."""
    return ymd_hms(ymd, hms) + timedelta(microseconds=usec)


def utc_split_vs_midnight(t0: datetime) -> Tuple[datetime, timedelta]:
    """Split ``t0`` into UTC midnight of the same day and the UTC time of day."""
    t = _as_utc(t0)
    midnight = t.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight, t - midnight


def local_split_vs_midnight(t0: datetime) -> Tuple[datetime, timedelta]:
    """Split ``t0`` into local midnight of the same day (in UTC) and the local time of day."""
    t = _as_utc(t0)
    local = t.astimezone()
    local_midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    midnight = local_midnight.astimezone(timezone.utc)
    return midnight, t - midnight


def utc_split_tm(t0: datetime) -> Tuple[time.struct_time, int]:
    """Split ``t0`` into calendar fields in UTC (1-second precision) and microseconds."""
    t = _as_utc(t0)
    return t.utctimetuple(), t.microsecond


def _split_duration(dt: timedelta) -> Tuple[int, int, int, int]:
    total = abs(dt) // _USEC
    hours, rest = divmod(total, _USEC_PER_HOUR)
    minutes, rest = divmod(rest, _USEC_PER_MIN)
    seconds, usec = divmod(rest, _USEC_PER_SEC)
    return hours, minutes, seconds, usec


def format_hms_msec(dt: timedelta) -> str:
    """Format a duration as ``hh:mm:ss.nnn``."""
    h, m, s, usec = _split_duration(dt)
    return f"{h:02d}:{m:02d}:{s:02d}.{usec // 1000:03d}"


def format_hms_usec(dt: timedelta) -> str:
    """Format a duration as ``hh:mm:ss.uuuuuu``."""
    h, m, s, usec = _split_duration(dt)
    return f"{h:02d}:{m:02d}:{s:02d}.{usec:06d}"


def format_utc_hms_msec(t0: datetime) -> str:
    """Format the UTC time of day of ``t0`` as ``hh:mm:ss.nnn``."""
    return format_hms_msec(utc_split_vs_midnight(t0)[1])


def format_utc_ymd_hms_usec(t0: datetime) -> str:
    """Format ``t0`` in UTC as ``yyyymmdd:hh:mm:ss.uuuuuu``."""
    tm, usec = utc_split_tm(t0)
    return (
        f"{tm.tm_year:04d}{tm.tm_mon:02d}{tm.tm_mday:02d}:"
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}.{usec:06d}"
    )


def format_iso8601(t0: datetime) -> str:
    """Format ``t0`` in ISO 8601 with milliseconds, e.g. ``2012-04-23T18:25:43.511Z``."""
    tm, usec = utc_split_tm(t0)
    return (
        f"{tm.tm_year:04d}-{tm.tm_mon:02d}-{tm.tm_mday:02d}T"
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}.{usec // 1000:03d}Z"
    )


@dataclass(frozen=True)
class Iso8601:
    """Prints a time point in ISO 8601 format."""

    t0: datetime

    def __str__(self) -> str:
        return format_iso8601(self.t0)


@dataclass(frozen=True)
class HmsMsec:
    """Prints a time of day as ``hh:mm:ss.nnn``."""

    dt: timedelta

    @classmethod
    def utc(cls, t0: datetime) -> "HmsMsec":
        return cls(utc_split_vs_midnight(t0)[1])

    @classmethod
    def local(cls, t0: datetime) -> "HmsMsec":
        return cls(local_split_vs_midnight(t0)[1])

    def __str__(self) -> str:
        return format_hms_msec(self.dt)


@dataclass(frozen=True)
class HmsUsec:
    """Prints a time of day as ``hh:mm:ss.uuuuuu``."""

    dt: timedelta

    @classmethod
    def utc(cls, t0: datetime) -> "HmsUsec":
        return cls(utc_split_vs_midnight(t0)[1])

    @classmethod
    def local(cls, t0: datetime) -> "HmsUsec":
        return cls(local_split_vs_midnight(t0)[1])

    def __str__(self) -> str:
        return format_hms_usec(self.dt)