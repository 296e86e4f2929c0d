"""
Strict RFC 3339 handling for the CloudEvents `time` attribute.

Only the RFC 3339 profile is accepted: a full date, a `T` separator, a full
time with optional fraction and a mandatory `Z` or numeric offset. Anything
else is rejected rather than guessed at.
"""
import re
from datetime import datetime, timedelta, timezone

from .errors import InvalidTimestamp

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))",
    re.ASCII,
)


def parse_rfc3339(value) -> datetime:
    """Parses `value` into an aware UTC datetime or raises `InvalidTimestamp`."""
    if not isinstance(value, str):
        raise InvalidTimestamp(value)
    match = _RFC3339.fullmatch(value)
    if not match:
        raise InvalidTimestamp(value)
    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = match.groups()

    # Anything past microseconds is dropped.
    micros = int(fraction[1:7].ljust(6, "0")) if fraction else 0
    if zulu:
        tz = timezone.utc
    else:
        if int(off_h) > 23 or int(off_m) > 59:
            raise InvalidTimestamp(value)
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        tz = timezone(-offset if sign == "-" else offset)
    try:
        parsed = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micros,
            tzinfo=tz,
        ).astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise InvalidTimestamp(value) from e
    return parsed


def format_rfc3339(ts: datetime) -> str:
    """Return timestamp formatted per RFC3339 with trailing Z for UTC."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    else:
        ts = ts.astimezone(timezone.utc)
    timespec = "microseconds" if ts.microsecond else "seconds"
    return ts.isoformat(timespec=timespec).replace("+00:00", "Z")
