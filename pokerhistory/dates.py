"""Timestamp and empty-string helpers for hand history documents."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

_RFC3339 = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?P<fraction>\.\d+)?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})\Z"
)


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")

    fraction = match["fraction"]
    microsecond = int((fraction[1:] + "000000")[:6]) if fraction else 0

    offset = match["offset"]
    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"invalid UTC offset in timestamp: {text!r}")
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

    try:
        parsed = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            microsecond,
            tzinfo=tz,
        )
    except ValueError as exc:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}: {exc}") from exc
    return parsed.astimezone(timezone.utc)


def parse_iso8601(text: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware UTC datetime.

    A timestamp without a zone designator is taken to be UTC. ``None``
    passes through unchanged. Raises ``ValueError`` on malformed input.
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise ValueError(f"expected a timestamp string, got {type(text).__name__}")
    try:
        return _parse_rfc3339(text)
    except ValueError:
        return _parse_rfc3339(text + "Z")


def format_iso8601(value: datetime | None) -> str | None:
    """Render a datetime as an RFC 3339 string in UTC with a ``+00:00`` offset.

    Naive datetimes are taken to be UTC. ``None`` passes through unchanged.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)

    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    micro = value.microsecond
    if micro:
        if micro % 1000 == 0:
            text += f".{micro // 1000:03d}"
        else:
            text += f".{micro:06d}"
    return text + "+00:00"


def empty_string_is_none(value: Any) -> Any:
    """Map an empty string to ``None``; return any other non-string value as is.

    A non-empty string or ``None`` raises ``ValueError``.
    """
    if isinstance(value, str):
        if value:
            raise ValueError("expected empty string or vector")
        return None
    if value is None:
        raise ValueError("expected empty string or vector")
    return value