"""String format recognizers used by the ``format`` constraint."""

import re
from datetime import date
from typing import Callable, Dict, Optional


_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_URI = re.compile(r"https?://.+", re.DOTALL)
_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME = re.compile(
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.[0-9]+)?(?:[zZ]|[+-]([0-9]{2})(?::?([0-9]{2})))?"
)
_DATE_TIME_SEPARATOR = re.compile(r"[tT ]")


def is_email(value: str) -> bool:
    return bool(_EMAIL.fullmatch(value))


def is_uri(value: str) -> bool:
    return bool(_URI.fullmatch(value))


def is_uuid(value: str) -> bool:
    return bool(_UUID.fullmatch(value))


def is_date(value: str) -> bool:
    """Full-date per RFC 3339, including leap-year checks."""

    match = _DATE.fullmatch(value)
    if not match:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_time(value: str) -> bool:
    """Partial-time with optional fraction and optional offset; allows a leap second."""

    match = _TIME.fullmatch(value)
    if not match:
        return False
    hour, minute, second = int(match.group(1)), int(match.group(2)), int(match.group(3))
    if hour > 23 or minute > 59 or second > 60:
        return False
    offset_hour, offset_minute = match.group(4), match.group(5)
    if offset_hour is not None and (int(offset_hour) > 23 or int(offset_minute) > 59):
        return False
    return True


def is_date_time(value: str) -> bool:
    parts = _DATE_TIME_SEPARATOR.split(value, maxsplit=1)
    return len(parts) == 2 and is_date(parts[0]) and is_time(parts[1])


FORMAT_CHECKERS: Dict[str, Callable[[str], bool]] = {
    "email": is_email,
    "uri": is_uri,
    "uuid": is_uuid,
    "date": is_date,
    "time": is_time,
    "date-time": is_date_time,
}


def check_format(name: str, value: str) -> Optional[bool]:
    """Return whether ``value`` matches format ``name``; None if the format is unknown."""

    checker = FORMAT_CHECKERS.get(name)
    if checker is None:
        return None
    return checker(value)


__all__ = [
    "FORMAT_CHECKERS",
    "check_format",
    "is_date",
    "is_date_time",
    "is_email",
    "is_time",
    "is_uri",
    "is_uuid",
]
