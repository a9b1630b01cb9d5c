import re
from datetime import datetime, timedelta
from typing import Optional

import pytz

from szdelays.errors import FormatError

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_prefix(value: str) -> Optional[int]:
    """
    Read the leading integer of a string ("08" -> 8, "12abc" -> 12).
    Returns None when there are no leading digits.
    """
    m = _LEADING_INT.match(value)
    if m is None:
        return None
    return int(m.group(1))


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse the map service's "DD.MM.YYYY HH:MM:SS" snapshot time.

    The wall-clock values are taken as UTC with no conversion. Raises
    FormatError when the string is not a date token and a time token with
    three parts each. A component without digits yields None instead of an
    error. Out-of-range components roll over (month 13 -> January of the
    next year, day 0 -> last day of the previous month).
    """
    tokens = value.split(" ")
    if len(tokens) != 2:
        raise FormatError(f"Bad timestamp value: {value!r}")

    day_part = tokens[0].split(".")
    time_part = tokens[1].split(":")
    if len(day_part) != 3 or len(time_part) != 3:
        raise FormatError(f"Bad timestamp value: {value!r}")

    parts = [parse_int_prefix(p) for p in (*day_part, *time_part)]
    if any(p is None for p in parts):
        return None
    day, month, year, hour, minute, second = parts

    # months are zero-based from here on
    month -= 1
    year += month // 12
    month %= 12

    try:
        base = datetime(year, month + 1, 1, tzinfo=pytz.UTC)
        return base + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)
    except (ValueError, OverflowError):
        # outside the range datetime can represent
        return None

