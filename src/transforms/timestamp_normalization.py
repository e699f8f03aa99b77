"""Camera timestamp normalization.

This module converts GeoNet ``latest-timestamp`` strings into canonical
UTC ISO-8601 values with millisecond precision.
"""

from __future__ import annotations

import warnings
from datetime import datetime, timedelta, timezone

from dateutil import parser as date_parser
from dateutil.parser import UnknownTimezoneWarning

from core.constants import (
    NZDT_SUFFIX,
    NZDT_UTC_OFFSET_HOURS,
    NZST_SUFFIX,
    NZST_UTC_OFFSET_HOURS,
)
from core.errors import TimestampError

_NZ_SUFFIX_OFFSETS = (
    (NZST_SUFFIX, NZST_UTC_OFFSET_HOURS),
    (NZDT_SUFFIX, NZDT_UTC_OFFSET_HOURS),
)
_FIRST_DEFAULT = datetime(2000, 1, 1)
_SECOND_DEFAULT = datetime(2001, 2, 2)


def normalize_timestamp(value: str) -> str:
    """Convert a camera timestamp into a UTC ISO-8601 string.

    ``NZST`` and ``NZDT`` suffixed values are read as New Zealand wall-clock
    times at UTC+12 and UTC+13. Any other value is parsed directly, honoring
    an explicit offset and treating naive values as UTC.

    Args:
        value: Raw timestamp string from the feed.

    Returns:
        Timestamp formatted as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Raises:
        TimestampError: If the value is empty or cannot be parsed.
    """
    if not value.strip():
        raise TimestampError(value, "timestamp is empty")
    for suffix, offset_hours in _NZ_SUFFIX_OFFSETS:
        if value.endswith(suffix):
            wall_clock = _parse_datetime(value, value[: -len(suffix)])
            if wall_clock.tzinfo is not None:
                raise TimestampError(value, f"unexpected timezone before{suffix}")
            local_zone = timezone(timedelta(hours=offset_hours))
            return _format_or_raise(value, wall_clock.replace(tzinfo=local_zone))
    parsed = _parse_datetime(value, value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return _format_or_raise(value, parsed)


def format_utc(moment: datetime) -> str:
    """Render an aware datetime as UTC with millisecond precision.

    Args:
        moment: Timezone-aware datetime.

    Returns:
        ISO-8601 string with a ``Z`` suffix.

    Raises:
        OverflowError: If the UTC instant falls outside the datetime range.
    """
    utc_moment = moment.astimezone(timezone.utc)
    milliseconds = utc_moment.microsecond // 1000
    return (
        f"{utc_moment.year:04d}-{utc_moment.month:02d}-{utc_moment.day:02d}"
        f"T{utc_moment.hour:02d}:{utc_moment.minute:02d}:{utc_moment.second:02d}"
        f".{milliseconds:03d}Z"
    )


def _format_or_raise(original: str, moment: datetime) -> str:
    try:
        return format_utc(moment)
    except OverflowError as error:
        raise TimestampError(original, f"outside the supported date range ({error})") from error


def _parse_datetime(original: str, text: str) -> datetime:
    """Parse a date-time string, rejecting unknown zones and partial dates.

    The value is parsed against two different fallback dates. Any year,
    month, or day missing from the text would differ between the results.

    Args:
        original: Full input value used in error messages.
        text: Portion of the value to parse.

    Returns:
        Parsed datetime, naive when no zone was present.

    Raises:
        TimestampError: If parsing fails, a zone name is unrecognized,
            or the value does not name a full calendar date.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", UnknownTimezoneWarning)
        try:
            parsed = date_parser.parse(text, default=_FIRST_DEFAULT)
            reparsed = date_parser.parse(text, default=_SECOND_DEFAULT)
        except UnknownTimezoneWarning as error:
            raise TimestampError(original, f"unsupported timezone ({error})") from error
        except (ValueError, OverflowError) as error:
            raise TimestampError(original, str(error)) from error
    if parsed.date() != reparsed.date():
        raise TimestampError(original, "expected a full calendar date")
    return parsed
