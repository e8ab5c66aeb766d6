"""NMEA field parsing utilities.

This module provides the field-level grammars shared by the sentence
decoders. NMEA fields are comma-separated and may be empty (consecutive commas
indicate missing data), so splitting must preserve empty fields.

Unlike a free-form ``float()`` conversion, every parser here matches the exact
layout of its field (fixed-width integer groups, optional decimal fraction)
and raises ``FieldFormatError`` naming the field on anything else. A value
such as ``"1e3"``, ``"inf"`` or ``" 12.5"`` is rejected rather than silently
accepted.
"""

import re
from collections.abc import Sequence
from datetime import datetime, timezone

from gpsfix.exceptions import FieldFormatError

FIELD_DELIMITER = ","

_LATITUDE_DEGREE_DIGITS = 2
_LONGITUDE_DEGREE_DIGITS = 3

_DECIMAL = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_TIME = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})(?:\.([0-9]+))?")
_DATE = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})")

# Two-digit years are taken as-is in the receiver's century; no pivot year.
_CENTURY = 2000


def split_fields(text: str, delimiter: str = FIELD_DELIMITER) -> list[str]:
    """Split a sentence body into its fields, keeping empty ones.

    Args:
        text: Sentence body between '$' and '*'
        delimiter: Field separator (',' for NMEA)

    Returns:
        One string per delimiter-separated segment, in order

    Example:
        >>> split_fields("GPRMC,034056.000,V,,,,")
        ['GPRMC', '034056.000', 'V', '', '', '', '']
    """
    return text.split(delimiter)


def field_at(fields: Sequence[str], index: int, field_name: str) -> str:
    """Return ``fields[index]``, raising FieldFormatError if it is absent."""
    if index >= len(fields):
        raise FieldFormatError(field_name)
    return fields[index]


def _coordinate_pattern(degree_digit_count: int) -> re.Pattern[str]:
    return re.compile(rf"([0-9]{{{degree_digit_count}}})([0-9]{{2}}(?:\.[0-9]+)?)")


def degrees_minutes(
    field: str,
    degree_digit_count: int,
    field_name: str = "coordinate",
) -> float:
    """Convert a sexagesimal NMEA coordinate to decimal degrees.

    NMEA coordinates use D..DMM.MMMM format where the first
    ``degree_digit_count`` digits are whole degrees and the remainder is
    decimal minutes. Latitude uses 2 degree digits, longitude uses 3.

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        field: Coordinate text (e.g., "4807.038")
        degree_digit_count: Width of the integer degree prefix
        field_name: Name reported in FieldFormatError

    Returns:
        Unsigned decimal degrees

    Raises:
        FieldFormatError: If the field does not match the grammar or the
            minutes are 60 or more.

    Example:
        >>> degrees_minutes("4807.038", 2)
        48.1173  # 48° + 7.038'/60
        >>> degrees_minutes("12311.12", 3)
        123.18533...
    """
    match = _coordinate_pattern(degree_digit_count).fullmatch(field)
    if match is None:
        raise FieldFormatError(field_name, field)

    degrees = int(match.group(1))
    minutes = float(match.group(2))
    if minutes >= 60.0:
        raise FieldFormatError(field_name, field)

    return degrees + minutes / 60.0


def _apply_hemisphere(
    value: float,
    hemisphere: str,
    positive: str,
    negative: str,
    field_name: str,
) -> float:
    if hemisphere == negative:
        return -value
    if hemisphere in (positive, ""):
        return value
    raise FieldFormatError(field_name, hemisphere)


def parse_latitude(value: str, hemisphere: str) -> float:
    """Decode a DDMM.MMMM latitude and its N/S indicator.

    Returns:
        Decimal degrees in [-90, 90], negative for South

    Raises:
        FieldFormatError: On a malformed or out-of-range latitude, or a
            hemisphere other than "N", "S" or empty.
    """
    degrees = degrees_minutes(value, _LATITUDE_DEGREE_DIGITS, "latitude")
    if degrees > 90.0:
        raise FieldFormatError("latitude", value)
    return _apply_hemisphere(degrees, hemisphere, "N", "S", "latitude hemisphere")


def parse_longitude(value: str, hemisphere: str) -> float:
    """Decode a DDDMM.MMMM longitude and its E/W indicator.

    Returns:
        Decimal degrees in [-180, 180], negative for West

    Raises:
        FieldFormatError: On a malformed or out-of-range longitude, or a
            hemisphere other than "E", "W" or empty.
    """
    degrees = degrees_minutes(value, _LONGITUDE_DEGREE_DIGITS, "longitude")
    if degrees > 180.0:
        raise FieldFormatError("longitude", value)
    return _apply_hemisphere(degrees, hemisphere, "E", "W", "longitude hemisphere")


def parse_decimal_field(value: str, field_name: str) -> float | None:
    """Parse a signed decimal field, returning None if empty.

    Empty means "no data", which is different from a measured zero.

    Raises:
        FieldFormatError: If the field is non-empty and not a plain decimal.

    Example:
        >>> parse_decimal_field("1648.2", "elevation")
        1648.2
        >>> parse_decimal_field("", "elevation")
        None
    """
    if not value:
        return None
    if _DECIMAL.fullmatch(value) is None:
        raise FieldFormatError(field_name, value)
    return float(value)


def _microseconds(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def parse_utc_timestamp(time_field: str, date_field: str) -> datetime:
    """Combine an HHMMSS.sss time and a DDMMYY date into one UTC instant.

    Sub-second digits beyond microsecond precision are truncated. The
    two-digit year is placed in the 2000s, the century receivers report in.

    Args:
        time_field: UTC time of day (e.g., "034056.000")
        date_field: UTC date (e.g., "190415")

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        FieldFormatError: If either field is malformed, or together they do
            not name a real calendar instant (e.g., month 13, hour 25).

    Example:
        >>> parse_utc_timestamp("034056.000", "190415")
        datetime.datetime(2015, 4, 19, 3, 40, 56, tzinfo=datetime.timezone.utc)
    """
    time_match = _TIME.fullmatch(time_field)
    if time_match is None:
        raise FieldFormatError("time", time_field)
    date_match = _DATE.fullmatch(date_field)
    if date_match is None:
        raise FieldFormatError("date", date_field)

    hour, minute, second, fraction = time_match.groups()
    day, month, year = date_match.groups()

    try:
        midnight = datetime(
            _CENTURY + int(year), int(month), int(day), tzinfo=timezone.utc
        )
    except ValueError as e:
        raise FieldFormatError("date", date_field) from e

    try:
        return midnight.replace(
            hour=int(hour),
            minute=int(minute),
            second=int(second),
            microsecond=_microseconds(fraction),
        )
    except ValueError as e:
        raise FieldFormatError("time", time_field) from e
