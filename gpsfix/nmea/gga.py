"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) provides the high-precision position,
the elevation and the fix quality, but only a time of day and no date.

GGA Sentence Format:
    $GPGGA,034056.000,3959.0498,N,10515.2269,W,2,06,1.21,1648.2,M,-20.6,M,0000,0000*61
           |          |         | |          | | |  |    |      | |     |
           |          |         | |          | | |  |    |      | |     +-- DGPS info (optional)
           |          |         | |          | | |  |    |      | +-- Geoid height (M=meters)
           |          |         | |          | | |  |    +------+-- Elevation above MSL
           |          |         | |          | | |  +-- HDOP (horizontal dilution)
           |          |         | |          | | +-- Number of satellites
           |          |         | |          | +-- Fix quality (0 = no fix)
           |          |         | +----------+-- Longitude + E/W
           |          +---------+-- Latitude + N/S
           +-- UTC time (HHMMSS.sss)

The decoded fix carries the wall-clock time of decoding as its timestamp,
because the sentence has no date. Fix acquisition replaces it with the
timestamp of an RMC sentence; a caller using a GGA fix on its own gets
decode-time, not fix-time, semantics.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from gpsfix.exceptions import NoFixError
from gpsfix.nmea.fields import (
    field_at,
    parse_decimal_field,
    parse_latitude,
    parse_longitude,
)
from gpsfix.nmea.types import GpsFix

_logger = logging.getLogger(__name__)

_LATITUDE = 2
_LATITUDE_HEMISPHERE = 3
_LONGITUDE = 4
_LONGITUDE_HEMISPHERE = 5
_FIX_QUALITY = 6
_ELEVATION = 9

# An empty fix quality is treated like "0": the receiver has not reported a fix.
_NO_FIX_QUALITIES = ("0", "")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def decode_position_fix_sentence(fields: Sequence[str]) -> GpsFix:
    """Decode the fields of a GGA sentence into a GpsFix.

    Args:
        fields: Fields of a checksum-validated GGA sentence, ``fields[0]``
            being the talker+type id

    Returns:
        GpsFix with position and elevation from the sentence and a
        placeholder timestamp (current UTC wall-clock time)

    Raises:
        NoFixError: If the fix quality is "0" (or empty).
        FieldFormatError: If a coordinate, hemisphere or elevation field is
            malformed or missing.

    Example:
        >>> fix = decode_position_fix_sentence(parse_sentence(GGA).fields)
        >>> fix.elevation
        1648.2
    """
    if field_at(fields, _FIX_QUALITY, "fix quality") in _NO_FIX_QUALITIES:
        raise NoFixError("no fix")

    fix = GpsFix(
        timestamp=_utc_now(),
        latitude=parse_latitude(
            field_at(fields, _LATITUDE, "latitude"),
            field_at(fields, _LATITUDE_HEMISPHERE, "latitude hemisphere"),
        ),
        longitude=parse_longitude(
            field_at(fields, _LONGITUDE, "longitude"),
            field_at(fields, _LONGITUDE_HEMISPHERE, "longitude hemisphere"),
        ),
        elevation=parse_decimal_field(
            field_at(fields, _ELEVATION, "elevation"), "elevation"
        ),
    )
    _logger.debug("Decoded GGA fix: %s", fix)
    return fix
