"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) provides time, date, status and
position. It is the only one of the two consumed sentences that carries a
date, so it supplies the absolute timestamp of a fused fix.

RMC Sentence Format:
    $GPRMC,034056.000,A,3959.0498,N,10515.2269,W,0.10,106.02,190415,,,D*7D
           |          | |         | |          | |    |      |
           |          | |         | |          | |    |      +-- UTC date (DDMMYY)
           |          | |         | |          | |    +-- Course over ground
           |          | |         | |          | +-- Speed over ground (knots)
           |          | |         | +----------+-- Longitude + E/W
           |          | +---------+-- Latitude + N/S
           |          +-- Status (A = active fix, V = void)
           +-- UTC time (HHMMSS.sss)
"""

import logging
from collections.abc import Sequence

from gpsfix.exceptions import NoFixError
from gpsfix.nmea.fields import (
    field_at,
    parse_latitude,
    parse_longitude,
    parse_utc_timestamp,
)
from gpsfix.nmea.types import GpsFix

_logger = logging.getLogger(__name__)

_TIME = 1
_STATUS = 2
_LATITUDE = 3
_LATITUDE_HEMISPHERE = 4
_LONGITUDE = 5
_LONGITUDE_HEMISPHERE = 6
_DATE = 9

_ACTIVE = "A"


def decode_position_time_sentence(fields: Sequence[str]) -> GpsFix:
    """Decode the fields of an RMC sentence into a GpsFix.

    The status field is checked before anything else is parsed: a void
    sentence raises NoFixError even if its other fields are garbage.

    Args:
        fields: Fields of a checksum-validated RMC sentence, ``fields[0]``
            being the talker+type id

    Returns:
        GpsFix with the UTC timestamp and position; elevation is None

    Raises:
        NoFixError: If the status is not "A" (active).
        FieldFormatError: If the time, date, coordinate or hemisphere fields
            are malformed or missing.

    Example:
        >>> fix = decode_position_time_sentence(parse_sentence(RMC).fields)
        >>> fix.timestamp
        datetime.datetime(2015, 4, 19, 3, 40, 56, tzinfo=datetime.timezone.utc)
    """
    if field_at(fields, _STATUS, "status") != _ACTIVE:
        raise NoFixError("no satellite fix")

    fix = GpsFix(
        timestamp=parse_utc_timestamp(
            field_at(fields, _TIME, "time"),
            field_at(fields, _DATE, "date"),
        ),
        latitude=parse_latitude(
            field_at(fields, _LATITUDE, "latitude"),
            field_at(fields, _LATITUDE_HEMISPHERE, "latitude hemisphere"),
        ),
        longitude=parse_longitude(
            field_at(fields, _LONGITUDE, "longitude"),
            field_at(fields, _LONGITUDE_HEMISPHERE, "longitude hemisphere"),
        ),
    )
    _logger.debug("Decoded RMC fix: %s", fix)
    return fix
