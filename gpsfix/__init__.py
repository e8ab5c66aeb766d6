"""gpsfix: position fixes from a GPS receiver's NMEA 0183 byte stream."""

from gpsfix.exceptions import (
    ChecksumError,
    FieldFormatError,
    FrameError,
    GpsFixError,
    NoFixError,
    ResourceError,
)
from gpsfix.gnss import SerialByteSource, acquire_fix
from gpsfix.nmea import (
    GpsFix,
    RawSentence,
    decode_position_fix_sentence,
    decode_position_time_sentence,
    parse_sentence,
    read_sentence,
    validate_checksum,
)

__all__ = [
    "ChecksumError",
    "FieldFormatError",
    "FrameError",
    "GpsFix",
    "GpsFixError",
    "NoFixError",
    "RawSentence",
    "ResourceError",
    "SerialByteSource",
    "acquire_fix",
    "decode_position_fix_sentence",
    "decode_position_time_sentence",
    "parse_sentence",
    "read_sentence",
    "validate_checksum",
]
