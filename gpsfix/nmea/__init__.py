"""NMEA 0183 framing and decoding for GGA and RMC sentences."""

from gpsfix.nmea.checksum import validate_checksum
from gpsfix.nmea.fields import degrees_minutes, split_fields
from gpsfix.nmea.gga import decode_position_fix_sentence
from gpsfix.nmea.reader import (
    BufferByteSource,
    ByteSource,
    parse_sentence,
    read_sentence,
)
from gpsfix.nmea.rmc import decode_position_time_sentence
from gpsfix.nmea.types import GpsFix, RawSentence

__all__ = [
    "BufferByteSource",
    "ByteSource",
    "GpsFix",
    "RawSentence",
    "decode_position_fix_sentence",
    "decode_position_time_sentence",
    "degrees_minutes",
    "parse_sentence",
    "read_sentence",
    "split_fields",
    "validate_checksum",
]
