"""GNSS fix acquisition from a serial NMEA 0183 receiver."""

from gpsfix.gnss.acquisition import acquire_fix, fuse_fixes, get_next
from gpsfix.gnss.serial_source import SerialByteSource

__all__ = ["SerialByteSource", "acquire_fix", "fuse_fixes", "get_next"]
