"""Sentences and byte sources shared by the tests."""

from gpsfix.exceptions import FrameError
from gpsfix.nmea.checksum import calculate_checksum
from gpsfix.nmea.reader import BufferByteSource

RMC = "$GPRMC,034056.000,A,3959.0498,N,10515.2269,W,0.10,106.02,190415,,,D*7D"
GGA = "$GPGGA,034056.000,3959.0498,N,10515.2269,W,2,06,1.21,1648.2,M,-20.6,M,0000,0000*61"
RMC_VOID = "$GPRMC,034056.000,V,,,,,,,190415,,,N*41"
GGA_NO_FIX = "$GPGGA,034056.000,,,,,0,00,,,M,,M,,*7C"
GSV = "$GPGSV,3,1,12,01,05,060,18,02,17,259,43,04,56,287,28,07,21,216,43*78"
VTG = "$GPVTG,106.02,T,,M,0.10,N,0.19,K,D*34"


def frame(body: str) -> str:
    """Wrap a sentence body as ``$body*CC`` with a correct checksum."""
    return f"${body}*{calculate_checksum(body):02X}"


def stream(*sentences: str) -> bytes:
    """Join sentences with CRLF line endings, as a receiver emits them."""
    return "".join(sentence + "\r\n" for sentence in sentences).encode("ascii")


class RecordingByteSource(BufferByteSource):
    """BufferByteSource that counts ``close`` calls and can fail mid-stream."""

    def __init__(self, data: bytes, fail_at: int | None = None) -> None:
        super().__init__(data)
        self.close_count = 0
        self.bytes_read = 0
        self._fail_at = fail_at

    def next_byte(self) -> int:
        if self._fail_at is not None and self.bytes_read == self._fail_at:
            raise FrameError("simulated read failure")
        byte = super().next_byte()
        self.bytes_read += 1
        return byte

    def close(self) -> None:
        super().close()
        self.close_count += 1
