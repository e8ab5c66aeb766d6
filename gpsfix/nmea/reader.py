"""Sentence framing over a blocking byte source.

Reading strategy:
    A receiver that is opened mid-transmission delivers the tail of some
    sentence first. ``read_sentence`` therefore discards bytes until the next
    '$', then accumulates the body up to '*' while folding each byte into the
    XOR checksum, and finally reads the two checksum digits. Any failure of
    the byte source aborts the sentence immediately; there is no retry
    within a call.

    Reads block for as long as the byte source blocks. Bounding latency is
    the byte source's job (see ``SerialByteSource.cancel``).
"""

import logging
from typing import Protocol

from gpsfix.exceptions import ChecksumError, FrameError
from gpsfix.nmea.checksum import fold_checksum, parse_checksum_digits
from gpsfix.nmea.fields import FIELD_DELIMITER, split_fields
from gpsfix.nmea.types import RawSentence

__all__ = ["BufferByteSource", "ByteSource", "parse_sentence", "read_sentence"]

_logger = logging.getLogger(__name__)

_START_MARKER = ord("$")
_END_MARKER = ord("*")


class ByteSource(Protocol):
    """A blocking, exclusively owned stream of bytes.

    ``next_byte`` returns one byte as an int in 0..255 and raises
    ``FrameError`` when the stream ends or fails. ``close`` releases the
    underlying channel.
    """

    def next_byte(self) -> int: ...

    def close(self) -> None: ...


class BufferByteSource:
    """A ``ByteSource`` over an in-memory buffer, for logged or test data."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._position = 0
        self.closed = False

    def next_byte(self) -> int:
        if self._position >= len(self._data):
            raise FrameError("end of buffer")
        byte = self._data[self._position]
        self._position += 1
        return byte

    def close(self) -> None:
        self.closed = True


def _synchronize(source: ByteSource) -> None:
    """Consume bytes up to and including the next start-of-sentence marker."""
    discarded = 0
    while source.next_byte() != _START_MARKER:
        discarded += 1
    if discarded:
        _logger.debug("Discarded %d bytes before sentence start", discarded)


def _read_body(source: ByteSource) -> tuple[bytes, int]:
    """Accumulate body bytes up to '*', returning them with their checksum."""
    body = bytearray()
    checksum = 0
    while True:
        byte = source.next_byte()
        if byte == _END_MARKER:
            return bytes(body), checksum
        checksum = fold_checksum(checksum, byte)
        body.append(byte)


def _read_expected_checksum(source: ByteSource) -> int:
    digits = bytes((source.next_byte(), source.next_byte()))
    return parse_checksum_digits(digits.decode("latin-1"))


def _build_sentence(body: bytes) -> RawSentence:
    try:
        text = body.decode("ascii")
    except UnicodeDecodeError as e:
        raise FrameError("sentence body is not ASCII") from e
    fields = split_fields(text, FIELD_DELIMITER)
    return RawSentence(talker_and_type=fields[0], fields=fields)


def read_sentence(source: ByteSource) -> RawSentence:
    """Read the next checksum-validated sentence from ``source``.

    Raises:
        FrameError: If the byte source ends or fails, or the body is not ASCII.
        FieldFormatError: If the checksum digits are not hexadecimal.
        ChecksumError: If the computed checksum differs from the trailing one.
    """
    _synchronize(source)
    body, computed = _read_body(source)
    expected = _read_expected_checksum(source)

    if computed != expected:
        _logger.warning(
            "Checksum mismatch (computed 0x%02X, expected 0x%02X)",
            computed,
            expected,
        )
        raise ChecksumError(computed, expected)

    return _build_sentence(body)


def parse_sentence(sentence: str) -> RawSentence:
    """Frame and validate a single textual sentence such as a logged line.

    Leading characters before '$' are ignored; trailing characters after the
    checksum digits (e.g. "\\r\\n") are never read.

    Raises:
        FrameError: If the text ends before the checksum digits.
        FieldFormatError: If the checksum digits are not hexadecimal.
        ChecksumError: If the checksum does not match.
    """
    try:
        data = sentence.encode("ascii")
    except UnicodeEncodeError as e:
        raise FrameError("sentence is not ASCII") from e
    return read_sentence(BufferByteSource(data))
