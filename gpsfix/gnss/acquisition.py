"""Fix acquisition: fuse one GGA and one RMC sentence into a single GpsFix.

Reading strategy:
    ``get_next`` is a blind forward scan. It reads sentences until one with
    the requested talker+type arrives and decodes it; every other sentence
    is discarded. ``acquire_fix`` runs that scan for GGA first and then for
    RMC, and takes position and elevation from the GGA fix and the timestamp
    from the RMC fix.

    The two scans are not correlated: nothing ties the RMC sentence to the
    same receiver output cycle as the GGA sentence. When the GGA sentence is
    the last of its cycle, the RMC read comes from the next cycle and the
    timestamp is up to one update interval later than the position sample.

    Every error aborts the acquisition. The byte source is closed exactly
    once, on success and on every error path. A failure to close while
    another error is propagating is logged, and the original error is raised.
"""

import logging
from collections.abc import Callable, Sequence

from gpsfix.exceptions import GpsFixError
from gpsfix.nmea.gga import decode_position_fix_sentence
from gpsfix.nmea.reader import ByteSource, read_sentence
from gpsfix.nmea.rmc import decode_position_time_sentence
from gpsfix.nmea.types import GpsFix

__all__ = [
    "POSITION_SENTENCE",
    "TIME_SENTENCE",
    "acquire_fix",
    "decoder_for",
    "fuse_fixes",
    "get_next",
]

_logger = logging.getLogger(__name__)

POSITION_SENTENCE = "GPGGA"
TIME_SENTENCE = "GPRMC"

_DECODERS: dict[str, Callable[[Sequence[str]], GpsFix]] = {
    "GGA": decode_position_fix_sentence,
    "RMC": decode_position_time_sentence,
}


def decoder_for(target_type: str) -> Callable[[Sequence[str]], GpsFix]:
    """Return the field decoder for a GGA or RMC talker+type id."""
    try:
        return _DECODERS[target_type[-3:]]
    except KeyError as e:
        raise ValueError(f"No decoder for sentence type {target_type!r}.") from e


def get_next(source: ByteSource, target_type: str) -> GpsFix:
    """Read sentences until one of ``target_type`` arrives, then decode it.

    Args:
        source: Open byte source positioned anywhere in the stream.
        target_type: Talker+type id to wait for, e.g. ``"GPGGA"``.

    Raises:
        ValueError: If ``target_type`` is neither a GGA nor an RMC sentence.
        GpsFixError: Any framing, checksum or decoding error, unchanged.
    """
    decode = decoder_for(target_type)
    while True:
        sentence = read_sentence(source)
        if sentence.talker_and_type == target_type:
            return decode(sentence.fields)
        _logger.debug(
            "Skipping %s sentence while waiting for %s",
            sentence.talker_and_type,
            target_type,
        )


def _close_after_error(source: ByteSource) -> None:
    """Close ``source`` without masking the error already propagating."""
    try:
        source.close()
    except GpsFixError as e:
        _logger.warning("Closing byte source after an error failed: %s", e)


def fuse_fixes(position: GpsFix, timed: GpsFix) -> GpsFix:
    """Give ``position`` the timestamp of ``timed`` and return it."""
    position.timestamp = timed.timestamp
    return position


def acquire_fix(
    source: ByteSource,
    *,
    position_type: str = POSITION_SENTENCE,
    time_type: str = TIME_SENTENCE,
) -> GpsFix:
    """Acquire one fused fix from ``source`` and close it.

    Takes ownership of ``source``: it is closed before this function returns
    or raises, so a new source is needed for every call.

    Args:
        source: Open byte source.
        position_type: Talker+type id of the sentence supplying position and
            elevation.
        time_type: Talker+type id of the sentence supplying the timestamp.

    Returns:
        GpsFix with position and elevation from the ``position_type``
        sentence and the timestamp from the ``time_type`` sentence.

    Raises:
        GpsFixError: The first error raised while reading or decoding. A
            close failure on the success path (e.g. ``ResourceError``) is
            raised as well.

    Example:
        >>> with SerialByteSource("/dev/ttyUSB0") as source:
        ...     fix = acquire_fix(source)
    """
    try:
        position = get_next(source, position_type)
        timed = get_next(source, time_type)
    except BaseException:
        _close_after_error(source)
        raise
    source.close()

    fix = fuse_fixes(position, timed)
    _logger.info(
        "Acquired fix %.6f, %.6f at %s",
        fix.latitude,
        fix.longitude,
        fix.timestamp.isoformat(),
    )
    return fix
