"""NMEA data types for framed and decoded sentences.

Design Decisions:
    1. RawSentence keeps the talker+type id duplicated as ``fields[0]``, so
       field indices in the decoders match the positions documented for each
       sentence (time is always ``fields[1]``).

    2. GpsFix.elevation is ``float | None``: RMC sentences carry no elevation,
       and an empty GGA elevation field means "no data", not "sea level".

    3. GpsFix is a plain mutable dataclass. Fix acquisition overwrites the
       timestamp of the GGA-derived fix exactly once with the RMC timestamp;
       nothing else mutates it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class RawSentence:
    """A checksum-validated NMEA sentence split into its fields.

    Attributes:
        talker_and_type: Sentence identifier such as ``"GPGGA"`` or
            ``"GPRMC"``. Two characters of talker id followed by the
            three-letter sentence type.

        fields: Comma-separated fields of the sentence body, in order.
            ``fields[0]`` is the talker+type id; empty fields are kept as
            empty strings.

    Example:
        >>> sentence = parse_sentence("$GPRMC,034056.000,A,...*7D")
        >>> sentence.talker_and_type
        'GPRMC'
        >>> sentence.fields[1]
        '034056.000'
    """

    talker_and_type: str
    fields: list[str]

    @property
    def sentence_type(self) -> str:
        """The three-letter sentence type, without the talker id."""
        return self.talker_and_type[-3:]


@dataclass
class GpsFix:
    """A position fix decoded from one sentence or fused from two.

    Attributes:
        timestamp: Absolute UTC instant of the fix. For a fix decoded from a
            GGA sentence alone this is the wall-clock time of decoding, since
            GGA carries no date.

        latitude: Latitude in decimal degrees, positive=North.
            Range: -90.0 to +90.0.

        longitude: Longitude in decimal degrees, positive=East.
            Range: -180.0 to +180.0.

        elevation: Altitude above mean sea level in meters, or None when the
            source sentence has no elevation (RMC) or the field was empty.
    """

    timestamp: datetime
    latitude: float
    longitude: float
    elevation: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with an ISO 8601 timestamp."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation": self.elevation,
        }
