"""Exception hierarchy for gpsfix.

Every failure in the parsing core is raised as a ``GpsFixError`` subclass.
Nothing is retried internally; callers branch on the exception type to decide
whether a retry makes sense (typically only ``NoFixError`` while the receiver
is still waiting for satellite lock).
"""


class GpsFixError(Exception):
    """Base exception for all gpsfix errors."""


class FrameError(GpsFixError):
    """The byte stream ended, failed, or produced an undecodable sentence."""


class ChecksumError(GpsFixError):
    """The XOR checksum of a sentence body did not match its trailing digits."""

    def __init__(self, computed: int, expected: int) -> None:
        self.computed = computed
        self.expected = expected
        super().__init__(
            f"checksum mismatch: computed 0x{computed:02X}, expected 0x{expected:02X}"
        )


class NoFixError(GpsFixError):
    """The receiver reports that it has no satellite fix."""


class FieldFormatError(GpsFixError):
    """A field did not match its expected numeric or time grammar."""

    def __init__(self, field_name: str, value: str | None = None) -> None:
        self.field_name = field_name
        self.value = value
        if value is None:
            message = f"missing field: {field_name}"
        else:
            message = f"malformed {field_name} field: {value!r}"
        super().__init__(message)


class ResourceError(GpsFixError):
    """The serial channel could not be opened or closed."""

    def __init__(self, message: str, *, port: str = "") -> None:
        self.port = port
        super().__init__(message)
