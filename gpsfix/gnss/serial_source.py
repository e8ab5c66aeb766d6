"""SerialByteSource: blocking byte source over a serial port.

Reads are unbounded: the port is opened with ``timeout=None``, so
``next_byte`` waits for as long as the receiver is silent. A caller that needs
bounded latency runs a watchdog that calls ``cancel()`` from another thread;
the pending read then returns empty and ``next_byte`` raises ``FrameError``.
"""

import logging
from types import TracebackType

import serial

from gpsfix.exceptions import FrameError, ResourceError

__all__ = ["SerialByteSource"]

_logger = logging.getLogger(__name__)

# --- serial defaults ----------------------------------------------------------

_PORT = "/dev/ttyUSB0"
_BAUD_RATE = 9600


class SerialByteSource:
    """Context manager yielding the bytes received on a serial port.

    Two usage patterns are supported:

    Scoped (the port is closed when the block exits)::

        with SerialByteSource("/dev/ttyUSB0") as source:
            fix = acquire_fix(source)

    Handing ownership to ``acquire_fix``, which closes the port itself::

        fix = acquire_fix(SerialByteSource("/dev/ttyUSB0").open())

    ``close()`` is idempotent, so both patterns may be combined.

    Args:
        port: Serial device path (default: ``"/dev/ttyUSB0"``).
        baud_rate: Line speed (default: ``9600``).
    """

    def __init__(self, port: str = _PORT, baud_rate: int = _BAUD_RATE) -> None:
        """Store port parameters; the port is opened in ``open``/``__enter__``."""
        self._port = port
        self._baud_rate = baud_rate
        self._serial: serial.Serial | None = None

    @property
    def port(self) -> str:
        return self._port

    def open(self) -> "SerialByteSource":
        """Open the serial port.

        Raises:
            RuntimeError: If the port is already open.
            ResourceError: If the port cannot be opened.
        """
        if self._serial is not None:
            raise RuntimeError("SerialByteSource is already open.")
        try:
            self._serial = serial.Serial(self._port, self._baud_rate, timeout=None)
        except (serial.SerialException, ValueError) as e:
            raise ResourceError(f"Cannot open {self._port}.", port=self._port) from e
        _logger.info("Opened %s at %d baud", self._port, self._baud_rate)
        return self

    def __enter__(self) -> "SerialByteSource":
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def next_byte(self) -> int:
        """Block until one byte arrives and return it.

        Raises:
            RuntimeError: If the port is not open.
            FrameError: If the read fails, is cancelled, or returns no data.
        """
        if self._serial is None:
            raise RuntimeError("SerialByteSource is not open.")
        try:
            data: bytes = self._serial.read(1)
        except serial.SerialException as e:
            raise FrameError(f"Read from {self._port} failed.") from e
        if not data:
            raise FrameError(f"No data from {self._port}.")
        return data[0]

    def cancel(self) -> None:
        """Unblock a pending ``next_byte`` call from another thread."""
        serial_port = self._serial
        if serial_port is not None:
            serial_port.cancel_read()

    def close(self) -> None:
        """Close the serial port if it is open.

        Raises:
            ResourceError: If closing the port fails.
        """
        if self._serial is None:
            return
        serial_port, self._serial = self._serial, None
        try:
            serial_port.close()
        except serial.SerialException as e:
            raise ResourceError(f"Cannot close {self._port}.", port=self._port) from e
        _logger.info("Closed %s", self._port)
