"""
Serial transport: one COBS frame out, one COBS frame back.

The channel is any duplex byte stream with pyserial's `write(data)` and
`read(size)` semantics, where an empty read means the read timed out.
"""

import logging
from typing import Optional

import serial

from .config import LinkSettings
from .errors import TransportError, TransportTimeout
from .framing import FrameDecoder, encode_frame, DEFAULT_CAPACITY

logger = logging.getLogger(__name__)


class Transport:
    """Synchronous request/response exchange over a byte channel."""

    def __init__(self, channel, capacity: int = DEFAULT_CAPACITY, read_chunk: int = 256):
        """
        Args:
            channel: Open duplex byte channel (e.g. serial.Serial)
            capacity: Largest decoded response frame in bytes
            read_chunk: Upper bound for a single read from the channel
        """
        self.channel = channel
        self.capacity = capacity
        self.read_chunk = read_chunk

    @classmethod
    def open(cls, settings: LinkSettings) -> "Transport":
        """Open the serial port described by settings."""
        if not settings.port:
            raise TransportError("No serial port given")
        try:
            channel = serial.Serial(settings.port, settings.baudrate, timeout=settings.timeout)
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Failed to open {settings.port}: {e}") from e
        logger.info("Opened serial port %s at %d baud", settings.port, settings.baudrate)
        return cls(channel, capacity=settings.frame_capacity, read_chunk=settings.read_chunk)

    @property
    def is_open(self) -> bool:
        return self.channel is not None and getattr(self.channel, "is_open", True)

    def close(self):
        if self.channel is None:
            return
        channel, self.channel = self.channel, None
        try:
            channel.close()
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Failed to close channel: {e}") from e
        logger.info("Closed serial port %s", getattr(channel, "port", None))

    def send(self, payload: bytes) -> bytes:
        """
        Write one framed request and block until one response frame is decoded.

        Args:
            payload: Unframed request bytes

        Returns:
            Decoded response payload

        Raises:
            TransportError: Channel closed or I/O failure
            TransportTimeout: Channel read timed out mid-response
            FramingError: Corrupt or oversized response frame
        """
        if not self.is_open:
            raise TransportError("Channel is not open")

        frame = encode_frame(payload)
        decoder = FrameDecoder(self.capacity)

        try:
            self._discard_stale_input()
            self.channel.write(frame)
            logger.debug("TX %d bytes (%d framed): %s", len(payload), len(frame), bytes(payload).hex(" "))

            while True:
                chunk = self.channel.read(self._read_size())
                if not chunk:
                    raise TransportTimeout(getattr(self.channel, "timeout", None), decoder.pending)
                response = decoder.push(chunk)
                if response is not None:
                    break
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Serial communication error: {e}") from e

        if decoder.pending:
            logger.debug("Discarding %d bytes after response frame", decoder.pending)
        logger.debug("RX %d bytes: %s", len(response), response.hex(" "))
        return response

    def _read_size(self) -> int:
        # Read what is already buffered, but never block for a full chunk
        waiting: Optional[int] = getattr(self.channel, "in_waiting", 0)
        return max(1, min(waiting or 1, self.read_chunk))

    def _discard_stale_input(self):
        reset = getattr(self.channel, "reset_input_buffer", None)
        if reset is not None:
            reset()
