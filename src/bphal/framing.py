"""
COBS framing for the BPIO2 serial link.

Each message is COBS encoded and followed by a single 0x00 delimiter. COBS
guarantees that 0x00 never appears inside an encoded frame, so a reader that
lost sync can always recover at the next delimiter.

Frame layout::

    +-------------------------------+-----------+
    |   COBS(payload), no 0x00      |   0x00    |
    +-------------------------------+-----------+
"""

import logging
from typing import Optional

from cobs import cobs

from .errors import FramingError

logger = logging.getLogger(__name__)

DELIMITER = b"\x00"
DEFAULT_CAPACITY = 1024  # Largest decoded frame we accept


def max_encoded_size(capacity: int) -> int:
    """Worst-case COBS encoded length (without delimiter) for `capacity` bytes."""
    return capacity + capacity // 254 + 1


def encode_frame(payload: bytes) -> bytes:
    """COBS-encode payload and append the frame delimiter."""
    return cobs.encode(bytes(payload)) + DELIMITER


def decode_frame(frame: bytes) -> bytes:
    """Decode a single frame, with or without its trailing delimiter."""
    frame = bytes(frame)
    if frame.endswith(DELIMITER):
        frame = frame[:-1]
    if DELIMITER in frame:
        raise FramingError("Delimiter inside frame body")
    try:
        return cobs.decode(frame)
    except cobs.DecodeError as e:
        raise FramingError(f"COBS decode error: {e}") from e


class FrameDecoder:
    """
    Incremental frame decoder.

    Bytes are pushed in whatever chunks the channel returns; a frame is
    complete once its delimiter arrives. Frames larger than `capacity`
    decoded bytes are rejected, never truncated.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = capacity
        self._limit = max_encoded_size(capacity)
        self._pending = bytearray()

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet part of a complete frame."""
        return len(self._pending)

    def reset(self):
        self._pending.clear()

    def push(self, chunk: bytes) -> Optional[bytes]:
        """
        Feed bytes to the decoder.

        Args:
            chunk: Bytes read from the channel (may be empty)

        Returns:
            The first complete decoded frame, or None if more bytes are needed.
            Bytes after that frame's delimiter stay buffered for the next call.

        Raises:
            FramingError: Frame is corrupt or larger than the decode buffer
        """
        self._pending.extend(chunk)

        while True:
            end = self._pending.find(DELIMITER)
            if end == -1:
                if len(self._pending) > self._limit:
                    size = len(self._pending)
                    self._pending.clear()
                    raise FramingError(
                        f"Frame exceeds {self.capacity} byte buffer ({size} bytes without delimiter)"
                    )
                return None

            encoded = bytes(self._pending[:end])
            del self._pending[:end + 1]

            if not encoded:
                # Back-to-back delimiters: nothing between them, keep scanning
                continue

            if len(encoded) > self._limit:
                raise FramingError(
                    f"Frame exceeds {self.capacity} byte buffer ({len(encoded)} encoded bytes)"
                )

            payload = decode_frame(encoded)
            if len(payload) > self.capacity:
                raise FramingError(
                    f"Frame exceeds {self.capacity} byte buffer ({len(payload)} bytes)"
                )
            logger.debug("Decoded frame: %d bytes (%d encoded)", len(payload), len(encoded))
            return payload
