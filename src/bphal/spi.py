"""
SPI bus engine.

Single calls assert and release chip select within one request. Transactions
assert CS on the first wire operation, hold it across the rest and release
it on the last. When any request of a transaction fails, a stop-only request
is sent to release CS before the original error propagates.
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Union

from .codec import DataRequest, MAX_BYTES_READ
from .connection import BusPirate
from .errors import BPIOError
from .modes import DeviceMode

logger = logging.getLogger(__name__)


def _check_length(length: int):
    if not 0 <= length <= MAX_BYTES_READ:
        raise ValueError(f"Read length must be 0..{MAX_BYTES_READ}, got {length}")


# --------------------------------------------------------------------------
# Operations
# --------------------------------------------------------------------------

@dataclass(frozen=True)
class Read:
    """Clock in `length` bytes."""
    length: int

    def __post_init__(self):
        _check_length(self.length)


@dataclass(frozen=True)
class Write:
    """Clock out `data`, discarding what comes back."""
    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class Transfer:
    """Clock out `write` while clocking in `read_length` bytes."""
    write: bytes
    read_length: int

    def __post_init__(self):
        object.__setattr__(self, "write", bytes(self.write))
        _check_length(self.read_length)


@dataclass(frozen=True)
class TransferInPlace:
    """Clock out `buffer` and overwrite it with the bytes clocked in."""
    buffer: bytearray

    def __post_init__(self):
        _check_length(len(self.buffer))


@dataclass(frozen=True)
class Delay:
    """Wait with CS held. No bus traffic."""
    seconds: float

    def __post_init__(self):
        if self.seconds < 0:
            raise ValueError(f"Delay must not be negative, got {self.seconds}")

    @classmethod
    def ns(cls, nanoseconds: int) -> "Delay":
        return cls(nanoseconds / 1e9)


Operation = Union[Read, Write, Transfer, TransferInPlace, Delay]
_OPERATION_TYPES = (Read, Write, Transfer, TransferInPlace, Delay)


# --------------------------------------------------------------------------
# Bus Handle
# --------------------------------------------------------------------------

class SPIBus(BusPirate):
    """
    Handle for a Bus Pirate in SPI mode.

    Example:
        bus = bp.enter_spi(speed=1_000_000)
        jedec_id, = bus.transaction([spi.Write([0x9F]), spi.Read(3)])
    """
    mode = DeviceMode.SPI

    def read(self, length: int) -> bytes:
        _check_length(length)
        return self._send_read(DataRequest(start=True, stop=True, bytes_read=length), length)

    def write(self, data: bytes):
        self._send_data(DataRequest(start=True, stop=True, data=bytes(data)))

    def transfer(self, write: bytes, read_length: int) -> bytes:
        """
        Full-duplex exchange in one CS assertion.

        Returns:
            The `read_length` bytes clocked in; empty when read_length is 0
        """
        _check_length(read_length)
        request = DataRequest(start_alt=True, stop=True, data=bytes(write), bytes_read=read_length)
        return self._send_read(request, read_length)

    def transfer_in_place(self, buffer: bytearray) -> bytearray:
        """Send buffer and replace its contents with the bytes received."""
        _check_length(len(buffer))
        request = DataRequest(start_alt=True, stop=True, data=bytes(buffer), bytes_read=len(buffer))
        data = self._send_read(request, len(buffer))
        buffer[:] = data
        return buffer

    def flush(self):
        # Every exchange already waited for its response
        pass

    def transaction(self, operations: Iterable[Operation]) -> List[bytes]:
        """
        Run operations under a single CS assertion.

        Args:
            operations: Ordered Read/Write/Transfer/TransferInPlace/Delay

        Returns:
            Bytes clocked in by each Read, Transfer and TransferInPlace, in order

        Raises:
            BPIOError: The failing request's error. A stop-only request has
                already been sent to release CS.
        """
        operations = list(operations)
        for operation in operations:
            if not isinstance(operation, _OPERATION_TYPES):
                raise TypeError(f"Unsupported SPI operation: {operation!r}")
        self._require_active()

        wire_indexes = [i for i, op in enumerate(operations) if not isinstance(op, Delay)]
        if not wire_indexes:
            for operation in operations:
                time.sleep(operation.seconds)
            return []
        first, last = wire_indexes[0], wire_indexes[-1]
        trailing_delay = last != len(operations) - 1

        results = []
        try:
            for index, operation in enumerate(operations):
                if isinstance(operation, Delay):
                    time.sleep(operation.seconds)
                    continue
                start = index == first
                stop = index == last and not trailing_delay
                result = self._run(operation, start, stop)
                if result is not None:
                    results.append(result)

            if trailing_delay:
                self._send_data(DataRequest(stop=True))
        except BPIOError:
            self._release_cs()
            raise

        return results

    def _run(self, operation: Operation, start: bool, stop: bool):
        if isinstance(operation, Read):
            request = DataRequest(start=start, stop=stop, bytes_read=operation.length)
            return self._send_read(request, operation.length)

        if isinstance(operation, Write):
            self._send_data(DataRequest(start=start, stop=stop, data=operation.data))
            return None

        if isinstance(operation, Transfer):
            request = DataRequest(
                start=start, start_alt=True, stop=stop,
                data=operation.write, bytes_read=operation.read_length,
            )
            return self._send_read(request, operation.read_length)

        length = len(operation.buffer)
        request = DataRequest(
            start=start, start_alt=True, stop=stop,
            data=bytes(operation.buffer), bytes_read=length,
        )
        operation.buffer[:] = self._send_read(request, length)
        return bytes(operation.buffer)

    def _release_cs(self):
        try:
            self._send_data(DataRequest(stop=True))
        except BPIOError as e:
            logger.warning("CS release after failed transaction also failed: %s", e)
