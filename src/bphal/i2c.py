"""
I2C bus engine.

Turns a 7-bit address and a list of Read/Write operations into the shortest
DataRequest sequence the adapter accepts. Consecutive operations of the same
direction share one start condition and one address byte (combined format);
the bus is released by a single stop once all operations are done.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Optional, Union

from .codec import DataRequest, MAX_BYTES_READ
from .connection import BusPirate
from .errors import BPIOError
from .modes import DeviceMode

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------
# Operations
# --------------------------------------------------------------------------

@dataclass(frozen=True)
class Read:
    """Read `length` bytes from the target."""
    length: int
    kind: ClassVar[str] = "read"

    def __post_init__(self):
        if not 0 <= self.length <= MAX_BYTES_READ:
            raise ValueError(f"Read length must be 0..{MAX_BYTES_READ}, got {self.length}")


@dataclass(frozen=True)
class Write:
    """Write `data` to the target."""
    data: bytes
    kind: ClassVar[str] = "write"

    def __post_init__(self):
        object.__setattr__(self, "data", bytes(self.data))


Operation = Union[Read, Write]


def _check_address(address: int):
    if not 0 <= address <= 0x7F:
        raise ValueError(f"I2C address must be 7-bit (0x00..0x7F), got {address:#x}")


def write_address(address: int) -> int:
    _check_address(address)
    return address << 1


def read_address(address: int) -> int:
    _check_address(address)
    return (address << 1) | 1


def needs_start(previous_kind: Optional[str], operation: Operation) -> bool:
    """A start is needed for the first operation and on every change of direction."""
    return previous_kind is None or operation.kind != previous_kind


# --------------------------------------------------------------------------
# Bus Handle
# --------------------------------------------------------------------------

class I2CBus(BusPirate):
    """
    Handle for a Bus Pirate in I2C mode.

    Example:
        i2c = bp.enter_i2c(speed=100_000)
        i2c.write(0x50, [0x00, 0x10])
        data = i2c.write_read(0x50, [0x00], 16)
    """
    mode = DeviceMode.I2C

    def transaction(self, address: int, operations: Iterable[Operation]) -> List[bytes]:
        """
        Run operations as one bus transaction, ending with a single stop.

        Args:
            address: 7-bit target address
            operations: Ordered Read/Write operations

        Returns:
            Bytes read by each Read, in order

        Raises:
            BPIOError: The failing request's error. A stop-only request has
                already been sent to release the bus.
        """
        _check_address(address)
        operations = list(operations)
        for operation in operations:
            if not isinstance(operation, (Read, Write)):
                raise TypeError(f"Unsupported I2C operation: {operation!r}")
        self._require_active()

        results = []
        previous_kind = None
        try:
            for operation in operations:
                start = needs_start(previous_kind, operation)
                previous_kind = operation.kind

                if isinstance(operation, Read):
                    request = DataRequest(
                        start=start,
                        address=read_address(address) if start else None,
                        bytes_read=operation.length,
                    )
                    results.append(self._send_read(request, operation.length))
                else:
                    request = DataRequest(
                        start=start,
                        address=write_address(address) if start else None,
                        data=operation.data,
                        bytes_read=0,
                    )
                    self._send_data(request)
        except BPIOError:
            self._release_bus()
            raise

        self._send_data(DataRequest(stop=True, bytes_read=0))
        return results

    def write(self, address: int, data: bytes):
        """Write data in one start/stop exchange."""
        self._send_data(DataRequest(
            start=True, stop=True,
            address=write_address(address), data=bytes(data),
        ))

    def read(self, address: int, length: int) -> bytes:
        """Read `length` bytes in one start/stop exchange."""
        request = DataRequest(
            start=True, stop=True,
            address=read_address(address), bytes_read=length,
        )
        return self._send_read(request, length)

    def write_read(self, address: int, data: bytes, length: int) -> bytes:
        """
        Write then read in a single request, sending the address once.

        The adapter issues the repeated start itself.
        """
        request = DataRequest(
            start=True, stop=True,
            address=write_address(address), data=bytes(data), bytes_read=length,
        )
        return self._send_read(request, length)

    write_then_read = write_read

    def _release_bus(self):
        try:
            self._send_data(DataRequest(stop=True, bytes_read=0))
        except BPIOError as e:
            logger.warning("I2C stop after failed transaction also failed: %s", e)
