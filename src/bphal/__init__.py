"""
bphal - Bus Pirate BPIO2 host driver

Drives a Bus Pirate 5/6/7 over its binary BPIO2 interface: COBS-framed
FlatBuffers requests on a serial port, with one handle per bus mode.

Usage:
    # Command-line interface
    bphal -p /dev/ttyACM1 status
    bphal -p /dev/ttyACM1 i2c write-read 0x50 16 0x00

    # Python API
    import bphal
    from bphal import i2c

    with bphal.open('/dev/ttyACM1') as bp:
        bus = bp.enter_i2c(speed=400_000)
        data, = bus.transaction(0x50, [i2c.Write([0x00]), i2c.Read(16)])
"""

__version__ = "0.1.0"

from .config import (
    LinkSettings, Configuration, ModeConfiguration, PsuConfig, IoConfig,
    BitOrder, ClockPolarity, ClockPhase, ChipSelectPolarity, IoDirection, LogicLevel,
)
from .codec import DeviceStatus
from .connection import BusPirate, HiZ, connect, open
from .errors import (
    BPIOError, TransportError, TransportTimeout, FramingError, SchemaError,
    DeviceError, ProtocolMismatch, NoDataReceived, ModeError,
)
from .i2c import I2CBus
from .modes import DeviceMode
from .spi import SPIBus

__all__ = [
    "open", "connect", "BusPirate", "HiZ", "I2CBus", "SPIBus", "DeviceMode",
    "DeviceStatus", "LinkSettings", "Configuration", "ModeConfiguration",
    "PsuConfig", "IoConfig", "BitOrder", "ClockPolarity", "ClockPhase",
    "ChipSelectPolarity", "IoDirection", "LogicLevel",
    "BPIOError", "TransportError", "TransportTimeout", "FramingError",
    "SchemaError", "DeviceError", "ProtocolMismatch", "NoDataReceived",
    "ModeError", "__version__",
]
