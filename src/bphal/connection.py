"""
Connection handles and mode capabilities.

A connection owns one channel and exactly one live handle. Each handle class
stands for a mode (HiZ, I2CBus, SPIBus) and only carries that mode's bus
operations. Changing mode returns a new handle and retires the old one:
anything called through a retired handle raises ModeError before a byte is
sent.

Usage:
    with bphal.open('/dev/ttyACM1') as bp:
        i2c = bp.enter_i2c(speed=400_000)
        data = i2c.write_read(0x50, [0x00], 16)
"""

import logging
from typing import Optional

from .codec import (
    DataRequest, DeviceStatus, Response,
    check_response, decode_response, describe_request,
    encode_configuration_request, encode_data_request, encode_status_request,
)
from .config import (
    Configuration, LinkSettings, ModeConfiguration,
    ClockPolarity, ClockPhase, ChipSelectPolarity,
)
from .errors import BPIOError, ModeError, NoDataReceived, SchemaError
from .modes import DeviceMode
from .tooling.bpio.ResponsePacketContents import ResponsePacketContents
from .transport import Transport

logger = logging.getLogger(__name__)


class Link:
    """A transport plus the one handle currently allowed to use it."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self.current: Optional["BusPirate"] = None

    def exchange(self, payload: bytes, expected: int) -> Response:
        """Send one request and validate the response kind."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Request: %s", describe_request(payload))
        response = decode_response(self.transport.send(payload))
        return check_response(response, expected)

    def change_mode(self, handle_cls, mode_config: Optional[ModeConfiguration] = None,
                    config: Optional[Configuration] = None) -> "BusPirate":
        payload = encode_configuration_request(config, handle_cls.mode.wire_name, mode_config)
        self.exchange(payload, ResponsePacketContents.ConfigurationResponse)

        handle = handle_cls(self)
        previous, self.current = self.current, handle
        logger.info(
            "Mode changed: %s -> %s",
            previous.mode if previous else "(open)", handle.mode,
        )
        return handle

    def close(self):
        self.current = None
        self.transport.close()


class BusPirate:
    """
    Base handle with the operations available in every mode.

    Not instantiated directly; use bphal.open() or bphal.connect().
    """
    mode: DeviceMode = None

    def __init__(self, link: Link):
        self._link = link

    def __repr__(self):
        state = "active" if self.active else "retired"
        return f"<{type(self).__name__} mode={self.mode} {state}>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.close()
            return
        try:
            self.close()
        except BPIOError as e:
            logger.warning("Closing channel after error also failed: %s", e)

    @property
    def active(self) -> bool:
        """True while this handle holds the connection's current mode."""
        return self._link.current is self

    def _require_active(self):
        if not self.active:
            current = self._link.current
            raise ModeError(str(self.mode), str(current.mode) if current else "closed")

    def _exchange(self, payload: bytes, expected: int) -> Response:
        self._require_active()
        return self._link.exchange(payload, expected)

    def _send_data(self, request: DataRequest) -> Optional[bytes]:
        """Send a DataRequest; returns the bytes read, or None if none came back."""
        response = self._exchange(encode_data_request(request), ResponsePacketContents.DataResponse)
        return response.data_read or None

    def _send_read(self, request: DataRequest, length: int) -> bytes:
        """
        Send a DataRequest that must return exactly `length` bytes.

        Bytes returned for a zero-length read are ignored.
        """
        data = self._send_data(request)
        if length == 0:
            return b""
        received = len(data) if data else 0
        if received < length:
            raise NoDataReceived(length, received)
        if received > length:
            raise SchemaError(f"Requested {length} bytes, response carried {received}")
        return data

    # ----------------------------------------------------------------------
    # Mode-independent operations
    # ----------------------------------------------------------------------

    def configure(self, config: Configuration):
        """Apply auxiliary settings without leaving the current mode."""
        self._exchange(
            encode_configuration_request(config),
            ResponsePacketContents.ConfigurationResponse,
        )

    def status(self) -> DeviceStatus:
        """Query firmware, mode, PSU and IO status."""
        response = self._exchange(encode_status_request(), ResponsePacketContents.StatusResponse)
        return response.status

    def selftest(self):
        """Ask the adapter to run its hardware self-test."""
        self.configure(Configuration(hardware_selftest=True))

    def close(self):
        """Release the channel. Works from any handle of the connection."""
        if self._link.transport.is_open:
            self._link.close()

    # ----------------------------------------------------------------------
    # Mode transitions
    # ----------------------------------------------------------------------

    def _change_mode(self, handle_cls, mode_config=None, config=None):
        self._require_active()
        return self._link.change_mode(handle_cls, mode_config, config)

    def enter_hiz(self, config: Optional[Configuration] = None) -> "HiZ":
        """Put the adapter into high-impedance (idle) mode."""
        return self._change_mode(HiZ, None, config)

    def enter_i2c(
        self,
        speed: int = 400_000,
        clock_stretch: bool = False,
        config: Optional[Configuration] = None,
    ) -> "I2CBus":
        """
        Put the adapter into I2C mode.

        Args:
            speed: Bus clock in Hz
            clock_stretch: Allow targets to stretch the clock
            config: Auxiliary settings applied in the same request

        Returns:
            I2CBus handle; this handle is retired
        """
        from .i2c import I2CBus
        return self._change_mode(I2CBus, ModeConfiguration.i2c(speed, clock_stretch), config)

    def enter_spi(
        self,
        speed: int = 1_000_000,
        data_bits: int = 8,
        clock_polarity: ClockPolarity = ClockPolarity.ACTIVE_HIGH,
        clock_phase: ClockPhase = ClockPhase.LEADING_EDGE,
        chip_select: ChipSelectPolarity = ChipSelectPolarity.ACTIVE_LOW,
        config: Optional[Configuration] = None,
    ) -> "SPIBus":
        """
        Put the adapter into SPI mode.

        Args:
            speed: Clock in Hz
            data_bits: Bits per word
            clock_polarity: Active level of the clock
            clock_phase: Edge on which data is sampled
            chip_select: Active level of CS
            config: Auxiliary settings applied in the same request

        Returns:
            SPIBus handle; this handle is retired
        """
        from .spi import SPIBus
        mode_config = ModeConfiguration.spi(speed, data_bits, clock_polarity, clock_phase, chip_select)
        return self._change_mode(SPIBus, mode_config, config)


class HiZ(BusPirate):
    """High-impedance mode: no bus operations, every pin released."""
    mode = DeviceMode.HIZ


def connect(channel, capacity: int = 1024, read_chunk: int = 256) -> HiZ:
    """
    Start a connection over an already-open channel.

    The adapter is put into HiZ mode before the handle is returned.

    Args:
        channel: Transport, or a duplex byte channel (pyserial-like)
        capacity: Largest decoded response frame
        read_chunk: Upper bound for one channel read
    """
    if isinstance(channel, Transport):
        transport = channel
    else:
        transport = Transport(channel, capacity=capacity, read_chunk=read_chunk)

    link = Link(transport)
    try:
        return link.change_mode(HiZ)
    except BPIOError:
        try:
            link.close()
        except BPIOError as e:
            logger.warning("Closing channel after failed start-up also failed: %s", e)
        raise


def open(port: str, baudrate: int = 115_200, timeout: float = 1.0,
         settings: Optional[LinkSettings] = None) -> HiZ:
    """
    Open the BPIO2 serial port and return the HiZ handle.

    Args:
        port: Serial port path (e.g. /dev/ttyACM1, COM5)
        baudrate: Serial baud rate
        timeout: Read timeout in seconds
        settings: Full LinkSettings; overrides the other arguments
    """
    if settings is None:
        settings = LinkSettings(port=port, baudrate=baudrate, timeout=timeout)
    return connect(Transport.open(settings))
