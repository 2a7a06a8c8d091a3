"""
Connection settings and sparse configuration bundles.

Every bundle is a dataclass of optional fields. `fields()` maps the populated
fields to an ordered list of (wire_name, value) pairs; unset fields never
reach the wire, so a request can change one setting without restating the
rest of the device state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple, Any


Fields = List[Tuple[str, Any]]


# --------------------------------------------------------------------------
# Connection Settings
# --------------------------------------------------------------------------

@dataclass
class LinkSettings:
    """Serial link settings for the BPIO2 port."""
    port: Optional[str] = None
    baudrate: int = 115_200
    timeout: float = 1.0         # Seconds; read timeout of the serial port
    frame_capacity: int = 1024   # Largest decoded response frame
    read_chunk: int = 256        # Upper bound for a single channel read


# --------------------------------------------------------------------------
# Bus Parameter Types
# --------------------------------------------------------------------------

class BitOrder(Enum):
    MSB = "msb"
    LSB = "lsb"


class ClockPolarity(Enum):
    """SPI clock polarity, named by the active level."""
    ACTIVE_LOW = "active_low"
    ACTIVE_HIGH = "active_high"

    def for_bpio(self) -> bool:
        # BPIO takes the idle level: active low idles high
        return self is ClockPolarity.ACTIVE_LOW


class ClockPhase(Enum):
    """SPI sampling edge (leading/trailing, independent of polarity)."""
    LEADING_EDGE = "leading"
    TRAILING_EDGE = "trailing"

    def for_bpio(self) -> bool:
        return self is ClockPhase.TRAILING_EDGE


class ChipSelectPolarity(Enum):
    ACTIVE_LOW = "active_low"
    ACTIVE_HIGH = "active_high"

    def for_bpio(self) -> bool:
        # Idle level again
        return self is ChipSelectPolarity.ACTIVE_LOW


class IoDirection(Enum):
    INPUT = "in"
    OUTPUT = "out"


class LogicLevel(Enum):
    LOW = 0
    HIGH = 1


# --------------------------------------------------------------------------
# Mode Configuration
# --------------------------------------------------------------------------

@dataclass
class ModeConfiguration:
    """Parameters for the mode being entered. Only set fields are sent."""
    speed: Optional[int] = None
    data_bits: Optional[int] = None
    parity: Optional[bool] = None
    stop_bits: Optional[int] = None
    flow_control: Optional[bool] = None
    signal_inversion: Optional[bool] = None
    clock_stretch: Optional[bool] = None
    clock_polarity: Optional[bool] = None
    clock_phase: Optional[bool] = None
    chip_select_idle: Optional[bool] = None
    submode: Optional[int] = None
    tx_modulation: Optional[int] = None
    rx_sensor: Optional[int] = None

    FIELD_ORDER = (
        "speed", "data_bits", "parity", "stop_bits", "flow_control",
        "signal_inversion", "clock_stretch", "clock_polarity", "clock_phase",
        "chip_select_idle", "submode", "tx_modulation", "rx_sensor",
    )

    def fields(self) -> Fields:
        return [
            (name, getattr(self, name))
            for name in self.FIELD_ORDER
            if getattr(self, name) is not None
        ]

    @classmethod
    def i2c(cls, speed: int, clock_stretch: bool = False) -> "ModeConfiguration":
        return cls(speed=speed, clock_stretch=clock_stretch)

    @classmethod
    def spi(
        cls,
        speed: int,
        data_bits: int = 8,
        clock_polarity: ClockPolarity = ClockPolarity.ACTIVE_HIGH,
        clock_phase: ClockPhase = ClockPhase.LEADING_EDGE,
        chip_select: ChipSelectPolarity = ChipSelectPolarity.ACTIVE_LOW,
    ) -> "ModeConfiguration":
        return cls(
            speed=speed,
            data_bits=data_bits,
            clock_polarity=clock_polarity.for_bpio(),
            clock_phase=clock_phase.for_bpio(),
            chip_select_idle=chip_select.for_bpio(),
        )


# --------------------------------------------------------------------------
# Auxiliary Settings
# --------------------------------------------------------------------------

@dataclass
class PsuConfig:
    """Programmable power supply settings."""
    enable: Optional[bool] = None
    millivolts: Optional[int] = None
    milliamps: Optional[int] = None

    @classmethod
    def on(cls, millivolts: int, milliamps: int) -> "PsuConfig":
        return cls(enable=True, millivolts=millivolts, milliamps=milliamps)

    @classmethod
    def off(cls) -> "PsuConfig":
        return cls(enable=False)

    def fields(self) -> Fields:
        out = []
        if self.enable is not None:
            out.append(("psu_enable", True) if self.enable else ("psu_disable", True))
        if self.millivolts is not None:
            out.append(("psu_set_mv", self.millivolts))
        if self.milliamps is not None:
            out.append(("psu_set_ma", self.milliamps))
        return out


@dataclass
class IoConfig:
    """
    Direction and level of the eight IO pins.

    Only pins touched through set_direction/set_level are flagged in the
    masks; the adapter leaves the other pins alone.
    """
    direction_mask: int = 0
    direction: int = 0
    value_mask: int = 0
    value: int = 0

    @staticmethod
    def _check_pin(pin: int):
        if not 0 <= pin < 8:
            raise ValueError(f"Pin must be in range 0..7, got {pin}")

    def set_direction(self, pin: int, direction: IoDirection) -> "IoConfig":
        self._check_pin(pin)
        bit = 1 << pin
        self.direction_mask |= bit
        if direction is IoDirection.OUTPUT:
            self.direction |= bit
        else:
            self.direction &= ~bit
        return self

    def set_level(self, pin: int, level: LogicLevel) -> "IoConfig":
        self._check_pin(pin)
        bit = 1 << pin
        self.value_mask |= bit
        if level is LogicLevel.HIGH:
            self.value |= bit
        else:
            self.value &= ~bit
        return self

    def fields(self) -> Fields:
        out = []
        if self.direction_mask:
            out.append(("io_direction_mask", self.direction_mask))
            out.append(("io_direction", self.direction))
        if self.value_mask:
            out.append(("io_value_mask", self.value_mask))
            out.append(("io_value", self.value))
        return out


@dataclass
class Configuration:
    """
    Auxiliary settings that may ride on any configuration request.

    Example:
        Configuration(psu=PsuConfig.on(3300, 300), pullup=True)
    """
    mode_bit_order: Optional[BitOrder] = None
    psu: Optional[PsuConfig] = None
    pullup: Optional[bool] = None
    io: Optional[IoConfig] = None
    led_resume: Optional[bool] = None
    led_color: Optional[List[int]] = None
    print_string: Optional[str] = None
    hardware_bootloader: Optional[bool] = None
    hardware_reset: Optional[bool] = None
    hardware_selftest: Optional[bool] = None

    def fields(self) -> Fields:
        """Populated settings as (wire_name, value) pairs, in schema order."""
        out = []
        if self.mode_bit_order is not None:
            if self.mode_bit_order is BitOrder.MSB:
                out.append(("mode_bitorder_msb", True))
            else:
                out.append(("mode_bitorder_lsb", True))
        if self.psu is not None:
            out.extend(self.psu.fields())
        if self.pullup is not None:
            out.append(("pullup_enable", True) if self.pullup else ("pullup_disable", True))
        if self.io is not None:
            out.extend(self.io.fields())
        if self.led_resume is not None:
            out.append(("led_resume", self.led_resume))
        if self.led_color is not None:
            out.append(("led_color", list(self.led_color)))
        if self.print_string is not None:
            out.append(("print_string", self.print_string))
        if self.hardware_bootloader is not None:
            out.append(("hardware_bootloader", self.hardware_bootloader))
        if self.hardware_reset is not None:
            out.append(("hardware_reset", self.hardware_reset))
        if self.hardware_selftest is not None:
            out.append(("hardware_selftest", self.hardware_selftest))
        return out
