"""
Bus modes supported by the adapter.
"""

from enum import Enum


class DeviceMode(Enum):
    """Closed set of modes this driver can put the Bus Pirate into."""
    HIZ = "HiZ"
    I2C = "I2C"
    SPI = "SPI"

    @property
    def wire_name(self) -> str:
        """Mode name as sent in a ConfigurationRequest."""
        return self.value

    @classmethod
    def from_wire(cls, name: str) -> "DeviceMode":
        for mode in cls:
            if mode.value == name:
                return mode
        raise ValueError(f"Unsupported mode: {name!r}")

    def __str__(self) -> str:
        return self.value
