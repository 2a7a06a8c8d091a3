"""
Exceptions raised by bphal.

Every failure surfaces to the caller as a subclass of BPIOError. Nothing is
retried locally; a caller may retry any call, re-entering a mode if needed.
"""


class BPIOError(Exception):
    """Base exception for all Bus Pirate I/O errors."""


class TransportError(BPIOError):
    """I/O failure on the serial channel."""


class TransportTimeout(TransportError):
    """The channel read timed out before a complete frame arrived."""

    def __init__(self, timeout=None, received: int = 0):
        self.timeout = timeout
        self.received = received
        msg = "No complete response frame"
        if timeout is not None:
            msg += f" within {timeout}s"
        if received:
            msg += f" ({received} bytes pending)"
        super().__init__(msg)


class FramingError(BPIOError):
    """COBS frame could not be decoded, or exceeded the decode buffer."""


class SchemaError(BPIOError):
    """Response payload is not a well-formed BPIO packet."""


class DeviceError(BPIOError):
    """The Bus Pirate reported an error message."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Device error: {message}")


class ProtocolMismatch(BPIOError):
    """Response contents did not match the request that was sent."""

    def __init__(self, kind: str, expected: str = None):
        self.kind = kind
        self.expected = expected
        msg = f"Unexpected response type: {kind}"
        if expected:
            msg += f" (expected {expected})"
        super().__init__(msg)


class NoDataReceived(BPIOError):
    """A read returned no data (or too little) for a non-empty buffer."""

    def __init__(self, expected: int, received: int = 0):
        self.expected = expected
        self.received = received
        super().__init__(f"Expected {expected} bytes, received {received}")


class ModeError(BPIOError):
    """Operation invoked through a handle that no longer holds the active mode."""

    def __init__(self, mode: str = None, current: str = None):
        self.mode = mode
        self.current = current
        msg = "operation unavailable in current mode"
        if mode and current:
            msg += f" ({mode} handle, device is in {current})"
        super().__init__(msg)
