"""Tests for the I2C bus engine."""

import logging

import pytest

from bphal.errors import DeviceError, NoDataReceived, TransportTimeout
from bphal.i2c import Read, Write, needs_start, read_address, write_address

from conftest import data_response


class TestAddressing:
    """Test address byte encoding."""

    def test_write_address(self):
        assert write_address(0x50) == 0xA0

    def test_read_address(self):
        assert read_address(0x50) == 0xA1

    @pytest.mark.parametrize("address", [-1, 0x80, 0xA0])
    def test_out_of_range(self, address):
        with pytest.raises(ValueError):
            write_address(address)


class TestStartElision:
    """Test the start condition rule."""

    def test_first_operation_needs_start(self):
        assert needs_start(None, Write(b"\x00"))
        assert needs_start(None, Read(1))

    def test_same_kind_reuses_start(self):
        assert not needs_start("write", Write(b"\x00"))
        assert not needs_start("read", Read(1))

    def test_direction_change_needs_start(self):
        assert needs_start("write", Read(1))
        assert needs_start("read", Write(b"\x00"))

    def test_read_length_range(self):
        with pytest.raises(ValueError):
            Read(0x10000)


class TestTransaction:
    """Test multi-operation transactions."""

    def test_start_flags(self, i2c_bus, channel):
        """Test that [W, W, R, R, W] starts on operations 1, 3 and 5 only."""
        channel.queue(
            data_response(), data_response(),
            data_response(b"\x10\x11"), data_response(b"\x12"),
            data_response(), data_response(),
        )
        results = i2c_bus.transaction(0x50, [
            Write(b"\x01"), Write(b"\x02"), Read(2), Read(1), Write(b"\x03"),
        ])

        assert results == [b"\x10\x11", b"\x12"]
        requests = channel.data_requests()
        assert [r["start_main"] for r in requests[:5]] == [True, False, True, False, True]
        assert all(r["stop_main"] is False for r in requests[:5])

    def test_request_contents(self, i2c_bus, channel):
        """Test that the address is only sent alongside a start."""
        channel.queue(
            data_response(), data_response(),
            data_response(b"\x10\x11"), data_response(b"\x12"),
            data_response(), data_response(),
        )
        i2c_bus.transaction(0x50, [
            Write(b"\x01"), Write(b"\x02"), Read(2), Read(1), Write(b"\x03"),
        ])

        assert channel.data_requests() == [
            {"start_main": True, "data_write": b"\xa0\x01", "bytes_read": 0, "stop_main": False},
            {"start_main": False, "data_write": b"\x02", "bytes_read": 0, "stop_main": False},
            {"start_main": True, "data_write": b"\xa1", "bytes_read": 2, "stop_main": False},
            {"start_main": False, "bytes_read": 1, "stop_main": False},
            {"start_main": True, "data_write": b"\xa0\x03", "bytes_read": 0, "stop_main": False},
            {"start_main": False, "bytes_read": 0, "stop_main": True},
        ]

    def test_empty_transaction_sends_stop(self, i2c_bus, channel):
        channel.queue(data_response())
        assert i2c_bus.transaction(0x50, []) == []
        assert channel.data_requests() == [
            {"start_main": False, "bytes_read": 0, "stop_main": True},
        ]

    def test_device_error_sends_stop(self, i2c_bus, channel):
        """Test that a failing operation is followed by one stop, then the error."""
        channel.queue(data_response(), data_response(error="NACK"), data_response())

        with pytest.raises(DeviceError, match="NACK"):
            i2c_bus.transaction(0x50, [Write(b"\x01"), Read(2), Write(b"\x02")])

        requests = channel.data_requests()
        assert len(requests) == 3
        assert requests[-1] == {"start_main": False, "bytes_read": 0, "stop_main": True}

    def test_short_read(self, i2c_bus, channel):
        channel.queue(data_response(b"\x01"), data_response())

        with pytest.raises(NoDataReceived) as excinfo:
            i2c_bus.transaction(0x50, [Read(2)])
        assert excinfo.value.expected == 2
        assert excinfo.value.received == 1
        assert channel.data_requests()[-1]["stop_main"] is True

    def test_missing_read_data(self, i2c_bus, channel):
        channel.queue(data_response(), data_response())
        with pytest.raises(NoDataReceived):
            i2c_bus.transaction(0x50, [Read(4)])

    def test_cleanup_failure_keeps_original_error(self, i2c_bus, channel, caplog):
        """Test that a failed stop is logged and the first error still surfaces."""
        channel.queue(data_response(error="NACK"), None)

        with caplog.at_level(logging.WARNING, logger="bphal.i2c"):
            with pytest.raises(DeviceError, match="NACK"):
                i2c_bus.transaction(0x50, [Write(b"\x01")])
        assert "stop" in caplog.text

    def test_timeout_propagates(self, i2c_bus, channel):
        channel.queue(None, data_response())
        with pytest.raises(TransportTimeout):
            i2c_bus.transaction(0x50, [Write(b"\x01")])

    def test_invalid_address_sends_nothing(self, i2c_bus, channel):
        with pytest.raises(ValueError):
            i2c_bus.transaction(0x80, [Write(b"\x01")])
        assert channel.written == []

    def test_invalid_operation_sends_nothing(self, i2c_bus, channel):
        with pytest.raises(TypeError):
            i2c_bus.transaction(0x50, [b"\x01"])
        assert channel.written == []


class TestSingleOperations:
    """Test one-shot read/write helpers."""

    def test_write(self, i2c_bus, channel):
        channel.queue(data_response())
        i2c_bus.write(0x50, [0x00, 0x10])

        assert channel.data_requests() == [
            {"start_main": True, "data_write": b"\xa0\x00\x10", "stop_main": True},
        ]

    def test_read(self, i2c_bus, channel):
        channel.queue(data_response(b"\xde\xad"))
        assert i2c_bus.read(0x50, 2) == b"\xde\xad"
        assert channel.data_requests() == [
            {"start_main": True, "data_write": b"\xa1", "bytes_read": 2, "stop_main": True},
        ]

    def test_write_read_single_request(self, i2c_bus, channel):
        """Test that write_then_read sends the address once in one request."""
        channel.queue(data_response(b"\x01\x02\x03\x04"))
        assert i2c_bus.write_then_read(0x50, [0x01], 4) == b"\x01\x02\x03\x04"

        assert channel.data_requests() == [
            {"start_main": True, "data_write": b"\xa0\x01", "bytes_read": 4, "stop_main": True},
        ]

    def test_read_zero_bytes(self, i2c_bus, channel):
        channel.queue(data_response())
        assert i2c_bus.read(0x50, 0) == b""

    def test_read_error(self, i2c_bus, channel):
        channel.queue(data_response(error="No ACK from 0x50"))
        with pytest.raises(DeviceError):
            i2c_bus.read(0x50, 1)
        assert len(channel.written) == 1
