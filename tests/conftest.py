"""Shared fixtures: a scripted serial channel and BPIO2 response builders."""

from collections import deque

import flatbuffers
import pytest
from cobs import cobs

from bphal.codec import describe_request
from bphal.connection import connect
from bphal.tooling.bpio import ConfigurationResponse
from bphal.tooling.bpio import DataResponse
from bphal.tooling.bpio import ErrorResponse
from bphal.tooling.bpio import ResponsePacket
from bphal.tooling.bpio import StatusResponse
from bphal.tooling.bpio.ResponsePacketContents import ResponsePacketContents


# --------------------------------------------------------------------------
# Response Builders
# --------------------------------------------------------------------------

def _finish(builder, kind, contents, packet_error=None):
    error = builder.CreateString(packet_error) if packet_error else None
    ResponsePacket.Start(builder)
    if error is not None:
        ResponsePacket.AddError(builder, error)
    if contents is not None:
        ResponsePacket.AddContentsType(builder, kind)
        ResponsePacket.AddContents(builder, contents)
    builder.Finish(ResponsePacket.End(builder))
    return bytes(builder.Output())


def data_response(data=None, error=None):
    builder = flatbuffers.Builder(64)
    data_vector = builder.CreateByteVector(bytes(data)) if data is not None else None
    error_string = builder.CreateString(error) if error else None
    DataResponse.Start(builder)
    if error_string is not None:
        DataResponse.AddError(builder, error_string)
    if data_vector is not None:
        DataResponse.AddDataRead(builder, data_vector)
    return _finish(builder, ResponsePacketContents.DataResponse, DataResponse.End(builder))


def configuration_response(error=None):
    builder = flatbuffers.Builder(64)
    error_string = builder.CreateString(error) if error else None
    ConfigurationResponse.Start(builder)
    if error_string is not None:
        ConfigurationResponse.AddError(builder, error_string)
    contents = ConfigurationResponse.End(builder)
    return _finish(builder, ResponsePacketContents.ConfigurationResponse, contents)


def error_response(message):
    builder = flatbuffers.Builder(64)
    error_string = builder.CreateString(message)
    ErrorResponse.Start(builder)
    ErrorResponse.AddError(builder, error_string)
    return _finish(builder, ResponsePacketContents.ErrorResponse, ErrorResponse.End(builder))


def packet_error_response(message):
    """ResponsePacket with only its top-level error set."""
    builder = flatbuffers.Builder(64)
    return _finish(builder, ResponsePacketContents.NONE, None, packet_error=message)


def status_response(firmware=(1, 2), git_hash="abc1234", modes=("HiZ", "I2C", "SPI"),
                    mode_current="HiZ", psu_enabled=True, adc_mv=(3300, 0)):
    builder = flatbuffers.Builder(256)
    git_hash_string = builder.CreateString(git_hash)
    mode_string = builder.CreateString(mode_current)

    mode_strings = [builder.CreateString(m) for m in modes]
    StatusResponse.StartModesAvailableVector(builder, len(mode_strings))
    for offset in reversed(mode_strings):
        builder.PrependUOffsetTRelative(offset)
    modes_vector = builder.EndVector()

    StatusResponse.StartAdcMvVector(builder, len(adc_mv))
    for value in reversed(adc_mv):
        builder.PrependUint32(value)
    adc_vector = builder.EndVector()

    StatusResponse.Start(builder)
    StatusResponse.AddVersionFlatbuffersMajor(builder, 2)
    StatusResponse.AddVersionFirmwareMajor(builder, firmware[0])
    StatusResponse.AddVersionFirmwareMinor(builder, firmware[1])
    StatusResponse.AddVersionFirmwareGitHash(builder, git_hash_string)
    StatusResponse.AddModesAvailable(builder, modes_vector)
    StatusResponse.AddModeCurrent(builder, mode_string)
    StatusResponse.AddModeMaxPacketSize(builder, 640)
    StatusResponse.AddPsuEnabled(builder, psu_enabled)
    StatusResponse.AddPsuSetMv(builder, 3300)
    StatusResponse.AddAdcMv(builder, adc_vector)
    StatusResponse.AddIoDirection(builder, 0x0F)
    contents = StatusResponse.End(builder)
    return _finish(builder, ResponsePacketContents.StatusResponse, contents)


# --------------------------------------------------------------------------
# Fake Channel
# --------------------------------------------------------------------------

class Raw(bytes):
    """Reply bytes queued as-is, without COBS framing."""


class FakeChannel:
    """
    Stand-in for serial.Serial.

    Every write pops the next scripted reply: a payload (COBS framed here),
    Raw bytes, or None for silence (the next read times out). Reads return
    at most `chunk_size` bytes to exercise partial reads.
    """

    def __init__(self, replies=(), chunk_size=None):
        self.replies = deque(replies)
        self.chunk_size = chunk_size
        self.written = []
        self.rx = bytearray()
        self.is_open = True
        self.timeout = 1.0
        self.port = "/dev/fake"

    def queue(self, *replies):
        self.replies.extend(replies)
        return self

    def clear(self):
        self.written.clear()

    @property
    def in_waiting(self):
        return len(self.rx)

    def reset_input_buffer(self):
        self.rx.clear()

    def write(self, data):
        self.written.append(bytes(data))
        if not self.replies:
            return len(data)
        reply = self.replies.popleft()
        if isinstance(reply, Raw):
            self.rx.extend(reply)
        elif reply is not None:
            self.rx.extend(cobs.encode(reply) + b"\x00")
        return len(data)

    def read(self, size=1):
        if self.chunk_size:
            size = min(size, self.chunk_size)
        chunk = bytes(self.rx[:size])
        del self.rx[:size]
        return chunk

    def close(self):
        self.is_open = False

    def requests(self):
        """Written frames decoded into describe_request dicts."""
        return [describe_request(cobs.decode(frame[:-1])) for frame in self.written]

    def data_requests(self):
        """Fields of each DataRequest written, in order."""
        return [r["fields"] for r in self.requests() if r["kind"] == "DataRequest"]


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def hiz(channel):
    """Connected handle in HiZ mode, with the opening request cleared."""
    channel.queue(configuration_response())
    bp = connect(channel)
    channel.clear()
    return bp


@pytest.fixture
def i2c_bus(hiz, channel):
    channel.queue(configuration_response())
    bus = hiz.enter_i2c(speed=100_000)
    channel.clear()
    return bus


@pytest.fixture
def spi_bus(hiz, channel):
    channel.queue(configuration_response())
    bus = hiz.enter_spi(speed=1_000_000)
    channel.clear()
    return bus
