"""Tests for COBS framing and the serial transport."""

import pytest

from bphal.errors import BPIOError, FramingError, SchemaError, TransportError, TransportTimeout
from bphal.framing import (
    DELIMITER, FrameDecoder, decode_frame, encode_frame, max_encoded_size,
)
from bphal.transport import Transport

from conftest import FakeChannel, Raw


class TestFrameEncoding:
    """Test frame encoding and decoding."""

    @pytest.mark.parametrize("payload", [
        b"",
        b"\x00",
        b"\x00\x00\x00",
        b"\x11\x00\x22\x00",
        bytes(range(256)),
        b"\xff" * 600,
    ])
    def test_round_trip(self, payload):
        """Test that decode(encode(x)) == x, delimiter bytes included."""
        assert decode_frame(encode_frame(payload)) == payload

    def test_delimiter_only_at_end(self):
        """Test that the delimiter never appears inside an encoded frame."""
        frame = encode_frame(b"\x00\x01\x00\x02\x00")
        assert frame.endswith(DELIMITER)
        assert DELIMITER not in frame[:-1]

    def test_decode_rejects_inner_delimiter(self):
        """Test that a frame body holding the delimiter is rejected."""
        with pytest.raises(FramingError):
            decode_frame(b"\x02\x01\x00\x02\x01\x00")

    def test_decode_rejects_corrupt_frame(self):
        """Test that a code byte pointing past the end is a framing error."""
        with pytest.raises(FramingError):
            decode_frame(b"\x05\x01\x02")


class TestFrameDecoder:
    """Test incremental frame decoding."""

    def test_byte_at_a_time(self):
        """Test that frames split into single bytes still decode."""
        payload = b"\x01\x00\x02\x03"
        decoder = FrameDecoder()
        frame = encode_frame(payload)

        results = [decoder.push(frame[i:i + 1]) for i in range(len(frame))]
        assert results[:-1] == [None] * (len(frame) - 1)
        assert results[-1] == payload

    def test_leftover_kept_for_next_frame(self):
        """Test that bytes after a delimiter stay buffered."""
        decoder = FrameDecoder()
        data = encode_frame(b"first") + encode_frame(b"second")[:3]

        assert decoder.push(data) == b"first"
        assert decoder.pending == 3
        assert decoder.push(encode_frame(b"second")[3:]) == b"second"

    def test_skips_empty_frames(self):
        """Test that back-to-back delimiters are ignored."""
        decoder = FrameDecoder()
        assert decoder.push(b"\x00\x00" + encode_frame(b"abc")) == b"abc"

    def test_oversized_frame_fails(self):
        """Test that a frame larger than capacity fails instead of truncating."""
        decoder = FrameDecoder(capacity=16)
        with pytest.raises(FramingError):
            decoder.push(encode_frame(b"x" * 17))

    def test_oversized_without_delimiter_fails(self):
        """Test that a runaway stream without delimiter fails."""
        decoder = FrameDecoder(capacity=16)
        with pytest.raises(FramingError):
            decoder.push(b"\x01" * (max_encoded_size(16) + 1))
        assert decoder.pending == 0

    def test_exact_capacity_accepted(self):
        """Test that a frame of exactly capacity bytes decodes."""
        decoder = FrameDecoder(capacity=16)
        assert decoder.push(encode_frame(b"y" * 16)) == b"y" * 16

    def test_reset(self):
        """Test that reset drops buffered bytes."""
        decoder = FrameDecoder()
        decoder.push(b"\x03\x01")
        decoder.reset()
        assert decoder.pending == 0


class TestTransport:
    """Test the request/response exchange."""

    def test_send_writes_one_frame(self):
        """Test that send writes the framed payload and returns the reply."""
        channel = FakeChannel([b"\x00reply\x00"])
        transport = Transport(channel)

        assert transport.send(b"\x01\x00\x02") == b"\x00reply\x00"
        assert channel.written == [encode_frame(b"\x01\x00\x02")]

    def test_partial_reads(self):
        """Test that tiny channel reads are reassembled."""
        channel = FakeChannel([bytes(range(200))], chunk_size=3)
        transport = Transport(channel)
        assert transport.send(b"ping") == bytes(range(200))

    def test_timeout(self):
        """Test that silence surfaces as TransportTimeout."""
        channel = FakeChannel([None])
        transport = Transport(channel)
        with pytest.raises(TransportTimeout):
            transport.send(b"ping")

    def test_timeout_mid_frame(self):
        """Test that a truncated frame times out, reporting pending bytes."""
        channel = FakeChannel([Raw(b"\x05\x01\x02")])
        transport = Transport(channel)
        with pytest.raises(TransportTimeout) as excinfo:
            transport.send(b"ping")
        assert excinfo.value.received == 3

    def test_timeout_is_transport_error(self):
        """Test that callers catching TransportError see timeouts too."""
        assert issubclass(TransportTimeout, TransportError)

    @pytest.mark.parametrize("error_cls", [TransportError, FramingError, SchemaError])
    def test_plain_errors_carry_message(self, error_cls):
        error = error_cls("bad frame")
        assert isinstance(error, BPIOError)
        assert str(error) == "bad frame"
        assert error_cls.__doc__

    def test_oversized_response(self):
        """Test that an oversized response frame is a framing error."""
        channel = FakeChannel([b"z" * 64])
        transport = Transport(channel, capacity=32)
        with pytest.raises(FramingError):
            transport.send(b"ping")

    def test_stale_input_discarded(self):
        """Test that leftovers from an earlier exchange are not taken as the reply."""
        channel = FakeChannel([b"fresh"])
        channel.rx.extend(encode_frame(b"stale"))
        transport = Transport(channel)
        assert transport.send(b"ping") == b"fresh"

    def test_io_error_wrapped(self):
        """Test that channel OSErrors become TransportError."""
        class BrokenChannel(FakeChannel):
            def write(self, data):
                raise OSError("device unplugged")

        transport = Transport(BrokenChannel())
        with pytest.raises(TransportError, match="device unplugged"):
            transport.send(b"ping")

    def test_send_after_close(self):
        """Test that a closed transport refuses to send."""
        channel = FakeChannel()
        transport = Transport(channel)
        transport.close()

        assert not transport.is_open
        assert not channel.is_open
        with pytest.raises(TransportError):
            transport.send(b"ping")

    def test_open_requires_port(self):
        """Test that opening without a port fails before touching pyserial."""
        from bphal.config import LinkSettings
        with pytest.raises(TransportError):
            Transport.open(LinkSettings())
