"""Tests for the BPIO2 packet codec and configuration bundles."""

import flatbuffers
import pytest

from bphal.codec import (
    DataRequest, check_response, decode_response, describe_request,
    encode_configuration_request, encode_data_request, encode_status_request,
)
from bphal.codec import (
    _CONFIGURATION_REQUEST_SLOTS, _DATA_REQUEST_SLOTS, _MODE_CONFIGURATION_SLOTS,
    _STATUS_REQUEST_SLOTS, _camel, _describe_table,
)
from bphal.config import (
    BitOrder, ChipSelectPolarity, ClockPhase, ClockPolarity, Configuration,
    IoConfig, IoDirection, LogicLevel, ModeConfiguration, PsuConfig,
)
from bphal.errors import DeviceError, ProtocolMismatch, SchemaError
from bphal.tooling.bpio import ConfigurationRequest as ConfigurationRequestTable
from bphal.tooling.bpio import DataRequest as DataRequestTable
from bphal.tooling.bpio import ModeConfiguration as ModeConfigurationTable
from bphal.tooling.bpio import StatusRequest as StatusRequestTable
from bphal.tooling.bpio.ResponsePacketContents import ResponsePacketContents

from conftest import (
    configuration_response, data_response, error_response,
    packet_error_response, status_response,
)


class TestDataRequest:
    """Test DataRequest construction and encoding."""

    def test_address_before_payload(self):
        """Test that the address byte always leads the write buffer."""
        request = DataRequest(start=True, address=0xA0, data=b"\x01\x02")
        assert request.write_buffer() == b"\xa0\x01\x02"

    def test_address_only(self):
        request = DataRequest(address=0xA1)
        assert request.write_buffer() == b"\xa1"

    def test_no_write_buffer(self):
        assert DataRequest(bytes_read=4).write_buffer() is None

    def test_encoded_fields(self):
        """Test that the encoded packet carries exactly the populated fields."""
        payload = encode_data_request(
            DataRequest(start=True, stop=True, address=0xA0, data=[0x01], bytes_read=4)
        )
        described = describe_request(payload)

        assert described["kind"] == "DataRequest"
        assert described["version_major"] == 2
        assert described["minimum_version_minor"] == 0
        assert described["fields"] == {
            "start_main": True,
            "data_write": b"\xa0\x01",
            "bytes_read": 4,
            "stop_main": True,
        }

    def test_false_flags_still_sent(self):
        """Test that start/stop are on the wire even when false."""
        fields = describe_request(encode_data_request(DataRequest()))["fields"]
        assert fields == {"start_main": False, "stop_main": False}

    def test_start_alt(self):
        fields = describe_request(encode_data_request(DataRequest(start_alt=True, stop=True)))["fields"]
        assert fields["start_alt"] is True
        assert fields["start_main"] is False

    def test_zero_bytes_read_is_sent(self):
        """Test that an explicit zero read count is present, not omitted."""
        fields = describe_request(encode_data_request(DataRequest(bytes_read=0)))["fields"]
        assert fields["bytes_read"] == 0

    def test_bytes_read_range(self):
        with pytest.raises(ValueError):
            DataRequest(bytes_read=0x10000)
        with pytest.raises(ValueError):
            DataRequest(bytes_read=-1)

    def test_address_range(self):
        with pytest.raises(ValueError):
            DataRequest(address=0x100)


class TestConfigurationRequest:
    """Test sparse configuration encoding."""

    def test_led_resume_only(self):
        """Test that only led_resume reaches the wire when nothing else is set."""
        payload = encode_configuration_request(Configuration(led_resume=True))
        described = describe_request(payload)

        assert described["kind"] == "ConfigurationRequest"
        assert described["fields"] == {"led_resume": True}

    def test_mode_change(self):
        """Test that a mode change carries the mode name and its parameters."""
        payload = encode_configuration_request(
            mode="I2C", mode_config=ModeConfiguration.i2c(400_000, clock_stretch=True)
        )
        fields = describe_request(payload)["fields"]

        assert fields["mode"] == "I2C"
        assert fields["mode_configuration"] == {"speed": 400_000, "clock_stretch": True}
        assert "psu_enable" not in fields

    def test_mode_without_parameters(self):
        """Test that a bare mode change still sends an empty mode configuration."""
        fields = describe_request(encode_configuration_request(mode="HiZ"))["fields"]
        assert fields == {"mode": "HiZ", "mode_configuration": {}}

    def test_spi_mode_parameters(self):
        mode_config = ModeConfiguration.spi(
            1_000_000,
            clock_polarity=ClockPolarity.ACTIVE_LOW,
            clock_phase=ClockPhase.TRAILING_EDGE,
            chip_select=ChipSelectPolarity.ACTIVE_HIGH,
        )
        fields = describe_request(encode_configuration_request(mode="SPI", mode_config=mode_config))["fields"]
        assert fields["mode_configuration"] == {
            "speed": 1_000_000,
            "data_bits": 8,
            "clock_polarity": True,
            "clock_phase": True,
            "chip_select_idle": False,
        }

    def test_default_valued_field_is_sent(self):
        """Test that a populated field equal to the schema default is still sent."""
        mode_config = ModeConfiguration(speed=20000, stop_bits=1)
        fields = describe_request(encode_configuration_request(mode="I2C", mode_config=mode_config))["fields"]
        assert fields["mode_configuration"] == {"speed": 20000, "stop_bits": 1}

    def test_psu_and_pullups(self):
        config = Configuration(psu=PsuConfig.on(3300, 150), pullup=True)
        fields = describe_request(encode_configuration_request(config))["fields"]
        assert fields == {
            "psu_enable": True,
            "psu_set_mv": 3300,
            "psu_set_ma": 150,
            "pullup_enable": True,
        }

    def test_psu_off(self):
        config = Configuration(psu=PsuConfig.off(), pullup=False)
        fields = describe_request(encode_configuration_request(config))["fields"]
        assert fields == {"psu_disable": True, "pullup_disable": True}

    def test_led_colors_and_print(self):
        config = Configuration(led_color=[0xFF0000, 0x00FF00], print_string="hello",
                               mode_bit_order=BitOrder.LSB)
        fields = describe_request(encode_configuration_request(config))["fields"]
        assert fields == {
            "mode_bitorder_lsb": True,
            "led_color": [0xFF0000, 0x00FF00],
            "print_string": "hello",
        }

    def test_io_masks(self):
        io = IoConfig().set_direction(0, IoDirection.OUTPUT).set_level(0, LogicLevel.HIGH)
        io.set_direction(3, IoDirection.INPUT)
        fields = describe_request(encode_configuration_request(Configuration(io=io)))["fields"]
        assert fields == {
            "io_direction_mask": 0b1001,
            "io_direction": 0b0001,
            "io_value_mask": 0b0001,
            "io_value": 0b0001,
        }

    def test_status_request(self):
        described = describe_request(encode_status_request())
        assert described["kind"] == "StatusRequest"
        assert described["fields"] == {"query": [0]}


def _field_value(builder, module, name):
    """Build a value for one field, ahead of the table that holds it."""
    if name in ("mode", "print_string"):
        return builder.CreateString("x")
    if name == "data_write":
        return builder.CreateByteVector(b"\x01")
    if name == "led_color":
        module.StartLedColorVector(builder, 1)
        builder.PrependUint32(0xFF0000)
        return builder.EndVector()
    if name == "query":
        module.StartQueryVector(builder, 1)
        builder.PrependUint8(0)
        return builder.EndVector()
    if name == "mode_configuration":
        ModeConfigurationTable.Start(builder)
        return ModeConfigurationTable.End(builder)
    return 1


def _single_field_table(module, table_cls, name):
    """A table built with the generated Add function for `name` only."""
    builder = flatbuffers.Builder(64)
    builder.ForceDefaults(True)
    value = _field_value(builder, module, name)
    module.Start(builder)
    getattr(module, "Add" + _camel(name))(builder, value)
    builder.Finish(module.End(builder))
    return table_cls.GetRootAs(bytes(builder.Output()), 0)


_LAYOUTS = [
    (DataRequestTable, DataRequestTable.DataRequest, _DATA_REQUEST_SLOTS),
    (ConfigurationRequestTable, ConfigurationRequestTable.ConfigurationRequest,
     _CONFIGURATION_REQUEST_SLOTS),
    (ModeConfigurationTable, ModeConfigurationTable.ModeConfiguration, _MODE_CONFIGURATION_SLOTS),
    (StatusRequestTable, StatusRequestTable.StatusRequest, _STATUS_REQUEST_SLOTS),
]


class TestSchemaLayout:
    """Test that the slot tables line up with the generated builders."""

    @pytest.mark.parametrize(
        "module, table_cls, name",
        [(module, table_cls, name) for module, table_cls, slots in _LAYOUTS for name in slots],
    )
    def test_field_found_in_its_own_slot(self, module, table_cls, name):
        table = _single_field_table(module, table_cls, name)
        slots = next(s for m, _, s in _LAYOUTS if m is module)
        assert list(_describe_table(table, slots)) == [name]

    @pytest.mark.parametrize("module, table_cls, slots", _LAYOUTS)
    def test_slot_count_matches_table(self, module, table_cls, slots):
        """Test that every slot has a generated Add function and nothing is left over."""
        adders = {
            attr for attr in vars(module)
            if attr.startswith("Add") and not attr.startswith(table_cls.__name__)
        }
        assert adders == {"Add" + _camel(name) for name in slots}


class TestConfigBundles:
    """Test the pure field mapping of the option bundles."""

    def test_empty_configuration(self):
        assert Configuration().fields() == []

    def test_psu_voltage_only(self):
        assert PsuConfig(millivolts=1800).fields() == [("psu_set_mv", 1800)]

    def test_io_pin_range(self):
        with pytest.raises(ValueError):
            IoConfig().set_direction(8, IoDirection.OUTPUT)
        with pytest.raises(ValueError):
            IoConfig().set_level(-1, LogicLevel.LOW)

    def test_io_untouched_is_empty(self):
        assert IoConfig().fields() == []

    def test_bus_parameter_mapping(self):
        assert ClockPolarity.ACTIVE_LOW.for_bpio() is True
        assert ClockPolarity.ACTIVE_HIGH.for_bpio() is False
        assert ClockPhase.LEADING_EDGE.for_bpio() is False
        assert ChipSelectPolarity.ACTIVE_LOW.for_bpio() is True


class TestResponses:
    """Test response decoding and validation."""

    def test_data_response(self):
        response = decode_response(data_response(b"\x01\x02\x03"))
        assert response.kind == ResponsePacketContents.DataResponse
        assert response.data_read == b"\x01\x02\x03"
        assert response.error is None

    def test_data_response_without_data(self):
        response = check_response(decode_response(data_response()), ResponsePacketContents.DataResponse)
        assert response.data_read is None

    def test_embedded_error(self):
        """Test that an error inside the expected kind is a DeviceError."""
        response = decode_response(data_response(error="NACK"))
        with pytest.raises(DeviceError) as excinfo:
            check_response(response, ResponsePacketContents.DataResponse)
        assert excinfo.value.message == "NACK"

    def test_error_response(self):
        """Test that an ErrorResponse in place of the expected kind is a DeviceError."""
        response = decode_response(error_response("Invalid mode"))
        with pytest.raises(DeviceError, match="Invalid mode"):
            check_response(response, ResponsePacketContents.ConfigurationResponse)

    def test_unexpected_kind(self):
        """Test that any other kind is a ProtocolMismatch naming it."""
        response = decode_response(configuration_response())
        with pytest.raises(ProtocolMismatch) as excinfo:
            check_response(response, ResponsePacketContents.DataResponse)
        assert excinfo.value.kind == "ConfigurationResponse"
        assert excinfo.value.expected == "DataResponse"

    def test_packet_level_error(self):
        response = decode_response(packet_error_response("Version mismatch"))
        with pytest.raises(DeviceError, match="Version mismatch"):
            check_response(response, ResponsePacketContents.DataResponse)

    def test_status_response(self):
        response = check_response(decode_response(status_response()), ResponsePacketContents.StatusResponse)
        status = response.status

        assert status.version_firmware_major == 1
        assert status.version_firmware_minor == 2
        assert status.version_firmware_git_hash == "abc1234"
        assert status.modes_available == ["HiZ", "I2C", "SPI"]
        assert status.mode_current == "HiZ"
        assert status.psu_enabled is True
        assert status.adc_mv == [3300, 0]
        assert status.io_direction == 0x0F
        assert status.version_firmware_date is None

    def test_short_payload(self):
        with pytest.raises(SchemaError):
            decode_response(b"\x01\x02")

    def test_garbage_payload(self):
        """Test that a root offset pointing outside the buffer is a SchemaError."""
        with pytest.raises(SchemaError):
            decode_response(b"\xff\xff\xff\x7f\x00\x00\x00\x00")
