"""
BPIO2 packet codec.

Builds RequestPacket buffers with the generated FlatBuffers tables and reads
ResponsePacket buffers back into plain Python objects. Responses are read
eagerly, so a malformed buffer fails here as SchemaError rather than later
at some random accessor.

Only fields that the caller populated are added to a request. The builder
runs with ForceDefaults, so a populated field reaches the wire even when its
value equals the schema default.
"""

import struct
from dataclasses import dataclass, field
from typing import Optional, List

import flatbuffers

from .config import Configuration, ModeConfiguration, Fields
from .errors import DeviceError, ProtocolMismatch, SchemaError
from .tooling.bpio import ConfigurationRequest
from .tooling.bpio import ConfigurationResponse
from .tooling.bpio import DataRequest as DataRequestTable
from .tooling.bpio import DataResponse
from .tooling.bpio import ErrorResponse
from .tooling.bpio import ModeConfiguration as ModeConfigurationTable
from .tooling.bpio import RequestPacket
from .tooling.bpio import ResponsePacket
from .tooling.bpio import StatusRequest
from .tooling.bpio import StatusResponse
from .tooling.bpio.RequestPacketContents import RequestPacketContents
from .tooling.bpio.ResponsePacketContents import ResponsePacketContents
from .tooling.bpio.StatusRequestTypes import StatusRequestTypes

VERSION_MAJOR = 2
MINIMUM_VERSION_MINOR = 0

MAX_BYTES_READ = 0xFFFF


# --------------------------------------------------------------------------
# Schema Layout
# --------------------------------------------------------------------------

# Field order per table, as declared in schema/bpio.fbs. A field's vtable
# offset is 4 + 2 * index.
_MODE_CONFIGURATION_SLOTS = ModeConfiguration.FIELD_ORDER
_CONFIGURATION_REQUEST_SLOTS = (
    "mode", "mode_configuration", "mode_bitorder_msb", "mode_bitorder_lsb",
    "psu_disable", "psu_enable", "psu_set_mv", "psu_set_ma",
    "pullup_disable", "pullup_enable", "io_direction_mask", "io_direction",
    "io_value_mask", "io_value", "led_resume", "led_color", "print_string",
    "hardware_bootloader", "hardware_reset", "hardware_selftest",
)
_DATA_REQUEST_SLOTS = (
    "start_main", "start_alt", "data_write", "bytes_read", "stop_main", "stop_alt",
)
_STATUS_REQUEST_SLOTS = ("query",)
_STATUS_RESPONSE_SLOTS = (
    "error", "version_flatbuffers_major", "version_flatbuffers_minor",
    "version_hardware_major", "version_hardware_minor",
    "version_firmware_major", "version_firmware_minor",
    "version_firmware_git_hash", "version_firmware_date",
    "modes_available", "mode_current", "mode_bitorder_msb",
    "mode_max_packet_size", "mode_max_write", "mode_max_read",
    "psu_enabled", "psu_set_mv", "psu_set_ma", "psu_measured_mv",
    "psu_measured_ma", "psu_current_error", "pullup_enabled", "adc_mv",
    "io_direction", "io_value", "led_count",
)

_STRINGS = {
    "mode", "print_string", "error", "mode_current",
    "version_firmware_git_hash", "version_firmware_date",
}
_STRING_VECTORS = {"modes_available"}
_BYTE_VECTORS = {"data_write", "data_read"}
_INT_VECTORS = {"led_color", "adc_mv", "query"}

_REQUEST_TABLES = {
    RequestPacketContents.DataRequest: (DataRequestTable.DataRequest, _DATA_REQUEST_SLOTS),
    RequestPacketContents.ConfigurationRequest: (
        ConfigurationRequest.ConfigurationRequest, _CONFIGURATION_REQUEST_SLOTS),
    RequestPacketContents.StatusRequest: (StatusRequest.StatusRequest, _STATUS_REQUEST_SLOTS),
}

_REQUEST_KIND_NAMES = {
    value: name for name, value in vars(RequestPacketContents).items()
    if not name.startswith("_")
}
_RESPONSE_KIND_NAMES = {
    value: name for name, value in vars(ResponsePacketContents).items()
    if not name.startswith("_")
}


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def _text(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def response_kind_name(kind: int) -> str:
    return _RESPONSE_KIND_NAMES.get(kind, f"Unknown({kind})")


def request_kind_name(kind: int) -> str:
    return _REQUEST_KIND_NAMES.get(kind, f"Unknown({kind})")


# --------------------------------------------------------------------------
# Requests
# --------------------------------------------------------------------------

@dataclass(frozen=True)
class DataRequest:
    """
    One bus data exchange.

    The write buffer is the optional address byte followed by the payload.
    Position 0 is always the address when one is given.
    """
    start: bool = False
    stop: bool = False
    start_alt: bool = False
    address: Optional[int] = None
    data: Optional[bytes] = None
    bytes_read: Optional[int] = None

    def __post_init__(self):
        if self.address is not None and not 0 <= self.address <= 0xFF:
            raise ValueError(f"Address byte out of range: {self.address}")
        if self.data is not None:
            object.__setattr__(self, "data", bytes(self.data))
        if self.bytes_read is not None and not 0 <= self.bytes_read <= MAX_BYTES_READ:
            raise ValueError(f"Read length must be 0..{MAX_BYTES_READ}, got {self.bytes_read}")

    def write_buffer(self) -> Optional[bytes]:
        buf = bytearray()
        if self.address is not None:
            buf.append(self.address)
        if self.data:
            buf.extend(self.data)
        return bytes(buf) if buf else None

    def fields(self) -> Fields:
        out = [("start_main", self.start)]
        if self.start_alt:
            out.append(("start_alt", True))
        write = self.write_buffer()
        if write is not None:
            out.append(("data_write", write))
        if self.bytes_read is not None:
            out.append(("bytes_read", self.bytes_read))
        out.append(("stop_main", self.stop))
        return out


def _new_builder(size: int = 256) -> flatbuffers.Builder:
    builder = flatbuffers.Builder(size)
    builder.ForceDefaults(True)
    return builder


def _create_uint32_vector(builder, values) -> int:
    ConfigurationRequest.StartLedColorVector(builder, len(values))
    for value in reversed(values):
        builder.PrependUint32(value)
    return builder.EndVector()


def _create_offsets(builder, fields: Fields) -> Fields:
    """Create strings and vectors up front; tables can't nest construction."""
    out = []
    for name, value in fields:
        if name in _STRINGS:
            value = builder.CreateString(value)
        elif name in _BYTE_VECTORS:
            value = builder.CreateByteVector(bytes(value))
        elif name == "led_color":
            value = _create_uint32_vector(builder, value)
        out.append((name, value))
    return out


def _add_fields(builder, table_module, fields: Fields):
    for name, value in fields:
        getattr(table_module, "Add" + _camel(name))(builder, value)


def _finish_packet(builder, contents_type: int, contents: int) -> bytes:
    RequestPacket.Start(builder)
    RequestPacket.AddVersionMajor(builder, VERSION_MAJOR)
    RequestPacket.AddMinimumVersionMinor(builder, MINIMUM_VERSION_MINOR)
    RequestPacket.AddContentsType(builder, contents_type)
    RequestPacket.AddContents(builder, contents)
    packet = RequestPacket.End(builder)
    builder.Finish(packet)
    return bytes(builder.Output())


def encode_data_request(request: DataRequest) -> bytes:
    """Serialize a DataRequest into a RequestPacket buffer."""
    builder = _new_builder()
    fields = _create_offsets(builder, request.fields())

    DataRequestTable.Start(builder)
    _add_fields(builder, DataRequestTable, fields)
    contents = DataRequestTable.End(builder)
    return _finish_packet(builder, RequestPacketContents.DataRequest, contents)


def encode_configuration_request(
    config: Optional[Configuration] = None,
    mode: Optional[str] = None,
    mode_config: Optional[ModeConfiguration] = None,
) -> bytes:
    """
    Serialize a ConfigurationRequest.

    Args:
        config: Auxiliary settings (PSU, pull-ups, IO, LEDs, ...)
        mode: Wire name of the mode to enter, or None to stay in the current mode
        mode_config: Parameters for the mode being entered

    Returns:
        RequestPacket buffer holding only the populated fields
    """
    builder = _new_builder()

    mode_fields = []
    if mode is not None:
        mode_string = builder.CreateString(mode)
        ModeConfigurationTable.Start(builder)
        _add_fields(builder, ModeConfigurationTable, (mode_config or ModeConfiguration()).fields())
        mode_table = ModeConfigurationTable.End(builder)
        mode_fields = [("mode", mode_string), ("mode_configuration", mode_table)]

    aux_fields = _create_offsets(builder, config.fields() if config else [])

    ConfigurationRequest.Start(builder)
    _add_fields(builder, ConfigurationRequest, mode_fields + aux_fields)
    contents = ConfigurationRequest.End(builder)
    return _finish_packet(builder, RequestPacketContents.ConfigurationRequest, contents)


def encode_status_request(queries=(StatusRequestTypes.All,)) -> bytes:
    builder = _new_builder(64)

    StatusRequest.StartQueryVector(builder, len(queries))
    for query in reversed(queries):
        builder.PrependUint8(query)
    query_vector = builder.EndVector()

    StatusRequest.Start(builder)
    StatusRequest.AddQuery(builder, query_vector)
    contents = StatusRequest.End(builder)
    return _finish_packet(builder, RequestPacketContents.StatusRequest, contents)


# --------------------------------------------------------------------------
# Table Reading
# --------------------------------------------------------------------------

def _read_field(table, name: str):
    camel = _camel(name)
    if name in _STRINGS:
        return _text(getattr(table, camel)())
    if name in _STRING_VECTORS or name in _BYTE_VECTORS or name in _INT_VECTORS:
        length = getattr(table, camel + "Length")()
        values = [getattr(table, camel)(j) for j in range(length)]
        if name in _STRING_VECTORS:
            return [_text(v) for v in values]
        if name in _BYTE_VECTORS:
            return bytes(values)
        return values
    return getattr(table, camel)()


def _has_field(table, name: str, index: int) -> bool:
    # Generated tables only carry IsNone accessors for vector fields.
    is_none = getattr(table, _camel(name) + "IsNone", None)
    if is_none is not None:
        return not is_none()
    return table._tab.Offset(4 + 2 * index) != 0


def _describe_table(table, slots) -> dict:
    """Fields present in a table, keyed by schema name."""
    out = {}
    for index, name in enumerate(slots):
        if not _has_field(table, name, index):
            continue
        if name == "mode_configuration":
            out[name] = _describe_table(table.ModeConfiguration(), _MODE_CONFIGURATION_SLOTS)
        else:
            out[name] = _read_field(table, name)
    return out


def describe_request(payload: bytes) -> dict:
    """
    Decode an outgoing RequestPacket into a dict of the fields on the wire.

    Only fields actually present in the buffer are listed, which makes this
    the reference for what a request transmits.
    """
    try:
        packet = RequestPacket.RequestPacket.GetRootAs(payload, 0)
        kind = packet.ContentsType()
        out = {
            "kind": request_kind_name(kind),
            "version_major": packet.VersionMajor(),
            "minimum_version_minor": packet.MinimumVersionMinor(),
        }
        contents = packet.Contents()
        if contents is not None and kind in _REQUEST_TABLES:
            table_cls, slots = _REQUEST_TABLES[kind]
            table = table_cls()
            table.Init(contents.Bytes, contents.Pos)
            out["fields"] = _describe_table(table, slots)
        return out
    except (struct.error, IndexError, TypeError, ValueError) as e:
        raise SchemaError(f"Malformed request packet: {e}") from e


# --------------------------------------------------------------------------
# Responses
# --------------------------------------------------------------------------

@dataclass
class DeviceStatus:
    """Snapshot returned by a StatusRequest."""
    version_flatbuffers_major: int = 0
    version_flatbuffers_minor: int = 0
    version_hardware_major: int = 0
    version_hardware_minor: int = 0
    version_firmware_major: int = 0
    version_firmware_minor: int = 0
    version_firmware_git_hash: Optional[str] = None
    version_firmware_date: Optional[str] = None
    modes_available: List[str] = field(default_factory=list)
    mode_current: Optional[str] = None
    mode_bitorder_msb: bool = False
    mode_max_packet_size: int = 0
    mode_max_write: int = 0
    mode_max_read: int = 0
    psu_enabled: bool = False
    psu_set_mv: int = 0
    psu_set_ma: int = 0
    psu_measured_mv: int = 0
    psu_measured_ma: int = 0
    psu_current_error: bool = False
    pullup_enabled: bool = False
    adc_mv: List[int] = field(default_factory=list)
    io_direction: int = 0
    io_value: int = 0
    led_count: int = 0


@dataclass
class Response:
    """A decoded ResponsePacket."""
    kind: int
    error: Optional[str] = None          # Error carried by the contents table
    packet_error: Optional[str] = None   # Error on the packet itself
    data_read: Optional[bytes] = None
    status: Optional[DeviceStatus] = None

    @property
    def kind_name(self) -> str:
        return response_kind_name(self.kind)


def decode_response(payload: bytes) -> Response:
    """
    Parse a ResponsePacket buffer.

    Raises:
        SchemaError: Buffer is not a readable ResponsePacket
    """
    if len(payload) < 4:
        raise SchemaError(f"Response too short: {len(payload)} bytes")

    try:
        packet = ResponsePacket.ResponsePacket.GetRootAs(payload, 0)
        response = Response(kind=ResponsePacketContents.NONE, packet_error=_text(packet.Error()))

        contents = packet.Contents()
        if contents is None:
            return response
        response.kind = packet.ContentsType()

        if response.kind == ResponsePacketContents.ErrorResponse:
            table = ErrorResponse.ErrorResponse()
        elif response.kind == ResponsePacketContents.ConfigurationResponse:
            table = ConfigurationResponse.ConfigurationResponse()
        elif response.kind == ResponsePacketContents.DataResponse:
            table = DataResponse.DataResponse()
        elif response.kind == ResponsePacketContents.StatusResponse:
            table = StatusResponse.StatusResponse()
        else:
            return response
        table.Init(contents.Bytes, contents.Pos)

        response.error = _text(table.Error())
        if response.kind == ResponsePacketContents.DataResponse and not table.DataReadIsNone():
            response.data_read = _read_field(table, "data_read")
        elif response.kind == ResponsePacketContents.StatusResponse:
            response.status = DeviceStatus(**{
                name: _read_field(table, name) for name in _STATUS_RESPONSE_SLOTS[1:]
            })
        return response
    except (struct.error, IndexError, TypeError, ValueError) as e:
        raise SchemaError(f"Malformed response packet: {e}") from e


def check_response(response: Response, expected: int) -> Response:
    """
    Validate a decoded response against the kind the request expects.

    - Expected kind carrying an error string: DeviceError
    - Expected kind without error: returned as is
    - ErrorResponse instead: DeviceError
    - Anything else: ProtocolMismatch naming the kind received
    """
    if response.packet_error is not None:
        raise DeviceError(response.packet_error)

    if response.kind == expected:
        if response.error is not None:
            raise DeviceError(response.error)
        return response

    if response.kind == ResponsePacketContents.ErrorResponse:
        raise DeviceError(response.error or "")

    raise ProtocolMismatch(response.kind_name, response_kind_name(expected))
