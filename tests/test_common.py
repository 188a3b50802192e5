import pytest

from gxcommon.common import (
    DataType,
    bytes_to_any,
    get_type,
    to_bytes,
    to_hex,
    to_string,
)
from gxcommon.errors import (
    ArgumentOutOfRangeError,
    BufferTooSmallError,
    InvalidArgumentError,
)

INTEGER_CASES = [
    (DataType.INT16, -32768),
    (DataType.INT16, 32767),
    (DataType.INT32, -123456),
    (DataType.INT64, -(2**63)),
    (DataType.INT64, 2**63 - 1),
    (DataType.UINT16, 65535),
    (DataType.UINT32, 4000000000),
    (DataType.UINT64, 2**64 - 1),
    (DataType.BYTE, 200),
]


def test_to_hex_pinned():
    assert to_hex(b"\x01\xab\xff") == "01 AB FF"


def test_to_hex_empty():
    assert to_hex(b"") == ""


@pytest.mark.parametrize("data", [b"\x00", b"\x10\x20\x30", bytes(range(256))])
def test_to_hex_round_trip(data):
    text = to_hex(data)
    assert bytes.fromhex(text) == data
    assert text == text.upper()
    assert all(len(part) == 2 for part in text.split(" "))


def test_to_string_bytes_uses_hex():
    data = bytearray(b"\x0a\x0b")
    assert to_string(data) == to_hex(data)


def test_to_string_other_values():
    assert to_string(42) == "42"
    assert to_string("text") == "text"


def test_get_type_mapping():
    assert get_type(str) is DataType.STRING
    assert get_type(bytes) is DataType.BYTES
    assert get_type(bytearray) is DataType.BYTES
    assert get_type(float) is DataType.UNKNOWN
    assert get_type(DataType.UINT32) is DataType.UINT32


def test_to_bytes_big_endian_pinned():
    assert to_bytes(0x0102, "big", DataType.INT16) == b"\x01\x02"


@pytest.mark.parametrize("data_type,value", INTEGER_CASES)
@pytest.mark.parametrize("order", ["big", "little"])
def test_integer_round_trip(data_type, value, order):
    encoded = to_bytes(value, order, data_type)
    assert bytes_to_any(encoded, data_type, order) == value


@pytest.mark.parametrize("data_type,value", INTEGER_CASES)
def test_little_endian_is_reverse_of_big(data_type, value):
    big = to_bytes(value, "big", data_type)
    assert to_bytes(value, "little", data_type) == big[::-1]


@pytest.mark.parametrize("data_type,value", INTEGER_CASES)
def test_extra_bytes_are_ignored(data_type, value):
    encoded = to_bytes(value, "big", data_type) + b"\x99\x99"
    assert bytes_to_any(encoded, data_type, "big") == value


@pytest.mark.parametrize("data_type,value", INTEGER_CASES)
def test_short_buffer_raises(data_type, value):
    encoded = to_bytes(value, "big", data_type)[:-1]
    with pytest.raises(BufferTooSmallError):
        bytes_to_any(encoded, data_type, "big")


def test_default_integer_width_is_int64():
    encoded = to_bytes(-5, "big")
    assert encoded == to_bytes(-5, "big", DataType.INT64)
    assert bytes_to_any(encoded, DataType.INT64, "big") == -5


def test_byte_reads_first_byte():
    assert bytes_to_any(b"\x07\x08", DataType.BYTE, "big") == 7


def test_empty_byte_raises():
    with pytest.raises(BufferTooSmallError):
        bytes_to_any(b"", DataType.BYTE, "big")


@pytest.mark.parametrize("data_type", [DataType.STRING, DataType.RUNE])
def test_string_round_trip(data_type):
    text = "hé€"
    encoded = to_bytes(text, "big", data_type)
    assert encoded == text.encode("utf-8")
    assert bytes_to_any(encoded, data_type, "little") == text


def test_bytes_are_copied():
    source = bytearray(b"\x01\x02")
    result = bytes_to_any(source, DataType.BYTES, "big")
    source[0] = 0xFF
    assert result == b"\x01\x02"
    assert to_bytes(source, "big") == bytes(source)


def test_unknown_data_type_raises():
    with pytest.raises(InvalidArgumentError):
        bytes_to_any(b"\x00\x00", DataType.UNKNOWN, "big")


def test_invalid_data_type_number_raises():
    with pytest.raises(InvalidArgumentError):
        bytes_to_any(b"\x00\x00", 99, "big")


def test_invalid_order_raises():
    with pytest.raises(InvalidArgumentError):
        to_bytes(1, "middle", DataType.INT16)
    with pytest.raises(InvalidArgumentError):
        bytes_to_any(b"\x00\x01", DataType.INT16, "middle")


@pytest.mark.parametrize(
    "data_type,value",
    [(DataType.INT16, 32768), (DataType.UINT16, -1), (DataType.BYTE, 256)],
)
def test_out_of_range_raises(data_type, value):
    with pytest.raises(ArgumentOutOfRangeError):
        to_bytes(value, "big", data_type)


@pytest.mark.parametrize("value", [1.5, True, None, [1, 2]])
def test_unsupported_value_raises(value):
    with pytest.raises(TypeError):
        to_bytes(value, "big")


def test_mismatched_data_type_raises():
    with pytest.raises(TypeError):
        to_bytes("x", "big", DataType.INT16)
    with pytest.raises(TypeError):
        to_bytes(b"x", "big", DataType.STRING)
    with pytest.raises(TypeError):
        to_bytes(1, "big", DataType.STRING)