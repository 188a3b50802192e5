"""Conversions between Python values, typed byte encodings and hex strings."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .errors import ArgumentOutOfRangeError, BufferTooSmallError, InvalidArgumentError


class DataType(IntEnum):
    """Type of the data read from or written to a media."""

    UNKNOWN = 0
    STRING = 1
    BYTES = 2
    BYTE = 3
    RUNE = 4
    INT16 = 5
    INT32 = 6
    INT64 = 7
    UINT16 = 8
    UINT32 = 9
    UINT64 = 10


# Width in bytes and signedness of each fixed-size integer type.
_INTEGER_LAYOUT: dict[DataType, tuple[int, bool]] = {
    DataType.BYTE: (1, False),
    DataType.INT16: (2, True),
    DataType.INT32: (4, True),
    DataType.INT64: (8, True),
    DataType.UINT16: (2, False),
    DataType.UINT32: (4, False),
    DataType.UINT64: (8, False),
}

_TEXT_TYPES = (DataType.STRING, DataType.RUNE)

_PYTHON_TYPES: dict[type, DataType] = {
    str: DataType.STRING,
    bytes: DataType.BYTES,
    bytearray: DataType.BYTES,
}

_BYTE_ORDERS = ("big", "little")


def get_type(python_type: Any) -> DataType:
    """Return the data type that corresponds to ``python_type``.

    A ``DataType`` is returned unchanged; types with no fixed mapping give
    ``DataType.UNKNOWN``.
    """
    if isinstance(python_type, DataType):
        return python_type
    return _PYTHON_TYPES.get(python_type, DataType.UNKNOWN)


def to_hex(value: bytes | bytearray | memoryview) -> str:
    """Return ``value`` as upper-case hex bytes separated by single spaces."""
    data = bytes(value)
    if not data:
        return ""
    return data.hex(" ").upper()


def to_string(value: Any) -> str:
    """Return ``value`` as text; byte sequences are shown in hex."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return to_hex(value)
    return str(value)


def _check_order(order: str) -> str:
    if order not in _BYTE_ORDERS:
        raise InvalidArgumentError(f"byte order must be 'big' or 'little', not {order!r}")
    return order


def _as_data_type(data_type: Any) -> DataType:
    try:
        return DataType(data_type)
    except ValueError:
        raise InvalidArgumentError(f"unknown data type {data_type!r}") from None


def bytes_to_any(
    data: bytes | bytearray | memoryview, data_type: DataType, order: str = "big"
) -> Any:
    """Decode ``data`` as a value of ``data_type`` using the given byte order.

    Integers read exactly their width from the start of ``data``; extra bytes
    are ignored.
    """
    data_type = _as_data_type(data_type)
    raw = bytes(data)
    if data_type in _TEXT_TYPES:
        return raw.decode("utf-8", errors="replace")
    if data_type is DataType.BYTES:
        return raw
    layout = _INTEGER_LAYOUT.get(data_type)
    if layout is None:
        raise InvalidArgumentError(f"cannot decode data type {data_type.name}")
    order = _check_order(order)
    width, signed = layout
    if len(raw) < width:
        raise BufferTooSmallError(
            f"{data_type.name} needs {width} bytes, got {len(raw)}"
        )
    return int.from_bytes(raw[:width], order, signed=signed)


def to_bytes(value: Any, order: str = "big", data_type: DataType | None = None) -> bytes:
    """Encode ``value`` as bytes.

    Text is encoded as UTF-8 and byte sequences are copied. Integers are
    written with the width of ``data_type``; without one they are written as
    ``INT64``.
    """
    kind = DataType.UNKNOWN if data_type is None else _as_data_type(data_type)

    if isinstance(value, (bytes, bytearray, memoryview)):
        if kind not in (DataType.UNKNOWN, DataType.BYTES):
            raise TypeError(f"cannot write bytes as {kind.name}")
        return bytes(value)

    if isinstance(value, str):
        if kind not in (DataType.UNKNOWN, *_TEXT_TYPES):
            raise TypeError(f"cannot write a string as {kind.name}")
        return value.encode("utf-8")

    if isinstance(value, int) and not isinstance(value, bool):
        if kind is DataType.UNKNOWN:
            kind = DataType.INT64
        layout = _INTEGER_LAYOUT.get(kind)
        if layout is None:
            raise TypeError(f"cannot write an integer as {kind.name}")
        order = _check_order(order)
        width, signed = layout
        try:
            return value.to_bytes(width, order, signed=signed)
        except OverflowError:
            raise ArgumentOutOfRangeError(
                f"{value} does not fit in {kind.name}"
            ) from None

    raise TypeError(f"unsupported type {type(value).__name__}")