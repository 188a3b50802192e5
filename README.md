# gxcommon

Common building blocks for communication media components: event
argument types, trace and state enumerations, localized error types,
synchronous read parameters and helpers for turning values into bytes
and back.

## Installation

```
pip install gxcommon
```

For running the tests:

```
pip install "gxcommon[test]"
pytest
```

## Contents

- `gxcommon.common`
  - `DataType`: `UNKNOWN`, `STRING`, `BYTES`, `BYTE`, `RUNE`, `INT16`,
    `INT32`, `INT64`, `UINT16`, `UINT32`, `UINT64`.
  - `get_type(python_type)`: maps `str` to `STRING` and `bytes` or
    `bytearray` to `BYTES`. A `DataType` is returned unchanged, and anything
    else gives `UNKNOWN`.
  - `to_hex(value)`: upper-case hex bytes separated by spaces, for example
    `"01 AB FF"`. Empty input gives `""`.
  - `to_string(value)`: byte sequences as hex, everything else through `str()`.
  - `bytes_to_any(data, data_type, order="big")`: decodes text as UTF-8,
    copies bytes, or reads a fixed-width integer from the start of `data`.
    Extra bytes are ignored. `order` is `"big"` or `"little"`.
  - `to_bytes(value, order="big", data_type=None)`: encodes strings as
    UTF-8 and copies byte sequences. It writes integers with the width of
    `data_type`, or as `INT64` when no type is given.
- `gxcommon.receive_parameters.ReceiveParameters`: a dataclass that
  describes a synchronous read. Its fields are `peek`, `eop`, `count`,
  `wait_time` (default `-1`, which waits forever), `all_data`, `reply` and
  `reply_type`. `ReceiveParameters.for_type(t)` builds the defaults with
  `reply_type=get_type(t)`.
- `gxcommon.events`
  - `MediaStateEventArgs(state, accepted=True)`
  - `ReceiveEventArgs(data, sender_info="")`: prints as
    `"<sender_info>\t<hex data>"`.
  - `TraceEventArgs(trace_type, data=None, receiver="", timestamp=now)`:
    prints as `"HH:MM:SS.mmm\t<trace type>\t<data>"`.
- Enumerations that parse from their names, case-insensitively, through
  `parse(name)`, and print as their upper-case names:
  - `gxcommon.trace_level.TraceLevel`: `OFF`, `ERROR`, `WARNING`, `INFO`,
    `VERBOSE`.
  - `gxcommon.media_state.MediaState`: `CLOSED`, `OPEN`, `OPENING`,
    `CLOSING`, `CHANGED`.
  - `gxcommon.trace_types.TraceTypes`: a flag enumeration with the members
    `SENT`, `RECEIVED`, `ERROR`, `WARNING`, `INFO`.
- `gxcommon.errors`
  - `GXError` and its subclasses `UnknownEnumError`,
    `ConnectionClosedError`, `InvalidArgumentError`,
    `ArgumentOutOfRangeError` and `BufferTooSmallError`.
  - `translate(key, language)` and `GXError.localized(language)` give
    messages in English, German, Finnish, Swedish, Spanish and Estonian.
    Unsupported languages fall back to English.

## Examples

```python
from gxcommon.common import DataType, bytes_to_any, to_bytes, to_hex
from gxcommon.trace_level import TraceLevel

level = TraceLevel.parse("verbose")
print(level)                      # VERBOSE

raw = to_bytes(0x1234, "big", DataType.UINT16)
print(to_hex(raw))                # 12 34
print(bytes_to_any(raw, DataType.UINT16, "little"))   # 13330
```

```python
from gxcommon.receive_parameters import ReceiveParameters

params = ReceiveParameters.for_type(bytes)
params.eop = 0x7E
params.wait_time = 5000
```

## Errors

- Parsing an unknown name raises `UnknownEnumError`.
- Too few bytes for an integer type raises `BufferTooSmallError`.
- An integer that does not fit its type raises `ArgumentOutOfRangeError`.
- An unknown data type or byte order raises `InvalidArgumentError`.
- A value that cannot be written as the requested type raises `TypeError`.

## What this package does not do

The package does not include a media interface or any concrete media,
such as a serial port or a TCP connection. It does not open connections,
send or receive data, or call event handlers. It only provides the types
and helpers that such media would use.