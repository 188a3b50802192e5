"""Parameters of a synchronous read from a media."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .common import DataType, get_type


@dataclass
class ReceiveParameters:
    """Settings used when data is read synchronously.

    ``peek`` leaves the data in the buffer, ``eop`` is the end-of-packet
    marker waited for, ``count`` the number of bytes to read, ``wait_time``
    the maximum wait in milliseconds (-1 waits forever), ``all_data`` moves
    all received data to ``reply``, and ``reply_type`` is the type of the
    reply (``UNKNOWN`` means it follows from ``reply``).
    """

    peek: bool = False
    eop: Any = None
    count: int = 0
    wait_time: int = -1
    all_data: bool = False
    reply: Any = None
    reply_type: DataType = DataType.UNKNOWN

    @classmethod
    def for_type(cls, reply_type: Any) -> ReceiveParameters:
        """Return default parameters whose reply has the given type."""
        return cls(reply_type=get_type(reply_type))