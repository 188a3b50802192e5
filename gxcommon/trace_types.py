"""Kinds of trace events."""

from __future__ import annotations

import json
from enum import IntFlag

from .errors import UnknownEnumError


class TraceTypes(IntFlag):
    """Trace event kinds; values are bits and may be combined."""

    SENT = 0x1
    RECEIVED = 0x2
    ERROR = 0x4
    WARNING = 0x8
    INFO = 0x10

    @classmethod
    def parse(cls, value: str) -> TraceTypes:
        """Return the trace type named by ``value``, ignoring case."""
        if not isinstance(value, str):
            raise TypeError(f"trace type name must be a string, not {type(value).__name__}")
        try:
            return cls.__members__[value.upper()]
        except KeyError:
            raise UnknownEnumError(json.dumps(value, ensure_ascii=False)) from None

    def __str__(self) -> str:
        for member in type(self).__members__.values():
            if member.value == self.value:
                return member.name
        return ""