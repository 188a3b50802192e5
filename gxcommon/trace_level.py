"""Trace verbosity levels."""

from __future__ import annotations

import json
from enum import IntEnum

from .errors import UnknownEnumError


class TraceLevel(IntEnum):
    """Trace verbosity; a higher level includes all lower-severity messages."""

    OFF = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    VERBOSE = 4

    @classmethod
    def parse(cls, value: str) -> TraceLevel:
        """Return the level named by ``value``, ignoring case."""
        if not isinstance(value, str):
            raise TypeError(f"trace level name must be a string, not {type(value).__name__}")
        try:
            return cls.__members__[value.upper()]
        except KeyError:
            raise UnknownEnumError(json.dumps(value, ensure_ascii=False)) from None

    def __str__(self) -> str:
        return self.name