"""Lifecycle states of a media connection."""

from __future__ import annotations

import json
from enum import IntEnum

from .errors import UnknownEnumError


class MediaState(IntEnum):
    """State of a media connection."""

    CLOSED = 1
    OPEN = 2
    OPENING = 3
    CLOSING = 4
    CHANGED = 5

    @classmethod
    def parse(cls, value: str) -> MediaState:
        """Return the state named by ``value``, ignoring case."""
        if not isinstance(value, str):
            raise TypeError(f"media state name must be a string, not {type(value).__name__}")
        try:
            return cls.__members__[value.upper()]
        except KeyError:
            raise UnknownEnumError(json.dumps(value, ensure_ascii=False)) from None

    def __str__(self) -> str:
        return self.name