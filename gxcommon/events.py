"""Event arguments passed to media event handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .common import to_string
from .media_state import MediaState
from .trace_types import TraceTypes


@dataclass
class MediaStateEventArgs:
    """Arguments of a media state change event.

    ``accepted`` is true by default; a handler may clear it to reject the
    state change.
    """

    state: MediaState
    accepted: bool = True


@dataclass(frozen=True)
class ReceiveEventArgs:
    """Data received from a media, with media-dependent sender information."""

    data: bytes
    sender_info: str = ""

    def __str__(self) -> str:
        return f"{self.sender_info}\t{to_string(self.data)}"


@dataclass(frozen=True)
class TraceEventArgs:
    """A trace event: its kind, optional payload and receiver information.

    The timestamp is taken when the event is created unless given.
    """

    trace_type: TraceTypes
    data: Any = None
    receiver: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        ts = self.timestamp
        clock = f"{ts:%H:%M:%S}.{ts.microsecond // 1000:03d}"
        return f"{clock}\t{self.trace_type}\t{to_string(self.data)}"