"""Event types, enumerations, localized errors and conversion helpers for media."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "errors",
    "events",
    "media_state",
    "receive_parameters",
    "trace_level",
    "trace_types",
]