"""
Core data types for logconverter.

These are the normalized records shared by every parser and renderer.
They contain no format logic - just structured data and the small helpers
that every tabular renderer needs (header collection, value formatting).
"""

import dataclasses as _dataclasses
import datetime as _datetime
import re as _re
import types as _types
import typing as _typing

import logconverter.constants as _constants

PropertyValue = int | bool | str
"""Closed union of the value types a record property may hold."""

MIN_TIMESTAMP = _datetime.datetime.min
"""Sentinel used when a source carries no usable timestamp."""

STANDARD_HEADERS: tuple[str, ...] = ("Timestamp", "Level", "Message", "Exception", "EventId")
"""Column headers for the five standard fields, in output order."""

_LEVEL_COLORS: dict[str, str] = {
    "ERROR": "red",
    "WARNING": "orange",
    "DEBUG": "gray",
    "INFO": "green",
}

_INTEGER_PATTERN = _re.compile(r"^[+-]?[0-9]+$")


def _freeze_properties(
    properties: _typing.Mapping[str, PropertyValue] | None,
) -> _typing.Mapping[str, PropertyValue]:
    return _types.MappingProxyType(dict(properties or {}))


@_dataclasses.dataclass(frozen=True)
class Record:
    """
    One normalized log event.

    Records are immutable once built. Parsers that need to extend a record
    (continuation lines in plain-text logs) build a replacement with
    with_continuation() instead of mutating it.
    """

    timestamp: _datetime.datetime = MIN_TIMESTAMP
    """Point in time; timezone-aware only when the source carried an offset."""

    level: str = _constants.DEFAULT_LEVEL
    """Severity tag, case preserved as read."""

    message: str = ""
    """Free-text body, may contain embedded newlines."""

    exception: str | None = None
    """Optional exception detail. None means absent (distinct from "")."""

    event_id: str | None = None
    """Optional event identifier. None means absent (distinct from "")."""

    properties: _typing.Mapping[str, PropertyValue] = _dataclasses.field(
        default_factory=dict, hash=False
    )
    """Extra key/value pairs, in insertion order. Compared but not hashed."""

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to swap in a read-only view
        object.__setattr__(self, "properties", _freeze_properties(self.properties))

    @property
    def has_timestamp(self) -> bool:
        """True unless the timestamp is the unset sentinel."""
        return self.timestamp != MIN_TIMESTAMP

    @property
    def level_color(self) -> str:
        """CSS colour name keyed by severity."""
        return _LEVEL_COLORS.get(self.level.upper(), "black")

    def is_level(self, name: str) -> bool:
        """Case-insensitive level comparison."""
        return self.level.casefold() == name.casefold()

    def with_continuation(self, line: str) -> "Record":
        """Return a copy with `line` appended to the message on a new line."""
        return _dataclasses.replace(self, message=f"{self.message}\n{line}")

    def to_dict(self) -> dict[str, _typing.Any]:
        """Plain-dict view using the canonical serialized field names."""
        return {
            "timestamp": self.timestamp,
            "level": self.level,
            "message": self.message,
            "exception": self.exception,
            "eventId": self.event_id,
            "properties": dict(self.properties),
        }


def coerce_property_value(raw: str) -> PropertyValue:
    """
    Best-effort typing of a textual property value.

    Tries integer first, then boolean, and falls back to the original string.

    Example:
        >>> coerce_property_value("8080"), coerce_property_value("True")
        (8080, True)
        >>> coerce_property_value("localhost")
        'localhost'
    """
    candidate = raw.strip()
    if _INTEGER_PATTERN.match(candidate):
        try:
            return int(candidate)
        except ValueError:
            # past the interpreter's int string-conversion digit limit
            pass
    lowered = candidate.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return raw


def format_property_value(value: PropertyValue | None) -> str:
    """Stringify a property value for text-based output formats."""
    if value is None:
        return ""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return str(value)
    return value


def format_display_timestamp(timestamp: _datetime.datetime) -> str:
    """Human-readable "YYYY-MM-DD HH:MM:SS" used by the table formats."""
    # isoformat zero-pads years below 1000; strftime("%Y") does not everywhere
    return timestamp.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")


def format_roundtrip_timestamp(timestamp: _datetime.datetime) -> str:
    """Lossless timestamp with sub-second precision and offset when known."""
    return timestamp.isoformat(timespec="microseconds")


def collect_property_keys(records: _typing.Iterable[Record]) -> list[str]:
    """
    Union of property keys across a batch, in first-seen order.

    Column order is part of the output contract, so this uses an
    insertion-ordered dict rather than a set.
    """
    seen: dict[str, None] = {}
    for record in records:
        for key in record.properties:
            seen.setdefault(key, None)
    return list(seen)


def column_headers(records: _typing.Sequence[Record]) -> list[str]:
    """Standard headers followed by every property key seen in the batch."""
    return [*STANDARD_HEADERS, *collect_property_keys(records)]
