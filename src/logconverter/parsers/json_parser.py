"""
JSON input parser.

Reads an array of objects. Field names are matched case-insensitively and
without regard to underscores, so "EventId", "eventId" and "event_id" all
land on Record.event_id. Unknown top-level fields are ignored.
"""

import json as _json
import logging as _logging
import typing as _typing

import logconverter.constants as _constants
import logconverter.core.errors as errors
import logconverter.core.types as core_types
import logconverter.parsers.base as base

_logger = _logging.getLogger(__name__)


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


def _as_text(value: _typing.Any) -> str:
    """Text form of a scalar JSON value; nested values become compact JSON."""
    if isinstance(value, str):
        return value
    return _json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _as_property_value(value: _typing.Any) -> core_types.PropertyValue:
    if isinstance(value, (bool, int, str)):
        return value
    return _as_text(value)


@base.register_parser
class JSONParser(base.Parser):
    """Parser for a JSON array of log objects."""

    name = "json"
    extensions = (".json",)

    def parse(self, raw_text: str) -> list[core_types.Record]:
        """
        Parse a JSON array of objects into records.

        Empty input and a literal `null` yield no records.

        Raises:
            MalformedInputError: If the text is not valid JSON, or is not an
                array of objects.
        """
        if not raw_text or not raw_text.strip():
            return []

        try:
            document = _json.loads(raw_text)
        except _json.JSONDecodeError as e:
            raise errors.MalformedInputError(self.name, str(e)) from e

        if document is None:
            return []
        if not isinstance(document, list):
            raise errors.MalformedInputError(
                self.name, f"expected an array of objects, got {type(document).__name__}"
            )

        records: list[core_types.Record] = []
        for index, item in enumerate(document):
            if not isinstance(item, dict):
                raise errors.MalformedInputError(
                    self.name, f"element {index} is {type(item).__name__}, expected an object"
                )
            records.append(self._parse_object(item))
        return records

    def _parse_object(self, item: dict[str, _typing.Any]) -> core_types.Record:
        """Map one JSON object onto a Record."""
        fields = {_normalize_key(key): value for key, value in item.items()}

        timestamp = fields.get("timestamp")
        level = fields.get("level")
        message = fields.get("message")
        exception = fields.get("exception")
        event_id = fields.get("eventid")

        return core_types.Record(
            timestamp=base.parse_timestamp(timestamp if isinstance(timestamp, str) else None),
            level=_constants.DEFAULT_LEVEL if level is None else _as_text(level),
            message="" if message is None else _as_text(message),
            exception=None if exception is None else _as_text(exception),
            event_id=None if event_id is None else _as_text(event_id),
            properties=self._parse_properties(fields.get("properties")),
        )

    def _parse_properties(
        self, raw: _typing.Any
    ) -> dict[str, core_types.PropertyValue]:
        """Read the nested properties object; null entries are dropped."""
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            _logger.debug("Ignoring non-object properties value: %r", raw)
            return {}
        return {
            str(key): _as_property_value(value)
            for key, value in raw.items()
            if value is not None
        }
