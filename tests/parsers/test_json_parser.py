"""Tests for the JSON input parser."""

import datetime as _datetime

import pytest as _pytest

import logconverter.core as core
import logconverter.parsers as parsers


@_pytest.fixture
def parser() -> parsers.JSONParser:
    return parsers.JSONParser()


class TestJSONParser:
    """Tests for JSONParser.parse()."""

    def test_full_object(self, parser: parsers.JSONParser) -> None:
        """All standard fields and typed properties are read."""
        text = """[
          {
            "Timestamp": "2025-04-24T10:00:00+03:00",
            "Level": "WARNING",
            "Message": "Disk almost full",
            "Exception": "IOError",
            "EventId": "DISK01",
            "Properties": {"Host": "srv1", "Free": 12, "Critical": false}
          }
        ]"""
        [record] = parser.parse(text)
        tz = _datetime.timezone(_datetime.timedelta(hours=3))
        assert record.timestamp == _datetime.datetime(2025, 4, 24, 10, 0, 0, tzinfo=tz)
        assert record.level == "WARNING"
        assert record.message == "Disk almost full"
        assert record.exception == "IOError"
        assert record.event_id == "DISK01"
        assert dict(record.properties) == {"Host": "srv1", "Free": 12, "Critical": False}
        assert list(record.properties) == ["Host", "Free", "Critical"]

    @_pytest.mark.parametrize("key", ["EventId", "eventId", "eventid", "event_id", "EVENT_ID"])
    def test_field_names_ignore_case_and_underscores(
        self, parser: parsers.JSONParser, key: str
    ) -> None:
        [record] = parser.parse(f'[{{"{key}": "E1"}}]')
        assert record.event_id == "E1"

    def test_missing_fields_use_defaults(self, parser: parsers.JSONParser) -> None:
        [record] = parser.parse("[{}]")
        assert record.timestamp == core.MIN_TIMESTAMP
        assert record.level == "INFO"
        assert record.message == ""
        assert record.exception is None
        assert record.event_id is None
        assert dict(record.properties) == {}

    def test_empty_strings_stay_empty(self, parser: parsers.JSONParser) -> None:
        """An explicit empty exception is distinct from a missing one."""
        [record] = parser.parse('[{"exception": "", "eventId": ""}]')
        assert record.exception == ""
        assert record.event_id == ""

    def test_null_property_values_are_dropped(self, parser: parsers.JSONParser) -> None:
        [record] = parser.parse('[{"properties": {"a": null, "b": 1}}]')
        assert dict(record.properties) == {"b": 1}

    def test_nested_property_values_become_json_text(
        self, parser: parsers.JSONParser
    ) -> None:
        [record] = parser.parse('[{"properties": {"tags": ["a", "b"], "ratio": 0.5}}]')
        assert record.properties["tags"] == '["a","b"]'
        assert record.properties["ratio"] == "0.5"

    def test_non_object_properties_ignored(self, parser: parsers.JSONParser) -> None:
        [record] = parser.parse('[{"message": "x", "properties": [1, 2]}]')
        assert dict(record.properties) == {}

    def test_unparseable_timestamp_uses_minimum(self, parser: parsers.JSONParser) -> None:
        [record] = parser.parse('[{"timestamp": "yesterday-ish"}]')
        assert record.timestamp == core.MIN_TIMESTAMP

    def test_lenient_timestamp(self, parser: parsers.JSONParser) -> None:
        [record] = parser.parse('[{"timestamp": "24/04/2025 10:00:00"}]')
        assert record.timestamp == _datetime.datetime(2025, 4, 24, 10, 0, 0)

    @_pytest.mark.parametrize("text", ["", "   \n", "null", "[]"])
    def test_empty_documents(self, parser: parsers.JSONParser, text: str) -> None:
        assert parser.parse(text) == []

    @_pytest.mark.parametrize(
        "text",
        ['[{"level": "INFO"', '{"level": "INFO"}', '"text"', '[1, 2]', "[[{}]]"],
    )
    def test_malformed_documents(self, parser: parsers.JSONParser, text: str) -> None:
        with _pytest.raises(core.MalformedInputError) as exc_info:
            parser.parse(text)
        assert exc_info.value.format_tag == "json"

    def test_unknown_top_level_fields_ignored(self, parser: parsers.JSONParser) -> None:
        [record] = parser.parse('[{"message": "m", "extra": 1}]')
        assert record.message == "m"
        assert dict(record.properties) == {}

    def test_order_preserved(self, parser: parsers.JSONParser) -> None:
        records = parser.parse('[{"message": "1"}, {"message": "2"}, {"message": "3"}]')
        assert [r.message for r in records] == ["1", "2", "3"]
