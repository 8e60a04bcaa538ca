"""
CSV input parser.

The first line is the header. Columns 0-4 are always timestamp, level,
message, exception and event id, whatever the header calls them; columns
5 and up become properties named by their header cell.

Cells are split on every comma. Quoted fields written by the CSV renderer
are NOT unescaped on read, so text containing commas or quotes does not
survive a CSV round trip.
"""

import logging as _logging
import re as _re

import logconverter.core.types as core_types
import logconverter.parsers.base as base

_logger = _logging.getLogger(__name__)

_LINE_BREAK = _re.compile(r"\r\n|\n")

_FIRST_PROPERTY_COLUMN = 5


def _split_row(line: str) -> list[str]:
    return [cell.strip() for cell in line.split(",")]


@base.register_parser
class CSVParser(base.Parser):
    """Parser for comma-separated logs with a header row."""

    name = "csv"
    extensions = (".csv",)

    def parse(self, raw_text: str) -> list[core_types.Record]:
        """Parse CSV text; fewer than two non-empty lines yields no records."""
        lines = [line for line in _LINE_BREAK.split(raw_text or "") if line]
        if len(lines) < 2:
            return []

        headers = _split_row(lines[0])
        return [self._parse_row(headers, _split_row(line)) for line in lines[1:]]

    def _parse_row(self, headers: list[str], cols: list[str]) -> core_types.Record:
        """Build a record from one data row."""

        def cell(index: int) -> str:
            return cols[index] if index < len(cols) else ""

        properties: dict[str, core_types.PropertyValue] = {}
        for index in range(_FIRST_PROPERTY_COLUMN, min(len(headers), len(cols))):
            properties[headers[index]] = core_types.coerce_property_value(cols[index])

        if len(cols) > len(headers):
            _logger.debug(
                "Row has %d cells but header has %d; extra cells ignored",
                len(cols),
                len(headers),
            )

        return core_types.Record(
            timestamp=base.parse_timestamp(cell(0)),
            level=cell(1),
            message=cell(2),
            exception=cell(3) or None,
            event_id=cell(4) or None,
            properties=properties,
        )
