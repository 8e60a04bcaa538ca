"""
Plain-text log parser.

A line of the form `YYYY-MM-DD HH:MM:SS - message` starts a new record.
Any other non-blank line continues the message of the latest record.
Lines before the first record are dropped. The level is guessed from the
message: "ERROR" if it mentions "hata" (Turkish for "error"), else "INFO".
"""

import dataclasses as _dataclasses
import datetime as _datetime
import logging as _logging
import re as _re

import logconverter.constants as _constants
import logconverter.core.types as core_types
import logconverter.parsers.base as base

_logger = _logging.getLogger(__name__)

_LINE_BREAK = _re.compile(r"\r\n|\n")

_ENTRY_PATTERN = _re.compile(
    r"^(?P<ts>[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}) - (?P<msg>.*)$"
)

_ENTRY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def guess_level(message: str) -> str:
    """Heuristic severity for a plain-text message."""
    if _constants.ERROR_KEYWORD in message.lower():
        return "ERROR"
    return _constants.DEFAULT_LEVEL


@_dataclasses.dataclass
class _Accumulator:
    """Records built so far plus the index of the one still open."""

    records: list[core_types.Record] = _dataclasses.field(default_factory=list)
    tail: int | None = None

    def start(self, record: core_types.Record) -> None:
        self.records.append(record)
        self.tail = len(self.records) - 1

    def continue_tail(self, line: str) -> bool:
        """Append `line` to the open record. False if there is none."""
        if self.tail is None:
            return False
        self.records[self.tail] = self.records[self.tail].with_continuation(line)
        return True


@base.register_parser
class TextParser(base.Parser):
    """Parser for loosely structured, line-oriented text logs."""

    name = "text"
    extensions = (".txt", ".log")
    aliases = ("txt",)

    def parse(self, raw_text: str) -> list[core_types.Record]:
        """Parse text lines into records, folding continuation lines."""
        acc = _Accumulator()

        for line in _LINE_BREAK.split(raw_text or ""):
            if not line.strip():
                continue

            record = self._parse_entry(line)
            if record is not None:
                acc.start(record)
            elif not acc.continue_tail(line):
                _logger.debug("Dropping line before first entry: %r", line)

        return acc.records

    def _parse_entry(self, line: str) -> core_types.Record | None:
        """Return a new record if `line` opens an entry, else None."""
        match = _ENTRY_PATTERN.match(line)
        if not match:
            return None

        try:
            timestamp = _datetime.datetime.strptime(match["ts"], _ENTRY_TIMESTAMP_FORMAT)
        except ValueError:
            # e.g. 2025-02-30: not a real date, treat as continuation text
            return None

        message = match["msg"]
        return core_types.Record(
            timestamp=timestamp,
            level=guess_level(message),
            message=message,
        )
