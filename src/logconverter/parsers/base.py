"""
Base class and registry for input parsers.

Every parser turns the full text of one document into a list of
normalized records. Parsers are stateless, so the registry hands out
shared instances.
"""

import abc as _abc
import datetime as _datetime
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import logconverter.core.errors as errors
import logconverter.core.types as core_types

_logger = _logging.getLogger(__name__)

# Layouts accepted after strict ISO 8601 parsing fails
_LENIENT_TIMESTAMP_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%d/%m/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M:%S",
    "%d.%m.%Y %H:%M:%S",
    "%d %b %Y %H:%M:%S",
    "%a, %d %b %Y %H:%M:%S %Z",
    "%a, %d %b %Y %H:%M:%S %z",
    "%Y-%m-%d %H:%M",
    "%d/%m/%Y %H:%M",
    "%d.%m.%Y %H:%M",
    "%Y/%m/%d",
    "%d/%m/%Y",
    "%d.%m.%Y",
)


def parse_iso_timestamp(value: str) -> _datetime.datetime | None:
    """Strict ISO 8601 parse; returns None when `value` is not ISO 8601."""
    try:
        return _datetime.datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def parse_timestamp(value: str | None) -> _datetime.datetime:
    """
    Parse a timestamp, strict first and then leniently.

    Returns:
        The parsed datetime, or MIN_TIMESTAMP when nothing matches.
    """
    if value is None or not value.strip():
        return core_types.MIN_TIMESTAMP

    parsed = parse_iso_timestamp(value)
    if parsed is not None:
        return parsed

    candidate = value.strip()
    for layout in _LENIENT_TIMESTAMP_FORMATS:
        try:
            return _datetime.datetime.strptime(candidate, layout)
        except ValueError:
            continue

    _logger.debug("Unparseable timestamp %r, using minimum value", value)
    return core_types.MIN_TIMESTAMP


class Parser(_abc.ABC):
    """
    Abstract base class for all input parsers.

    Subclasses parse a whole document at once. Individual bad fields are
    recovered with fallback values; only a syntactically broken container
    (JSON, XML) raises MalformedInputError.
    """

    name: _typing.ClassVar[str]
    """Format tag, e.g. "json"."""

    extensions: _typing.ClassVar[tuple[str, ...]]
    """File suffixes (with dot, lower case) handled by this parser."""

    aliases: _typing.ClassVar[tuple[str, ...]] = ()
    """Extra tags accepted by get_parser()."""

    @_abc.abstractmethod
    def parse(self, raw_text: str) -> list[core_types.Record]:
        """
        Parse a complete document.

        Args:
            raw_text: The full document text.

        Returns:
            Records in document order.
        """
        ...


_PARSERS: dict[str, Parser] = {}
_BY_EXTENSION: dict[str, Parser] = {}
_BY_TAG: dict[str, Parser] = {}

ParserT = _typing.TypeVar("ParserT", bound=type[Parser])


def register_parser(parser_class: ParserT) -> ParserT:
    """Class decorator that registers a parser by name, aliases and extensions."""
    parser = parser_class()
    if parser.name in _PARSERS:
        _logger.warning("Parser %r already registered, overwriting", parser.name)

    _PARSERS[parser.name] = parser
    for tag in (parser.name, *parser.aliases):
        _BY_TAG[tag.lower()] = parser
    for ext in parser.extensions:
        _BY_EXTENSION[ext.lower()] = parser

    _logger.debug("Registered parser: %s", parser.name)
    return parser_class


def get_parser(format_tag: str) -> Parser:
    """
    Look up a parser by format tag (case-insensitive).

    Raises:
        UnsupportedInputFormatError: If no parser handles the tag.
    """
    parser = _BY_TAG.get(format_tag.strip().lower().lstrip("."))
    if parser is None:
        raise errors.UnsupportedInputFormatError(format_tag)
    return parser


def get_parser_for_path(path: _pathlib.Path | str) -> Parser:
    """
    Select a parser from a file's extension (case-insensitive).

    Raises:
        UnsupportedInputFormatError: If the extension is not recognized.
    """
    suffix = _pathlib.Path(path).suffix.lower()
    parser = _BY_EXTENSION.get(suffix)
    if parser is None:
        raise errors.UnsupportedInputFormatError(suffix or str(path))
    return parser


def available_parsers() -> list[Parser]:
    """All registered parsers, in registration order."""
    return list(_PARSERS.values())
