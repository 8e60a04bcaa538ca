"""
XML input parser.

Expected shape:

    <logs>
      <log>
        <timestamp>2025-04-24T10:00:00+03:00</timestamp>
        <level>INFO</level>
        <message>Server started</message>
        <eventId>STARTUP</eventId>
        <Host>localhost</Host>
      </log>
    </logs>

The root element name is not checked. Any child of <log> other than the
standard five becomes a property.
"""

import logging as _logging
import xml.etree.ElementTree as _ElementTree

import logconverter.core.errors as errors
import logconverter.core.types as core_types
import logconverter.parsers.base as base

_logger = _logging.getLogger(__name__)

_STANDARD_ELEMENTS = frozenset({"timestamp", "level", "message", "exception", "eventId"})


def _local_name(tag: str) -> str:
    """Strip a "{namespace}" prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _text(element: _ElementTree.Element | None) -> str | None:
    """Concatenated text of an element and its descendants, None if missing."""
    if element is None:
        return None
    return "".join(element.itertext())


@base.register_parser
class XMLParser(base.Parser):
    """Parser for a root element of repeated <log> children."""

    name = "xml"
    extensions = (".xml",)

    def parse(self, raw_text: str) -> list[core_types.Record]:
        """
        Parse an XML document into records.

        Raises:
            MalformedInputError: If the text is not well-formed XML.
        """
        try:
            root = _ElementTree.fromstring(raw_text)
        except _ElementTree.ParseError as e:
            raise errors.MalformedInputError(self.name, str(e)) from e

        elements = root.findall("log")
        if not elements:
            _logger.debug("No <log> elements under <%s>", _local_name(root.tag))
        return [self._parse_log(element) for element in elements]

    def _parse_log(self, element: _ElementTree.Element) -> core_types.Record:
        """Build a record from one <log> element."""
        timestamp_text = _text(element.find("timestamp"))
        exception = _text(element.find("exception"))
        event_id = _text(element.find("eventId"))

        properties: dict[str, core_types.PropertyValue] = {}
        for child in element:
            name = _local_name(child.tag)
            if name in _STANDARD_ELEMENTS:
                continue
            properties[name] = core_types.coerce_property_value(_text(child) or "")

        if timestamp_text is None:
            timestamp = core_types.MIN_TIMESTAMP
        else:
            timestamp = base.parse_timestamp(timestamp_text)

        return core_types.Record(
            timestamp=timestamp,
            level=_text(element.find("level")) or "",
            message=_text(element.find("message")) or "",
            exception=exception or None,
            event_id=event_id or None,
            properties=properties,
        )
