"""
Input parsers for logconverter.

Importing this package registers every built-in parser:
- JSONParser: array of JSON objects
- CSVParser: header row plus comma-separated rows
- XMLParser: root element of <log> children
- TextParser: "YYYY-MM-DD HH:MM:SS - message" lines
"""

from logconverter.parsers.base import (
    Parser,
    available_parsers,
    get_parser,
    get_parser_for_path,
    parse_timestamp,
    register_parser,
)
from logconverter.parsers.csv_parser import CSVParser
from logconverter.parsers.json_parser import JSONParser
from logconverter.parsers.text_parser import TextParser
from logconverter.parsers.xml_parser import XMLParser

__all__ = [
    # Base and registry
    "Parser",
    "available_parsers",
    "get_parser",
    "get_parser_for_path",
    "parse_timestamp",
    "register_parser",
    # Parsers
    "CSVParser",
    "JSONParser",
    "TextParser",
    "XMLParser",
]
