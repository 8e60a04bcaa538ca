"""
Core record model and error taxonomy for logconverter.
"""

from logconverter.core.errors import (
    LogConverterError,
    MalformedInputError,
    UnsupportedInputFormatError,
    UnsupportedOutputFormatError,
)
from logconverter.core.types import (
    MIN_TIMESTAMP,
    STANDARD_HEADERS,
    PropertyValue,
    Record,
    coerce_property_value,
    collect_property_keys,
    column_headers,
    format_display_timestamp,
    format_property_value,
    format_roundtrip_timestamp,
)

__all__ = [
    # Errors
    "LogConverterError",
    "MalformedInputError",
    "UnsupportedInputFormatError",
    "UnsupportedOutputFormatError",
    # Record model
    "MIN_TIMESTAMP",
    "STANDARD_HEADERS",
    "PropertyValue",
    "Record",
    "coerce_property_value",
    "collect_property_keys",
    "column_headers",
    "format_display_timestamp",
    "format_property_value",
    "format_roundtrip_timestamp",
]
