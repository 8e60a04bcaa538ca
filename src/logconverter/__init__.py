"""
logconverter - log format conversion

Parses JSON, CSV, XML and plain-text logs into one record model and
renders them as Markdown, HTML, JSON, XML or CSV.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("logconverter")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from logconverter.config import RenderOptions, Settings  # noqa: E402
from logconverter.conversion import (  # noqa: E402
    convert,
    convert_file,
    convert_file_to_bytes,
    convert_text,
    convert_to_bytes,
    load_file,
    parse,
    render,
)
from logconverter.core import (  # noqa: E402
    LogConverterError,
    MalformedInputError,
    Record,
    UnsupportedInputFormatError,
    UnsupportedOutputFormatError,
)

__all__ = [
    "__version__",
    "__version_info__",
    # Model and options
    "Record",
    "RenderOptions",
    "Settings",
    # Conversion API
    "convert",
    "convert_file",
    "convert_file_to_bytes",
    "convert_text",
    "convert_to_bytes",
    "load_file",
    "parse",
    "render",
    # Errors
    "LogConverterError",
    "MalformedInputError",
    "UnsupportedInputFormatError",
    "UnsupportedOutputFormatError",
]
