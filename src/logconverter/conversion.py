"""
Conversion facade.

Single entry point that wires parsers to renderers:

    records = convert.parse("csv", raw_text)
    html = convert.render(records, "html", options)

File helpers pick the parser from the file extension. Rendering resolves
the target format before producing any output, so an unknown format fails
without partial results.
"""

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import logconverter.config.types as config_types
import logconverter.constants as _constants
import logconverter.core.types as core_types
import logconverter.parsers as parsers
import logconverter.renderers as renderers

_logger = _logging.getLogger(__name__)


def parse(format_tag: str, raw_text: str) -> list[core_types.Record]:
    """
    Parse raw text in the given input format.

    Args:
        format_tag: Input format ("json", "csv", "xml", "text"/"txt").
        raw_text: The full document.

    Raises:
        UnsupportedInputFormatError: Unknown format tag.
        MalformedInputError: Invalid JSON or XML document.
    """
    parser = parsers.get_parser(format_tag)
    records = parser.parse(raw_text)
    _logger.debug("Parsed %d record(s) as %s", len(records), parser.name)
    return records


def render(
    records: _typing.Iterable[core_types.Record],
    format_tag: str,
    options: config_types.RenderOptions | None = None,
) -> str:
    """
    Render records in the given output format.

    Args:
        records: Records in output order.
        format_tag: Output format ("markdown", "html", "json", "xml", "csv").
        options: Presentation switches (defaults to RenderOptions()).

    Raises:
        UnsupportedOutputFormatError: Unknown format tag.
    """
    renderer = renderers.get_renderer(format_tag)
    batch = list(records)
    text = renderer.render(batch, options or config_types.RenderOptions())
    _logger.debug("Rendered %d record(s) as %s", len(batch), renderer.name)
    return text


def convert(
    records: _typing.Iterable[core_types.Record],
    target_format: str,
    options: config_types.RenderOptions | None = None,
) -> str:
    """Render records to `target_format`. Same as render()."""
    return render(records, target_format, options)


def convert_to_bytes(
    records: _typing.Iterable[core_types.Record],
    target_format: str,
    options: config_types.RenderOptions | None = None,
) -> bytes:
    """Render records and encode the result as UTF-8."""
    return convert(records, target_format, options).encode(_constants.DEFAULT_ENCODING)


def convert_text(
    raw_text: str,
    source_format: str,
    target_format: str,
    options: config_types.RenderOptions | None = None,
) -> str:
    """Parse `raw_text` and render it, without touching the filesystem."""
    # resolve the target first so a bad tag costs no parsing
    renderers.get_renderer(target_format)
    return render(parse(source_format, raw_text), target_format, options)


def read_text_file(path: _pathlib.Path | str) -> str:
    """Read a UTF-8 text file, tolerating a byte-order mark."""
    return _pathlib.Path(path).read_text(encoding="utf-8-sig")


def load_file(path: _pathlib.Path | str) -> list[core_types.Record]:
    """
    Parse a file, choosing the parser from its extension.

    Raises:
        UnsupportedInputFormatError: Unrecognized extension.
        MalformedInputError: Invalid JSON or XML document.
        OSError: The file cannot be read.
    """
    parser = parsers.get_parser_for_path(path)
    records = parser.parse(read_text_file(path))
    _logger.debug("Loaded %d record(s) from %s", len(records), path)
    return records


def convert_file(
    path: _pathlib.Path | str,
    target_format: str,
    options: config_types.RenderOptions | None = None,
) -> str:
    """Load a file by extension and render it to `target_format`."""
    renderers.get_renderer(target_format)
    return render(load_file(path), target_format, options)


def convert_file_to_bytes(
    path: _pathlib.Path | str,
    target_format: str,
    options: config_types.RenderOptions | None = None,
) -> bytes:
    """Like convert_file(), encoded as UTF-8."""
    return convert_file(path, target_format, options).encode(_constants.DEFAULT_ENCODING)


def output_path_for(
    input_path: _pathlib.Path | str,
    target_format: str,
) -> _pathlib.Path:
    """Default output path: the input path with the target format's suffix."""
    renderer = renderers.get_renderer(target_format)
    return _pathlib.Path(input_path).with_suffix(renderer.extension)
