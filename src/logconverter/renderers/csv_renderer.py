"""
CSV renderer.

Fields containing a comma or a double quote are quoted, with embedded
quotes doubled. Note that CSVParser does not undo this quoting.
"""

import typing as _typing

import logconverter.config.types as config_types
import logconverter.core.types as core_types
import logconverter.renderers.base as base


def csv_escape(value: str | None) -> str:
    """
    Quote a CSV field when needed.

    Example:
        >>> csv_escape('say "hi", then leave')
        '"say ""hi"", then leave"'
    """
    if not value:
        return ""
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


@base.register_renderer
class CSVRenderer(base.Renderer):
    """Renders records as comma-separated values with a header row."""

    name = "csv"
    extension = ".csv"
    media_type = "text/csv"

    def render(
        self,
        records: _typing.Sequence[core_types.Record],
        options: config_types.RenderOptions,  # noqa: ARG002 - no CSV-specific options
    ) -> str:
        """Render a header row followed by one row per record."""
        property_keys = core_types.collect_property_keys(records)
        headers = [*core_types.STANDARD_HEADERS, *property_keys]

        lines = [",".join(csv_escape(header) for header in headers)]
        for record in records:
            row = [
                core_types.format_roundtrip_timestamp(record.timestamp),
                csv_escape(record.level),
                csv_escape(record.message),
                csv_escape(record.exception),
                csv_escape(record.event_id),
            ]
            row.extend(
                csv_escape(core_types.format_property_value(record.properties.get(key)))
                for key in property_keys
            )
            lines.append(",".join(row))

        return "\n".join(lines) + "\n"
