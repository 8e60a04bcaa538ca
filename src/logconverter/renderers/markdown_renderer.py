"""
Markdown renderer.

Produces a single pipe table. Cell contents are not escaped, so a pipe
character inside a message will split the cell in most viewers.
"""

import typing as _typing

import logconverter.config.types as config_types
import logconverter.core.types as core_types
import logconverter.renderers.base as base


def format_markdown_table(
    headers: list[str],
    rows: list[list[str]],
) -> str:
    """
    Format a markdown table.

    Args:
        headers: Column header strings.
        rows: List of rows, each row is a list of cell values.

    Returns:
        Markdown table with a trailing newline on every line.

    Example:
        >>> format_markdown_table(["Name", "Value"], [["Total", "100"]])
        '| Name | Value |\\n| --- | --- |\\n| Total | 100 |\\n'
    """
    lines = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines) + "\n"


@base.register_renderer
class MarkdownRenderer(base.Renderer):
    """Renders records as a Markdown table."""

    name = "markdown"
    extension = ".md"
    media_type = "text/markdown"
    aliases = ("md",)

    def render(
        self,
        records: _typing.Sequence[core_types.Record],
        options: config_types.RenderOptions,
    ) -> str:
        """Render the batch as one table, one row per record."""
        property_keys = core_types.collect_property_keys(records)
        headers = [*core_types.STANDARD_HEADERS, *property_keys]

        rows: list[list[str]] = []
        for record in records:
            level = record.level
            if options.use_color:
                level = f'<span style="color:{record.level_color}">{record.level}</span>'

            row = [
                core_types.format_display_timestamp(record.timestamp),
                level,
                record.message,
                record.exception or "",
                record.event_id or "",
            ]
            row.extend(
                core_types.format_property_value(record.properties.get(key))
                for key in property_keys
            )
            rows.append(row)

        return format_markdown_table(headers, rows)
