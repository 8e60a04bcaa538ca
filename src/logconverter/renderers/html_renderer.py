"""
HTML renderer.

Produces a standalone document with an optional stylesheet, a summary
banner, one table row per record, group header rows and collapsible
<details> blocks for long text. All record content is escaped.
"""

import html as _html
import typing as _typing

import logconverter.config.types as config_types
import logconverter.constants as _constants
import logconverter.core.types as core_types
import logconverter.renderers.base as base

STYLESHEET = (
    "table{border-collapse:collapse;width:100%;}"
    "th,td{padding:8px;border:1px solid #ccc;vertical-align:top;}"
    "tr.error{background:#fdd;}tr.warn,tr.warning{background:#ffeec0;}"
    "tr.info{background:#e8f4fd;}tr.debug{background:#f4f4f4;}"
    ".group-header th{background:#333;color:#fff;text-align:left;}"
    "summary{cursor:pointer;font-weight:bold;}pre{white-space:pre-wrap;margin:0;}"
)

EXCEPTION_SUMMARY_LABEL = "Details"


def _escape(text: str) -> str:
    return _html.escape(text, quote=True)


def _preview(escaped: str, length: int) -> str:
    """First `length` characters of escaped text, never ending mid-entity."""
    preview = escaped[:length]
    amp = preview.rfind("&")
    if amp != -1 and ";" not in preview[amp:]:
        preview = preview[:amp]
    return preview


class LevelCounts(_typing.NamedTuple):
    """Counts shown in the summary banner."""

    total: int
    error: int
    warn: int
    info: int


def count_levels(records: _typing.Sequence[core_types.Record]) -> LevelCounts:
    """
    Count records for the summary banner.

    Only levels exactly equal to ERROR or WARN (ignoring case) are counted
    separately; everything else, including WARNING and DEBUG, is info.
    """
    total = len(records)
    error = sum(1 for record in records if record.is_level("ERROR"))
    warn = sum(1 for record in records if record.is_level("WARN"))
    return LevelCounts(total=total, error=error, warn=warn, info=total - error - warn)


@base.register_renderer
class HTMLRenderer(base.Renderer):
    """Renders records as a standalone HTML report."""

    name = "html"
    extension = ".html"
    media_type = "text/html"
    aliases = ("htm",)

    def render(
        self,
        records: _typing.Sequence[core_types.Record],
        options: config_types.RenderOptions,
    ) -> str:
        """Render the full document."""
        property_keys = core_types.collect_property_keys(records)
        headers = [*core_types.STANDARD_HEADERS, *property_keys]

        lines: list[str] = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            f'<head><meta charset="utf-8"><title>{_escape(options.title)}</title>',
        ]
        if options.include_styles:
            lines.extend(["<style>", STYLESHEET, "</style>"])
        lines.append("</head><body>")

        if options.enable_summary:
            lines.append(self._render_summary(count_levels(records)))

        lines.append("<table>")
        lines.append("<thead><tr>")
        lines.extend(f"<th>{_escape(header)}</th>" for header in headers)
        lines.append("</tr></thead><tbody>")

        current_group: str | None = None
        group_key = options.group_by_property
        for record in records:
            if group_key and group_key in record.properties:
                group = core_types.format_property_value(record.properties[group_key])
                if group != current_group:
                    current_group = group
                    lines.append(
                        f'<tr class="group-header"><th colspan="{len(headers)}">'
                        f"{_escape(group_key)}: {_escape(group)}</th></tr>"
                    )
            lines.extend(self._render_row(record, property_keys, options))

        lines.append("</tbody></table>")
        lines.append("</body></html>")
        return "\n".join(lines) + "\n"

    def _render_summary(self, counts: LevelCounts) -> str:
        """Render the count banner."""
        return (
            f'<div class="summary">Total: {counts.total} &nbsp; '
            f'<span class="count-error" style="color:red;">Errors: {counts.error}</span> '
            f'<span class="count-warn" style="color:orange;">Warnings: {counts.warn}</span> '
            f'<span class="count-info" style="color:green;">Info: {counts.info}</span></div>'
        )

    def _render_row(
        self,
        record: core_types.Record,
        property_keys: list[str],
        options: config_types.RenderOptions,
    ) -> list[str]:
        """Render one <tr> as a list of lines."""
        level_style = f' style="color:{record.level_color}"' if options.use_color else ""

        row = [
            f'<tr class="{_escape(record.level.lower())}">',
            f"<td>{core_types.format_display_timestamp(record.timestamp)}</td>",
            f"<td{level_style}>{_escape(record.level)}</td>",
            self._render_text_cell(
                _escape(record.message),
                options,
                summary=lambda escaped: _preview(escaped, options.fold_message_length)
                + _constants.FOLD_ELLIPSIS,
            ),
            self._render_text_cell(
                _escape(record.exception or ""),
                options,
                summary=lambda _escaped: EXCEPTION_SUMMARY_LABEL,
            ),
            f"<td>{_escape(record.event_id or '')}</td>",
        ]
        row.extend(
            f"<td>{_escape(core_types.format_property_value(record.properties.get(key)))}</td>"
            for key in property_keys
        )
        row.append("</tr>")
        return row

    def _render_text_cell(
        self,
        escaped: str,
        options: config_types.RenderOptions,
        *,
        summary: _typing.Callable[[str], str],
    ) -> str:
        """Render a text cell, folded when the escaped text is too long."""
        if options.fold_long_messages and len(escaped) > options.fold_message_length:
            return (
                f"<td><details><summary>{summary(escaped)}</summary>"
                f"<pre>{escaped}</pre></details></td>"
            )
        return f"<td>{escaped}</td>"
