"""
XML renderer.

Writes a <logs> root with one <log> per record. Optional fields that are
absent or empty are left out. Properties become child elements named after
their key; keys are used verbatim, so a key that is not a valid XML name
produces a document that will not parse.
"""

import typing as _typing
import xml.sax.saxutils as _saxutils

import logconverter.config.types as config_types
import logconverter.core.types as core_types
import logconverter.renderers.base as base


def _element(name: str, text: str, indent: str = "    ") -> str:
    return f"{indent}<{name}>{_saxutils.escape(text)}</{name}>"


@base.register_renderer
class XMLRenderer(base.Renderer):
    """Renders records as an XML document without attributes or namespaces."""

    name = "xml"
    extension = ".xml"
    media_type = "application/xml"

    def render(
        self,
        records: _typing.Sequence[core_types.Record],
        options: config_types.RenderOptions,  # noqa: ARG002 - no XML-specific options
    ) -> str:
        lines = ["<logs>"]
        for record in records:
            lines.append("  <log>")
            lines.append(
                _element("timestamp", core_types.format_roundtrip_timestamp(record.timestamp))
            )
            lines.append(_element("level", record.level))
            lines.append(_element("message", record.message))
            if record.exception:
                lines.append(_element("exception", record.exception))
            if record.event_id:
                lines.append(_element("eventId", record.event_id))
            for key, value in record.properties.items():
                lines.append(_element(key, core_types.format_property_value(value)))
            lines.append("  </log>")
        lines.append("</logs>")
        return "\n".join(lines) + "\n"
