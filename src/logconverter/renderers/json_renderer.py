"""
JSON renderer.

Outputs a pretty-printed array with one object per record. By default the
output is ASCII-only and HTML-safe (<, >, & and ' are escaped) so it can be
embedded anywhere; RenderOptions.relaxed_json_escaping leaves text as-is.
"""

import json as _json
import typing as _typing

import logconverter.config.types as config_types
import logconverter.core.types as core_types
import logconverter.renderers.base as base

# Only ever appear inside string literals once ensure_ascii is on
_HTML_SENSITIVE_ESCAPES: dict[str, str] = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "'": "\\u0027",
}


def record_to_json(record: core_types.Record) -> dict[str, _typing.Any]:
    """JSON-ready dict with canonical field names and native property types."""
    data = record.to_dict()
    data["timestamp"] = record.timestamp.isoformat()
    return data


@base.register_renderer
class JSONRenderer(base.Renderer):
    """Renders records as a JSON array."""

    name = "json"
    extension = ".json"
    media_type = "application/json"

    def __init__(self, *, indent: int = 2) -> None:
        """
        Initialize the JSON renderer.

        Args:
            indent: JSON indentation level.
        """
        self._indent = indent

    def render(
        self,
        records: _typing.Sequence[core_types.Record],
        options: config_types.RenderOptions,
    ) -> str:
        """Serialize the batch."""
        payload = [record_to_json(record) for record in records]

        if options.relaxed_json_escaping:
            return _json.dumps(payload, indent=self._indent, ensure_ascii=False)

        text = _json.dumps(payload, indent=self._indent, ensure_ascii=True)
        for char, escaped in _HTML_SENSITIVE_ESCAPES.items():
            text = text.replace(char, escaped)
        return text
