"""
Output renderers for logconverter.

Importing this package registers every built-in renderer:
- MarkdownRenderer: pipe table
- HTMLRenderer: standalone report with summary, grouping and folding
- JSONRenderer: pretty-printed array
- XMLRenderer: <logs>/<log> document
- CSVRenderer: header row plus quoted rows
"""

from logconverter.renderers.base import (
    Renderer,
    available_renderers,
    get_renderer,
    register_renderer,
)
from logconverter.renderers.markdown_renderer import MarkdownRenderer, format_markdown_table
from logconverter.renderers.html_renderer import HTMLRenderer, LevelCounts, count_levels
from logconverter.renderers.json_renderer import JSONRenderer, record_to_json
from logconverter.renderers.xml_renderer import XMLRenderer
from logconverter.renderers.csv_renderer import CSVRenderer, csv_escape

__all__ = [
    # Base and registry
    "Renderer",
    "available_renderers",
    "get_renderer",
    "register_renderer",
    # Renderers
    "CSVRenderer",
    "HTMLRenderer",
    "JSONRenderer",
    "MarkdownRenderer",
    "XMLRenderer",
    # Helpers
    "LevelCounts",
    "count_levels",
    "csv_escape",
    "format_markdown_table",
    "record_to_json",
]
