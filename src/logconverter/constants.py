"""
Shared constants for logconverter.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

DEFAULT_LEVEL = "INFO"
"""Level assigned when a source does not specify one."""

DEFAULT_FOLD_MESSAGE_LENGTH = 100
"""Escaped text longer than this is folded behind a disclosure in HTML."""

DEFAULT_OUTPUT_FORMAT = "html"
"""Output format used by the CLI when --to is not given."""

DEFAULT_HTML_TITLE = "Log Report"
"""Title of standalone HTML documents."""

DEFAULT_ENCODING = "utf-8"
"""Encoding for files read and written at the boundary."""

ERROR_KEYWORD = "hata"
"""Substring that marks a plain-text log line as an error (Turkish: "error")."""

FOLD_ELLIPSIS = "…"
"""Marker appended to the visible part of a folded message."""
