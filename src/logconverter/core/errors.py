"""
Exceptions raised by the conversion core.

Only whole-call failures are represented here. Field-level problems (a bad
timestamp, an untyped property) are recovered where they occur and never
surface as exceptions.
"""


class LogConverterError(Exception):
    """Base class for all conversion errors."""

    pass


class UnsupportedInputFormatError(LogConverterError, ValueError):
    """Raised for an unknown parse format tag or file extension."""

    def __init__(self, format_tag: str) -> None:
        self.format_tag = format_tag
        super().__init__(f"Unsupported input format: {format_tag!r}")


class UnsupportedOutputFormatError(LogConverterError, ValueError):
    """Raised for an unknown render format tag."""

    def __init__(self, format_tag: str) -> None:
        self.format_tag = format_tag
        super().__init__(f"Unsupported output format: {format_tag!r}")


class MalformedInputError(LogConverterError, ValueError):
    """Raised when a JSON or XML document is syntactically invalid."""

    def __init__(self, format_tag: str, detail: str) -> None:
        self.format_tag = format_tag
        self.detail = detail
        super().__init__(f"Malformed {format_tag} input: {detail}")
