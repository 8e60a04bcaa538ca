"""Configuration type definitions for logconverter settings.

This module defines the Pydantic models used to represent configuration
structures. These are "config section" types nested within the main
Settings class:

- RenderOptions: presentation switches shared by every renderer
- OutputConfig: default output format and file encoding for the CLI
- LoggingConfig: log level for the CLI process

Design decision: All types use `extra="allow"` to preserve unknown fields.
Use `collect_all_extra_fields()` to audit a config for typos.
"""

import typing as _typing

import pydantic as _pydantic

import logconverter.constants as _constants

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    All config types use `extra="allow"` so unknown fields are preserved
    rather than silently dropped. This enables auditing for typos.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name -> value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(
        self,
        prefix: str = "",
    ) -> dict[str, _typing.Any]:
        """
        Recursively collect extra fields from this config and nested configs.

        Returns a flat dict with dotted paths as keys, e.g.:
            {"render.use_colour": True, "output.fromat": "md"}

        Args:
            prefix: Dotted path prefix (used in recursion).

        Returns:
            Flat dict of path -> value for all unrecognized fields.
        """
        result: dict[str, _typing.Any] = {}

        for key, value in self.get_extra_fields().items():
            path = f"{prefix}.{key}" if prefix else key
            result[path] = value

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)
            if isinstance(value, ConfigBase):
                child_prefix = f"{prefix}.{field_name}" if prefix else field_name
                result.update(value.collect_all_extra_fields(child_prefix))

        return result


# =============================================================================
# Render Options
# =============================================================================


class RenderOptions(ConfigBase):
    """
    Presentation switches passed to every renderer.

    Renderers ignore the switches that do not apply to them (only HTML
    folds, only Markdown and HTML colour). Instances are immutable so one
    value can be shared between calls.

    YAML section: render.*
    """

    model_config = _pydantic.ConfigDict(extra="allow", frozen=True)

    use_color: bool = False
    """Apply severity-based colouring in Markdown and HTML."""

    include_styles: bool = True
    """Embed a stylesheet in HTML output."""

    enable_summary: bool = True
    """Show the count banner at the top of HTML output."""

    fold_long_messages: bool = True
    """Collapse long message/exception text behind <details> in HTML."""

    fold_message_length: int = _pydantic.Field(
        default=_constants.DEFAULT_FOLD_MESSAGE_LENGTH, ge=0
    )
    """Character threshold (of the escaped text) above which text is folded."""

    group_by_property: str | None = None
    """Property name for adjacent-run group headers in HTML. None = off."""

    relaxed_json_escaping: bool = False
    """Leave non-ASCII and HTML-sensitive characters unescaped in JSON."""

    title: str = _constants.DEFAULT_HTML_TITLE
    """Title of the HTML document."""

    @_pydantic.field_validator("group_by_property")
    @classmethod
    def _blank_group_is_none(cls, value: str | None) -> str | None:
        """An empty group key disables grouping."""
        return value or None


# =============================================================================
# Output Settings
# =============================================================================


class OutputConfig(ConfigBase):
    """
    Output settings for the command line.

    YAML section: output.*
    """

    default_format: str = _constants.DEFAULT_OUTPUT_FORMAT
    """Format used when --to is not given."""

    encoding: str = _constants.DEFAULT_ENCODING
    """Encoding for output files."""


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    YAML section: logging.*
    """

    level: _typing.Literal["debug", "info", "warning", "error"] = "warning"
    """Log level for the command line process."""
