"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with LOGCONVERTER_ prefix
3. .env file (only when LOGCONVERTER_ENV_FILE points at one)
4. Layered YAML config files:
   - Project config: .logconverter/config.yaml (highest)
   - User config: ~/.config/logconverter/config.yaml

Nested config uses double underscore delimiter:
  LOGCONVERTER_RENDER__USE_COLOR=true
  LOGCONVERTER_OUTPUT__DEFAULT_FORMAT=markdown
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import logconverter.config.sources as sources
import logconverter.config.types as types


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit LOGCONVERTER_ENV_FILE is honoured; if it is set but
    the file does not exist, nothing is loaded.
    """
    if env_file := _os.environ.get("LOGCONVERTER_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    logconverter configuration settings.

    All settings can be overridden via environment variables with the
    LOGCONVERTER_ prefix. For nested config, use double underscore:
    LOGCONVERTER_RENDER__FOLD_MESSAGE_LENGTH=200

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (LOGCONVERTER_*)
    3. .env file
    4. Project config (.logconverter/config.yaml)
    5. User config (~/.config/logconverter/config.yaml)
    6. Field defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="LOGCONVERTER_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # LOGCONVERTER_RENDER__USE_COLOR
        extra="allow",  # Preserve unknown fields for auditing
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) - highest
        2. env_settings (LOGCONVERTER_* env vars)
        3. dotenv_settings (.env file)
        4. YAML layers (project over user)
        5. (defaults via Field definitions) - lowest
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.YamlSettingsSource(settings_cls, _pathlib.Path.cwd()),
            file_secret_settings,
        )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings without loading any .env file.

        Useful for test isolation and for reproducing issues without
        .env interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    # =========================================================================
    # Nested config sections
    # =========================================================================

    render: types.RenderOptions = _pydantic.Field(default_factory=types.RenderOptions)
    """Default render options (colour, folding, grouping, ...)."""

    output: types.OutputConfig = _pydantic.Field(default_factory=types.OutputConfig)
    """CLI output defaults."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    # =========================================================================
    # Helpers
    # =========================================================================

    def to_render_options(self, **overrides: _typing.Any) -> types.RenderOptions:
        """
        Build RenderOptions from the configured defaults plus overrides.

        Overrides whose value is None are ignored, so unset CLI flags fall
        through to the configured value.
        """
        applied = {key: value for key, value in overrides.items() if value is not None}
        if not applied:
            return self.render
        return types.RenderOptions.model_validate({**self.render.model_dump(), **applied})

    def get_unknown_fields(self) -> dict[str, _typing.Any]:
        """
        Return every unrecognized key from all config layers.

        Keys are dotted paths ("render.use_colour"). An empty dict means the
        configuration contains no typos or stale keys.
        """
        result: dict[str, _typing.Any] = dict(self.model_extra or {})
        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name)
            if isinstance(value, types.ConfigBase):
                result.update(value.collect_all_extra_fields(field_name))
        return result
