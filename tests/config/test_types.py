"""Tests for the config section models."""

import pydantic as _pydantic
import pytest as _pytest

import logconverter.config as config


class TestRenderOptions:
    """Tests for RenderOptions defaults and validation."""

    def test_defaults(self) -> None:
        options = config.RenderOptions()
        assert options.use_color is False
        assert options.include_styles is True
        assert options.enable_summary is True
        assert options.fold_long_messages is True
        assert options.fold_message_length == 100
        assert options.group_by_property is None
        assert options.relaxed_json_escaping is False
        assert options.title == "Log Report"

    def test_frozen(self) -> None:
        options = config.RenderOptions()
        with _pytest.raises(_pydantic.ValidationError):
            options.use_color = True  # type: ignore[misc]

    def test_negative_fold_length_rejected(self) -> None:
        with _pytest.raises(_pydantic.ValidationError):
            config.RenderOptions(fold_message_length=-1)

    def test_zero_fold_length_allowed(self) -> None:
        assert config.RenderOptions(fold_message_length=0).fold_message_length == 0

    def test_blank_group_disables_grouping(self) -> None:
        assert config.RenderOptions(group_by_property="").group_by_property is None

    def test_extra_fields_preserved(self) -> None:
        options = config.RenderOptions.model_validate({"use_colour": True})
        assert options.get_extra_fields() == {"use_colour": True}
        assert options.use_color is False


class TestSections:
    def test_output_defaults(self) -> None:
        output = config.OutputConfig()
        assert output.default_format == "html"
        assert output.encoding == "utf-8"

    def test_logging_level_choices(self) -> None:
        assert config.LoggingConfig(level="debug").level == "debug"
        with _pytest.raises(_pydantic.ValidationError):
            config.LoggingConfig(level="verbose")  # type: ignore[arg-type]

    def test_collect_all_extra_fields_uses_dotted_paths(self) -> None:
        output = config.OutputConfig.model_validate({"fromat": "md"})
        assert output.collect_all_extra_fields("output") == {"output.fromat": "md"}
