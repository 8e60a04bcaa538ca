"""Tests for the layered YAML settings source.

- Path helpers and LOGCONVERTER_CONFIG_DIR
- deep_merge semantics
- Loading and validating single files
- Layer precedence (project over user)
"""

import pathlib as _pathlib

import pydantic_settings as _pydantic_settings
import pytest as _pytest
import yaml as _yaml

import logconverter.config as config
import logconverter.config.sources as sources


def _write_yaml(path: _pathlib.Path, data: object) -> _pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_yaml.safe_dump(data), encoding="utf-8")
    return path


class TestHelperFunctions:
    """Tests for path helper functions."""

    def test_get_user_config_dir_default(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOGCONVERTER_CONFIG_DIR", raising=False)
        assert sources.get_user_config_dir() == _pathlib.Path.home() / ".config" / "logconverter"

    def test_get_user_config_path_with_env_var(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGCONVERTER_CONFIG_DIR", "/custom/config/dir")
        assert sources.get_user_config_path() == _pathlib.Path("/custom/config/dir/config.yaml")

    def test_get_project_config_path(self) -> None:
        path = sources.get_project_config_path(_pathlib.Path("/some/project"))
        assert path == _pathlib.Path("/some/project/.logconverter/config.yaml")


class TestDeepMerge:
    def test_nested_mappings_merge(self) -> None:
        base = {"render": {"use_color": False, "title": "A"}, "output": {"encoding": "utf-8"}}
        override = {"render": {"use_color": True}}
        assert sources.deep_merge(base, override) == {
            "render": {"use_color": True, "title": "A"},
            "output": {"encoding": "utf-8"},
        }

    def test_scalars_and_lists_replace(self) -> None:
        assert sources.deep_merge({"a": [1, 2], "b": {"c": 1}}, {"a": [3], "b": 5}) == {
            "a": [3],
            "b": 5,
        }

    def test_inputs_not_modified(self) -> None:
        base = {"render": {"use_color": False}}
        sources.deep_merge(base, {"render": {"use_color": True}})
        assert base == {"render": {"use_color": False}}


class TestLoadYamlFile:
    def test_loads_mapping(self, tmp_path: _pathlib.Path) -> None:
        path = _write_yaml(tmp_path / "c.yaml", {"render": {"title": "X"}})
        assert sources.load_yaml_file(path) == {"render": {"title": "X"}}

    def test_empty_file_is_none(self, tmp_path: _pathlib.Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")
        assert sources.load_yaml_file(path) is None

    def test_malformed_yaml(self, tmp_path: _pathlib.Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("render: [unclosed", encoding="utf-8")
        with _pytest.raises(config.ConfigFileError, match="invalid YAML") as exc_info:
            sources.load_yaml_file(path)
        assert exc_info.value.path == path

    def test_non_mapping_top_level(self, tmp_path: _pathlib.Path) -> None:
        path = _write_yaml(tmp_path / "c.yaml", ["a", "b"])
        with _pytest.raises(config.ConfigFileError, match="got list"):
            sources.load_yaml_file(path)

    def test_missing_file(self, tmp_path: _pathlib.Path) -> None:
        with _pytest.raises(config.ConfigFileError, match="cannot read file"):
            sources.load_yaml_file(tmp_path / "nope.yaml")


class TestYamlSettingsSource:
    """Tests for layer loading and precedence."""

    def test_is_pydantic_settings_source(self) -> None:
        assert issubclass(
            sources.YamlSettingsSource, _pydantic_settings.PydanticBaseSettingsSource
        )

    def test_project_overrides_user(self, tmp_path: _pathlib.Path) -> None:
        user_path = _write_yaml(
            tmp_path / "user.yaml",
            {"render": {"use_color": True, "title": "User"}, "output": {"default_format": "csv"}},
        )
        project = tmp_path / "project"
        _write_yaml(sources.get_project_config_path(project), {"render": {"title": "Project"}})

        source = sources.YamlSettingsSource(
            config.Settings, project, user_config_path=user_path
        )
        assert source() == {
            "render": {"use_color": True, "title": "Project"},
            "output": {"default_format": "csv"},
        }
        assert [name for name, _ in source.get_loaded_layers()] == ["project", "user"]

    def test_missing_layers(self, tmp_path: _pathlib.Path) -> None:
        source = sources.YamlSettingsSource(
            config.Settings, tmp_path, user_config_path=tmp_path / "none.yaml"
        )
        assert source() == {}
        assert source.get_loaded_layers() == []
        assert [(name, exists) for name, _, exists in source.get_layer_paths()] == [
            ("project", False),
            ("user", False),
        ]

    def test_malformed_layer_raises(self, tmp_path: _pathlib.Path) -> None:
        user_path = tmp_path / "user.yaml"
        user_path.write_text("- just\n- a list\n", encoding="utf-8")
        with _pytest.raises(config.ConfigFileError):
            sources.YamlSettingsSource(config.Settings, None, user_config_path=user_path)
