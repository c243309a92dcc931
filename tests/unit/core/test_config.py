"""
Unit tests for core.config and core.yaml modules.

Tests:
- load_yaml() - YAML file loading, empty files, invalid syntax
- InspectorConfig defaults and field bounds
- InspectorConfig.from_dict() / from_yaml() error wrapping
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from decodenote.core import (
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    ConfigurationError,
    InspectorConfig,
    load_yaml,
)


# =============================================================================
# load_yaml() Tests
# =============================================================================


class TestLoadYaml:
    """load_yaml() with files on disk."""

    def test_nested_mapping(self, tmp_path: Path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("codec:\n  max_length: 2048\n")
        assert load_yaml(yaml_file) == {"codec": {"max_length": 2048}}

    def test_string_path(self, tmp_path: Path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("key: value\n")
        assert load_yaml(str(yaml_file)) == {"key": "value"}

    def test_empty_file(self, tmp_path: Path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert load_yaml(yaml_file) == {}

    def test_comments_only(self, tmp_path: Path):
        yaml_file = tmp_path / "comments.yaml"
        yaml_file.write_text("# nothing here\n")
        assert load_yaml(yaml_file) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_invalid_syntax(self, tmp_path: Path):
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("codec: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml(yaml_file)

    def test_top_level_list(self, tmp_path: Path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_yaml(yaml_file)

    def test_unsafe_tag_rejected(self, tmp_path: Path):
        yaml_file = tmp_path / "unsafe.yaml"
        yaml_file.write_text("key: !!python/object/apply:os.getcwd []\n")
        with pytest.raises(ConfigurationError):
            load_yaml(yaml_file)


# =============================================================================
# InspectorConfig Tests
# =============================================================================


class TestDefaults:
    """Every setting has a default."""

    def test_defaults(self):
        config = InspectorConfig()
        assert config.codec.max_length == DEFAULT_MAX_IDENTIFIER_LENGTH == 1023
        assert config.display.truncate_length == 8
        assert config.display.reveal_secrets is False
        assert config.logging.level == "WARNING"
        assert config.logging.json_output is False

    def test_empty_dict(self):
        assert InspectorConfig.from_dict({}) == InspectorConfig()

    def test_frozen(self):
        config = InspectorConfig()
        with pytest.raises(ValidationError):
            config.codec = None  # type: ignore[misc]


class TestFromDict:
    """InspectorConfig.from_dict() validation."""

    def test_partial_section(self):
        config = InspectorConfig.from_dict({"display": {"reveal_secrets": True}})
        assert config.display.reveal_secrets is True
        assert config.display.truncate_length == 8

    @pytest.mark.parametrize("max_length", [90, 4096])
    def test_max_length_bounds_inclusive(self, max_length: int):
        config = InspectorConfig.from_dict({"codec": {"max_length": max_length}})
        assert config.codec.max_length == max_length

    @pytest.mark.parametrize("max_length", [89, 4097, "long"])
    def test_max_length_out_of_bounds(self, max_length):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            InspectorConfig.from_dict({"codec": {"max_length": max_length}})

    @pytest.mark.parametrize("length", [0, 33])
    def test_truncate_length_bounds(self, length: int):
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_dict({"display": {"truncate_length": length}})

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_dict({"logging": {"level": "TRACE"}})

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_dict({"codec": {"max_len": 100}})

    def test_unknown_section(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_dict({"network": {}})


class TestFromYaml:
    """InspectorConfig.from_yaml()."""

    def test_loads_file(self, tmp_path: Path):
        yaml_file = tmp_path / "decodenote.yaml"
        yaml_file.write_text(
            """
codec:
  max_length: 2048
display:
  truncate_length: 12
logging:
  level: DEBUG
  json_output: true
"""
        )
        config = InspectorConfig.from_yaml(yaml_file)
        assert config.codec.max_length == 2048
        assert config.display.truncate_length == 12
        assert config.logging.level == "DEBUG"
        assert config.logging.json_output is True

    def test_missing_file_is_configuration_error(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            InspectorConfig.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_values(self, tmp_path: Path):
        yaml_file = tmp_path / "decodenote.yaml"
        yaml_file.write_text("codec:\n  max_length: 10\n")
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_yaml(yaml_file)
