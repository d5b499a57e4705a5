"""Tests for jsoncheck.config."""

import pytest

from jsoncheck import ConfigError, ValidatorConfig, load_config
from jsoncheck.config import DEFAULT_CONFIG, MAX_DEPTH_LIMIT


class TestValidatorConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG == ValidatorConfig()
        assert DEFAULT_CONFIG.max_depth == 100
        assert DEFAULT_CONFIG.strict is False
        assert DEFAULT_CONFIG.literal_quotes == "all"

    def test_bad_max_depth(self):
        with pytest.raises(ConfigError, match="max_depth"):
            ValidatorConfig(max_depth=0)

    def test_max_depth_upper_bound(self):
        assert ValidatorConfig(max_depth=MAX_DEPTH_LIMIT).max_depth == MAX_DEPTH_LIMIT
        with pytest.raises(ConfigError, match=f"between 1 and {MAX_DEPTH_LIMIT}"):
            ValidatorConfig(max_depth=MAX_DEPTH_LIMIT + 1)

    def test_bool_is_not_a_depth(self):
        with pytest.raises(ConfigError, match="max_depth must be int"):
            ValidatorConfig(max_depth=True)

    def test_bad_literal_mode(self):
        with pytest.raises(ConfigError, match="literal_quotes"):
            ValidatorConfig(literal_quotes="some")

    def test_bad_strict_type(self):
        with pytest.raises(ConfigError, match="strict must be bool"):
            ValidatorConfig(strict="yes")

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ValidatorConfig(max_depth=-3)

    def test_from_mapping(self):
        config = ValidatorConfig.from_mapping({"strict": True, "max_depth": 10})
        assert config == ValidatorConfig(strict=True, max_depth=10)

    def test_from_mapping_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown config keys: depth"):
            ValidatorConfig.from_mapping({"depth": 3})

    def test_replace_ignores_none(self):
        config = ValidatorConfig(max_depth=5).replace(strict=None, literal_quotes="enclosing")
        assert config == ValidatorConfig(max_depth=5, literal_quotes="enclosing")

    def test_replace_validates(self):
        with pytest.raises(ConfigError):
            ValidatorConfig().replace(max_depth=0)


class TestLoadConfig:
    def test_dedicated_file(self, tmp_path):
        path = tmp_path / "jsoncheck.toml"
        path.write_text('max_depth = 20\nliteral_quotes = "enclosing"\n')
        assert load_config(path) == ValidatorConfig(max_depth=20, literal_quotes="enclosing")

    def test_named_table(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text("[jsoncheck]\nstrict = true\n")
        assert load_config(path) == ValidatorConfig(strict=True)

    def test_pyproject_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "demo"\n\n[tool.jsoncheck]\nmax_depth = 7\n'
        )
        assert load_config(path) == ValidatorConfig(max_depth=7)

    def test_pyproject_without_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "demo"\n')
        assert load_config(path) == ValidatorConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "absent.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_depth = = 3\n")
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(path)

    def test_table_must_be_table(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('jsoncheck = "strict"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            load_config(path)

    def test_unknown_keys(self, tmp_path):
        path = tmp_path / "jsoncheck.toml"
        path.write_text("color = true\n")
        with pytest.raises(ConfigError, match="unknown config keys"):
            load_config(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "jsoncheck.toml"
        path.write_text('max_depth = "deep"\n')
        with pytest.raises(ConfigError, match="max_depth must be int"):
            load_config(path)
