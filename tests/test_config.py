"""
Tests for Runtime Configuration loading.

Verifies:
1. Defaults when no pyproject.toml is found.
2. `[tool.noble]` values are read from the nearest pyproject.toml.
3. CLI overrides win over TOML values; None overrides are ignored.
4. Invalid values raise ValueError.
"""

import pytest
from pydantic import ValidationError

from noble.config import RuntimeConfig, _load_toml_settings
from noble.enums import OutputFormat


def _write_toml(path, body):
  (path / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults():
  config = RuntimeConfig()
  assert config.attribute == "noble"
  assert config.output_format == OutputFormat.RUST
  assert config.strict_mode is False
  assert config.idempotent is True
  assert config.mark_trait_impls_unsafe is True
  assert config.indent_width == 4
  assert config.max_workers == 1


def test_load_from_toml(tmp_path):
  _write_toml(tmp_path, '[tool.noble]\noutput_format = "json"\nstrict_mode = true\nindent_width = 2\n')
  nested = tmp_path / "a" / "b"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)
  assert config.output_format == OutputFormat.JSON
  assert config.strict_mode is True
  assert config.indent_width == 2


def test_cli_overrides(tmp_path):
  _write_toml(tmp_path, '[tool.noble]\noutput_format = "json"\nstrict_mode = true\n')

  config = RuntimeConfig.load(output_format="rust", strict_mode=None, idempotent=False, search_path=tmp_path)
  assert config.output_format == OutputFormat.RUST
  assert config.strict_mode is True
  assert config.idempotent is False


def test_missing_section(tmp_path):
  _write_toml(tmp_path, "[project]\nname = 'x'\n")
  settings, found = _load_toml_settings(tmp_path)
  assert settings == {}
  assert found == tmp_path.resolve()


def test_broken_toml_ignored(tmp_path):
  _write_toml(tmp_path, "[tool.noble\n")
  assert _load_toml_settings(tmp_path) == ({}, None)


def test_invalid_toml_value(tmp_path):
  _write_toml(tmp_path, "[tool.noble]\nindent_width = 0\n")
  with pytest.raises(ValueError, match="Invalid noble configuration"):
    RuntimeConfig.load(search_path=tmp_path)


def test_invalid_workers(tmp_path):
  with pytest.raises(ValueError):
    RuntimeConfig.load(max_workers=0, search_path=tmp_path)


@pytest.mark.parametrize("name", ["", "noble::noble", "#[noble]", "a b"])
def test_invalid_attribute(name):
  with pytest.raises(ValidationError):
    RuntimeConfig(attribute=name)


def test_attribute_stripped():
  assert RuntimeConfig(attribute=" wrap_unsafe ").attribute == "wrap_unsafe"
