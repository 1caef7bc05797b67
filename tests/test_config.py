"""
Tests for RuntimeConfig loading and validation.
"""

from pathlib import Path

import pytest

from blox_ui.config import RuntimeConfig, _load_toml_settings
from blox_ui.core.export import DEFAULT_MARKUP_STEM, DEFAULT_SCRIPT_STEM
from blox_ui.enums import CodeDialect
from blox_ui.errors import ValidationError


def _write_pyproject(root: Path, body: str) -> None:
  (root / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults_without_pyproject(tmp_path):
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.dialects == [CodeDialect.LUA]
  assert config.primary_dialect == CodeDialect.LUA
  assert config.script_stem == DEFAULT_SCRIPT_STEM
  assert config.markup_stem == DEFAULT_MARKUP_STEM


def test_reads_tool_table_from_parent_directory(tmp_path):
  _write_pyproject(
    tmp_path,
    """
[tool.blox_ui]
dialects = ["luau", "lua"]
output_dir = "build/ui"
script_stem = "menu"
""",
  )
  nested = tmp_path / "designs" / "hud"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)

  assert config.dialects == [CodeDialect.LUAU, CodeDialect.LUA]
  assert config.output_dir == tmp_path.resolve() / "build" / "ui"
  assert config.script_stem == "menu"
  assert config.markup_stem == DEFAULT_MARKUP_STEM


def test_cli_values_override_toml(tmp_path):
  _write_pyproject(tmp_path, '[tool.blox_ui]\ndialects = ["luau"]\nmarkup_stem = "models"\n')

  config = RuntimeConfig.load(dialects=["lua"], output_dir=Path("out"), markup_stem="hud", search_path=tmp_path)

  assert config.dialects == [CodeDialect.LUA]
  assert config.output_dir == Path("out")
  assert config.markup_stem == "hud"


def test_single_dialect_string_is_accepted():
  assert RuntimeConfig(dialects="LUAU").dialects == [CodeDialect.LUAU]


@pytest.mark.parametrize(
  "body",
  [
    '[tool.blox_ui]\ndialects = ["python"]\n',
    "[tool.blox_ui]\ndialects = []\n",
    '[tool.blox_ui]\nscript_stem = "a/b"\n',
  ],
)
def test_invalid_settings_raise_validation_error(tmp_path, body):
  _write_pyproject(tmp_path, body)
  with pytest.raises(ValidationError):
    RuntimeConfig.load(search_path=tmp_path)


def test_pyproject_without_tool_table(tmp_path):
  _write_pyproject(tmp_path, '[project]\nname = "game"\n')
  settings, found_in = _load_toml_settings(tmp_path)
  assert settings == {}
  assert found_in == tmp_path.resolve()


def test_broken_toml_is_ignored(tmp_path):
  _write_pyproject(tmp_path, "[tool.blox_ui\n")
  assert _load_toml_settings(tmp_path) == ({}, None)
