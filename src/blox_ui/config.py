"""
Runtime Configuration Store.

Settings are read from the ``[tool.blox_ui]`` table of the nearest
``pyproject.toml`` and overridden by explicit (CLI) arguments.

Example::

    [tool.blox_ui]
    dialects = ["lua", "luau"]
    output_dir = "build/ui"
    script_stem = "menu"
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pydantic
from pydantic import BaseModel, Field, field_validator

from blox_ui.core.export import DEFAULT_MARKUP_STEM, DEFAULT_SCRIPT_STEM
from blox_ui.enums import CodeDialect
from blox_ui.errors import ValidationError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Resolved settings for one CLI or library run.
  """

  dialects: List[CodeDialect] = Field(
    default_factory=lambda: [CodeDialect.LUA],
    description="Script dialects to produce, in order. The first one is used for file export.",
  )
  output_dir: Path = Field(Path("."), description="Directory that receives exported files.")
  script_stem: str = Field(DEFAULT_SCRIPT_STEM, description="Base name of script files.")
  markup_stem: str = Field(DEFAULT_MARKUP_STEM, description="Base name of markup files.")

  @field_validator("dialects", mode="before")
  @classmethod
  def normalize_dialects(cls, v: Any) -> Any:
    """
    Accepts a single dialect string and lower-cases names.

    Args:
        v: Raw value from TOML or CLI.

    Returns:
        The value as a list of lower-case names (or untouched when not strings).
    """
    if isinstance(v, str):
      v = [v]
    if isinstance(v, (list, tuple)):
      v = [d.lower().strip() if isinstance(d, str) else d for d in v]
      if not v:
        raise ValueError("At least one dialect is required")
    return v

  @field_validator("script_stem", "markup_stem")
  @classmethod
  def validate_stem(cls, v: str) -> str:
    v_clean = v.strip()
    if not v_clean or any(sep in v_clean for sep in ("/", "\\")):
      raise ValueError(f"Invalid file stem: '{v}'")
    return v_clean

  @property
  def primary_dialect(self) -> CodeDialect:
    return self.dialects[0]

  @classmethod
  def load(
    cls,
    dialects: Optional[Sequence[str]] = None,
    output_dir: Optional[Path] = None,
    script_stem: Optional[str] = None,
    markup_stem: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        dialects (Optional[Sequence[str]]): Override for the dialect list.
        output_dir (Optional[Path]): Override for the output directory.
        script_stem (Optional[str]): Override for the script file stem.
        markup_stem (Optional[str]): Override for the markup file stem.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValidationError: If the merged settings are invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    final_dialects = dialects or toml_config.get("dialects", [CodeDialect.LUA.value])

    # Relative TOML paths resolve against the file that declared them
    final_output = output_dir
    if final_output is None:
      raw_output = toml_config.get("output_dir")
      if raw_output is not None:
        final_output = (toml_dir / raw_output) if toml_dir else Path(raw_output)
      else:
        final_output = Path(".")

    final_script = script_stem or toml_config.get("script_stem", DEFAULT_SCRIPT_STEM)
    final_markup = markup_stem or toml_config.get("markup_stem", DEFAULT_MARKUP_STEM)

    try:
      return cls(
        dialects=final_dialects,
        output_dir=final_output,
        script_stem=final_script,
        markup_stem=final_markup,
      )
    except pydantic.ValidationError as e:
      raise ValidationError(f"Invalid blox-ui configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("blox_ui", {}), parent

  return {}, None
