"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching so ``blox_ui`` imports without installation.
- A fresh export session, a recording console and a scene-file writer.
"""

import sys
import json
import pytest
from pathlib import Path
from typing import Any, Callable, Dict

src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from rich.console import Console

from blox_ui.core.export import ExportSession
from blox_ui.utils.console import _THEME, reset_console, set_console


@pytest.fixture
def session() -> ExportSession:
  """A fresh set of file-name counters."""
  return ExportSession()


@pytest.fixture
def recorded_console():
  """
  Redirects logging and printing into a recording console for the test.
  """
  rec = Console(theme=_THEME, record=True, width=200, force_terminal=False, color_system=None)
  set_console(rec)
  yield rec
  reset_console()


@pytest.fixture
def write_scene(tmp_path) -> Callable[[Dict[str, Any]], Path]:
  """Writes a scene document to a JSON file and returns its path."""

  def _write(document: Dict[str, Any], name: str = "scene.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(document), encoding="utf-8")
    return path

  return _write
