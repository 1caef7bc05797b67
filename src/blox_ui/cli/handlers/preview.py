"""CLI handler for the 'preview' command."""

from pathlib import Path
from typing import List, Optional

from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from blox_ui.config import RuntimeConfig
from blox_ui.core.export import generate_code
from blox_ui.errors import BloxUIError
from blox_ui.scene.mapper import SceneMapper
from blox_ui.scene.nodes import load_scene
from blox_ui.utils.console import console, log_error


def handle_preview(input_path: Path, dialects: Optional[List[str]]) -> int:
  """
  Prints one highlighted code panel per dialect. Writes nothing to disk.

  Args:
      input_path: Scene document to render.
      dialects: Override for the dialect list.

  Returns:
      int: Exit code.
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(dialects=dialects, search_path=input_path.parent)
    document = load_scene(input_path)
    entities = SceneMapper(document.overrides).map_document(document)
    results = generate_code(entities, config.dialects)
  except BloxUIError as e:
    log_error(escape(e.message))
    return 1

  for result in results:
    # Luau highlights fine with the Lua lexer
    code = Syntax(result.code, "lua", line_numbers=True)
    console.print(Panel(code, title=result.title, expand=False))
  return 0
