"""
Convert Command Handler.

Implements `blox-ui convert`:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Scene loading and mapping to entities.
3. Export to a script or model file.
4. Writing the file to the output directory.
"""

from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from blox_ui.config import RuntimeConfig
from blox_ui.core.export import ExportSession, export_file
from blox_ui.enums import ConvertRunType
from blox_ui.errors import BloxUIError
from blox_ui.persistence import DirectoryStore
from blox_ui.scene.mapper import SceneMapper
from blox_ui.scene.nodes import load_scene
from blox_ui.utils.console import log_error, log_info, log_success


def handle_convert(
  input_path: Path,
  run_type: ConvertRunType,
  dialects: Optional[List[str]],
  output_dir: Optional[Path],
) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      input_path: Scene document to convert.
      run_type: CONVERT_TO_CODE or CONVERT_TO_OBJECT.
      dialects: Override for the dialect list; the first entry is used.
      output_dir: Override for the destination directory.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(dialects=dialects, output_dir=output_dir, search_path=input_path.parent)
    document = load_scene(input_path)
    entities = SceneMapper(document.overrides).map_document(document)
    log_info(f"Mapped {len(document.nodes)} node(s) from [path]{input_path}[/path] to {len(entities)} root(s)")

    output = export_file(
      run_type,
      entities,
      ExportSession(),
      dialect=config.primary_dialect,
      script_stem=config.script_stem,
      markup_stem=config.markup_stem,
    )
    saved = DirectoryStore(config.output_dir).save(output)
  except BloxUIError as e:
    log_error(escape(e.message))
    return 1

  log_success(f"Wrote [path]{saved}[/path]")
  return 0
