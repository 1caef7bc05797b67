"""
Directory-backed persistence for finished output files.

The export orchestrator never touches the disk; it hands a completed
:class:`~blox_ui.core.export.OutputFile` to a store, which decides where the
text lands.
"""

import logging
from pathlib import Path
from typing import Union

from blox_ui.core.export import OutputFile
from blox_ui.errors import ExportError

logger = logging.getLogger(__name__)


class DirectoryStore:
  """
  Writes output files into a single directory.

  Attributes:
      root (Path): Destination directory. Created on first save.
  """

  def __init__(self, root: Union[str, Path] = ".") -> None:
    self.root = Path(root)

  def path_for(self, output: OutputFile) -> Path:
    return self.root / output.file_name

  def save(self, output: OutputFile) -> Path:
    """
    Writes ``output`` as UTF-8 text, replacing any existing file of that name.

    Args:
        output: The finished artifact.

    Returns:
        Path: Location of the written file.

    Raises:
        ExportError: If the directory or file cannot be written.
    """
    target = self.path_for(output)
    try:
      self.root.mkdir(parents=True, exist_ok=True)
      target.write_text(output.content, encoding="utf-8")
    except OSError as e:
      raise ExportError(f"Could not write '{target}': {e}") from e

    logger.debug("Saved %s (%d bytes)", target, len(output.content))
    return target
