"""
Export Orchestrator.

Turns a conversion request (run type + root entities) into output:

- ``CONVERT_TO_CODE``: one script file (``.lua`` / ``.luau``).
- ``CONVERT_TO_OBJECT``: one markup file (``.rbxmx``) inside the envelope.
- ``GENERATE_CODE``: in-memory code blocks for preview via :func:`generate_code`.

File names are disambiguated through an explicitly passed
:class:`ExportSession`. Text is rendered completely before a name is
reserved, so a failed export never consumes a counter value. Nothing here
touches the disk; see :mod:`blox_ui.persistence`.
"""

import logging
import threading
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from blox_ui.core.entities import Entity
from blox_ui.core.lua.emitter import script_blocks
from blox_ui.core.rbxmx.document import ENVELOPE_CLOSE, envelope_head, render_items
from blox_ui.enums import CodeDialect, ConvertRunType
from blox_ui.errors import ExportError, PreconditionError

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT_STEM = "blox_ui_lua"
DEFAULT_MARKUP_STEM = "blox_ui_rbxmx"


class ExportSession:
  """
  Per-session file-name counters, one per file stem.

  Thread-safe: concurrent exports of the same stem always receive distinct
  names.
  """

  def __init__(self) -> None:
    self._lock = threading.Lock()
    self._counters: Dict[str, int] = {}

  def reserve_name(self, stem: str) -> str:
    """
    Claims the next name for ``stem``.

    The first claim returns ``stem`` itself; later claims return
    ``stem_1``, ``stem_2``, and so on.

    Args:
        stem: Base file name without extension.

    Returns:
        str: The reserved name.
    """
    with self._lock:
      count = self._counters.get(stem, 0)
      self._counters[stem] = count + 1
    return stem if count == 0 else f"{stem}_{count}"

  def count(self, stem: str) -> int:
    """Number of names reserved so far for ``stem``."""
    with self._lock:
      return self._counters.get(stem, 0)


class OutputFile:
  """
  A named output artifact with a line buffer.

  Attributes:
      name (str): File stem.
      extension (str): File extension without the dot.
  """

  extension: str = ""

  def __init__(self, name: str, starter_content: Optional[str] = None) -> None:
    self.name = name
    self._lines: List[str] = []
    if starter_content:
      self.write_line(starter_content)

  @property
  def file_name(self) -> str:
    return f"{self.name}.{self.extension}"

  @property
  def content(self) -> str:
    return "".join(f"{line}\n" for line in self._lines)

  def write_line(self, text: str) -> None:
    """Appends ``text`` followed by a newline."""
    self._lines.append(text)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.file_name!r}, lines={len(self._lines)})"


class LuaFile(OutputFile):
  """Script output; the extension follows the dialect."""

  def __init__(self, name: str, dialect: CodeDialect = CodeDialect.LUA, starter_content: Optional[str] = None) -> None:
    self.extension = dialect.value
    super().__init__(name, starter_content)


class RbxmxFile(OutputFile):
  extension = "rbxmx"


class CodegenResult(BaseModel):
  """
  One titled code block for read-only preview.
  """

  title: str = Field(description="Display title of the block.")
  language: str = Field(description="Dialect identifier, e.g. 'lua' or 'luau'.")
  code: str = Field(default="", description="The generated source.")


def export_file(
  run_type: ConvertRunType,
  entities: Sequence[Entity],
  session: ExportSession,
  dialect: CodeDialect = CodeDialect.LUA,
  script_stem: str = DEFAULT_SCRIPT_STEM,
  markup_stem: str = DEFAULT_MARKUP_STEM,
) -> OutputFile:
  """
  Serializes root entities (and their children) into one unsaved file.

  Args:
      run_type: CONVERT_TO_CODE or CONVERT_TO_OBJECT.
      entities: Root records, rendered in order.
      session: Counter store used to name the file.
      dialect: Script dialect (script mode only).
      script_stem: Base name for script files.
      markup_stem: Base name for markup files.

  Returns:
      OutputFile: A LuaFile or RbxmxFile holding the full text.

  Raises:
      PreconditionError: If ``entities`` is empty.
      ExportError: If ``run_type`` does not produce a file.
      ScriptConversionError: If an entity has no script template.
      ObjectConversionError: If an entity has no markup template.
  """
  run_type = ConvertRunType(run_type)
  if run_type == ConvertRunType.GENERATE_CODE:
    raise ExportError("GENERATE_CODE does not produce a file; use generate_code()")
  if not entities:
    raise PreconditionError("Nothing to export: the entity list is empty")

  if run_type == ConvertRunType.CONVERT_TO_CODE:
    blocks = script_blocks(entities, dialect)
    out: OutputFile = LuaFile(session.reserve_name(script_stem), dialect)
    for block in blocks:
      out.write_line(block)
  else:
    items = render_items(entities)
    out = RbxmxFile(session.reserve_name(markup_stem), envelope_head())
    for block in items:
      out.write_line(block)
    out.write_line(ENVELOPE_CLOSE)

  logger.debug("Exported %d root(s) to %s", len(entities), out.file_name)
  return out


def generate_code(
  entities: Sequence[Entity],
  dialects: Sequence[CodeDialect] = (CodeDialect.LUA,),
) -> List[CodegenResult]:
  """
  Produces one preview block per dialect without naming or saving files.

  Args:
      entities: Root records.
      dialects: Dialects to render, in order.

  Returns:
      List[CodegenResult]: One result per dialect.

  Raises:
      PreconditionError: If ``entities`` is empty.
  """
  if not entities:
    raise PreconditionError("Nothing to preview: the entity list is empty")

  results = []
  for dialect in dialects:
    dialect = CodeDialect(dialect)
    code = "\n".join(script_blocks(entities, dialect))
    results.append(CodegenResult(title=f"{dialect.value.capitalize()} code", language=dialect.value, code=code))
  return results
