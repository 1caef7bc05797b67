"""
blox-ui Package.

Converts design-tool scene graphs into Roblox UI: Lua/Luau scripts that
build the instances at runtime, or ``.rbxmx`` model files for Studio.

Usage
-----

Entity Records
^^^^^^^^^^^^^^

.. code-block:: python

    import blox_ui
    from blox_ui.core.entities import Frame, UICorner, attach
    from blox_ui.core.values import UDim

    card = attach(Frame(name="Card"), UICorner(corner_radius=UDim.new(0, 12)))
    out = blox_ui.export([card])
    print(out.file_name)  # blox_ui_lua.lua
    print(out.content)

Scene Documents
^^^^^^^^^^^^^^^

.. code-block:: python

    from blox_ui import ConvertRunType, load_scene, map_scene, preview

    entities = map_scene(load_scene("selection.json"))
    for block in preview(entities, dialects=["lua", "luau"]):
        print(block.title)
        print(block.code)
"""

from typing import List, Optional, Sequence, Union

from blox_ui.config import RuntimeConfig
from blox_ui.core.entities import Entity
from blox_ui.core.export import CodegenResult, ExportSession, OutputFile, export_file, generate_code
from blox_ui.enums import CodeDialect, ConvertRunType, EntityKind
from blox_ui.errors import BloxUIError
from blox_ui.persistence import DirectoryStore
from blox_ui.scene.mapper import SceneMapper
from blox_ui.scene.nodes import SceneDocument, load_scene

__version__ = "0.1.0"

_default_session = ExportSession()


def map_scene(document: SceneDocument) -> List[Entity]:
  """
  Maps every root node of ``document`` (with its overrides) into entities.

  Args:
      document (SceneDocument): A parsed selection.

  Returns:
      List[Entity]: Root entities, children attached.
  """
  return SceneMapper(document.overrides).map_document(document)


def export(
  entities: Sequence[Entity],
  run_type: Union[ConvertRunType, str] = ConvertRunType.CONVERT_TO_CODE,
  dialect: Union[CodeDialect, str] = CodeDialect.LUA,
  session: Optional[ExportSession] = None,
  store: Optional[DirectoryStore] = None,
) -> OutputFile:
  """
  Serializes entities into one output file and optionally saves it.

  This is a convenience wrapper around `export_file`. Without an explicit
  ``session``, names are counted in a module-level session that lives as long
  as the interpreter.

  Args:
      entities (Sequence[Entity]): Root records to serialize.
      run_type (ConvertRunType): "code" for a script, "object" for markup.
      dialect (CodeDialect): Script dialect ("lua" or "luau").
      session (ExportSession, optional): File-name counters to use.
      store (DirectoryStore, optional): If given, the file is written there.

  Returns:
      OutputFile: The finished file.

  Raises:
      BloxUIError: If the entities cannot be exported or saved.
  """
  output = export_file(ConvertRunType(run_type), entities, session or _default_session, dialect=CodeDialect(dialect))
  if store is not None:
    store.save(output)
  return output


def preview(
  entities: Sequence[Entity],
  dialects: Sequence[Union[CodeDialect, str]] = (CodeDialect.LUA,),
) -> List[CodegenResult]:
  """
  Renders read-only code blocks, one per dialect. No files, no counters.

  Args:
      entities (Sequence[Entity]): Root records.
      dialects (Sequence[CodeDialect]): Dialects to render.

  Returns:
      List[CodegenResult]: Titled code blocks.
  """
  return generate_code(entities, [CodeDialect(d) for d in dialects])


__all__ = [
  "BloxUIError",
  "CodeDialect",
  "CodegenResult",
  "ConvertRunType",
  "DirectoryStore",
  "EntityKind",
  "ExportSession",
  "OutputFile",
  "RuntimeConfig",
  "export",
  "load_scene",
  "map_scene",
  "preview",
  "__version__",
]
