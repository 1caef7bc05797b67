"""
Host Message Boundary.

A design-tool plugin talks to the core through short string messages
(``"convert-to-code"``, ``"generate"``, ...). :class:`MessageRouter` maps each
message onto an export or preview call, persists finished files, and keeps
track of which plugin view is showing.

Errors from the core propagate to the caller. The ``on_finished`` callback
(e.g. closing the plugin window) runs on every exit path of a conversion.
"""

from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from blox_ui.config import RuntimeConfig
from blox_ui.core.export import CodegenResult, ExportSession, export_file, generate_code
from blox_ui.enums import ConvertRunType
from blox_ui.errors import NavigationError, UnhandledKeyError
from blox_ui.persistence import DirectoryStore
from blox_ui.scene.mapper import SceneMapper
from blox_ui.scene.nodes import SceneDocument
from blox_ui.utils.console import log_info, log_success


class HostMessage(str, Enum):
  CONVERT_TO_CODE = "convert-to-code"
  CONVERT_TO_OBJECT = "convert-to-object"
  GENERATE_CODE = "generate"
  BACK_TO_MAIN = "back-to-main"


class HostView(str, Enum):
  MAIN = "main"
  PREVIEW = "preview"


class HostReply(BaseModel):
  """
  What the plugin UI receives after a message was handled.
  """

  message: HostMessage = Field(description="The message that was handled.")
  view: HostView = Field(description="The view the plugin should show next.")
  files: List[Path] = Field(default_factory=list, description="Files written by the export.")
  previews: List[CodegenResult] = Field(default_factory=list, description="Preview blocks, one per dialect.")


class MessageRouter:
  """
  Dispatches host messages for one plugin session.

  Attributes:
      config (RuntimeConfig): Dialects, stems and output directory.
      session (ExportSession): File-name counters shared by every export.
      store (DirectoryStore): Where finished files are written.
      view (HostView): The view currently showing.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    session: Optional[ExportSession] = None,
    store: Optional[DirectoryStore] = None,
    on_finished: Optional[Callable[[], None]] = None,
  ) -> None:
    self.config = config or RuntimeConfig()
    self.session = session or ExportSession()
    self.store = store or DirectoryStore(self.config.output_dir)
    self.on_finished = on_finished
    self.view = HostView.MAIN

    self._handlers: Dict[HostMessage, Callable[[SceneDocument], HostReply]] = {
      HostMessage.CONVERT_TO_CODE: self._convert_to_code,
      HostMessage.CONVERT_TO_OBJECT: self._convert_to_object,
      HostMessage.GENERATE_CODE: self._generate,
      HostMessage.BACK_TO_MAIN: self._back_to_main,
    }

  def handle(self, message: str, document: Optional[SceneDocument] = None) -> HostReply:
    """
    Handles one message against the current selection.

    Args:
        message: The raw message key sent by the plugin UI.
        document: The selection to convert. Optional for navigation messages.

    Returns:
        HostReply: Files written, preview blocks and the next view.

    Raises:
        UnhandledKeyError: If ``message`` is not a known key.
        NavigationError: If navigation is requested from the main view.
        BloxUIError: Any conversion or export failure from the core.
    """
    try:
      key = HostMessage(message)
    except ValueError as e:
      raise UnhandledKeyError(f"Unhandled message key: '{message}'") from e

    return self._handlers[key](document or SceneDocument())

  def _convert(self, run_type: ConvertRunType, message: HostMessage, document: SceneDocument) -> HostReply:
    try:
      entities = SceneMapper(document.overrides).map_document(document)
      output = export_file(
        run_type,
        entities,
        self.session,
        dialect=self.config.primary_dialect,
        script_stem=self.config.script_stem,
        markup_stem=self.config.markup_stem,
      )
      path = self.store.save(output)
    finally:
      if self.on_finished is not None:
        self.on_finished()

    log_success(f"Wrote [path]{path}[/path]")
    self.view = HostView.MAIN
    return HostReply(message=message, view=self.view, files=[path])

  def _convert_to_code(self, document: SceneDocument) -> HostReply:
    return self._convert(ConvertRunType.CONVERT_TO_CODE, HostMessage.CONVERT_TO_CODE, document)

  def _convert_to_object(self, document: SceneDocument) -> HostReply:
    return self._convert(ConvertRunType.CONVERT_TO_OBJECT, HostMessage.CONVERT_TO_OBJECT, document)

  def _generate(self, document: SceneDocument) -> HostReply:
    entities = SceneMapper(document.overrides).map_document(document)
    previews = generate_code(entities, self.config.dialects)
    self.view = HostView.PREVIEW
    return HostReply(message=HostMessage.GENERATE_CODE, view=self.view, previews=previews)

  def _back_to_main(self, document: SceneDocument) -> HostReply:
    if self.view == HostView.MAIN:
      raise NavigationError("Already on the main view")
    log_info("Returning to the main view")
    self.view = HostView.MAIN
    return HostReply(message=HostMessage.BACK_TO_MAIN, view=self.view)
