"""
Scene Node Contract.

Normalized design-tool nodes handed to the mapper by the traversal layer.
Documents are JSON; keys may be written in camelCase (as design tools export
them) or snake_case.

Example document::

    {
      "nodes": [
        {"id": "1:2", "name": "Card", "type": "FRAME", "width": 200, "height": 120,
         "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}]}
      ],
      "overrides": {"Card": {"zIndex": 3}}
    }
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blox_ui.errors import ValidationError


class NodeType(str, Enum):
  FRAME = "FRAME"
  GROUP = "GROUP"
  COMPONENT = "COMPONENT"
  RECTANGLE = "RECTANGLE"
  ELLIPSE = "ELLIPSE"
  TEXT = "TEXT"
  IMAGE = "IMAGE"
  VIDEO = "VIDEO"


class ComponentType(str, Enum):
  """Widget kinds a design component can declare through ``uiType``."""

  VIEWPORTFRAME = "VIEWPORTFRAME"
  IMAGEBUTTON = "IMAGEBUTTON"
  TEXTBUTTON = "TEXTBUTTON"
  TEXTBOX = "TEXTBOX"
  IMAGELABEL = "IMAGELABEL"
  SCROLLINGFRAME = "SCROLLINGFRAME"
  VIDEOFRAME = "VIDEOFRAME"


class _SceneModel(BaseModel):
  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class RGB(_SceneModel):
  r: float = Field(ge=0, le=1)
  g: float = Field(ge=0, le=1)
  b: float = Field(ge=0, le=1)


class ColorStop(_SceneModel):
  position: float = Field(ge=0, le=1)
  color: RGB


class Paint(_SceneModel):
  """
  A fill. ``type`` is kept as free text so unsupported paints surface as
  conversion errors instead of load errors.
  """

  type: str
  color: Optional[RGB] = None
  gradient_stops: List[ColorStop] = Field(default_factory=list)
  opacity: float = Field(1.0, ge=0, le=1)
  visible: bool = True


class LineHeight(_SceneModel):
  unit: str = "AUTO"  # AUTO, PIXELS or PERCENT
  value: float = 0


class SceneNode(_SceneModel):
  """
  One design node with the geometry, paint and text data the mapper reads.
  """

  id: str = ""
  name: str
  type: str
  x: float = 0
  y: float = 0
  width: float = 100
  height: float = 100
  rotation: float = 0
  opacity: float = Field(1.0, ge=0, le=1)
  visible: bool = True
  clips_content: bool = False
  corner_radius: float = 0
  fills: List[Paint] = Field(default_factory=list)
  children: List["SceneNode"] = Field(default_factory=list)

  # Text nodes
  characters: str = ""
  font_family: str = "Source Sans Pro"
  font_style: str = "Regular"
  font_weight: int = 400
  font_size: float = 14
  line_height: LineHeight = Field(default_factory=LineHeight)
  text_align_horizontal: str = "CENTER"
  text_align_vertical: str = "CENTER"
  text_truncation: str = "DISABLED"

  # Media nodes
  image_url: Optional[str] = None
  video_url: Optional[str] = None

  # Components
  ui_type: Optional[ComponentType] = None

  @property
  def visible_fills(self) -> List[Paint]:
    return [p for p in self.fills if p.visible]


SceneNode.model_rebuild()


class SceneDocument(_SceneModel):
  """
  A selection: root nodes plus per-name property overrides.
  """

  nodes: List[SceneNode] = Field(default_factory=list)
  overrides: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


def parse_scene(data: Dict[str, Any]) -> SceneDocument:
  """
  Validates a decoded scene document.

  Raises:
      ValidationError: If the document does not match the node contract.
  """
  try:
    return SceneDocument.model_validate(data)
  except pydantic.ValidationError as e:
    raise ValidationError(f"Invalid scene document: {e}") from e


def load_scene(path: Path) -> SceneDocument:
  """
  Reads and validates a scene document from a JSON file.

  Args:
      path: File to read.

  Returns:
      SceneDocument: The parsed selection.

  Raises:
      ValidationError: If the file is not valid JSON or fails validation.
  """
  try:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
  except json.JSONDecodeError as e:
    raise ValidationError(f"Scene file '{path}' is not valid JSON: {e}") from e
  return parse_scene(data)
