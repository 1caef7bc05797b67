"""
Scene Mapper.

Converts normalized design nodes into entity records:

- RECTANGLE, GROUP -> Frame
- FRAME -> Frame, or ScrollingFrame when it clips content that overflows it
- ELLIPSE -> Frame with a UICorner(0.5, 0) child
- TEXT -> TextLabel
- IMAGE -> ImageLabel, VIDEO -> VideoFrame
- COMPONENT -> the kind named by its ``uiType``

A solid fill becomes the background color. A linear gradient becomes a
white background plus a UIGradient child. A non-zero corner radius adds
a UICorner. Unknown node types are skipped with a warning.
"""

import dataclasses
import typing
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from blox_ui.core.entities import (
  WHITE,
  Entity,
  Frame,
  ImageButton,
  ImageLabel,
  ScrollingFrame,
  TextBox,
  TextButton,
  TextLabel,
  UICorner,
  UIGradient,
  VideoFrame,
  ViewportFrame,
  attach,
)
from blox_ui.core.tokens import FontStyle, FontWeight, TextTruncate, TextXAlignment, TextYAlignment, TokenEnum
from blox_ui.core.values import Color3, ColorSequence, ColorSequenceKeypoint, Font, UDim, UDim2, Value
from blox_ui.errors import ObjectConversionError, ValidationError
from blox_ui.scene.nodes import RGB, ComponentType, NodeType, Paint, SceneDocument, SceneNode
from blox_ui.utils.console import log_warning

TEXT_X_ALIGNMENT = {
  "LEFT": TextXAlignment.Left,
  "CENTER": TextXAlignment.Center,
  "RIGHT": TextXAlignment.Right,
  "JUSTIFIED": TextXAlignment.Center,
}

TEXT_Y_ALIGNMENT = {
  "TOP": TextYAlignment.Top,
  "CENTER": TextYAlignment.Center,
  "BOTTOM": TextYAlignment.Bottom,
}

TEXT_TRUNCATE = {
  "DISABLED": TextTruncate.None_,
  "ENDING": TextTruncate.AtEnd,
}

FONT_FAMILY_URL = "rbxasset://fonts/families/{}.json"


def to_color3(rgb: RGB) -> Color3:
  """Scales unit-range channels to 0..255."""
  return Color3.from_rgb(round(rgb.r * 255), round(rgb.g * 255), round(rgb.b * 255))


def to_roblox_color(paint: Paint) -> Any:
  """
  Converts a fill into a Color3 (solid) or ColorSequence (linear gradient).

  Gradient stops are sorted by position.

  Raises:
      ObjectConversionError: For any other paint type.
  """
  if paint.type == "SOLID" and paint.color is not None:
    return to_color3(paint.color)
  if paint.type == "GRADIENT_LINEAR" and paint.gradient_stops:
    stops = sorted(paint.gradient_stops, key=lambda s: s.position)
    return ColorSequence.new([ColorSequenceKeypoint.new(s.position, to_color3(s.color)) for s in stops])
  raise ObjectConversionError(f"Unsupported paint type '{paint.type}'")


def transparency(opacity: float) -> float:
  """Design opacity to runtime transparency."""
  return round(1 - opacity, 4)


def font_face(node: SceneNode) -> Font:
  family = FONT_FAMILY_URL.format(node.font_family.replace(" ", ""))
  weight_value = min(900, max(100, int(round(node.font_weight / 100.0)) * 100))
  style = FontStyle.Italic if "italic" in node.font_style.lower() else FontStyle.Normal
  return Font.new(family, FontWeight(weight_value), style)


def line_height(node: SceneNode) -> float:
  lh = node.line_height
  if lh.unit == "PERCENT":
    return round(lh.value / 100, 4)
  if lh.unit == "PIXELS" and node.font_size:
    return round(lh.value / node.font_size, 4)
  return 1


def overflows(node: SceneNode) -> bool:
  """True if any child extends past the node's bounds."""
  for child in node.children:
    if child.x < 0 or child.y < 0:
      return True
    if child.x + child.width > node.width or child.y + child.height > node.height:
      return True
  return False


class SceneMapper:
  """
  Maps a scene document to root entities.

  Args:
      overrides: Field values applied to entities by node name, keyed by
          entity field name (snake_case or camelCase).
  """

  def __init__(self, overrides: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
    self.overrides = overrides or {}
    self._builders: Dict[str, Callable[[SceneNode], Optional[Entity]]] = {
      NodeType.RECTANGLE.value: self._rectangle,
      NodeType.GROUP.value: self._group,
      NodeType.FRAME.value: self._frame,
      NodeType.ELLIPSE.value: self._ellipse,
      NodeType.TEXT.value: self._text,
      NodeType.IMAGE.value: self._image,
      NodeType.VIDEO.value: self._video,
      NodeType.COMPONENT.value: self._component,
    }

  def map_document(self, document: SceneDocument) -> List[Entity]:
    self.overrides = {**document.overrides, **self.overrides}
    return self.map_nodes(document.nodes)

  def map_nodes(self, nodes: List[SceneNode]) -> List[Entity]:
    """
    Maps each node, dropping the ones with no counterpart.
    """
    entities = []
    for node in nodes:
      entity = self.map_node(node)
      if entity is not None:
        entities.append(entity)
    return entities

  def map_node(self, node: SceneNode) -> Optional[Entity]:
    """
    Maps one node (and its subtree).

    Returns:
        Optional[Entity]: The record, or None for unsupported node types.

    Raises:
        ObjectConversionError: If a fill cannot be converted.
    """
    builder = self._builders.get(node.type)
    if builder is None:
      log_warning(f"Skipping '{node.name}': unsupported node type {node.type}")
      return None
    entity = builder(node)
    if entity is None:
      return None
    return self._apply_overrides(entity)

  # --- Shared field extraction ---

  def _geometry(self, node: SceneNode) -> Dict[str, Any]:
    return {
      "name": node.name,
      "position": UDim2.new(0, node.x, 0, node.y),
      "size": UDim2.new(0, node.width, 0, node.height),
      # Design rotation is counter-clockwise; the runtime's is clockwise.
      "rotation": -node.rotation if node.rotation else 0,
      "visible": node.visible,
    }

  def _background(self, node: SceneNode) -> Tuple[Dict[str, Any], List[Entity]]:
    """
    Background fields plus decoration children (gradient, corner).
    """
    fields: Dict[str, Any] = {}
    extras: List[Entity] = []
    fills = node.visible_fills

    if not fills:
      fields["background_transparency"] = 1
    else:
      paint = fills[0]
      color = to_roblox_color(paint)
      if isinstance(color, ColorSequence):
        fields["background_color3"] = WHITE
        extras.append(UIGradient(color=color))
      else:
        fields["background_color3"] = color
      fields["background_transparency"] = transparency(node.opacity * paint.opacity)

    if node.corner_radius:
      extras.append(UICorner(corner_radius=UDim.new(0, node.corner_radius)))
    return fields, extras

  def _text_fields(self, node: SceneNode) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
      "font_face": font_face(node),
      "line_height": line_height(node),
      "text": node.characters,
      "text_size": node.font_size,
      "text_transparency": transparency(node.opacity),
      "text_truncate": TEXT_TRUNCATE.get(node.text_truncation, TextTruncate.None_),
      "text_x_alignment": TEXT_X_ALIGNMENT.get(node.text_align_horizontal, TextXAlignment.Center),
      "text_y_alignment": TEXT_Y_ALIGNMENT.get(node.text_align_vertical, TextYAlignment.Center),
      "background_transparency": 1,
    }
    fills = node.visible_fills
    if fills:
      color = to_roblox_color(fills[0])
      if isinstance(color, ColorSequence):
        color = color.keypoints[0].value
      fields["text_color3"] = color
    return fields

  def _boxed(self, cls: Any, node: SceneNode, **extra: Any) -> Entity:
    fields, decorations = self._background(node)
    entity = cls(**self._geometry(node), **fields, **extra)
    children = decorations + self.map_nodes(node.children)
    return attach(entity, *children) if children else entity

  # --- Per node type ---

  def _rectangle(self, node: SceneNode) -> Entity:
    return self._boxed(Frame, node)

  def _group(self, node: SceneNode) -> Entity:
    # Groups have no paint of their own.
    entity = Frame(**self._geometry(node), background_transparency=1)
    children = self.map_nodes(node.children)
    return attach(entity, *children) if children else entity

  def _frame(self, node: SceneNode) -> Entity:
    if node.clips_content and overflows(node):
      right = max(c.x + c.width for c in node.children)
      bottom = max(c.y + c.height for c in node.children)
      return self._boxed(
        ScrollingFrame,
        node,
        clips_descendants=True,
        canvas_size=UDim2.new(0, max(right, node.width), 0, max(bottom, node.height)),
      )
    return self._boxed(Frame, node, clips_descendants=node.clips_content)

  def _ellipse(self, node: SceneNode) -> Entity:
    flat = node.model_copy(update={"corner_radius": 0})
    entity = self._boxed(Frame, flat)
    return attach(entity, UICorner(corner_radius=UDim.new(0.5, 0)))

  def _text(self, node: SceneNode) -> Entity:
    return TextLabel(**self._geometry(node), **self._text_fields(node))

  def _image(self, node: SceneNode) -> Entity:
    extra = {"image": node.image_url} if node.image_url else {}
    return self._boxed(ImageLabel, _without_media_fills(node), **extra)

  def _video(self, node: SceneNode) -> Entity:
    return self._boxed(VideoFrame, _without_media_fills(node), video=node.video_url)

  def _component(self, node: SceneNode) -> Optional[Entity]:
    if node.ui_type is None:
      log_warning(f"Skipping component '{node.name}': no uiType declared")
      return None

    # A component wraps a single instance that carries the visual data.
    main = node.children[0] if len(node.children) == 1 else node
    main = main.model_copy(update={"name": node.name, "x": node.x, "y": node.y, "children": []})

    ui_type = node.ui_type
    if ui_type == ComponentType.TEXTBUTTON:
      return TextButton(**self._geometry(main), **self._text_fields(main))
    if ui_type == ComponentType.TEXTBOX:
      fields = self._text_fields(main)
      fields["placeholder_text"] = fields.pop("text")
      return TextBox(**self._geometry(main), **fields)
    if ui_type == ComponentType.IMAGEBUTTON:
      extra = {"image": main.image_url} if main.image_url else {}
      return self._boxed(ImageButton, _without_media_fills(main), **extra)
    if ui_type == ComponentType.IMAGELABEL:
      return self._image(main)
    if ui_type == ComponentType.VIEWPORTFRAME:
      return self._boxed(ViewportFrame, main)
    if ui_type == ComponentType.VIDEOFRAME:
      return self._video(main)
    return self._boxed(ScrollingFrame, main, clips_descendants=True)

  # --- Overrides ---

  def _apply_overrides(self, entity: Entity) -> Entity:
    raw = self.overrides.get(entity.name)
    if not raw:
      return entity

    declared = typing.get_type_hints(type(entity))
    known = {_field_key(f.name): f.name for f in dataclasses.fields(entity)}
    changes = {}
    for key, value in raw.items():
      name = known.get(_field_key(key))
      if name is None or name in ("children", "parent", "name"):
        raise ValidationError(f"Override '{key}' is not a settable field of {entity.kind.value}")
      if not isinstance(value, (bool, int, float, str)):
        raise ValidationError(f"Override '{key}' must be a scalar, got {value!r}")
      changes[name] = _coerce(declared[name], value, key)
    return dataclasses.replace(entity, **changes)


def _unwrap_optional(field_type: Any) -> Any:
  if typing.get_origin(field_type) is Union:
    args = [a for a in typing.get_args(field_type) if a is not type(None)]
    if len(args) == 1:
      return args[0]
  return field_type


def _coerce(field_type: Any, value: Any, key: str) -> Any:
  """
  Converts a scalar override to the field's declared type.

  Raises:
      ValidationError: If the field holds a structured value (embedded
          record or primitive value type) or ``value`` does not fit it.
  """
  target = _unwrap_optional(field_type)
  name = getattr(target, "__name__", str(target))
  if isinstance(target, type) and issubclass(target, (Entity, Value)):
    raise ValidationError(f"Override '{key}' targets a {name} field; only scalar fields can be overridden")

  if (target is bool) != isinstance(value, bool):
    raise ValidationError(f"Override '{key}' expects {name}, got {value!r}")

  if target is bool:
    return value
  if isinstance(target, type) and issubclass(target, TokenEnum):
    by_name = {m.item_name: m for m in target}
    try:
      return by_name[value] if isinstance(value, str) else target(value)
    except (KeyError, ValueError) as e:
      raise ValidationError(f"Override '{key}': {value!r} is not a {name}") from e
  elif target is int:
    if isinstance(value, int):
      return value
    if isinstance(value, float) and value.is_integer():
      return int(value)
  elif target is float:
    if isinstance(value, (int, float)):
      return float(value)
  elif target is str:
    if isinstance(value, str):
      return value

  raise ValidationError(f"Override '{key}' expects {name}, got {value!r}")


def _without_media_fills(node: SceneNode) -> SceneNode:
  """Drops image/video paints; media nodes carry their content by URL."""
  fills = [p for p in node.fills if p.type not in ("IMAGE", "VIDEO")]
  return node.model_copy(update={"fills": fills})


def _field_key(name: str) -> str:
  # "textColor3", "text_color3" and "TextColor3" all name the same field.
  return name.replace("_", "").lower()
