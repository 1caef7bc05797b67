"""
Script Emitter.

Renders entity records as imperative Lua/Luau statements:

    local frame = Instance.new("Frame")
    frame.Archivable = true
    frame.Name = "Frame"
    ...
    frame.Style = Enum.FrameStyle.Custom

Property order is ancestor-then-self: every kind's template concatenates the
shared group helpers (instance, 2D base, 2D object, ...) and then appends its
own assignments. Templates are selected through ``SCRIPT_TEMPLATES``, keyed by
``EntityKind``.

Weak references (Parent, NextSelection*, SelectionImageObject) are resolved to
the variables the writer declared for the named entities. References to
entities declared further down are emitted after all blocks so the script
never reads a local before it exists.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Set, Tuple

from blox_ui.core.entities import (
  Camera,
  Entity,
  Frame,
  GuiBase2d,
  GuiButton,
  GuiObject,
  ImageButton,
  ImageObject,
  LocalizationTable,
  ScreenGui,
  ScrollingFrame,
  TextBox,
  TextObject,
  UIAspectRatioConstraint,
  UICorner,
  UIFlexItem,
  UIGradient,
  UIGridLayout,
  UIGridStyleLayout,
  UIListLayout,
  UIPadding,
  UIPageLayout,
  UIScale,
  UISizeConstraint,
  UIStroke,
  UITableLayout,
  UITextSizeConstraint,
  VideoFrame,
  ViewportFrame,
)
from blox_ui.core.tokens import TokenEnum
from blox_ui.core.values import Value
from blox_ui.enums import CodeDialect, EntityKind
from blox_ui.errors import ScriptConversionError
from blox_ui.utils.formatting import format_bool, format_number, lua_string


class Ref(NamedTuple):
  """A weak reference to another entity by name."""

  name: Optional[str]


class Embedded(NamedTuple):
  """A shared sub-record that gets its own construction block."""

  entity: Optional[Entity]


Properties = List[Tuple[str, Any]]


# --- Group helpers ---


def instance_properties(e: Entity) -> Properties:
  return [
    ("Archivable", e.archivable),
    ("Name", e.name),
    ("Parent", Ref(e.parent)),
  ]


def gui_base2d_properties(e: GuiBase2d) -> Properties:
  return instance_properties(e) + [
    ("AutoLocalize", e.auto_localize),
    ("RootLocalizationTable", Embedded(e.root_localization_table)),
    ("SelectionBehaviorDown", e.selection_behavior_down),
    ("SelectionBehaviorLeft", e.selection_behavior_left),
    ("SelectionBehaviorRight", e.selection_behavior_right),
    ("SelectionBehaviorUp", e.selection_behavior_up),
    ("SelectionGroup", e.selection_group),
  ]


def gui_object_properties(e: GuiObject) -> Properties:
  """
  Everything a 2D widget inherits, in ancestor-then-self order.
  """
  return gui_base2d_properties(e) + [
    ("Active", e.active),
    ("AnchorPoint", e.anchor_point),
    ("AutomaticSize", e.automatic_size),
    ("BackgroundColor3", e.background_color3),
    ("BackgroundTransparency", e.background_transparency),
    ("BorderColor3", e.border_color3),
    ("BorderMode", e.border_mode),
    ("BorderSizePixel", e.border_size_pixel),
    ("ClipsDescendants", e.clips_descendants),
    ("Draggable", e.draggable),
    ("Interactable", e.interactable),
    ("LayoutOrder", e.layout_order),
    ("NextSelectionDown", Ref(e.next_selection_down)),
    ("NextSelectionLeft", Ref(e.next_selection_left)),
    ("NextSelectionRight", Ref(e.next_selection_right)),
    ("NextSelectionUp", Ref(e.next_selection_up)),
    ("Position", e.position),
    ("Rotation", e.rotation),
    ("Selectable", e.selectable),
    ("SelectionImageObject", Ref(e.selection_image_object)),
    ("SelectionOrder", e.selection_order),
    ("Size", e.size),
    ("SizeConstraint", e.size_constraint),
    ("Visible", e.visible),
    ("ZIndex", e.z_index),
  ]


def button_properties(e: GuiButton) -> Properties:
  return [
    ("AutoButtonColor", e.auto_button_color),
    ("Modal", e.modal),
    ("Selected", e.selected),
    ("Style", e.style),
  ]


def image_properties(e: ImageObject) -> Properties:
  return gui_object_properties(e) + [
    ("Image", e.image),
    ("ImageColor3", e.image_color3),
    ("ImageRectOffset", e.image_rect_offset),
    ("ImageRectSize", e.image_rect_size),
    ("ImageTransparency", e.image_transparency),
    ("ResampleMode", e.resample_mode),
    ("ScaleType", e.scale_type),
    ("SliceCenter", e.slice_center),
    ("SliceScale", e.slice_scale),
    ("TileSize", e.tile_size),
  ]


def text_properties(e: TextObject) -> Properties:
  return gui_object_properties(e) + [
    ("FontFace", e.font_face),
    ("LineHeight", e.line_height),
    ("MaxVisibleGraphemes", e.max_visible_graphemes),
    ("OpenTypeFeatures", e.open_type_features),
    ("RichText", e.rich_text),
    ("Text", e.text),
    ("TextColor3", e.text_color3),
    ("TextDirection", e.text_direction),
    ("TextScaled", e.text_scaled),
    ("TextSize", e.text_size),
    ("TextStrokeColor3", e.text_stroke_color3),
    ("TextStrokeTransparency", e.text_stroke_transparency),
    ("TextTransparency", e.text_transparency),
    ("TextTruncate", e.text_truncate),
    ("TextWrapped", e.text_wrapped),
    ("TextXAlignment", e.text_x_alignment),
    ("TextYAlignment", e.text_y_alignment),
  ]


def grid_style_properties(e: UIGridStyleLayout) -> Properties:
  return instance_properties(e) + [
    ("FillDirection", e.fill_direction),
    ("HorizontalAlignment", e.horizontal_alignment),
    ("SortOrder", e.sort_order),
    ("VerticalAlignment", e.vertical_alignment),
  ]


# --- Per-kind templates ---


def _frame(e: Frame) -> Properties:
  return gui_object_properties(e) + [("Style", e.style)]


def _scrolling_frame(e: ScrollingFrame) -> Properties:
  return gui_object_properties(e) + [
    ("AutomaticCanvasSize", e.automatic_canvas_size),
    ("BottomImage", e.bottom_image),
    ("CanvasPosition", e.canvas_position),
    ("CanvasSize", e.canvas_size),
    ("ElasticBehavior", e.elastic_behavior),
    ("HorizontalScrollBarInset", e.horizontal_scroll_bar_inset),
    ("MidImage", e.mid_image),
    ("ScrollBarImageColor3", e.scroll_bar_image_color3),
    ("ScrollBarImageTransparency", e.scroll_bar_image_transparency),
    ("ScrollBarThickness", e.scroll_bar_thickness),
    ("ScrollingDirection", e.scrolling_direction),
    ("ScrollingEnabled", e.scrolling_enabled),
    ("TopImage", e.top_image),
    ("VerticalScrollBarInset", e.vertical_scroll_bar_inset),
    ("VerticalScrollBarPosition", e.vertical_scroll_bar_position),
  ]


def _video_frame(e: VideoFrame) -> Properties:
  return gui_object_properties(e) + [
    ("Looped", e.looped),
    ("Playing", e.playing),
    ("TimePosition", e.time_position),
    ("Video", e.video or ""),
    ("Volume", e.volume),
  ]


def _viewport_frame(e: ViewportFrame) -> Properties:
  return gui_object_properties(e) + [
    ("Ambient", e.ambient),
    ("CurrentCamera", Embedded(e.current_camera)),
    ("ImageColor3", e.image_color3),
    ("ImageTransparency", e.image_transparency),
    ("LightColor", e.light_color),
    ("LightDirection", e.light_direction),
  ]


def _image_label(e: ImageObject) -> Properties:
  return image_properties(e)


def _image_button(e: ImageButton) -> Properties:
  return (
    image_properties(e)
    + button_properties(e)
    + [
      ("HoverImage", e.hover_image or ""),
      ("PressedImage", e.pressed_image or ""),
    ]
  )


def _text_label(e: TextObject) -> Properties:
  return text_properties(e)


def _text_button(e: TextObject) -> Properties:
  return text_properties(e) + button_properties(e)


def _text_box(e: TextBox) -> Properties:
  return text_properties(e) + [
    ("ClearTextOnFocus", e.clear_text_on_focus),
    ("CursorPosition", e.cursor_position),
    ("MultiLine", e.multi_line),
    ("PlaceholderColor3", e.placeholder_color3),
    ("PlaceholderText", e.placeholder_text),
    ("SelectionStart", e.selection_start),
    ("ShowNativeInput", e.show_native_input),
    ("TextEditable", e.text_editable),
  ]


def _screen_gui(e: ScreenGui) -> Properties:
  return gui_base2d_properties(e) + [
    ("ClipToDeviceSafeArea", e.clip_to_device_safe_area),
    ("DisplayOrder", e.display_order),
    ("Enabled", e.enabled),
    ("ResetOnSpawn", e.reset_on_spawn),
    ("SafeAreaCompatibility", e.safe_area_compatibility),
    ("ScreenInsets", e.screen_insets),
    ("ZIndexBehavior", e.zindex_behavior),
  ]


def _camera(e: Camera) -> Properties:
  return instance_properties(e) + [
    ("CameraSubject", Ref(e.camera_subject)),
    ("CameraType", e.camera_type),
    ("CFrame", e.cframe),
    ("FieldOfView", e.field_of_view),
    ("FieldOfViewMode", e.field_of_view_mode),
    ("Focus", e.focus),
    ("HeadLocked", e.head_locked),
    ("HeadScale", e.head_scale),
    ("VRTiltAndRollEnabled", e.vr_tilt_and_roll_enabled),
  ]


def _localization_table(e: LocalizationTable) -> Properties:
  # Contents is not scriptable; entries only travel in the markup form.
  return instance_properties(e) + [("SourceLocaleId", e.source_locale_id)]


def _aspect_ratio_constraint(e: UIAspectRatioConstraint) -> Properties:
  return instance_properties(e) + [
    ("AspectRatio", e.aspect_ratio),
    ("AspectType", e.aspect_type),
    ("DominantAxis", e.dominant_axis),
  ]


def _corner(e: UICorner) -> Properties:
  return instance_properties(e) + [("CornerRadius", e.corner_radius)]


def _flex_item(e: UIFlexItem) -> Properties:
  return instance_properties(e) + [
    ("FlexMode", e.flex_mode),
    ("GrowRatio", e.grow_ratio),
    ("ItemLineAlignment", e.item_line_alignment),
    ("ShrinkRatio", e.shrink_ratio),
  ]


def _gradient(e: UIGradient) -> Properties:
  return instance_properties(e) + [
    ("Color", e.color),
    ("Enabled", e.enabled),
    ("Offset", e.offset),
    ("Rotation", e.rotation),
    ("Transparency", e.transparency),
  ]


def _grid_layout(e: UIGridLayout) -> Properties:
  return grid_style_properties(e) + [
    ("CellPadding", e.cell_padding),
    ("CellSize", e.cell_size),
    ("FillDirectionMaxCells", e.fill_direction_max_cells),
    ("StartCorner", e.start_corner),
  ]


def _list_layout(e: UIListLayout) -> Properties:
  return grid_style_properties(e) + [
    ("HorizontalFlex", e.horizontal_flex),
    ("ItemLineAlignment", e.item_line_alignment),
    ("Padding", e.padding),
    ("VerticalFlex", e.vertical_flex),
    ("Wraps", e.wraps),
  ]


def _padding(e: UIPadding) -> Properties:
  return instance_properties(e) + [
    ("PaddingBottom", e.padding_bottom),
    ("PaddingLeft", e.padding_left),
    ("PaddingRight", e.padding_right),
    ("PaddingTop", e.padding_top),
  ]


def _page_layout(e: UIPageLayout) -> Properties:
  return grid_style_properties(e) + [
    ("Animated", e.animated),
    ("Circular", e.circular),
    ("EasingDirection", e.easing_direction),
    ("EasingStyle", e.easing_style),
    ("GamepadInputEnabled", e.gamepad_input_enabled),
    ("Padding", e.padding),
    ("ScrollWheelInputEnabled", e.scroll_wheel_input_enabled),
    ("TouchInputEnabled", e.touch_input_enabled),
    ("TweenTime", e.tween_time),
  ]


def _scale(e: UIScale) -> Properties:
  return instance_properties(e) + [("Scale", e.scale)]


def _size_constraint(e: UISizeConstraint) -> Properties:
  return instance_properties(e) + [
    ("MaxSize", e.max_size),
    ("MinSize", e.min_size),
  ]


def _stroke(e: UIStroke) -> Properties:
  return instance_properties(e) + [
    ("ApplyStrokeMode", e.apply_stroke_mode),
    ("Color", e.color),
    ("Enabled", e.enabled),
    ("LineJoinMode", e.line_join_mode),
    ("Thickness", e.thickness),
    ("Transparency", e.transparency),
  ]


def _table_layout(e: UITableLayout) -> Properties:
  return grid_style_properties(e) + [
    ("FillEmptySpaceColumns", e.fill_empty_space_columns),
    ("FillEmptySpaceRows", e.fill_empty_space_rows),
    ("MajorAxis", e.major_axis),
    ("Padding", e.padding),
  ]


def _text_size_constraint(e: UITextSizeConstraint) -> Properties:
  return instance_properties(e) + [
    ("MaxTextSize", e.max_text_size),
    ("MinTextSize", e.min_text_size),
  ]


SCRIPT_TEMPLATES: Dict[EntityKind, Callable[[Any], Properties]] = {
  EntityKind.FRAME: _frame,
  EntityKind.SCROLLING_FRAME: _scrolling_frame,
  EntityKind.VIDEO_FRAME: _video_frame,
  EntityKind.VIEWPORT_FRAME: _viewport_frame,
  EntityKind.IMAGE_LABEL: _image_label,
  EntityKind.IMAGE_BUTTON: _image_button,
  EntityKind.TEXT_LABEL: _text_label,
  EntityKind.TEXT_BUTTON: _text_button,
  EntityKind.TEXT_BOX: _text_box,
  EntityKind.SCREEN_GUI: _screen_gui,
  EntityKind.CAMERA: _camera,
  EntityKind.LOCALIZATION_TABLE: _localization_table,
  EntityKind.UI_ASPECT_RATIO_CONSTRAINT: _aspect_ratio_constraint,
  EntityKind.UI_CORNER: _corner,
  EntityKind.UI_FLEX_ITEM: _flex_item,
  EntityKind.UI_GRADIENT: _gradient,
  EntityKind.UI_GRID_LAYOUT: _grid_layout,
  EntityKind.UI_LIST_LAYOUT: _list_layout,
  EntityKind.UI_PADDING: _padding,
  EntityKind.UI_PAGE_LAYOUT: _page_layout,
  EntityKind.UI_SCALE: _scale,
  EntityKind.UI_SIZE_CONSTRAINT: _size_constraint,
  EntityKind.UI_STROKE: _stroke,
  EntityKind.UI_TABLE_LAYOUT: _table_layout,
  EntityKind.UI_TEXT_SIZE_CONSTRAINT: _text_size_constraint,
}


def script_properties(entity: Entity) -> Properties:
  """
  Looks up the template for an entity's kind and returns its property list.

  Raises:
      ScriptConversionError: If the kind has no script template.
  """
  template = SCRIPT_TEMPLATES.get(getattr(entity, "kind", None))
  if template is None:
    raise ScriptConversionError(f"No script template for '{type(entity).__name__}'")
  return template(entity)


def render_literal(value: Any) -> str:
  """
  Renders a plain property value as a script literal.

  Args:
      value: A bool, number, string, runtime enum or primitive value.

  Returns:
      str: The literal text.

  Raises:
      ScriptConversionError: For values with no script form.
  """
  if value is None:
    return "nil"
  if isinstance(value, bool):
    return format_bool(value)
  if isinstance(value, TokenEnum):
    return value.to_lua()
  if isinstance(value, (int, float)):
    return format_number(value)
  if isinstance(value, str):
    return lua_string(value)
  if isinstance(value, Value):
    return value.to_lua()
  raise ScriptConversionError(f"Cannot render value of type '{type(value).__name__}'")


class ScriptWriter:
  """
  Stateful renderer for one script document.

  Declares a unique local per entity, tracks which locals already exist, and
  collects assignments that point forward for emission at the end.
  """

  def __init__(self, dialect: CodeDialect = CodeDialect.LUA) -> None:
    self.dialect = dialect
    self._vars: Dict[int, str] = {}
    self._by_name: Dict[str, str] = {}
    self._taken: Set[str] = set()
    self._emitted: Set[str] = set()
    self._deferred: List[str] = []

  def declare(self, roots: Iterable[Entity]) -> None:
    """
    Reserves variables for every entity in ``roots`` (pre-order).

    Names resolve to the first entity declared with that name.
    """
    for root in roots:
      for entity in root.walk():
        self._var_for(entity)

  def _var_for(self, entity: Entity) -> str:
    key = id(entity)
    if key in self._vars:
      return self._vars[key]

    base = entity.var_name
    var = base
    n = 2
    while var in self._taken:
      var = f"{base}{n}"
      n += 1

    self._vars[key] = var
    self._taken.add(var)
    self._by_name.setdefault(entity.name, var)
    return var

  def render_tree(self, root: Entity) -> Iterator[str]:
    """
    Yields one block per entity of ``root``'s subtree, pre-order.

    Embedded records (localization tables, cameras) get their block just
    before the first entity that uses them.
    """
    yield from self._render_subtree(root, None)

  def _render_subtree(self, entity: Entity, tree_parent: Optional[Entity]) -> Iterator[str]:
    yield self.render(entity, tree_parent)
    for child in entity.children:
      yield from self._render_subtree(child, entity)

  def render(self, entity: Entity, tree_parent: Optional[Entity] = None) -> str:
    """
    Renders one entity as a construction line plus its assignments.

    Args:
        entity: The record to render.
        tree_parent: The record that owns ``entity`` in the tree being
            rendered, used to resolve ``Parent`` when names repeat.

    Returns:
        str: The newline-joined block.

    Raises:
        ScriptConversionError: If the entity (or an embedded record) has no
            script template.
    """
    properties = script_properties(entity)
    lines: List[str] = []

    for _, value in properties:
      if isinstance(value, Embedded) and value.entity is not None:
        if self._var_for(value.entity) not in self._emitted:
          lines.append(self.render(value.entity))

    var = self._var_for(entity)
    kind = entity.kind.value
    if self.dialect == CodeDialect.LUAU:
      lines.append(f'local {var}: {kind} = Instance.new("{kind}")')
    else:
      lines.append(f'local {var} = Instance.new("{kind}")')
    self._emitted.add(var)

    for prop, value in properties:
      if isinstance(value, Embedded):
        target = self._var_for(value.entity) if value.entity is not None else None
      elif isinstance(value, Ref):
        target = self._resolve(value.name, tree_parent if prop == "Parent" else None)
      else:
        lines.append(f"{var}.{prop} = {render_literal(value)}")
        continue

      if target is not None and target not in self._emitted:
        self._deferred.append(f"{var}.{prop} = {target}")
        continue
      lines.append(f"{var}.{prop} = {target or 'nil'}")

    return "\n".join(lines)

  def _resolve(self, name: Optional[str], tree_parent: Optional[Entity]) -> Optional[str]:
    if name is None:
      return None
    if tree_parent is not None and tree_parent.name == name:
      return self._vars.get(id(tree_parent))
    return self._by_name.get(name)

  def finish(self) -> List[str]:
    """
    Returns the deferred forward-reference assignments and clears them.
    """
    deferred, self._deferred = self._deferred, []
    return deferred


def script_blocks(roots: Sequence[Entity], dialect: CodeDialect = CodeDialect.LUA) -> List[str]:
  """
  Renders a forest of entities as script blocks.

  Args:
      roots: Root records; each is walked with its children.
      dialect: Target dialect.

  Returns:
      List[str]: One block per entity, then any forward-reference assignments.
  """
  writer = ScriptWriter(dialect)
  writer.declare(roots)
  blocks: List[str] = []
  for root in roots:
    blocks.extend(writer.render_tree(root))
  blocks.extend(writer.finish())
  return blocks


def render_script(roots: Sequence[Entity], dialect: CodeDialect = CodeDialect.LUA) -> str:
  """Renders a complete script document for a forest of entities."""
  return "\n".join(script_blocks(roots, dialect))


def to_lua(entity: Entity, dialect: CodeDialect = CodeDialect.LUA) -> str:
  """
  Renders a single entity (without its children) as a standalone block.
  """
  return ScriptWriter(dialect).render(entity)
