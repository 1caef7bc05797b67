"""
Markup Templates.

One template per concrete kind, each producing a complete, flat
``<Item class="..."><Properties>...</Properties></Item>`` block listing every
inherited and own property of that class. Templates are looked up through
``MARKUP_TEMPLATES`` keyed by ``EntityKind``.

Schema quirks kept on purpose:

- ``Draggable`` is always written as ``false``.
- Absent references are written as ``null``; absent content as ``<null></null>``.
- Embedded records (RootLocalizationTable, CurrentCamera) are written inline
  inside their ``<Ref>`` through the same dispatch table.
"""

from typing import Callable, Dict, List, Optional

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
from blox_ui.core.values import CFrame, Value
from blox_ui.enums import EntityKind
from blox_ui.errors import ObjectConversionError
from blox_ui.utils.formatting import format_bool, format_number, xml_text

INDENT = "  "

# Field of view (radians) written for a viewport without a camera.
DEFAULT_CAMERA_FIELD_OF_VIEW = 1.22173059

HEADER = [
  '<BinaryString name="AttributesSerialize"></BinaryString>',
  '<SecurityCapabilities name="Capabilities">0</SecurityCapabilities>',
  '<bool name="DefinesCapabilities">false</bool>',
  '<int64 name="SourceAssetId">-1</int64>',
  '<BinaryString name="Tags"></BinaryString>',
]


# --- Typed leaf tags ---


def bool_tag(name: str, value: bool) -> str:
  return f'<bool name="{name}">{format_bool(value)}</bool>'


def float_tag(name: str, value: float) -> str:
  return f'<float name="{name}">{format_number(value, markup=True)}</float>'


def double_tag(name: str, value: float) -> str:
  return f'<double name="{name}">{format_number(value, markup=True)}</double>'


def int_tag(name: str, value: int) -> str:
  return f'<int name="{name}">{format_number(value, markup=True)}</int>'


def string_tag(name: str, value: str) -> str:
  return f'<string name="{name}">{xml_text(value)}</string>'


def token_tag(name: str, value: TokenEnum) -> str:
  return f'<token name="{name}">{value.to_rbxmx()}</token>'


def ref_tag(name: str, target: Optional[str]) -> str:
  return f'<Ref name="{name}">{xml_text(target) if target else "null"}</Ref>'


def content_tag(name: str, url: Optional[str]) -> str:
  if url is None:
    return f'<Content name="{name}"><null></null></Content>'
  return f'<Content name="{name}"><url>{xml_text(url)}</url></Content>'


def value_tag(name: str, value: Value) -> str:
  return value.to_rbxmx(name)


def embedded_tag(name: str, entity: Optional[Entity]) -> str:
  """
  Writes an embedded record inside a ``<Ref>`` using its own template.
  """
  if entity is None:
    return ref_tag(name, None)
  return f'<Ref name="{name}">{to_rbxmx(entity)}</Ref>'


def item(entity: Entity, properties: List[str]) -> str:
  """
  Wraps property tags in the ``<Item>`` block for ``entity``.

  Args:
      entity: Source of the class and Name.
      properties: Rendered property tags after Name.

  Returns:
      str: The complete, indented ``<Item>`` block.
  """
  body = HEADER + [string_tag("Name", entity.name)] + properties
  lines = [f'<Item class="{entity.kind.value}">', f"{INDENT}<Properties>"]
  lines.extend(f"{INDENT * 2}{tag}" for tag in body)
  lines.extend([f"{INDENT}</Properties>", "</Item>"])
  return "\n".join(lines)


# --- Shared blocks ---


def _selection_behaviors(e: GuiBase2d) -> List[str]:
  return [
    token_tag("SelectionBehaviorDown", e.selection_behavior_down),
    token_tag("SelectionBehaviorLeft", e.selection_behavior_left),
    token_tag("SelectionBehaviorRight", e.selection_behavior_right),
    token_tag("SelectionBehaviorUp", e.selection_behavior_up),
    bool_tag("SelectionGroup", e.selection_group),
  ]


def _gui_object(e: GuiObject) -> List[str]:
  return (
    [
      bool_tag("Active", e.active),
      value_tag("AnchorPoint", e.anchor_point),
      bool_tag("AutoLocalize", e.auto_localize),
      token_tag("AutomaticSize", e.automatic_size),
      value_tag("BackgroundColor3", e.background_color3),
      float_tag("BackgroundTransparency", e.background_transparency),
      value_tag("BorderColor3", e.border_color3),
      token_tag("BorderMode", e.border_mode),
      int_tag("BorderSizePixel", e.border_size_pixel),
      bool_tag("ClipsDescendants", e.clips_descendants),
      bool_tag("Draggable", False),
      bool_tag("Interactable", e.interactable),
      int_tag("LayoutOrder", e.layout_order),
      ref_tag("NextSelectionDown", e.next_selection_down),
      ref_tag("NextSelectionLeft", e.next_selection_left),
      ref_tag("NextSelectionRight", e.next_selection_right),
      ref_tag("NextSelectionUp", e.next_selection_up),
      value_tag("Position", e.position),
      embedded_tag("RootLocalizationTable", e.root_localization_table),
      float_tag("Rotation", e.rotation),
      bool_tag("Selectable", e.selectable),
    ]
    + _selection_behaviors(e)
    + [
      ref_tag("SelectionImageObject", e.selection_image_object),
      int_tag("SelectionOrder", e.selection_order),
      value_tag("Size", e.size),
      token_tag("SizeConstraint", e.size_constraint),
      bool_tag("Visible", e.visible),
      int_tag("ZIndex", e.z_index),
    ]
  )


def _image(e: ImageObject) -> List[str]:
  return [
    content_tag("Image", e.image),
    value_tag("ImageColor3", e.image_color3),
    value_tag("ImageRectOffset", e.image_rect_offset),
    value_tag("ImageRectSize", e.image_rect_size),
    float_tag("ImageTransparency", e.image_transparency),
    token_tag("ResampleMode", e.resample_mode),
    token_tag("ScaleType", e.scale_type),
    value_tag("SliceCenter", e.slice_center),
    float_tag("SliceScale", e.slice_scale),
    value_tag("TileSize", e.tile_size),
  ]


def _text(e: TextObject) -> List[str]:
  return [
    value_tag("FontFace", e.font_face),
    float_tag("LineHeight", e.line_height),
    string_tag("LocalizationMatchIdentifier", ""),
    string_tag("LocalizationMatchedSourceText", ""),
    int_tag("MaxVisibleGraphemes", e.max_visible_graphemes),
    string_tag("OpenTypeFeatures", e.open_type_features),
    bool_tag("RichText", e.rich_text),
    string_tag("Text", e.text),
    value_tag("TextColor3", e.text_color3),
    token_tag("TextDirection", e.text_direction),
    bool_tag("TextScaled", e.text_scaled),
    float_tag("TextSize", e.text_size),
    value_tag("TextStrokeColor3", e.text_stroke_color3),
    float_tag("TextStrokeTransparency", e.text_stroke_transparency),
    float_tag("TextTransparency", e.text_transparency),
    token_tag("TextTruncate", e.text_truncate),
    bool_tag("TextWrapped", e.text_wrapped),
    token_tag("TextXAlignment", e.text_x_alignment),
    token_tag("TextYAlignment", e.text_y_alignment),
  ]


def _button(e: GuiButton) -> List[str]:
  return [
    bool_tag("AutoButtonColor", e.auto_button_color),
    bool_tag("Modal", e.modal),
    bool_tag("Selected", e.selected),
    token_tag("Style", e.style),
  ]


def _grid_style(e: UIGridStyleLayout) -> List[str]:
  return [
    token_tag("FillDirection", e.fill_direction),
    token_tag("HorizontalAlignment", e.horizontal_alignment),
    token_tag("SortOrder", e.sort_order),
    token_tag("VerticalAlignment", e.vertical_alignment),
  ]


# --- Per-kind templates ---


def _frame(e: Frame) -> str:
  return item(e, _gui_object(e) + [token_tag("Style", e.style)])


def _scrolling_frame(e: ScrollingFrame) -> str:
  return item(
    e,
    _gui_object(e)
    + [
      token_tag("AutomaticCanvasSize", e.automatic_canvas_size),
      content_tag("BottomImage", e.bottom_image),
      value_tag("CanvasPosition", e.canvas_position),
      value_tag("CanvasSize", e.canvas_size),
      token_tag("ElasticBehavior", e.elastic_behavior),
      token_tag("HorizontalScrollBarInset", e.horizontal_scroll_bar_inset),
      content_tag("MidImage", e.mid_image),
      value_tag("ScrollBarImageColor3", e.scroll_bar_image_color3),
      float_tag("ScrollBarImageTransparency", e.scroll_bar_image_transparency),
      int_tag("ScrollBarThickness", e.scroll_bar_thickness),
      token_tag("ScrollingDirection", e.scrolling_direction),
      bool_tag("ScrollingEnabled", e.scrolling_enabled),
      content_tag("TopImage", e.top_image),
      token_tag("VerticalScrollBarInset", e.vertical_scroll_bar_inset),
      token_tag("VerticalScrollBarPosition", e.vertical_scroll_bar_position),
    ],
  )


def _video_frame(e: VideoFrame) -> str:
  return item(
    e,
    _gui_object(e)
    + [
      bool_tag("Looped", e.looped),
      bool_tag("Playing", e.playing),
      double_tag("TimePosition", e.time_position),
      content_tag("Video", e.video),
      float_tag("Volume", e.volume),
    ],
  )


def _viewport_frame(e: ViewportFrame) -> str:
  camera = e.current_camera
  camera_cframe = camera.cframe if camera is not None else CFrame.new()
  fov = camera.field_of_view_radians if camera is not None else DEFAULT_CAMERA_FIELD_OF_VIEW
  return item(
    e,
    _gui_object(e)
    + [
      value_tag("Ambient", e.ambient),
      value_tag("CameraCFrame", camera_cframe),
      float_tag("CameraFieldOfView", fov),
      embedded_tag("CurrentCamera", camera),
      value_tag("ImageColor3", e.image_color3),
      float_tag("ImageTransparency", e.image_transparency),
      value_tag("LightColor", e.light_color),
      value_tag("LightDirection", e.light_direction),
    ],
  )


def _image_label(e: ImageObject) -> str:
  return item(e, _gui_object(e) + _image(e))


def _image_button(e: ImageButton) -> str:
  return item(
    e,
    _gui_object(e)
    + _image(e)
    + _button(e)
    + [
      content_tag("HoverImage", e.hover_image),
      content_tag("PressedImage", e.pressed_image),
    ],
  )


def _text_label(e: TextObject) -> str:
  return item(e, _gui_object(e) + _text(e))


def _text_button(e: TextObject) -> str:
  return item(e, _gui_object(e) + _text(e) + _button(e))


def _text_box(e: TextBox) -> str:
  return item(
    e,
    _gui_object(e)
    + _text(e)
    + [
      bool_tag("ClearTextOnFocus", e.clear_text_on_focus),
      int_tag("CursorPosition", e.cursor_position),
      bool_tag("MultiLine", e.multi_line),
      value_tag("PlaceholderColor3", e.placeholder_color3),
      string_tag("PlaceholderText", e.placeholder_text),
      int_tag("SelectionStart", e.selection_start),
      bool_tag("ShowNativeInput", e.show_native_input),
      bool_tag("TextEditable", e.text_editable),
    ],
  )


def _screen_gui(e: ScreenGui) -> str:
  return item(
    e,
    [
      bool_tag("AutoLocalize", e.auto_localize),
      bool_tag("ClipToDeviceSafeArea", e.clip_to_device_safe_area),
      int_tag("DisplayOrder", e.display_order),
      bool_tag("Enabled", e.enabled),
      bool_tag("ResetOnSpawn", e.reset_on_spawn),
      embedded_tag("RootLocalizationTable", e.root_localization_table),
      token_tag("SafeAreaCompatibility", e.safe_area_compatibility),
      token_tag("ScreenInsets", e.screen_insets),
    ]
    + _selection_behaviors(e)
    + [token_tag("ZIndexBehavior", e.zindex_behavior)],
  )


def _camera(e: Camera) -> str:
  return item(
    e,
    [
      value_tag("CFrame", e.cframe),
      ref_tag("CameraSubject", e.camera_subject),
      token_tag("CameraType", e.camera_type),
      float_tag("FieldOfView", e.field_of_view),
      token_tag("FieldOfViewMode", e.field_of_view_mode),
      value_tag("Focus", e.focus),
      bool_tag("HeadLocked", e.head_locked),
      float_tag("HeadScale", e.head_scale),
      bool_tag("VRTiltAndRollEnabled", e.vr_tilt_and_roll_enabled),
    ],
  )


def _localization_table(e: LocalizationTable) -> str:
  return item(
    e,
    [
      string_tag("Contents", e.contents),
      string_tag("SourceLocaleId", e.source_locale_id),
    ],
  )


def _aspect_ratio_constraint(e: UIAspectRatioConstraint) -> str:
  return item(
    e,
    [
      float_tag("AspectRatio", e.aspect_ratio),
      token_tag("AspectType", e.aspect_type),
      token_tag("DominantAxis", e.dominant_axis),
    ],
  )


def _corner(e: UICorner) -> str:
  return item(e, [value_tag("CornerRadius", e.corner_radius)])


def _flex_item(e: UIFlexItem) -> str:
  return item(
    e,
    [
      token_tag("FlexMode", e.flex_mode),
      float_tag("GrowRatio", e.grow_ratio),
      token_tag("ItemLineAlignment", e.item_line_alignment),
      float_tag("ShrinkRatio", e.shrink_ratio),
    ],
  )


def _gradient(e: UIGradient) -> str:
  return item(
    e,
    [
      value_tag("Color", e.color),
      bool_tag("Enabled", e.enabled),
      value_tag("Offset", e.offset),
      float_tag("Rotation", e.rotation),
      value_tag("Transparency", e.transparency),
    ],
  )


def _grid_layout(e: UIGridLayout) -> str:
  return item(
    e,
    [
      value_tag("CellPadding", e.cell_padding),
      value_tag("CellSize", e.cell_size),
      int_tag("FillDirectionMaxCells", e.fill_direction_max_cells),
      token_tag("StartCorner", e.start_corner),
    ]
    + _grid_style(e),
  )


def _list_layout(e: UIListLayout) -> str:
  return item(
    e,
    _grid_style(e)
    + [
      token_tag("HorizontalFlex", e.horizontal_flex),
      token_tag("ItemLineAlignment", e.item_line_alignment),
      value_tag("Padding", e.padding),
      token_tag("VerticalFlex", e.vertical_flex),
      bool_tag("Wraps", e.wraps),
    ],
  )


def _padding(e: UIPadding) -> str:
  return item(
    e,
    [
      value_tag("PaddingBottom", e.padding_bottom),
      value_tag("PaddingLeft", e.padding_left),
      value_tag("PaddingRight", e.padding_right),
      value_tag("PaddingTop", e.padding_top),
    ],
  )


def _page_layout(e: UIPageLayout) -> str:
  return item(
    e,
    _grid_style(e)
    + [
      bool_tag("Animated", e.animated),
      bool_tag("Circular", e.circular),
      token_tag("EasingDirection", e.easing_direction),
      token_tag("EasingStyle", e.easing_style),
      bool_tag("GamepadInputEnabled", e.gamepad_input_enabled),
      value_tag("Padding", e.padding),
      bool_tag("ScrollWheelInputEnabled", e.scroll_wheel_input_enabled),
      bool_tag("TouchInputEnabled", e.touch_input_enabled),
      float_tag("TweenTime", e.tween_time),
    ],
  )


def _scale(e: UIScale) -> str:
  return item(e, [float_tag("Scale", e.scale)])


def _size_constraint(e: UISizeConstraint) -> str:
  return item(
    e,
    [
      value_tag("MaxSize", e.max_size),
      value_tag("MinSize", e.min_size),
    ],
  )


def _stroke(e: UIStroke) -> str:
  return item(
    e,
    [
      token_tag("ApplyStrokeMode", e.apply_stroke_mode),
      value_tag("Color", e.color),
      bool_tag("Enabled", e.enabled),
      token_tag("LineJoinMode", e.line_join_mode),
      float_tag("Thickness", e.thickness),
      float_tag("Transparency", e.transparency),
    ],
  )


def _table_layout(e: UITableLayout) -> str:
  return item(
    e,
    _grid_style(e)
    + [
      bool_tag("FillEmptySpaceColumns", e.fill_empty_space_columns),
      bool_tag("FillEmptySpaceRows", e.fill_empty_space_rows),
      token_tag("MajorAxis", e.major_axis),
      value_tag("Padding", e.padding),
    ],
  )


def _text_size_constraint(e: UITextSizeConstraint) -> str:
  return item(
    e,
    [
      int_tag("MaxTextSize", e.max_text_size),
      int_tag("MinTextSize", e.min_text_size),
    ],
  )


MARKUP_TEMPLATES: Dict[EntityKind, Callable[..., str]] = {
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


def to_rbxmx(entity: Entity) -> str:
  """
  Renders one entity (without its children) as an ``<Item>`` block.

  Args:
      entity: The record to render.

  Returns:
      str: The markup block.

  Raises:
      ObjectConversionError: If no template matches the entity's kind.
  """
  template = MARKUP_TEMPLATES.get(getattr(entity, "kind", None))
  if template is None:
    raise ObjectConversionError(f"No markup template for '{type(entity).__name__}'")
  return template(entity)
