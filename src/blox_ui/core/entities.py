"""
Entity Hierarchy.

Immutable records for every widget kind the generators know. Shared property
groups are expressed as dataclass bases so each concrete record is flat:

- ``Entity``: Archivable, Name, Parent (plus owned ``children`` for traversal).
- ``GuiBase2d``: localization and selection-behavior fields.
- ``GuiObject``: geometry, colors, borders, selection links, Draggable.
- ``ImageObject`` / ``TextObject`` / ``GuiButton``: image, text and button fields.
- ``UIGridStyleLayout``: the alignment and ordering shared by layouts.

Defaults are the values the target runtime assigns to a freshly inserted
instance. Serialization lives in ``core.lua`` and ``core.rbxmx``; records here
carry data only.

References to other widgets (``parent``, ``next_selection_*``,
``selection_image_object``) are plain names. ``root_localization_table`` and
``current_camera`` hold shared embedded records.
"""

import dataclasses
import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Tuple

from blox_ui.core.tokens import (
  ApplyStrokeMode,
  AspectType,
  AutomaticSize,
  BorderMode,
  ButtonStyle,
  CameraType,
  DominantAxis,
  EasingDirection,
  EasingStyle,
  ElasticBehavior,
  FieldOfViewMode,
  FillDirection,
  FrameStyle,
  HorizontalAlignment,
  ItemLineAlignment,
  LineJoinMode,
  ResamplerMode,
  SafeAreaCompatibility,
  ScaleType,
  ScreenInsets,
  ScrollBarInset,
  ScrollingDirection,
  SelectionBehavior,
  SizeConstraint,
  SortOrder,
  StartCorner,
  TableMajorAxis,
  TextDirection,
  TextTruncate,
  TextXAlignment,
  TextYAlignment,
  UIFlexAlignment,
  UIFlexMode,
  VerticalAlignment,
  VerticalScrollBarPosition,
  ZIndexBehavior,
)
from blox_ui.core.values import (
  CFrame,
  Color3,
  ColorSequence,
  Font,
  NumberSequence,
  Rect,
  UDim,
  UDim2,
  Vector2,
  Vector3,
)
from blox_ui.enums import EntityKind
from blox_ui.utils.formatting import to_camel_case

WHITE = Color3.from_rgb(255, 255, 255)
BLACK = Color3.from_rgb(0, 0, 0)

DEFAULT_FONT_FAMILY = "rbxasset://fonts/families/SourceSansPro.json"
PLACEHOLDER_IMAGE = "rbxasset://textures/ui/GuiImagePlaceholder.png"
SCROLL_BOTTOM_IMAGE = "rbxasset://textures/ui/Scroll/scroll-bottom.png"
SCROLL_MID_IMAGE = "rbxasset://textures/ui/Scroll/scroll-middle.png"
SCROLL_TOP_IMAGE = "rbxasset://textures/ui/Scroll/scroll-top.png"


@dataclass(frozen=True)
class Entity:
  """
  Abstract base for all widget records.

  Attributes:
      archivable (bool): Whether the instance is saved with the place.
      name (str): Instance name. Empty means "use the class name".
      parent (Optional[str]): Name of the parent instance (non-owning).
      children (Tuple[Entity, ...]): Owned child records, walked pre-order.
  """

  kind: ClassVar[EntityKind]

  archivable: bool = True
  name: str = ""
  parent: Optional[str] = None
  children: Tuple["Entity", ...] = ()

  def __post_init__(self) -> None:
    if not self.name:
      object.__setattr__(self, "name", self.kind.value)

  @property
  def var_name(self) -> str:
    """Script variable bound to this instance."""
    return to_camel_case(self.name)

  def walk(self) -> Iterator["Entity"]:
    """
    Yields this record followed by its descendants, depth first.
    """
    yield self
    for child in self.children:
      yield from child.walk()


def attach(parent: Entity, *children: Entity) -> Entity:
  """
  Returns a copy of ``parent`` owning ``children``.

  Each child is copied with its ``parent`` set to the parent's name, so the
  back-reference stays a plain identifier.

  Args:
      parent: The owning record.
      *children: Records appended after any existing children.

  Returns:
      Entity: The new parent record.
  """
  adopted = tuple(dataclasses.replace(c, parent=parent.name) for c in children)
  return dataclasses.replace(parent, children=parent.children + adopted)


# --- Embedded records ---


@dataclass(frozen=True)
class LocalizationTable(Entity):
  kind: ClassVar[EntityKind] = EntityKind.LOCALIZATION_TABLE

  contents: str = "[]"
  source_locale_id: str = "en-us"


@dataclass(frozen=True)
class Camera(Entity):
  kind: ClassVar[EntityKind] = EntityKind.CAMERA

  camera_subject: Optional[str] = None
  camera_type: CameraType = CameraType.Fixed
  cframe: CFrame = CFrame.new()
  field_of_view: float = 70
  field_of_view_mode: FieldOfViewMode = FieldOfViewMode.Vertical
  focus: CFrame = CFrame.new(0, 0, -5)
  head_locked: bool = True
  head_scale: float = 1
  vr_tilt_and_roll_enabled: bool = False

  @property
  def field_of_view_radians(self) -> float:
    return math.radians(self.field_of_view)


# --- 2D GUI groups ---


@dataclass(frozen=True)
class GuiBase2d(Entity):
  auto_localize: bool = True
  root_localization_table: Optional[LocalizationTable] = None
  selection_behavior_down: SelectionBehavior = SelectionBehavior.Escape
  selection_behavior_left: SelectionBehavior = SelectionBehavior.Escape
  selection_behavior_right: SelectionBehavior = SelectionBehavior.Escape
  selection_behavior_up: SelectionBehavior = SelectionBehavior.Escape
  selection_group: bool = False


@dataclass(frozen=True)
class ScreenGui(GuiBase2d):
  """
  Top-level container that renders its descendants on the player's screen.
  """

  kind: ClassVar[EntityKind] = EntityKind.SCREEN_GUI

  clip_to_device_safe_area: bool = True
  display_order: int = 0
  enabled: bool = True
  reset_on_spawn: bool = True
  safe_area_compatibility: SafeAreaCompatibility = SafeAreaCompatibility.FullscreenExtension
  screen_insets: ScreenInsets = ScreenInsets.CoreUISafeInsets
  zindex_behavior: ZIndexBehavior = ZIndexBehavior.Sibling


@dataclass(frozen=True)
class GuiObject(GuiBase2d):
  """
  Properties common to every rectangular on-screen widget.
  """

  active: bool = False
  anchor_point: Vector2 = Vector2.new(0, 0)
  automatic_size: AutomaticSize = AutomaticSize.None_
  background_color3: Color3 = WHITE
  background_transparency: float = 0
  border_color3: Color3 = BLACK
  border_mode: BorderMode = BorderMode.Outline
  border_size_pixel: int = 0
  clips_descendants: bool = False
  draggable: bool = False
  interactable: bool = True
  layout_order: int = 0
  next_selection_down: Optional[str] = None
  next_selection_left: Optional[str] = None
  next_selection_right: Optional[str] = None
  next_selection_up: Optional[str] = None
  position: UDim2 = UDim2.new(0, 0, 0, 0)
  rotation: float = 0
  selectable: bool = False
  selection_image_object: Optional[str] = None
  selection_order: int = 0
  size: UDim2 = UDim2.new(0, 100, 0, 100)
  size_constraint: SizeConstraint = SizeConstraint.RelativeXY
  visible: bool = True
  z_index: int = 1


@dataclass(frozen=True)
class GuiButton(GuiObject):
  # Concrete buttons restate active/selectable: their other base re-supplies
  # GuiObject's False defaults ahead of these.
  active: bool = True
  auto_button_color: bool = True
  modal: bool = False
  selectable: bool = True
  selected: bool = False
  style: ButtonStyle = ButtonStyle.Custom


@dataclass(frozen=True)
class ImageObject(GuiObject):
  image: str = PLACEHOLDER_IMAGE
  image_color3: Color3 = WHITE
  image_rect_offset: Vector2 = Vector2.new(0, 0)
  image_rect_size: Vector2 = Vector2.new(0, 0)
  image_transparency: float = 0
  resample_mode: ResamplerMode = ResamplerMode.Default
  scale_type: ScaleType = ScaleType.Stretch
  slice_center: Rect = Rect.new(0, 0, 0, 0)
  slice_scale: float = 1
  tile_size: UDim2 = UDim2.new(1, 0, 1, 0)


@dataclass(frozen=True)
class TextObject(GuiObject):
  font_face: Font = Font.new(DEFAULT_FONT_FAMILY)
  line_height: float = 1
  max_visible_graphemes: int = -1
  open_type_features: str = ""
  rich_text: bool = False
  text: str = ""
  text_color3: Color3 = BLACK
  text_direction: TextDirection = TextDirection.Auto
  text_scaled: bool = False
  text_size: float = 14
  text_stroke_color3: Color3 = BLACK
  text_stroke_transparency: float = 1
  text_transparency: float = 0
  text_truncate: TextTruncate = TextTruncate.None_
  text_wrapped: bool = False
  text_x_alignment: TextXAlignment = TextXAlignment.Center
  text_y_alignment: TextYAlignment = TextYAlignment.Center


# --- Concrete widgets ---


@dataclass(frozen=True)
class Frame(GuiObject):
  kind: ClassVar[EntityKind] = EntityKind.FRAME

  style: FrameStyle = FrameStyle.Custom


@dataclass(frozen=True)
class ScrollingFrame(GuiObject):
  kind: ClassVar[EntityKind] = EntityKind.SCROLLING_FRAME

  automatic_canvas_size: AutomaticSize = AutomaticSize.None_
  bottom_image: str = SCROLL_BOTTOM_IMAGE
  canvas_position: Vector2 = Vector2.new(0, 0)
  canvas_size: UDim2 = UDim2.new(0, 0, 2, 0)
  elastic_behavior: ElasticBehavior = ElasticBehavior.WhenScrollable
  horizontal_scroll_bar_inset: ScrollBarInset = ScrollBarInset.None_
  mid_image: str = SCROLL_MID_IMAGE
  scroll_bar_image_color3: Color3 = BLACK
  scroll_bar_image_transparency: float = 0
  scroll_bar_thickness: int = 12
  scrolling_direction: ScrollingDirection = ScrollingDirection.XY
  scrolling_enabled: bool = True
  top_image: str = SCROLL_TOP_IMAGE
  vertical_scroll_bar_inset: ScrollBarInset = ScrollBarInset.None_
  vertical_scroll_bar_position: VerticalScrollBarPosition = VerticalScrollBarPosition.Right


@dataclass(frozen=True)
class VideoFrame(GuiObject):
  kind: ClassVar[EntityKind] = EntityKind.VIDEO_FRAME

  looped: bool = False
  playing: bool = False
  time_position: float = 0
  video: Optional[str] = None
  volume: float = 1


@dataclass(frozen=True)
class ViewportFrame(GuiObject):
  kind: ClassVar[EntityKind] = EntityKind.VIEWPORT_FRAME

  ambient: Color3 = Color3.from_rgb(200, 200, 200)
  current_camera: Optional[Camera] = None
  image_color3: Color3 = WHITE
  image_transparency: float = 0
  light_color: Color3 = Color3.from_rgb(140, 140, 140)
  light_direction: Vector3 = Vector3.new(-1, -1, -1)


@dataclass(frozen=True)
class ImageLabel(ImageObject):
  kind: ClassVar[EntityKind] = EntityKind.IMAGE_LABEL


@dataclass(frozen=True)
class ImageButton(ImageObject, GuiButton):
  kind: ClassVar[EntityKind] = EntityKind.IMAGE_BUTTON

  active: bool = True
  hover_image: Optional[str] = None
  pressed_image: Optional[str] = None
  selectable: bool = True


@dataclass(frozen=True)
class TextLabel(TextObject):
  kind: ClassVar[EntityKind] = EntityKind.TEXT_LABEL

  text: str = "Label"


@dataclass(frozen=True)
class TextButton(TextObject, GuiButton):
  kind: ClassVar[EntityKind] = EntityKind.TEXT_BUTTON

  active: bool = True
  selectable: bool = True
  text: str = "Button"


@dataclass(frozen=True)
class TextBox(TextObject):
  kind: ClassVar[EntityKind] = EntityKind.TEXT_BOX

  active: bool = True
  selectable: bool = True
  clear_text_on_focus: bool = True
  cursor_position: int = 1
  multi_line: bool = False
  placeholder_color3: Color3 = Color3.from_rgb(178, 178, 178)
  placeholder_text: str = ""
  selection_start: int = -1
  show_native_input: bool = True
  text_editable: bool = True


# --- Layout and constraint components ---


@dataclass(frozen=True)
class UIGridStyleLayout(Entity):
  fill_direction: FillDirection = FillDirection.Horizontal
  horizontal_alignment: HorizontalAlignment = HorizontalAlignment.Left
  sort_order: SortOrder = SortOrder.LayoutOrder
  vertical_alignment: VerticalAlignment = VerticalAlignment.Top


@dataclass(frozen=True)
class UIAspectRatioConstraint(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_ASPECT_RATIO_CONSTRAINT

  aspect_ratio: float = 1
  aspect_type: AspectType = AspectType.FitWithinMaxSize
  dominant_axis: DominantAxis = DominantAxis.Width


@dataclass(frozen=True)
class UICorner(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_CORNER

  corner_radius: UDim = UDim.new(0, 8)


@dataclass(frozen=True)
class UIFlexItem(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_FLEX_ITEM

  flex_mode: UIFlexMode = UIFlexMode.None_
  grow_ratio: float = 0
  item_line_alignment: ItemLineAlignment = ItemLineAlignment.Automatic
  shrink_ratio: float = 0


@dataclass(frozen=True)
class UIGradient(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_GRADIENT

  color: ColorSequence = field(default_factory=lambda: ColorSequence.solid(WHITE))
  enabled: bool = True
  offset: Vector2 = Vector2.new(0, 0)
  rotation: float = 0
  transparency: NumberSequence = field(default_factory=lambda: NumberSequence.constant(0))


@dataclass(frozen=True)
class UIGridLayout(UIGridStyleLayout):
  kind: ClassVar[EntityKind] = EntityKind.UI_GRID_LAYOUT

  cell_padding: UDim2 = UDim2.new(0, 5, 0, 5)
  cell_size: UDim2 = UDim2.new(0, 100, 0, 100)
  fill_direction_max_cells: int = 0
  start_corner: StartCorner = StartCorner.TopLeft


@dataclass(frozen=True)
class UIListLayout(UIGridStyleLayout):
  kind: ClassVar[EntityKind] = EntityKind.UI_LIST_LAYOUT

  horizontal_flex: UIFlexAlignment = UIFlexAlignment.None_
  item_line_alignment: ItemLineAlignment = ItemLineAlignment.Automatic
  padding: UDim = UDim.new(0, 0)
  vertical_flex: UIFlexAlignment = UIFlexAlignment.None_
  wraps: bool = False


@dataclass(frozen=True)
class UIPadding(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_PADDING

  padding_bottom: UDim = UDim.new(0, 0)
  padding_left: UDim = UDim.new(0, 0)
  padding_right: UDim = UDim.new(0, 0)
  padding_top: UDim = UDim.new(0, 0)


@dataclass(frozen=True)
class UIPageLayout(UIGridStyleLayout):
  kind: ClassVar[EntityKind] = EntityKind.UI_PAGE_LAYOUT

  animated: bool = True
  circular: bool = False
  easing_direction: EasingDirection = EasingDirection.Out
  easing_style: EasingStyle = EasingStyle.Back
  gamepad_input_enabled: bool = True
  padding: UDim = UDim.new(0, 0)
  scroll_wheel_input_enabled: bool = True
  touch_input_enabled: bool = True
  tween_time: float = 1


@dataclass(frozen=True)
class UIScale(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_SCALE

  scale: float = 1


@dataclass(frozen=True)
class UISizeConstraint(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_SIZE_CONSTRAINT

  max_size: Vector2 = Vector2.new(math.inf, math.inf)
  min_size: Vector2 = Vector2.new(0, 0)


@dataclass(frozen=True)
class UIStroke(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_STROKE

  apply_stroke_mode: ApplyStrokeMode = ApplyStrokeMode.Contextual
  color: Color3 = BLACK
  enabled: bool = True
  line_join_mode: LineJoinMode = LineJoinMode.Round
  thickness: float = 1
  transparency: float = 0


@dataclass(frozen=True)
class UITableLayout(UIGridStyleLayout):
  kind: ClassVar[EntityKind] = EntityKind.UI_TABLE_LAYOUT

  fill_empty_space_columns: bool = False
  fill_empty_space_rows: bool = False
  major_axis: TableMajorAxis = TableMajorAxis.RowMajor
  padding: UDim2 = UDim2.new(0, 0, 0, 0)


@dataclass(frozen=True)
class UITextSizeConstraint(Entity):
  kind: ClassVar[EntityKind] = EntityKind.UI_TEXT_SIZE_CONSTRAINT

  max_text_size: int = 100
  min_text_size: int = 1


ENTITY_TYPES = {
  cls.kind: cls
  for cls in (
    Frame,
    ScrollingFrame,
    VideoFrame,
    ViewportFrame,
    ImageLabel,
    ImageButton,
    TextLabel,
    TextButton,
    TextBox,
    ScreenGui,
    Camera,
    LocalizationTable,
    UIAspectRatioConstraint,
    UICorner,
    UIFlexItem,
    UIGradient,
    UIGridLayout,
    UIListLayout,
    UIPadding,
    UIPageLayout,
    UIScale,
    UISizeConstraint,
    UIStroke,
    UITableLayout,
    UITextSizeConstraint,
  )
}
