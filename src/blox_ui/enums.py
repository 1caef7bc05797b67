"""
Enumerations for blox-ui.

Defines the closed set of entity kinds the generators understand, the export
run modes, and the supported scripting dialects.
"""

from enum import Enum


class EntityKind(str, Enum):
  """
  Discriminant of every entity, named after the target runtime class.

  The value is the literal class name written into `Instance.new("...")`
  and `<Item class="...">`.
  """

  FRAME = "Frame"
  SCROLLING_FRAME = "ScrollingFrame"
  VIDEO_FRAME = "VideoFrame"
  VIEWPORT_FRAME = "ViewportFrame"
  IMAGE_LABEL = "ImageLabel"
  IMAGE_BUTTON = "ImageButton"
  TEXT_LABEL = "TextLabel"
  TEXT_BUTTON = "TextButton"
  TEXT_BOX = "TextBox"
  SCREEN_GUI = "ScreenGui"
  CAMERA = "Camera"
  LOCALIZATION_TABLE = "LocalizationTable"
  UI_ASPECT_RATIO_CONSTRAINT = "UIAspectRatioConstraint"
  UI_CORNER = "UICorner"
  UI_FLEX_ITEM = "UIFlexItem"
  UI_GRADIENT = "UIGradient"
  UI_GRID_LAYOUT = "UIGridLayout"
  UI_LIST_LAYOUT = "UIListLayout"
  UI_PADDING = "UIPadding"
  UI_PAGE_LAYOUT = "UIPageLayout"
  UI_SCALE = "UIScale"
  UI_SIZE_CONSTRAINT = "UISizeConstraint"
  UI_STROKE = "UIStroke"
  UI_TABLE_LAYOUT = "UITableLayout"
  UI_TEXT_SIZE_CONSTRAINT = "UITextSizeConstraint"


class ConvertRunType(str, Enum):
  """
  What an export request produces.

  CONVERT_TO_CODE and CONVERT_TO_OBJECT create files; GENERATE_CODE is the
  read-only in-app preview path.
  """

  CONVERT_TO_CODE = "code"
  CONVERT_TO_OBJECT = "object"
  GENERATE_CODE = "generate"


class CodeDialect(str, Enum):
  """Scripting dialects the script emitter can target."""

  LUA = "lua"
  LUAU = "luau"  # Lua with type annotations on declarations
