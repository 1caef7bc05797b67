"""
Target-runtime enumerations.

Member names are the runtime's own item names (``None`` is spelled ``None_``
because it is reserved in Python) and member values are the runtime's
documented integer values, which is what markup files store inside
``<token>`` tags.
"""

from enum import IntEnum


class TokenEnum(IntEnum):
  """
  Base for runtime enums; knows both textual renderings.
  """

  @property
  def item_name(self) -> str:
    """The runtime item name, e.g. ``Custom``."""
    return self.name.rstrip("_")

  def to_lua(self) -> str:
    """
    Returns:
        str: The script literal, e.g. ``Enum.FrameStyle.Custom``.
    """
    return f"Enum.{type(self).__name__}.{self.item_name}"

  def to_rbxmx(self) -> str:
    """
    Returns:
        str: The integer token value as text.
    """
    return str(int(self))


class SelectionBehavior(TokenEnum):
  Escape = 0
  Stop = 1


class AutomaticSize(TokenEnum):
  None_ = 0
  X = 1
  Y = 2
  XY = 3


class BorderMode(TokenEnum):
  Outline = 0
  Middle = 1
  Inset = 2


class SizeConstraint(TokenEnum):
  RelativeXY = 0
  RelativeXX = 1
  RelativeYY = 2


class ButtonStyle(TokenEnum):
  Custom = 0
  RobloxButtonDefault = 1
  RobloxButton = 2
  RobloxRoundButton = 3
  RobloxRoundDefaultButton = 4
  RobloxRoundDropdownButton = 5


class FrameStyle(TokenEnum):
  Custom = 0
  ChatBlue = 1
  RobloxSquare = 2
  RobloxRound = 3
  ChatGreen = 4
  ChatRed = 5
  DropShadow = 6


class ElasticBehavior(TokenEnum):
  WhenScrollable = 0
  Always = 1
  Never = 2


class ScrollBarInset(TokenEnum):
  None_ = 0
  ScrollBar = 1
  Always = 2


class ScrollingDirection(TokenEnum):
  X = 1
  Y = 2
  XY = 4


class VerticalScrollBarPosition(TokenEnum):
  Right = 0
  Left = 1


class ResamplerMode(TokenEnum):
  Default = 0
  Pixelated = 1


class ScaleType(TokenEnum):
  Stretch = 0
  Slice = 1
  Tile = 2
  Fit = 3
  Crop = 4


class TextDirection(TokenEnum):
  Auto = 0
  LeftToRight = 1
  RightToLeft = 2


class TextTruncate(TokenEnum):
  None_ = 0
  AtEnd = 1
  SplitWord = 2


class TextXAlignment(TokenEnum):
  Left = 0
  Right = 1
  Center = 2


class TextYAlignment(TokenEnum):
  Top = 0
  Center = 1
  Bottom = 2


class FontWeight(TokenEnum):
  Thin = 100
  ExtraLight = 200
  Light = 300
  Regular = 400
  Medium = 500
  SemiBold = 600
  Bold = 700
  ExtraBold = 800
  Heavy = 900


class FontStyle(TokenEnum):
  Normal = 0
  Italic = 1


class AspectType(TokenEnum):
  FitWithinMaxSize = 0
  ScaleWithParentSize = 1


class DominantAxis(TokenEnum):
  Width = 0
  Height = 1


class UIFlexMode(TokenEnum):
  None_ = 0
  Grow = 1
  Shrink = 2
  Fill = 3
  Custom = 4


class ItemLineAlignment(TokenEnum):
  Automatic = 0
  Start = 1
  Center = 2
  End = 3
  Stretch = 4


class StartCorner(TokenEnum):
  TopLeft = 0
  TopRight = 1
  BottomLeft = 2
  BottomRight = 3


class FillDirection(TokenEnum):
  Horizontal = 0
  Vertical = 1


class HorizontalAlignment(TokenEnum):
  Center = 0
  Left = 1
  Right = 2


class VerticalAlignment(TokenEnum):
  Center = 0
  Top = 1
  Bottom = 2


class SortOrder(TokenEnum):
  Name = 0
  Custom = 1
  LayoutOrder = 2


class UIFlexAlignment(TokenEnum):
  None_ = 0
  Fill = 1
  SpaceAround = 2
  SpaceBetween = 3
  SpaceEvenly = 4


class EasingDirection(TokenEnum):
  In = 0
  Out = 1
  InOut = 2


class EasingStyle(TokenEnum):
  Linear = 0
  Sine = 1
  Back = 2
  Quad = 3
  Quart = 4
  Quint = 5
  Bounce = 6
  Elastic = 7
  Exponential = 8
  Circular = 9
  Cubic = 10


class ApplyStrokeMode(TokenEnum):
  Contextual = 0
  Border = 1


class LineJoinMode(TokenEnum):
  Round = 0
  Bevel = 1
  Miter = 2


class TableMajorAxis(TokenEnum):
  RowMajor = 0
  ColumnMajor = 1


class ZIndexBehavior(TokenEnum):
  Global = 0
  Sibling = 1


class ScreenInsets(TokenEnum):
  None_ = 0
  DeviceSafeInsets = 1
  CoreUISafeInsets = 2
  TopbarSafeInsets = 3


class SafeAreaCompatibility(TokenEnum):
  None_ = 0
  FullscreenExtension = 1


class CameraType(TokenEnum):
  Fixed = 0
  Attach = 1
  Watch = 2
  Track = 3
  Follow = 4
  Custom = 5
  Scriptable = 6
  Orbital = 7


class FieldOfViewMode(TokenEnum):
  Vertical = 0
  Diagonal = 1
  MaxAxis = 2
