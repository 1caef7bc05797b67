"""
Primitive Value Types.

Small immutable records for the target runtime's data types (colors, vectors,
relative dimensions, rectangles, fonts, keyframe sequences and coordinate
frames). Each value renders itself in both output formats:

- ``to_lua()``: the constructor-call literal, e.g. ``UDim2.new(0, 100, 0, 100)``.
- ``to_rbxmx(name)``: the typed XML property block for a property ``name``.

Values are built with the ``new`` / ``from_rgb`` class constructors, which
mirror the runtime's own constructors and report domain violations as
:class:`blox_ui.errors.ValidationError`.
"""

from typing import Any, List, Tuple, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from blox_ui.core.tokens import FontStyle, FontWeight
from blox_ui.errors import ValidationError
from blox_ui.utils.formatting import format_number, lua_string, xml_text

V = TypeVar("V", bound="Value")


def _build(cls: Type[V], **fields: Any) -> V:
  try:
    return cls.model_validate(fields)
  except pydantic.ValidationError as e:
    raise ValidationError(f"Invalid {cls.__name__}: {e}") from e


def _n(value: float) -> str:
  return format_number(value, markup=True)


class Value(BaseModel):
  """
  Abstract base class for all primitive values.
  """

  model_config = ConfigDict(frozen=True)

  def to_lua(self) -> str:
    """
    Render the value as a script constructor call.

    Raises:
        NotImplementedError: If not implemented by subclass.
    """
    raise NotImplementedError

  def to_rbxmx(self, name: str) -> str:
    """
    Render the value as a markup property named ``name``.

    Raises:
        NotImplementedError: If not implemented by subclass.
    """
    raise NotImplementedError


class Color3(Value):
  """
  An RGB color with channels in the 0-255 range.

  Script form uses ``Color3.fromRGB``; markup stores unit-range floats.
  """

  r: float = Field(ge=0, le=255)
  g: float = Field(ge=0, le=255)
  b: float = Field(ge=0, le=255)

  @classmethod
  def from_rgb(cls, r: float, g: float, b: float) -> "Color3":
    return _build(cls, r=r, g=g, b=b)

  @property
  def unit(self) -> Tuple[float, float, float]:
    """Channels scaled into 0..1."""
    return (self.r / 255, self.g / 255, self.b / 255)

  def to_lua(self) -> str:
    return f"Color3.fromRGB({format_number(self.r)}, {format_number(self.g)}, {format_number(self.b)})"

  def to_rbxmx(self, name: str) -> str:
    r, g, b = self.unit
    return f'<Color3 name="{name}"><R>{_n(r)}</R><G>{_n(g)}</G><B>{_n(b)}</B></Color3>'


class Vector2(Value):
  x: float
  y: float

  @classmethod
  def new(cls, x: float, y: float) -> "Vector2":
    return _build(cls, x=x, y=y)

  def to_lua(self) -> str:
    return f"Vector2.new({format_number(self.x)}, {format_number(self.y)})"

  def to_rbxmx(self, name: str) -> str:
    return f'<Vector2 name="{name}"><X>{_n(self.x)}</X><Y>{_n(self.y)}</Y></Vector2>'


class Vector3(Value):
  x: float
  y: float
  z: float

  @classmethod
  def new(cls, x: float, y: float, z: float) -> "Vector3":
    return _build(cls, x=x, y=y, z=z)

  def to_lua(self) -> str:
    return f"Vector3.new({format_number(self.x)}, {format_number(self.y)}, {format_number(self.z)})"

  def to_rbxmx(self, name: str) -> str:
    return f'<Vector3 name="{name}"><X>{_n(self.x)}</X><Y>{_n(self.y)}</Y><Z>{_n(self.z)}</Z></Vector3>'


class UDim(Value):
  """
  A one-dimensional relative size: a fraction of the parent plus pixels.
  """

  scale: float
  offset: float

  @classmethod
  def new(cls, scale: float, offset: float) -> "UDim":
    return _build(cls, scale=scale, offset=offset)

  def to_lua(self) -> str:
    return f"UDim.new({format_number(self.scale)}, {format_number(self.offset)})"

  def to_rbxmx(self, name: str) -> str:
    return f'<UDim name="{name}"><S>{_n(self.scale)}</S><O>{_n(self.offset)}</O></UDim>'


class UDim2(Value):
  """
  A two-dimensional relative size or position built from two UDims.
  """

  x: UDim
  y: UDim

  @classmethod
  def new(cls, x_scale: float, x_offset: float, y_scale: float, y_offset: float) -> "UDim2":
    return _build(
      cls,
      x=UDim.new(x_scale, x_offset),
      y=UDim.new(y_scale, y_offset),
    )

  def to_lua(self) -> str:
    parts = (self.x.scale, self.x.offset, self.y.scale, self.y.offset)
    return f"UDim2.new({', '.join(format_number(p) for p in parts)})"

  def to_rbxmx(self, name: str) -> str:
    return (
      f'<UDim2 name="{name}">'
      f"<XS>{_n(self.x.scale)}</XS><XO>{_n(self.x.offset)}</XO>"
      f"<YS>{_n(self.y.scale)}</YS><YO>{_n(self.y.offset)}</YO>"
      f"</UDim2>"
    )


class Rect(Value):
  """
  An axis-aligned rectangle stored as its min and max corners.

  Corner ordering is not checked.
  """

  min: Vector2
  max: Vector2

  @classmethod
  def new(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
    return _build(cls, min=Vector2.new(min_x, min_y), max=Vector2.new(max_x, max_y))

  def to_lua(self) -> str:
    parts = (self.min.x, self.min.y, self.max.x, self.max.y)
    return f"Rect.new({', '.join(format_number(p) for p in parts)})"

  def to_rbxmx(self, name: str) -> str:
    return (
      f'<Rect2D name="{name}">'
      f"<min><X>{_n(self.min.x)}</X><Y>{_n(self.min.y)}</Y></min>"
      f"<max><X>{_n(self.max.x)}</X><Y>{_n(self.max.y)}</Y></max>"
      f"</Rect2D>"
    )


class Font(Value):
  """
  A font face: asset family plus weight and style.
  """

  family: str
  weight: FontWeight = FontWeight.Regular
  style: FontStyle = FontStyle.Normal

  @classmethod
  def new(cls, family: str, weight: FontWeight = FontWeight.Regular, style: FontStyle = FontStyle.Normal) -> "Font":
    return _build(cls, family=family, weight=weight, style=style)

  def to_lua(self) -> str:
    return f"Font.new({lua_string(self.family)}, {self.weight.to_lua()}, {self.style.to_lua()})"

  def to_rbxmx(self, name: str) -> str:
    return (
      f'<Font name="{name}">'
      f"<Family><url>{xml_text(self.family)}</url></Family>"
      f"<Weight>{int(self.weight)}</Weight>"
      f"<Style>{self.style.item_name}</Style>"
      f"</Font>"
    )


class ColorSequenceKeypoint(Value):
  time: float = Field(ge=0, le=1)
  value: Color3

  @classmethod
  def new(cls, time: float, value: Color3) -> "ColorSequenceKeypoint":
    return _build(cls, time=time, value=value)

  def to_lua(self) -> str:
    return f"ColorSequenceKeypoint.new({format_number(self.time)}, {self.value.to_lua()})"


class NumberSequenceKeypoint(Value):
  time: float = Field(ge=0, le=1)
  value: float
  envelope: float = 0

  @classmethod
  def new(cls, time: float, value: float, envelope: float = 0) -> "NumberSequenceKeypoint":
    return _build(cls, time=time, value=value, envelope=envelope)

  def to_lua(self) -> str:
    return (
      f"NumberSequenceKeypoint.new({format_number(self.time)}, "
      f"{format_number(self.value)}, {format_number(self.envelope)})"
    )


def _check_keypoints(keypoints: Tuple[Any, ...]) -> Tuple[Any, ...]:
  if not keypoints:
    raise ValueError("a sequence needs at least one keypoint")
  times = [k.time for k in keypoints]
  if times != sorted(times):
    raise ValueError("keypoints must be ordered by time")
  return keypoints


class ColorSequence(Value):
  """
  A color gradient over time (0..1), used by gradients.
  """

  keypoints: Tuple[ColorSequenceKeypoint, ...]

  @field_validator("keypoints")
  @classmethod
  def check_order(cls, v):
    return _check_keypoints(v)

  @classmethod
  def new(cls, keypoints: List[ColorSequenceKeypoint]) -> "ColorSequence":
    return _build(cls, keypoints=tuple(keypoints))

  @classmethod
  def solid(cls, color: Color3) -> "ColorSequence":
    """A constant sequence, as ``ColorSequence.new(color)`` builds."""
    return cls.new([ColorSequenceKeypoint.new(0, color), ColorSequenceKeypoint.new(1, color)])

  def to_lua(self) -> str:
    return f"ColorSequence.new({{{', '.join(k.to_lua() for k in self.keypoints)}}})"

  def to_rbxmx(self, name: str) -> str:
    body = ""
    for k in self.keypoints:
      r, g, b = k.value.unit
      body += f"{_n(k.time)} {_n(r)} {_n(g)} {_n(b)} 0 "
    return f'<ColorSequence name="{name}">{body}</ColorSequence>'


class NumberSequence(Value):
  """
  A scalar curve over time (0..1), used for gradient transparency.
  """

  keypoints: Tuple[NumberSequenceKeypoint, ...]

  @field_validator("keypoints")
  @classmethod
  def check_order(cls, v):
    return _check_keypoints(v)

  @classmethod
  def new(cls, keypoints: List[NumberSequenceKeypoint]) -> "NumberSequence":
    return _build(cls, keypoints=tuple(keypoints))

  @classmethod
  def constant(cls, value: float) -> "NumberSequence":
    return cls.new([NumberSequenceKeypoint.new(0, value), NumberSequenceKeypoint.new(1, value)])

  def to_lua(self) -> str:
    return f"NumberSequence.new({{{', '.join(k.to_lua() for k in self.keypoints)}}})"

  def to_rbxmx(self, name: str) -> str:
    body = "".join(f"{_n(k.time)} {_n(k.value)} {_n(k.envelope)} " for k in self.keypoints)
    return f'<NumberSequence name="{name}">{body}</NumberSequence>'


_IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
_ROTATION_TAGS = ("R00", "R01", "R02", "R10", "R11", "R12", "R20", "R21", "R22")


class CFrame(Value):
  """
  A coordinate frame: a position and a row-major 3x3 rotation matrix.
  """

  position: Vector3
  rotation: Tuple[float, float, float, float, float, float, float, float, float] = _IDENTITY

  @classmethod
  def new(cls, x: float = 0, y: float = 0, z: float = 0, rotation: Tuple[float, ...] = _IDENTITY) -> "CFrame":
    return _build(cls, position=Vector3.new(x, y, z), rotation=tuple(rotation))

  def to_lua(self) -> str:
    p = self.position
    parts = [p.x, p.y, p.z, *self.rotation]
    return f"CFrame.new({', '.join(format_number(v) for v in parts)})"

  def to_rbxmx(self, name: str) -> str:
    p = self.position
    body = f"<X>{_n(p.x)}</X><Y>{_n(p.y)}</Y><Z>{_n(p.z)}</Z>"
    body += "".join(f"<{tag}>{_n(v)}</{tag}>" for tag, v in zip(_ROTATION_TAGS, self.rotation))
    return f'<CoordinateFrame name="{name}">{body}</CoordinateFrame>'
