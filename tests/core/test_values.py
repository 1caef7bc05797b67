"""
Tests for Primitive Value Types.

Verifies:
1. Script constructor literals.
2. Markup property blocks.
3. Domain validation surfaces as blox_ui ValidationError.
"""

import math

import pytest

from blox_ui.core.tokens import FontStyle, FontWeight
from blox_ui.core.values import (
  CFrame,
  Color3,
  ColorSequence,
  ColorSequenceKeypoint,
  Font,
  NumberSequence,
  NumberSequenceKeypoint,
  Rect,
  UDim,
  UDim2,
  Value,
  Vector2,
  Vector3,
)
from blox_ui.errors import BloxUIError, ValidationError


def test_color3_forms():
  c = Color3.from_rgb(255, 0, 51)
  assert c.to_lua() == "Color3.fromRGB(255, 0, 51)"
  assert c.to_rbxmx("BackgroundColor3") == (
    '<Color3 name="BackgroundColor3"><R>1</R><G>0</G><B>0.2</B></Color3>'
  )


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_color3_rejects_out_of_range(channels):
  with pytest.raises(ValidationError):
    Color3.from_rgb(*channels)


def test_validation_error_is_value_error():
  """Callers catching ValueError or BloxUIError both see domain errors."""
  with pytest.raises(ValueError):
    Color3.from_rgb(999, 0, 0)
  with pytest.raises(BloxUIError):
    Color3.from_rgb(999, 0, 0)


def test_values_are_immutable():
  v = Vector2.new(1, 2)
  with pytest.raises(Exception):
    v.x = 5  # type: ignore[misc]


def test_vector_forms():
  assert Vector2.new(0.5, 1).to_lua() == "Vector2.new(0.5, 1)"
  assert Vector2.new(0, 0).to_rbxmx("AnchorPoint") == '<Vector2 name="AnchorPoint"><X>0</X><Y>0</Y></Vector2>'
  assert Vector3.new(-1, -1, -1).to_lua() == "Vector3.new(-1, -1, -1)"
  assert Vector3.new(-1, -1, -1).to_rbxmx("LightDirection") == (
    '<Vector3 name="LightDirection"><X>-1</X><Y>-1</Y><Z>-1</Z></Vector3>'
  )


def test_udim_forms():
  assert UDim.new(0, 8).to_lua() == "UDim.new(0, 8)"
  assert UDim.new(0.5, 0).to_rbxmx("CornerRadius") == '<UDim name="CornerRadius"><S>0.5</S><O>0</O></UDim>'


def test_udim2_forms():
  size = UDim2.new(0, 100, 0.25, 40)
  assert size.to_lua() == "UDim2.new(0, 100, 0.25, 40)"
  assert size.to_rbxmx("Size") == ('<UDim2 name="Size"><XS>0</XS><XO>100</XO><YS>0.25</YS><YO>40</YO></UDim2>')


def test_rect_forms_without_ordering_check():
  r = Rect.new(10, 10, 2, 2)
  assert r.to_lua() == "Rect.new(10, 10, 2, 2)"
  assert r.to_rbxmx("SliceCenter") == (
    '<Rect2D name="SliceCenter"><min><X>10</X><Y>10</Y></min><max><X>2</X><Y>2</Y></max></Rect2D>'
  )


def test_font_forms():
  f = Font.new("rbxasset://fonts/families/Roboto.json", FontWeight.Bold, FontStyle.Italic)
  assert f.to_lua() == 'Font.new("rbxasset://fonts/families/Roboto.json", Enum.FontWeight.Bold, Enum.FontStyle.Italic)'
  assert f.to_rbxmx("FontFace") == (
    '<Font name="FontFace"><Family><url>rbxasset://fonts/families/Roboto.json</url></Family>'
    "<Weight>700</Weight><Style>Italic</Style></Font>"
  )


def test_color_sequence_forms():
  seq = ColorSequence.new(
    [
      ColorSequenceKeypoint.new(0, Color3.from_rgb(255, 0, 0)),
      ColorSequenceKeypoint.new(1, Color3.from_rgb(0, 0, 255)),
    ]
  )
  assert seq.to_lua() == (
    "ColorSequence.new({ColorSequenceKeypoint.new(0, Color3.fromRGB(255, 0, 0)), "
    "ColorSequenceKeypoint.new(1, Color3.fromRGB(0, 0, 255))})"
  )
  assert seq.to_rbxmx("Color") == '<ColorSequence name="Color">0 1 0 0 0 1 0 0 1 0 </ColorSequence>'


def test_color_sequence_solid_has_two_keypoints():
  seq = ColorSequence.solid(Color3.from_rgb(255, 255, 255))
  assert [k.time for k in seq.keypoints] == [0, 1]


def test_sequence_validation():
  with pytest.raises(ValidationError):
    ColorSequence.new([])
  with pytest.raises(ValidationError):
    NumberSequence.new([NumberSequenceKeypoint.new(1, 0), NumberSequenceKeypoint.new(0, 0)])
  with pytest.raises(ValidationError):
    NumberSequenceKeypoint.new(1.5, 0)


def test_number_sequence_forms():
  seq = NumberSequence.constant(0.25)
  assert seq.to_lua() == ("NumberSequence.new({NumberSequenceKeypoint.new(0, 0.25, 0), NumberSequenceKeypoint.new(1, 0.25, 0)})")
  assert seq.to_rbxmx("Transparency") == '<NumberSequence name="Transparency">0 0.25 0 1 0.25 0 </NumberSequence>'


def test_cframe_forms():
  cf = CFrame.new(0, 0, -5)
  assert cf.to_lua() == "CFrame.new(0, 0, -5, 1, 0, 0, 0, 1, 0, 0, 0, 1)"
  markup = cf.to_rbxmx("Focus")
  assert markup.startswith('<CoordinateFrame name="Focus"><X>0</X><Y>0</Y><Z>-5</Z><R00>1</R00>')
  assert markup.endswith("<R22>1</R22></CoordinateFrame>")


def test_infinite_components():
  v = Vector2.new(math.inf, math.inf)
  assert v.to_lua() == "Vector2.new(math.huge, math.huge)"
  assert v.to_rbxmx("MaxSize") == '<Vector2 name="MaxSize"><X>INF</X><Y>INF</Y></Vector2>'


RED = Color3.from_rgb(255, 0, 0)
KEYPOINTS = [ColorSequenceKeypoint.new(0.25, RED), NumberSequenceKeypoint.new(0.5, 0.3, 0.1)]
PROPERTY_VALUES = [
  RED,
  Vector2.new(0.5, 1),
  Vector3.new(-1, 2.5, 3),
  UDim.new(0.5, 8),
  UDim2.new(1, -4, 0, 32),
  Rect.new(0, 0, 16, 16),
  Font.new("rbxasset://fonts/families/GothamSSm.json", FontWeight.Bold),
  ColorSequence.new([ColorSequenceKeypoint.new(0, RED), ColorSequenceKeypoint.new(1, Color3.from_rgb(0, 0, 255))]),
  NumberSequence.new([NumberSequenceKeypoint.new(0, 0), NumberSequenceKeypoint.new(1, 0.5)]),
  CFrame.new(1, 2, 3),
]


def _all_subclasses(cls):
  for sub in cls.__subclasses__():
    yield sub
    yield from _all_subclasses(sub)


def test_samples_cover_every_value_type():
  assert {type(v) for v in PROPERTY_VALUES + KEYPOINTS} == set(_all_subclasses(Value))


@pytest.mark.parametrize("value", PROPERTY_VALUES + KEYPOINTS, ids=lambda v: type(v).__name__)
def test_script_rendering_is_repeatable(value):
  assert value.to_lua() == value.to_lua()


@pytest.mark.parametrize("value", PROPERTY_VALUES, ids=lambda v: type(v).__name__)
def test_markup_rendering_is_repeatable(value):
  first = value.to_rbxmx("Prop")
  assert first == value.to_rbxmx("Prop")
  assert 'name="Prop"' in first
