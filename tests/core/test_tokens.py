"""
Tests for runtime enumeration rendering.
"""

import pytest

from blox_ui.core.tokens import (
  AutomaticSize,
  FrameStyle,
  ScrollingDirection,
  TextTruncate,
  TextXAlignment,
  TextYAlignment,
  TokenEnum,
)


def test_script_form_uses_runtime_enum_path():
  assert FrameStyle.Custom.to_lua() == "Enum.FrameStyle.Custom"
  assert TextXAlignment.Center.to_lua() == "Enum.TextXAlignment.Center"


def test_reserved_none_item_is_unescaped():
  """`None_` renders as the runtime item name `None`."""
  assert AutomaticSize.None_.item_name == "None"
  assert AutomaticSize.None_.to_lua() == "Enum.AutomaticSize.None"
  assert TextTruncate.None_.to_lua() == "Enum.TextTruncate.None"


@pytest.mark.parametrize(
  "member, token",
  [
    (TextXAlignment.Left, "0"),
    (TextXAlignment.Right, "1"),
    (TextXAlignment.Center, "2"),
    (TextYAlignment.Center, "1"),
    (ScrollingDirection.XY, "4"),
    (TextTruncate.AtEnd, "1"),
  ],
)
def test_markup_form_is_documented_integer(member, token):
  assert member.to_rbxmx() == token


def test_no_token_enum_has_aliases():
  """A duplicated value would silently turn an item into an alias."""
  for cls in TokenEnum.__subclasses__():
    assert len(cls.__members__) == len(list(cls)), cls.__name__
