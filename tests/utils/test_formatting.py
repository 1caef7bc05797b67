"""
Tests for number, string and identifier rendering.
"""

import math

import pytest

from blox_ui.utils.formatting import format_bool, format_number, lua_string, to_camel_case, xml_text


@pytest.mark.parametrize(
  "value, expected",
  [
    (0, "0"),
    (14, "14"),
    (14.0, "14"),
    (-3.0, "-3"),
    (0.5, "0.5"),
    (0.1, "0.1"),
    (1 / 3, "0.3333333333333333"),
  ],
)
def test_format_number_script(value, expected):
  assert format_number(value) == expected


def test_format_number_infinity_spelling():
  """Infinities use the dialect literal in scripts and INF in markup."""
  assert format_number(math.inf) == "math.huge"
  assert format_number(-math.inf) == "-math.huge"
  assert format_number(math.inf, markup=True) == "INF"
  assert format_number(-math.inf, markup=True) == "-INF"


def test_format_number_rejects_bool():
  with pytest.raises(TypeError):
    format_number(True)


def test_format_bool():
  assert format_bool(True) == "true"
  assert format_bool(False) == "false"


def test_lua_string_escapes():
  assert lua_string("Play") == '"Play"'
  assert lua_string('say "hi"') == '"say \\"hi\\""'
  assert lua_string("a\nb") == '"a\\nb"'
  assert lua_string("C:\\x") == '"C:\\\\x"'


def test_xml_text_escapes():
  assert xml_text("Fish & <Chips>") == "Fish &amp; &lt;Chips&gt;"


@pytest.mark.parametrize(
  "name, expected",
  [
    ("Frame", "frame"),
    ("TextLabel", "textLabel"),
    ("Main Menu", "mainMenu"),
    ("play-button", "playButton"),
    ("3D view", "_3DView"),
    ("end", "end_"),
    ("!!!", "instance"),
  ],
)
def test_to_camel_case(name, expected):
  assert to_camel_case(name) == expected
