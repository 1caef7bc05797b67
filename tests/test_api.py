"""
Tests for the top-level convenience API.
"""

import blox_ui
from blox_ui import ConvertRunType, DirectoryStore, ExportSession, load_scene, map_scene, preview
from blox_ui.core.entities import Frame, TextLabel, UICorner, attach
from blox_ui.core.values import UDim

CARD = attach(
  Frame(name="Card"),
  UICorner(corner_radius=UDim.new(0, 12)),
  TextLabel(name="Title", text="Welcome"),
)


def test_export_script_with_explicit_session():
  session = ExportSession()
  out = blox_ui.export([CARD], session=session)
  assert out.file_name == "blox_ui_lua.lua"
  assert 'title.Text = "Welcome"' in out.content
  assert blox_ui.export([CARD], session=session).file_name == "blox_ui_lua_1.lua"


def test_export_accepts_raw_values_and_saves(tmp_path):
  out = blox_ui.export([CARD], run_type="object", dialect="lua", session=ExportSession(), store=DirectoryStore(tmp_path))
  assert (tmp_path / out.file_name).read_text(encoding="utf-8") == out.content


def test_export_run_type_luau():
  out = blox_ui.export([CARD], ConvertRunType.CONVERT_TO_CODE, "luau", session=ExportSession())
  assert out.file_name.endswith(".luau")


def test_preview_dialects():
  blocks = preview([CARD], dialects=["lua", "luau"])
  assert [b.language for b in blocks] == ["lua", "luau"]


def test_scene_round_trip_to_script(write_scene):
  path = write_scene(
    {
      "nodes": [
        {
          "name": "Card",
          "type": "RECTANGLE",
          "width": 240,
          "height": 120,
          "cornerRadius": 8,
          "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}],
          "children": [{"name": "Title", "type": "TEXT", "characters": "Hello", "fontSize": 18}],
        }
      ]
    }
  )
  entities = map_scene(load_scene(path))
  out = blox_ui.export(entities, session=ExportSession())
  lines = out.content.splitlines()

  assert lines[0] == 'local card = Instance.new("Frame")'
  for line in (
    "card.Size = UDim2.new(0, 240, 0, 120)",
    "card.BackgroundColor3 = Color3.fromRGB(255, 255, 255)",
    "card.BackgroundTransparency = 0",
    'local uICorner = Instance.new("UICorner")',
    "uICorner.CornerRadius = UDim.new(0, 8)",
    "uICorner.Parent = card",
    'local title = Instance.new("TextLabel")',
    'title.Text = "Hello"',
    "title.TextSize = 18",
    "title.BackgroundTransparency = 1",
    "title.Parent = card",
  ):
    assert line in lines
  assert lines.index('local title = Instance.new("TextLabel")') > lines.index("card.Parent = nil")


def test_version_is_exposed():
  assert isinstance(blox_ui.__version__, str)
