"""
Tests for the scene-node contract and document loading.
"""

import pytest

from blox_ui.errors import ValidationError
from blox_ui.scene.nodes import ComponentType, SceneNode, load_scene, parse_scene


def test_parse_camel_case_keys():
  doc = parse_scene(
    {
      "nodes": [
        {
          "id": "1:2",
          "name": "Card",
          "type": "FRAME",
          "clipsContent": True,
          "cornerRadius": 6,
          "fills": [{"type": "GRADIENT_LINEAR", "gradientStops": [{"position": 0, "color": {"r": 1, "g": 0, "b": 0}}]}],
          "children": [{"name": "Title", "type": "TEXT", "characters": "Hi", "textAlignHorizontal": "LEFT"}],
        }
      ],
      "overrides": {"Card": {"zIndex": 3}},
    }
  )
  card = doc.nodes[0]
  assert card.clips_content is True
  assert card.corner_radius == 6
  assert card.fills[0].gradient_stops[0].color.r == 1
  assert card.children[0].text_align_horizontal == "LEFT"
  assert doc.overrides == {"Card": {"zIndex": 3}}


def test_snake_case_keys_are_accepted():
  node = SceneNode.model_validate({"name": "Box", "type": "RECTANGLE", "corner_radius": 4, "ui_type": "TEXTBOX"})
  assert node.corner_radius == 4
  assert node.ui_type == ComponentType.TEXTBOX


def test_defaults_and_unknown_keys():
  node = SceneNode.model_validate({"name": "Box", "type": "RECTANGLE", "blendMode": "NORMAL"})
  assert (node.width, node.height) == (100, 100)
  assert node.opacity == 1
  assert node.fills == []
  assert node.line_height.unit == "AUTO"


def test_visible_fills_skips_hidden_paints():
  node = SceneNode.model_validate(
    {
      "name": "Box",
      "type": "RECTANGLE",
      "fills": [
        {"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0}, "visible": False},
        {"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}},
      ],
    }
  )
  assert len(node.visible_fills) == 1
  assert node.visible_fills[0].color.r == 1


@pytest.mark.parametrize(
  "data",
  [
    {"nodes": [{"type": "FRAME"}]},
    {"nodes": [{"name": "x", "type": "FRAME", "opacity": 2}]},
    {"nodes": [{"name": "x", "type": "FRAME", "fills": [{"type": "SOLID", "color": {"r": 3, "g": 0, "b": 0}}]}]},
    {"nodes": [{"name": "x", "type": "COMPONENT", "uiType": "SLIDER"}]},
  ],
)
def test_invalid_documents_raise_validation_error(data):
  with pytest.raises(ValidationError):
    parse_scene(data)


def test_load_scene_from_file(write_scene):
  path = write_scene({"nodes": [{"name": "Box", "type": "RECTANGLE"}]})
  doc = load_scene(path)
  assert doc.nodes[0].name == "Box"


def test_load_scene_rejects_bad_json(tmp_path):
  path = tmp_path / "broken.json"
  path.write_text("{not json", encoding="utf-8")
  with pytest.raises(ValidationError):
    load_scene(path)
