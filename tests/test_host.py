"""
Tests for the Host Message Boundary.

Verifies:
1. Conversion messages write files and release the plugin on every path.
2. Preview and navigation update the current view.
3. Unknown keys and invalid navigation raise their dedicated errors.
"""

from unittest.mock import MagicMock

import pytest

from blox_ui.config import RuntimeConfig
from blox_ui.enums import CodeDialect
from blox_ui.errors import NavigationError, PreconditionError, UnhandledKeyError
from blox_ui.host import HostMessage, HostView, MessageRouter
from blox_ui.persistence import DirectoryStore
from blox_ui.scene.nodes import parse_scene

SCENE = parse_scene({"nodes": [{"name": "Card", "type": "RECTANGLE", "cornerRadius": 4}]})


@pytest.fixture
def router(tmp_path, session):
  config = RuntimeConfig(dialects=[CodeDialect.LUA, CodeDialect.LUAU], output_dir=tmp_path)
  return MessageRouter(config=config, session=session, store=DirectoryStore(tmp_path), on_finished=MagicMock())


def test_convert_to_code_writes_script(router, tmp_path):
  reply = router.handle("convert-to-code", SCENE)

  assert reply.message == HostMessage.CONVERT_TO_CODE
  assert reply.view == HostView.MAIN
  assert reply.files == [tmp_path / "blox_ui_lua.lua"]
  content = reply.files[0].read_text(encoding="utf-8")
  assert 'local card = Instance.new("Frame")' in content
  assert "uICorner.Parent = card" in content
  router.on_finished.assert_called_once()


def test_convert_to_object_writes_model(router, tmp_path):
  reply = router.handle("convert-to-object", SCENE)
  assert reply.files == [tmp_path / "blox_ui_rbxmx.rbxmx"]
  assert '<Item class="UICorner">' in reply.files[0].read_text(encoding="utf-8")


def test_repeated_exports_get_new_names(router, tmp_path):
  router.handle("convert-to-code", SCENE)
  reply = router.handle("convert-to-code", SCENE)
  assert reply.files == [tmp_path / "blox_ui_lua_1.lua"]


def test_failed_conversion_still_releases_plugin(router):
  with pytest.raises(PreconditionError):
    router.handle("convert-to-code", parse_scene({"nodes": []}))
  router.on_finished.assert_called_once()


def test_generate_shows_previews_without_files(router, tmp_path):
  reply = router.handle("generate", SCENE)

  assert reply.view == HostView.PREVIEW
  assert reply.files == []
  assert [p.title for p in reply.previews] == ["Lua code", "Luau code"]
  assert list(tmp_path.iterdir()) == []
  assert router.session.count("blox_ui_lua") == 0
  router.on_finished.assert_not_called()


def test_back_to_main_after_preview(router):
  router.handle("generate", SCENE)
  reply = router.handle("back-to-main")
  assert reply.view == HostView.MAIN
  assert router.view == HostView.MAIN


def test_back_to_main_from_main_is_a_navigation_error(router):
  with pytest.raises(NavigationError):
    router.handle("back-to-main")


def test_unknown_key_raises(router):
  with pytest.raises(UnhandledKeyError, match="check-password"):
    router.handle("check-password", SCENE)


def test_overrides_travel_with_the_document(router):
  scene = parse_scene({"nodes": [{"name": "Card", "type": "RECTANGLE"}], "overrides": {"Card": {"zIndex": 7}}})
  reply = router.handle("generate", scene)
  assert "card.ZIndex = 7" in reply.previews[0].code.splitlines()
