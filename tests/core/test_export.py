"""
Tests for the Export Orchestrator.

Verifies:
1. Script and markup files for each run type.
2. Per-stem name disambiguation and its thread safety.
3. Preconditions and failure atomicity (no counter consumed on failure).
4. The preview path never touches counters.
"""

import threading
from dataclasses import dataclass
from typing import ClassVar

import pytest

from blox_ui.core.entities import Entity, Frame, TextLabel, UICorner, attach
from blox_ui.core.export import (
  DEFAULT_MARKUP_STEM,
  DEFAULT_SCRIPT_STEM,
  CodegenResult,
  ExportSession,
  LuaFile,
  RbxmxFile,
  export_file,
  generate_code,
)
from blox_ui.core.rbxmx.document import ENVELOPE_CLOSE, ENVELOPE_OPEN
from blox_ui.enums import CodeDialect, ConvertRunType
from blox_ui.errors import ExportError, ObjectConversionError, PreconditionError, ScriptConversionError


@dataclass(frozen=True)
class _Mystery(Entity):
  kind: ClassVar[str] = "Mystery"


def test_script_export_of_a_frame(session):
  out = export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], session)

  assert isinstance(out, LuaFile)
  assert out.name == DEFAULT_SCRIPT_STEM
  assert out.file_name == "blox_ui_lua.lua"
  assert out.content.startswith('local frame = Instance.new("Frame")\n')
  assert out.content.endswith("frame.Style = Enum.FrameStyle.Custom\n")


def test_luau_export_uses_luau_extension(session):
  out = export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], session, dialect=CodeDialect.LUAU)
  assert out.file_name == "blox_ui_lua.luau"
  assert 'local frame: Frame = Instance.new("Frame")' in out.content


def test_markup_export_is_wrapped_in_envelope(session):
  card = attach(Frame(name="Card"), UICorner())
  out = export_file(ConvertRunType.CONVERT_TO_OBJECT, [card], session)

  assert isinstance(out, RbxmxFile)
  assert out.file_name == "blox_ui_rbxmx.rbxmx"
  lines = out.content.splitlines()
  assert lines[0] == ENVELOPE_OPEN
  assert lines[-1] == ENVELOPE_CLOSE
  assert out.content.count("<Item class=") == 2


def test_children_are_exported_pre_order(session):
  card = attach(Frame(name="Card"), TextLabel(name="Title"), UICorner())
  out = export_file(ConvertRunType.CONVERT_TO_CODE, [card], session)
  content = out.content
  assert content.index('local card = Instance.new("Frame")') < content.index("local title")
  assert content.index("local title") < content.index("local uICorner")


def test_names_increment_per_stem(session):
  names = [export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], session).name for _ in range(3)]
  assert names == ["blox_ui_lua", "blox_ui_lua_1", "blox_ui_lua_2"]

  # The markup stem has its own counter.
  markup = export_file(ConvertRunType.CONVERT_TO_OBJECT, [Frame()], session)
  assert markup.name == DEFAULT_MARKUP_STEM


def test_custom_stems(session):
  out = export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], session, script_stem="menu")
  assert out.file_name == "menu.lua"
  assert session.count("menu") == 1
  assert session.count(DEFAULT_SCRIPT_STEM) == 0


def test_sessions_are_independent():
  a, b = ExportSession(), ExportSession()
  export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], a)
  assert export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], b).name == DEFAULT_SCRIPT_STEM


def test_empty_entity_list_is_a_precondition_error(session):
  with pytest.raises(PreconditionError):
    export_file(ConvertRunType.CONVERT_TO_CODE, [], session)
  assert session.count(DEFAULT_SCRIPT_STEM) == 0


def test_failed_conversion_consumes_no_name(session):
  with pytest.raises(ScriptConversionError):
    export_file(ConvertRunType.CONVERT_TO_CODE, [Frame(), _Mystery(name="m")], session)
  with pytest.raises(ObjectConversionError):
    export_file(ConvertRunType.CONVERT_TO_OBJECT, [_Mystery(name="m")], session)

  assert session.count(DEFAULT_SCRIPT_STEM) == 0
  assert session.count(DEFAULT_MARKUP_STEM) == 0
  assert export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], session).name == DEFAULT_SCRIPT_STEM


def test_generate_code_mode_is_not_a_file_export(session):
  with pytest.raises(ExportError):
    export_file(ConvertRunType.GENERATE_CODE, [Frame()], session)


def test_run_type_accepts_raw_values(session):
  out = export_file("object", [Frame()], session)
  assert isinstance(out, RbxmxFile)


def test_concurrent_reservations_are_unique():
  session = ExportSession()
  names = []
  lock = threading.Lock()

  def worker():
    for _ in range(50):
      name = session.reserve_name("stem")
      with lock:
        names.append(name)

  threads = [threading.Thread(target=worker) for _ in range(8)]
  for t in threads:
    t.start()
  for t in threads:
    t.join()

  assert len(names) == 400
  assert len(set(names)) == 400
  assert session.count("stem") == 400


def test_generate_code_returns_one_block_per_dialect(session):
  results = generate_code([Frame()], [CodeDialect.LUA, CodeDialect.LUAU])

  assert [r.title for r in results] == ["Lua code", "Luau code"]
  assert [r.language for r in results] == ["lua", "luau"]
  assert all(isinstance(r, CodegenResult) for r in results)
  assert results[0].code.startswith('local frame = Instance.new("Frame")')
  assert results[1].code.startswith('local frame: Frame = Instance.new("Frame")')


def test_generate_code_leaves_counters_alone(session):
  generate_code([Frame()])
  assert session.count(DEFAULT_SCRIPT_STEM) == 0
  assert export_file(ConvertRunType.CONVERT_TO_CODE, [Frame()], session).name == DEFAULT_SCRIPT_STEM


def test_generate_code_requires_entities():
  with pytest.raises(PreconditionError):
    generate_code([])


def test_output_file_buffer():
  f = LuaFile("menu", CodeDialect.LUA, starter_content="-- header")
  f.write_line("print(1)")
  assert f.content == "-- header\nprint(1)\n"
  assert repr(f) == "LuaFile('menu.lua', lines=2)"
