"""CLI handler for the 'kinds' command."""

from rich.table import Table

from blox_ui.core.entities import ENTITY_TYPES
from blox_ui.core.lua.emitter import SCRIPT_TEMPLATES
from blox_ui.core.rbxmx.templates import MARKUP_TEMPLATES
from blox_ui.enums import EntityKind
from blox_ui.utils.console import console


def _mark(present: bool) -> str:
  return "[green]yes[/green]" if present else "[red]no[/red]"


def handle_kinds() -> int:
  """Prints the closed kind set with its template coverage."""
  table = Table(title="Supported Instance Kinds")
  table.add_column("Kind", style="kind")
  table.add_column("Record")
  table.add_column("Script", justify="center")
  table.add_column("Markup", justify="center")

  for kind in EntityKind:
    record = ENTITY_TYPES.get(kind)
    table.add_row(
      kind.value,
      record.__name__ if record else "-",
      _mark(kind in SCRIPT_TEMPLATES),
      _mark(kind in MARKUP_TEMPLATES),
    )

  console.print(table)
  return 0
