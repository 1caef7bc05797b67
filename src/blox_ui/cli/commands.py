"""
CLI Command Handlers Facade.

Re-exports handlers from `blox_ui.cli.handlers` so the entry point and tests
have a single import target.
"""

from blox_ui.cli.handlers.convert import handle_convert
from blox_ui.cli.handlers.kinds import handle_kinds
from blox_ui.cli.handlers.preview import handle_preview

__all__ = [
  "handle_convert",
  "handle_kinds",
  "handle_preview",
]
