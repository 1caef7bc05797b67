"""
Main Entry Point for the blox-ui CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `blox_ui.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from blox_ui import __version__
from blox_ui.cli import commands
from blox_ui.enums import CodeDialect, ConvertRunType
from blox_ui.utils.console import set_verbose

_DIALECTS = [d.value for d in CodeDialect]


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="blox-ui: design scenes to Roblox UI scripts and models")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output (file writes, reserved names)")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Export a scene document to a .lua/.luau or .rbxmx file")
  cmd_conv.add_argument("path", type=Path, help="Scene document (JSON)")
  cmd_conv.add_argument(
    "--mode",
    choices=[ConvertRunType.CONVERT_TO_CODE.value, ConvertRunType.CONVERT_TO_OBJECT.value],
    default=ConvertRunType.CONVERT_TO_CODE.value,
    help="'code' writes a script, 'object' writes a model file (default: code)",
  )
  cmd_conv.add_argument("--dialect", choices=_DIALECTS, default=None, help="Script dialect (default: from toml)")
  cmd_conv.add_argument("--out", type=Path, default=None, help="Output directory (default: from toml)")

  # --- Command: PREVIEW ---
  cmd_prev = subparsers.add_parser("preview", help="Print generated code without writing files")
  cmd_prev.add_argument("path", type=Path, help="Scene document (JSON)")
  cmd_prev.add_argument(
    "--dialect",
    nargs="+",
    choices=_DIALECTS,
    default=None,
    help="Dialects to render (default: from toml)",
  )

  # --- Command: KINDS ---
  subparsers.add_parser("kinds", help="List the supported instance kinds")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "convert":
    dialects = [args.dialect] if args.dialect else None
    return commands.handle_convert(args.path, ConvertRunType(args.mode), dialects, args.out)

  elif args.command == "preview":
    return commands.handle_preview(args.path, args.dialect)

  elif args.command == "kinds":
    return commands.handle_kinds()

  return 0


if __name__ == "__main__":
  sys.exit(main())
