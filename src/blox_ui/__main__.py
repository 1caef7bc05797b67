"""
Entry point for module execution (``python -m blox_ui``).

This module delegates execution to the CLI handler in ``blox_ui.cli.__main__``.
"""

import sys

from blox_ui.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
