"""
Tests for the console proxy and logging helpers.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from blox_ui.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  logger,
  reset_console,
  set_console,
  set_verbose,
)


def test_helpers_write_through_rich(recorded_console):
  log_info("mapping nodes")
  log_success("saved")
  log_warning("skipped STAR")
  log_error("broken")

  text = recorded_console.export_text()
  for fragment in ("mapping nodes", "saved", "skipped STAR", "broken"):
    assert fragment in text
  assert "SUCCESS" in text


def test_module_loggers_reach_the_console(recorded_console):
  logging.getLogger("blox_ui.persistence").info("from a module")
  assert "from a module" in recorded_console.export_text()


def test_set_console_swaps_backend(recorded_console):
  assert get_console() is recorded_console
  console.print("hello")
  assert "hello" in recorded_console.export_text()


def test_single_rich_handler_after_swaps(recorded_console):
  handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1
  assert handlers[0].console is recorded_console


def test_verbose_toggles_debug(recorded_console):
  log = logging.getLogger("blox_ui.core.export")
  try:
    log.debug("hidden")
    set_verbose(True)
    log.debug("shown")
  finally:
    set_verbose(False)

  text = recorded_console.export_text()
  assert "shown" in text
  assert "hidden" not in text


def test_success_level_is_registered():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_reset_restores_fresh_console():
  custom = Console(record=True)
  set_console(custom)
  reset_console()
  assert get_console() is not custom
