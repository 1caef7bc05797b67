"""
Console and Logging.

blox-ui reports progress through the ``blox_ui`` logger. Module loggers
(``logging.getLogger(__name__)``) propagate into it, and the package logger
owns exactly one ``RichHandler`` that writes to the active Rich console.

The module-level ``console`` is a proxy, so the destination can be swapped
at runtime (tests record into memory, an embedding host can capture the
preview panels) without re-importing anything::

    set_console(Console(record=True))
    log_success("Wrote blox_ui_lua.lua")
    get_console().export_text()

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
    logger (logging.Logger): The package logger.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "blox_ui"
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "kind": "bold magenta",
  }
)

logger = logging.getLogger(LOGGER_NAME)


def _new_console() -> Console:
  return Console(theme=_THEME)


class _ConsoleProxy:
  """
  Forwards printing to a replaceable Rich Console.

  Replacing the backend also replaces the package logger's handler, so log
  records and ``console.print`` always land in the same place.
  """

  def __init__(self, backend: Optional[Console] = None) -> None:
    self._backend = backend or _new_console()
    self._attach_handler()

  @property
  def backend(self) -> Console:
    return self._backend

  def swap(self, backend: Console) -> None:
    self._backend = backend
    self._attach_handler()

  def _attach_handler(self) -> None:
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
      logger.removeHandler(handler)

    logger.addHandler(
      RichHandler(
        console=self._backend,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )
    logger.propagate = False
    if logger.level == logging.NOTSET:
      logger.setLevel(logging.INFO)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes printing and logging to ``new_console``.

  Args:
      new_console (Console): A configured Rich console, typically one created
          with ``record=True`` to capture output.
  """
  console.swap(new_console)


def reset_console() -> None:
  """Routes printing and logging back to a fresh standard output console."""
  console.swap(_new_console())


def get_console() -> Console:
  """Returns the active Rich Console."""
  return console.backend


def set_verbose(verbose: bool) -> None:
  """
  Shows debug records (file writes, reserved names) when ``verbose`` is set.

  Args:
      verbose (bool): True for DEBUG, False for INFO.
  """
  logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. May include rich markup.
  """
  logger.info(msg)


def log_success(msg: str) -> None:
  """Logs ``msg`` at the SUCCESS level."""
  logger.log(SUCCESS_LEVEL_NUM, f"[success]{msg}[/success]")


def log_warning(msg: str) -> None:
  logger.warning(f"[warning]{msg}[/warning]")


def log_error(msg: str) -> None:
  logger.error(f"[error]{msg}[/error]")
