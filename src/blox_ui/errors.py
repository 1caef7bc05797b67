"""
Error hierarchy for blox-ui.

Every error raised by the core derives from `BloxUIError`, so callers at the
boundary (CLI, host plugin) can report failures uniformly while still reacting
to specific kinds. Each class carries a default message used when the raiser
does not supply one.
"""

from typing import Optional


class BloxUIError(Exception):
  """Base class for all blox-ui failures."""

  default_message = "A generic error occurred"

  def __init__(self, message: Optional[str] = None) -> None:
    self.message = message or self.default_message
    super().__init__(self.message)


class ValidationError(BloxUIError, ValueError):
  """A primitive value was constructed with out-of-domain input."""

  default_message = "A validation error occurred"


class ScriptConversionError(BloxUIError):
  """An entity could not be rendered to script source."""

  default_message = "A code conversion error occurred"


class ObjectConversionError(BloxUIError):
  """An entity could not be rendered to markup (object file) form."""

  default_message = "An object conversion error occurred"


class PreconditionError(BloxUIError):
  """An export was requested with unusable inputs (e.g. no entities)."""

  default_message = "Export preconditions were not met"


class ExportError(BloxUIError):
  """Handing a finished output file to persistence failed."""

  default_message = "An export error occurred"


class NavigationError(BloxUIError):
  """Signals a UI-flow transition in the host; not a data error."""

  default_message = "A navigation error occurred"


class UnhandledKeyError(BloxUIError):
  """A request type reached the boundary that nothing handles."""

  default_message = "An unhandled request key was received"
