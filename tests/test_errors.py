"""
Tests for the error hierarchy.
"""

import pytest

from blox_ui.errors import (
  BloxUIError,
  ExportError,
  NavigationError,
  ObjectConversionError,
  PreconditionError,
  ScriptConversionError,
  UnhandledKeyError,
  ValidationError,
)

ALL_ERRORS = [
  ValidationError,
  ScriptConversionError,
  ObjectConversionError,
  PreconditionError,
  ExportError,
  NavigationError,
  UnhandledKeyError,
]


@pytest.mark.parametrize("cls", ALL_ERRORS)
def test_default_message(cls):
  err = cls()
  assert isinstance(err, BloxUIError)
  assert err.message == cls.default_message
  assert str(err) == cls.default_message


def test_explicit_message_wins():
  err = ExportError("disk full")
  assert err.message == "disk full"
  assert str(err) == "disk full"


def test_conversion_errors_are_distinct():
  """Callers can tell script failures from markup failures."""
  assert not issubclass(ScriptConversionError, ObjectConversionError)
  assert not issubclass(ObjectConversionError, ScriptConversionError)


def test_default_messages_are_unique():
  messages = [cls.default_message for cls in ALL_ERRORS]
  assert len(set(messages)) == len(messages)
