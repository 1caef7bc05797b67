"""
Text rendering helpers shared by the script and markup generators.

Numbers are printed the way the target runtime reads them: integral values
without a fractional part, infinities as the dialect's literal, everything
else with Python's shortest round-trip `repr`.
"""

import math
import re
from typing import Union
from xml.sax.saxutils import escape

Number = Union[int, float]

LUA_KEYWORDS = frozenset(
  {
    "and",
    "break",
    "continue",
    "do",
    "else",
    "elseif",
    "end",
    "export",
    "false",
    "for",
    "function",
    "if",
    "in",
    "local",
    "nil",
    "not",
    "or",
    "repeat",
    "return",
    "then",
    "true",
    "type",
    "until",
    "while",
  }
)

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")


def format_number(value: Number, markup: bool = False) -> str:
  """
  Renders a number for script (default) or markup output.

  Args:
      value: The number to render.
      markup: If True, use the markup spelling of infinities ("INF").

  Returns:
      str: The textual form.
  """
  if isinstance(value, bool):
    raise TypeError("booleans are rendered with format_bool")
  if isinstance(value, int):
    return str(value)
  if math.isnan(value):
    return "NAN" if markup else "0/0"
  if math.isinf(value):
    if markup:
      return "INF" if value > 0 else "-INF"
    return "math.huge" if value > 0 else "-math.huge"
  if value.is_integer():
    return str(int(value))
  return repr(value)


def format_bool(value: bool) -> str:
  """Renders a boolean as the lowercase literal both formats use."""
  return "true" if value else "false"


def lua_string(value: str) -> str:
  """
  Quotes a string as a Lua double-quoted literal.

  Args:
      value: Raw text.

  Returns:
      str: The escaped literal including quotes.
  """
  escaped = (
    value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
  )
  return f'"{escaped}"'


def xml_text(value: str) -> str:
  """Escapes text for use as XML element content."""
  return escape(value)


def to_camel_case(name: str) -> str:
  """
  Derives a script variable name from an entity name.

  "Main Menu" -> "mainMenu", "TextLabel" -> "textLabel", "3D view" -> "_3DView".
  Names that collapse to nothing become "instance"; Lua keywords get a
  trailing underscore.

  Args:
      name: The entity name.

  Returns:
      str: A valid Lua identifier.
  """
  words = [w for w in _WORD_SPLIT.split(name) if w]
  if not words:
    return "instance"

  first = words[0]
  head = first[0].lower() + first[1:]
  tail = "".join(w[0].upper() + w[1:] for w in words[1:])
  ident = head + tail

  if ident[0].isdigit():
    ident = "_" + ident
  if ident in LUA_KEYWORDS:
    ident += "_"
  return ident
