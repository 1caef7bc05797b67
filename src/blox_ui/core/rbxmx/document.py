"""
Markup document envelope.

Every ``.rbxmx`` file is a versioned ``<roblox>`` root holding a fixed
metadata block followed by the item blocks.
"""

from typing import Iterable, List

from blox_ui.core.entities import Entity
from blox_ui.core.rbxmx.templates import to_rbxmx

ENVELOPE_OPEN = (
  '<roblox xmlns:xmime="http://www.w3.org/2005/05/xmlmime" '
  'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
  'xsi:noNamespaceSchemaLocation="http://www.roblox.com/roblox.xsd" '
  'version="4">'
)

ENVELOPE_METADATA = [
  '<Meta name="ExplicitAutoJoints">true</Meta>',
  "<External>null</External>",
  "<External>nil</External>",
]

ENVELOPE_CLOSE = "</roblox>"


def envelope_head() -> str:
  """Opening tag plus the metadata block, newline-joined."""
  return "\n".join([ENVELOPE_OPEN] + ENVELOPE_METADATA)


def wrap(body: str) -> str:
  """
  Wraps already rendered item blocks in the envelope.

  Args:
      body: Newline-joined ``<Item>`` blocks (may be empty).

  Returns:
      str: A complete markup document.
  """
  parts = [envelope_head()]
  if body:
    parts.append(body)
  parts.append(ENVELOPE_CLOSE)
  return "\n".join(parts)


def render_items(roots: Iterable[Entity]) -> List[str]:
  """
  Renders every entity of every root, pre-order, as flat item blocks.
  """
  return [to_rbxmx(entity) for root in roots for entity in root.walk()]


def render_document(roots: Iterable[Entity]) -> str:
  """
  Renders a forest of entities as a complete markup document.
  """
  return wrap("\n".join(render_items(roots)))
