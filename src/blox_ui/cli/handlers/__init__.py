from .convert import handle_convert
from .kinds import handle_kinds
from .preview import handle_preview

__all__ = [
  "handle_convert",
  "handle_kinds",
  "handle_preview",
]
