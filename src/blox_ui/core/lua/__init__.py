"""Script serialization (Lua and Luau)."""
