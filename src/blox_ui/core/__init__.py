"""
Core Package.

Contains the conversion backend:
- Primitive value types and runtime enumerations
- Entity records for every supported instance kind
- Script (Lua/Luau) and markup (.rbxmx) serializers
- The export orchestrator
"""
