"""Markup serialization (.rbxmx model files)."""
