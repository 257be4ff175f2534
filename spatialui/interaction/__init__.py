"""Pointer interaction mapping."""

from spatialui.interaction.mapper import InteractionMapper, RotationUpdate, ViewportRect

__all__ = ["InteractionMapper", "RotationUpdate", "ViewportRect"]
