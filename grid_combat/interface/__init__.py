"""Text interface components."""

from .renderer import MapRenderer

__all__ = ["MapRenderer"]
