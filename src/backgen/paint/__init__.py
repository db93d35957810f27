"""Colors, salt rules and theme recipes."""

from .color import Color
from .salt import Salt, SaltItem
from .theme import ThemeItem, ColorItem

__all__ = ["Color", "Salt", "SaltItem", "ThemeItem", "ColorItem"]
