"""Stylesheets for the GUI."""

from .theme import SPACING, Theme

__all__ = ["SPACING", "Theme"]
