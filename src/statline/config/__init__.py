"""Configuration tables for sports, column layouts and runtime settings."""

from .layouts import ColumnLayout, ColumnRange, get_layout, iter_layouts
from .settings import Settings
from .sports import Sport, get_sport, iter_sports

__all__ = [
    "ColumnLayout",
    "ColumnRange",
    "Settings",
    "Sport",
    "get_layout",
    "get_sport",
    "iter_layouts",
    "iter_sports",
]
