"""Geometry engine that tiles media items onto a fixed-size collage canvas."""

from .algorithms import (
    calculate_dynamic_layout,
    calculate_grid_layout,
    calculate_masonry_layout,
    calculate_pack_layout,
    calculate_treemap_layout,
)
from .engine import calculate_layout, clamp_positions, layout_media, media_to_layout_item
from .models import CellPosition, LayoutItem, LayoutOptions, LayoutType, MediaInfo

__all__ = [
    "CellPosition",
    "LayoutItem",
    "LayoutOptions",
    "LayoutType",
    "MediaInfo",
    "calculate_layout",
    "calculate_grid_layout",
    "calculate_dynamic_layout",
    "calculate_masonry_layout",
    "calculate_treemap_layout",
    "calculate_pack_layout",
    "clamp_positions",
    "layout_media",
    "media_to_layout_item",
]
