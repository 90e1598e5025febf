from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from .algorithms import (
    calculate_dynamic_layout,
    calculate_grid_layout,
    calculate_masonry_layout,
    calculate_pack_layout,
    calculate_treemap_layout,
)
from .models import (
    DEFAULT_ASPECT,
    CellPosition,
    LayoutItem,
    LayoutOptions,
    LayoutType,
    MediaInfo,
)

logger = logging.getLogger(__name__)


def calculate_layout(items: Sequence[LayoutItem], options: LayoutOptions) -> List[CellPosition]:
    """Run the strategy selected by ``options.type``.

    Unknown selectors fall back to the dynamic layout. Parameters a strategy
    does not use are ignored.
    """
    layout_type = LayoutType.parse(options.type)
    width, height = options.canvas_width, options.canvas_height
    gap = options.gap or 0
    logger.debug(
        "Computing %s layout for %d items on %dx%d (gap=%d)",
        layout_type.value,
        len(items),
        width,
        height,
        gap,
    )

    if layout_type is LayoutType.GRID:
        cells = calculate_grid_layout(len(items), width, height, options.columns, options.rows, gap)
        # grid cells are numbered by position; map them back to item indices
        return [replace(cell, media_index=items[cell.media_index].index) for cell in cells]
    if layout_type is LayoutType.MASONRY:
        return calculate_masonry_layout(items, width, height, gap, options.columns)
    if layout_type is LayoutType.TREEMAP:
        return calculate_treemap_layout(items, width, height, gap)
    if layout_type is LayoutType.PACK:
        return calculate_pack_layout(items, width, height, gap)
    return calculate_dynamic_layout(items, width, height, gap)


def media_to_layout_item(info: Optional[MediaInfo], index: int) -> LayoutItem:
    if info is None or info.width <= 0 or info.height <= 0:
        return LayoutItem(index=index, aspect=DEFAULT_ASPECT)
    return LayoutItem(index=index, aspect=info.width / info.height)


def clamp_positions(
    positions: Iterable[CellPosition], canvas_width: int, canvas_height: int
) -> List[CellPosition]:
    """Force every rectangle inside the canvas.

    Sizes are capped to the canvas first, then origins are pulled into
    ``[0, canvas - size]``. Overlaps between cells are left alone.
    """
    clamped = []
    for pos in positions:
        width = min(pos.width, canvas_width)
        height = min(pos.height, canvas_height)
        x = max(0, min(pos.x, canvas_width - width))
        y = max(0, min(pos.y, canvas_height - height))
        clamped.append(CellPosition(x=x, y=y, width=width, height=height, media_index=pos.media_index))
    return clamped


def layout_media(
    infos: Sequence[Optional[MediaInfo]],
    options: LayoutOptions,
    clamp: bool = True,
) -> List[CellPosition]:
    """Lay out probed media, where ``None`` marks an item that could not be probed."""
    items = [media_to_layout_item(info, i) for i, info in enumerate(infos)]
    positions = calculate_layout(items, options)
    if clamp:
        positions = clamp_positions(positions, options.canvas_width, options.canvas_height)
    return positions
