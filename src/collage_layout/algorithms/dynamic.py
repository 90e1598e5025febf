"""Aspect-preserving row layout.

Items are grouped into rows; every row gets a single height and each cell in
it keeps the item's aspect ratio. Row heights are scaled together so the rows
fill the canvas vertically.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..models import CellPosition, LayoutItem, safe_aspect

logger = logging.getLogger(__name__)


def partition_into_rows(
    items: Sequence[LayoutItem], canvas_width: int, canvas_height: int
) -> List[List[LayoutItem]]:
    """Greedy row grouping, widest items first.

    A trailing row holding a single item is folded into the row above as long
    as that row stays within one item of the target row length.
    """
    if not items:
        return []
    ordered = sorted(items, key=lambda item: safe_aspect(item.aspect), reverse=True)

    if canvas_width <= 0 or canvas_height <= 0:
        return [ordered]
    canvas_aspect = canvas_width / canvas_height
    avg_aspect = sum(safe_aspect(item.aspect) for item in items) / len(items)
    target_rows = max(1, round(math.sqrt(len(items) / (canvas_aspect / avg_aspect))))
    per_row = math.ceil(len(items) / target_rows)

    rows: List[List[LayoutItem]] = []
    current: List[LayoutItem] = []
    for item in ordered:
        current.append(item)
        if len(current) >= per_row:
            rows.append(current)
            current = []

    if current:
        if len(current) == 1 and rows and len(rows[-1]) + 1 <= per_row + 1:
            rows[-1].append(current[0])
        else:
            rows.append(current)
    return rows


def _center_single(item: LayoutItem, canvas_width: int, canvas_height: int, gap: int) -> CellPosition:
    aspect = safe_aspect(item.aspect)
    if aspect > canvas_width / canvas_height:
        width = canvas_width - gap * 2
        height = math.floor(width / aspect)
        x = gap
        y = (canvas_height - height) // 2
    else:
        height = canvas_height - gap * 2
        width = math.floor(height * aspect)
        x = (canvas_width - width) // 2
        y = gap
    return CellPosition(x=x, y=y, width=width, height=height, media_index=item.index)


def _degenerate(items, canvas_width: int, canvas_height: int, gap: int) -> List[CellPosition]:
    logger.debug("Dynamic canvas %sx%s (gap=%s) has no usable area", canvas_width, canvas_height, gap)
    return [CellPosition(gap, gap, 0, 0, item.index) for item in items]


def calculate_dynamic_layout(
    items: Sequence[LayoutItem],
    canvas_width: int,
    canvas_height: int,
    gap: int = 0,
) -> List[CellPosition]:
    if not items:
        return []
    if canvas_width <= 0 or canvas_height <= 0:
        return _degenerate(items, canvas_width, canvas_height, gap)
    if len(items) == 1:
        return [_center_single(items[0], canvas_width, canvas_height, gap)]

    rows = partition_into_rows(items, canvas_width, canvas_height)

    ideal_heights = []
    for row in rows:
        row_width = canvas_width - gap * 2 - gap * (len(row) - 1)
        ideal_heights.append(row_width / sum(safe_aspect(item.aspect) for item in row))

    if any(ideal <= 0 for ideal in ideal_heights):
        # gaps use up the whole row width
        return _degenerate(items, canvas_width, canvas_height, gap)

    available_height = canvas_height - gap * (len(rows) + 1)
    scale = available_height / sum(ideal_heights)

    positions: List[CellPosition] = []
    y = gap
    for row, ideal in zip(rows, ideal_heights):
        row_height = math.floor(ideal * scale)
        # never let a row grow wider than the canvas
        width_basis = min(row_height, ideal)
        x = gap
        for i, item in enumerate(row):
            if i == len(row) - 1:
                cell_w = canvas_width - gap - x
            else:
                cell_w = math.floor(width_basis * safe_aspect(item.aspect))
            positions.append(
                CellPosition(x=x, y=y, width=cell_w, height=row_height, media_index=item.index)
            )
            x += cell_w + gap
        y += row_height + gap
    return positions
