from __future__ import annotations

import math
from typing import List, Optional, Sequence

from ..models import CellPosition, LayoutItem, safe_aspect


def calculate_masonry_layout(
    items: Sequence[LayoutItem],
    canvas_width: int,
    canvas_height: int,
    gap: int = 0,
    column_count: Optional[int] = None,
) -> List[CellPosition]:
    """Shortest-column-first placement in fixed-width columns.

    If the tallest column ends up below the canvas, only ``y`` and ``height``
    are scaled back; ``x`` and ``width`` keep their column values.
    """
    if not items:
        return []
    cols = column_count or max(2, math.ceil(math.sqrt(len(items))))
    col_w = (canvas_width - gap * (cols + 1)) // cols

    col_heights = [gap] * cols
    placed = []
    for item in items:
        # lowest index wins ties
        col = min(range(cols), key=lambda c: col_heights[c])
        height = math.floor(col_w / safe_aspect(item.aspect))
        placed.append((gap + col * (col_w + gap), col_heights[col], height, item.index))
        col_heights[col] += height + gap

    max_height = max(col_heights)
    scale = 1.0
    if max_height > canvas_height:
        scale = (canvas_height - gap) / max_height

    positions = []
    for x, y, height, index in placed:
        if scale != 1.0:
            y = math.floor(y * scale)
            height = math.floor(height * scale)
        positions.append(CellPosition(x=x, y=y, width=col_w, height=height, media_index=index))
    return positions
