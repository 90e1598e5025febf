from __future__ import annotations

import math
from typing import List, Optional

from ..models import CellPosition


def calculate_grid_layout(
    media_count: int,
    canvas_width: int,
    canvas_height: int,
    columns: Optional[int] = None,
    rows: Optional[int] = None,
    gap: int = 0,
) -> List[CellPosition]:
    """Uniform grid; aspect ratios are ignored.

    Cells are filled row-major in input order. When either ``columns`` or
    ``rows`` is missing both are derived from ``media_count``.
    """
    if media_count <= 0:
        return []
    if not columns or not rows:
        columns = math.ceil(math.sqrt(media_count))
        rows = math.ceil(media_count / columns)

    cell_w = (canvas_width - gap * (columns + 1)) // columns
    cell_h = (canvas_height - gap * (rows + 1)) // rows

    positions = []
    for i in range(media_count):
        col = i % columns
        row = i // columns
        positions.append(
            CellPosition(
                x=gap + col * (cell_w + gap),
                y=gap + row * (cell_h + gap),
                width=cell_w,
                height=cell_h,
                media_index=i,
            )
        )
    return positions
