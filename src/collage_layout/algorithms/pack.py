from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..models import CellPosition, LayoutItem, safe_aspect


@dataclass
class _Shelf:
    y: int
    height: int
    width: int


def calculate_pack_layout(
    items: Sequence[LayoutItem],
    canvas_width: int,
    canvas_height: int,
    gap: int = 0,
) -> List[CellPosition]:
    """Shelf packing of roughly equal-area items.

    The raw arrangement is scaled uniformly and centred to fit the canvas
    inside the gap margin.
    """
    if not items:
        return []

    target_h = math.sqrt(canvas_width * canvas_height / len(items))
    dims = [
        (math.floor(target_h * safe_aspect(item.aspect)), math.floor(target_h), item.index)
        for item in items
    ]
    dims.sort(key=lambda d: d[1], reverse=True)

    shelves: List[_Shelf] = []
    raw = []
    for width, height, index in dims:
        for shelf in shelves:
            if shelf.width + width + gap <= canvas_width and height <= shelf.height:
                raw.append((shelf.width + gap, shelf.y, width, height, index))
                shelf.width += width + gap
                break
        else:
            if shelves:
                last = shelves[-1]
                shelf_y = last.y + last.height + gap
            else:
                shelf_y = gap
            shelves.append(_Shelf(y=shelf_y, height=height, width=width + gap))
            raw.append((gap, shelf_y, width, height, index))

    max_x = max(x + w for x, _, w, _, _ in raw)
    max_y = max(y + h for _, y, _, h, _ in raw)
    if max_x <= 0 or max_y <= 0:
        return [CellPosition(x, y, w, h, index) for x, y, w, h, index in raw]

    scale = min((canvas_width - gap * 2) / max_x, (canvas_height - gap * 2) / max_y)
    offset_x = math.floor((canvas_width - max_x * scale) / 2)
    offset_y = math.floor((canvas_height - max_y * scale) / 2)
    return [
        CellPosition(
            x=math.floor(x * scale + offset_x),
            y=math.floor(y * scale + offset_y),
            width=math.floor(w * scale),
            height=math.floor(h * scale),
            media_index=index,
        )
        for x, y, w, h, index in raw
    ]
