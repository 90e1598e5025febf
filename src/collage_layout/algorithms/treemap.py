"""Squarified treemap.

Splits the canvas into rectangles whose areas are proportional to item
weights, keeping each rectangle as close to square as the greedy row rule
allows. Item aspect ratios only feed the default weights.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..models import CellPosition, LayoutItem, safe_aspect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Weighted:
    index: int
    area: float


@dataclass
class _FreeRect:
    """Part of the canvas not yet handed out."""

    x: float
    y: float
    width: float
    height: float

    @property
    def is_wide(self) -> bool:
        return self.width >= self.height

    @property
    def short_side(self) -> float:
        return self.height if self.is_wide else self.width

    def consume(self, thickness: float) -> None:
        if self.is_wide:
            self.x += thickness
            self.width -= thickness
        else:
            self.y += thickness
            self.height -= thickness

    def fill(self, index: int) -> CellPosition:
        return CellPosition(
            x=math.floor(self.x),
            y=math.floor(self.y),
            width=math.floor(self.width),
            height=math.floor(self.height),
            media_index=index,
        )


def _weight(item: LayoutItem) -> float:
    area = item.area
    if isinstance(area, (int, float)) and math.isfinite(area) and area > 0:
        return float(area)
    return max(1.0, safe_aspect(item.aspect))


def worst_aspect_ratio(areas: Sequence[float], side: float) -> float:
    """Largest long/short ratio among ``areas`` stacked along ``side``."""
    total = sum(areas)
    if total <= 0 or side <= 0:
        return math.inf
    thickness = total / side
    worst = 0.0
    for area in areas:
        extent = area / thickness
        if extent <= 0:
            return math.inf
        worst = max(worst, thickness / extent, extent / thickness)
    return worst


def _take_row(items: List[_Weighted], side: float) -> Tuple[List[_Weighted], List[_Weighted]]:
    row = [items[0]]
    best = worst_aspect_ratio([row[0].area], side)
    for item in items[1:]:
        candidate = worst_aspect_ratio([r.area for r in row] + [item.area], side)
        if candidate > best:
            break
        row.append(item)
        best = candidate
    return row, items[len(row):]


def _squarify(items: List[_Weighted], free: _FreeRect, gap: int) -> List[CellPosition]:
    positions: List[CellPosition] = []
    remaining = list(items)
    while remaining:
        side = free.short_side
        if len(remaining) == 1 or side <= 0:
            positions.extend(free.fill(item.index) for item in remaining)
            break

        row, remaining = _take_row(remaining, side)
        thickness = sum(item.area for item in row) / side
        offset = 0.0
        for item in row:
            extent = item.area / thickness
            if free.is_wide:
                x, y = free.x, free.y + offset
                width, height = thickness - gap / 2, extent - gap / 2
            else:
                x, y = free.x + offset, free.y
                width, height = extent - gap / 2, thickness - gap / 2
            positions.append(
                CellPosition(
                    x=math.floor(x),
                    y=math.floor(y),
                    width=math.floor(width),
                    height=math.floor(height),
                    media_index=item.index,
                )
            )
            offset += extent
        free.consume(thickness)
    return positions


def calculate_treemap_layout(
    items: Sequence[LayoutItem],
    canvas_width: int,
    canvas_height: int,
    gap: int = 0,
) -> List[CellPosition]:
    if not items:
        return []
    free = _FreeRect(gap, gap, canvas_width - gap * 2, canvas_height - gap * 2)
    total_area = free.width * free.height
    if free.width <= 0 or free.height <= 0:
        logger.debug("Treemap canvas %sx%s has no usable area", canvas_width, canvas_height)
        return [CellPosition(gap, gap, 0, 0, item.index) for item in items]

    weights = [_weight(item) for item in items]
    total_weight = sum(weights)
    weighted = [
        _Weighted(item.index, weight / total_weight * total_area)
        for item, weight in zip(items, weights)
    ]
    weighted.sort(key=lambda item: item.area, reverse=True)
    return _squarify(weighted, free, gap)
