from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Set

from .models import CellPosition

# Floor-based rounding can leave neighbouring cells sharing a pixel.
OVERLAP_TOLERANCE = 1


def _overlap(a: CellPosition, b: CellPosition, tolerance: int = 0) -> int:
    dx = min(a.right, b.right) - max(a.x, b.x)
    dy = min(a.bottom, b.bottom) - max(a.y, b.y)
    if dx <= tolerance or dy <= tolerance:
        return 0
    return dx * dy


def overlap_area(positions: Sequence[CellPosition], tolerance: int = 0) -> int:
    total = 0
    for i, pos in enumerate(positions):
        for other in positions[i + 1 :]:
            total += _overlap(pos, other, tolerance)
    return total


def coverage_fraction(positions: Sequence[CellPosition], canvas_width: int, canvas_height: int) -> float:
    """Share of the canvas covered by cells, ignoring overlaps; clamped to 1."""
    canvas_area = canvas_width * canvas_height
    if canvas_area <= 0:
        return 0.0
    covered = sum(max(0, p.width) * max(0, p.height) for p in positions)
    return max(0.0, min(1.0, covered / canvas_area))


def out_of_bounds(positions: Sequence[CellPosition], canvas_width: int, canvas_height: int) -> List[int]:
    return [
        p.media_index
        for p in positions
        if p.x < 0 or p.y < 0 or p.right > canvas_width or p.bottom > canvas_height
    ]


def layout_flags(
    positions: Sequence[CellPosition],
    item_count: int,
    canvas_width: int,
    canvas_height: int,
) -> Set[str]:
    flags: Set[str] = set()
    counts = Counter(p.media_index for p in positions)
    if len(counts) < item_count:
        flags.add("missing_items")
    if any(c > 1 for c in counts.values()):
        flags.add("duplicate_items")
    if out_of_bounds(positions, canvas_width, canvas_height):
        flags.add("out_of_bounds")
    if any(p.width <= 0 or p.height <= 0 for p in positions):
        flags.add("empty_cells")
    if overlap_area(positions, tolerance=OVERLAP_TOLERANCE) > 0:
        flags.add("overlapping_cells")
    return flags
