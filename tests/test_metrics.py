import math

from collage_layout.algorithms import calculate_dynamic_layout
from collage_layout.metrics import (
    coverage_fraction,
    layout_flags,
    out_of_bounds,
    overlap_area,
)
from collage_layout.models import CellPosition, LayoutItem


def test_overlap_area_counts_shared_region():
    cells = [CellPosition(0, 0, 100, 100, 0), CellPosition(50, 50, 100, 100, 1)]
    assert overlap_area(cells) == 2500


def test_overlap_area_tolerates_rounding_slack():
    cells = [CellPosition(0, 0, 101, 100, 0), CellPosition(100, 0, 100, 100, 1)]
    assert overlap_area(cells) == 100
    assert overlap_area(cells, tolerance=1) == 0


def test_coverage_fraction():
    cells = [CellPosition(0, 0, 100, 50, 0), CellPosition(100, 0, 100, 50, 1)]
    assert math.isclose(coverage_fraction(cells, 200, 200), 0.5)
    assert coverage_fraction(cells, 0, 0) == 0.0


def test_out_of_bounds_lists_offenders():
    cells = [CellPosition(-1, 0, 10, 10, 0), CellPosition(0, 0, 10, 10, 1), CellPosition(95, 0, 10, 10, 2)]
    assert out_of_bounds(cells, 100, 100) == [0, 2]


def test_layout_flags_clean_dynamic_layout():
    items = [LayoutItem(i, 16 / 9) for i in range(6)]
    positions = calculate_dynamic_layout(items, 1920, 1080, 10)
    assert layout_flags(positions, len(items), 1920, 1080) == set()


def test_layout_flags_reports_problems():
    cells = [
        CellPosition(0, 0, 100, 100, 0),
        CellPosition(50, 50, 100, 100, 0),
        CellPosition(150, 0, 0, 10, 1),
    ]
    flags = layout_flags(cells, 3, 120, 120)
    assert flags == {
        "missing_items",
        "duplicate_items",
        "out_of_bounds",
        "empty_cells",
        "overlapping_cells",
    }
