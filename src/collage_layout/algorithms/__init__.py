from .dynamic import calculate_dynamic_layout, partition_into_rows
from .grid import calculate_grid_layout
from .masonry import calculate_masonry_layout
from .pack import calculate_pack_layout
from .treemap import calculate_treemap_layout, worst_aspect_ratio

__all__ = [
    "calculate_grid_layout",
    "calculate_dynamic_layout",
    "partition_into_rows",
    "calculate_masonry_layout",
    "calculate_treemap_layout",
    "worst_aspect_ratio",
    "calculate_pack_layout",
]
