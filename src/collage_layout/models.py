from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .units import PX

logger = logging.getLogger(__name__)

MIN_ASPECT = 0.01
DEFAULT_ASPECT = 16 / 9


class LayoutType(str, Enum):
    GRID = "grid"
    DYNAMIC = "dynamic"
    MASONRY = "masonry"
    TREEMAP = "treemap"
    PACK = "pack"

    @classmethod
    def parse(cls, value) -> "LayoutType":
        """Case-sensitive lookup; anything unknown maps to ``DYNAMIC``."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        if value is not None:
            logger.warning("Unknown layout type %r, using dynamic", value)
        return cls.DYNAMIC


def safe_aspect(value: float) -> float:
    if isinstance(value, (int, float)) and math.isfinite(value) and value > 0:
        return float(value)
    logger.warning("Aspect ratio %r is not positive, clamping to %s", value, MIN_ASPECT)
    return MIN_ASPECT


@dataclass(frozen=True)
class LayoutItem:
    """One media item to be placed; ``aspect`` is width / height."""

    index: int
    aspect: float
    area: Optional[float] = None


@dataclass
class LayoutOptions:
    type: LayoutType
    canvas_width: PX
    canvas_height: PX
    gap: PX = 0
    columns: Optional[int] = None
    rows: Optional[int] = None
    padding: Optional[PX] = None

    def __post_init__(self) -> None:
        self.type = LayoutType.parse(self.type)


@dataclass(frozen=True)
class CellPosition:
    x: PX
    y: PX
    width: PX
    height: PX
    media_index: int

    @property
    def right(self) -> PX:
        return self.x + self.width

    @property
    def bottom(self) -> PX:
        return self.y + self.height

    def as_dict(self) -> Dict[str, int]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "mediaIndex": self.media_index,
        }


@dataclass
class MediaInfo:
    """Probed media dimensions."""

    width: PX
    height: PX
    duration: float = 0.0
    has_audio: bool = False
    fps: float = 0.0
