from typing import Tuple

PX = int


def _clean(value: str) -> str:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    return text.replace(",", ".")


def parse_int(value: str) -> int:
    return int(_clean(value))


def parse_size(value: str) -> Tuple[int, int]:
    """Parse ``1920x1080`` into ``(1920, 1080)``."""
    parts = _clean(value).lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"size must look like 1920x1080, got {value!r}")
    width, height = parse_int(parts[0]), parse_int(parts[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"size must be positive, got {value!r}")
    return width, height


def parse_aspect(value: str) -> float:
    """Accept ``16:9``, ``1920x1080`` or a plain ratio such as ``1.5``."""
    text = _clean(value).lower()
    for sep in (":", "x", "/"):
        if sep in text:
            num, _, den = text.partition(sep)
            denominator = float(den)
            if denominator <= 0:
                raise ValueError(f"invalid aspect {value!r}")
            ratio = float(num) / denominator
            break
    else:
        ratio = float(text)
    if ratio <= 0:
        raise ValueError(f"aspect must be positive, got {value!r}")
    return ratio


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"
