from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib import metadata
from typing import List, Optional, Sequence

from .engine import calculate_layout, clamp_positions
from .metrics import coverage_fraction, layout_flags
from .models import LayoutItem, LayoutOptions, LayoutType
from .settings import load_settings
from .units import format_float, parse_aspect, parse_size

logger = logging.getLogger(__name__)


def _get_app_version() -> str:
    try:
        return metadata.version("collage-layout")
    except metadata.PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        prog="collage-layout",
        description="Compute collage cell rectangles for a list of media aspect ratios.",
    )
    parser.add_argument(
        "aspects",
        nargs="*",
        metavar="ASPECT",
        help="item aspect as 16:9, 1920x1080 or 1.5; '?' uses the default aspect",
    )
    parser.add_argument(
        "--layout",
        default=settings["layout"],
        help="grid, dynamic, masonry, treemap or pack (unknown values use dynamic)",
    )
    parser.add_argument(
        "--size",
        default=f"{settings['canvas_width']}x{settings['canvas_height']}",
        help="canvas size, e.g. 1920x1080",
    )
    parser.add_argument("--gap", type=int, default=settings["gap"], help="gap between cells in pixels")
    parser.add_argument("--columns", type=int, help="grid/masonry column count")
    parser.add_argument("--rows", type=int, help="grid row count")
    parser.add_argument("--no-clamp", action="store_true", help="skip clamping cells to the canvas")
    parser.add_argument("--preview", metavar="PATH", help="write a schematic PNG of the layout")
    parser.add_argument("--stats", action="store_true", help="print coverage and sanity flags to stderr")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_app_version()}")
    return parser


def parse_items(specs: Sequence[str], default_aspect: float) -> List[LayoutItem]:
    items = []
    for i, spec in enumerate(specs):
        if spec.strip() == "?":
            items.append(LayoutItem(index=i, aspect=default_aspect))
        else:
            items.append(LayoutItem(index=i, aspect=parse_aspect(spec)))
    return items


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        width, height = parse_size(args.size)
        items = parse_items(args.aspects, load_settings()["default_aspect"])
    except ValueError as exc:
        parser.error(str(exc))
    if args.gap < 0:
        parser.error("--gap must not be negative")

    options = LayoutOptions(
        type=LayoutType.parse(args.layout),
        canvas_width=width,
        canvas_height=height,
        gap=args.gap,
        columns=args.columns,
        rows=args.rows,
    )
    positions = calculate_layout(items, options)
    if not args.no_clamp:
        positions = clamp_positions(positions, width, height)

    json.dump([p.as_dict() for p in positions], sys.stdout, indent=2)
    sys.stdout.write("\n")

    if args.stats:
        coverage = coverage_fraction(positions, width, height)
        flags = sorted(layout_flags(positions, len(items), width, height))
        print(f"coverage: {format_float(coverage * 100, 1)}%", file=sys.stderr)
        print(f"flags: {', '.join(flags) or 'none'}", file=sys.stderr)

    if args.preview:
        from .preview import save_preview

        save_preview(args.preview, positions, width, height)
        logger.info("Preview written to %s", args.preview)
    return 0


if __name__ == "__main__":
    sys.exit(main())
