"""Command line entry point for gridder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
import yaml
from PIL import Image, ImageDraw

from .constraints.enums import Anchor, Fill
from .constraints.record import Constraints
from .errors import GridderError
from .layout.parser import RegionRegistry
from .loader import LayoutDocument, LayoutLoader
from .placement import Gridder, Placement

logger = logging.getLogger(__name__)

# Preview colors, cycled per region
PALETTE = [
    (141, 211, 199), (255, 255, 179), (190, 186, 218), (251, 128, 114),
    (128, 177, 211), (253, 180, 98), (179, 222, 105), (252, 205, 229),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gridder - parse 2D grid layouts and their constraints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "layout",
        nargs="?",
        help="Layout string, e.g. '{c1 + c2}{c3 - c4}'",
    )
    parser.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="YAML layout document to load instead of a layout string",
    )
    parser.add_argument(
        "-d", "--defaults",
        metavar="CONSTRAINTS",
        default="",
        help="Default constraints for a layout string, e.g. 'anchor w fill h'",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render a PNG preview of the grid cells",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=64,
        help="Preview cell size in pixels (default: 64)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsing details",
    )
    args = parser.parse_args(argv)
    if (args.layout is None) == (args.file is None):
        parser.error("give either a layout string or --file")
    return args


def format_constraints(record: Constraints) -> str:
    """Render a constraint record as a canonical constraint string."""
    anchor = record.anchor.value if isinstance(record.anchor, Anchor) else record.anchor
    fill = record.fill.value if isinstance(record.fill, Fill) else record.fill
    insets = record.insets
    return (
        f"gridwidth {record.gridwidth} gridheight {record.gridheight} "
        f"weightx {record.weightx:g} weighty {record.weighty:g} "
        f"anchor {anchor} fill {fill} ipadx {record.ipadx} ipady {record.ipady} "
        f"inset_top {insets.top} inset_bottom {insets.bottom} "
        f"inset_left {insets.left} inset_right {insets.right}"
    )


def format_cell_map(layout: RegionRegistry) -> list[str]:
    """Draw the grid as text, one line per row, with region names in cells."""
    cells = layout.cell_map()
    if cells.size == 0:
        return []
    names = np.array([region.name for region in layout] + ["."], dtype=object)
    labels = names[cells]
    width = max(len(label) for label in labels.flat)
    return [" ".join(label.ljust(width) for label in row).rstrip() for row in labels]


def render_preview(layout: RegionRegistry, path: Path, cell_size: int = 64) -> None:
    """Save a PNG showing each region as a labelled rectangle.

    Args:
        layout: Parsed regions
        path: Output image path
        cell_size: Size of one grid cell in pixels
    """
    rows, cols = layout.grid_shape()
    img = Image.new("RGB", (max(cols, 1) * cell_size + 1, max(rows, 1) * cell_size + 1), "white")
    draw = ImageDraw.Draw(img)

    for r in range(rows + 1):
        draw.line([(0, r * cell_size), (cols * cell_size, r * cell_size)], fill=(220, 220, 220))
    for c in range(cols + 1):
        draw.line([(c * cell_size, 0), (c * cell_size, rows * cell_size)], fill=(220, 220, 220))

    for index, region in enumerate(layout):
        box = [
            region.col * cell_size + 2,
            region.row * cell_size + 2,
            (region.col + region.width) * cell_size - 2,
            (region.row + region.height) * cell_size - 2,
        ]
        draw.rectangle(box, fill=PALETTE[index % len(PALETTE)], outline=(60, 60, 60))
        draw.text((box[0] + 4, box[1] + 4), region.name, fill=(0, 0, 0))

    img.save(str(path))


def _load(args: argparse.Namespace) -> LayoutDocument:
    if args.file:
        return LayoutLoader().load(args.file)
    gridder = Gridder(args.defaults)
    gridder.parse_layout(args.layout)
    return LayoutDocument(name="layout", gridder=gridder, placements=gridder.placements())


def _print_placements(placements: dict[str, Placement], layout: RegionRegistry) -> None:
    printed: set[str] = set()
    for region in layout:
        print(f"- {region.name} @ row {region.row}, col {region.col} "
              f"({region.width}x{region.height})")
        if region.name in printed:
            print("    duplicate name, not placed")
            continue
        printed.add(region.name)
        placement = placements[region.name]
        if region.constraints:
            print(f"    embedded: {region.constraints}")
        print(f"    final:    {format_constraints(placement.constraints)}")


def main(argv: list[str] | None = None) -> int:
    """Run the gridder command line tool."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = _load(args)
    except (GridderError, OSError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    layout = document.gridder.layout
    rows, cols = layout.grid_shape()

    print(f"Gridder - {document.name}")
    print("=" * 40)
    print(f"Layout contains {len(layout)} regions in a {rows}x{cols} grid:")
    _print_placements(document.placements, layout)

    print("\nCells:")
    for line in format_cell_map(layout):
        print(f"  {line}")

    if args.render:
        output_path = Path(args.render)
        render_preview(layout, output_path, args.cell_size)
        print(f"\nSaved preview to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
