#!/usr/bin/env python3
"""Print or display the Hilbert curve of a given order."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from .config import Settings, build_settings
from .render import to_pixels
from .state import CurveController

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hilbert-sketch", description=__doc__)
    parser.add_argument(
        "--order",
        type=int,
        default=settings.order,
        help=f"curve order between {settings.min_order} and {settings.max_order}",
    )
    parser.add_argument("--canvas-size", type=int, default=None, help="canvas side in pixels")
    parser.add_argument("--format", choices=["json", "text"], default="json")
    parser.add_argument(
        "--pixels", action="store_true", help="emit pixel centres instead of grid cells"
    )
    parser.add_argument("--gui", action="store_true", help="open the interactive viewer")
    parser.add_argument("--verbose", action="store_true")
    return parser


def write_path(rows: List[List[float]], fmt: str, out: TextIO) -> None:
    if fmt == "json":
        json.dump(rows, out)
        out.write("\n")
        return
    for x, y in rows:
        out.write(f"{x} {y}\n")


def main(argv: Optional[Sequence[str]] = None, out: TextIO = sys.stdout) -> int:
    base = build_settings()
    parser = build_parser(base)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not base.min_order <= args.order <= base.max_order:
        parser.error(
            f"--order must be between {base.min_order} and {base.max_order}, got {args.order}"
        )
    try:
        settings = build_settings(
            {"HILBERT_ORDER": args.order, "HILBERT_CANVAS_SIZE": args.canvas_size}
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.gui:
        from .gui import main as gui_main

        gui_main(settings)
        return 0

    controller = CurveController(settings)
    path = controller.path
    if args.pixels:
        rows = to_pixels(path, settings.canvas_size).tolist()
    else:
        rows = path.as_array().tolist()
    write_path(rows, args.format, out)
    logger.debug("Wrote %d points for order %d", len(rows), path.order)
    return 0


if __name__ == "__main__":
    sys.exit(main())
