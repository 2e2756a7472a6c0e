"""Command-line entry: lay out a Sankey diagram and write it as SVG or PNG.

Usage:
    sankeysight --example -o plant.svg
    sankeysight --inputs 75 32 --losses 10 5 2.8 --unit MW \\
        --labels "Main Input" "Aux Input" "Losses I" "Losses II" "Losses III" Output \\
        --colours "#0066bd" "#4dbded" "#ebb020" "#a1142e" "#d95217" --sep 1 3 -o out.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from matplotlib.colors import to_rgb

from sankeysight.engine.errors import SankeyError
from sankeysight.engine.layout import draw_sankey
from sankeysight.svg.serializer import scene_to_svg
from sankeysight.utils.canvas import scene_to_png

logger = logging.getLogger(__name__)

# Two-input power plant: 107 MW in, three losses, 89.2 MW out
EXAMPLE = {
    "inputs": [75.0, 32.0],
    "losses": [10.0, 5.0, 2.8],
    "unit": "MW",
    "labels": ["Main Input", "Aux Input", "Losses I", "Losses II", "Losses III", "Output"],
    "colours": [
        (0.0, 0.4, 0.74),
        (0.30, 0.74, 0.93),
        (0.92, 0.69, 0.125),
        (0.63, 0.078, 0.18),
        (0.85, 0.32, 0.09),
    ],
    "separators": [1, 3],
}


def parse_colour(text: str) -> tuple[float, float, float]:
    """Accept 'r,g,b' in [0, 1] or anything matplotlib understands ('#0066bd', 'teal')."""
    if "," in text:
        parts = [float(p) for p in text.split(",")]
        if len(parts) != 3:
            raise argparse.ArgumentTypeError(f"expected three components, got {text!r}")
        return (parts[0], parts[1], parts[2])
    try:
        return to_rgb(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sankeysight",
        description="Draw a single-direction Sankey diagram",
    )
    parser.add_argument("--inputs", type=float, nargs="+", help="input magnitudes, main input first")
    parser.add_argument("--losses", type=float, nargs="*", default=[], help="loss magnitudes")
    parser.add_argument("--unit", default="", help="unit shown in labels")
    parser.add_argument("--labels", nargs="+", help="labels: inputs, losses, then output")
    parser.add_argument("--colours", type=parse_colour, nargs="+", help="one colour per loss, then the output")
    parser.add_argument("--sep", type=int, nargs="*", default=[], help="1-based loss numbers followed by a separator")
    parser.add_argument("--example", action="store_true", help="draw the built-in two-input example")
    parser.add_argument("-o", "--output", type=Path, help="output file (.svg or .png); SVG to stdout if omitted")
    parser.add_argument("--dpi", type=int, default=150, help="PNG resolution")
    parser.add_argument("--log-level", default="warning", help="logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.example:
        data = dict(EXAMPLE)
    else:
        if not args.inputs or not args.labels or not args.colours:
            parser.error("--inputs, --labels and --colours are required unless --example is given")
        data = {
            "inputs": args.inputs,
            "losses": args.losses,
            "unit": args.unit,
            "labels": args.labels,
            "colours": args.colours,
            "separators": args.sep,
        }

    try:
        scene = draw_sankey(**data)
    except SankeyError as e:
        parser.error(str(e))

    if args.output is None:
        sys.stdout.write(scene_to_svg(scene) + "\n")
    elif args.output.suffix.lower() == ".png":
        args.output.write_bytes(scene_to_png(scene, dpi=args.dpi))
    else:
        args.output.write_text(scene_to_svg(scene), encoding="utf-8")

    if args.output is not None:
        logger.info("Wrote %s (output %.1f %s)", args.output, scene.output, scene.unit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
