"""Contrast ratio CLI.

Computes the contrast ratio between two colors without starting the GUI.
Colors are hex strings (``#rrggbb`` or ``rrggbb``) or comma separated
``r,g,b`` triples.

Exit code 0 on success, 2 when either color cannot be read.

Example:
  contrast-ratio "#898989" "#454545" --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from contrast_widget.design.contrast import ColorInput, contrast_ratio, relative_luminance
from contrast_widget.design.errors import ContrastError, InvalidColorFormat


def parse_color(text: str) -> ColorInput:
    """Return a hex string unchanged or an ``(r, g, b)`` tuple for ``r,g,b`` text."""
    if "," not in text:
        return text.strip()
    parts = [p.strip() for p in text.split(",")]
    try:
        values = tuple(int(p) for p in parts)
    except ValueError:
        raise InvalidColorFormat(f"Invalid RGB triple: {text!r}", context={"value": text}) from None
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contrast-ratio", description="Print the WCAG contrast ratio of two colors."
    )
    parser.add_argument("foreground")
    parser.add_argument("background")
    parser.add_argument("--json", action="store_true", help="Emit a JSON object")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        fg = parse_color(args.foreground)
        bg = parse_color(args.background)
        ratio = contrast_ratio(fg, bg)
        fg_lum = relative_luminance(fg)
        bg_lum = relative_luminance(bg)
    except ContrastError as exc:
        print(f"error: {exc}", file=sys.stderr)  # noqa: T201
        return 2
    if args.json:
        payload = {
            "foreground": args.foreground,
            "background": args.background,
            "foreground_luminance": fg_lum,
            "background_luminance": bg_lum,
            "ratio": ratio,
        }
        print(json.dumps(payload, sort_keys=True))  # noqa: T201
    else:
        print(f"{ratio:g}")  # noqa: T201
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
