"""CLI entrypoint for rendering a page tree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .demo import build_demo_renderer
from .exporter import export_outline
from .io_utils import write_text
from .layout import build_renderer, load_layout
from .renderer import DocumentRenderer


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagetree",
        description="Render an HTML page tree (the bundled demo page by default).",
    )
    parser.add_argument(
        "--layout",
        type=Path,
        default=None,
        help="Path to a YAML layout file; renders the demo page when omitted.",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout.",
    )
    parser.add_argument(
        "--outline",
        action="store_true",
        help="Print an ASCII outline of the tree instead of markup.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    return parser.parse_args(argv)


def _build(args: argparse.Namespace) -> DocumentRenderer:
    if args.layout is None:
        return build_demo_renderer()
    return build_renderer(load_layout(args.layout))


def _render_once(args: argparse.Namespace) -> str:
    renderer = _build(args)
    if args.outline:
        return export_outline(renderer.root)
    return renderer.render()


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    output = _render_once(args)
    if args.check and _render_once(args) != output:
        raise SystemExit("Determinism check failed: outputs differ between runs")

    if args.out is not None:
        write_text(args.out, output)
        print(f"Wrote {len(output)} characters to {args.out}")
        return

    sys.stdout.write(output)


if __name__ == "__main__":
    main()
