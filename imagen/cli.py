#!/usr/bin/env python
"""Command-line entry point: ``imagen generate`` and ``imagen serve``."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from imagen.config import get_settings
from imagen.errors import ImagenError
from imagen.parsing import BatchRequest, parse_background, parse_border, plan_batch
from imagen.services.colors import new_rng, parse_color_spec
from imagen.services.encoder import encode
from imagen.services.rasterizer import render

logger = logging.getLogger(__name__)


class _BackgroundAction(argparse.Action):
    """Collect (mode, value) pairs from all background flags in command-line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        items = list(getattr(namespace, self.dest, None) or [])
        items.append((self.const, values))
        setattr(namespace, self.dest, items)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imagen", description="A small placeholder image creation utility")
    commands = parser.add_subparsers(dest="command", required=True)

    gen = commands.add_parser("generate", help="Generate static placeholder images")
    gen.add_argument("-s", "--size", dest="sizes", action="append", help="Image size WxH, can be repeated")
    for flags, mode, syntax in (
        (("-c", "--color"), "solid", "color[:t:textcolor]"),
        (("-g", "--gradient"), "gradient", "color1,color2[,...][:angle][:t:textcolor]"),
        (("-t", "--tiles"), "tiled", "color1,color2[,...][:tilesize][:t:textcolor]"),
        (("-n", "--noise"), "noise", "color1,color2[,...][:tilesize][:t:textcolor]"),
    ):
        gen.add_argument(*flags, dest="backgrounds", action=_BackgroundAction, const=mode, help=syntax)
    gen.add_argument("-b", "--border", help="Border: width,color")
    gen.add_argument("--text", default="{w}x{h}", help="Text to display ({w}, {h}, {nr} placeholders)")
    gen.add_argument("--text-size", type=float, default=20.0, help="Text size in pt")
    gen.add_argument("--text-color", help="Default text color")
    gen.add_argument("--text-angle", type=float, default=0.0, help="Text angle in degrees")
    gen.add_argument("-f", "--filename", default="image.png", help="Output filename ({w}, {h}, {nr} placeholders)")
    gen.add_argument("--format", default="png", help="Output format (png, jpeg)")
    gen.add_argument("-r", "--nr", dest="rounds", type=int, default=1, help="Number of runs")

    srv = commands.add_parser("serve", help="Start web server to serve placeholder images")
    srv.add_argument("--listen", default=None, help="Listen address(es), comma-separated (default: :3000)")
    return parser


def build_request(args: argparse.Namespace) -> BatchRequest:
    options: dict = {
        "text": args.text,
        "text_size": args.text_size,
        "text_angle": args.text_angle,
        "filename": args.filename,
        "format": args.format,
        "rounds": args.rounds,
    }
    if args.sizes:
        options["sizes"] = args.sizes
    if args.backgrounds:
        options["backgrounds"] = [parse_background(value, mode) for mode, value in args.backgrounds]
    if args.border:
        options["border"] = parse_border(args.border)
    if args.text_color:
        options["text_color"] = parse_color_spec(args.text_color)
    return BatchRequest(**options)


def run_generate(args: argparse.Namespace) -> None:
    settings = get_settings()
    request = build_request(args)
    rng = new_rng(settings.random_seed)

    for job in plan_batch(request, rng):
        image = render(job.config, rng)
        Path(job.filename).write_bytes(encode(image, job.config.format))
        logger.debug("Wrote job %d to %s", job.number, job.filename)
        print(f"Generated: {job.filename} ({job.config.width}x{job.config.height}, {job.mode})")


def run_serve(args: argparse.Namespace) -> None:
    from imagen.server import serve, split_listen  # uvicorn is only needed here

    settings = get_settings()
    serve(split_listen(args.listen or settings.listen), log_level=settings.log_level)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "generate":
        if args.text_size <= 0:
            parser.error("--text-size must be positive")
        if args.rounds < 1:
            parser.error("--nr must be at least 1")

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "generate":
            run_generate(args)
        else:
            run_serve(args)
    except (ImagenError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
