# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Command-line entry point.

Single file:
    palettecut photo.jpg -n 6 --json --preview bar.png --out results/

Batch (every png/jpg/jpeg/gif in a folder, composites written as PNG):
    palettecut --in-dir photos/ --out results/ -n 6
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from palettecut.schema import PaletteResult
from palettecut.quantize import (
    ClassifierConfig,
    QuantizeConfig,
    is_supported_image,
    load_image,
    quantize,
)
from palettecut.runtime import (
    SerializerFormat,
    save_composite,
    save_preview,
    serialize,
)

logger = logging.getLogger("palettecut")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palettecut",
        description="Extract a median-cut color palette from image(s).",
    )
    parser.add_argument(
        "image", type=Path, nargs="?", default=None,
        help="Input image (png/jpg/jpeg/gif)",
    )
    parser.add_argument(
        "--in-dir", type=Path, default=None,
        help="Input directory for batch processing (requires --out)",
    )
    parser.add_argument(
        "--out", type=Path, default=None,
        help="Output directory for composite images",
    )
    parser.add_argument(
        "-n", "--colors", type=int, default=8, help="Number of palette colors"
    )
    parser.add_argument("--json", action="store_true", help="Print palette as JSON")
    parser.add_argument(
        "--preview", type=Path, default=None, help="Save a palette preview PNG"
    )
    parser.add_argument(
        "--strip", type=int, default=80, help="Palette strip width in pixels"
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Classification threads (default: CPU count)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.colors <= 0:
        parser.error("number of colors must be > 0")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")
    if args.in_dir is not None and args.out is None:
        parser.error("--in-dir requires --out")
    if args.in_dir is None and args.image is None:
        parser.error("provide an input image or use batch mode --in-dir/--out")
    return args


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Pillow logs decoder chunks at DEBUG
    logging.getLogger("PIL").setLevel(logging.INFO)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_cli_args(argv)
    configure_logging(args.verbose)

    config = QuantizeConfig(
        n_colors=args.colors,
        classifier=ClassifierConfig(workers=args.workers),
    )

    if args.in_dir is not None:
        return run_batch(args, config)

    try:
        run_single(args, config)
    except Exception as e:
        logger.error("%s: %s", args.image, e)
        return 1
    return 0


def run_single(args: argparse.Namespace, config: QuantizeConfig) -> PaletteResult:
    """Quantize one image, print it, and write the optional outputs."""
    pixels = load_image(args.image)
    result = replace(quantize(pixels, config=config), source=str(args.image))

    fmt = SerializerFormat.JSON_PRETTY if args.json else SerializerFormat.TEXT
    print(serialize(result, fmt), flush=True)

    if args.preview is not None:
        path = save_preview(args.preview, result)
        print(f"palette preview saved: {path}", flush=True)

    if args.out is not None:
        args.out.mkdir(parents=True, exist_ok=True)
        save_composite(args.out / f"{args.image.stem}.png", pixels, result, args.strip)

    return result


def run_batch(args: argparse.Namespace, config: QuantizeConfig) -> int:
    """
    Process every supported image in ``args.in_dir``.

    A failing file is logged and skipped. Returns 1 if any file failed.
    """
    try:
        files = sorted(
            (p for p in args.in_dir.iterdir() if p.is_file() and is_supported_image(p)),
            key=lambda p: p.name.lower(),
        )
    except OSError as e:
        logger.error("cannot read input directory: %s", e)
        return 1
    args.out.mkdir(parents=True, exist_ok=True)

    failures = 0
    for path in files:
        start = time.perf_counter()
        logger.info("%s: processing...", path.name)
        try:
            pixels = load_image(path)
            result = quantize(pixels, config=config)
            if args.json:
                print(serialize(result, SerializerFormat.JSON_PRETTY), flush=True)
            if args.preview is not None:
                save_preview(args.preview, result)
            save_composite(args.out / f"{path.stem}.png", pixels, result, args.strip)
        except Exception as e:
            failures += 1
            logger.error("%s: error: %s", path.name, e)
            continue
        logger.info("%s: done in %.3fs", path.name, time.perf_counter() - start)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
