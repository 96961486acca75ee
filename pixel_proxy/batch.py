"""Batch pixelation of every image in a directory.

Usage::

    pixel-proxy-batch --in ./images --out ./output --size 128
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import SETTINGS, configure_logging
from .errors import PixelationError
from .infrastructure.palettes import parse_palette
from .infrastructure.sources import load_image
from .processing.pipeline import PipelineConfig, pixelate_image, validate

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pixelate every image in a directory.")
    parser.add_argument("--in", dest="input_dir", required=True, help="Directory of source images")
    parser.add_argument("--out", dest="output_dir", required=True, help="Directory for results")
    parser.add_argument("--size", type=int, default=SETTINGS.default_width, help="Target pixel width")
    parser.add_argument("--dither", default=SETTINGS.default_dither, help="Dither algorithm")
    parser.add_argument(
        "--strength",
        type=float,
        default=SETTINGS.default_strength * 100,
        help="Dither strength, 0-100",
    )
    parser.add_argument("--palette", default=SETTINGS.default_palette or None, help="Palette name or hex list")
    parser.add_argument(
        "--resolution",
        choices=("pixel", "original"),
        default=SETTINGS.default_resolution,
        help="Output at pixel-grid size or scaled back to the source size",
    )
    return parser


def is_image_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def process_file(source: Path, target: Path, config: PipelineConfig) -> bool:
    try:
        img = load_image(source)
        out = pixelate_image(img, config)
        if target.suffix.lower() in (".jpg", ".jpeg", ".bmp"):
            out = out.convert("RGB")
        out.save(target)
    except (OSError, PixelationError) as exc:
        logger.error("Error processing %s: %s", source, exc)
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        config = PipelineConfig.from_options(
            width=args.size,
            dither=args.dither,
            strength=args.strength,
            palette=parse_palette(args.palette),
            resolution=args.resolution,
            percent=True,
        )
        validate(config)
    except PixelationError as exc:
        logger.error("Invalid options: %s", exc)
        return 1

    input_dir = Path(args.input_dir)
    output_dir = Path(args.output_dir)
    if not input_dir.is_dir():
        logger.error("Input directory does not exist: %s", input_dir)
        return 1

    files = sorted(path for path in input_dir.iterdir() if is_image_file(path))
    if not files:
        logger.error("No image files found in input directory")
        return 1

    if not output_dir.exists():
        output_dir.mkdir(parents=True)
        logger.info("Created output directory: %s", output_dir)

    logger.info("Found %s images to process at %spx wide", len(files), config.target_width)

    successful = failed = 0
    for path in files:
        if process_file(path, output_dir / f"pixelated_{path.name}", config):
            logger.info("Processed %s", path.name)
            successful += 1
        else:
            failed += 1

    logger.info("Complete: %s successful, %s failed, output in %s", successful, failed, output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
