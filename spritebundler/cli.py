"""Command-line entry point for bundling a folder of images into a spritesheet."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .core import DEFAULT_MAX_COLUMNS, DEFAULT_OUTPUT, BundleSettings, __version__
from .core.errors import BundlerError
from .core.pipeline import bundle_directory
from .utils import validators

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on usage errors; every failure here exits with 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="spritebundler",
        description=(
            "Bundles all images in a folder into a single image. "
            "The size of the largest image will be used for tile size."
        ),
    )
    parser.add_argument("input", help="Folder that contains images will be bundled (a single image also works)")
    parser.add_argument(
        "-m",
        "--max-cols",
        metavar="NUMBER",
        default=str(DEFAULT_MAX_COLUMNS),
        help=f"Maximum number columns of tiles (default: {DEFAULT_MAX_COLUMNS}, 0 means 1)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        type=Path,
        default=Path(DEFAULT_OUTPUT),
        help=f"Output file name (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATH",
        nargs="+",
        default=[],
        help="Images to be ignored, matched by exact path",
    )
    parser.add_argument("-f", "--force", action="store_true", help="Forces output override")
    parser.add_argument(
        "--manifest",
        metavar="PATH",
        type=Path,
        help="Optional JSON manifest output with tile positions",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and print the layout without writing anything",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = BundleSettings(
            input_dir=args.input,
            output_path=args.output,
            max_columns=validators.parse_max_columns(args.max_cols),
            ignored=tuple(args.ignore),
            force=args.force,
            manifest_path=args.manifest,
            dry_run=args.dry_run,
        )
        outcome = bundle_directory(settings)
    except BundlerError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    layout = outcome.layout
    width, height = layout.canvas_size
    if args.dry_run:
        print(
            f"{len(outcome.placements)} images -> {layout.columns}x{layout.rows} grid, "
            f"tile {layout.tile.width}x{layout.tile.height}, canvas {width}x{height}"
        )
        for placement in outcome.placements:
            print(f"  ({placement.x}, {placement.y}) {placement.source}")
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
