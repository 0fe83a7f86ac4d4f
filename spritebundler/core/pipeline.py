"""End-to-end bundling run: discover, decode, compose, persist."""

from __future__ import annotations

import logging

from . import BundleOutcome, BundleSettings
from . import image_loader, manifest_writer, spritesheet_builder
from .errors import NoImagesFoundError
from ..utils import validators

logger = logging.getLogger(__name__)


def bundle_directory(settings: BundleSettings) -> BundleOutcome:
    """Bundle every image under ``settings.input_dir`` into one spritesheet.

    All qualifying images are decoded, including ignored ones, because the
    tile size is measured over everything that was discovered. Only the
    non-ignored images are placed on the canvas. Nothing is written when
    ``settings.dry_run`` is set or when any step fails.
    """

    input_dir = validators.validate_input_path(settings.input_dir)
    max_columns = validators.parse_max_columns(settings.max_columns)
    if not settings.dry_run:
        validators.resolve_image_format(settings.output_path)
        validators.validate_output_path(settings.output_path, settings.force)
        if settings.manifest_path is not None:
            validators.validate_output_path(settings.manifest_path, settings.force)

    paths = image_loader.discover_images(input_dir)
    if not paths:
        raise NoImagesFoundError(f"No images found in {input_dir}")

    images = image_loader.load_images(paths)
    tile = spritesheet_builder.resolve_tile_size(images)

    kept_paths, dropped = image_loader.partition_ignored(paths, settings.ignored)
    if dropped:
        logger.info("Ignoring %s of %s images", len(dropped), len(paths))
    if not kept_paths:
        raise NoImagesFoundError(f"No images left in {input_dir} after applying the ignore list")

    decoded = dict(zip(paths, images))
    canvas, layout, placements = spritesheet_builder.compose_grid(
        [decoded[path] for path in kept_paths], tile, max_columns, sources=kept_paths
    )

    if settings.dry_run:
        logger.info("Dry run: skipping writes")
        return BundleOutcome(spritesheet_path=None, manifest_path=None, layout=layout, placements=placements)

    sheet_path = spritesheet_builder.save_spritesheet(canvas, settings.output_path)
    manifest_path = None
    if settings.manifest_path is not None:
        manifest_path = manifest_writer.write_manifest(placements, layout, sheet_path, settings.manifest_path)

    return BundleOutcome(
        spritesheet_path=sheet_path,
        manifest_path=manifest_path,
        layout=layout,
        placements=placements,
    )
