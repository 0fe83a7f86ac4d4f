"""Spritesheet composition using Pillow."""

from __future__ import annotations

import io
import math
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image

from . import GridLayout, Placement, TileSize
from .errors import LayoutError, NoImagesFoundError, ProcessingError, ValidationError
from ..utils import file_tools, validators

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)
# Pillow refuses to write RGBA into these.
OPAQUE_FORMATS = {"JPEG", "MPO", "PPM", "PCX", "EPS"}


def resolve_tile_size(images: Sequence[Image.Image]) -> TileSize:
    """Tile size is the largest width and the largest height seen, taken independently."""

    if not images:
        raise NoImagesFoundError("No images found to derive a tile size from.")
    return TileSize(
        width=max(image.width for image in images),
        height=max(image.height for image in images),
    )


def resolve_grid(image_count: int, max_columns: int) -> tuple[int, int]:
    """Compute (columns, rows) for a row-major grid.

    ``max_columns`` of 0 is treated as a single column. The column count is
    always ``max_columns`` even when fewer images are placed, so a sheet of
    three images with ten columns is ten tiles wide.
    """

    if max_columns < 0:
        raise ValidationError("Columns must be zero or greater")
    columns = max(max_columns, 1)
    if image_count < columns:
        return columns, 1
    return columns, math.ceil(image_count / columns)


def slot_origin(index: int, layout: GridLayout) -> tuple[int, int]:
    """Pixel origin of slot ``index`` in a row-major walk of the grid."""

    col = index % layout.columns
    row = index // layout.columns
    return col * layout.tile.width, row * layout.tile.height


def compose_grid(
    images: Sequence[Image.Image],
    tile: TileSize,
    max_columns: int,
    sources: Optional[Sequence[Path | str]] = None,
) -> Tuple[Image.Image, GridLayout, list[Placement]]:
    """Paste images into a transparent canvas, one per tile slot, in input order."""

    if not images:
        raise NoImagesFoundError("No images found to place on the spritesheet.")
    if sources is not None and len(sources) != len(images):
        raise ValueError("sources must line up one-to-one with images")

    columns, rows = resolve_grid(len(images), max_columns)
    layout = GridLayout(columns=columns, rows=rows, tile=tile)
    canvas_width, canvas_height = layout.canvas_size
    canvas = Image.new("RGBA", layout.canvas_size, TRANSPARENT)
    logger.info(
        "Composing %s images into %sx%s grid of %sx%s tiles (%sx%s px)",
        len(images),
        columns,
        rows,
        tile.width,
        tile.height,
        canvas_width,
        canvas_height,
    )

    placements: list[Placement] = []
    for idx, image in enumerate(images):
        x, y = slot_origin(idx, layout)
        if image.width > tile.width or image.height > tile.height:
            raise LayoutError(
                f"Image {idx} ({image.width}x{image.height}) does not fit a {tile.width}x{tile.height} tile"
            )
        if x + image.width > canvas_width or y + image.height > canvas_height:
            raise LayoutError(
                f"Image {idx} at ({x}, {y}) exceeds canvas bounds {canvas_width}x{canvas_height}"
            )
        canvas.paste(image, (x, y))
        source = str(sources[idx]) if sources is not None else None
        placements.append(Placement(index=idx, x=x, y=y, width=image.width, height=image.height, source=source))

    return canvas, layout, placements


def save_spritesheet(canvas: Image.Image, output_path: Path) -> Path:
    """Write the canvas in the format implied by the output extension.

    The image is encoded in memory first, so a failed encode never touches an
    existing file at ``output_path``.
    """

    image_format = validators.resolve_image_format(output_path)
    to_save = canvas.convert("RGB") if image_format in OPAQUE_FORMATS else canvas

    buffer = io.BytesIO()
    try:
        to_save.save(buffer, format=image_format)
    except (OSError, ValueError) as exc:
        raise ProcessingError(f"Failed to encode spritesheet as {image_format}: {exc}") from exc

    try:
        file_tools.ensure_directory(output_path.parent)
        output_path.write_bytes(buffer.getvalue())
    except OSError as exc:
        raise ProcessingError(f"Failed to write spritesheet to {output_path}: {exc}") from exc

    logger.info("Wrote spritesheet to %s", output_path)
    return output_path
