"""Manifest writing logic."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from . import GridLayout, Placement
from .errors import ProcessingError
from ..utils import file_tools

logger = logging.getLogger(__name__)


def build_manifest(placements: Iterable[Placement], layout: GridLayout, spritesheet_path: Path | None) -> dict:
    """Describe each placement and the grid it was placed on."""

    frames_payload = {}
    for placement in placements:
        key = placement.source if placement.source is not None else f"frame_{placement.index:04d}"
        frames_payload[key] = {
            "index": placement.index,
            "x": placement.x,
            "y": placement.y,
            "width": placement.width,
            "height": placement.height,
        }

    canvas_width, canvas_height = layout.canvas_size
    return {
        "frames": frames_payload,
        "meta": {
            "columns": layout.columns,
            "rows": layout.rows,
            "tile_width": layout.tile.width,
            "tile_height": layout.tile.height,
            "width": canvas_width,
            "height": canvas_height,
            "spritesheet": str(spritesheet_path) if spritesheet_path is not None else None,
        },
    }


def write_manifest(
    placements: Iterable[Placement],
    layout: GridLayout,
    spritesheet_path: Path | None,
    manifest_path: Path,
) -> Path:
    """Create a JSON manifest describing frame coordinates."""

    manifest = build_manifest(placements, layout, spritesheet_path)
    try:
        file_tools.ensure_directory(manifest_path.parent)
        manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    except OSError as exc:
        raise ProcessingError(f"Failed to write manifest to {manifest_path}: {exc}") from exc
    logger.info("Wrote manifest to %s", manifest_path)
    return manifest_path
