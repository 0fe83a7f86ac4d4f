"""Image discovery and decoding."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError
from ..utils import file_tools, validators

logger = logging.getLogger(__name__)


def discover_images(input_dir: str) -> list[str]:
    """Return every bundleable image path below input_dir in walk order."""

    root = validators.validate_input_path(input_dir)
    paths = file_tools.walk_image_files(root)
    logger.info("Discovered %s images in %s", len(paths), root)
    return paths


def partition_ignored(paths: Sequence[str], ignored: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split paths into (kept, ignored) by exact string match."""

    ignored_set = set(ignored)
    kept = [p for p in paths if p not in ignored_set]
    dropped = [p for p in paths if p in ignored_set]
    for path in dropped:
        logger.debug("Ignoring %s", path)
    return kept, dropped


def load_image(path: str | Path) -> Image.Image:
    """Decode a single image into RGBA, failing loudly on anything unreadable."""

    try:
        with Image.open(path) as handle:
            image = handle.convert("RGBA")
    except FileNotFoundError as exc:
        raise ImageDecodeError(path, reason="File not found") from exc
    except UnidentifiedImageError as exc:
        raise ImageDecodeError(path, reason="Unsupported or corrupt image") from exc
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(path, reason=str(exc)) from exc
    except (OSError, ValueError) as exc:
        raise ImageDecodeError(path, reason=str(exc)) from exc

    logger.debug("Loaded %s -> %sx%s", path, image.width, image.height)
    return image


def load_images(paths: Iterable[str | Path]) -> list[Image.Image]:
    """Decode all images eagerly; the first failure aborts the whole batch."""

    return [load_image(path) for path in paths]
