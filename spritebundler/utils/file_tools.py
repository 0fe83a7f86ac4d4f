"""Filesystem helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from ..core.errors import TraversalError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".png", ".bmp", ".jpeg")


def ensure_directory(path: Path) -> Path:
    """Create a directory if it does not exist."""

    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Ensured directory exists: %s", path)
    return path


def has_image_extension(filename: str, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> bool:
    """Case-sensitive suffix match, so ``.PNG`` and ``.jpg`` are not picked up."""

    return any(filename.endswith(ext) for ext in extensions)


def walk_image_files(root: str, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> list[str]:
    """Return image file paths below root, depth-first in sorted name order.

    Files and subdirectories are interleaved by name, so ``a/x.png`` comes
    before ``b.png``. Paths are joined onto ``root`` exactly as given, so
    ``./sprites`` yields ``./sprites/a.png`` rather than a normalised form.
    A root that is itself a file is returned on its own when it qualifies.
    """

    extensions = tuple(extensions)
    if not os.path.isdir(root):
        return [root] if has_image_extension(os.path.basename(root), extensions) else []

    files: list[str] = []
    _scan_directory(root, extensions, files)
    logger.debug("Found %s image files under %s", len(files), root)
    return files


def _scan_directory(directory: str, extensions: tuple[str, ...], files: list[str]) -> None:
    try:
        with os.scandir(directory) as handle:
            entries = sorted(handle, key=lambda entry: entry.name)
    except OSError as exc:
        raise TraversalError(f"Error found while walking {directory}: {exc}") from exc

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            _scan_directory(entry.path, extensions, files)
        elif has_image_extension(entry.name, extensions):
            files.append(entry.path)
