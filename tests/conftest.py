"""Shared fixtures: small on-disk image trees built with Pillow."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def make_image() -> Callable[..., Image.Image]:
    """Build a solid RGBA image."""

    def _make(width: int, height: int, color=(255, 0, 0, 255)) -> Image.Image:
        return Image.new("RGBA", (width, height), color)

    return _make


@pytest.fixture
def write_image(make_image) -> Callable[..., Path]:
    """Write a solid image to disk, creating parent folders."""

    def _write(path: Path, width: int, height: int, color=(255, 0, 0, 255), fmt: str | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        image = make_image(width, height, color)
        if fmt == "JPEG" or path.suffix == ".jpeg":
            image = image.convert("RGB")
        image.save(path, format=fmt)
        return path

    return _write


@pytest.fixture
def scenario_dir(tmp_path: Path, write_image) -> Path:
    """Three images sized 10x10, 20x15, 10x10 whose names sort in that order."""

    root = tmp_path / "sprites"
    write_image(root / "a.png", 10, 10, (255, 0, 0, 255))
    write_image(root / "b.png", 20, 15, (0, 255, 0, 255))
    write_image(root / "c.png", 10, 10, (0, 0, 255, 255))
    return root


@pytest.fixture
def scenario_paths(scenario_dir: Path) -> list[str]:
    root = str(scenario_dir)
    return [os.path.join(root, name) for name in ("a.png", "b.png", "c.png")]
