"""Validation helpers for user inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image

from ..core.errors import InvalidInputError, OutputExistsError, ValidationError


def parse_max_columns(value: str | int | None, default: int = 10) -> int:
    """Parse the max-columns option; zero is treated as a single column.

    Strings must be plain ASCII digits with an optional leading ``+``, so
    ``"1_0"``, ``" 3 "`` and non-ASCII digits are rejected.
    """

    if value is None:
        return default
    if isinstance(value, int):
        parsed = value
    else:
        text = value[1:] if value.startswith("+") else value
        if not (text.isascii() and text.isdigit()):
            raise ValidationError("MAX_COLS must be a positive INTEGER")
        parsed = int(text)
    if parsed < 0:
        raise ValidationError("MAX_COLS must be a positive INTEGER")
    return max(parsed, 1)


def validate_input_path(path: str | Path | None) -> str:
    """Ensure the input path exists; a single image file is accepted too."""

    if not path:
        raise InvalidInputError("<unset>", reason="No path provided")
    if not Path(path).exists():
        raise InvalidInputError(path, reason="Path doesn't exist")
    return str(path)


def validate_output_path(path: Path, force: bool = False) -> Path:
    """Refuse to clobber an existing file unless forced."""

    if path.exists() and not force:
        raise OutputExistsError(path)
    if path.exists() and path.is_dir():
        raise ValidationError(f"Output <{path}> is a directory")
    return path


def resolve_image_format(path: Path) -> str:
    """Map the output extension to a Pillow format name."""

    extension = path.suffix.lower()
    if not extension:
        raise ValidationError(f"Output <{path}> has no file extension to pick an image format from")
    image_format: Optional[str] = Image.registered_extensions().get(extension)
    if image_format is None or image_format not in Image.SAVE:
        raise ValidationError(f"Unsupported output format: {extension}")
    return image_format
