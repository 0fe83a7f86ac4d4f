"""Domain-specific exceptions for the spritesheet bundler."""

from pathlib import Path


class BundlerError(Exception):
    """Base class for every failure raised by the bundler."""


class ValidationError(BundlerError, ValueError):
    """Raised when user-provided settings fail validation."""


class OutputExistsError(ValidationError):
    """Raised when a destination file exists and overriding was not forced."""

    def __init__(self, path: Path):
        super().__init__(f"Output <{path}> already exists. Use -f flag to force output override")
        self.path = path


class InvalidInputError(BundlerError, ValueError):
    """Raised when the input path is missing or unusable."""

    def __init__(self, path: Path | str, reason: str | None = None):
        message = f"Invalid input path: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class ProcessingError(BundlerError, RuntimeError):
    """Raised when the pipeline fails unexpectedly."""


class TraversalError(ProcessingError):
    """Raised when walking the input directory fails."""


class ImageDecodeError(ProcessingError):
    """Raised when an image file cannot be decoded."""

    def __init__(self, path: Path | str, reason: str | None = None):
        message = f"Could not decode image: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class NoImagesFoundError(ProcessingError):
    """Raised when there is nothing to place on the canvas."""


class LayoutError(ProcessingError):
    """Raised when an image would be pasted outside its slot or the canvas."""
