"""Core processing scaffolding for spritesheet bundling."""

__all__ = [
    "BundleSettings",
    "BundleOutcome",
    "TileSize",
    "GridLayout",
    "Placement",
]

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

__version__ = "0.1.0"

DEFAULT_MAX_COLUMNS = 10
DEFAULT_OUTPUT = "spritesheet_out.png"


@dataclass(frozen=True)
class TileSize:
    """Uniform cell size shared by every slot of the grid."""

    width: int
    height: int


@dataclass(frozen=True)
class GridLayout:
    """Column/row counts together with the tile they are measured in."""

    columns: int
    rows: int
    tile: TileSize

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.tile.width * self.columns, self.tile.height * self.rows


@dataclass(frozen=True)
class Placement:
    """Where a single source image landed on the canvas."""

    index: int
    x: int
    y: int
    width: int
    height: int
    source: Optional[str] = None


@dataclass
class BundleSettings:
    """User-configurable settings used for a bundling run."""

    input_dir: str
    output_path: Path = Path(DEFAULT_OUTPUT)
    max_columns: int = DEFAULT_MAX_COLUMNS
    ignored: tuple[str, ...] = ()
    force: bool = False
    manifest_path: Optional[Path] = None
    dry_run: bool = False


@dataclass
class BundleOutcome:
    """Result of a bundling run."""

    spritesheet_path: Optional[Path]
    manifest_path: Optional[Path]
    layout: GridLayout
    placements: list[Placement] = field(default_factory=list)
