"""User-configurable settings for the board window."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tilechess.runtime_assets import default_piece_images_dir


@dataclass
class TableSettings:
    """All user-configurable settings."""

    # Assets
    piece_images_dir: Path = field(default_factory=default_piece_images_dir)

    # Board
    theme_name: str = "Classic"
    show_legal_moves: bool = True
    start_reversed: bool = False

    def __post_init__(self) -> None:
        self.piece_images_dir = Path(self.piece_images_dir)
