"""Where the piece images live at runtime.

Installed packages carry ``assets/`` next to the code; a source checkout
keeps it at the repository root.  ``TILECHESS_PIECES`` overrides both.
"""

from __future__ import annotations

import os
from pathlib import Path

PIECE_IMAGES_DIRNAME = "chessPieceImages"
PIECE_IMAGES_ENV = "TILECHESS_PIECES"

_PACKAGE_DIR = Path(__file__).resolve().parent


def assets_dir() -> Path:
    """Bundled assets root, falling back to the checkout's ``assets/``."""
    bundled = _PACKAGE_DIR / "assets"
    if bundled.is_dir():
        return bundled
    return _PACKAGE_DIR.parents[1] / "assets"


def default_piece_images_dir() -> Path:
    override = os.environ.get(PIECE_IMAGES_ENV)
    if override:
        return Path(override).expanduser()
    return assets_dir() / PIECE_IMAGES_DIRNAME
