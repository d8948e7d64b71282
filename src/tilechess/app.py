"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tilechess.ui.settings import TableSettings
from tilechess.ui.styles.theme import THEME_NAMES

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilechess", description="Click-to-move chess board."
    )
    parser.add_argument(
        "--pieces",
        type=Path,
        default=None,
        help="directory holding <W|B><letter>.gif piece images",
    )
    parser.add_argument(
        "--flipped", action="store_true", help="start with black at the bottom"
    )
    parser.add_argument(
        "--theme",
        default="Classic",
        choices=THEME_NAMES,
        help="board colours (default: %(default)s)",
    )
    parser.add_argument(
        "--no-highlights", action="store_true", help="hide legal-move dots"
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> TableSettings:
    settings = TableSettings(
        theme_name=args.theme,
        show_legal_moves=not args.no_highlights,
        start_reversed=args.flipped,
    )
    if args.pieces is not None:
        settings.piece_images_dir = args.pieces
    return settings


def main(argv: list[str] | None = None) -> None:
    """Launch the Tilechess application."""
    from tilechess.ui.bootstrap import run_application

    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO, format=_LOG_FORMAT
    )

    sys.exit(run_application([sys.argv[0]], settings_from_args(args)))


if __name__ == "__main__":
    main()
