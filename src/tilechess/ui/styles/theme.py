"""Visual theme constants and QSS styles for Tilechess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_tile: QColor
    dark_tile: QColor
    highlight_source: QColor  # selected piece origin
    highlight_target: QColor  # legal move targets
    highlight_check: QColor  # king in check
    glyph_white: QColor  # fallback text glyphs when images are missing
    glyph_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_tile=QColor("#FFFACD"),  # lemon chiffon
            dark_tile=QColor("#593E1A"),  # dark brown
            highlight_source=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_target=QColor(0, 0, 0, 60),  # dark dot overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            glyph_white=QColor(250, 250, 250),
            glyph_black=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_tile=QColor(222, 227, 230),
            dark_tile=QColor(140, 162, 173),
            highlight_source=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 120),
            glyph_white=QColor(250, 250, 250),
            glyph_black=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_tile=QColor(236, 238, 220),
            dark_tile=QColor(112, 149, 120),
            highlight_source=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 120),
            glyph_white=QColor(250, 250, 250),
            glyph_black=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by its settings name; unknown names give the default."""
        themes = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return themes.get(name, cls.default)()


THEME_NAMES = ("Classic", "Blue", "Green")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2e2418;
}

QLabel {
    color: #f5efd0;
}

QStatusBar {
    background: #2e2418;
    color: #f5efd0;
}

QMenuBar {
    background: #2e2418;
    color: #f5efd0;
}
QMenuBar::item:selected {
    background: #4a3a22;
}
QMenu {
    background: #2e2418;
    color: #f5efd0;
    border: 1px solid #4a3a22;
}
QMenu::item:selected {
    background: #7a5a2a;
}
"""
