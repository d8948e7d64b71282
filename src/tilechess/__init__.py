"""Tilechess — click-to-move chess board for two players at one screen."""

__version__ = "0.1.0"
