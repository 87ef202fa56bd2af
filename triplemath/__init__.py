"""Falling-shapes arithmetic puzzle game: figures, game rules, scores and a terminal front end."""

__version__ = "0.1.0"
__all__ = ["figures", "game", "scores", "cli"]