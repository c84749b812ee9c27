"""Textual-powered interactive deck."""

from .app import DeckTextualApp, run_textual_app

__all__ = ["DeckTextualApp", "run_textual_app"]
