"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "deckdraw",
        "deckdraw.cards",
        "deckdraw.template",
        "deckdraw.deck",
        "deckdraw.events",
        "deckdraw.history",
        "deckdraw.session",
        "deckdraw.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
