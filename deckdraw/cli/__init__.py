"""Command line and interactive front-ends for deckdraw."""
