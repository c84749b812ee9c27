"""Typer entry-point wiring for the deckdraw CLI."""

from __future__ import annotations

import random

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from ..errors import InsufficientCardsError, InvalidTemplateError
from ..logging_utils import LOG_LEVEL, setup_logging
from ..session import DeckSession
from ..settings import MAX_DECKS, MAX_DRAW_COUNT, DeckSettings
from ..template import PRESETS, STANDARD_JOKERS, DeckTemplate, preset
from .render import format_cards, render_history
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich", no_args_is_help=True)
console = Console()


def _resolve_template(preset_name: str | None, jokers: bool) -> DeckTemplate | None:
    if preset_name is None:
        return None
    try:
        template = preset(preset_name)
    except InvalidTemplateError as exc:
        raise typer.BadParameter(str(exc), param_hint="--preset") from exc
    if jokers and template.number_of_jokers == 0:
        template = template.with_jokers(STANDARD_JOKERS)
    return template


def _make_rng(seed: int | None) -> random.Random:
    if seed is None:
        seed = random.SystemRandom().randrange(0, 2**63)
    return random.Random(seed)


@app.callback()
def cli(
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."),
) -> None:
    """Draw cards from one or more shuffled decks."""

    setup_logging(log_level)


@app.command()
def draw(
    count: int = typer.Option(1, "--count", "-n", min=1, help="Cards per draw."),
    decks: int = typer.Option(1, min=1, max=MAX_DECKS, help="Number of decks shuffled together."),
    jokers: bool = typer.Option(False, "--jokers/--no-jokers", help="Add two jokers per deck."),
    preset_name: str | None = typer.Option(None, "--preset", help="Deck preset (see `presets`)."),
    repeat: int = typer.Option(1, min=1, help="Number of consecutive draws."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible draws (omit for randomness)."),
    symbols: bool = typer.Option(False, "--symbols", help="Export compact forms such as K♥."),
    history: bool = typer.Option(True, "--history/--no-history", help="Record draws in the history log."),
    export: bool = typer.Option(False, "--export", help="Print the exported history text after drawing."),
    show_history: bool = typer.Option(False, "--show-history", help="Print the history table after drawing."),
    unique_colors: bool = typer.Option(True, "--unique-colors/--classic-colors", help="Distinct colour per suit."),
) -> None:
    """Shuffle a deck and draw from it."""

    settings = DeckSettings(
        deck_count=decks,
        include_jokers=jokers,
        history_enabled=history,
        copy_with_symbol=symbols,
        unique_colors=unique_colors,
        draw_count=count,
    )
    template = _resolve_template(preset_name, jokers)
    session = DeckSession(settings, template=template, rng=_make_rng(seed))

    table = Table(title="Draws", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Cards", justify="left")
    table.add_column("Remaining", justify="right")

    failure: InsufficientCardsError | None = None
    for idx in range(1, repeat + 1):
        try:
            event = session.draw()
        except InsufficientCardsError as exc:
            failure = exc
            break
        table.add_row(str(idx), format_cards(event.cards, unique_colors=unique_colors), str(event.remaining_cards))

    if table.row_count:
        console.print(table)
    console.print(f"{session.remaining_cards} cards remaining of {session.total_possible_cards}")

    if show_history:
        console.print(render_history(session.history(), unique_colors=unique_colors))

    if export:
        typer.echo(session.export_history())

    if failure is not None:
        console.print(f"[red]Cannot draw {failure.requested}: only {failure.remaining} cards remaining.[/red]")
        raise typer.Exit(code=1)


@app.command()
def presets() -> None:
    """List the built-in deck presets."""

    table = Table(title="Presets", box=box.SIMPLE_HEAVY)
    table.add_column("Name", justify="left")
    table.add_column("Suits", justify="right")
    table.add_column("Ranks", justify="right")
    table.add_column("Jokers", justify="right")
    table.add_column("Cards", justify="right")
    for name, factory in PRESETS.items():
        template = factory()
        table.add_row(
            name,
            str(len(template.included_suits)),
            str(sum(template.rank_counts.values())),
            str(template.number_of_jokers),
            str(template.total_cards_per_deck()),
        )
    console.print(table)


@app.command()
def play(
    decks: int = typer.Option(1, min=1, max=MAX_DECKS, help="Number of decks shuffled together."),
    jokers: bool = typer.Option(False, "--jokers/--no-jokers", help="Add two jokers per deck."),
    draw_count: int = typer.Option(1, "--draw", min=1, max=MAX_DRAW_COUNT, help="Cards per draw."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
) -> None:
    """Open the interactive deck."""

    run_textual_app(
        settings=DeckSettings(deck_count=decks, include_jokers=jokers, draw_count=draw_count),
        seed=seed,
    )


def main() -> None:
    """Entry-point for ``python -m deckdraw.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
