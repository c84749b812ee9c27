"""Rich renderers shared by the command line and the Textual app."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..cards import Card, Suit
from ..events import DrawEvent, Event, EventKind
from ..session import DeckSession

_JOKER_COLOR = "magenta"


def suit_color(suit: str, unique_colors: bool = True) -> str:
    """Markup colour for ``suit``; ``unique_colors`` splits red and black pairs."""

    if suit == Suit.HEARTS.value:
        return "red"
    if suit == Suit.DIAMONDS.value:
        return "blue" if unique_colors else "red"
    if suit == Suit.CLUBS.value:
        return "green" if unique_colors else "bright_white"
    return "bright_white"


def format_card(card: Card, *, unique_colors: bool = True, symbols: bool = True) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _JOKER_COLOR if card.is_joker else suit_color(card.suit, unique_colors)
    return f"[bold {color}]{card.text(symbols)}[/bold {color}]"


def format_cards(cards: Sequence[Card], *, unique_colors: bool = True) -> str:
    if not cards:
        return "[dim]—[/dim]"
    return " ".join(format_card(card, unique_colors=unique_colors) for card in cards)


def describe_event(event: Event, *, unique_colors: bool = True) -> str:
    if event.kind is EventKind.DRAW:
        return format_cards(event.cards, unique_colors=unique_colors)
    return f"[cyan]{event.description}[/cyan]"


def render_draw(event: DrawEvent | None, remaining: int, *, unique_colors: bool = True) -> RenderableType:
    """Panel for the most recent draw, or a ready message after a shuffle."""

    if event is None:
        body = Text.from_markup(f"[dim]Deck ready[/dim]\n{remaining} cards remaining")
        return Panel(body, title="Current Draw", border_style="cyan", box=box.ROUNDED)
    grid = Table.grid(expand=True)
    grid.add_column(justify="center")
    grid.add_row(Text.from_markup(format_cards(event.cards, unique_colors=unique_colors)))
    grid.add_row(Text.from_markup(f"[dim]{remaining} cards remaining[/dim]"))
    return Panel(grid, title=f"Drew {len(event.cards)}", border_style="cyan", box=box.ROUNDED)


def render_history(events: Sequence[Event], *, unique_colors: bool = True, title: str = "History") -> Table:
    """Newest-first table of ``events``."""

    table = Table(title=title, box=box.SIMPLE_HEAVY, expand=True)
    table.add_column("Time", justify="left", style="dim")
    table.add_column("Event", justify="left")
    table.add_column("Remaining", justify="right")
    for event in events:
        table.add_row(
            event.formatted_time,
            describe_event(event, unique_colors=unique_colors),
            str(event.remaining_cards),
        )
    if not events:
        table.add_row("", "[dim]No history yet[/dim]", "")
    return table


def _flag(value: bool) -> str:
    return "[green]on[/green]" if value else "[dim]off[/dim]"


def render_status(session: DeckSession) -> Panel:
    settings = session.settings
    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(f"[cyan]Cards[/cyan]: {session.remaining_cards}/{session.total_possible_cards}")
    grid.add_row(f"[cyan]Decks[/cyan]: {session.deck_count}")
    grid.add_row(f"[cyan]Draw[/cyan]: {settings.draw_count}")
    grid.add_row(f"[cyan]Jokers[/cyan]: {_flag(settings.include_jokers)}")
    grid.add_row(f"[cyan]Keep history[/cyan]: {_flag(settings.history_enabled)}")
    grid.add_row(f"[cyan]Clear on shuffle[/cyan]: {_flag(settings.clear_history_on_shuffle)}")
    grid.add_row(f"[cyan]Copy symbols[/cyan]: {_flag(settings.copy_with_symbol)}")
    grid.add_row(f"[cyan]Unique colours[/cyan]: {_flag(settings.unique_colors)}")
    return Panel(grid, title="Deck", border_style="blue", box=box.SQUARE)
