"""Textual-powered interactive deck."""

from __future__ import annotations

import logging
import random

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ...errors import InsufficientCardsError
from ...events import Event
from ...session import DeckSession
from ...settings import MAX_DECKS, MAX_DRAW_COUNT, DeckSettings
from ..render import describe_event, render_draw, render_history, render_status

logger = logging.getLogger(__name__)


class InfoPanel(Static):
    """Reusable wrapper that expects ``update_panel`` calls with Rich renderables."""

    def update_panel(self, title: str, body: RenderableType) -> None:
        self.update(Panel(body, title=title, border_style="cyan"))


class HistoryPanel(Static):
    """Newest-first history table."""

    def update_history(self, events: tuple[Event, ...], *, enabled: bool, unique_colors: bool) -> None:
        if not enabled:
            self.update(Panel(Text.from_markup("[dim]History is off (press K)[/dim]"), title="History"))
            return
        self.update(render_history(events, unique_colors=unique_colors, title=f"History ({len(events)})"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class DeckTextualApp(App):
    """Interactive deck: draw, shuffle and browse the history."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
        width: 1fr;
    }

    #left, #right {
        layout: vertical;
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    StatusStrip {
        width: 100%;
    }

    InfoPanel, HistoryPanel {
        width: 100%;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("d", "draw", "Draw"),
        Binding("s", "shuffle", "Shuffle"),
        Binding("j", "toggle_jokers", "Jokers"),
        Binding("plus", "change_decks(1)", "More decks"),
        Binding("minus", "change_decks(-1)", "Fewer decks"),
        Binding("k", "toggle_history", "Keep history"),
        Binding("c", "toggle_clear_on_shuffle", "Clear on shuffle"),
        Binding("y", "toggle_symbols", "Copy symbols", show=False),
        Binding("u", "toggle_colors", "Colours", show=False),
        Binding("e", "export", "Export"),
        *[
            Binding(str(count), f"set_draw_count({count})", f"Draw {count}", show=False)
            for count in range(1, MAX_DRAW_COUNT + 1)
        ],
    ]

    def __init__(self, *, settings: DeckSettings | None = None, seed: int | None = None) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.session = DeckSession(settings, rng=random.Random(seed))

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.draw_panel: InfoPanel | None = None
        self.deck_panel: InfoPanel | None = None
        self.export_panel: InfoPanel | None = None
        self.history_panel: HistoryPanel | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.draw_panel = InfoPanel(id="draw")
        self.deck_panel = InfoPanel(id="deck")
        self.export_panel = InfoPanel(id="export")
        self.history_panel = HistoryPanel(id="history")
        self.export_panel.update_panel("Export", Text.from_markup("[dim]Press E to export the history[/dim]"))

        yield Horizontal(
            Vertical(self.draw_panel, self.deck_panel, id="left"),
            Vertical(self.history_panel, self.export_panel, id="right"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_ui()

    def action_draw(self) -> None:
        try:
            event = self.session.draw()
        except InsufficientCardsError as exc:
            self._set_status(f"[red]Cannot draw {exc.requested}: only {exc.remaining} cards remaining[/red]")
            return
        self._set_status(f"Drew {describe_event(event, unique_colors=self.session.settings.unique_colors)}")
        self._refresh_ui()

    def action_shuffle(self) -> None:
        event = self.session.shuffle()
        self._set_status(event.description if event is not None else "Deck shuffled, history cleared")
        self._refresh_ui()

    def action_set_draw_count(self, count: int) -> None:
        self._apply(self.session.settings.replace(draw_count=count))
        self._set_status(f"Draw count set to {count}")

    def action_change_decks(self, delta: int) -> None:
        current = self.session.settings.deck_count
        target = max(1, min(MAX_DECKS, current + delta))
        if target == current:
            return
        self._apply(self.session.settings.replace(deck_count=target))
        self._set_status(f"Reshuffled with {target} deck(s)")

    def action_toggle_jokers(self) -> None:
        include = not self.session.settings.include_jokers
        self._apply(self.session.settings.replace(include_jokers=include))
        self._set_status(f"Reshuffled {'with' if include else 'without'} jokers")

    def action_toggle_history(self) -> None:
        self._toggle("history_enabled", "Keep history")

    def action_toggle_clear_on_shuffle(self) -> None:
        self._toggle("clear_history_on_shuffle", "Clear history on shuffle")

    def action_toggle_symbols(self) -> None:
        self._toggle("copy_with_symbol", "Copy symbols")

    def action_toggle_colors(self) -> None:
        self._toggle("unique_colors", "Unique suit colours")

    def action_export(self) -> None:
        text = self.session.export_history()
        if self.export_panel:
            body = Text(text) if text else Text.from_markup("[dim]Nothing to export[/dim]")
            self.export_panel.update_panel("Export", body)

    def _toggle(self, name: str, label: str) -> None:
        value = not getattr(self.session.settings, name)
        self._apply(self.session.settings.replace(**{name: value}))
        self._set_status(f"{label}: {'on' if value else 'off'}")

    def _apply(self, settings: DeckSettings) -> None:
        status = self.session.apply_settings(settings)
        if status is not None:
            logger.debug("reconfigured: %d/%d", status.remaining_cards, status.total_possible_cards)
        self._refresh_ui()

    def _refresh_ui(self) -> None:
        settings = self.session.settings
        if self.draw_panel:
            self.draw_panel.update(
                render_draw(
                    self.session.current_draw,
                    self.session.remaining_cards,
                    unique_colors=settings.unique_colors,
                )
            )
        if self.deck_panel:
            self.deck_panel.update(render_status(self.session))
        if self.history_panel:
            self.history_panel.update_history(
                self.session.history(),
                enabled=settings.history_enabled,
                unique_colors=settings.unique_colors,
            )

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message


def run_textual_app(*, settings: DeckSettings | None = None, seed: int | None = None) -> None:
    """Launch the Textual UI."""

    app = DeckTextualApp(settings=settings, seed=seed)
    app.run()
