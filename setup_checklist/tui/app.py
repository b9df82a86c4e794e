"""Textual application hosting the setup checklist."""
from __future__ import annotations

from textual.app import App, ComposeResult
from textual.reactive import var
from textual.widgets import Static

from setup_checklist.checklist.dismissal import DismissalStore
from setup_checklist.checklist.provider import ChecklistProvider
from setup_checklist.tui.styles import APP_CSS
from setup_checklist.tui.widgets import SetupChecklist
from setup_checklist.logger import logger


class ChecklistApp(App):
    """Dashboard shell rendering the setup checklist and the current route."""

    CSS = APP_CSS

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("r", "reload", "Reload"),
    ]

    route = var("/dashboard", init=False)

    def __init__(self, provider: ChecklistProvider, store: DismissalStore) -> None:
        super().__init__()
        self._provider = provider
        self._store = store

    def compose(self) -> ComposeResult:  # pragma: no cover - declarative layout
        yield Static("Dashboard", id="app-title")
        yield SetupChecklist(self._provider, self._store, id="setup-checklist")
        yield Static(self._route_text(), id="route-line")

    @property
    def checklist(self) -> SetupChecklist:
        return self.query_one("#setup-checklist", SetupChecklist)

    def _route_text(self) -> str:
        return f"Route: {self.route}"

    def watch_route(self, route: str) -> None:
        if self.query("#route-line"):
            self.query_one("#route-line", Static).update(self._route_text())

    def on_setup_checklist_step_selected(self, event: SetupChecklist.StepSelected) -> None:
        # Client-side navigation only; the checklist keeps its own state
        self.route = event.item.href
        logger.info(f"[TUI] Navigating to {event.item.href} for step '{event.item.id}'")
        self.notify(f"Opening: {event.item.title}", severity="information", timeout=2)

    def on_setup_checklist_dismissed(self, event: SetupChecklist.Dismissed) -> None:
        self.notify("Setup checklist hidden", severity="information", timeout=2)

    def action_reload(self) -> None:
        self.checklist.reload_checklist()
