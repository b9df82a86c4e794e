"""Setup checklist widget for the TUI interface."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List, Optional, Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import var
from textual.widget import Widget
from textual.widgets import Button, Label, ListItem, ListView, Static

from rich.text import Text

from setup_checklist.checklist.dismissal import DismissalStore
from setup_checklist.checklist.models import ChecklistItem, DismissalState
from setup_checklist.checklist.progress import ProgressSummary, next_step, progress_bar, summarize
from setup_checklist.checklist.provider import ChecklistProvider, ChecklistQuery
from setup_checklist.checklist.visibility import VisibilityState, resolve_visibility
from setup_checklist.tui.styles import CHECKLIST_CSS
from setup_checklist.logger import logger


ICON_COMPLETED = "✓"
ICON_PENDING = "○"
ICON_NEXT = "→"
ICON_LINK = "↗"


@dataclass(frozen=True)
class ChecklistRow:
    """Presentation of one item in the Active state."""

    item: ChecklistItem
    icon: str
    title: str
    href: Optional[str] = None  # Set only for incomplete items
    struck: bool = False
    is_next: bool = False

    @property
    def navigable(self) -> bool:
        return self.href is not None

    def to_text(self) -> Text:
        if self.struck:
            return Text.assemble((self.icon, "green"), " ", (self.title, "strike dim"))
        icon_style = "bold yellow" if self.is_next else "yellow"
        title_style = "bold" if self.is_next else ""
        return Text.assemble((self.icon, icon_style), " ", (self.title, title_style), " ", (ICON_LINK, "dim"))


def checklist_rows(items: Sequence[ChecklistItem]) -> List[ChecklistRow]:
    """Build display rows in list order; completed items keep their position."""
    upcoming = next_step(items)
    rows: List[ChecklistRow] = []
    for item in items:
        if item.completed:
            rows.append(ChecklistRow(item=item, icon=ICON_COMPLETED, title=item.title, struck=True))
        else:
            is_next = item is upcoming
            rows.append(ChecklistRow(
                item=item,
                icon=ICON_NEXT if is_next else ICON_PENDING,
                title=item.title,
                href=item.href,
                is_next=is_next,
            ))
    return rows


class StepListItem(ListItem):
    """List entry carrying its checklist row; completed steps are disabled."""

    def __init__(self, row: ChecklistRow) -> None:
        super().__init__(Label(row.to_text(), classes="step-label"), disabled=not row.navigable)
        self.row = row


class SetupChecklist(Widget):
    """
    Onboarding checklist with persisted dismissal.

    Renders nothing until the dismissal flag has been read after mount, while
    dismissed, and while the checklist is loading, failed or missing. Once
    data is available it shows either the step list (Active) or a
    celebration panel (Complete).
    """

    DEFAULT_CSS = CHECKLIST_CSS

    dismissal = var(DismissalState.UNRESOLVED, init=False)
    checklist_query = var(ChecklistQuery.loading(), init=False)

    class StepSelected(Message):
        """Posted when the user opens an incomplete step."""

        def __init__(self, item: ChecklistItem) -> None:
            super().__init__()
            self.item = item

    class Dismissed(Message):
        """Posted after the user dismissed the checklist."""

    def __init__(
        self,
        provider: ChecklistProvider,
        store: DismissalStore,
        title: str = "Finish setting up your account",
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._provider = provider
        self._store = store
        self._title = title
        self._mounted = False
        self.rows: List[ChecklistRow] = []
        self.progress_summary: Optional[ProgressSummary] = None

    @property
    def render_state(self) -> VisibilityState:
        return resolve_visibility(self.dismissal, self.checklist_query)

    def compose(self) -> ComposeResult:  # pragma: no cover - declarative layout
        with Horizontal(id="checklist-header"):
            yield Static(self._title, id="checklist-title")
            yield Button("dismiss", id="checklist-dismiss")
        yield Static("", id="checklist-progress")
        with Vertical(id="checklist-active"):
            yield ListView(id="checklist-steps")
        with Vertical(id="checklist-celebration"):
            yield Static("You're all set! Every setup step is complete.", id="celebration-message")
            yield Button("got it", id="celebration-dismiss")

    def on_mount(self) -> None:
        self._mounted = True
        self._refresh_view()
        # Storage is only trusted once read after mount
        self.call_after_refresh(self._resolve_dismissal)
        self._start_fetch()

    def reload_checklist(self) -> None:
        """Re-read the dismissal flag and re-query the provider."""
        logger.debug("[CHECKLIST] Reloading checklist")
        self.dismissal = DismissalState.UNRESOLVED
        self.call_after_refresh(self._resolve_dismissal)
        self._start_fetch()

    def _resolve_dismissal(self) -> None:
        self.dismissal = DismissalState.from_flag(self._store.read())
        logger.debug(f"[CHECKLIST] Dismissal resolved: {self.dismissal.value}")

    def _start_fetch(self) -> None:
        self.checklist_query = ChecklistQuery.loading()
        self.run_worker(self._fetch_checklist(), exclusive=True, group="checklist-fetch")

    async def _fetch_checklist(self) -> None:
        self.checklist_query = await asyncio.to_thread(self._provider.query)

    def watch_dismissal(self, dismissal: DismissalState) -> None:
        self._refresh_view()

    def watch_checklist_query(self, query: ChecklistQuery) -> None:
        data = query.data
        if data is None:
            self.rows = []
            self.progress_summary = None
        else:
            self.rows = checklist_rows(data.items)
            self.progress_summary = summarize(data.items)
            steps = self.query_one("#checklist-steps", ListView)
            steps.clear()
            steps.extend(StepListItem(row) for row in self.rows)
        self._refresh_view()

    def _refresh_view(self) -> None:
        if not self._mounted:
            return
        state = self.render_state
        self.display = not state.renders_nothing
        self.query_one("#checklist-active").display = state is VisibilityState.ACTIVE
        self.query_one("#checklist-celebration").display = state is VisibilityState.COMPLETE
        if self.progress_summary is not None:
            summary = self.progress_summary
            self.query_one("#checklist-progress", Static).update(
                f"{summary.label}  {progress_bar(summary.percent)}"
            )
        logger.debug(f"[CHECKLIST] Render state: {state.value}")

    def dismiss_checklist(self) -> None:
        """Hide the checklist for good; persistence failures only log."""
        self._store.write(True)
        self.dismissal = DismissalState.DISMISSED
        logger.info("[CHECKLIST] Checklist dismissed by user")
        self.post_message(self.Dismissed())

    def open_step(self, item: ChecklistItem) -> None:
        """Navigate to an incomplete step; completed steps are inert."""
        if item.completed:
            return
        self.post_message(self.StepSelected(item))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("checklist-dismiss", "celebration-dismiss"):
            event.stop()
            self.dismiss_checklist()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, StepListItem):
            self.open_step(event.item.row.item)
