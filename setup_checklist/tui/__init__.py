"""Textual interface for the setup checklist."""

from setup_checklist.tui.app import ChecklistApp
from setup_checklist.tui.widgets import ChecklistRow, SetupChecklist, StepListItem, checklist_rows

__all__ = ["ChecklistApp", "ChecklistRow", "SetupChecklist", "StepListItem", "checklist_rows"]
