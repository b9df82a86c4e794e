# -*- coding: utf-8 -*-
"""
Checklist module: onboarding steps, progress, dismissal and visibility.

Provides:
- Data model for checklist items and the fetched list
- Progress calculation (counts, percentage, next step)
- Dismissal persistence that never raises
- Data providers (HTTP backend, static defaults)
- The visibility state machine deciding what the widget renders
"""

from setup_checklist.checklist.config import (
    DISMISSAL_STORAGE_KEY,
    DISMISSED_SENTINEL,
    DEFAULT_SETUP_STEPS,
)
from setup_checklist.checklist.models import (
    ChecklistData,
    ChecklistError,
    ChecklistFormatError,
    ChecklistItem,
    ChecklistProviderError,
    DismissalState,
)
from setup_checklist.checklist.progress import ProgressSummary, percent, summarize
from setup_checklist.checklist.dismissal import (
    DismissalStore,
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
)
from setup_checklist.checklist.provider import (
    ChecklistProvider,
    ChecklistQuery,
    HttpChecklistProvider,
    StaticChecklistProvider,
)
from setup_checklist.checklist.visibility import VisibilityState, resolve_visibility

__all__ = [
    "DISMISSAL_STORAGE_KEY",
    "DISMISSED_SENTINEL",
    "DEFAULT_SETUP_STEPS",
    "ChecklistData",
    "ChecklistError",
    "ChecklistFormatError",
    "ChecklistItem",
    "ChecklistProviderError",
    "DismissalState",
    "ProgressSummary",
    "percent",
    "summarize",
    "DismissalStore",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "ChecklistProvider",
    "ChecklistQuery",
    "HttpChecklistProvider",
    "StaticChecklistProvider",
    "VisibilityState",
    "resolve_visibility",
]
