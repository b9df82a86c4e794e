# -*- coding: utf-8 -*-
"""
Visibility state machine for the checklist widget.

The machine has no memory of its own: the render state is recomputed from
the dismissal state and the latest query on every update.
"""

from enum import Enum

from setup_checklist.checklist.models import DismissalState
from setup_checklist.checklist.provider import ChecklistQuery


class VisibilityState(Enum):
    """Mutually exclusive render states, in precedence order."""
    UNRESOLVED = "unresolved"
    DISMISSED = "dismissed"
    UNAVAILABLE = "unavailable"
    COMPLETE = "complete"
    ACTIVE = "active"

    @property
    def renders_nothing(self) -> bool:
        return self in (VisibilityState.UNRESOLVED, VisibilityState.DISMISSED, VisibilityState.UNAVAILABLE)


def resolve_visibility(dismissal: DismissalState, query: ChecklistQuery) -> VisibilityState:
    """Pick the render state; the first matching rule wins."""
    if dismissal is DismissalState.UNRESOLVED:
        return VisibilityState.UNRESOLVED
    if dismissal is DismissalState.DISMISSED:
        return VisibilityState.DISMISSED
    if query.unavailable:
        return VisibilityState.UNAVAILABLE
    if query.data.all_complete:
        return VisibilityState.COMPLETE
    return VisibilityState.ACTIVE
