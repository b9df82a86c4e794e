# -*- coding: utf-8 -*-
"""
Progress calculation over a checklist's items.

All functions are pure and accept any sequence of ChecklistItem, so they
work on ChecklistData.items as well as ad-hoc lists in tests.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from setup_checklist.checklist.models import ChecklistItem


@dataclass(frozen=True)
class ProgressSummary:
    """Derived progress numbers for one checklist snapshot."""
    completed_count: int
    total_count: int
    percent: float

    @property
    def all_complete(self) -> bool:
        return self.total_count > 0 and self.completed_count == self.total_count

    @property
    def label(self) -> str:
        return f"{self.completed_count} of {self.total_count} complete"


def percent(items: Sequence[ChecklistItem]) -> float:
    """Percentage of completed items; 0 for an empty list."""
    total = len(items)
    if total == 0:
        return 0.0
    completed = sum(1 for item in items if item.completed)
    if completed == total:
        return 100.0
    return 100.0 * completed / total


def rounded_percent(items: Sequence[ChecklistItem]) -> int:
    return int(round(percent(items)))


def summarize(items: Sequence[ChecklistItem]) -> ProgressSummary:
    return ProgressSummary(
        completed_count=sum(1 for item in items if item.completed),
        total_count=len(items),
        percent=percent(items),
    )


def next_step(items: Sequence[ChecklistItem]) -> Optional[ChecklistItem]:
    """First incomplete item in display order, or None when all are done."""
    for item in items:
        if not item.completed:
            return item
    return None


def progress_bar(value: float, length: int = 12) -> str:
    """Text progress bar with filled/empty cells followed by the percentage."""
    value = max(0.0, min(100.0, value))
    done = int(length * value // 100)
    todo = length - done
    return "█" * done + "░" * todo + f" {int(round(value))}%"
