# -*- coding: utf-8 -*-
"""
Checklist data model: items, the fetched list, and the dismissal state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple


class ChecklistError(Exception):
    """Base error for the checklist module."""


class ChecklistFormatError(ChecklistError):
    """Raised when a backend payload does not describe a checklist."""


class ChecklistProviderError(ChecklistError):
    """Raised when the data provider cannot produce checklist data."""


@dataclass(frozen=True)
class ChecklistItem:
    """
    One onboarding step.

    Attributes:
        id: Opaque identifier, unique within a list and stable across fetches
        title: Display text
        href: Client-side route opened for incomplete steps
        completed: Whether the step is done
    """
    id: str
    title: str
    href: str
    completed: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "ChecklistItem":
        """Deserialize an item from a backend JSON object."""
        if not isinstance(data, dict):
            raise ChecklistFormatError(f"Checklist item must be an object, got {type(data).__name__}")
        item_id = data.get("id")
        title = data.get("title")
        if item_id is None or item_id == "":
            raise ChecklistFormatError("Checklist item is missing 'id'")
        if not title:
            raise ChecklistFormatError(f"Checklist item {item_id!r} is missing 'title'")
        # Older backends call the route "link"
        href = data.get("href") or data.get("link") or ""
        completed = data.get("completed", False)
        if isinstance(completed, str):
            completed = completed.strip().lower() == "true"
        return cls(
            id=str(item_id),
            title=str(title),
            href=str(href),
            completed=bool(completed),
        )


@dataclass(frozen=True)
class ChecklistData:
    """Ordered, read-only list of steps returned by a single fetch."""
    items: Tuple[ChecklistItem, ...] = ()

    def __post_init__(self):
        items = tuple(self.items)
        seen = set()
        for item in items:
            if item.id in seen:
                raise ChecklistFormatError(f"Duplicate checklist item id: {item.id!r}")
            seen.add(item.id)
        object.__setattr__(self, "items", items)

    @property
    def total_count(self) -> int:
        return len(self.items)

    @property
    def completed_count(self) -> int:
        return sum(1 for item in self.items if item.completed)

    @property
    def all_complete(self) -> bool:
        return self.total_count > 0 and self.completed_count == self.total_count

    @classmethod
    def from_items(cls, items: Iterable[ChecklistItem]) -> "ChecklistData":
        return cls(items=tuple(items))

    @classmethod
    def from_payload(cls, payload: Any) -> "ChecklistData":
        """
        Build checklist data from a decoded JSON payload.

        Accepts {"items": [...]} or a bare list of item objects.
        """
        if isinstance(payload, dict):
            raw_items = payload.get("items")
        else:
            raw_items = payload
        if not isinstance(raw_items, list):
            raise ChecklistFormatError("Checklist payload must contain a list of items")
        return cls.from_items(ChecklistItem.from_dict(entry) for entry in raw_items)


class DismissalState(Enum):
    """
    Observed state of the persisted dismissal flag.

    UNRESOLVED only exists between mount and the first storage read and is
    never treated as NOT_DISMISSED.
    """
    UNRESOLVED = "unresolved"
    NOT_DISMISSED = "not_dismissed"
    DISMISSED = "dismissed"

    @classmethod
    def from_flag(cls, dismissed: bool) -> "DismissalState":
        return cls.DISMISSED if dismissed else cls.NOT_DISMISSED
