# -*- coding: utf-8 -*-
"""
Checklist data providers.

The widget consumes a ChecklistQuery (data / is_loading / is_error). Any
provider failure collapses into ChecklistQuery.failure at the query()
boundary; no retries are attempted here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import requests

from setup_checklist.checklist.config import CHECKLIST_ENDPOINT, DEFAULT_SETUP_STEPS
from setup_checklist.checklist.models import (
    ChecklistData,
    ChecklistError,
    ChecklistItem,
    ChecklistProviderError,
)
from setup_checklist.logger import logger


@dataclass(frozen=True)
class ChecklistQuery:
    """Snapshot of one fetch: loading, failed, or resolved with data."""
    data: Optional[ChecklistData] = None
    is_loading: bool = False
    is_error: bool = False
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> "ChecklistQuery":
        return cls(is_loading=True)

    @classmethod
    def success(cls, data: ChecklistData) -> "ChecklistQuery":
        return cls(data=data)

    @classmethod
    def failure(cls, message: str) -> "ChecklistQuery":
        return cls(is_error=True, error=message)

    @property
    def unavailable(self) -> bool:
        """Loading, errored and empty are treated alike."""
        return self.is_loading or self.is_error or self.data is None


class ChecklistProvider(ABC):
    """
    Abstract source of a user's onboarding steps.

    Example implementation:
        class MyProvider(ChecklistProvider):
            def fetch(self) -> ChecklistData:
                return ChecklistData.from_payload(load_somewhere())
    """

    @abstractmethod
    def fetch(self) -> ChecklistData:
        """
        Fetch the current checklist.

        Raises:
            ChecklistError: if the data cannot be produced.
        """
        pass

    def query(self) -> ChecklistQuery:
        """Run fetch() and wrap the outcome in a ChecklistQuery."""
        try:
            data = self.fetch()
        except ChecklistError as e:
            logger.warning(f"[PROVIDER] Checklist fetch failed: {e}")
            return ChecklistQuery.failure(str(e))
        except Exception as e:
            logger.error(f"[PROVIDER] Unexpected error fetching checklist: {e}")
            return ChecklistQuery.failure(str(e))
        logger.debug(f"[PROVIDER] Fetched {data.completed_count}/{data.total_count} completed steps")
        return ChecklistQuery.success(data)


class HttpChecklistProvider(ChecklistProvider):
    """Fetches the checklist from the onboarding backend over HTTP."""

    def __init__(
        self,
        base_url: str,
        user_id: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.token = token
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{CHECKLIST_ENDPOINT}"

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def fetch(self) -> ChecklistData:
        params = {"user_id": self.user_id} if self.user_id else None
        try:
            response = self._session.get(self.url, headers=self._get_headers(), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ChecklistProviderError(f"Request to {self.url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise ChecklistProviderError(f"API error: {response.status_code}")

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise ChecklistProviderError(f"Invalid JSON from {self.url}") from e

        return ChecklistData.from_payload(payload)


class StaticChecklistProvider(ChecklistProvider):
    """Serves a fixed list of steps; used offline and in demos."""

    def __init__(
        self,
        steps: Optional[List[Dict[str, Any]]] = None,
        completed: Iterable[str] = (),
    ):
        self._steps = list(DEFAULT_SETUP_STEPS if steps is None else steps)
        self._completed = set(completed)

    def mark_completed(self, item_id: str) -> None:
        self._completed.add(item_id)

    def fetch(self) -> ChecklistData:
        items = []
        for step in self._steps:
            item = ChecklistItem.from_dict(step)
            if item.id in self._completed and not item.completed:
                item = ChecklistItem(id=item.id, title=item.title, href=item.href, completed=True)
            items.append(item)
        return ChecklistData.from_items(items)
