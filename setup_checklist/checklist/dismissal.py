# -*- coding: utf-8 -*-
"""
Dismissal flag persistence.

The widget's "do not show again" preference lives under a single key in a
string key-value store. DismissalStore wraps that store so that reads and
writes never raise: a failed read means "not dismissed", a failed write
still hides the widget for the rest of the session.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable

from setup_checklist.checklist.config import DISMISSAL_STORAGE_KEY, DISMISSED_SENTINEL
from setup_checklist.logger import logger


@runtime_checkable
class KeyValueStorage(Protocol):
    """Browser-style string storage. Implementations may raise on any call."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    """Process-local storage; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """
    Storage backed by a JSON object on disk.

    The file is read on every access and written atomically through a
    temporary file. A malformed file raises ValueError; I/O problems raise
    OSError. Callers that need total behaviour wrap this in DismissalStore.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not contain a JSON object")
        return data

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        # Non-string JSON values come back as Python str(); a bare true reads "True", not the sentinel
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)


class DismissalStore:
    """
    Total read/write wrapper around the dismissal flag.

    Usage:
        store = DismissalStore(JsonFileStorage(path))
        store.read()        # -> bool, never raises
        store.write(True)   # never raises; session flag set even if persisting fails
    """

    def __init__(self, storage: Optional[KeyValueStorage], key: str = DISMISSAL_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._session_dismissed = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def dismissed_this_session(self) -> bool:
        return self._session_dismissed

    def read(self) -> bool:
        """
        Read the persisted flag.

        Returns:
            True only if this session dismissed the widget or the stored value
            is the dismissed sentinel. Unavailable storage, read errors and any
            other stored value all mean False.
        """
        if self._session_dismissed:
            return True
        if self._storage is None:
            logger.debug(f"[DISMISSAL] No storage available, treating '{self._key}' as not dismissed")
            return False
        try:
            value = self._storage.get_item(self._key)
        except Exception as e:
            logger.warning(f"[DISMISSAL] Error reading storage key '{self._key}': {e}")
            return False
        return value == DISMISSED_SENTINEL

    def write(self, dismissed: bool) -> None:
        """
        Persist a dismissal. Only True is accepted: dismissing is the single
        write this flag ever receives.
        """
        if dismissed is not True:
            raise ValueError("DismissalStore only records dismissals (write(True))")
        self._session_dismissed = True
        if self._storage is None:
            logger.info(f"[DISMISSAL] No storage available, '{self._key}' dismissed for this session only")
            return
        try:
            self._storage.set_item(self._key, DISMISSED_SENTINEL)
            logger.info(f"[DISMISSAL] Persisted '{self._key}'")
        except Exception as e:
            logger.warning(f"[DISMISSAL] Error setting storage key '{self._key}': {e}")

    def clear(self) -> None:
        """Forget the dismissal, both in memory and in storage."""
        self._session_dismissed = False
        if self._storage is None:
            return
        try:
            self._storage.remove_item(self._key)
            logger.info(f"[DISMISSAL] Cleared '{self._key}'")
        except Exception as e:
            logger.warning(f"[DISMISSAL] Error removing storage key '{self._key}': {e}")
