"""
Purpose: Best-effort persistence of the last distance report.
What it does:
- KeyValueStore: get/set/remove of text values by key (JSON file or memory).
- ReportCache: the single report slot under CACHE_KEY.

Every ReportCache operation returns a StorageResult instead of raising,
so callers decide explicitly to ignore a failed read or write.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from locations.policy import CACHE_KEY
from .models import DistanceReport

DEFAULT_CACHE_PATH = ".distance_cache.json"

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Reading, writing or (de)serializing the store failed."""
    pass


@dataclass(frozen=True)
class StorageResult:
    ok: bool
    value: Optional[DistanceReport] = None
    error: Optional[str] = None


class KeyValueStore(ABC):
    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass


class MemoryStore(KeyValueStore):
    """Process-local store, mostly for tests."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    All keys live in one JSON object on disk: {"key": "text value", ...}.
    A missing file is an empty store. Writes go to a temp file that is
    then swapped into place, so the file is never left half written.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path or os.getenv("DISTANCE_CACHE_PATH", DEFAULT_CACHE_PATH))

    def _load(self) -> Dict[str, str]:
        if not self.path.is_file():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def _load_for_write(self) -> Dict[str, str]:
        # an unreadable file is replaced on the next write
        try:
            return self._load()
        except StorageError as e:
            logger.warning("Discarding unreadable cache file: %s", e)
            return {}

    def _save(self, data: Dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load_for_write()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        try:
            data = self._load()
        except StorageError as e:
            logger.warning("Discarding unreadable cache file: %s", e)
            self._save({})
            return
        if key in data:
            del data[key]
            self._save(data)


class ReportCache:
    """The one cached DistanceReport, stored as JSON text under CACHE_KEY."""

    def __init__(self, store: Optional[KeyValueStore] = None, key: str = CACHE_KEY):
        self.store = store if store is not None else JsonFileStore()
        self.key = key

    def get(self) -> StorageResult:
        """ok with value None means nothing is cached."""
        try:
            raw = self.store.get_item(self.key)
            if not raw:
                return StorageResult(ok=True)
            return StorageResult(ok=True, value=DistanceReport.from_dict(json.loads(raw)))
        except (StorageError, ValueError, KeyError, TypeError) as e:
            logger.warning("Could not read cached distance data: %s", e)
            return StorageResult(ok=False, error=str(e))

    def set(self, report: DistanceReport) -> StorageResult:
        try:
            self.store.set_item(self.key, json.dumps(report.to_dict()))
        except (StorageError, TypeError, ValueError) as e:
            logger.warning("Could not cache distance data: %s", e)
            return StorageResult(ok=False, error=str(e))
        return StorageResult(ok=True, value=report)

    def clear(self) -> StorageResult:
        try:
            self.store.remove_item(self.key)
        except StorageError as e:
            logger.warning("Could not clear cached distance data: %s", e)
            return StorageResult(ok=False, error=str(e))
        return StorageResult(ok=True)
