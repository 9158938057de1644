"""
Local key-value store

A small JSON-file backed store standing in for the browser's local storage.
Values are JSON-serialisable; every write rewrites the whole file.
"""
from __future__ import annotations
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from skillmatch.observability import get_logger

logger = get_logger(__name__)


class LocalStore:
    """String-keyed JSON store persisted to a single file.

    With ``path=None`` the store lives in memory only.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Ignoring corrupt store file", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file without a top-level object", path=str(self.path))
            return {}
        return data

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        with tmp_path.open('w', encoding='utf-8') as f:
            json.dump(self._data, f, indent=2, default=str)
        os.replace(tmp_path, self.path)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._flush()

    def remove(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is not None:
                self._flush()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data
