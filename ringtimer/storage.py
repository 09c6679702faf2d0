"""Key-value stores for persisted preferences.

Every store speaks the same two calls: ``get(key)`` returns the stored
JSON text or ``None``; ``set(key, blob)`` replaces it.  The core never
looks inside a blob beyond ``settings.load_settings``.

The file store keeps every key in one JSON document at::

    ~/Library/Application Support/RingTimer/preferences.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

_LOGGER = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "RingTimer"
PREFERENCES_PATH = APP_SUPPORT_DIR / "preferences.json"


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, blob: str) -> None: ...


class MemoryStore:
    """Dict-backed store; handy for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, blob: str) -> None:
        self._data[key] = blob


class JsonFileStore:
    """All keys in a single JSON object on disk.

    An unreadable or corrupt file reads as empty; writes rewrite the
    whole document.
    """

    def __init__(self, path: Path = PREFERENCES_PATH) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            if not self.path.exists():
                return {}
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            _LOGGER.warning("Ignoring preferences file %s: not a JSON object", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, blob: str) -> None:
        data = self._read()
        data[key] = blob
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
