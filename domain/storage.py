"""Key-value persistence, shaped like browser local storage.

Values are strings; callers serialise to JSON themselves.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from domain.errors import StorageError


logger = logging.getLogger(__name__)


class Storage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items = {} if items is None else items

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage:
    """All keys live in one JSON object on disk. Every write rewrites the file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object.")
        return data

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        logger.debug("Wrote %s to %s", key, self.path)
