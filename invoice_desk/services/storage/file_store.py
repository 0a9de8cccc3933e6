"""
JSON File Storage Implementation

DESIGN DECISION: A single JSON object on disk stands in for one local
profile's key/value store. Each key maps to a string value, exactly as
the in-memory backend does.

TRADEOFFS:
- The whole file is rewritten on every write (fine for demo-sized data)
- No locking; one process owns the file
- Writes go through a temp file + rename so a crash never leaves a
  half-written profile behind
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from invoice_desk.services.storage.interface import (
    StoragePort,
    SubstrateUnavailableError,
)


class JsonFileStorage(StoragePort):
    """Key/value substrate persisted as one JSON object in a file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SubstrateUnavailableError(
                f"Failed to read store file {self._path}: {e}"
            )
        if not isinstance(data, dict):
            raise SubstrateUnavailableError(
                f"Store file {self._path} does not contain a JSON object"
            )
        return data

    def _save(self, data: dict[str, str]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise SubstrateUnavailableError(
                f"Failed to write store file {self._path}: {e}"
            )

    def read(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def write(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
