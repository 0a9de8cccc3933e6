"""In-memory key/value substrate."""

from typing import Optional

from invoice_desk.services.storage.interface import StoragePort


class InMemoryStorage(StoragePort):
    """
    Process-local dict-backed store.

    Used by tests and as the default demo backend. Contents vanish with
    the process.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()
