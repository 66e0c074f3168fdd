"""
Local on-disk key-value storage.

Provides a DiskStore class used to keep small device-local preferences
(such as the selected language) across app restarts. Backed by the
diskcache library, which is thread-safe and process-safe.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import diskcache


@dataclass
class StoredValue:
    """
    Wrapper around a stored value.

    Attributes:
        value: The stored value.
    """

    value: Any


class DiskStore:
    """
    Persistent key-value store kept in a directory on disk.

    Attributes:
        store_dir: Path to the storage directory.
    """

    def __init__(self, store_dir: str | Path) -> None:
        """
        Initialize the store.

        Args:
            store_dir: Directory path for storage files.
                       Created if it doesn't exist.
        """
        self.store_dir = Path(store_dir)
        self._cache = diskcache.Cache(str(self.store_dir))

    def get(self, key: str) -> StoredValue | None:
        """
        Read a value.

        Args:
            key: Storage key.

        Returns:
            StoredValue if found, None otherwise.
        """
        stored = self._cache.get(key, default=None)
        if stored is not None:
            return StoredValue(value=stored)
        return None

    def set(self, key: str, value: Any) -> None:
        """
        Write a value. Entries never expire.

        Args:
            key: Storage key.
            value: Value to store.
        """
        self._cache.set(key, value)

    def delete(self, key: str) -> None:
        """Delete a key from the store."""
        self._cache.delete(key)

    def clear(self) -> None:
        """Remove every entry."""
        self._cache.clear()

    def close(self) -> None:
        """Close the store and release resources."""
        self._cache.close()
