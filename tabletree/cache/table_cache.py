# tabletree/cache/table_cache.py
"""
Table Cache - Versioned Key/Value Cache for Parsed Tables

Stores JSON-serialized table values under opaque table ids in any
string-to-string mapping (an in-memory dict, or a shelve file).

Versioning:
    The storage holds a manifest version under a reserved key. When a cache
    is opened on storage written by a different manifest version, the whole
    storage is cleared so stale table layouts are never returned.

Usage:
    from tabletree.cache.table_cache import create_table_cache

    cache = create_table_cache("/tmp/tables")
    cache.set_table("FOO", {"rows": [...]})
    cache.get_table("FOO")   # {"rows": [...]}
    cache.close()
"""
import json
import logging
import shelve
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

logger = logging.getLogger("table-traverse")

MANIFEST_VERSION = "1"
MANIFEST_VERSION_KEY = "MANIFEST_VERSION"


@dataclass
class TableCacheConfig:
    """Configuration for the table cache.

    Attributes:
        manifest_version: Version tag of the cached table layout
        version_key: Storage key reserved for the manifest version
        ensure_ascii: Escape non-ASCII characters when serializing
    """
    manifest_version: str = MANIFEST_VERSION
    version_key: str = MANIFEST_VERSION_KEY
    ensure_ascii: bool = False


DEFAULT_CACHE_CONFIG = TableCacheConfig()


class TableCache:
    """Versioned table cache over a string mapping.

    A cache built without storage is disabled: reads miss and writes are
    dropped.
    """

    def __init__(
        self,
        storage: Optional[MutableMapping[str, str]] = None,
        config: Optional[TableCacheConfig] = None
    ):
        """Initialize the cache.

        Args:
            storage: Backing mapping, or None for a disabled cache
            config: Cache configuration
        """
        self.config = config or DEFAULT_CACHE_CONFIG
        self._storage = storage
        self.logger = logging.getLogger("table-traverse")

        if self._storage is not None:
            self._ensure_manifest_version()

    @property
    def enabled(self) -> bool:
        return self._storage is not None

    def _ensure_manifest_version(self) -> None:
        stored = self._storage.get(self.config.version_key)
        if stored == self.config.manifest_version:
            return

        self.logger.info(
            f"Table cache manifest version changed ({stored!r} -> "
            f"{self.config.manifest_version!r}), clearing cache"
        )
        self._storage.clear()
        self._storage[self.config.version_key] = self.config.manifest_version

    def get_table(self, table_id: str) -> Optional[Any]:
        """Load a cached table.

        Args:
            table_id: Opaque table identifier

        Returns:
            Deserialized value, or None when missing or undecodable
        """
        if self._storage is None or table_id == self.config.version_key:
            return None

        raw = self._storage.get(table_id)
        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError as e:
            self.logger.warning(f"Ignoring undecodable cache entry {table_id!r}: {e}")
            return None

    def set_table(self, table_id: str, value: Any) -> None:
        """Serialize a table value and store it under its id.

        Args:
            table_id: Opaque table identifier
            value: JSON-serializable value

        Raises:
            ValueError: table_id is the reserved manifest version key
            TypeError: value is not JSON-serializable
        """
        if table_id == self.config.version_key:
            raise ValueError(f"{table_id!r} is reserved for the manifest version")

        if self._storage is None:
            return

        self._storage[table_id] = json.dumps(value, ensure_ascii=self.config.ensure_ascii)

    def close(self) -> None:
        """Close the backing storage if it supports closing."""
        close = getattr(self._storage, "close", None)
        if close is not None:
            close()


def create_table_cache(
    path: Optional[str] = None,
    config: Optional[TableCacheConfig] = None
) -> TableCache:
    """Create a table cache.

    Args:
        path: shelve file path for a persistent cache; in-memory when omitted
        config: Cache configuration

    Returns:
        TableCache instance
    """
    storage: MutableMapping[str, str] = shelve.open(path) if path else {}
    return TableCache(storage, config)


__all__ = [
    'MANIFEST_VERSION',
    'MANIFEST_VERSION_KEY',
    'TableCacheConfig',
    'DEFAULT_CACHE_CONFIG',
    'TableCache',
    'create_table_cache',
]
