# tabletree/cache/__init__.py
"""
Cache - Versioned table cache
"""

from tabletree.cache.table_cache import (
    MANIFEST_VERSION,
    MANIFEST_VERSION_KEY,
    TableCacheConfig,
    DEFAULT_CACHE_CONFIG,
    TableCache,
    create_table_cache,
)

__all__ = [
    "MANIFEST_VERSION",
    "MANIFEST_VERSION_KEY",
    "TableCacheConfig",
    "DEFAULT_CACHE_CONFIG",
    "TableCache",
    "create_table_cache",
]
