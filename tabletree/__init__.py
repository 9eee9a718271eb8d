# tabletree/__init__.py
"""
tabletree Library

Flattens merged-header tables (rows and columns grouped under spanning
headers) into leaf rows and leaf columns annotated with their header paths.

Package Structure:
- core: Table tree models and traversal
    - functions.table_models: Immutable row/column/paragraph data classes
    - functions.table_loader: Raw JSON trees to models
    - functions.table_traverser: Row and column-header iterators
    - functions.text_assembler: Plain text from runs and paragraphs

- cache: Versioned key/value cache for parsed tables

Usage:
    from tabletree import load_row_groups, iterate_rows, concat_all_paragraphs

    for row in iterate_rows(load_row_groups(raw_rows)):
        labels = [concat_all_paragraphs(level) for level in row.headers]
"""

__version__ = "0.1.0"

from tabletree.core import (
    Run,
    Link,
    ParagraphGroup,
    InternalRowGroup,
    TerminalRowGroup,
    ColumnGroup,
    FlattenedRow,
    MalformedTreeError,
    load_paragraph_groups,
    load_row_groups,
    load_column_groups,
    iterate_rows,
    iterate_column_headers,
    concat_all_runs,
    concat_all_paragraphs,
    header_path_texts,
)
from tabletree.cache import TableCache, TableCacheConfig, create_table_cache

# Explicit subpackages
from tabletree import core
from tabletree import cache

__all__ = [
    "__version__",
    # Models
    "Run",
    "Link",
    "ParagraphGroup",
    "InternalRowGroup",
    "TerminalRowGroup",
    "ColumnGroup",
    "FlattenedRow",
    # Loading
    "MalformedTreeError",
    "load_paragraph_groups",
    "load_row_groups",
    "load_column_groups",
    # Traversal
    "iterate_rows",
    "iterate_column_headers",
    # Text
    "concat_all_runs",
    "concat_all_paragraphs",
    "header_path_texts",
    # Cache
    "TableCache",
    "TableCacheConfig",
    "create_table_cache",
    # Subpackages
    "core",
    "cache",
]
