# tabletree/core/functions/__init__.py
"""
Functions - Table Tree Utility Functions Module

Module Components:
- table_models: Run / Link / ParagraphGroup / row-group / column-group models
- table_loader: Raw JSON dict trees to models
- header_path: Immutable header path helpers
- table_traverser: Row and column-header flattening iterators
- text_assembler: Plain text from run and paragraph trees

Usage Example:
    from tabletree.core.functions import load_column_groups, iterate_column_headers

    for path in iterate_column_headers(load_column_groups(raw_columns)):
        ...
"""

from tabletree.core.functions.table_models import (
    Run,
    Link,
    RunNode,
    ParagraphGroup,
    HeaderLevel,
    HeaderPath,
    InternalRowGroup,
    TerminalRowGroup,
    RowGroup,
    ColumnGroup,
    FlattenedRow,
)

from tabletree.core.functions.table_loader import (
    MalformedTreeError,
    load_run,
    load_runs,
    load_paragraph_groups,
    load_row_groups,
    load_column_groups,
)

from tabletree.core.functions.header_path import (
    EMPTY_PATH,
    descend,
    is_blank_level,
    path_depth,
    common_depth,
)

from tabletree.core.functions.table_traverser import (
    RowIterator,
    ColumnHeaderIterator,
    iterate_rows,
    iterate_column_headers,
)

from tabletree.core.functions.text_assembler import (
    TextAssemblerConfig,
    DEFAULT_ASSEMBLER_CONFIG,
    concat_all_runs,
    concat_all_paragraphs,
    header_path_texts,
)

__all__ = [
    # Models
    "Run",
    "Link",
    "RunNode",
    "ParagraphGroup",
    "HeaderLevel",
    "HeaderPath",
    "InternalRowGroup",
    "TerminalRowGroup",
    "RowGroup",
    "ColumnGroup",
    "FlattenedRow",
    # Loader
    "MalformedTreeError",
    "load_run",
    "load_runs",
    "load_paragraph_groups",
    "load_row_groups",
    "load_column_groups",
    # Header path
    "EMPTY_PATH",
    "descend",
    "is_blank_level",
    "path_depth",
    "common_depth",
    # Traverser
    "RowIterator",
    "ColumnHeaderIterator",
    "iterate_rows",
    "iterate_column_headers",
    # Text assembler
    "TextAssemblerConfig",
    "DEFAULT_ASSEMBLER_CONFIG",
    "concat_all_runs",
    "concat_all_paragraphs",
    "header_path_texts",
]
