# tabletree/core/__init__.py
"""
Core - Table Tree Models and Traversal

Module Components:
- functions: Models, loader, traversal iterators, text assembly
"""

from tabletree.core.functions import (
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

from tabletree.core import functions

__all__ = [
    "Run",
    "Link",
    "ParagraphGroup",
    "InternalRowGroup",
    "TerminalRowGroup",
    "ColumnGroup",
    "FlattenedRow",
    "MalformedTreeError",
    "load_paragraph_groups",
    "load_row_groups",
    "load_column_groups",
    "iterate_rows",
    "iterate_column_headers",
    "concat_all_runs",
    "concat_all_paragraphs",
    "header_path_texts",
    "functions",
]
