# tabletree/core/functions/table_loader.py
"""
Table Loader - Raw JSON Trees to Table Models

Converts the JSON-shaped dicts produced by a document parser (keys such as
"paragraphs", "children", "cells", "commentIds", "isB") into the immutable
models of table_models.

Raw Shapes:
    Run            {"text", "isB", "isU", "isI", "commentIds"}
    Link           {"href", "runs": [Run...]}
    ParagraphGroup {"level", "children": [Run | Link...]}
    RowGroup       {"paragraphs", "colspan", "children": [...]}  → InternalRowGroup
                   {"paragraphs", "colspan", "cells": [...]}     → TerminalRowGroup
    ColumnGroup    {"paragraphs", "children": [...]}             (no children → leaf)

Usage:
    from tabletree.core.functions.table_loader import load_row_groups
    from tabletree.core.functions.table_traverser import iterate_rows

    for row in iterate_rows(load_row_groups(json.loads(raw))):
        ...
"""
from typing import Any, Dict, Iterable, Tuple

from tabletree.core.functions.table_models import (
    ColumnGroup,
    InternalRowGroup,
    Link,
    ParagraphGroup,
    RowGroup,
    Run,
    RunNode,
    TerminalRowGroup,
)


class MalformedTreeError(ValueError):
    """Raised when a raw row-group is neither internal nor terminal."""

    def __init__(self, message: str, location: str):
        super().__init__(f"{message} (at {location})")
        self.location = location


# ============================================================================
# Runs / Paragraphs
# ============================================================================

def load_run(raw: Dict[str, Any]) -> Run:
    return Run(
        text=raw.get("text", ""),
        is_b=bool(raw.get("isB", False)),
        is_u=bool(raw.get("isU", False)),
        is_i=bool(raw.get("isI", False)),
        comment_ids=tuple(raw.get("commentIds", ())),
    )


def load_runs(nodes: Iterable[Dict[str, Any]]) -> Tuple[RunNode, ...]:
    """Load runs and links; a node with an "href" key is a link."""
    loaded = []
    for raw in nodes:
        if "href" in raw:
            loaded.append(Link(href=raw["href"], runs=load_runs(raw.get("runs", ()))))
        else:
            loaded.append(load_run(raw))
    return tuple(loaded)


def load_paragraph_groups(groups: Iterable[Dict[str, Any]]) -> Tuple[ParagraphGroup, ...]:
    return tuple(
        ParagraphGroup(
            level=raw.get("level", 0),
            children=load_runs(raw.get("children", ())),
        )
        for raw in groups
    )


# ============================================================================
# Row / Column Trees
# ============================================================================

def load_row_groups(roots: Iterable[Dict[str, Any]]) -> Tuple[RowGroup, ...]:
    """Load row-group trees.

    A row-group with non-empty "children" becomes an InternalRowGroup; one
    with a "cells" key (and no children) becomes a TerminalRowGroup.

    Args:
        roots: Raw top-level row-groups

    Returns:
        Typed row-groups in the same order

    Raises:
        MalformedTreeError: A row-group has both children and cells, or neither
    """
    return tuple(_load_row_group(raw, f"rows[{idx}]") for idx, raw in enumerate(roots))


def _load_row_group(raw: Dict[str, Any], location: str) -> RowGroup:
    paragraphs = load_paragraph_groups(raw.get("paragraphs", ()))
    colspan = raw.get("colspan", 1)
    children = raw.get("children") or ()
    has_cells = "cells" in raw

    if children and has_cells:
        raise MalformedTreeError("row-group has both children and cells", location)

    if children:
        return InternalRowGroup(
            paragraphs=paragraphs,
            colspan=colspan,
            children=tuple(
                _load_row_group(child, f"{location}.children[{idx}]")
                for idx, child in enumerate(children)
            ),
        )

    if not has_cells:
        raise MalformedTreeError("row-group has neither children nor cells", location)

    return TerminalRowGroup(paragraphs=paragraphs, colspan=colspan, cells=tuple(raw["cells"]))


def load_column_groups(roots: Iterable[Dict[str, Any]]) -> Tuple[ColumnGroup, ...]:
    """Load column-group trees. Missing or empty "children" marks a leaf column."""
    return tuple(
        ColumnGroup(
            paragraphs=load_paragraph_groups(raw.get("paragraphs", ())),
            children=load_column_groups(raw.get("children") or ()),
        )
        for raw in roots
    )


__all__ = [
    'MalformedTreeError',
    'load_run',
    'load_runs',
    'load_paragraph_groups',
    'load_row_groups',
    'load_column_groups',
]
