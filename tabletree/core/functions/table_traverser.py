# tabletree/core/functions/table_traverser.py
"""
Table Traverser - Flattening Merged-Header Row and Column Trees

Walks row-group and column-group trees depth-first, left to right, and emits
one record per terminal node together with the header of every level above it.

================================================================================
TRAVERSER ARCHITECTURE
================================================================================

Entry Points:
    iterate_rows(roots)            → RowIterator           (FlattenedRow)
    iterate_column_headers(roots)  → ColumnHeaderIterator  (HeaderPath)

Both iterators are explicit cursors built on _MergedTreeCursor:

    frames = [ _Frame(nodes=roots, index=0, path=()) ]

    __next__()
    │
    ├─ top frame exhausted? ──► pop frame, continue
    │
    ├─ node = nodes[index]; index += 1
    ├─ path = _header_path(frame.path, node)   (descend, or skip a blank merged level)
    │
    ├─ node has children? ────► push _Frame(children, 0, path), continue
    │
    └─ terminal ──────────────► return _emit(node, path)   ← only suspension point

Once the frame stack is empty every further __next__() raises StopIteration.

================================================================================
EXAMPLE
================================================================================

    a ─┬─ a-1  [1st row]           headers (a, a-1) → [1st row]
       └─ a-2  [2nd row]    ──►    headers (a, a-2) → [2nd row]
    b          [3rd row]           headers (b,)     → [3rd row]

================================================================================
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Sequence, TypeVar

from tabletree.core.functions.header_path import EMPTY_PATH, descend, is_blank_level
from tabletree.core.functions.table_models import (
    ColumnGroup,
    FlattenedRow,
    HeaderPath,
    InternalRowGroup,
    RowGroup,
)

logger = logging.getLogger("table-traverse")

RecordT = TypeVar("RecordT")


@dataclass
class _Frame:
    """One open level of the walk: sibling nodes, next index, parent path."""
    nodes: Sequence[Any]
    index: int
    path: HeaderPath


class _MergedTreeCursor(ABC, Generic[RecordT]):
    """Pull-based depth-first cursor over a merged-header tree.

    Subclasses decide which nodes have children and what record a terminal
    node produces. All walk state lives on the instance, so abandoning the
    cursor half way needs no cleanup.
    """

    def __init__(self, roots: Iterable[Any]):
        self._frames: List[_Frame] = [_Frame(tuple(roots), 0, EMPTY_PATH)]
        self._emitted = 0

    def __iter__(self) -> "_MergedTreeCursor[RecordT]":
        return self

    def __next__(self) -> RecordT:
        while self._frames:
            frame = self._frames[-1]
            if frame.index >= len(frame.nodes):
                self._frames.pop()
                if not self._frames:
                    logger.debug(
                        f"{type(self).__name__} exhausted after {self._emitted} records"
                    )
                continue

            node = frame.nodes[frame.index]
            frame.index += 1
            path = self._header_path(frame.path, node)

            children = self._children_of(node)
            if children:
                self._frames.append(_Frame(children, 0, path))
                continue

            self._emitted += 1
            return self._emit(node, path)

        raise StopIteration

    @property
    def emitted(self) -> int:
        """Number of records returned so far."""
        return self._emitted

    def _header_path(self, parent_path: HeaderPath, node: Any) -> HeaderPath:
        return descend(parent_path, node.paragraphs)

    @abstractmethod
    def _children_of(self, node: Any) -> Sequence[Any]:
        """Child nodes to descend into (empty for a terminal node)."""
        pass

    @abstractmethod
    def _emit(self, node: Any, path: HeaderPath) -> RecordT:
        """Build the record for a terminal node."""
        pass


class RowIterator(_MergedTreeCursor[FlattenedRow]):
    """Yields one FlattenedRow per terminal row-group."""

    def _children_of(self, node: RowGroup) -> Sequence[RowGroup]:
        if isinstance(node, InternalRowGroup):
            return node.children
        return ()

    def _emit(self, node: RowGroup, path: HeaderPath) -> FlattenedRow:
        return FlattenedRow(headers=path, cells=node.cells)


class ColumnHeaderIterator(_MergedTreeCursor[HeaderPath]):
    """Yields one HeaderPath per leaf column.

    A column-group without children is one leaf column, however many grid
    columns its merged header cell covers. A child column-group with a blank
    header is the continuation of its parent's vertically merged cell and
    adds no header level.
    """

    def _header_path(self, parent_path: HeaderPath, node: ColumnGroup) -> HeaderPath:
        if parent_path and is_blank_level(node.paragraphs):
            return parent_path
        return descend(parent_path, node.paragraphs)

    def _children_of(self, node: ColumnGroup) -> Sequence[ColumnGroup]:
        return node.children

    def _emit(self, node: ColumnGroup, path: HeaderPath) -> HeaderPath:
        return path


def iterate_rows(roots: Iterable[RowGroup]) -> RowIterator:
    """Flatten row-group trees into rows carrying their header paths.

    Args:
        roots: Top-level row-groups in document order

    Returns:
        Cursor yielding FlattenedRow objects depth-first, left to right
    """
    return RowIterator(roots)


def iterate_column_headers(roots: Iterable[ColumnGroup]) -> ColumnHeaderIterator:
    """Flatten column-group trees into one header path per leaf column.

    Args:
        roots: Top-level column-groups in document order

    Returns:
        Cursor yielding HeaderPath tuples depth-first, left to right
    """
    return ColumnHeaderIterator(roots)


__all__ = [
    'RowIterator',
    'ColumnHeaderIterator',
    'iterate_rows',
    'iterate_column_headers',
]
