# tabletree/core/functions/table_models.py
"""
Table Models - Merged-Header Table Tree Data Structures

Immutable data classes describing a table whose rows and columns are grouped
under spanning (merged) headers, plus the rich-text pieces those headers are
made of.

Module Components:
- Run: Smallest unit of formatted text
- Link: Hyperlink wrapper around runs
- ParagraphGroup: One paragraph (runs and/or links)
- InternalRowGroup / TerminalRowGroup: Row-group tree nodes (tagged union)
- ColumnGroup: Column-group tree node
- FlattenedRow: One leaf row with its full header path

Tree Shape:
    RowGroup ─┬─ InternalRowGroup(paragraphs, colspan, children=[RowGroup...])
              └─ TerminalRowGroup(paragraphs, colspan, cells=[...])

    ColumnGroup(paragraphs, children=[ColumnGroup...])   # children=() → leaf

Usage Example:
    from tabletree.core.functions.table_models import (
        Run,
        ParagraphGroup,
        TerminalRowGroup,
    )

    header = (ParagraphGroup(level=0, children=(Run(text="a"),)),)
    row = TerminalRowGroup(paragraphs=header, cells=("1st row",))
"""
from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class Run:
    """Formatted text run.

    Attributes:
        text: Run text
        is_b: Bold flag
        is_u: Underline flag
        is_i: Italic flag
        comment_ids: Ids of comments anchored on this run
    """
    text: str = ""
    is_b: bool = False
    is_u: bool = False
    is_i: bool = False
    comment_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Link:
    """Hyperlink wrapping one or more runs."""
    href: str = ""
    runs: Tuple[Run, ...] = ()


RunNode = Union[Run, Link]


@dataclass(frozen=True)
class ParagraphGroup:
    """One paragraph of a header or content cell.

    Attributes:
        level: Indentation marker, kept verbatim (-1 for table cells)
        children: Runs and links in document order
    """
    level: int = 0
    children: Tuple[RunNode, ...] = ()


# Header paragraphs of one row-group / column-group (one tree depth)
HeaderLevel = Tuple[ParagraphGroup, ...]

# Header levels from the root down to a terminal node
HeaderPath = Tuple[HeaderLevel, ...]


@dataclass(frozen=True)
class InternalRowGroup:
    """Row-group spanning one or more child row-groups.

    Attributes:
        paragraphs: Spanning header shared by every row below
        colspan: Number of header columns the header occupies (not interpreted)
        children: Child row-groups in document order
    """
    paragraphs: HeaderLevel = ()
    colspan: int = 1
    children: Tuple["RowGroup", ...] = ()


@dataclass(frozen=True)
class TerminalRowGroup:
    """Row-group that carries the actual row content.

    Attributes:
        paragraphs: The row's own header
        colspan: Number of header columns the header occupies (not interpreted)
        cells: Row cell values, opaque to the traversal
    """
    paragraphs: HeaderLevel = ()
    colspan: int = 1
    cells: Tuple[Any, ...] = ()


RowGroup = Union[InternalRowGroup, TerminalRowGroup]


@dataclass(frozen=True)
class ColumnGroup:
    """Column-group node. Without children it is a leaf (physical) column."""
    paragraphs: HeaderLevel = ()
    children: Tuple["ColumnGroup", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class FlattenedRow:
    """One terminal row and the headers of every level above it.

    Attributes:
        headers: headers[i] is the header captured at tree depth i
        cells: The terminal row-group's cells
    """
    headers: HeaderPath = ()
    cells: Tuple[Any, ...] = ()


__all__ = [
    'Run',
    'Link',
    'RunNode',
    'ParagraphGroup',
    'HeaderLevel',
    'HeaderPath',
    'InternalRowGroup',
    'TerminalRowGroup',
    'RowGroup',
    'ColumnGroup',
    'FlattenedRow',
]
