# tabletree/core/functions/header_path.py
"""
Header Path - Header Levels Accumulated While Descending a Table Tree

A header path is an immutable tuple of header levels. Descending into a node
returns a new path with that node's paragraphs appended; the parent path is
left untouched, so returning from a subtree needs no pop and an emitted path
can never change after it is handed to the caller.

    root "a"        → (a,)
    ├─ child "a-1"  → (a, a-1)      ← emitted
    └─ child "a-2"  → (a, a-2)      ← emitted
    root "b"        → (b,)          ← emitted
"""
from tabletree.core.functions.table_models import HeaderLevel, HeaderPath

EMPTY_PATH: HeaderPath = ()


def descend(path: HeaderPath, paragraphs: HeaderLevel) -> HeaderPath:
    """Return the path of a child node whose header is `paragraphs`."""
    return path + (tuple(paragraphs),)


def is_blank_level(paragraphs: HeaderLevel) -> bool:
    """True when no paragraph of the header level holds any run."""
    return all(not paragraph.children for paragraph in paragraphs)


def path_depth(path: HeaderPath) -> int:
    """Number of levels from the root to the node owning this path."""
    return len(path)


def common_depth(first: HeaderPath, second: HeaderPath) -> int:
    """Number of leading levels two paths share.

    Two leaves under the same spanning header share at least that header's
    level; the first differing level is where their branches diverge.
    """
    depth = 0
    for a, b in zip(first, second):
        if a != b:
            break
        depth += 1
    return depth


__all__ = [
    'EMPTY_PATH',
    'descend',
    'is_blank_level',
    'path_depth',
    'common_depth',
]
