# tests/test_table_loader.py
import pytest

from tabletree.core.functions.table_loader import (
    MalformedTreeError,
    load_column_groups,
    load_paragraph_groups,
    load_row_groups,
    load_runs,
)
from tabletree.core.functions.table_models import (
    ColumnGroup,
    InternalRowGroup,
    Link,
    ParagraphGroup,
    Run,
    TerminalRowGroup,
)


def test_load_runs_defaults_and_links():
    nodes = load_runs([
        {"text": "plain"},
        {"text": "styled", "isB": True, "isU": True, "isI": True, "commentIds": ["0", "1"]},
        {"href": "http://example.com", "runs": [{"text": "link"}]},
    ])

    assert nodes == (
        Run(text="plain"),
        Run(text="styled", is_b=True, is_u=True, is_i=True, comment_ids=("0", "1")),
        Link(href="http://example.com", runs=(Run(text="link"),)),
    )


def test_load_paragraph_groups_keeps_level():
    assert load_paragraph_groups([{"level": -1, "children": []}, {"children": [{"text": "x"}]}]) == (
        ParagraphGroup(level=-1, children=()),
        ParagraphGroup(level=0, children=(Run(text="x"),)),
    )


def test_load_row_groups_builds_tagged_nodes(nested_rows):
    first, second = load_row_groups(nested_rows)

    assert isinstance(first, InternalRowGroup)
    assert all(isinstance(child, TerminalRowGroup) for child in first.children)
    assert isinstance(second, TerminalRowGroup)
    assert second.colspan == 2
    assert second.cells == ("3rd row",)


def test_load_row_groups_empty_children_with_cells_is_terminal(para):
    (row,) = load_row_groups([{"paragraphs": [para("r")], "children": [], "cells": ["x"]}])

    assert isinstance(row, TerminalRowGroup)
    assert row.colspan == 1


@pytest.mark.parametrize(
    "raw, location",
    [
        ({"paragraphs": [], "children": [{"paragraphs": [], "cells": []}], "cells": ["x"]}, "rows[0]"),
        ({"paragraphs": []}, "rows[0]"),
        ({"paragraphs": [], "children": [{"paragraphs": []}]}, "rows[0].children[0]"),
    ],
)
def test_load_row_groups_rejects_malformed(raw, location):
    with pytest.raises(MalformedTreeError) as excinfo:
        load_row_groups([raw])

    assert excinfo.value.location == location
    assert isinstance(excinfo.value, ValueError)


def test_load_column_groups(nested_columns):
    first, second = load_column_groups(nested_columns)

    assert not first.is_leaf
    assert [child.is_leaf for child in first.children] == [True, True]
    assert second.children[0] == ColumnGroup(paragraphs=(ParagraphGroup(level=-1),), children=())
