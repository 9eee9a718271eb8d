# tests/conftest.py
import pytest


def _para(text=None, level=-1):
    children = [] if text is None else [{"text": text}]
    return {"level": level, "children": children}


@pytest.fixture
def nested_rows():
    """Two top-level row-groups: "a" spanning two rows, and a single row "b"."""
    return [
        {
            "paragraphs": [_para("a")],
            "colspan": 1,
            "children": [
                {"paragraphs": [_para("a-1")], "colspan": 1, "cells": ["1st row"]},
                {"paragraphs": [_para("a-2")], "colspan": 1, "cells": ["2nd row"]},
            ],
        },
        {"paragraphs": [_para("b")], "colspan": 2, "cells": ["3rd row"]},
    ]


@pytest.fixture
def nested_columns():
    """Column "A" split into A-1 / A-2, and column "B" merged over two header rows."""
    return [
        {
            "paragraphs": [_para("A")],
            "children": [
                {"paragraphs": [_para("A-1")]},
                {"paragraphs": [_para("A-2")]},
            ],
        },
        {
            "paragraphs": [_para("B")],
            "children": [
                {"paragraphs": [_para()]},
            ],
        },
    ]


@pytest.fixture
def para():
    return _para
