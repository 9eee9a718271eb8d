# tabletree/core/functions/text_assembler.py
"""
Text Assembler - Plain Text from Run / Paragraph Trees

Concatenates the text of formatted runs, ignoring formatting flags and
comment references. Links are unwrapped in place.

Usage:
    from tabletree.core.functions.text_assembler import concat_all_paragraphs

    label = concat_all_paragraphs(row.headers[0])
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tabletree.core.functions.table_models import (
    HeaderPath,
    Link,
    ParagraphGroup,
    RunNode,
)


@dataclass
class TextAssemblerConfig:
    """Configuration for text assembly.

    Attributes:
        paragraph_separator: String placed between paragraphs
    """
    paragraph_separator: str = " "


DEFAULT_ASSEMBLER_CONFIG = TextAssemblerConfig()


def concat_all_runs(nodes: Iterable[RunNode]) -> str:
    """Concatenate the text of every run under the given nodes.

    Args:
        nodes: Runs and links in document order

    Returns:
        Run texts joined without separator ("" for no runs)
    """
    parts = []
    for node in nodes:
        if isinstance(node, Link):
            parts.append(concat_all_runs(node.runs))
        else:
            parts.append(node.text)
    return ''.join(parts)


def concat_all_paragraphs(
    groups: Iterable[ParagraphGroup],
    config: Optional[TextAssemblerConfig] = None
) -> str:
    """Concatenate each paragraph's runs, then join the paragraphs.

    Args:
        groups: Paragraph groups in document order
        config: Assembler configuration (single space separator by default)

    Returns:
        Paragraph texts joined by the configured separator
    """
    config = config or DEFAULT_ASSEMBLER_CONFIG
    return config.paragraph_separator.join(
        concat_all_runs(group.children) for group in groups
    )


def header_path_texts(
    path: HeaderPath,
    config: Optional[TextAssemblerConfig] = None
) -> List[str]:
    """Render every level of a header path as a display string."""
    return [concat_all_paragraphs(level, config) for level in path]


__all__ = [
    'TextAssemblerConfig',
    'DEFAULT_ASSEMBLER_CONFIG',
    'concat_all_runs',
    'concat_all_paragraphs',
    'header_path_texts',
]
