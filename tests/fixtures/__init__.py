"""Test fixtures for mdccc tests.

This module provides sample Markdown documents shared by the parser,
converter and CLI tests.
"""

from .sample_markdown import (
    SAMPLE_MARKDOWN_SIMPLE,
    SAMPLE_MARKDOWN_STRUCTURED,
    SAMPLE_MARKDOWN_WITH_TABLE,
    SAMPLE_MARKDOWN_WITH_HTML,
    SAMPLE_MARKDOWN_WITH_FOOTNOTE,
    SAMPLE_MARKDOWN_SOFT_BREAK,
    SAMPLE_MARKDOWN_HARD_BREAK,
)

__all__ = [
    'SAMPLE_MARKDOWN_SIMPLE',
    'SAMPLE_MARKDOWN_STRUCTURED',
    'SAMPLE_MARKDOWN_WITH_TABLE',
    'SAMPLE_MARKDOWN_WITH_HTML',
    'SAMPLE_MARKDOWN_WITH_FOOTNOTE',
    'SAMPLE_MARKDOWN_SOFT_BREAK',
    'SAMPLE_MARKDOWN_HARD_BREAK',
]
