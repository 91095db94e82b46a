"""Markdown event source for the LaTeX renderer.

This package turns Markdown text into an ordered sequence of structural
events (Start/End tags, text runs, breaks, raw HTML, footnote references)
using the mistune parser.
"""

from .models import Event, EventKind, Tag, TagKind, SOFT_BREAK, HARD_BREAK
from .parser import MarkdownEventParser, parse_events

__all__ = [
    'Event',
    'EventKind',
    'Tag',
    'TagKind',
    'SOFT_BREAK',
    'HARD_BREAK',
    'MarkdownEventParser',
    'parse_events',
]
