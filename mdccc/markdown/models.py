"""Data models for Markdown structural events.

This module defines the linear event representation of a parsed Markdown
document: Start/End events carrying a Tag, text runs, raw HTML, footnote
references and line breaks. Events are produced by the parser adapter in
mdccc.markdown.parser and consumed one at a time by the LaTeX converter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class TagKind(Enum):
    """Types of constructs carried by Start/End event pairs."""

    # Block constructs
    PARAGRAPH = "paragraph"
    RULE = "rule"
    HEADER = "header"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    LIST = "list"
    LIST_ITEM = "list_item"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"

    # Inline constructs
    EMPHASIS = "emphasis"
    STRONG = "strong"
    INLINE_CODE = "inline_code"
    LINK = "link"
    IMAGE = "image"


class EventKind(Enum):
    """Types of structural events."""

    START = "start"
    END = "end"
    TEXT = "text"
    HTML = "html"
    INLINE_HTML = "inline_html"
    FOOTNOTE_REFERENCE = "footnote_reference"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"


@dataclass(frozen=True)
class Tag:
    """Construct identifier carried by a Start/End event pair.

    Only the payload fields relevant to the kind are set; the rest keep
    their defaults.

    Attributes:
        kind: Type of construct
        level: Header level (1-6) for HEADER, 0 otherwise
        start: First item number for ordered LIST, None for bullet lists
        label: Footnote label for FOOTNOTE_DEFINITION
        info: Info string (language) for CODE_BLOCK
        url: Destination for LINK and IMAGE
        title: Optional title for LINK and IMAGE
        alignments: Column alignments for TABLE ("left", "center",
            "right" or None per column)

    Example:
        >>> Tag.header(2)
        Tag(kind=<TagKind.HEADER: 'header'>, level=2, ...)
    """

    kind: TagKind
    level: int = 0
    start: Optional[int] = None
    label: str = ""
    info: str = ""
    url: str = ""
    title: str = ""
    alignments: Tuple[Optional[str], ...] = ()

    @classmethod
    def header(cls, level: int) -> "Tag":
        return cls(TagKind.HEADER, level=level)

    @classmethod
    def list_block(cls, start: Optional[int] = None) -> "Tag":
        """List tag; start is None for bullet lists."""
        return cls(TagKind.LIST, start=start)

    @classmethod
    def code_block(cls, info: str = "") -> "Tag":
        return cls(TagKind.CODE_BLOCK, info=info)

    @classmethod
    def footnote_definition(cls, label: str) -> "Tag":
        return cls(TagKind.FOOTNOTE_DEFINITION, label=label)

    @classmethod
    def table(cls, alignments: Sequence[Optional[str]] = ()) -> "Tag":
        return cls(TagKind.TABLE, alignments=tuple(alignments))

    @classmethod
    def link(cls, url: str, title: str = "") -> "Tag":
        return cls(TagKind.LINK, url=url, title=title)

    @classmethod
    def image(cls, url: str, title: str = "") -> "Tag":
        return cls(TagKind.IMAGE, url=url, title=title)


@dataclass(frozen=True)
class Event:
    """One token of a parsed Markdown document's linear structure.

    Attributes:
        kind: Type of event
        tag: Construct for START/END events, None otherwise
        text: Text run for TEXT, raw markup for HTML/INLINE_HTML,
            label for FOOTNOTE_REFERENCE, empty otherwise
    """

    kind: EventKind
    tag: Optional[Tag] = None
    text: str = ""

    @classmethod
    def start(cls, tag: Tag) -> "Event":
        return cls(EventKind.START, tag=tag)

    @classmethod
    def end(cls, tag: Tag) -> "Event":
        return cls(EventKind.END, tag=tag)

    @classmethod
    def text_run(cls, text: str) -> "Event":
        return cls(EventKind.TEXT, text=text)

    @classmethod
    def html(cls, raw: str) -> "Event":
        return cls(EventKind.HTML, text=raw)

    @classmethod
    def inline_html(cls, raw: str) -> "Event":
        return cls(EventKind.INLINE_HTML, text=raw)

    @classmethod
    def footnote_reference(cls, label: str) -> "Event":
        return cls(EventKind.FOOTNOTE_REFERENCE, text=label)


SOFT_BREAK = Event(EventKind.SOFT_BREAK)
HARD_BREAK = Event(EventKind.HARD_BREAK)
