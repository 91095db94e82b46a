"""Markdown event source built on mistune.

This module parses Markdown text with mistune (AST mode, no renderer) and
flattens the resulting token tree into the ordered sequence of structural
events defined in mdccc.markdown.models. Tables and footnotes are enabled.
Character references in text runs (&amp;, &#35;, &copy;) are decoded; code
spans and code blocks keep their raw text.
Events are yielded lazily while walking the token tree depth-first.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

import mistune
from mistune.util import unescape

from .models import Event, HARD_BREAK, SOFT_BREAK, Tag, TagKind

logger = logging.getLogger(__name__)

# mistune plugins enabled for every parse
DEFAULT_PLUGINS = ('table', 'footnotes')

# Container tokens mapped to a payload-free Start/End pair
SIMPLE_TAG_TOKENS = {
    'paragraph': TagKind.PARAGRAPH,
    'block_quote': TagKind.BLOCK_QUOTE,
    'list_item': TagKind.LIST_ITEM,
    'table_head': TagKind.TABLE_HEAD,
    'table_row': TagKind.TABLE_ROW,
    'table_cell': TagKind.TABLE_CELL,
    'emphasis': TagKind.EMPHASIS,
    'strong': TagKind.STRONG,
}

# Tokens whose children are emitted without an enclosing tag.
# block_text is the body of a tight list item, which has no paragraph.
TRANSPARENT_TOKENS = {'block_text', 'table_body', 'footnotes'}

SKIPPED_TOKENS = {'blank_line'}


class MarkdownEventParser:
    """Turns Markdown source text into structural events.

    Example:
        >>> parser = MarkdownEventParser()
        >>> [e.kind.value for e in parser.parse("*hi*")]
        ['start', 'start', 'text', 'end', 'end']
    """

    def __init__(self, plugins: Sequence[str] = DEFAULT_PLUGINS):
        """Initialize the parser.

        Args:
            plugins: mistune plugin names to enable
        """
        self.plugins = list(plugins)
        self._markdown = mistune.create_markdown(
            renderer=None,
            plugins=self.plugins,
        )

    def parse(self, text: str) -> Iterator[Event]:
        """Parse Markdown text and yield its events in document order.

        Args:
            text: Markdown source

        Yields:
            Event objects, every Start paired with a matching End
        """
        tokens, _state = self._markdown.parse(text)
        logger.debug(f"Parsed {len(tokens)} top-level Markdown tokens")
        for token in tokens:
            yield from self._walk(token)

    def _walk_children(self, token: Dict[str, Any]) -> Iterator[Event]:
        children = token.get('children')
        if isinstance(children, list):
            for child in children:
                yield from self._walk(child)
        elif token.get('text'):
            # Inline text not expanded into children by the parser
            yield Event.text_run(unescape(token['text']))

    def _wrap(self, tag: Tag, token: Dict[str, Any]) -> Iterator[Event]:
        yield Event.start(tag)
        yield from self._walk_children(token)
        yield Event.end(tag)

    def _walk(self, token: Dict[str, Any]) -> Iterator[Event]:
        """Yield the events for one token and its descendants."""
        token_type = token.get('type', '')
        attrs = token.get('attrs') or {}

        if token_type in SKIPPED_TOKENS:
            return

        if token_type in SIMPLE_TAG_TOKENS:
            yield from self._wrap(Tag(SIMPLE_TAG_TOKENS[token_type]), token)
        elif token_type in TRANSPARENT_TOKENS:
            yield from self._walk_children(token)
        elif token_type == 'text':
            # AST mode leaves entity and numeric references undecoded
            yield Event.text_run(unescape(token.get('raw', '')))
        elif token_type == 'softbreak':
            yield SOFT_BREAK
        elif token_type == 'linebreak':
            yield HARD_BREAK
        elif token_type == 'heading':
            yield from self._wrap(Tag.header(attrs.get('level', 1)), token)
        elif token_type == 'thematic_break':
            rule = Tag(TagKind.RULE)
            yield Event.start(rule)
            yield Event.end(rule)
        elif token_type == 'block_code':
            tag = Tag.code_block(attrs.get('info') or '')
            yield Event.start(tag)
            yield Event.text_run(token.get('raw', ''))
            yield Event.end(tag)
        elif token_type == 'codespan':
            tag = Tag(TagKind.INLINE_CODE)
            yield Event.start(tag)
            yield Event.text_run(token.get('raw', ''))
            yield Event.end(tag)
        elif token_type == 'list':
            start = attrs.get('start', 1) if attrs.get('ordered') else None
            yield from self._wrap(Tag.list_block(start), token)
        elif token_type == 'table':
            yield from self._wrap(Tag.table(_table_alignments(token)), token)
        elif token_type == 'link':
            yield from self._wrap(
                Tag.link(attrs.get('url', ''), attrs.get('title') or ''), token
            )
        elif token_type == 'image':
            yield from self._wrap(
                Tag.image(attrs.get('url', ''), attrs.get('title') or ''), token
            )
        elif token_type == 'block_html':
            yield Event.html(token.get('raw', ''))
        elif token_type == 'inline_html':
            yield Event.inline_html(token.get('raw', ''))
        elif token_type == 'footnote_ref':
            yield Event.footnote_reference(token.get('raw', ''))
        elif token_type == 'footnote_item':
            label = str(attrs.get('key', attrs.get('index', '')))
            yield from self._wrap(Tag.footnote_definition(label), token)
        else:
            logger.debug(f"Unknown Markdown token type '{token_type}', walking its content")
            if 'children' in token or 'text' in token:
                yield from self._walk_children(token)
            elif token.get('raw'):
                yield Event.text_run(unescape(token['raw']))


def _table_alignments(token: Dict[str, Any]) -> List[Optional[str]]:
    """Column alignments taken from the head cells of a table token."""
    for child in token.get('children', []):
        if child.get('type') == 'table_head':
            return [
                (cell.get('attrs') or {}).get('align')
                for cell in child.get('children', [])
            ]
    return []


def parse_events(text: str) -> Iterator[Event]:
    """Parse Markdown text into events using the default plugin set."""
    return MarkdownEventParser().parse(text)
