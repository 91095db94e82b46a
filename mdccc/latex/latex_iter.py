"""Generating LaTeX output from a stream of Markdown events.

This module provides md_to_latex, which maps one structural event to one
LaTeX fragment, and LaTeXIter, an iterator adapter that pulls events from
an upstream iterator one at a time and yields the matching fragments,
optionally bracketed by a document prologue and epilogue.

The converter keeps no state across events apart from its position in the
prologue/streaming/epilogue sequence, so fragment i depends only on event i.
Header nesting, list depth and table structure are not tracked.
"""

import logging
from enum import Enum
from typing import BinaryIO, Iterable, Iterator, TextIO

from ..errors import SinkError, UnsupportedConstructError
from ..escape import escape_latex
from ..markdown.models import Event, EventKind, TagKind
from ..markdown.parser import parse_events
from .config import DEFAULT_SHELL, DocumentShell
from .tables import (
    HARD_BREAK_MARKUP,
    HEADER_END,
    SOFT_BREAK_MARKUP,
    TAG_MARKUP,
    header_start,
)

logger = logging.getLogger(__name__)


def md_to_latex(event: Event) -> str:
    """Convert a Markdown event to a LaTeX fragment.

    Args:
        event: Structural event to convert

    Returns:
        LaTeX fragment, possibly empty

    Raises:
        UnsupportedConstructError: For raw HTML and footnote references
    """
    kind = event.kind

    if kind is EventKind.START:
        if event.tag.kind is TagKind.HEADER:
            return header_start(event.tag.level)
        return TAG_MARKUP[event.tag.kind][0]
    if kind is EventKind.END:
        if event.tag.kind is TagKind.HEADER:
            return HEADER_END
        return TAG_MARKUP[event.tag.kind][1]
    if kind is EventKind.TEXT:
        return escape_latex(event.text)
    if kind is EventKind.SOFT_BREAK:
        return SOFT_BREAK_MARKUP
    if kind is EventKind.HARD_BREAK:
        return HARD_BREAK_MARKUP
    if kind in (EventKind.HTML, EventKind.INLINE_HTML):
        logger.debug(f"Cannot render HTML as LaTeX: {event.text.strip()[:40]!r}")
        raise UnsupportedConstructError(
            kind.value, "HTML is not supported in LaTeX output"
        )
    if kind is EventKind.FOOTNOTE_REFERENCE:
        logger.debug(f"Cannot render footnote reference [^{event.text}]")
        raise UnsupportedConstructError(
            kind.value, "footnotes are not supported in LaTeX output"
        )

    raise ValueError(f"Unknown event kind: {kind!r}")


class IterState(Enum):
    """Position of a LaTeXIter in its output sequence."""

    PENDING_PROLOGUE = "pending_prologue"
    STREAMING = "streaming"
    PENDING_EPILOGUE = "pending_epilogue"
    DONE = "done"


class LaTeXIter:
    """Iterator adapter converting a stream of Markdown events to LaTeX.

    A conversion failure is raised from __next__ as the result of that
    step. The iterator stays usable afterwards: calling next() again
    yields the fragment for the following event. A plain for loop stops
    at the first failure.

    Once exhausted the iterator stays exhausted; the upstream event
    iterator is not pulled again. Converting another document needs a
    new instance.

    Attributes:
        state: Current position in the output sequence
        shell: Prologue/epilogue used when wrapping

    Example:
        >>> "".join(LaTeXIter.from_markdown("**bold**"))
        '\\n\\n\\\\textbf{bold}'
    """

    def __init__(
        self,
        events: Iterable[Event],
        wrap: bool = False,
        shell: DocumentShell = DEFAULT_SHELL,
    ):
        """Wrap an event iterable, turning it into a LaTeX stream.

        Args:
            events: Upstream structural events
            wrap: Emit shell.prologue first and shell.epilogue last
            shell: Document prologue/epilogue text
        """
        self._events = iter(events)
        self.shell = shell
        self.wrap = wrap
        self.state = IterState.PENDING_PROLOGUE if wrap else IterState.STREAMING

    @classmethod
    def from_markdown(
        cls,
        text: str,
        wrap: bool = False,
        shell: DocumentShell = DEFAULT_SHELL,
    ) -> "LaTeXIter":
        """Create a LaTeX iterator from Markdown source text."""
        return cls(parse_events(text), wrap=wrap, shell=shell)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.state is IterState.PENDING_PROLOGUE:
            self.state = IterState.STREAMING
            logger.debug("Emitting document prologue")
            return self.shell.prologue

        if self.state is IterState.STREAMING:
            try:
                event = next(self._events)
            except StopIteration:
                if self.wrap:
                    self.state = IterState.PENDING_EPILOGUE
                else:
                    self.state = IterState.DONE
                logger.debug("Markdown events exhausted")
            else:
                return md_to_latex(event)

        if self.state is IterState.PENDING_EPILOGUE:
            self.state = IterState.DONE
            logger.debug("Emitting document epilogue")
            return self.shell.epilogue

        raise StopIteration

    def write_to_text(self, dest: TextIO) -> None:
        """Write all remaining output to a text sink.

        Args:
            dest: Object with a write(str) method

        Raises:
            ConversionError: On the first failing event
            SinkError: If the sink fails to accept a fragment
        """
        for fragment in self:
            try:
                dest.write(fragment)
            except OSError as e:
                raise SinkError.from_io_error(e) from e
            except (ValueError, TypeError) as e:
                raise SinkError.from_format_error(e) from e

    def write_to_bytes(self, dest: BinaryIO) -> None:
        """Write all remaining output, UTF-8 encoded, to a byte sink.

        Args:
            dest: Object with a write(bytes) method

        Raises:
            ConversionError: On the first failing event
            SinkError: If the sink fails to accept a fragment
        """
        for fragment in self:
            try:
                dest.write(fragment.encode('utf-8'))
            except OSError as e:
                raise SinkError.from_io_error(e) from e
            except UnicodeError as e:
                raise SinkError.from_format_error(e) from e


def convert_markdown(
    text: str,
    wrap: bool = True,
    shell: DocumentShell = DEFAULT_SHELL,
) -> str:
    """Convert a whole Markdown document to LaTeX source.

    Raises:
        ConversionError: On the first unsupported construct
    """
    return ''.join(LaTeXIter.from_markdown(text, wrap=wrap, shell=shell))
