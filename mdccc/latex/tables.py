"""Tag-to-markup tables for LaTeX output.

Each structural construct maps to a fixed (start, end) fragment pair.
Constructs mapped to empty fragments are rendered as plain text: their
structure is dropped and only their content reaches the output.
"""

from typing import Dict, Tuple

from ..markdown.models import TagKind

# Size keyword by header level; levels past the table use NORMAL_SIZE
HEADER_SIZES: Dict[int, str] = {
    1: 'Huge',
    2: 'huge',
    3: 'LARGE',
    4: 'Large',
    5: 'large',
}
NORMAL_SIZE = 'normalsize'

HEADER_END = '}}\n\n'

TAG_MARKUP: Dict[TagKind, Tuple[str, str]] = {
    TagKind.PARAGRAPH: ('\n\n', ''),
    TagKind.RULE: ('\n\n\\noindent\\rule{\\textwidth}{0.4pt}\n\n', ''),
    TagKind.EMPHASIS: ('\\textit{', '}'),
    TagKind.STRONG: ('\\textbf{', '}'),

    # Rendered as plain text: markup dropped, content kept
    TagKind.BLOCK_QUOTE: ('', ''),
    TagKind.CODE_BLOCK: ('', ''),
    TagKind.LIST: ('', ''),
    TagKind.LIST_ITEM: ('', ''),
    TagKind.FOOTNOTE_DEFINITION: ('', ''),
    TagKind.TABLE: ('', ''),
    TagKind.TABLE_HEAD: ('', ''),
    TagKind.TABLE_ROW: ('', ''),
    TagKind.TABLE_CELL: ('', ''),
    TagKind.INLINE_CODE: ('', ''),
    TagKind.LINK: ('', ''),
    TagKind.IMAGE: ('', ''),
}

SOFT_BREAK_MARKUP = '\\\\\n'
HARD_BREAK_MARKUP = '\n\n'


def header_size(level: int) -> str:
    """Size keyword for a header level (1 largest, 6 and up normal size)."""
    return HEADER_SIZES.get(level, NORMAL_SIZE)


def header_start(level: int) -> str:
    """Opening markup group for a header of the given level."""
    return '\n\n{\\' + header_size(level) + '\\textbf{'
