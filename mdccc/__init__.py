"""MDCCC: Markdown to LaTeX renderer.

The LaTeXIter type is an iterator adapter: it consumes an iterator over
Markdown structural events (see mdccc.markdown) and yields LaTeX string
fragments. The mdccc command-line tool reads Markdown from stdin and
writes LaTeX to stdout like a filter:

    mdccc < input.md > output.tex
    pdflatex output.tex
"""

from .errors import (
    MdcccError,
    ConversionError,
    UnsupportedConstructError,
    SinkError,
    ConfigError,
)
from .escape import escape_latex
from .latex import DocumentShell, LaTeXIter, convert_markdown, md_to_latex

__version__ = "0.1.1"

__all__ = [
    'MdcccError',
    'ConversionError',
    'UnsupportedConstructError',
    'SinkError',
    'ConfigError',
    'escape_latex',
    'DocumentShell',
    'LaTeXIter',
    'convert_markdown',
    'md_to_latex',
]
