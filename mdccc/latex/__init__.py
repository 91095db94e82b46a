"""LaTeX generation from Markdown events.

This package provides the event-to-fragment mapping (md_to_latex), the
LaTeXIter iterator adapter with optional document wrapping, and the
document shell (prologue/epilogue) configuration.
"""

from .config import (
    DEFAULT_EPILOGUE,
    DEFAULT_PROLOGUE,
    DEFAULT_SHELL,
    DocumentShell,
    ShellConfigLoader,
)
from .latex_iter import IterState, LaTeXIter, convert_markdown, md_to_latex

__all__ = [
    'DEFAULT_EPILOGUE',
    'DEFAULT_PROLOGUE',
    'DEFAULT_SHELL',
    'DocumentShell',
    'ShellConfigLoader',
    'IterState',
    'LaTeXIter',
    'convert_markdown',
    'md_to_latex',
]
