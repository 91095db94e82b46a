"""Command-line interface for the Markdown to LaTeX renderer.

This package provides the `mdccc` filter: Markdown on stdin, LaTeX on
stdout, one-line diagnostics on stderr.
"""

from .models import ExitCode
from .errors import CLIError, InputReadError

__all__ = [
    'ExitCode',
    'CLIError',
    'InputReadError',
]
