"""Terminal output handling using Rich library.

All user-facing diagnostics go to stderr so that stdout carries nothing
but the generated LaTeX.
"""

from rich.console import Console
from rich.markup import escape


class OutputHandler:
    """Handles diagnostic output on stderr using Rich library.

    Attributes:
        verbosity: Verbosity level (0=errors only, 1=info, 2=debug)
        console: Rich Console bound to stderr

    Example:
        >>> handler = OutputHandler(verbosity=1)
        >>> handler.error("can't read from stdin: stream closed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=errors only, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def error(self, message: str) -> None:
        """Display a one-line error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(escape(message), style="red", soft_wrap=True)

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(escape(message), soft_wrap=True)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2).

        Args:
            message: Debug message to display
        """
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)
