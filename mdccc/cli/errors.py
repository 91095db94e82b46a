"""Typed exception hierarchy for CLI-related errors."""

from mdccc.errors import MdcccError


class CLIError(MdcccError):
    """Base exception for all CLI-related errors."""
    pass


class InputReadError(CLIError):
    """Raised when standard input cannot be read or decoded."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
