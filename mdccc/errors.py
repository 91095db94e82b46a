"""Typed exception hierarchy for Markdown -> LaTeX conversion errors.

This module defines all custom exceptions used by the mdccc library.
All exceptions inherit from MdcccError base class for easy catching.
Conversion failures carry a human-readable message plus an optional
underlying cause, and render as "message: cause" when a cause is present.
"""

from typing import Optional


class MdcccError(Exception):
    """Base exception for all mdccc errors.

    Use this to catch any application-level error from the renderer.
    """
    pass


class ConversionError(MdcccError):
    """Raised when a Markdown event cannot be turned into LaTeX output.

    Attributes:
        message: Human-readable description of the failure
        cause: Underlying exception, if any (also chained as __cause__)

    Example:
        >>> err = ConversionError("I/O error", OSError("disk full"))
        >>> str(err)
        'I/O error: disk full'
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None:
            super().__init__(f"{message}: {cause}")
        else:
            super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause


class UnsupportedConstructError(ConversionError):
    """Raised when an event has no LaTeX representation (HTML, footnotes)."""

    def __init__(self, construct: str, message: str):
        super().__init__(message)
        self.construct = construct


class SinkError(ConversionError):
    """Raised when writing a fragment to the output sink fails."""

    @classmethod
    def from_io_error(cls, error: BaseException) -> "SinkError":
        """Wrap an I/O failure of a byte or text sink."""
        return cls("I/O error", error)

    @classmethod
    def from_format_error(cls, error: BaseException) -> "SinkError":
        """Wrap a failure to format or encode a fragment for the sink."""
        return cls("Formatting error", error)


class ConfigError(MdcccError):
    """Raised when document shell configuration is invalid."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
