"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the mdccc filter.

    Each failure path has its own status so callers can tell them apart
    without parsing stderr:
    - SUCCESS (0): LaTeX written completely
    - GENERAL_ERROR (1): Invalid configuration file
    - USAGE_ERROR (2): Unknown option or bad option value, reported by
      Typer/Click before any input is read
    - INPUT_ERROR (3): Standard input could not be read as UTF-8 text
    - OUTPUT_ERROR (4): Conversion failed or standard output could not be
      written; stdout may hold truncated LaTeX

    Example:
        >>> raise typer.Exit(ExitCode.INPUT_ERROR)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INPUT_ERROR = 3
    OUTPUT_ERROR = 4
