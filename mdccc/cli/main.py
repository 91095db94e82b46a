"""Main CLI entry point for the mdccc command.

This module provides the Typer application behind the mdccc filter. In the
spirit of Unix it reads Markdown from stdin and writes LaTeX to stdout:

    mdccc < input.md > output.tex
    pdflatex output.tex
"""

import logging
import sys
from typing import Optional

import typer

from mdccc import __version__
from mdccc.cli.errors import InputReadError
from mdccc.cli.models import ExitCode
from mdccc.cli.output import OutputHandler
from mdccc.errors import ConfigError, ConversionError
from mdccc.latex import DEFAULT_SHELL, LaTeXIter, ShellConfigLoader

app = typer.Typer(
    name="mdccc",
    help="Markdown to LaTeX renderer. Reads Markdown on stdin, writes LaTeX to stdout.",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'mdccc' namespace logger to avoid affecting
    third-party libraries. Log records go to stderr.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("mdccc")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)


def _read_stdin() -> str:
    """Read all of standard input as UTF-8 text.

    Raises:
        InputReadError: If stdin cannot be read or is not valid UTF-8
    """
    try:
        data = typer.get_binary_stream("stdin").read()
    except OSError as e:
        raise InputReadError(str(e)) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputReadError(str(e)) from e


@app.command()
def main_command(
    no_wrap: bool = typer.Option(
        False,
        "--no-wrap",
        help="Emit only the document body, without preamble and \\end{document}",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML file overriding the document prologue and/or epilogue",
        metavar="PATH",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=warnings, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored diagnostics",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Convert Markdown on stdin to LaTeX on stdout.

    \b
    EXAMPLE:
      mdccc < input.md > output.tex
      pdflatex output.tex
    """
    if version:
        typer.echo(f"mdccc version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    shell = DEFAULT_SHELL
    if config:
        try:
            shell = ShellConfigLoader.load(config)
        except ConfigError as e:
            logger.debug(f"Config load failed: {e}")
            output.error(f"can't load config: {e}")
            raise typer.Exit(ExitCode.GENERAL_ERROR)
        output.info(f"Using document shell from {config}")

    try:
        markdown = _read_stdin()
    except InputReadError as e:
        output.error(f"can't read from stdin: {e}")
        raise typer.Exit(ExitCode.INPUT_ERROR)
    output.debug(f"Read {len(markdown)} characters of Markdown")

    latex = LaTeXIter.from_markdown(markdown, wrap=not no_wrap, shell=shell)
    stdout = typer.get_binary_stream("stdout")
    try:
        latex.write_to_bytes(stdout)
        stdout.flush()
    except ConversionError as e:
        output.error(f"can't write LaTeX: {e}")
        raise typer.Exit(ExitCode.OUTPUT_ERROR)
    except OSError as e:
        output.error(f"can't write LaTeX: I/O error: {e}")
        raise typer.Exit(ExitCode.OUTPUT_ERROR)

    raise typer.Exit(ExitCode.SUCCESS)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m mdccc.cli.main
if __name__ == "__main__":
    main()
