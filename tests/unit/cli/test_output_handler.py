"""Unit tests for cli.output module."""

from mdccc.cli.output import OutputHandler


class TestOutputHandlerInit:
    """Test cases for OutputHandler initialization."""

    def test_init_defaults(self):
        """Initialize with default verbosity (0) on stderr."""
        handler = OutputHandler()

        assert handler.verbosity == 0
        assert handler.console.stderr is True

    def test_init_no_color(self):
        """no_color=True disables colors."""
        handler = OutputHandler(no_color=True)

        assert handler.console.no_color is True


class TestOutputHandlerMessages:
    """Test cases for message display."""

    def test_error_always_printed(self, capsys):
        """Errors are printed at verbosity 0, on stderr."""
        OutputHandler(no_color=True).error("can't read from stdin: boom")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "can't read from stdin: boom" in captured.err

    def test_error_markup_is_literal(self, capsys):
        """Square brackets in messages are not treated as markup."""
        OutputHandler(no_color=True).error("bad [^1] reference")

        assert "bad [^1] reference" in capsys.readouterr().err

    def test_info_hidden_at_verbosity_0(self, capsys):
        """Info messages need verbosity 1."""
        OutputHandler(verbosity=0).info("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_info_shown_at_verbosity_1(self, capsys):
        """Info messages show at verbosity 1."""
        OutputHandler(verbosity=1, no_color=True).info("shown")

        assert "shown" in capsys.readouterr().err

    def test_debug_needs_verbosity_2(self, capsys):
        """Debug messages show only at verbosity 2."""
        OutputHandler(verbosity=1, no_color=True).debug("quiet")
        OutputHandler(verbosity=2, no_color=True).debug("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err
