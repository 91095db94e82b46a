"""Unit tests for errors module."""

import pytest

from mdccc.errors import (
    MdcccError,
    ConversionError,
    UnsupportedConstructError,
    SinkError,
    ConfigError,
)
from mdccc.cli.errors import CLIError, InputReadError


class TestConversionError:
    """Test cases for ConversionError."""

    def test_inherits_from_mdccc_error(self):
        """ConversionError should inherit from MdcccError."""
        assert issubclass(ConversionError, MdcccError)
        assert issubclass(MdcccError, Exception)

    def test_message_without_cause(self):
        """Without a cause the message is used verbatim."""
        error = ConversionError("something failed")
        assert str(error) == "something failed"
        assert error.message == "something failed"
        assert error.cause is None

    def test_message_with_cause_is_colon_joined(self):
        """With a cause the rendered message is 'message: cause'."""
        cause = OSError("disk full")
        error = ConversionError("I/O error", cause)
        assert str(error) == "I/O error: disk full"
        assert error.cause is cause

    def test_cause_is_chained(self):
        """The cause is exposed as __cause__ for traceback chaining."""
        cause = ValueError("bad")
        error = ConversionError("Formatting error", cause)
        assert error.__cause__ is cause


class TestUnsupportedConstructError:
    """Test cases for UnsupportedConstructError."""

    def test_is_conversion_error(self):
        """Callers catching ConversionError also catch unsupported constructs."""
        with pytest.raises(ConversionError):
            raise UnsupportedConstructError("html", "HTML is not supported")

    def test_stores_construct(self):
        """UnsupportedConstructError stores the construct name."""
        error = UnsupportedConstructError("footnote_reference", "no footnotes")
        assert error.construct == "footnote_reference"
        assert str(error) == "no footnotes"


class TestSinkError:
    """Test cases for SinkError."""

    def test_from_io_error(self):
        """from_io_error wraps the cause under 'I/O error'."""
        error = SinkError.from_io_error(OSError("broken pipe"))
        assert isinstance(error, ConversionError)
        assert str(error) == "I/O error: broken pipe"

    def test_from_format_error(self):
        """from_format_error wraps the cause under 'Formatting error'."""
        error = SinkError.from_format_error(ValueError("closed file"))
        assert str(error) == "Formatting error: closed file"
        assert isinstance(error.cause, ValueError)


class TestConfigError:
    """Test cases for ConfigError."""

    def test_message_without_field(self):
        """ConfigError prefixes the message."""
        assert str(ConfigError("bad")) == "Configuration error: bad"

    def test_message_with_field(self):
        """ConfigError names the offending field."""
        error = ConfigError("must be a string", config_field="prologue")
        assert str(error) == "Configuration error in field 'prologue': must be a string"
        assert error.config_field == "prologue"
        assert error.original_message == "must be a string"


class TestCLIErrors:
    """Test cases for CLI errors."""

    def test_input_read_error(self):
        """InputReadError is a CLIError carrying its reason."""
        error = InputReadError("invalid start byte")
        assert isinstance(error, CLIError)
        assert isinstance(error, MdcccError)
        assert error.reason == "invalid start byte"
        assert str(error) == "invalid start byte"
