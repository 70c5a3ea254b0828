"""Tests for error handler."""

import logging

import pytest
from config_transcoder.error_handler import ErrorHandler
from config_transcoder.types import ErrorType, FormatTag, TranscodeError


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid(self):
        """Test validation of a non-empty document."""
        result = self.error_handler.validate_input('{"a": 1}', FormatTag.JSON)

        assert result.is_valid
        assert len(result.errors) == 0
        assert result.warnings == []

    def test_validate_input_empty_json(self):
        """Test that an empty JSON document is invalid."""
        result = self.error_handler.validate_input("  \n", FormatTag.JSON)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.PARSE

    def test_validate_input_empty_yaml_warns(self):
        """Test that empty YAML and properties documents only warn."""
        for tag in (FormatTag.YAML, FormatTag.PROPERTIES):
            result = self.error_handler.validate_input("", tag)
            assert result.is_valid
            assert len(result.warnings) == 1

    def test_validate_input_byte_order_mark(self):
        """Test the byte order mark warning."""
        result = self.error_handler.validate_input("\ufeffa: 1", FormatTag.YAML)
        assert result.is_valid
        assert "byte order mark" in result.warnings[0]

    def test_validate_directory_path_empty(self):
        """Test that an empty output path is invalid."""
        result = self.error_handler.validate_directory_path("")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.PATH

    def test_validate_directory_path_missing_is_valid(self, temp_dir):
        """Test that a directory that does not exist yet is accepted."""
        result = self.error_handler.validate_directory_path(str(temp_dir / "new" / "dir"))
        assert result.is_valid

    def test_validate_directory_path_file(self, temp_dir):
        """Test that an existing file is not a valid output directory."""
        path = temp_dir / "file.txt"
        path.write_text("x")

        result = self.error_handler.validate_directory_path(str(path))

        assert not result.is_valid
        assert "not a directory" in result.errors[0].message

    def test_handle_error(self, caplog):
        """Test conversion of an error into a failed result."""
        error = TranscodeError("Unsupported conversion: a -> b", ErrorType.UNSUPPORTED)

        with caplog.at_level(logging.ERROR):
            result = self.error_handler.handle_error(error)

        assert not result.success
        assert result.output_path is None
        assert result.error == "Unsupported conversion: a -> b"
        assert "unsupported" in caplog.text

    def test_handle_unexpected(self):
        """Test reporting of a foreign exception."""
        result = self.error_handler.handle_unexpected(RuntimeError("boom"))

        assert not result.success
        assert result.error == "Unexpected error: boom"

    def test_raise_if_invalid(self):
        """Test that invalid results raise with the given error type."""
        invalid = self.error_handler.validate_input("", FormatTag.JSON)

        with pytest.raises(TranscodeError) as exc_info:
            self.error_handler.raise_if_invalid(invalid, ErrorType.PARSE)

        assert exc_info.value.error_type == ErrorType.PARSE
        assert "JSON document is empty" in str(exc_info.value)

    def test_raise_if_invalid_logs_warnings(self, caplog):
        """Test that warnings are logged and do not raise."""
        result = self.error_handler.validate_input("", FormatTag.YAML)

        with caplog.at_level(logging.WARNING):
            self.error_handler.raise_if_invalid(result, ErrorType.PARSE)

        assert "yaml document is empty" in caplog.text
