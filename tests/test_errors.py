"""Tests for formwire.errors module."""

import pytest
from formwire.errors import (
    FormwireError,
    MultipartError,
    FileReadError,
    PartWriteError,
    BodyAssemblyError,
)


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_formwire_error_is_exception(self):
        """Test FormwireError inherits from Exception."""
        assert issubclass(FormwireError, Exception)

    def test_multipart_error_is_io_error(self):
        """Test MultipartError is both a FormwireError and an OSError."""
        assert issubclass(MultipartError, FormwireError)
        assert issubclass(MultipartError, OSError)

    def test_build_errors_inherit_multipart_error(self):
        """Test the three build failures share MultipartError."""
        for cls in (FileReadError, PartWriteError, BodyAssemblyError):
            assert issubclass(cls, MultipartError)


class TestErrorInstantiation:
    """Tests for error instantiation."""

    def test_file_read_error_with_message(self):
        """Test FileReadError keeps its message."""
        with pytest.raises(FileReadError, match="Error copying file content: a.tml"):
            raise FileReadError("Error copying file content: a.tml")

    def test_message_is_not_errno(self):
        """Test a single message argument is not parsed as errno."""
        err = PartWriteError("Error writing multipart part: field")
        assert str(err) == "Error writing multipart part: field"
        assert err.errno is None

    def test_cause_is_chained(self):
        """Test raise-from preserves the original cause."""
        cause = PermissionError("denied")
        try:
            raise BodyAssemblyError("boom") from cause
        except OSError as e:
            assert e.__cause__ is cause


class TestErrorCatching:
    """Tests for catching errors at different hierarchy levels."""

    def test_catch_all_as_formwire_error(self):
        """Test all custom errors can be caught as FormwireError."""
        errors = [
            MultipartError("multipart"),
            FileReadError("file"),
            PartWriteError("part"),
            BodyAssemblyError("body"),
        ]
        for error in errors:
            with pytest.raises(FormwireError):
                raise error
