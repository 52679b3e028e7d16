"""Tests for dirscout exceptions."""

from pathlib import Path

from dirscout.exceptions import DirectoryUnreadableError
from dirscout.exceptions import DirscoutError
from dirscout.exceptions import MetadataUnavailableError
from dirscout.exceptions import describe_os_error


class TestFilesystemErrors:
    """Tests for DirectoryUnreadableError and MetadataUnavailableError."""

    def test_message_includes_path_and_reason(self):
        """Test that the message names the path and the system error."""
        cause = PermissionError(13, "Permission denied")

        error = DirectoryUnreadableError(Path("/root/private"), cause)

        assert str(error) == "/root/private: Permission denied"
        assert error.path == Path("/root/private")
        assert error.cause is cause
        assert error.reason == "Permission denied"

    def test_metadata_error_keeps_cause(self):
        cause = FileNotFoundError(2, "No such file or directory")

        error = MetadataUnavailableError(Path("/tmp/gone"), cause)

        assert error.reason == "No such file or directory"
        assert isinstance(error, DirscoutError)

    def test_errors_are_distinct(self):
        """Test that the two kinds can be caught separately."""
        cause = OSError(5, "Input/output error")

        assert not isinstance(
            DirectoryUnreadableError("/x", cause), MetadataUnavailableError
        )
        assert not isinstance(
            MetadataUnavailableError("/x", cause), DirectoryUnreadableError
        )


class TestDescribeOsError:
    """Tests for describe_os_error()."""

    def test_uses_strerror(self):
        assert describe_os_error(OSError(2, "No such file or directory")) == (
            "No such file or directory"
        )

    def test_falls_back_to_message(self):
        assert describe_os_error(OSError("custom failure")) == "custom failure"
