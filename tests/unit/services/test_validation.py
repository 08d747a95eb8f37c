"""Tests for start directory validation."""

import pytest

from wipedir.common.exception import InvalidArgumentError, StartDirectoryError
from wipedir.services.validation import validate_start_directory


class TestValidateStartDirectory:
    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_blank_value_rejected(self, value):
        with pytest.raises(StartDirectoryError) as exc_info:
            validate_start_directory(value)

        assert "can't be null or empty" in str(exc_info.value)

    def test_missing_directory_rejected(self, tmp_path):
        missing = str(tmp_path / "missing")

        with pytest.raises(StartDirectoryError) as exc_info:
            validate_start_directory(missing)

        assert str(exc_info.value) == f"The argument -s with the value '{missing}' is not a directory."
        assert exc_info.value.value == missing

    def test_regular_file_rejected(self, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("content")

        with pytest.raises(StartDirectoryError):
            validate_start_directory(str(file_path))

        assert file_path.read_text() == "content"

    def test_existing_directory_accepted(self, tmp_path):
        assert validate_start_directory(str(tmp_path)) == tmp_path

    def test_is_an_invalid_argument_error(self):
        with pytest.raises(InvalidArgumentError):
            validate_start_directory("")
