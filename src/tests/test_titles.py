"""Unit tests for the title policy and path matching."""

import pytest

from quicknotes.core.errors import EmptyTitleError, InvalidTitleError, ValidationError
from quicknotes.core.titles import is_valid_title, match_path, validate_title


# ============================================================
# Path matching
# ============================================================


class TestMatchPath:
    def test_view_path(self):
        assert match_path("/view/abc123") == ("view", "abc123")

    def test_edit_path(self):
        assert match_path("/edit/Shopping") == ("edit", "Shopping")

    def test_save_path(self):
        assert match_path("/save/Todo2") == ("save", "Todo2")

    @pytest.mark.parametrize(
        "path",
        [
            "/view/ab-c",
            "/view/ab c",
            "/view/",
            "/view",
            "/view/a/b",
            "/view/../etc",
            "/view/café",
            "/view/abc\n",
            "/delete/abc",
            "/VIEW/abc",
            "view/abc",
        ],
    )
    def test_rejected_paths(self, path):
        assert match_path(path) is None


# ============================================================
# Title validation
# ============================================================


class TestValidateTitle:
    def test_valid_title_returned(self):
        assert validate_title("Notes2024") == "Notes2024"

    def test_surrounding_whitespace_trimmed(self):
        assert validate_title("  Notes \t") == "Notes"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty_title(self, raw):
        with pytest.raises(EmptyTitleError):
            validate_title(raw)

    @pytest.mark.parametrize("raw", ["my notes", "a.b", "../x", "café", "a/b"])
    def test_invalid_characters(self, raw):
        with pytest.raises(InvalidTitleError):
            validate_title(raw)

    def test_errors_are_validation_errors(self):
        assert issubclass(EmptyTitleError, ValidationError)
        assert issubclass(InvalidTitleError, ValidationError)

    def test_is_valid_title(self):
        assert is_valid_title("abcXYZ019")
        assert not is_valid_title("")
        assert not is_valid_title("abc_def")
