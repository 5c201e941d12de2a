"""Tests for note title validation."""

import unittest

from evernote.edam.limits.constants import (
    EDAM_NOTE_TITLE_LEN_MAX,
    EDAM_NOTE_TITLE_LEN_MIN,
)

from pyevernote.exceptions import PyEvernoteTitleError
from pyevernote.services.notes.validation import is_valid_title, validate_title


class ValidateTitleTest(unittest.TestCase):
    def test_accepts_plain_titles(self):
        for title in ("Test note from edam_test.py", "a", "Hello world", "Zürich ✓"):
            with self.subTest(title=title):
                self.assertEqual(validate_title(title), title)

    def test_length_bounds(self):
        self.assertTrue(is_valid_title("x" * EDAM_NOTE_TITLE_LEN_MIN))
        self.assertTrue(is_valid_title("x" * EDAM_NOTE_TITLE_LEN_MAX))
        self.assertFalse(is_valid_title("x" * (EDAM_NOTE_TITLE_LEN_MAX + 1)))
        self.assertFalse(is_valid_title(""))

    def test_rejects_surrounding_whitespace(self):
        for title in (" leading", "trailing ", " nbsp", "ideographic　"):
            with self.subTest(title=title):
                self.assertFalse(is_valid_title(title))

    def test_rejects_control_characters(self):
        for title in ("line\nbreak", "tab\there", "bell\x07", "trailing\n"):
            with self.subTest(title=title):
                self.assertFalse(is_valid_title(title))

    def test_error_carries_title_and_reason(self):
        with self.assertRaises(PyEvernoteTitleError) as ctx:
            validate_title("x" * (EDAM_NOTE_TITLE_LEN_MAX + 1))
        self.assertEqual(ctx.exception.title, "x" * (EDAM_NOTE_TITLE_LEN_MAX + 1))
        self.assertIn("longer than", ctx.exception.reason)


if __name__ == "__main__":
    unittest.main()
