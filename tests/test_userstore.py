"""Tests for the UserStore service."""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from evernote.edam.userstore.constants import EDAM_VERSION_MAJOR, EDAM_VERSION_MINOR

from pyevernote.exceptions import PyEvernoteVersionError
from pyevernote.services.userstore import UserStoreService


class UserStoreServiceTest(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.service = UserStoreService(
            "https://sandbox.evernote.com/edam/user",
            "pyevernote (Python)",
            client=self.client,
        )

    def test_check_version_sends_edam_constants(self):
        self.client.checkVersion.return_value = True
        self.assertTrue(self.service.check_version("EDAMTest"))
        self.client.checkVersion.assert_called_once_with(
            "EDAMTest", EDAM_VERSION_MAJOR, EDAM_VERSION_MINOR
        )
        self.assertTrue(self.service.version_checked)

    def test_ensure_version_raises_on_stale_version(self):
        self.client.checkVersion.return_value = False
        with self.assertRaises(PyEvernoteVersionError):
            self.service.ensure_version("EDAMTest")
        self.assertFalse(self.service.version_checked)

    def test_note_store_url(self):
        self.client.getNoteStoreUrl.return_value = (
            "https://sandbox.evernote.com/shard/s1/notestore"
        )
        self.assertEqual(
            self.service.note_store_url("S=s1:U=1"),
            "https://sandbox.evernote.com/shard/s1/notestore",
        )
        self.client.getNoteStoreUrl.assert_called_once_with("S=s1:U=1")

    def test_user(self):
        self.client.getUser.return_value = SimpleNamespace(
            id=7, username="jdoe", name=None, email="j@example.com"
        )
        account = self.service.user("S=s1:U=7")
        self.assertEqual(account.username, "jdoe")
        self.assertEqual(account.display_name, "jdoe")
        self.assertIsNone(account.service_level)

    def test_url_is_normalised(self):
        self.assertEqual(
            self.service.url, "https://sandbox.evernote.com:443/edam/user"
        )


if __name__ == "__main__":
    unittest.main()
