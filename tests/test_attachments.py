"""Tests for attachment construction."""

import hashlib
import os
import tempfile
import unittest

from pyevernote.services.notes.attachments import (
    DEFAULT_MIME,
    AttachmentFile,
    guess_mime,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 3


class AttachmentFileTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "enlogo.png")
        with open(self.path, "wb") as f:
            f.write(PNG_BYTES)

    def test_hash_and_size_match_payload(self):
        att = AttachmentFile(filename="x.bin", mime=DEFAULT_MIME, body=PNG_BYTES)
        self.assertEqual(att.body_hash, hashlib.md5(PNG_BYTES).digest())
        self.assertEqual(len(att.body_hash), 16)
        self.assertEqual(att.hash_hex, hashlib.md5(PNG_BYTES).hexdigest())
        self.assertEqual(att.size, len(PNG_BYTES))

    def test_hash_is_deterministic(self):
        a = AttachmentFile(filename=None, mime=DEFAULT_MIME, body=b"same bytes")
        b = AttachmentFile(filename="other", mime="text/plain", body=b"same bytes")
        self.assertEqual(a.hash_hex, b.hash_hex)

    def test_from_path_reads_binary_and_guesses_mime(self):
        att = AttachmentFile.from_path(self.path)
        self.assertEqual(att.filename, "enlogo.png")
        self.assertEqual(att.mime, "image/png")
        self.assertEqual(att.body, PNG_BYTES)

    def test_from_path_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            AttachmentFile.from_path(os.path.join(self.tmp.name, "missing.png"))

    def test_to_resource(self):
        resource = AttachmentFile.from_path(self.path).to_resource()
        self.assertEqual(resource.mime, "image/png")
        self.assertEqual(resource.data.body, PNG_BYTES)
        self.assertEqual(resource.data.size, len(PNG_BYTES))
        self.assertEqual(resource.data.bodyHash, hashlib.md5(PNG_BYTES).digest())
        self.assertEqual(resource.attributes.fileName, "enlogo.png")

    def test_guess_mime_fallback(self):
        self.assertEqual(guess_mime("noextension"), DEFAULT_MIME)


if __name__ == "__main__":
    unittest.main()
