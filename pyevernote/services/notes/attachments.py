"""
Note attachments.

A Resource carries the raw bytes, their MD5 digest and length, the MIME
type and, optionally, the original file name. The same digest, hex encoded,
is what an <en-media> tag in the note content uses to point at the resource.
"""

from __future__ import annotations

import hashlib
import logging
import mimetypes
import os
from dataclasses import dataclass, field
from typing import Optional

from evernote.edam.type.ttypes import Data, Resource, ResourceAttributes

LOGGER = logging.getLogger(__name__)

DEFAULT_MIME = "application/octet-stream"


def guess_mime(filename: str) -> str:
    mime, _ = mimetypes.guess_type(filename)
    return mime or DEFAULT_MIME


@dataclass(frozen=True)
class AttachmentFile:
    filename: Optional[str]
    mime: str
    body: bytes = field(repr=False)

    @property
    def body_hash(self) -> bytes:
        """Raw 16-byte MD5 digest of the body."""
        return hashlib.md5(self.body).digest()

    @property
    def hash_hex(self) -> str:
        return hashlib.md5(self.body).hexdigest()

    @property
    def size(self) -> int:
        return len(self.body)

    @classmethod
    def from_path(cls, path: str, mime: Optional[str] = None) -> "AttachmentFile":
        """Read ``path`` in binary mode. Missing files raise FileNotFoundError."""
        with open(path, "rb") as f:
            body = f.read()
        filename = os.path.basename(path)
        LOGGER.debug("Loaded attachment %s (%d bytes)", filename, len(body))
        return cls(filename=filename, mime=mime or guess_mime(filename), body=body)

    def to_resource(self) -> Resource:
        data = Data()
        data.size = self.size
        data.bodyHash = self.body_hash
        data.body = self.body

        resource = Resource()
        resource.mime = self.mime
        resource.data = data
        if self.filename:
            resource.attributes = ResourceAttributes()
            resource.attributes.fileName = self.filename
        return resource
