"""
ENML (Evernote Markup Language) content builder.

Notes are XHTML-like documents rooted at <en-note>. Attachments are shown
inline with an <en-media> tag that names the resource by the hex MD5 hash
of its body. See http://dev.evernote.com/doc/articles/enml.php
"""

from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import escape, quoteattr

from .attachments import AttachmentFile

ENML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<!DOCTYPE en-note SYSTEM "http://xml.evernote.com/pub/enml2.dtd">'
)


def media_tag(attachment: AttachmentFile) -> str:
    return (
        f"<en-media type={quoteattr(attachment.mime)} "
        f"hash={quoteattr(attachment.hash_hex)}/>"
    )


def text_to_enml(text: str) -> str:
    """Escape plain text; newlines become <br/>."""
    lines = text.replace("\r\n", "\n").split("\n")
    return "<br/>".join(escape(line) for line in lines)


def render_note(body_text: str = "", attachments: Iterable[AttachmentFile] = ()) -> str:
    parts = [ENML_HEADER, "<en-note>"]
    if body_text:
        parts.append(text_to_enml(body_text))
    media = [media_tag(a) for a in attachments]
    if media:
        if body_text:
            parts.append("<br/>")
        parts.extend(media)
    parts.append("</en-note>")
    return "".join(parts)
