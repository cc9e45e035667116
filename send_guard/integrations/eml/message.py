"""Outgoing-message source backed by an RFC 822 ``.eml`` file."""

import email
import logging
from email import policy
from email.message import EmailMessage
from pathlib import Path
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from send_guard.errors import RetrievalFailure
from send_guard.scanning.base import MessageSource
from send_guard.scanning.models import AttachmentRef

logger = logging.getLogger(__name__)


def html_to_text(content: str) -> str:
    """Visible text of an HTML body, one line per text node."""
    soup = BeautifulSoup(content, 'html.parser')

    # Remove script and style elements
    for element in soup(["script", "style"]):
        element.decompose()

    lines = (line.strip() for line in soup.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


class EmlMessageSource(MessageSource):
    """Expose a parsed ``.eml`` message through the MessageSource contract."""

    def __init__(self, message: EmailMessage):
        self._message = message

    @classmethod
    def from_bytes(cls, raw_eml: bytes) -> "EmlMessageSource":
        return cls(email.message_from_bytes(raw_eml, policy=policy.default))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "EmlMessageSource":
        return cls.from_bytes(Path(path).read_bytes())

    @property
    def subject(self) -> str:
        return str(self._message.get("Subject", "") or "")

    @property
    def attachments(self) -> List[AttachmentRef]:
        refs = []
        for index, part in enumerate(self._message.iter_attachments()):
            content_id = (part.get("Content-ID") or "").strip("<>")
            refs.append(AttachmentRef(
                name=part.get_filename() or "",
                attachment_id=content_id or f"attachment-{index}",
            ))
        return refs

    async def get_body_text(self) -> str:
        """Plain-text body; HTML-only messages are coerced to their visible text."""
        if self._message.get_body(preferencelist=("plain",)) is not None:
            return self._body_content("plain")
        html = self._body_content("html")
        if not html:
            return ""
        logger.debug("No text/plain part, deriving body text from text/html")
        return html_to_text(html)

    async def get_body_html(self) -> str:
        return self._body_content("html")

    def _body_content(self, subtype: str) -> str:
        part = self._message.get_body(preferencelist=(subtype,))
        if part is None:
            return ""
        try:
            return part.get_content()
        except (LookupError, ValueError) as e:
            raise RetrievalFailure(f"text/{subtype} body", str(e)) from e
