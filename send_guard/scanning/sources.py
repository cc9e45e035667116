"""
In-memory message source used by the HTTP service and tests.
"""

from typing import Iterable, List, Optional

from send_guard.scanning.base import MessageSource
from send_guard.scanning.models import AttachmentRef


class InMemoryMessage(MessageSource):
    """Message source backed by plain values."""

    def __init__(self,
                 subject: str = "",
                 body_text: str = "",
                 body_html: str = "",
                 attachments: Optional[Iterable[AttachmentRef]] = None):
        self._subject = subject
        self._body_text = body_text
        self._body_html = body_html
        self._attachments = list(attachments or [])

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def attachments(self) -> List[AttachmentRef]:
        return list(self._attachments)

    async def get_body_text(self) -> str:
        return self._body_text

    async def get_body_html(self) -> str:
        return self._body_html
