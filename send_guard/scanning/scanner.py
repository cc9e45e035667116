"""
Send-Time Content Scanner

Retrieves the outgoing message's content channels and runs the fixed set of
checks over them, producing an ordered list of findings for the gate.

Design Considerations:
- Body renderings are fetched concurrently and fail independently
- A failed channel degrades to empty content, never to an error
- Findings are emitted in a fixed order that the dialog reuses
- Unexpected faults surface as PipelineFailure for the gate to block on
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from send_guard.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig
from send_guard.errors import PipelineFailure
from send_guard.scanning.base import MessageSource
from send_guard.scanning.links import extract_external_links
from send_guard.scanning.models import (
    AttachmentCountFinding,
    AttachmentRef,
    ExternalLinksFinding,
    Finding,
    MessageContent,
    RiskyAttachmentsFinding,
    ScanResult,
    SensitivePatternFinding,
)
from send_guard.scanning.patterns import contains_sensitive_content, is_risky_attachment

logger = logging.getLogger(__name__)


class ContentScanner:
    """
    Scanner implementing the four send-time checks.

    Checks, each contributing at most one finding, in this order:
    1. Sensitive patterns in subject or plain-text body
    2. External links in HTML and plain-text bodies
    3. Attachment count whenever any attachment is present
    4. Attachments with unscannable file types
    """

    def __init__(self, config: Optional[GuardConfig] = None):
        """
        Initialize the scanner with the static guard configuration.

        Args:
            config: Guard configuration; defaults to DEFAULT_GUARD_CONFIG
        """
        self.config = config or DEFAULT_GUARD_CONFIG

    async def scan(self, source: MessageSource) -> ScanResult:
        """
        Retrieve and evaluate an outgoing message.

        Args:
            source: Host message object

        Returns:
            ScanResult: Ordered findings, empty when there is nothing to confirm

        Raises:
            PipelineFailure: On any fault other than a channel retrieval failure
        """
        try:
            content = await self.retrieve(source)
            return self.evaluate(content)
        except PipelineFailure:
            raise
        except Exception as e:
            raise PipelineFailure(f"Scan pipeline failed: {e}") from e

    async def retrieve(self, source: MessageSource) -> MessageContent:
        """
        Read every content channel, substituting empty content for failures.

        The two body renderings are requested concurrently and joined once
        both have resolved or defaulted.
        """
        body_text, body_html = await asyncio.gather(
            self._retrieve_body(source.get_body_text, "body text"),
            self._retrieve_body(source.get_body_html, "body html"),
        )
        subject = self._read_channel(lambda: source.subject, "subject", "")
        attachments = self._read_channel(lambda: source.attachments, "attachments", [])

        return MessageContent(
            subject=subject or "",
            body_text=body_text,
            body_html=body_html,
            attachments=list(attachments or []),
        )

    def evaluate(self, content: MessageContent) -> ScanResult:
        """Run the checks over already retrieved content."""
        findings: List[Finding] = []

        if contains_sensitive_content(content.subject) or contains_sensitive_content(content.body_text):
            findings.append(SensitivePatternFinding())

        external_links = extract_external_links(
            content.body_html, content.body_text, self.config.internal_domain
        )
        if external_links:
            findings.append(ExternalLinksFinding(links=tuple(external_links)))

        if content.attachments:
            findings.append(AttachmentCountFinding(count=len(content.attachments)))

        risky_names = self._risky_attachment_names(content.attachments)
        if risky_names:
            findings.append(RiskyAttachmentsFinding(names=tuple(risky_names)))

        logger.info(
            f"Scan produced {len(findings)} finding(s): "
            f"{[finding.kind.value for finding in findings]}"
        )
        return ScanResult(findings=findings)

    def _risky_attachment_names(self, attachments: List[AttachmentRef]) -> List[str]:
        names = (attachment.display_name for attachment in attachments)
        return [name for name in names if is_risky_attachment(name, self.config.risky_extensions)]

    async def _retrieve_body(self, fetch: Callable[[], Awaitable[Optional[str]]], channel: str) -> str:
        try:
            value = await fetch()
            return value or ""
        except Exception as e:
            logger.warning(f"Retrieval of {channel} failed, treating as empty: {e}")
            return ""

    def _read_channel(self, read: Callable[[], Any], channel: str, default: Any) -> Any:
        try:
            return read()
        except Exception as e:
            logger.warning(f"Reading {channel} failed, treating as empty: {e}")
            return default
