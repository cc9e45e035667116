"""
Scan Service Implementation

Connects the HTTP layer to the send-guard scanner. Stateless: each request
builds its own message source and result.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends

from api.config import APISettings, get_settings
from api.models.scan import DialogModel, FindingModel, ScanRequest, ScanResponse
from send_guard.config.guard_config import GuardConfig
from send_guard.gate.confirmation import build_dialog_request
from send_guard.scanning.scanner import ContentScanner
from send_guard.scanning.sources import InMemoryMessage
from send_guard.scanning.warning_text import format_warning_message

logger = logging.getLogger(__name__)


class ScanService:
    """
    Service layer for send-time scans.

    Runs the same scanner the gate uses and, when confirmation is needed,
    returns the dialog the client has to open instead of opening it itself.
    """

    def __init__(self, config: GuardConfig, scanner: Optional[ContentScanner] = None):
        self.config = config
        self.scanner = scanner or ContentScanner(config)

    async def scan(self, request: ScanRequest) -> ScanResponse:
        """
        Scan the submitted message.

        Args:
            request: Message channels as read by the client

        Returns:
            ScanResponse with findings and, if needed, the dialog to open

        Raises:
            PipelineFailure: If scanning fails; surfaced to the client as an error
        """
        source = InMemoryMessage(
            subject=request.subject or "",
            body_text=request.body_text or "",
            body_html=request.body_html or "",
            attachments=[attachment.to_ref() for attachment in request.attachments or []],
        )
        result = await self.scanner.scan(source)

        if not result:
            return ScanResponse(allow_immediately=True)

        warning_message = format_warning_message(result, self.config.max_displayed_links)
        dialog_request = build_dialog_request(self.config, warning_message)
        logger.info(f"Scan requires confirmation for {len(result)} finding(s)")

        return ScanResponse(
            allow_immediately=False,
            findings=[FindingModel.from_finding(finding) for finding in result],
            warning_message=warning_message,
            dialog=DialogModel.from_request(dialog_request),
        )


@lru_cache()
def _build_scan_service(config: GuardConfig) -> ScanService:
    return ScanService(config)


def get_scan_service(settings: APISettings = Depends(get_settings)) -> ScanService:
    """Dependency provider for ScanService."""
    return _build_scan_service(settings.to_guard_config())
