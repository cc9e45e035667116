"""
Scan API Routes

Exposes the send-time scanner to mail-client add-ins. The add-in calls
POST /scan from its before-send handler, opens the returned dialog when
confirmation is required, and completes the send only on an "allow" answer.
"""

import logging

from fastapi import APIRouter, Depends

from api.models.errors import ErrorResponse
from api.models.scan import ScanRequest, ScanResponse
from api.services.scan_service import ScanService, get_scan_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scan", tags=["Send Screening"])


@router.post(
    "",
    response_model=ScanResponse,
    summary="Screen an outgoing message",
    responses={500: {"model": ErrorResponse, "description": "Screening failed; block the send"}},
)
async def scan_message(
    request: ScanRequest,
    scan_service: ScanService = Depends(get_scan_service)
):
    """
    Screen an outgoing message for PHI indicators, external links and attachments.

    Returns allow_immediately=true when nothing was found. Otherwise returns
    the findings in display order together with the dialog to open.
    Pipeline failures are answered by the registered error handlers.
    """
    return await scan_service.scan(request)
