"""
API Models Package
"""

from api.models.errors import ErrorResponse, ValidationErrorItem, ValidationErrorResponse
from api.models.scan import AttachmentModel, DialogModel, FindingModel, ScanRequest, ScanResponse

__all__ = [
    "ErrorResponse",
    "ValidationErrorItem",
    "ValidationErrorResponse",
    "AttachmentModel",
    "DialogModel",
    "FindingModel",
    "ScanRequest",
    "ScanResponse"
]
