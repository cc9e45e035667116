"""
Error Response Models

Defines the error envelope returned by the send-guard API. Clients must
treat any error response from the scan endpoint as a Block decision.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error response model for API errors."""
    status: str = Field(
        default="error",
        description="Error status indicator"
    )
    message: str = Field(
        ...,
        description="Human-readable error message"
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code"
    )
    verdict: str = Field(
        default="block",
        description="Decision the client must apply while this error stands"
    )
    details: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp"
    )


class ValidationErrorItem(BaseModel):
    """Validation error detail for one field."""
    loc: List[str] = Field(
        ...,
        description="Error location (field path)"
    )
    msg: str = Field(
        ...,
        description="Error message"
    )
    type: str = Field(
        ...,
        description="Error type"
    )


class ValidationErrorResponse(ErrorResponse):
    """Error response carrying field-level validation failures."""
    validation_errors: List[ValidationErrorItem] = Field(
        ...,
        description="List of specific validation errors"
    )
