"""
Scan Data Models

Defines request and response models for the send-time scan endpoint.

Design Considerations:
- Request mirrors what the mail client can read at send time
- Absent channels default to empty values rather than failing validation
- Findings keep their fixed display order
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from send_guard.gate.confirmation import DialogRequest
from send_guard.scanning.models import AttachmentRef, Finding


class AttachmentModel(BaseModel):
    """Attachment reference as reported by the mail client."""
    name: Optional[str] = Field(
        default="",
        description="Attachment file name"
    )
    id: Optional[str] = Field(
        default="",
        description="Opaque attachment identifier, used when the name is empty"
    )

    def to_ref(self) -> AttachmentRef:
        return AttachmentRef(name=self.name or "", attachment_id=self.id or "")


class ScanRequest(BaseModel):
    """
    Request model for scanning an outgoing message.

    Every field is optional; a missing or null channel is scanned as empty.
    """
    subject: Optional[str] = Field(
        default="",
        description="Subject line; null is scanned as empty"
    )
    body_text: Optional[str] = Field(
        default="",
        description="Body coerced to plain text; null when retrieval failed"
    )
    body_html: Optional[str] = Field(
        default="",
        description="Body as HTML; null when retrieval failed"
    )
    attachments: Optional[List[AttachmentModel]] = Field(
        default_factory=list,
        description="Attachments in host order"
    )


class FindingModel(BaseModel):
    """One detected concern."""
    kind: str = Field(
        ...,
        description="Finding category"
    )
    links: Optional[List[str]] = Field(
        default=None,
        description="External links, for external_links findings"
    )
    count: Optional[int] = Field(
        default=None,
        ge=1,
        description="Attachment count, for attachment_count findings"
    )
    names: Optional[List[str]] = Field(
        default=None,
        description="Risky attachment names, for risky_attachments findings"
    )

    @classmethod
    def from_finding(cls, finding: Finding) -> "FindingModel":
        return cls(**finding.to_dict())


class DialogModel(BaseModel):
    """Confirmation dialog the client should open."""
    url: str = Field(
        ...,
        description="Confirmation page URL carrying the warning text"
    )
    height: int = Field(
        ...,
        ge=1,
        le=100,
        description="Dialog height as a percentage of the host window"
    )
    width: int = Field(
        ...,
        ge=1,
        le=100,
        description="Dialog width as a percentage of the host window"
    )
    display_in_iframe: bool = Field(
        default=True,
        description="Whether the host should render the dialog inline"
    )

    @classmethod
    def from_request(cls, request: DialogRequest) -> "DialogModel":
        return cls(
            url=request.url,
            height=request.height,
            width=request.width,
            display_in_iframe=request.display_in_iframe,
        )


class ScanResponse(BaseModel):
    """
    Response model for a scan.

    allow_immediately is true only when there are no findings; otherwise
    the client must open the dialog and send only on an "allow" answer.
    """
    allow_immediately: bool = Field(
        ...,
        description="Whether the message may be sent without confirmation"
    )
    findings: List[FindingModel] = Field(
        default_factory=list,
        description="Findings in display order"
    )
    warning_message: Optional[str] = Field(
        default=None,
        description="Assembled warning text shown in the dialog"
    )
    dialog: Optional[DialogModel] = Field(
        default=None,
        description="Dialog to open when confirmation is required"
    )
