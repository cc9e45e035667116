"""
Shared data models for send-time scanning.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple


class Verdict(Enum):
    """Final decision for one send attempt."""
    ALLOW = "allow"
    BLOCK = "block"

    @property
    def allow_event(self) -> bool:
        """Value handed to the host completion callback."""
        return self is Verdict.ALLOW

    @classmethod
    def from_response(cls, payload: Any) -> "Verdict":
        # Only the exact approval token allows; anything else blocks
        if isinstance(payload, str) and payload == cls.ALLOW.value:
            return cls.ALLOW
        return cls.BLOCK


class FindingKind(Enum):
    """Finding categories, listed in display order."""
    SENSITIVE_PATTERN = "sensitive_pattern"
    EXTERNAL_LINKS = "external_links"
    ATTACHMENT_COUNT = "attachment_count"
    RISKY_ATTACHMENTS = "risky_attachments"


@dataclass(frozen=True)
class AttachmentRef:
    """Reference to an attachment; content is never read."""
    name: str = ""
    attachment_id: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.attachment_id or ""


@dataclass
class MessageContent:
    """Retrieved snapshot of a message about to be sent."""
    subject: str = ""
    body_text: str = ""
    body_html: str = ""
    attachments: List[AttachmentRef] = field(default_factory=list)


@dataclass(frozen=True)
class Finding:
    """Base class for one detected concern."""
    kind: ClassVar[FindingKind]

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class SensitivePatternFinding(Finding):
    """Subject or plain-text body matched a sensitive-content pattern."""
    kind: ClassVar[FindingKind] = FindingKind.SENSITIVE_PATTERN


@dataclass(frozen=True)
class ExternalLinksFinding(Finding):
    """Body references links outside the internal domain."""
    kind: ClassVar[FindingKind] = FindingKind.EXTERNAL_LINKS
    links: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "links": list(self.links)}


@dataclass(frozen=True)
class AttachmentCountFinding(Finding):
    """Message carries one or more attachments."""
    kind: ClassVar[FindingKind] = FindingKind.ATTACHMENT_COUNT
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count}


@dataclass(frozen=True)
class RiskyAttachmentsFinding(Finding):
    """Attachments whose file type cannot be screened."""
    kind: ClassVar[FindingKind] = FindingKind.RISKY_ATTACHMENTS
    names: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "names": list(self.names)}


@dataclass
class ScanResult:
    """
    Ordered findings for one message.

    An empty result is the only outcome that lets a send through without
    asking the user.
    """
    findings: List[Finding] = field(default_factory=list)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.findings)

    def __len__(self) -> int:
        return len(self.findings)

    def __bool__(self) -> bool:
        return bool(self.findings)

    @property
    def kinds(self) -> List[FindingKind]:
        return [finding.kind for finding in self.findings]

    def get(self, kind: FindingKind) -> Optional[Finding]:
        for finding in self.findings:
            if finding.kind is kind:
                return finding
        return None
