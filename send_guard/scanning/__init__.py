"""
Send-time scanning package initialization.
"""

from .models import (
    AttachmentRef,
    AttachmentCountFinding,
    ExternalLinksFinding,
    Finding,
    FindingKind,
    MessageContent,
    RiskyAttachmentsFinding,
    ScanResult,
    SensitivePatternFinding,
    Verdict
)
from .base import MessageSource
from .sources import InMemoryMessage
from .patterns import contains_sensitive_content, is_risky_attachment
from .links import extract_external_links
from .warning_text import format_finding, format_warning_message
from .scanner import ContentScanner

__all__ = [
    'AttachmentRef',
    'AttachmentCountFinding',
    'ExternalLinksFinding',
    'Finding',
    'FindingKind',
    'MessageContent',
    'RiskyAttachmentsFinding',
    'ScanResult',
    'SensitivePatternFinding',
    'Verdict',
    'MessageSource',
    'InMemoryMessage',
    'contains_sensitive_content',
    'is_risky_attachment',
    'extract_external_links',
    'format_finding',
    'format_warning_message',
    'ContentScanner'
]
