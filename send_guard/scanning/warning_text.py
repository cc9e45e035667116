"""
Human-readable warning text for scan findings.

Each finding becomes one block; blocks are joined with a blank line in
finding order, which is the order the confirmation dialog shows them.
"""

from typing import Iterable, List

from send_guard.scanning.models import (
    AttachmentCountFinding,
    ExternalLinksFinding,
    Finding,
    RiskyAttachmentsFinding,
    SensitivePatternFinding,
)

BULLET = "• "
WARNING_SEPARATOR = "\n\n"

SENSITIVE_TEXT_WARNING = "⚠️ Possible HIPAA-sensitive text detected in subject/body."
EXTERNAL_LINKS_HEADER = "🔗 External links found:"
EXTERNAL_LINKS_FOOTER = "Please confirm linked content is PHI-free."
ATTACHMENT_COUNT_TEMPLATE = "📎 {count} attachment(s) detected."
RISKY_ATTACHMENTS_HEADER = "🖼️ Unscannable/risky file types:"
RISKY_ATTACHMENTS_FOOTER = "Please confirm these are PHI-free."


def _bullets(items: Iterable[str]) -> List[str]:
    return [f"{BULLET}{item}" for item in items]


def format_finding(finding: Finding, max_displayed_links: int = 8) -> str:
    """
    Render a single finding.

    Only the first max_displayed_links links are listed; the overflow count
    is computed from the full link list.

    Raises:
        TypeError: For an unknown finding type
    """
    if isinstance(finding, SensitivePatternFinding):
        return SENSITIVE_TEXT_WARNING

    if isinstance(finding, ExternalLinksFinding):
        shown = finding.links[:max_displayed_links]
        lines = [EXTERNAL_LINKS_HEADER] + _bullets(shown)
        hidden = len(finding.links) - len(shown)
        if hidden > 0:
            lines.append(f"…and {hidden} more")
        lines.append(EXTERNAL_LINKS_FOOTER)
        return "\n".join(lines)

    if isinstance(finding, AttachmentCountFinding):
        return ATTACHMENT_COUNT_TEMPLATE.format(count=finding.count)

    if isinstance(finding, RiskyAttachmentsFinding):
        lines = [RISKY_ATTACHMENTS_HEADER] + _bullets(finding.names) + [RISKY_ATTACHMENTS_FOOTER]
        return "\n".join(lines)

    raise TypeError(f"Unsupported finding type: {type(finding).__name__}")


def format_warning_message(findings: Iterable[Finding], max_displayed_links: int = 8) -> str:
    """Join all rendered findings into the dialog message."""
    return WARNING_SEPARATOR.join(
        format_finding(finding, max_displayed_links) for finding in findings
    )
