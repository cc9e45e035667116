"""
Unit tests for warning text assembly.
"""

import pytest

from send_guard.scanning.models import (
    AttachmentCountFinding,
    ExternalLinksFinding,
    Finding,
    RiskyAttachmentsFinding,
    SensitivePatternFinding,
)
from send_guard.scanning.warning_text import format_finding, format_warning_message


class TestFormatFinding:
    """Test suite for rendering individual findings."""

    def test_sensitive_pattern(self):
        assert format_finding(SensitivePatternFinding()) == (
            "⚠️ Possible HIPAA-sensitive text detected in subject/body."
        )

    def test_external_links_without_truncation(self):
        finding = ExternalLinksFinding(links=("https://a.example.com", "https://b.example.com"))

        assert format_finding(finding) == (
            "🔗 External links found:\n"
            "• https://a.example.com\n"
            "• https://b.example.com\n"
            "Please confirm linked content is PHI-free."
        )

    def test_external_links_truncated_after_eight(self):
        links = tuple(f"https://site{i}.example.com" for i in range(11))

        text = format_finding(ExternalLinksFinding(links=links))
        lines = text.split("\n")

        assert lines[0] == "🔗 External links found:"
        assert lines[1:9] == [f"• https://site{i}.example.com" for i in range(8)]
        assert lines[9] == "…and 3 more"
        assert lines[10] == "Please confirm linked content is PHI-free."
        assert "site8" not in text

    def test_exactly_eight_links_not_truncated(self):
        links = tuple(f"https://site{i}.example.com" for i in range(8))

        assert "more" not in format_finding(ExternalLinksFinding(links=links))

    def test_custom_display_limit(self):
        links = ("https://a.example.com", "https://b.example.com", "https://c.example.com")

        text = format_finding(ExternalLinksFinding(links=links), max_displayed_links=1)

        assert "• https://a.example.com\n…and 2 more" in text

    def test_attachment_count(self):
        assert format_finding(AttachmentCountFinding(count=3)) == "📎 3 attachment(s) detected."

    def test_risky_attachments(self):
        finding = RiskyAttachmentsFinding(names=("scan.zip", "Photo.JPG"))

        assert format_finding(finding) == (
            "🖼️ Unscannable/risky file types:\n"
            "• scan.zip\n"
            "• Photo.JPG\n"
            "Please confirm these are PHI-free."
        )

    def test_unknown_finding_type_raises(self):
        with pytest.raises(TypeError):
            format_finding(Finding())


class TestFormatWarningMessage:
    """Test suite for joining findings into the dialog message."""

    def test_blocks_joined_with_blank_line_in_order(self):
        findings = [
            SensitivePatternFinding(),
            AttachmentCountFinding(count=1),
            RiskyAttachmentsFinding(names=("scan.zip",)),
        ]

        message = format_warning_message(findings)

        assert message.split("\n\n") == [
            "⚠️ Possible HIPAA-sensitive text detected in subject/body.",
            "📎 1 attachment(s) detected.",
            "🖼️ Unscannable/risky file types:\n• scan.zip\nPlease confirm these are PHI-free.",
        ]

    def test_no_findings_gives_empty_message(self):
        assert format_warning_message([]) == ""
