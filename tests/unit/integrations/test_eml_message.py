"""
Unit tests for the .eml message source.
"""

from email.message import EmailMessage
from unittest.mock import patch

import pytest

from send_guard.errors import RetrievalFailure
from send_guard.integrations.eml.message import EmlMessageSource
from send_guard.scanning.models import AttachmentRef, FindingKind
from send_guard.scanning.scanner import ContentScanner
from tests.test_infrastructure import guard_config


def build_eml(subject="Lab results", text="Plain body", html=None, attachments=()):
    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = "nurse@innobothealth.com"
    message["To"] = "doctor@example.com"
    message.set_content(text)
    if html is not None:
        message.add_alternative(html, subtype="html")
    for filename, maintype, subtype in attachments:
        message.add_attachment(b"\x00\x01", maintype=maintype, subtype=subtype, filename=filename)
    return message.as_bytes()


class TestEmlMessageSource:

    def test_subject(self):
        source = EmlMessageSource.from_bytes(build_eml(subject="Weekly sync"))
        assert source.subject == "Weekly sync"

    def test_missing_subject_is_empty(self):
        message = EmailMessage()
        message.set_content("body")
        assert EmlMessageSource(message).subject == ""

    @pytest.mark.asyncio
    async def test_plain_and_html_bodies(self):
        source = EmlMessageSource.from_bytes(
            build_eml(text="hello there", html="<p>hello <b>there</b></p>")
        )

        assert (await source.get_body_text()).strip() == "hello there"
        assert "<b>there</b>" in await source.get_body_html()

    @pytest.mark.asyncio
    async def test_missing_html_body_is_empty(self):
        source = EmlMessageSource.from_bytes(build_eml())
        assert await source.get_body_html() == ""

    def test_attachments_in_order(self):
        source = EmlMessageSource.from_bytes(build_eml(attachments=[
            ("scan.zip", "application", "zip"),
            ("xray.png", "image", "png"),
        ]))

        assert source.attachments == [
            AttachmentRef(name="scan.zip", attachment_id="attachment-0"),
            AttachmentRef(name="xray.png", attachment_id="attachment-1"),
        ]

    def test_no_attachments(self):
        assert EmlMessageSource.from_bytes(build_eml()).attachments == []

    def test_from_path(self, tmp_path):
        path = tmp_path / "outgoing.eml"
        path.write_bytes(build_eml(subject="From disk"))

        assert EmlMessageSource.from_path(path).subject == "From disk"

    @pytest.mark.asyncio
    async def test_undecodable_body_raises_retrieval_failure(self):
        source = EmlMessageSource.from_bytes(build_eml())
        with patch("email.message.EmailMessage.get_content", side_effect=LookupError("unknown-8bit")):
            with pytest.raises(RetrievalFailure) as exc_info:
                await source.get_body_text()

        assert exc_info.value.channel == "text/plain body"

    @pytest.mark.asyncio
    async def test_scanned_end_to_end(self, guard_config):
        raw = build_eml(
            subject="Follow-up",
            text="Patient Name: Jane Roe",
            html='<p><a href="https://share.example.com/f">file</a></p>',
            attachments=[("photo.JPG", "image", "jpeg")],
        )

        result = await ContentScanner(guard_config).scan(EmlMessageSource.from_bytes(raw))

        assert result.kinds == [
            FindingKind.SENSITIVE_PATTERN,
            FindingKind.EXTERNAL_LINKS,
            FindingKind.ATTACHMENT_COUNT,
            FindingKind.RISKY_ATTACHMENTS,
        ]
        assert result.get(FindingKind.RISKY_ATTACHMENTS).names == ("photo.JPG",)


class TestHtmlOnlyMessages:
    """Messages without a text/plain part expose their HTML as plain text."""

    def html_only(self, html):
        message = EmailMessage()
        message["Subject"] = "Follow-up"
        message.set_content(html, subtype="html")
        return EmlMessageSource.from_bytes(message.as_bytes())

    @pytest.mark.asyncio
    async def test_body_text_derived_from_html(self):
        source = self.html_only(
            "<html><head><style>p {color: red}</style></head>"
            "<body><p>Patient Name: John Doe</p><p>SSN 123-45-6789</p></body></html>"
        )

        text = await source.get_body_text()

        assert text == "Patient Name: John Doe\nSSN 123-45-6789"
        assert "<p>" in await source.get_body_html()

    @pytest.mark.asyncio
    async def test_html_only_phi_is_flagged(self, guard_config):
        source = self.html_only("<p>Patient Name: John Doe, SSN 123-45-6789</p>")

        result = await ContentScanner(guard_config).scan(source)

        assert result.kinds == [FindingKind.SENSITIVE_PATTERN]

    @pytest.mark.asyncio
    async def test_plain_part_preferred_over_html(self):
        source = EmlMessageSource.from_bytes(build_eml(text="plain only", html="<p>Diagnosis</p>"))

        assert (await source.get_body_text()).strip() == "plain only"
