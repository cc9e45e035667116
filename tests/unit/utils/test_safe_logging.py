"""
Unit tests for encoding-safe logging.
"""

import logging
from unittest.mock import patch

import pytest

from send_guard.utils.safe_logging import (
    SafeFormatter,
    configure_safe_logging,
    has_limited_encoding,
    make_ascii_safe,
)


class TestMakeAsciiSafe:

    def test_warning_symbols_replaced(self):
        text = "⚠️ text\n🔗 links\n• one\n…and 2 more\n📎 1\n🖼️ types"

        assert make_ascii_safe(text) == (
            "[WARNING] text\n[LINKS] links\n* one\n...and 2 more\n[ATTACHMENTS] 1\n[FILE TYPES] types"
        )

    def test_plain_text_untouched(self):
        assert make_ascii_safe("nothing to replace") == "nothing to replace"


class TestHasLimitedEncoding:

    def test_forced_by_environment(self, monkeypatch):
        monkeypatch.setenv("FORCE_ASCII_LOGGING", "1")
        assert has_limited_encoding() is True

    def test_utf8_stdout_is_not_limited(self, monkeypatch):
        monkeypatch.delenv("FORCE_ASCII_LOGGING", raising=False)
        with patch("send_guard.utils.safe_logging.platform.system", return_value="Linux"), \
                patch("send_guard.utils.safe_logging.sys.stdout") as stdout:
            stdout.encoding = "utf-8"
            assert has_limited_encoding() is False

    def test_ascii_stdout_is_limited(self, monkeypatch):
        monkeypatch.delenv("FORCE_ASCII_LOGGING", raising=False)
        with patch("send_guard.utils.safe_logging.platform.system", return_value="Linux"), \
                patch("send_guard.utils.safe_logging.sys.stdout") as stdout:
            stdout.encoding = "ascii"
            assert has_limited_encoding() is True


class TestSafeFormatter:

    def record(self, message):
        return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)

    def test_substitutes_when_limited(self):
        with patch("send_guard.utils.safe_logging.has_limited_encoding", return_value=True):
            formatter = SafeFormatter("%(message)s")
        assert formatter.format(self.record("🔗 External links found:")) == "[LINKS] External links found:"

    def test_passes_through_otherwise(self):
        with patch("send_guard.utils.safe_logging.has_limited_encoding", return_value=False):
            formatter = SafeFormatter("%(message)s")
        assert formatter.format(self.record("🔗 External links found:")) == "🔗 External links found:"


class TestConfigureSafeLogging:

    def test_console_and_file_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "guard.log"

        logger = configure_safe_logging("send_guard.test", logging.DEBUG, str(log_file))
        logger.info("⚠️ logged")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert all(isinstance(h.formatter, SafeFormatter) for h in logger.handlers)
        assert "logged" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_reconfigure_does_not_duplicate_handlers(self):
        configure_safe_logging("send_guard.test.repeat")
        logger = configure_safe_logging("send_guard.test.repeat")

        assert len(logger.handlers) == 1
