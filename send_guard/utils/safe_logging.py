"""
Encoding-Safe Logging Utility

Provides logging setup with Unicode handling for consoles that cannot print
the emoji used in send-guard warning text, substituting ASCII tags while
keeping the visual indicators readable.
"""

import logging
import os
import platform
import sys
from typing import Optional

# Warning-text symbols -> ASCII-safe alternatives, longest sequences first
SYMBOL_MAP = {
    "⚠️": "[WARNING]",
    "⚠": "[WARNING]",
    "🔗": "[LINKS]",
    "📎": "[ATTACHMENTS]",
    "🖼️": "[FILE TYPES]",
    "🖼": "[FILE TYPES]",
    "•": "*",
    "…": "...",
    "→": "->",
}


def has_limited_encoding() -> bool:
    """
    Detect if the current environment has limited encoding support.

    Returns:
        bool: True if emoji should be replaced before printing
    """
    if os.environ.get("FORCE_ASCII_LOGGING", "0").lower() in ("1", "true", "yes"):
        return True

    if platform.system() == "Windows":
        # Windows Terminal and an explicit UTF-8 override both handle Unicode
        if "WT_SESSION" in os.environ:
            return False
        if os.environ.get("PYTHONIOENCODING", "").lower() == "utf-8":
            return False
        return True

    encoding = (getattr(sys.stdout, "encoding", None) or "").lower()
    return bool(encoding) and "utf" not in encoding


def make_ascii_safe(text: str) -> str:
    """Replace warning-text symbols with ASCII alternatives."""
    for symbol, replacement in SYMBOL_MAP.items():
        text = text.replace(symbol, replacement)
    return text


class SafeFormatter(logging.Formatter):
    """
    Log formatter with encoding-safe character substitution.

    Substitution is applied only when the environment was detected as having
    limited encoding support at construction time.
    """

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 style: str = '%', validate: bool = True):
        super().__init__(fmt, datefmt, style, validate)
        self.limited_encoding = has_limited_encoding()

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        if self.limited_encoding:
            formatted_message = make_ascii_safe(formatted_message)
        return formatted_message


def configure_safe_logging(
    name: Optional[str] = None,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_str: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging with encoding-safe formatting.

    Args:
        name: Logger name (defaults to root logger if None)
        level: Logging level
        log_file: Optional log file path
        format_str: Custom format string for log messages

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    if format_str is None:
        format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    formatter = SafeFormatter(format_str)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            console_handler.setLevel(logging.WARNING)
            logger.warning(f"Failed to create log file handler: {str(e)}")

    return logger
