"""
Sensitive-content pattern library.

Deliberately coarse detectors for PHI-like text. A send gate prefers a false
alarm to a silent leak, so overlap and over-triggering are accepted.
"""

import re
from typing import Iterable, Optional, Pattern, Tuple

# Digit detectors use ASCII \b and \d so accented letters never join a number or code
SENSITIVE_PATTERNS: Tuple[Pattern[str], ...] = (
    # SSN
    re.compile(r'\b\d{3}-\d{2}-\d{4}\b', re.ASCII),
    # DOB / generic dates
    re.compile(r'\b\d{1,2}[/-]\d{1,2}[/-]\d{2,4}\b', re.ASCII),
    # ICD-10 diagnosis code, leading letter in either case
    re.compile(r'\b[A-TV-Za-tv-z][0-9][0-9AB](?:\.[0-9A-TV-Z]{1,4})?\b', re.ASCII),
    # Record keywords
    re.compile(r'(MRN|Medical\s*Record|Patient\s*Name|Diagnosis|DOB|Chart|Encounter)', re.IGNORECASE),
)

_EXTENSION_PATTERN = re.compile(r'\.[a-z0-9]+$', re.IGNORECASE)


def contains_sensitive_content(text: Optional[str]) -> bool:
    """
    Check text against every sensitive-content detector.

    Args:
        text: Subject or body text; None and "" never match

    Returns:
        bool: True if any detector matches
    """
    if not text:
        return False
    return any(pattern.search(text) for pattern in SENSITIVE_PATTERNS)


def file_extension(name: str) -> str:
    """Return the lower-cased final dotted extension of a file name, or ""."""
    match = _EXTENSION_PATTERN.search((name or "").lower())
    return match.group() if match else ""


def is_risky_attachment(name: str, risky_extensions: Iterable[str]) -> bool:
    extension = file_extension(name)
    return bool(extension) and extension in risky_extensions
