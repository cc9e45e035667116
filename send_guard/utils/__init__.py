"""
Shared utilities.
"""

from .safe_logging import SafeFormatter, configure_safe_logging, has_limited_encoding, make_ascii_safe

__all__ = [
    'SafeFormatter',
    'configure_safe_logging',
    'has_limited_encoding',
    'make_ascii_safe'
]
