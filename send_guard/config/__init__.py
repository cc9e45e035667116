"""
Static guard configuration.
"""

from .guard_config import GuardConfig, DEFAULT_GUARD_CONFIG, RISKY_EXTENSIONS

__all__ = [
    'GuardConfig',
    'DEFAULT_GUARD_CONFIG',
    'RISKY_EXTENSIONS'
]
