"""
Send guard root package.

Provides the send-time screening pipeline: content scanners that look for
PHI indicators, external links and risky attachments, and the interception
gate that holds a send until the user confirms it.
"""

from . import config
from . import scanning
from . import gate
from . import integrations
from . import utils

__version__ = '1.0.0'

__all__ = [
    'config',
    'scanning',
    'gate',
    'integrations',
    'utils'
]
