"""
Concrete host collaborators: message sources and confirmation surfaces.
"""

from .eml import EmlMessageSource
from .console import ConsoleConfirmationSurface, ScriptedConfirmationSurface

__all__ = [
    'EmlMessageSource',
    'ConsoleConfirmationSurface',
    'ScriptedConfirmationSurface'
]
