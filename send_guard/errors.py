"""
Error taxonomy for the send guard.

Whatever goes wrong, the only outcome a caller ever observes from the gate is
a Block verdict. These types exist so failures can be logged and tested
precisely on the way there.
"""

from typing import Optional


class SendGuardError(Exception):
    """Base exception for send guard failures"""
    pass


class RetrievalFailure(SendGuardError):
    """One content channel of the outgoing message could not be read"""

    def __init__(self, channel: str, message: Optional[str] = None):
        self.channel = channel
        super().__init__(message or f"Failed to retrieve {channel}")


class ConfirmationSurfaceFailure(SendGuardError):
    """The confirmation dialog could not be opened or gave no usable answer"""
    pass


class PipelineFailure(SendGuardError):
    """Unexpected fault while scanning or formatting"""
    pass


class CompletionError(SendGuardError):
    """A send attempt was completed more than once"""
    pass
