"""
Send interception package initialization.
"""

from .confirmation import (
    ConfirmationChannel,
    ConfirmationSurface,
    DialogHandle,
    DialogRequest,
    build_dialog_request,
    build_dialog_url
)
from .interception import GateState, InterceptionGate, SendAttempt, SendCompletion

__all__ = [
    'ConfirmationChannel',
    'ConfirmationSurface',
    'DialogHandle',
    'DialogRequest',
    'build_dialog_request',
    'build_dialog_url',
    'GateState',
    'InterceptionGate',
    'SendAttempt',
    'SendCompletion'
]
