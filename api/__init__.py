"""
API Package Initialization

FastAPI service exposing the send-guard scanner over HTTP.
"""

from api.config import get_settings

__all__ = ["get_settings"]
