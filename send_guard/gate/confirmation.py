"""
Confirmation Channel Implementation

Single-use request/response round trip to an interactive confirmation
surface (the host's modal dialog). One warning message goes out; the first
payload that comes back decides the verdict.

Design Considerations:
- Only the exact "allow" payload approves a send
- Later payloads on the same channel are ignored
- A surface that cannot be opened resolves to Block immediately
- The dialog is always released, and close failures are swallowed
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional
from urllib.parse import quote

from send_guard.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig
from send_guard.errors import ConfirmationSurfaceFailure
from send_guard.scanning.models import Verdict

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves unescaped besides alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class DialogRequest:
    """Request handed to the confirmation surface."""
    message: str
    url: str
    height: int
    width: int
    display_in_iframe: bool = True


def build_dialog_url(config: GuardConfig, message: str) -> str:
    """Build the confirmation page URL carrying the warning text in its query."""
    base = config.dialog_base_url.rstrip("/")
    return f"{base}/{config.dialog_page}?w={quote(message, safe=URI_COMPONENT_SAFE)}"


def build_dialog_request(config: GuardConfig, message: str) -> DialogRequest:
    return DialogRequest(
        message=message,
        url=build_dialog_url(config, message),
        height=config.dialog_height,
        width=config.dialog_width,
        display_in_iframe=config.display_in_iframe,
    )


class DialogHandle:
    """Handle to an open confirmation dialog."""

    def close(self) -> None:
        raise NotImplementedError("Must implement close")


class ConfirmationSurface:
    """
    Base contract for an interactive confirmation surface.

    A surface shows the request to the user and later calls on_message with
    the user's answer. Surfaces may call on_message more than once; the
    channel only honours the first call.
    """

    async def display(self, request: DialogRequest, on_message: Callable[[Any], None]) -> DialogHandle:
        """
        Open the dialog.

        Args:
            request: Dialog contents and sizing hints
            on_message: Callback receiving the answer payload

        Returns:
            DialogHandle: Handle used to close the dialog

        Raises:
            ConfirmationSurfaceFailure: If the dialog cannot be opened
            NotImplementedError: Must be implemented by concrete surfaces
        """
        raise NotImplementedError("Must implement display")


class ConfirmationChannel:
    """
    One-shot channel correlating a single dialog request with one verdict.

    Attributes:
        surface: Surface the dialog is shown on
        config: Guard configuration supplying dialog URL and sizing
    """

    def __init__(self, surface: ConfirmationSurface, config: Optional[GuardConfig] = None):
        self.surface = surface
        self.config = config or DEFAULT_GUARD_CONFIG
        self._opened = False
        self._resolved = False
        self._handle: Optional[DialogHandle] = None
        self._verdict: Optional[asyncio.Future] = None

    @property
    def resolved(self) -> bool:
        return self._resolved

    async def open(self, message: str, timeout: Optional[float] = None) -> Verdict:
        """
        Show the warning message and wait for the user's verdict.

        Args:
            message: Assembled warning text
            timeout: Optional seconds to wait before blocking; None waits forever

        Returns:
            Verdict: ALLOW only for an exact "allow" payload, otherwise BLOCK

        Raises:
            ConfirmationSurfaceFailure: If this channel was already opened
        """
        if self._opened:
            raise ConfirmationSurfaceFailure("Confirmation channel is single-use")
        self._opened = True

        self._verdict = asyncio.get_running_loop().create_future()
        request = build_dialog_request(self.config, message)

        try:
            self._handle = await self.surface.display(request, self._on_message)
        except Exception as e:
            logger.error(f"Confirmation dialog failed to open, blocking send: {e}")
            self._resolved = True
            return Verdict.BLOCK

        try:
            if timeout is None:
                return await self._verdict
            return await asyncio.wait_for(self._verdict, timeout)
        except asyncio.TimeoutError:
            logger.warning(f"No confirmation received within {timeout}s, blocking send")
            return Verdict.BLOCK
        finally:
            self._resolved = True
            self._release()

    def _on_message(self, payload: Any) -> None:
        if self._resolved or self._verdict is None or self._verdict.done():
            logger.debug("Ignoring additional dialog message on resolved channel")
            return
        self._resolved = True
        verdict = Verdict.from_response(payload)
        logger.info(f"Dialog answered: {verdict.value}")
        self._verdict.set_result(verdict)

    def _release(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except Exception as e:
            logger.warning(f"Ignoring failure while closing dialog: {e}")
