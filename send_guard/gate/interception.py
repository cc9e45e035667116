"""
Send Interception Gate

Implements the send-time state machine: scan the outgoing message, allow
it straight away when nothing was found, otherwise hold it behind a
confirmation dialog until the user answers.

    SCANNING -> DECIDING -> COMPLETED(allow)
    SCANNING -> AWAITING_CONFIRMATION -> COMPLETED(verdict)
    any state -> COMPLETED(block) on error or cancellation

Design Considerations:
- Every send attempt is completed exactly once
- Errors, open failures, timeouts and cancellation all end in Block
- Each attempt owns its own state, scan result and channel
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Set

from send_guard.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig
from send_guard.errors import CompletionError, PipelineFailure
from send_guard.gate.confirmation import ConfirmationChannel, ConfirmationSurface
from send_guard.scanning.base import MessageSource
from send_guard.scanning.models import ScanResult, Verdict
from send_guard.scanning.scanner import ContentScanner
from send_guard.scanning.warning_text import format_warning_message

logger = logging.getLogger(__name__)


class GateState(Enum):
    """States of a single send attempt."""
    SCANNING = "scanning"
    DECIDING = "deciding"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    COMPLETED = "completed"


ALLOWED_TRANSITIONS: Dict[GateState, Set[GateState]] = {
    GateState.SCANNING: {GateState.DECIDING, GateState.AWAITING_CONFIRMATION, GateState.COMPLETED},
    GateState.DECIDING: {GateState.COMPLETED},
    GateState.AWAITING_CONFIRMATION: {GateState.COMPLETED},
    GateState.COMPLETED: set(),
}


class SendCompletion:
    """
    One-shot completion for a send attempt.

    Wraps the host's completion callback, which receives True to let the
    send proceed and False to stop it. A second completion raises
    CompletionError instead of reaching the host.
    """

    def __init__(self, callback: Optional[Callable[[bool], Any]] = None):
        self._callback = callback
        self._verdict: Optional[Verdict] = None

    @property
    def done(self) -> bool:
        return self._verdict is not None

    @property
    def verdict(self) -> Optional[Verdict]:
        return self._verdict

    def complete(self, verdict: Verdict) -> None:
        if self._verdict is not None:
            raise CompletionError(
                f"Send attempt already completed with {self._verdict.value}, "
                f"refusing {verdict.value}"
            )
        self._verdict = verdict
        if self._callback is not None:
            self._callback(verdict.allow_event)


class SendAttempt:
    """
    State machine for one interception.

    Attributes:
        state: Current GateState
        scan_result: Findings once scanning succeeded
        warning_message: Dialog text when confirmation was requested
        completion: One-shot completion shared with the host
    """

    def __init__(self,
                 source: MessageSource,
                 scanner: ContentScanner,
                 surface: ConfirmationSurface,
                 config: GuardConfig,
                 completion: Optional[SendCompletion] = None):
        self.source = source
        self.scanner = scanner
        self.surface = surface
        self.config = config
        self.completion = completion or SendCompletion()
        self.state = GateState.SCANNING
        self.scan_result: Optional[ScanResult] = None
        self.warning_message: Optional[str] = None
        self.channel: Optional[ConfirmationChannel] = None

    async def run(self) -> Verdict:
        """
        Drive the attempt to its verdict and complete it.

        Returns:
            Verdict: Final decision; BLOCK for every failure path

        Raises:
            asyncio.CancelledError: After completing with BLOCK when abandoned
        """
        try:
            verdict = await self._decide()
        except asyncio.CancelledError:
            logger.warning("Send attempt abandoned by host, blocking send")
            self._finish(Verdict.BLOCK)
            raise
        except Exception as e:
            logger.error(f"Interception failed, blocking send: {e}", exc_info=True)
            verdict = Verdict.BLOCK
        return self._finish(verdict)

    async def _decide(self) -> Verdict:
        self.scan_result = await self.scanner.scan(self.source)

        if not self.scan_result:
            self._transition(GateState.DECIDING)
            return Verdict.ALLOW

        self.warning_message = format_warning_message(
            self.scan_result, self.config.max_displayed_links
        )
        self._transition(GateState.AWAITING_CONFIRMATION)
        self.channel = ConfirmationChannel(self.surface, self.config)
        return await self.channel.open(
            self.warning_message, timeout=self.config.confirmation_timeout
        )

    def _transition(self, target: GateState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise PipelineFailure(f"Illegal gate transition {self.state.value} -> {target.value}")
        logger.debug(f"Gate transition {self.state.value} -> {target.value}")
        self.state = target

    def _finish(self, verdict: Verdict) -> Verdict:
        if self.completion.done:
            logger.warning("Send attempt already completed, ignoring late verdict")
            return self.completion.verdict
        self._transition(GateState.COMPLETED)
        self.completion.complete(verdict)
        logger.info(f"Send attempt completed: {verdict.value}")
        return verdict


class InterceptionGate:
    """
    Before-send gate shared by all send attempts.

    Holds only read-only collaborators; every interception creates a fresh
    SendAttempt so no state leaks between sends.
    """

    def __init__(self,
                 surface: ConfirmationSurface,
                 config: Optional[GuardConfig] = None,
                 scanner: Optional[ContentScanner] = None):
        """
        Initialize the gate.

        Args:
            surface: Confirmation surface used when findings need approval
            config: Guard configuration; defaults to DEFAULT_GUARD_CONFIG
            scanner: Content scanner; built from config when omitted
        """
        self.surface = surface
        self.config = config or DEFAULT_GUARD_CONFIG
        self.scanner = scanner or ContentScanner(self.config)
        logger.info("InterceptionGate initialized successfully")

    def create_attempt(self, source: MessageSource, completion: Optional[SendCompletion] = None) -> SendAttempt:
        return SendAttempt(source, self.scanner, self.surface, self.config, completion)

    async def intercept(self, source: MessageSource) -> Verdict:
        """Run one interception and return its verdict."""
        return await self.create_attempt(source).run()

    async def on_message_send(self, item: MessageSource, completed: Callable[[bool], Any]) -> Verdict:
        """
        Before-send hook for the host mail client.

        Args:
            item: Outgoing message
            completed: Host callback, invoked exactly once with allow/deny

        Returns:
            Verdict: Decision passed to the host
        """
        return await self.create_attempt(item, SendCompletion(completed)).run()
