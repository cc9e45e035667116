"""
Terminal confirmation surfaces.

ConsoleConfirmationSurface prints the warning text and asks the user on
stdin. ScriptedConfirmationSurface answers with a preset payload, which is
what the command line uses for non-interactive runs.
"""

import asyncio
import logging
import sys
import threading
from typing import Any, Callable, Optional, TextIO

from send_guard.gate.confirmation import ConfirmationSurface, DialogHandle, DialogRequest
from send_guard.utils.safe_logging import has_limited_encoding, make_ascii_safe

logger = logging.getLogger(__name__)

APPROVAL_ANSWERS = {"y", "yes", "allow"}
PROMPT = "Send anyway? [allow/block]: "


class _TaskDialogHandle(DialogHandle):
    """Closes a dialog by cancelling the task that waits for the answer."""

    def __init__(self, task: "asyncio.Task"):
        self._task = task

    def close(self) -> None:
        if not self._task.done():
            self._task.cancel()


class ConsoleConfirmationSurface(ConfirmationSurface):
    """
    Ask for confirmation on the terminal.

    The blocking read runs on a daemon thread so the event loop stays free.
    Answers y, yes and allow (any case) are delivered as "allow"; anything
    else is delivered as typed and therefore blocks.
    """

    def __init__(self,
                 input_func: Callable[[str], str] = input,
                 stream: Optional[TextIO] = None,
                 ascii_only: Optional[bool] = None):
        self.input_func = input_func
        self.stream = stream or sys.stdout
        self.ascii_only = has_limited_encoding() if ascii_only is None else ascii_only

    async def display(self, request: DialogRequest, on_message: Callable[[Any], None]) -> DialogHandle:
        message = make_ascii_safe(request.message) if self.ascii_only else request.message
        self.stream.write(f"\n{message}\n\n")
        self.stream.flush()
        task = asyncio.get_running_loop().create_task(self._ask(on_message))
        return _TaskDialogHandle(task)

    async def _ask(self, on_message: Callable[[Any], None]) -> None:
        loop = asyncio.get_running_loop()
        answer_future = loop.create_future()

        def deliver(answer: str) -> None:
            if not answer_future.done():
                answer_future.set_result(answer)

        def read() -> None:
            try:
                answer = self.input_func(PROMPT)
            except EOFError:
                logger.warning("No answer available on stdin")
                answer = ""
            try:
                loop.call_soon_threadsafe(deliver, answer)
            except RuntimeError:
                logger.debug("Event loop closed before the console answer arrived")

        # daemon so an unanswered prompt does not block interpreter exit
        threading.Thread(target=read, name="console-confirmation", daemon=True).start()
        answer = await answer_future
        normalized = answer.strip().lower()
        on_message("allow" if normalized in APPROVAL_ANSWERS else normalized)


class ScriptedConfirmationSurface(ConfirmationSurface):
    """Deliver a fixed payload as soon as the dialog opens."""

    def __init__(self, answer: Any):
        self.answer = answer
        self.requests = []

    async def display(self, request: DialogRequest, on_message: Callable[[Any], None]) -> DialogHandle:
        self.requests.append(request)
        handle = asyncio.get_running_loop().call_soon(on_message, self.answer)
        return _CallbackDialogHandle(handle)


class _CallbackDialogHandle(DialogHandle):

    def __init__(self, handle: asyncio.Handle):
        self._handle = handle

    def close(self) -> None:
        self._handle.cancel()
