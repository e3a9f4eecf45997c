"""Matching of text replies from the simulator to the commands awaiting them.

A command is any object with a hashable ``kind`` attribute and an
``encode()`` method that returns its wire text. A kind provides
``parse_ret_ok(rest)``, which returns the parsed success value or None, and
``parse_ret_err(rest)``, which returns an exception instance or None. Kinds
are looked up from their wire name with the ``decode`` function given to
the resolver.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, Hashable, List, Optional, Tuple

logger = logging.getLogger(__name__)

TIMEOUT = 2.0


class Addon:
    """Something attached to a client connection that is closed with it."""

    def close(self) -> None:
        """Release whatever the addon holds. Does nothing by default."""


class CommandTimeoutError(TimeoutError):
    """No reply to a command arrived in time."""

    def __init__(self, command: Any = None) -> None:
        self.command = command
        super().__init__("deadline has elapsed")


def split_reply(raw_msg: str) -> Optional[List[str]]:
    """Split a ``(head rest...)`` reply into its space-separated tokens.

    Returns None when the message is not enclosed in parentheses. The
    reply ``(init ok)`` is read as ``(ok init)``.
    """
    msg = raw_msg.strip().rstrip("\0")
    if not msg or not msg.startswith("(") or not msg.endswith(")"):
        return None
    if msg == "(init ok)":
        msg = "(ok init)"
    return msg[1:-1].split(" ")


_Resolved = Tuple[Hashable, bool, Any]


class CallResolver(Addon):
    """Delivers replies to callers waiting on them, first come first served."""

    def __init__(self, decode: Callable[[str], Optional[Hashable]]) -> None:
        self._decode = decode
        self._pending: Dict[Hashable, Deque[asyncio.Future]] = {}
        self._task: Optional[asyncio.Task] = None
        self._closed = False

    def register(self, kind: Hashable) -> asyncio.Future:
        """Queue a future that the next reply for ``kind`` will complete."""
        if self._closed:
            raise ConnectionAbortedError("call resolver is closed")
        future = asyncio.get_running_loop().create_future()
        self._pending.setdefault(kind, deque()).append(future)
        return future

    def _discard(self, kind: Hashable, future: asyncio.Future) -> None:
        queue = self._pending.get(kind)
        if queue is not None and future in queue:
            queue.remove(future)

    def _resolve(self, tokens: List[str], raw_msg: str) -> Optional[_Resolved]:
        head, rest = tokens[0], tokens[1:]
        if head == "ok":
            kind = self._decode(rest[0]) if rest else None
            if kind is None:
                logger.debug('Ignore "ok" for unknown command: %r', raw_msg)
                return None
            value = kind.parse_ret_ok(rest[1:])
            if value is None:
                logger.debug('Ignore "ok" for [%r]: %r', kind, raw_msg)
                return None
            return kind, True, value
        if head == "error":
            for kind in list(self._pending):
                error = kind.parse_ret_err(rest)
                if error is not None:
                    if not isinstance(error, BaseException):
                        error = RuntimeError(error)
                    return kind, False, error
            logger.debug('Ignore "error" for unknown command: %r', raw_msg)
            return None
        logger.debug("Ignore unknown message: %r", raw_msg)
        return None

    def dispatch(self, raw_msg: str) -> bool:
        """Hand one reply to the oldest caller of its kind.

        Returns True when a waiting caller received the reply.
        """
        tokens = split_reply(raw_msg)
        if tokens is None:
            logger.debug("Ignoring reply not matching '(.+)': %r", raw_msg)
            return False
        resolved = self._resolve(tokens, raw_msg)
        if resolved is None:
            return False
        kind, is_ok, value = resolved
        queue = self._pending.get(kind)
        if not queue:
            return False
        future = queue.popleft()
        if future.done():
            logger.debug("Failed to hand reply to caller for [%r]", kind)
            return False
        if is_ok:
            future.set_result(value)
        else:
            future.set_exception(value)
        return True

    async def run(self, queue: "asyncio.Queue[Optional[str]]") -> None:
        """Dispatch every message from ``queue`` until a None arrives."""
        self._task = asyncio.current_task()
        try:
            while True:
                msg = await queue.get()
                if msg is None:
                    break
                self.dispatch(msg)
        finally:
            self._task = None

    def sender(self, send: Callable[[str], Any]) -> "CallSender":
        """A caller that transmits command text with ``send``."""
        return CallSender(self, send)

    def close(self) -> None:
        """Stop dispatching and fail every call still waiting."""
        self._closed = True
        task = self._task
        if task is not None and not task.done():
            task.cancel()
        for queue in self._pending.values():
            while queue:
                future = queue.popleft()
                if not future.done():
                    future.set_exception(
                        ConnectionAbortedError("call resolver is closed")
                    )


@dataclass(frozen=True)
class CallSender:
    """Sends commands and waits for the replies the resolver matches to them."""

    resolver: CallResolver
    transmit: Callable[[str], Any]

    async def send(self, command: Any) -> Any:
        """Send a command and wait, without limit, for its reply."""
        kind = command.kind
        future = self.resolver.register(kind)
        try:
            result = self.transmit(command.encode())
            if inspect.isawaitable(result):
                await result
        except BaseException:
            self.resolver._discard(kind, future)
            raise
        return await future

    async def call(self, command: Any, timeout: Optional[float] = TIMEOUT) -> Any:
        """Send a command and wait at most ``timeout`` seconds for its reply."""
        try:
            return await asyncio.wait_for(self.send(command), timeout)
        except asyncio.TimeoutError:
            raise CommandTimeoutError(command) from None