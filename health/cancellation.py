# ============================================================================
# LINKED CANCELLATION SCOPE
# ============================================================================
# STATUS: Infrastructure - Deadline composition for health checks
# PURPOSE: Combine a timeout and caller cancellation into one deadline
# CREATED: 18 OCT 2026
# ============================================================================
"""
Linked Cancellation Scope

A scope owns one asyncio.Event that becomes set when any source event is
set or when its timeout elapses, whichever happens first. Work run through
the scope is abandoned as soon as the event fires.

Usage:
    async with CancellationScope(context.cancellation, timeout=5.0) as scope:
        response = await scope.run(client.send(request))

The timer and watcher tasks are released when the scope exits, on every
exit path.
"""

import asyncio
from typing import Any, Awaitable, List, Optional

from health.core import HealthCheckError


class OperationCancelledError(HealthCheckError):
    """Raised when work is abandoned because a cancellation source fired."""

    def __init__(self, message: str = "Operation was cancelled"):
        super().__init__(message)


class OperationTimeoutError(OperationCancelledError):
    """Raised when work is abandoned because the scope timeout elapsed."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Operation timed out after {timeout}s")


def cancelled_message(name: str) -> str:
    """Verdict message for a check whose caller cancelled before it started."""
    return f"{name} execution is cancelled."


class CancellationScope:
    """Async context manager linking a timer with caller cancellation events."""

    def __init__(self, *sources: Optional[asyncio.Event], timeout: Optional[float] = None):
        self._sources = [s for s in sources if s is not None]
        self._timeout = timeout
        self._timer: Optional[asyncio.TimerHandle] = None
        self._watchers: List[asyncio.Future] = []
        self.event = asyncio.Event()
        self.timed_out = False

    @property
    def cancelled(self) -> bool:
        return self.event.is_set()

    def _expire(self) -> None:
        if not self.event.is_set():
            self.timed_out = True
            self.event.set()

    async def _watch(self, source: asyncio.Event) -> None:
        await source.wait()
        self.event.set()

    async def __aenter__(self) -> "CancellationScope":
        loop = asyncio.get_running_loop()
        for source in self._sources:
            if source.is_set():
                self.event.set()
            else:
                self._watchers.append(asyncio.ensure_future(self._watch(source)))
        if self._timeout is not None and not self.event.is_set():
            if self._timeout <= 0:
                self._expire()
            else:
                self._timer = loop.call_later(self._timeout, self._expire)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        for watcher in self._watchers:
            watcher.cancel()
        if self._watchers:
            await asyncio.gather(*self._watchers, return_exceptions=True)
        self._watchers = []
        return False

    def raise_if_cancelled(self) -> None:
        if not self.event.is_set():
            return
        if self.timed_out:
            raise OperationTimeoutError(self._timeout)
        raise OperationCancelledError()

    async def run(self, awaitable: Awaitable[Any]) -> Any:
        """
        Await work until it completes or the scope fires.

        Returns:
            The awaitable's result (its exception propagates unchanged)

        Raises:
            OperationTimeoutError: The scope timeout elapsed first
            OperationCancelledError: A source event was set first
        """
        work = asyncio.ensure_future(awaitable)
        if self.event.is_set():
            work.cancel()
            await asyncio.gather(work, return_exceptions=True)
            self.raise_if_cancelled()

        waiter = asyncio.ensure_future(self.event.wait())
        try:
            await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (work, waiter):
                if not task.done():
                    task.cancel()
            await asyncio.gather(work, waiter, return_exceptions=True)

        if not work.cancelled():
            return work.result()

        self.raise_if_cancelled()
        raise OperationCancelledError()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "cancelled_message",
    "CancellationScope",
    "OperationCancelledError",
    "OperationTimeoutError",
]
