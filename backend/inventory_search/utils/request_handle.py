"""
Shared, replayable, cancelable handles for in-flight remote calls.

A SharedRequest owns exactly one asyncio.Task (one network call). It is
what the response caches store, so every caller asking for the same
normalized query while the call is in flight gets a handle on the same
task instead of starting a second request. The outcome is replayed to
every handle, including handles created after settlement (cache hits).

Each caller holds its own RequestHandle. Cancelling a handle detaches
that caller only; when the last live handle detaches before the task
settles, the task is cancelled (which aborts the HTTP request) and the
``on_abandon`` callback runs so the pending cache entry can be dropped.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SharedRequest(Generic[T]):
    """One in-flight (or settled) remote call shared by many subscribers."""

    def __init__(
        self,
        awaitable: Awaitable[T],
        on_abandon: Optional[Callable[[], None]] = None,
        label: str = "request",
    ):
        self._task: asyncio.Future = asyncio.ensure_future(awaitable)
        self._on_abandon = on_abandon
        self._label = label
        self._subscribers = 0
        self._task.add_done_callback(self._observe)

    @property
    def task(self) -> asyncio.Future:
        return self._task

    @property
    def subscribers(self) -> int:
        return self._subscribers

    def done(self) -> bool:
        return self._task.done()

    def subscribe(self) -> "RequestHandle[T]":
        self._subscribers += 1
        return RequestHandle(self)

    def _release(self) -> None:
        self._subscribers -= 1
        if self._subscribers <= 0 and not self._task.done():
            logger.info(f"{self._label}: last subscriber left, aborting")
            self._task.cancel()
            if self._on_abandon is not None:
                self._on_abandon()

    def _observe(self, task: asyncio.Future) -> None:
        # Retrieve the exception so an outcome nobody awaited is not reported as lost
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.debug(f"{self._label}: settled with {type(exc).__name__}: {exc}")


class RequestHandle(Generic[T]):
    """A single caller's view of a SharedRequest."""

    def __init__(self, shared: SharedRequest[T]):
        self._shared = shared
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def done(self) -> bool:
        return self._shared.done()

    async def result(self) -> T:
        """
        Wait for the shared outcome.

        Raises:
            asyncio.CancelledError: this handle (or the awaiting task) was cancelled
            Exception: whatever the shared call raised
        """
        if self._cancelled:
            raise asyncio.CancelledError()
        try:
            # shield: one waiter going away must not abort the call for the others
            return await asyncio.shield(self._shared.task)
        except asyncio.CancelledError:
            self.cancel()
            raise

    def cancel(self) -> bool:
        """
        Detach from the shared call. Idempotent.

        Returns:
            True only for the first cancel issued before the call settled
        """
        if self._cancelled:
            return False
        self._cancelled = True
        was_in_flight = not self._shared.done()
        self._shared._release()
        return was_in_flight

    def __await__(self):
        return self.result().__await__()
