"""
Unit tests for SharedRequest / RequestHandle.

Covers outcome replay to every subscriber, per-caller cancellation,
abort of the underlying task when the last subscriber leaves, and the
idempotent ``cancel()`` contract.

Version: 1.0.0
"""
import asyncio
from unittest.mock import MagicMock

import pytest

from inventory_search.utils.request_handle import SharedRequest


pytestmark = pytest.mark.unit


async def _gated(gate: asyncio.Event, value="done"):
    await gate.wait()
    return value


async def _failing(gate: asyncio.Event):
    await gate.wait()
    raise RuntimeError("boom")


class TestReplay:

    @pytest.mark.asyncio
    async def test_all_subscribers_get_same_result(self):
        gate = asyncio.Event()
        shared = SharedRequest(_gated(gate, {"total": 3}))
        first, second = shared.subscribe(), shared.subscribe()
        gate.set()

        assert await first.result() == {"total": 3}
        assert await second.result() == {"total": 3}

    @pytest.mark.asyncio
    async def test_late_subscriber_replays_settled_result(self):
        gate = asyncio.Event()
        gate.set()
        shared = SharedRequest(_gated(gate))
        await shared.subscribe().result()

        late = shared.subscribe()
        assert late.done()
        assert await late.result() == "done"

    @pytest.mark.asyncio
    async def test_failure_replayed_to_every_subscriber(self):
        gate = asyncio.Event()
        shared = SharedRequest(_failing(gate))
        first, second = shared.subscribe(), shared.subscribe()
        gate.set()

        with pytest.raises(RuntimeError, match="boom"):
            await first.result()
        with pytest.raises(RuntimeError, match="boom"):
            await second.result()

    @pytest.mark.asyncio
    async def test_handle_is_awaitable(self):
        gate = asyncio.Event()
        gate.set()
        handle = SharedRequest(_gated(gate, 7)).subscribe()
        assert await handle == 7


class TestCancellation:

    @pytest.mark.asyncio
    async def test_cancel_one_subscriber_keeps_call_alive_for_others(self):
        gate = asyncio.Event()
        on_abandon = MagicMock()
        shared = SharedRequest(_gated(gate), on_abandon=on_abandon)
        leaving, staying = shared.subscribe(), shared.subscribe()

        assert leaving.cancel() is True
        gate.set()

        assert await staying.result() == "done"
        assert not shared.task.cancelled()
        on_abandon.assert_not_called()

    @pytest.mark.asyncio
    async def test_cancelled_handle_raises_cancelled(self):
        gate = asyncio.Event()
        shared = SharedRequest(_gated(gate))
        handle = shared.subscribe()
        shared.subscribe()
        handle.cancel()

        with pytest.raises(asyncio.CancelledError):
            await handle.result()

    @pytest.mark.asyncio
    async def test_last_subscriber_leaving_aborts_call(self):
        gate = asyncio.Event()
        on_abandon = MagicMock()
        shared = SharedRequest(_gated(gate), on_abandon=on_abandon)
        handle = shared.subscribe()

        handle.cancel()
        await asyncio.sleep(0)

        assert shared.task.cancelled()
        on_abandon.assert_called_once()
        assert shared.subscribers == 0

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self):
        gate = asyncio.Event()
        shared = SharedRequest(_gated(gate))
        handle = shared.subscribe()

        assert handle.cancel() is True
        assert handle.cancel() is False
        assert handle.cancelled
        assert shared.subscribers == 0

    @pytest.mark.asyncio
    async def test_cancel_after_settlement_returns_false(self):
        gate = asyncio.Event()
        gate.set()
        shared = SharedRequest(_gated(gate))
        handle = shared.subscribe()
        await handle.result()

        assert handle.cancel() is False
        assert not shared.task.cancelled()

    @pytest.mark.asyncio
    async def test_cancelling_awaiting_task_detaches_its_handle(self):
        gate = asyncio.Event()
        shared = SharedRequest(_gated(gate))
        handle = shared.subscribe()
        other = shared.subscribe()

        waiter = asyncio.ensure_future(handle.result())
        await asyncio.sleep(0)
        waiter.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter

        assert handle.cancelled
        assert shared.subscribers == 1
        gate.set()
        assert await other.result() == "done"
