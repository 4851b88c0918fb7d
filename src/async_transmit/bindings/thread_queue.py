"""ThreadQueueTransmitter — ITransmitter feeding consumers on other threads.

Producers run on an event loop; consumers block on a thread-safe
``queue.Queue`` through ThreadQueueReceiver.
"""

from __future__ import annotations

import asyncio
import logging
import queue
import threading
import weakref
from collections.abc import Iterator
from typing import Any, Generic, TypeVar, cast

from ..exceptions import EndOfStream, SendError, TransmitterConsumedError
from ..ext import TransmitExt
from .dispatch import as_transmitter

ItemT = TypeVar("ItemT")

logger = logging.getLogger("async_transmit.bindings")

# Queued after the last producer closes; never handed to callers.
_CLOSED = object()


class _ChannelState:
    __slots__ = ("producers", "closed", "lock")

    def __init__(self) -> None:
        self.producers = 0
        self.closed = False
        self.lock = threading.Lock()


_states: weakref.WeakKeyDictionary[queue.Queue[Any], _ChannelState] = (
    weakref.WeakKeyDictionary()
)
_states_lock = threading.Lock()


def _state_for(q: queue.Queue[Any]) -> _ChannelState:
    with _states_lock:
        state = _states.get(q)
        if state is None:
            state = _states[q] = _ChannelState()
        return state


class ThreadQueueTransmitter(TransmitExt[ItemT]):
    """Puts each item on a ``queue.Queue`` read by another thread.

    A full bounded queue is waited on in a worker thread, so the event loop
    keeps running while the consumer catches up. Every transmitter on the
    same queue counts as one producer; when the last one closes, an
    end-of-stream marker is queued and ThreadQueueReceiver raises
    EndOfStream after the items before it. Cancelling a transmit that is
    waiting for room does not take the item back.
    """

    def __init__(self, q: queue.Queue[ItemT]) -> None:
        self._queue = q
        self._state = _state_for(q)
        with self._state.lock:
            self._state.producers += 1
        self._closed = False

    @property
    def queue(self) -> queue.Queue[ItemT]:
        return self._queue

    @property
    def closed(self) -> bool:
        return self._closed

    async def transmit(self, item: ItemT) -> None:
        if self._closed:
            raise SendError(item, "transmitter is closed")
        if self._state.closed:
            raise SendError(item, "channel is closed")
        try:
            self._queue.put_nowait(item)
        except queue.Full:
            await asyncio.to_thread(self._queue.put, item)

    def clone(self) -> ThreadQueueTransmitter[ItemT]:
        """Return another producer on the same queue."""
        if self._closed:
            raise TransmitterConsumedError(type(self).__name__)
        return ThreadQueueTransmitter(self._queue)

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        state = self._state
        with state.lock:
            state.producers -= 1
            last = not state.producers
            if last:
                state.closed = True
        if last:
            await asyncio.to_thread(self._queue.put, _CLOSED)
            logger.debug("Last producer closed; end-of-stream queued for consumers")


class ThreadQueueReceiver(Generic[ItemT]):
    """Blocking consuming end for code running outside the event loop."""

    def __init__(self, q: queue.Queue[Any]) -> None:
        self._queue = q

    @property
    def queue(self) -> queue.Queue[Any]:
        return self._queue

    def get(self, timeout: float | None = None) -> ItemT:
        """Block for the next item.

        Raises EndOfStream once every producer is closed and the items sent
        before that are consumed, and ``queue.Empty`` if *timeout* elapses.
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            # Leave the marker for any other consumer thread.
            self._queue.put(_CLOSED)
            raise EndOfStream
        return cast(ItemT, item)

    def __iter__(self) -> Iterator[ItemT]:
        while True:
            try:
                yield self.get()
            except EndOfStream:
                return


def thread_channel(
    capacity: int,
) -> tuple[ThreadQueueTransmitter[Any], ThreadQueueReceiver[Any]]:
    """Create a bounded cross-thread channel."""
    if capacity < 1:
        raise ValueError("capacity must be >= 1")
    q: queue.Queue[Any] = queue.Queue(maxsize=capacity)
    return ThreadQueueTransmitter(q), ThreadQueueReceiver(q)


def unbounded_thread_channel() -> tuple[
    ThreadQueueTransmitter[Any], ThreadQueueReceiver[Any]
]:
    """Create an unbounded cross-thread channel."""
    q: queue.Queue[Any] = queue.Queue()
    return ThreadQueueTransmitter(q), ThreadQueueReceiver(q)


@as_transmitter.register(queue.Queue)
def _thread_queue_as_transmitter(obj: queue.Queue[Any]) -> ThreadQueueTransmitter[Any]:
    return ThreadQueueTransmitter(obj)
