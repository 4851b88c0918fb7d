"""QueueTransmitter — ITransmitter over asyncio.Queue (bounded or unbounded)."""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

from ..exceptions import EndOfStream, SendError, TransmitterConsumedError
from ..ext import TransmitExt
from .dispatch import as_transmitter

ItemT = TypeVar("ItemT")

logger = logging.getLogger("async_transmit.bindings")

# asyncio.Queue.shutdown() and QueueShutDown exist from Python 3.13 on.
_QUEUE_SHUTDOWN: tuple[type[Exception], ...] = (
    (asyncio.QueueShutDown,) if hasattr(asyncio, "QueueShutDown") else ()
)


class _ChannelState:
    """Producer count and closure flags shared by everything wrapping one queue."""

    __slots__ = ("producers", "closed", "receiver_closed", "closed_event")

    def __init__(self) -> None:
        self.producers = 0
        self.closed = False
        self.receiver_closed = False
        self.closed_event = asyncio.Event()


_states: weakref.WeakKeyDictionary[asyncio.Queue[Any], _ChannelState] = (
    weakref.WeakKeyDictionary()
)


def _state_for(queue: asyncio.Queue[Any]) -> _ChannelState:
    state = _states.get(queue)
    if state is None:
        state = _states[queue] = _ChannelState()
    return state


class QueueTransmitter(TransmitExt[ItemT]):
    """Puts each item on an asyncio.Queue, waiting for room on bounded queues.

    Every QueueTransmitter on the same queue, whether made by ``clone()`` or
    by wrapping the queue again, counts as one producer. When the last one is
    closed the channel is closed: QueueReceiver drains what is buffered and
    then raises EndOfStream. On Python 3.13+ the queue is also shut down, so
    plain ``queue.get()`` callers see ``asyncio.QueueShutDown``.
    """

    def __init__(self, queue: asyncio.Queue[ItemT]) -> None:
        self._queue = queue
        self._state = _state_for(queue)
        self._state.producers += 1
        self._closed = False

    @property
    def queue(self) -> asyncio.Queue[ItemT]:
        return self._queue

    @property
    def closed(self) -> bool:
        return self._closed

    async def transmit(self, item: ItemT) -> None:
        if self._closed:
            raise SendError(item, "transmitter is closed")
        if self._state.closed:
            raise SendError(item, "channel is closed")
        if self._state.receiver_closed:
            raise SendError(item)
        try:
            await self._queue.put(item)
        except _QUEUE_SHUTDOWN as exc:
            raise SendError(item, "queue is shut down") from exc

    def clone(self) -> QueueTransmitter[ItemT]:
        """Return another producer on the same queue."""
        if self._closed:
            raise TransmitterConsumedError(type(self).__name__)
        return QueueTransmitter(self._queue)

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        state = self._state
        state.producers -= 1
        if state.producers:
            return
        state.closed = True
        state.closed_event.set()
        shutdown = getattr(self._queue, "shutdown", None)
        if shutdown is not None:
            shutdown()
        logger.debug("Last producer closed; channel closed")


class QueueReceiver(Generic[ItemT]):
    """Consuming end of an asyncio.Queue channel.

    ``get()`` returns items in FIFO order and raises EndOfStream once every
    producer is closed and the queue is drained. Async iteration stops at
    the same point.
    """

    def __init__(self, queue: asyncio.Queue[ItemT]) -> None:
        self._queue = queue
        self._state = _state_for(queue)

    @property
    def queue(self) -> asyncio.Queue[ItemT]:
        return self._queue

    def empty(self) -> bool:
        return self._queue.empty()

    def get_nowait(self) -> ItemT:
        """Return a buffered item; raises asyncio.QueueEmpty while producers are open."""
        if self._queue.empty() and self._state.closed:
            raise EndOfStream
        try:
            return self._queue.get_nowait()
        except _QUEUE_SHUTDOWN as exc:
            raise EndOfStream from exc

    async def get(self) -> ItemT:
        state = self._state
        while self._queue.empty():
            if state.closed:
                raise EndOfStream
            getter = asyncio.ensure_future(self._queue.get())
            closer = asyncio.ensure_future(state.closed_event.wait())
            try:
                await asyncio.wait(
                    {getter, closer}, return_when=asyncio.FIRST_COMPLETED
                )
            finally:
                closer.cancel()
                getter.cancel()
            if getter.done() and not getter.cancelled():
                try:
                    return getter.result()
                except _QUEUE_SHUTDOWN as exc:
                    raise EndOfStream from exc
        return self._queue.get_nowait()

    async def aclose(self) -> None:
        """Stop receiving; later transmits fail with SendError."""
        self._state.receiver_closed = True

    def __aiter__(self) -> AsyncIterator[ItemT]:
        return self

    async def __anext__(self) -> ItemT:
        try:
            return await self.get()
        except EndOfStream:
            raise StopAsyncIteration from None


def channel(capacity: int) -> tuple[QueueTransmitter[Any], QueueReceiver[Any]]:
    """Create a bounded queue channel."""
    if capacity < 1:
        raise ValueError("capacity must be >= 1")
    queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=capacity)
    return QueueTransmitter(queue), QueueReceiver(queue)


def unbounded_channel() -> tuple[QueueTransmitter[Any], QueueReceiver[Any]]:
    """Create an unbounded queue channel."""
    queue: asyncio.Queue[Any] = asyncio.Queue()
    return QueueTransmitter(queue), QueueReceiver(queue)


@as_transmitter.register(asyncio.Queue)
def _queue_as_transmitter(obj: asyncio.Queue[Any]) -> QueueTransmitter[Any]:
    return QueueTransmitter(obj)
