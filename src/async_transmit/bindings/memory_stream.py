"""MemoryStreamTransmitter — ITransmitter over AnyIO memory object streams.

Optional extra: ``async-transmit[anyio]``.
"""

from __future__ import annotations

import math
from typing import Any, TypeVar

from anyio import BrokenResourceError, ClosedResourceError, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from ..exceptions import SendError, TransmitterConsumedError
from ..ext import TransmitExt
from .dispatch import as_transmitter

ItemT = TypeVar("ItemT")


class MemoryStreamTransmitter(TransmitExt[ItemT]):
    """Sends each item on an AnyIO memory object send stream.

    Bound to the event loop it is used on; for consumers on other threads
    use ThreadQueueTransmitter.

    The receiving side observes ``anyio.EndOfStream`` once every clone of
    the send stream is closed and the buffer is drained.
    """

    def __init__(self, stream: MemoryObjectSendStream[ItemT]) -> None:
        self._stream = stream

    async def transmit(self, item: ItemT) -> None:
        try:
            await self._stream.send(item)
        except BrokenResourceError as exc:
            raise SendError(item, "all receivers are closed") from exc
        except ClosedResourceError as exc:
            raise SendError(item, "transmitter is closed") from exc

    def clone(self) -> MemoryStreamTransmitter[ItemT]:
        """Return another producer on the same stream."""
        try:
            stream = self._stream.clone()
        except ClosedResourceError as exc:
            raise TransmitterConsumedError(type(self).__name__) from exc
        return MemoryStreamTransmitter(stream)

    async def aclose(self) -> None:
        await self._stream.aclose()


def memory_channel(
    max_buffer_size: float,
) -> tuple[MemoryStreamTransmitter[Any], MemoryObjectReceiveStream[Any]]:
    """Create a bounded memory object stream and a transmitter feeding it.

    ``max_buffer_size=0`` makes every transmit wait for a receiver.
    """
    send, receive = create_memory_object_stream[Any](max_buffer_size)
    return MemoryStreamTransmitter(send), receive


def unbounded_memory_channel() -> tuple[
    MemoryStreamTransmitter[Any], MemoryObjectReceiveStream[Any]
]:
    """Create an unbounded memory object stream and a transmitter feeding it."""
    return memory_channel(math.inf)


@as_transmitter.register(MemoryObjectSendStream)
def _stream_as_transmitter(obj: MemoryObjectSendStream[Any]) -> MemoryStreamTransmitter[Any]:
    return MemoryStreamTransmitter(obj)
