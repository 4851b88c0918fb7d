"""FromSink — bridges a buffer-then-flush sink into ITransmitter."""

from __future__ import annotations

from typing import TypeVar

from ..ext import TransmitExt
from ..ports.sink import ISink
from .base import InnerOwner

ItemT = TypeVar("ItemT")


class FromSink(InnerOwner[ISink[ItemT]], TransmitExt[ItemT]):
    """Writes each item into the wrapped sink and awaits its drain() before returning.

    The item is only as flushed as the sink's drain() makes it; a
    StreamWriter, for example, returns once its buffer is under the
    high-water mark. Failures raised by the sink pass through unchanged.
    Closing the adapter closes the sink.

    Usage::

        reader, writer = await asyncio.open_connection(host, port)
        async with FromSink(writer) as transmitter:
            await transmitter.transmit(b"ping\\n")
    """

    def __init__(self, sink: ISink[ItemT]) -> None:
        if not isinstance(sink, ISink):
            raise TypeError(f"{type(sink).__name__} does not implement ISink")
        super().__init__(sink)

    async def transmit(self, item: ItemT) -> None:
        sink = self._require_inner()
        sink.write(item)
        await sink.drain()
