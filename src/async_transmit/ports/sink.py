"""Two-phase acceptance port bridged by FromSink."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

ItemT_contra = TypeVar("ItemT_contra", contravariant=True)


@runtime_checkable
class ISink(Protocol[ItemT_contra]):
    """
    Port for values that buffer items and apply flow control on demand.

    ``asyncio.StreamWriter`` satisfies this port for ``bytes``. Sinks may
    also expose ``close()`` and ``wait_closed()``; they are used on disposal
    when present.
    """

    def write(self, item: ItemT_contra) -> None:
        """Buffer *item* without waiting for it to be flushed."""
        ...

    async def drain(self) -> None:
        """Wait until the sink is ready for more.

        How much this guarantees is up to the sink: ``StreamWriter.drain()``
        only waits for the write buffer to fall below its high-water mark,
        not for every byte to reach the peer.
        """
        ...
