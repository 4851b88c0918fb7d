from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

ItemT_contra = TypeVar("ItemT_contra", contravariant=True)


@runtime_checkable
class ITransmitter(Protocol[ItemT_contra]):
    """
    Port for transmitting a single item to a peer asynchronously.

    Transport bindings and adapters provide concrete implementations.
    Nothing happens until the returned coroutine is awaited.
    """

    async def transmit(self, item: ItemT_contra) -> None:
        """
        Transmit *item* to the peer.

        Returns once the transport has accepted the item under its own
        delivery semantics (buffered, queued or delivered).

        Raises:
            Exception: The transmitter's failure type. The item is not
                retried; the caller decides what to do next.
        """
        ...
