"""TransmitRef — borrowed transmitter that forwards every call."""

from __future__ import annotations

import logging
from typing import TypeVar

from ..exceptions import TransmitterConsumedError
from ..ext import TransmitExt, assert_transmit
from ..ports.transmitter import ITransmitter

ItemT = TypeVar("ItemT")

logger = logging.getLogger("async_transmit.adapters")


class TransmitRef(TransmitExt[ItemT]):
    """
    Forwards to a transmitter that the caller keeps owning.

    Hand a TransmitRef to a combinator instead of the transmitter itself;
    closing the combinator then releases the borrow and leaves the target
    open and usable.

    Usage::

        async with transmitter.by_ref().with_(str.upper) as upper:
            await upper.transmit("hello")
        await transmitter.transmit("still mine")
    """

    def __init__(self, target: ITransmitter[ItemT]) -> None:
        self._target: ITransmitter[ItemT] | None = assert_transmit(target)

    @property
    def released(self) -> bool:
        return self._target is None

    async def transmit(self, item: ItemT) -> None:
        target = self._target
        if target is None:
            logger.error("TransmitRef used after its borrow was released")
            raise TransmitterConsumedError(type(self).__name__)
        await target.transmit(item)

    def release(self) -> None:
        """End the borrow. The target is not closed."""
        self._target = None

    async def aclose(self) -> None:
        self.release()
