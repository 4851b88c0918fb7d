"""With — item-transform adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..ext import TransmitExt, assert_transmit
from ..ports.transmitter import ITransmitter
from .base import InnerOwner

if TYPE_CHECKING:
    from collections.abc import Callable

ItemT = TypeVar("ItemT")
U = TypeVar("U")


class With(InnerOwner[ITransmitter[ItemT]], TransmitExt[U]):
    """Converts each outer item with *f* before forwarding it to the inner transmitter.

    Failures of the inner transmitter pass through unmodified. *f* must be
    synchronous and may be called any number of times.
    """

    def __init__(self, inner: ITransmitter[ItemT], f: Callable[[U], ItemT]) -> None:
        super().__init__(assert_transmit(inner))
        self._f = f

    async def transmit(self, item: U) -> None:
        inner = self._require_inner()
        await inner.transmit(self._f(item))
