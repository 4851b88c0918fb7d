"""Fluent construction of adapters on top of any transmitter."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

from .ports.transmitter import ITransmitter

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from .adapters.by_ref import TransmitRef
    from .adapters.from_sink import FromSink
    from .adapters.map_err import TransmitMapErr
    from .adapters.with_map import With
    from .ports.sink import ISink

ItemT = TypeVar("ItemT")
U = TypeVar("U")
T = TypeVar("T")
ExtT = TypeVar("ExtT", bound="TransmitExt[Any]")


class TransmitExt(ITransmitter[ItemT]):
    """Base for transmitters shipped with this package.

    Subclasses implement ``transmit``; the combinators below wrap ``self``
    in an adapter, which takes ownership of it.

    Usage::

        loud = transmitter.with_(lambda s: f"!!!{s}!!!")
        await loud.transmit("Hello")
    """

    @abstractmethod
    async def transmit(self, item: ItemT) -> None:
        """Hand *item* to the peer; raise if it cannot be delivered."""

    def with_(self, f: Callable[[U], ItemT]) -> With[ItemT, U]:
        """Map every item with *f* before it reaches this transmitter."""
        from .adapters.with_map import With

        return With(self, f)

    def map_err(
        self,
        f: Callable[[Exception], BaseException],
        *,
        catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    ) -> TransmitMapErr[ItemT]:
        """Convert the first failure of this transmitter with the one-shot *f*."""
        from .adapters.map_err import TransmitMapErr

        return TransmitMapErr(self, f, catch=catch)

    def by_ref(self) -> TransmitRef[ItemT]:
        """Borrow this transmitter so a combinator can use it without owning it."""
        from .adapters.by_ref import TransmitRef

        return TransmitRef(self)

    async def aclose(self) -> None:
        """Release whatever this transmitter owns. Nothing by default."""

    async def __aenter__(self: ExtT) -> ExtT:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def assert_transmit(obj: T) -> T:
    """Return *obj* unchanged if it implements ITransmitter, else raise TypeError."""
    if not isinstance(obj, ITransmitter):
        raise TypeError(f"{type(obj).__name__} does not implement ITransmitter")
    return obj


def with_(transmitter: ITransmitter[ItemT], f: Callable[[U], ItemT]) -> With[ItemT, U]:
    """Build an item-transform adapter over any transmitter."""
    from .adapters.with_map import With

    return With(transmitter, f)


def map_err(
    transmitter: ITransmitter[ItemT],
    f: Callable[[Exception], BaseException],
    *,
    catch: type[Exception] | tuple[type[Exception], ...] = Exception,
) -> TransmitMapErr[ItemT]:
    """Build an error-transform adapter over any transmitter."""
    from .adapters.map_err import TransmitMapErr

    return TransmitMapErr(transmitter, f, catch=catch)


def by_ref(transmitter: ITransmitter[ItemT]) -> TransmitRef[ItemT]:
    """Borrow any transmitter without moving it into a combinator."""
    from .adapters.by_ref import TransmitRef

    return TransmitRef(transmitter)


def from_sink(sink: ISink[ItemT]) -> FromSink[ItemT]:
    """Expose a write-then-drain sink as a transmitter that drains after every item."""
    from .adapters.from_sink import FromSink

    return FromSink(sink)
