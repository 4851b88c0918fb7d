"""InnerOwner — exclusive ownership of the value an adapter wraps."""

from __future__ import annotations

import inspect
import logging
from typing import Generic, TypeVar

from ..exceptions import TransmitterConsumedError

InnerT = TypeVar("InnerT")

logger = logging.getLogger("async_transmit.adapters")


async def close_owned(value: object) -> None:
    """Dispose of *value* using whichever closing protocol it exposes.

    Resolution order:
    1. ``aclose()`` (transmitters, AnyIO streams).
    2. ``close()``, awaited if it returns an awaitable, followed by
       ``wait_closed()`` when present (``asyncio.StreamWriter``).
    """
    aclose = getattr(value, "aclose", None)
    if aclose is not None:
        await aclose()
        return

    close = getattr(value, "close", None)
    if close is None:
        return
    result = close()
    if inspect.isawaitable(result):
        await result
    wait_closed = getattr(value, "wait_closed", None)
    if wait_closed is not None:
        await wait_closed()


class InnerOwner(Generic[InnerT]):
    """
    Holds exactly one inner value on behalf of an adapter.

    Pattern:
    - inner: access the wrapped value (read or mutate)
    - into_inner(): move the value out; the adapter is consumed
    - aclose(): close the value; the adapter is consumed
    """

    def __init__(self, inner: InnerT) -> None:
        self._inner: InnerT | None = inner
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def inner(self) -> InnerT:
        """The wrapped value. Mutating it is allowed while no transmit is in flight."""
        return self._require_inner()

    def into_inner(self) -> InnerT:
        """Consume this adapter, returning the wrapped value."""
        inner = self._require_inner()
        self._inner = None
        self._consumed = True
        return inner

    async def aclose(self) -> None:
        """Close the wrapped value. Calling it again is a no-op."""
        if self._consumed:
            return
        inner = self.into_inner()
        logger.debug("Closing %s owned by %s", type(inner).__name__, type(self).__name__)
        await close_owned(inner)

    def _require_inner(self) -> InnerT:
        if self._consumed:
            name = type(self).__name__
            logger.error("%s used after its inner value was consumed", name)
            raise TransmitterConsumedError(name)
        return self._inner  # type: ignore[return-value]
