"""TransmitMapErr — error-transform adapter with a one-shot mapper."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from ..exceptions import ErrorMapperConsumedError, TransmitUsageError
from ..ext import TransmitExt, assert_transmit
from ..ports.transmitter import ITransmitter
from .base import InnerOwner

if TYPE_CHECKING:
    from collections.abc import Callable

ItemT = TypeVar("ItemT")

logger = logging.getLogger("async_transmit.adapters")


class TransmitMapErr(InnerOwner[ITransmitter[ItemT]], TransmitExt[ItemT]):
    """
    Converts a failure of the inner transmitter with a single-use mapper.

    The mapper is taken out of its slot on the first failure and never put
    back. A second failure is a usage violation and raises
    ErrorMapperConsumedError instead of a mapped error. Successful
    transmissions leave the mapper in place.

    Only exceptions matching *catch* are mapped. Usage violations and
    cancellation always propagate untouched.
    """

    def __init__(
        self,
        inner: ITransmitter[ItemT],
        f: Callable[[Exception], BaseException],
        *,
        catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    ) -> None:
        super().__init__(assert_transmit(inner))
        self._f: Callable[[Exception], BaseException] | None = f
        self._catch = catch

    @property
    def mapper_consumed(self) -> bool:
        return self._f is None

    async def transmit(self, item: ItemT) -> None:
        inner = self._require_inner()
        try:
            await inner.transmit(item)
        except (TransmitUsageError, asyncio.CancelledError):
            raise
        except self._catch as exc:
            raise self._map(exc) from exc

    def _map(self, exc: Exception) -> BaseException:
        f = self._take_f(exc)
        mapped = f(exc)
        if not isinstance(mapped, BaseException):
            raise TypeError(
                f"error mapper returned {type(mapped).__name__}, expected an exception"
            )
        logger.debug("Mapped %s to %s", type(exc).__name__, type(mapped).__name__)
        return mapped

    def _take_f(self, exc: Exception) -> Callable[[Exception], BaseException]:
        f = self._f
        if f is None:
            msg = "TransmitMapErr failed again after its error mapper was consumed"
            logger.error(msg)
            raise ErrorMapperConsumedError(msg) from exc
        self._f = None
        return f
