"""Exception hierarchy for async-transmit."""

from __future__ import annotations

from typing import Any


class AsyncTransmitError(Exception):
    """Root exception for the entire async-transmit package."""


class TransmitError(AsyncTransmitError):
    """Base class for transport failures reported by a transmitter."""


class SendError(TransmitError):
    """Raised when a transport binding could not hand the item over.

    The rejected item is kept on ``item`` so the caller can recover it
    (e.g. re-route it to another transmitter).
    """

    def __init__(self, item: Any, reason: str = "receiving end is gone") -> None:
        self.item = item
        self.reason = reason
        super().__init__(f"Failed to transmit item: {reason}")


class TransmitUsageError(AsyncTransmitError, RuntimeError):
    """Base class for caller logic errors.

    These are never reported as transmit failures: error-mapping adapters
    let them through untouched, and callers are not expected to handle them.
    """


class ErrorMapperConsumedError(TransmitUsageError):
    """Raised when a TransmitMapErr fails again after its one-shot mapper was used."""


class TransmitterConsumedError(TransmitUsageError):
    """Raised when an adapter is used after its inner value was moved out or closed."""

    def __init__(self, adapter: str) -> None:
        self.adapter = adapter
        super().__init__(f"{adapter} used after its inner transmitter was consumed")


class EndOfStream(AsyncTransmitError):
    """Raised by a channel receiver once every producer is closed and nothing is buffered."""
