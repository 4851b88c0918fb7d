"""Transport-independent asynchronous transmission of single items to a peer."""

from __future__ import annotations

from .adapters import FromSink, TransmitMapErr, TransmitRef, With
from .bindings import (
    AVAILABLE_FEATURES,
    MemoryStreamTransmitter,
    QueueReceiver,
    QueueTransmitter,
    ThreadQueueReceiver,
    ThreadQueueTransmitter,
    as_transmitter,
    channel,
    memory_channel,
    thread_channel,
    unbounded_channel,
    unbounded_memory_channel,
    unbounded_thread_channel,
)
from .exceptions import (
    AsyncTransmitError,
    EndOfStream,
    ErrorMapperConsumedError,
    SendError,
    TransmitError,
    TransmitterConsumedError,
    TransmitUsageError,
)
from .ext import TransmitExt, assert_transmit, by_ref, from_sink, map_err, with_
from .ports import ISink, ITransmitter

__all__ = [
    "AVAILABLE_FEATURES",
    "AsyncTransmitError",
    "EndOfStream",
    "ErrorMapperConsumedError",
    "FromSink",
    "ISink",
    "ITransmitter",
    "MemoryStreamTransmitter",
    "QueueReceiver",
    "QueueTransmitter",
    "SendError",
    "ThreadQueueReceiver",
    "ThreadQueueTransmitter",
    "TransmitError",
    "TransmitExt",
    "TransmitMapErr",
    "TransmitRef",
    "TransmitUsageError",
    "TransmitterConsumedError",
    "With",
    "as_transmitter",
    "assert_transmit",
    "by_ref",
    "channel",
    "from_sink",
    "map_err",
    "memory_channel",
    "thread_channel",
    "unbounded_channel",
    "unbounded_memory_channel",
    "unbounded_thread_channel",
    "with_",
]
