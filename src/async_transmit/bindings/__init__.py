"""Transport bindings: asyncio and cross-thread queues, AnyIO memory streams (extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .dispatch import as_transmitter
from .queue import QueueReceiver, QueueTransmitter, channel, unbounded_channel
from .thread_queue import (
    ThreadQueueReceiver,
    ThreadQueueTransmitter,
    thread_channel,
    unbounded_thread_channel,
)

if TYPE_CHECKING:
    from .memory_stream import (
        MemoryStreamTransmitter,
        memory_channel,
        unbounded_memory_channel,
    )

    _anyio_available = True
else:
    try:
        from .memory_stream import (
            MemoryStreamTransmitter,
            memory_channel,
            unbounded_memory_channel,
        )

        _anyio_available = True
    except ImportError:
        _anyio_available = False
        MemoryStreamTransmitter = None
        memory_channel = None
        unbounded_memory_channel = None

AVAILABLE_FEATURES: frozenset[str] = frozenset(
    {"asyncio-queue", "thread-queue", "sink"}
    | ({"anyio"} if _anyio_available else set())
)

__all__ = [
    "AVAILABLE_FEATURES",
    "MemoryStreamTransmitter",
    "QueueReceiver",
    "QueueTransmitter",
    "ThreadQueueReceiver",
    "ThreadQueueTransmitter",
    "as_transmitter",
    "channel",
    "memory_channel",
    "thread_channel",
    "unbounded_channel",
    "unbounded_memory_channel",
    "unbounded_thread_channel",
]
