"""Pytest fixtures for async-transmit tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from async_transmit import ITransmitter, SendError, TransmitExt


class RecordingTransmitter(TransmitExt[Any]):
    """Test double (Fake) that stores transmitted items in a list."""

    def __init__(self) -> None:
        self.items: list[Any] = []
        self.closed = False

    async def transmit(self, item: Any) -> None:
        if self.closed:
            raise SendError(item, "transmitter is closed")
        self.items.append(item)

    async def aclose(self) -> None:
        self.closed = True


class FailingTransmitter(TransmitExt[Any]):
    """Fails every transmit with a fresh SendError (or the configured exception)."""

    def __init__(self, error: type[Exception] | None = None) -> None:
        self.error = error
        self.attempts = 0

    async def transmit(self, item: Any) -> None:
        self.attempts += 1
        if self.error is not None:
            raise self.error(f"attempt {self.attempts}")
        raise SendError(item, f"attempt {self.attempts}")


class PlainTransmitter:
    """Satisfies ITransmitter structurally, without the TransmitExt mixin."""

    def __init__(self) -> None:
        self.items: list[Any] = []

    async def transmit(self, item: Any) -> None:
        self.items.append(item)


class QueueSink:
    """Buffer-then-flush sink: write() buffers, drain() moves the buffer to a queue."""

    def __init__(self) -> None:
        self.queue: asyncio.Queue[Any] = asyncio.Queue()
        self.buffer: list[Any] = []
        self.drains = 0
        self.closed = False

    def write(self, item: Any) -> None:
        if self.closed:
            raise ConnectionResetError("sink is closed")
        self.buffer.append(item)

    async def drain(self) -> None:
        self.drains += 1
        while self.buffer:
            await self.queue.put(self.buffer.pop(0))

    def close(self) -> None:
        self.closed = True
        self.queue.put_nowait(None)  # end-of-stream marker


@pytest.fixture
def recording() -> RecordingTransmitter:
    return RecordingTransmitter()


@pytest.fixture
def failing() -> FailingTransmitter:
    return FailingTransmitter()


@pytest.fixture
def plain() -> PlainTransmitter:
    t = PlainTransmitter()
    assert isinstance(t, ITransmitter)
    return t


@pytest.fixture
def queue_sink() -> QueueSink:
    return QueueSink()


@pytest.fixture
def make_failing() -> type[FailingTransmitter]:
    return FailingTransmitter


@pytest.fixture
def make_recording() -> type[RecordingTransmitter]:
    return RecordingTransmitter
