"""Tests for TransmitRef, the borrowed-transmitter handle."""

from __future__ import annotations

import pytest

from async_transmit import ITransmitter, SendError, TransmitRef, TransmitterConsumedError


@pytest.mark.asyncio
async def test_by_ref_is_transmit(recording) -> None:
    ref = recording.by_ref()
    assert isinstance(ref, ITransmitter)
    await ref.transmit("Hello")
    assert recording.items == ["Hello"]


@pytest.mark.asyncio
async def test_by_ref_keeps_ownership_with_caller(recording) -> None:
    async with recording.by_ref().with_(str.upper) as upper:
        await upper.transmit("hello")
    assert not recording.closed
    await recording.transmit("still mine")
    assert recording.items == ["HELLO", "still mine"]


@pytest.mark.asyncio
async def test_by_ref_forwards_errors(failing) -> None:
    with pytest.raises(SendError):
        await TransmitRef(failing).transmit("Hello")


@pytest.mark.asyncio
async def test_by_ref_plain_transmitter(plain) -> None:
    ref = TransmitRef(plain)
    await ref.transmit(1)
    assert plain.items == [1]


@pytest.mark.asyncio
async def test_released_ref_is_usage_error(recording) -> None:
    ref = recording.by_ref()
    ref.release()
    assert ref.released
    with pytest.raises(TransmitterConsumedError):
        await ref.transmit("Hello")
    assert recording.items == []
