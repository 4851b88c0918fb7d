"""Tests for InnerOwner and close_owned."""

from __future__ import annotations

import pytest

from async_transmit.adapters.base import InnerOwner, close_owned
from async_transmit.exceptions import TransmitterConsumedError


class AsyncClosable:
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def close(self) -> None:
        self.calls.append("close")

    async def wait_closed(self) -> None:
        self.calls.append("wait_closed")


class BothClosable(AsyncClosable):
    async def aclose(self) -> None:
        self.calls.append("aclose")


@pytest.mark.asyncio
async def test_close_owned_awaits_close_then_wait_closed() -> None:
    value = AsyncClosable()
    await close_owned(value)
    assert value.calls == ["close", "wait_closed"]


@pytest.mark.asyncio
async def test_close_owned_prefers_aclose() -> None:
    value = BothClosable()
    await close_owned(value)
    assert value.calls == ["aclose"]


@pytest.mark.asyncio
async def test_close_owned_ignores_values_without_close() -> None:
    await close_owned(object())


@pytest.mark.asyncio
async def test_aclose_is_idempotent() -> None:
    value = BothClosable()
    owner = InnerOwner(value)
    await owner.aclose()
    await owner.aclose()
    assert value.calls == ["aclose"]
    assert owner.consumed
    with pytest.raises(TransmitterConsumedError):
        owner.into_inner()
