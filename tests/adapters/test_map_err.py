"""Tests for the TransmitMapErr error-transform adapter."""

from __future__ import annotations

import asyncio

import pytest

from async_transmit import (
    ErrorMapperConsumedError,
    SendError,
    TransmitError,
    TransmitMapErr,
    TransmitterConsumedError,
)


class DeliveryFailed(Exception):
    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"delivery failed: {cause}")


@pytest.mark.asyncio
async def test_map_err_success_leaves_mapper(recording) -> None:
    t = recording.map_err(DeliveryFailed)
    await t.transmit("Hello")
    await t.transmit("World")
    assert recording.items == ["Hello", "World"]
    assert not t.mapper_consumed


@pytest.mark.asyncio
async def test_map_err_maps_first_failure(failing) -> None:
    t = failing.map_err(DeliveryFailed)
    with pytest.raises(DeliveryFailed) as exc_info:
        await t.transmit("Hello")
    inner = exc_info.value.cause
    assert isinstance(inner, SendError)
    assert inner.item == "Hello"
    assert exc_info.value.__cause__ is inner
    assert t.mapper_consumed


@pytest.mark.asyncio
async def test_map_err_second_failure_is_usage_violation(failing) -> None:
    # The mapper is single-use: a second failure aborts instead of mapping.
    t = failing.map_err(DeliveryFailed)
    with pytest.raises(DeliveryFailed):
        await t.transmit("Hello")
    with pytest.raises(ErrorMapperConsumedError) as exc_info:
        await t.transmit("World")
    assert not isinstance(exc_info.value, TransmitError)
    assert isinstance(exc_info.value.__cause__, SendError)
    assert failing.attempts == 2


@pytest.mark.asyncio
async def test_map_err_aborts_on_any_second_failure(make_failing) -> None:
    inner = make_failing(KeyError)
    t = TransmitMapErr(inner, DeliveryFailed)
    with pytest.raises(DeliveryFailed):
        await t.transmit(1)
    inner.error = None
    with pytest.raises(ErrorMapperConsumedError):
        await t.transmit(2)


@pytest.mark.asyncio
async def test_map_err_catch_restricts_mapping(make_failing) -> None:
    t = make_failing(KeyError).map_err(DeliveryFailed, catch=SendError)
    with pytest.raises(KeyError):
        await t.transmit("Hello")
    assert not t.mapper_consumed


@pytest.mark.asyncio
async def test_map_err_never_maps_usage_errors(recording) -> None:
    inner = recording.with_(str)
    inner.into_inner()
    t = inner.map_err(DeliveryFailed)
    with pytest.raises(TransmitterConsumedError):
        await t.transmit("Hello")
    assert not t.mapper_consumed


@pytest.mark.asyncio
async def test_map_err_never_maps_cancellation(make_failing) -> None:
    t = make_failing(asyncio.CancelledError).map_err(
        DeliveryFailed, catch=BaseException  # type: ignore[arg-type]
    )
    with pytest.raises(asyncio.CancelledError):
        await t.transmit("Hello")
    assert not t.mapper_consumed


@pytest.mark.asyncio
async def test_map_err_mapper_must_return_exception(failing) -> None:
    t = failing.map_err(lambda e: "not an exception")  # type: ignore[arg-type,return-value]
    with pytest.raises(TypeError, match="expected an exception"):
        await t.transmit("Hello")


@pytest.mark.asyncio
async def test_map_err_accessors(recording) -> None:
    t = TransmitMapErr(recording, DeliveryFailed)
    assert t.inner is recording
    assert t.into_inner() is recording
    with pytest.raises(TransmitterConsumedError):
        await t.transmit("Hello")
