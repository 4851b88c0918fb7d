"""Adapters that wrap a transmitter (or a sink) and change its item, error or delivery."""

from __future__ import annotations

from .base import InnerOwner
from .by_ref import TransmitRef
from .from_sink import FromSink
from .map_err import TransmitMapErr
from .with_map import With

__all__ = [
    "FromSink",
    "InnerOwner",
    "TransmitMapErr",
    "TransmitRef",
    "With",
]
