"""as_transmitter — adapt native transports to ITransmitter."""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from ..ext import assert_transmit
from ..ports.transmitter import ITransmitter


@singledispatch
def as_transmitter(obj: Any) -> ITransmitter[Any]:
    """Return a transmitter for *obj*.

    Bindings register the native transports they support; any other object
    must already implement ITransmitter, otherwise TypeError is raised.
    """
    return assert_transmit(obj)
