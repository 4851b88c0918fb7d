from .sink import ISink
from .transmitter import ITransmitter

__all__ = [
    "ISink",
    "ITransmitter",
]
