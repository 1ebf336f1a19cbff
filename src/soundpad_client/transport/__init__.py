"""Transport implementations exposed to users."""

from .base import PIPE_NAME, PipeHandle, PipeOpener, Transport
from .pipe import PipeTransport

__all__ = [
    "PIPE_NAME",
    "PipeHandle",
    "PipeOpener",
    "PipeTransport",
    "Transport",
]
