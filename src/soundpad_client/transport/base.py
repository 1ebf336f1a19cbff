"""Common transport abstractions."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

PIPE_NAME = r"\\.\pipe\sp_remote_control"


@runtime_checkable
class PipeHandle(Protocol):
    """An open duplex byte stream to the Soundpad pipe."""

    def write(self, data: bytes) -> None: ...

    def read(self, size: int) -> bytes: ...

    def available(self) -> int:
        """Number of bytes waiting in the pipe, without consuming them."""
        ...

    def close(self) -> None: ...


PipeOpener = Callable[[str], PipeHandle]


@runtime_checkable
class Transport(Protocol):
    def send_request(self, command: str, *, cooldown: float = 0.0) -> str: ...

    def close(self) -> None: ...


__all__ = ["PIPE_NAME", "PipeHandle", "PipeOpener", "Transport"]
