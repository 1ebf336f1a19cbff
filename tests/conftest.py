from __future__ import annotations

import threading
import time
from typing import Callable

import pytest


class FakePipe:
    """In-memory pipe: every write queues the next scripted response."""

    def __init__(
        self,
        responses: list[bytes | Exception] | None = None,
        *,
        max_chunk: int | None = None,
        delay: float = 0.0,
    ) -> None:
        self.responses = list(responses or [])
        self.max_chunk = max_chunk
        self.delay = delay
        self.writes: list[bytes] = []
        self.closed = False
        self.overlaps = 0
        self._buffer = b""
        self._busy = threading.Lock()

    def write(self, data: bytes) -> None:
        if not self._busy.acquire(blocking=False):
            self.overlaps += 1
        if self.delay:
            time.sleep(self.delay)
        self.writes.append(data)
        response = self.responses.pop(0) if self.responses else b"R-200"
        if isinstance(response, Exception):
            self._release()
            raise response
        self._buffer = response

    def read(self, size: int) -> bytes:
        if self.max_chunk is not None:
            size = min(size, self.max_chunk)
        chunk, self._buffer = self._buffer[:size], self._buffer[size:]
        if not self._buffer:
            self._release()
        return chunk

    def available(self) -> int:
        return len(self._buffer)

    def close(self) -> None:
        self.closed = True

    def _release(self) -> None:
        if self._busy.locked():
            self._busy.release()


class FakeClock:
    """Millisecond clock that only moves when the transport sleeps."""

    def __init__(self, now: int = 0) -> None:
        self.now = now
        self.sleeps: list[float] = []

    def __call__(self) -> int:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += round(seconds * 1000)


class Opener:
    def __init__(self, pipes: list[FakePipe | Exception]) -> None:
        self.pipes = list(pipes)
        self.opened: list[str] = []

    def __call__(self, name: str) -> FakePipe:
        self.opened.append(name)
        pipe = self.pipes.pop(0)
        if isinstance(pipe, Exception):
            raise pipe
        return pipe


@pytest.fixture
def make_pipe() -> Callable[..., FakePipe]:
    return FakePipe


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_opener() -> Callable[[list[FakePipe | Exception]], Opener]:
    return Opener
