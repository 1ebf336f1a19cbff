"""Request/response exchange over Soundpad's named pipe."""

from __future__ import annotations

import threading
import time
from typing import Callable

from ..errors import ConnectionError, SoundpadError, TransportError
from ..logger import BoundLogger, create_logger
from .base import PIPE_NAME, PipeHandle, PipeOpener

# Resolution of the pacing clock, in seconds.
CLOCK_TICK = 0.001


def _millis() -> int:
    return time.time_ns() // 1_000_000


def _default_opener(name: str) -> PipeHandle:
    from .win32 import open_pipe

    return open_pipe(name)


class PipeTransport:
    """Exchanges one command for one response, one caller at a time.

    The pipe is opened on first use and dropped after any I/O failure, so the
    following request reconnects. Reads and writes have no timeout: a stalled
    Soundpad blocks the caller until it answers. ``close`` waits for the
    in-flight exchange as well, so it cannot cancel a stalled request.
    """

    def __init__(
        self,
        pipe_name: str = PIPE_NAME,
        *,
        opener: PipeOpener | None = None,
        clock: Callable[[], int] | None = None,
        sleep: Callable[[float], None] | None = None,
        logger: BoundLogger | object | None = None,
    ) -> None:
        self._pipe_name = pipe_name
        self._opener = opener or _default_opener
        self._clock = clock or _millis
        self._sleep = sleep or time.sleep
        self._logger = create_logger(logger=logger).child("pipe")
        self._lock = threading.Lock()
        self._pipe: PipeHandle | None = None
        self._last_request_at = self._clock()
        self._cooldown_until: int | None = None

    @property
    def pipe_name(self) -> str:
        return self._pipe_name

    @property
    def connected(self) -> bool:
        return self._pipe is not None

    def ensure_connected(self) -> None:
        if self._pipe is not None:
            return
        self._logger.info("Opening pipe %s", self._pipe_name)
        try:
            self._pipe = self._opener(self._pipe_name)
        except SoundpadError:
            raise
        except FileNotFoundError as exc:
            raise ConnectionError("Could not connect to Soundpad. Is it running?", context=self._pipe_name) from exc
        except (OSError, ImportError) as exc:
            raise ConnectionError(f"Cannot open {self._pipe_name}: {exc}", context=self._pipe_name) from exc

    def send_request(self, command: str, *, cooldown: float = 0.0) -> str:
        with self._lock:
            self.ensure_connected()
            assert self._pipe is not None
            if cooldown > 0:
                self._wait_for_cooldown(cooldown)
            if self._clock() == self._last_request_at:
                # Two writes within the same tick can break the pipe on Soundpad's side
                self._sleep(CLOCK_TICK)

            payload = command.encode("utf-8")
            self._logger.debug("-> %s (%d bytes)", command, len(payload))
            try:
                self._pipe.write(payload)
                body = self._read_response(self._pipe)
            except OSError as exc:
                self._logger.warn("Pipe exchange failed for %s: %s", command, exc)
                self._reset()
                raise TransportError(f"Pipe exchange failed: {exc}", context=command) from exc
            except TransportError:
                self._reset()
                raise

            self._last_request_at = self._clock()
            response = body.decode("utf-8", errors="replace")
            self._logger.trace("<- %s", response[:200])
            return response

    def close(self) -> None:
        with self._lock:
            self._reset()

    def _read_response(self, pipe: PipeHandle) -> bytes:
        # The pipe only reports its pending size after the first byte was read
        first = pipe.read(1)
        if not first:
            raise TransportError("Soundpad closed the pipe", context=self._pipe_name)
        remaining = pipe.available()
        chunks = [first]
        while remaining > 0:
            chunk = pipe.read(remaining)
            if not chunk:
                raise TransportError("Pipe closed mid-response", context=self._pipe_name)
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def _wait_for_cooldown(self, cooldown: float) -> None:
        now = self._clock()
        if self._cooldown_until is not None and now < self._cooldown_until:
            delay = (self._cooldown_until - now) / 1000
            self._logger.debug("Cooling down for %.3fs", delay)
            self._sleep(delay)
            now = self._cooldown_until
        self._cooldown_until = now + int(cooldown * 1000)

    def _reset(self) -> None:
        pipe, self._pipe = self._pipe, None
        if pipe is None:
            return
        try:
            pipe.close()
        except Exception as exc:
            self._logger.debug("Ignoring error while closing pipe: %s", exc)


__all__ = ["PipeTransport"]
