"""Shared typing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class RequestResult(Generic[T]):
    ok: bool
    data: T | None = None
    error: Exception | None = None

    def unwrap(self) -> T:
        if not self.ok:
            raise self.error or RuntimeError("Request failed without an error")
        return self.data  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if not self.ok:
            return default
        return self.data  # type: ignore[return-value]


class PlayStatus(str, Enum):
    STOPPED = "STOPPED"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    SEEKING = "SEEKING"


__all__ = ["PlayStatus", "RequestResult"]
