"""Exceptions raised by the Soundpad remote control client."""

from __future__ import annotations

from typing import Any


class SoundpadError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConnectionError(SoundpadError):
    """Raised when the named pipe is missing, busy or cannot be opened."""


class TransportError(SoundpadError):
    """Raised when reading from or writing to an open pipe fails."""


class OfflineError(SoundpadError):
    """Raised when an exchange produced no response at all."""


class ProtocolError(SoundpadError):
    """Raised when a response does not have the shape the command expects."""


class CommandError(SoundpadError):
    """Raised when Soundpad answers with a status code other than R-200."""

    def __init__(self, message: str, *, status: int | None = None, context: Any | None = None) -> None:
        super().__init__(message, context=context)
        self.status = status


class NoContentError(CommandError):
    """R-204: the command was understood but there was nothing to act on."""


class BadRequestError(CommandError):
    """R-400: Soundpad received a syntactically wrong command."""


class NotFoundError(CommandError):
    """R-404: the addressed sound, category or file does not exist."""


class CommandNotFoundError(NotFoundError):
    """R-404 for a command name Soundpad does not recognize."""


__all__ = [
    "BadRequestError",
    "CommandError",
    "CommandNotFoundError",
    "ConnectionError",
    "NoContentError",
    "NotFoundError",
    "OfflineError",
    "ProtocolError",
    "SoundpadError",
    "TransportError",
]
