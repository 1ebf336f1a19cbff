"""Classification and decoding of Soundpad responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import (
    BadRequestError,
    CommandError,
    CommandNotFoundError,
    NoContentError,
    NotFoundError,
    OfflineError,
    ProtocolError,
)
from .types import PlayStatus

SUCCESS = "R-200"
COMMAND_NOT_FOUND = "Command not found."

_STATUS_RE = re.compile(r"^R-(\d{3})(?::\s*(.*))?$", re.DOTALL)


class ResponseKind(Enum):
    OFFLINE = "offline"
    STATUS = "status"
    PAYLOAD = "payload"


@dataclass(frozen=True)
class ResponseStatus:
    code: int
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.code == 200


def classify_response(text: str) -> ResponseKind:
    if not text:
        return ResponseKind.OFFLINE
    if text.startswith("R"):
        return ResponseKind.STATUS
    return ResponseKind.PAYLOAD


def is_success(text: str) -> bool:
    return text.startswith(SUCCESS)


def parse_status(text: str) -> ResponseStatus:
    """Parse ``R-404: Sound not found.`` into its code and message."""
    match = _STATUS_RE.match(text.strip())
    if not match:
        raise ProtocolError(f"Not a status response: {text!r}", context=text)
    return ResponseStatus(code=int(match.group(1)), message=(match.group(2) or "").strip())


def raise_for_status(text: str) -> None:
    kind = classify_response(text)
    if kind is ResponseKind.OFFLINE:
        raise OfflineError("Remote control is offline.")
    if kind is ResponseKind.PAYLOAD or not _STATUS_RE.match(text.strip()):
        return

    status = parse_status(text)
    if status.ok:
        return
    message = status.message or text
    if status.code == 204:
        raise NoContentError(message, status=204, context=text)
    if status.code == 400:
        raise BadRequestError(message, status=400, context=text)
    if status.code == 404:
        if status.message == COMMAND_NOT_FOUND:
            raise CommandNotFoundError(message, status=404, context=text)
        raise NotFoundError(message, status=404, context=text)
    raise CommandError(message, status=status.code, context=text)


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError as exc:
        raise ProtocolError(f"Expected numeric response, but received: {text}", context=text) from exc


def parse_play_status(text: str) -> PlayStatus:
    try:
        return PlayStatus(text.strip())
    except ValueError as exc:
        raise ProtocolError(f"Unknown play status: {text}", context=text) from exc


__all__ = [
    "ResponseKind",
    "ResponseStatus",
    "classify_response",
    "is_success",
    "parse_int",
    "parse_play_status",
    "parse_status",
    "raise_for_status",
]
