"""Public surface for the Soundpad remote control client."""

from .client import ClientOptions, SoundpadClient
from .errors import (
    BadRequestError,
    CommandError,
    CommandNotFoundError,
    ConnectionError,
    NoContentError,
    NotFoundError,
    OfflineError,
    ProtocolError,
    SoundpadError,
    TransportError,
)
from .response import ResponseKind, ResponseStatus, classify_response
from .soundlist import Category, Sound
from .transport import PIPE_NAME, PipeTransport, Transport
from .types import PlayStatus, RequestResult
from .version import CLIENT_VERSION, __version__

__all__ = [
    "__version__",
    "BadRequestError",
    "CLIENT_VERSION",
    "Category",
    "ClientOptions",
    "CommandError",
    "CommandNotFoundError",
    "ConnectionError",
    "NoContentError",
    "NotFoundError",
    "OfflineError",
    "PIPE_NAME",
    "PipeTransport",
    "PlayStatus",
    "ProtocolError",
    "RequestResult",
    "ResponseKind",
    "ResponseStatus",
    "Sound",
    "SoundpadClient",
    "SoundpadError",
    "Transport",
    "TransportError",
    "classify_response",
]
