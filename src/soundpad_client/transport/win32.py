"""Named pipe handle backed by pywin32."""

from __future__ import annotations

try:
    import pywintypes
    import win32file
    import win32pipe
except ImportError as exc:  # pragma: no cover - platform/dependency guard
    raise ImportError("Soundpad's named pipe requires pywin32 (win32file/win32pipe) on Windows") from exc

from ..errors import ConnectionError

ERROR_FILE_NOT_FOUND = 2
ERROR_PIPE_BUSY = 231


class Win32PipeHandle:
    """Byte-mode client end of a Windows named pipe."""

    def __init__(self, handle: "pywintypes.HANDLE", name: str) -> None:
        self._handle = handle
        self.name = name

    def write(self, data: bytes) -> None:
        try:
            win32file.WriteFile(self._handle, data)
        except pywintypes.error as exc:
            raise OSError(exc.winerror, f"WriteFile failed: {exc.strerror}") from exc

    def read(self, size: int) -> bytes:
        try:
            # A non-zero result code (ERROR_MORE_DATA) still carries valid data
            _, data = win32file.ReadFile(self._handle, size)
        except pywintypes.error as exc:
            raise OSError(exc.winerror, f"ReadFile failed: {exc.strerror}") from exc
        return bytes(data)

    def available(self) -> int:
        try:
            _, total_available, _ = win32pipe.PeekNamedPipe(self._handle, 0)
        except pywintypes.error as exc:
            raise OSError(exc.winerror, f"PeekNamedPipe failed: {exc.strerror}") from exc
        return int(total_available)

    def close(self) -> None:
        self._handle.Close()


def open_pipe(name: str) -> Win32PipeHandle:
    """Open the client end of ``name``; Soundpad must already be running."""
    try:
        handle = win32file.CreateFile(
            name,
            win32file.GENERIC_READ | win32file.GENERIC_WRITE,
            0,  # no sharing
            None,
            win32file.OPEN_EXISTING,
            0,
            None,
        )
    except pywintypes.error as exc:
        if exc.winerror == ERROR_FILE_NOT_FOUND:
            raise ConnectionError("Could not connect to Soundpad. Is it running?", context=name) from exc
        if exc.winerror == ERROR_PIPE_BUSY:
            raise ConnectionError("Soundpad is not accepting connections", context=name) from exc
        raise ConnectionError(f"Cannot open {name}: {exc.strerror}", context=name) from exc
    return Win32PipeHandle(handle, name)


__all__ = ["Win32PipeHandle", "open_pipe"]
