"""High-level client for Soundpad's remote control interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import commands
from .errors import ProtocolError, SoundpadError
from .logger import LogLevel, create_logger
from .response import (
    SUCCESS,
    ResponseKind,
    classify_response,
    is_success,
    parse_int,
    parse_play_status,
    raise_for_status,
)
from .soundlist import Category, Sound, parse_categories, parse_sound_list
from .transport import PIPE_NAME, PipeTransport, Transport
from .types import PlayStatus, RequestResult
from .version import CLIENT_VERSION


@dataclass
class ClientOptions:
    pipe_name: str = PIPE_NAME
    transport: Transport | None = None
    debounce: float = 0.0
    print_errors: bool = True
    logger: object | None = None
    log_level: LogLevel = "info"


class SoundpadClient:
    """Primary entry point for remote controlling a running Soundpad.

    ``execute`` raises on transport failures and on error status codes;
    ``execute_safe`` returns a :class:`RequestResult` instead. The other
    methods do not raise for transport or response failures: those turn into a
    safe default value plus a warning on the client's logger (unless
    ``print_errors`` is off). Invalid arguments, such as ``to_index`` without
    ``from_index``, still raise ``ValueError`` before anything is sent.
    """

    def __init__(
        self,
        *,
        pipe_name: str = PIPE_NAME,
        transport: Transport | None = None,
        debounce: float = 0.0,
        print_errors: bool = True,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            pipe_name=pipe_name,
            transport=transport,
            debounce=debounce,
            print_errors=print_errors,
            logger=logger,
            log_level=log_level,
        )
        self.debounce = options.debounce
        self.print_errors = options.print_errors
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._diagnostics = self._logger.child("client")
        self._transport = options.transport or PipeTransport(options.pipe_name, logger=self._logger)

    def __enter__(self) -> "SoundpadClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def execute(self, command: str, *, cooldown: float = 0.0) -> str:
        response = self._transport.send_request(command, cooldown=cooldown)
        raise_for_status(response)
        return response

    def execute_safe(self, command: str, *, cooldown: float = 0.0) -> RequestResult[str]:
        try:
            return RequestResult(ok=True, data=self.execute(command, cooldown=cooldown))
        except SoundpadError as exc:
            return RequestResult(ok=False, error=exc)

    def close(self) -> None:
        self._transport.close()

    # Remote control v1.0.0

    def play_sound(self, index: int, render_line: bool | None = None, capture_line: bool | None = None) -> bool:
        """Play the sound at ``index`` in the *All sounds* category.

        Pass ``render_line``/``capture_line`` to choose between speakers and
        microphone; by default Soundpad plays on both.
        """
        return self._request_bool(commands.play_sound(index, render_line, capture_line))

    def play(self, sound: Sound) -> bool:
        """Play ``sound``, holding back the next debounced command until it ends."""
        cooldown = self.debounce + sound.duration.total_seconds()
        played = self._request_bool(commands.play_sound(sound.index), cooldown=cooldown)
        if played:
            self._logger.info("Playing %s", sound.title)
        return played

    def play_previous_sound(self) -> bool:
        return self._request_bool(commands.play_previous_sound())

    def play_next_sound(self) -> bool:
        return self._request_bool(commands.play_next_sound())

    def stop_sound(self) -> bool:
        return self._request_bool(commands.stop_sound())

    def toggle_pause(self) -> bool:
        return self._request_bool(commands.toggle_pause())

    def jump(self, time_ms: int) -> bool:
        """Jump relative to the current position; negative values go backwards."""
        return self._request_bool(commands.jump(time_ms))

    def seek(self, time_ms: int) -> bool:
        return self._request_bool(commands.seek(time_ms))

    def start_recording(self) -> bool:
        return self._request_bool(commands.start_recording())

    def stop_recording(self) -> bool:
        return self._request_bool(commands.stop_recording())

    def search(self, term: str) -> bool:
        return self._request_bool(commands.search(term), strict=True)

    def reset_search(self) -> bool:
        return self._request_bool(commands.reset_search())

    def select_previous_hit(self) -> bool:
        return self._request_bool(commands.select_previous_hit())

    def select_next_hit(self) -> bool:
        return self._request_bool(commands.select_next_hit())

    def select_row(self, row: int) -> bool:
        """Select a row of the currently shown category (not a sound index)."""
        return self._request_bool(commands.select_row(row))

    def scroll_by(self, rows: int) -> bool:
        return self._request_bool(commands.scroll_by(rows))

    def scroll_to(self, row: int) -> bool:
        return self._request_bool(commands.scroll_to(row))

    def get_sound_file_count(self) -> int:
        return self._request_int(commands.get_sound_file_count())

    def get_playback_position(self) -> int:
        return self._request_int(commands.get_playback_position())

    def get_playback_duration(self) -> int:
        return self._request_int(commands.get_playback_duration())

    def get_recording_position(self) -> int:
        return self._request_int(commands.get_recording_position())

    def get_recording_peak(self) -> int:
        return self._request_int(commands.get_recording_peak())

    def get_soundlist(self, from_index: int | None = None, to_index: int | None = None) -> str:
        """Raw XML of the *All sounds* category, optionally sliced (1-based, inclusive)."""
        return self._request_payload(commands.get_soundlist(from_index, to_index))

    def get_sounds(self, from_index: int | None = None, to_index: int | None = None) -> list[Sound]:
        xml = self.get_soundlist(from_index, to_index)
        if classify_response(xml) is not ResponseKind.PAYLOAD:
            return []
        try:
            return parse_sound_list(xml)
        except ProtocolError as exc:
            self._report("%s", exc)
            return []

    def get_main_frame_title_text(self) -> str:
        return self._request_payload(commands.get_title_text())

    def get_status_bar_text(self) -> str:
        return self._request_payload(commands.get_status_bar_text())

    def get_play_status(self) -> PlayStatus:
        response = self._request_payload(commands.get_play_status())
        if classify_response(response) is not ResponseKind.PAYLOAD:
            return PlayStatus.STOPPED
        try:
            return parse_play_status(response)
        except ProtocolError as exc:
            self._report("%s", exc)
            return PlayStatus.STOPPED

    def get_version(self) -> str:
        """Version of Soundpad itself, not of the remote control interface."""
        return self._request_payload(commands.get_version())

    def get_remote_control_version(self) -> str:
        return self._request_payload(commands.get_remote_control_version())

    def add_sound(self, url: str, index: int | None = None, category_index: int | None = None) -> bool:
        """Add the file at ``url`` to the sound list.

        With ``category_index`` the sound goes into that category at position
        ``index`` (v1.1.0); otherwise ``index`` is a position in *All sounds*.
        """
        if category_index is not None:
            if index is None:
                raise ValueError("index is required together with category_index")
            command = commands.add_sound_to_category(url, category_index, index)
        else:
            command = commands.add_sound(url, index)
        return self._request_bool(command, strict=True)

    def remove_selected_entries(self, remove_on_disk: bool = False) -> bool:
        return self._request_bool(commands.remove_selected_entries(remove_on_disk))

    def undo(self) -> bool:
        return self._request_bool(commands.undo())

    def redo(self) -> bool:
        return self._request_bool(commands.redo())

    def save_soundlist(self) -> bool:
        return self._request_bool(commands.save_soundlist())

    def get_volume(self) -> int:
        return self._request_int(commands.get_volume(), default=0)

    def is_muted(self) -> bool:
        return self._request_int(commands.is_muted(), default=0) == 1

    def set_volume(self, volume: int) -> bool:
        return self._request_bool(commands.set_volume(volume))

    def toggle_mute(self) -> bool:
        return self._request_bool(commands.toggle_mute())

    def is_compatible(self) -> bool:
        return self.get_remote_control_version() == CLIENT_VERSION

    def is_alive(self) -> bool:
        return self._request_bool(commands.is_alive())

    # Remote control v1.1.0

    def play_selected_sound(self) -> bool:
        return self._request_bool(commands.play_selected_sound())

    def play_current_sound_again(self) -> bool:
        return self._request_bool(commands.play_current_sound_again())

    def play_previously_played_sound(self) -> bool:
        return self._request_bool(commands.play_previously_played_sound())

    def add_category(self, name: str, parent_category_index: int = -1) -> bool:
        return self._request_bool(commands.add_category(name, parent_category_index), strict=True)

    def start_recording_speakers(self) -> bool:
        return self._request_bool(commands.start_recording_speakers(), strict=True)

    def start_recording_microphone(self) -> bool:
        return self._request_bool(commands.start_recording_microphone(), strict=True)

    def select_category(self, category_index: int) -> bool:
        return self._request_bool(commands.select_category(category_index), strict=True)

    def select_previous_category(self) -> bool:
        return self._request_bool(commands.select_previous_category())

    def select_next_category(self) -> bool:
        return self._request_bool(commands.select_next_category())

    def remove_category(self, category_index: int) -> bool:
        return self._request_bool(commands.remove_category(category_index), strict=True)

    def get_categories_xml(self, with_sounds: bool = False, with_icons: bool = False) -> str:
        return self._request_payload(commands.get_categories(with_sounds, with_icons))

    def get_categories(self, with_sounds: bool = False, with_icons: bool = False) -> list[Category]:
        return self._parse_categories(self.get_categories_xml(with_sounds, with_icons))

    def get_category_xml(self, category_index: int, with_sounds: bool = False, with_icons: bool = False) -> str:
        return self._request_payload(commands.get_category(category_index, with_sounds, with_icons))

    def get_category(
        self, category_index: int, with_sounds: bool = False, with_icons: bool = False
    ) -> Category | None:
        found = self._parse_categories(self.get_category_xml(category_index, with_sounds, with_icons))
        return found[0] if found else None

    # Remote control v1.1.1

    def play_sound_from_category(
        self,
        category_index: int,
        position: int,
        render_line: bool = True,
        capture_line: bool = True,
    ) -> bool:
        """Play the sound at ``position`` (1-based) of a category; -1 means the selected one."""
        command = commands.play_sound_from_category(category_index, position, render_line, capture_line)
        return self._request_bool(command, strict=True)

    def _exchange(self, command: str, *, cooldown: float = 0.0) -> str:
        try:
            return self._transport.send_request(command, cooldown=cooldown)
        except SoundpadError as exc:
            self._logger.debug("%s failed: %s", command, exc)
            return ""

    def _request_bool(self, command: str, *, strict: bool = False, cooldown: float = 0.0) -> bool:
        response = self._exchange(command, cooldown=cooldown)
        succeeded = response == SUCCESS if strict else is_success(response)
        if succeeded:
            return True
        self._report_response(response)
        return False

    def _request_int(self, command: str, *, default: int = -1) -> int:
        response = self._exchange(command)
        if classify_response(response) is not ResponseKind.PAYLOAD:
            self._report_response(response)
            return default
        try:
            return parse_int(response)
        except ProtocolError as exc:
            self._report("%s", exc)
            return default

    def _request_payload(self, command: str) -> str:
        response = self._exchange(command)
        if classify_response(response) is not ResponseKind.PAYLOAD:
            self._report_response(response)
        return response

    def _parse_categories(self, xml: str) -> list[Category]:
        if classify_response(xml) is not ResponseKind.PAYLOAD:
            return []
        try:
            return parse_categories(xml)
        except ProtocolError as exc:
            self._report("%s", exc)
            return []

    def _report_response(self, response: str) -> None:
        if not response:
            self._report("Remote control is offline.")
        else:
            self._report("Failed: %s", response)

    def _report(self, msg: str, *args: Any) -> None:
        if self.print_errors:
            self._diagnostics.warn(msg, *args)


__all__ = ["ClientOptions", "SoundpadClient"]
